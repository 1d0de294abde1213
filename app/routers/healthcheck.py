from fastapi import APIRouter, status

from app.services.translator import DictionaryProvider

router = APIRouter()


@router.get("", status_code=status.HTTP_200_OK)
def get_health_check():
    return {"status": "fine", "dictionaries": DictionaryProvider.get().sizes()}
