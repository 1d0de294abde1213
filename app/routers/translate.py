# ruff: noqa: B008

from fastapi import APIRouter, Body, Depends, status

from app.api import ENDPOINTS
from app.app_types.translation import LocalesResponse, TranslateErrorResponse, TranslateRequest, TranslateResponse
from app.lib.logs_handler import translator_trace_sink
from app.lib.translation import translate_text
from app.services.translator import DictionaryProvider, Locale, Translator

router = APIRouter()


def get_translator() -> Translator:
    return Translator(DictionaryProvider.get(), trace=translator_trace_sink())


@router.post(
    ENDPOINTS.TRANSLATE,
    response_model=TranslateResponse,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_400_BAD_REQUEST: {"model": TranslateErrorResponse}},
)
async def translate(
    data: TranslateRequest = Body(...),
    translator: Translator = Depends(get_translator),
) -> TranslateResponse:
    """
    Translate text between American and British English. Every change is wrapped in
    `<span class="highlight">`; when nothing changes the translation is "Everything looks good to me!".
    """
    return await translate_text(translator, data)


@router.get(ENDPOINTS.TRANSLATE_LOCALES, response_model=LocalesResponse, status_code=status.HTTP_200_OK)
def get_locales() -> LocalesResponse:
    return LocalesResponse(locales=[locale.value for locale in Locale])
