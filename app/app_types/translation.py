from typing import Any, List, Optional

from pydantic import BaseModel, Field


class TranslateRequest(BaseModel):
    # left untyped so a missing or non-string value reaches the field checks
    text: Optional[Any] = Field(default=None, description="The text to translate.")
    locale: Optional[Any] = Field(
        default=None,
        description="Translation direction: `american-to-british` or `british-to-american`.",
    )


class TranslateResponse(BaseModel):
    text: str
    translation: str


class TranslateErrorResponse(BaseModel):
    status: str = "failed"
    error: str


class LocalesResponse(BaseModel):
    locales: List[str]
