from .translation import LocalesResponse, TranslateErrorResponse, TranslateRequest, TranslateResponse

__all__ = ["LocalesResponse", "TranslateErrorResponse", "TranslateRequest", "TranslateResponse"]
