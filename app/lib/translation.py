from fastapi.concurrency import run_in_threadpool

from app.app_types.translation import TranslateRequest, TranslateResponse
from app.lib.error_messages import ErrorMessages
from app.lib.logs_handler import Action, LogsHandler, logger
from app.services.translator import Translator


class TranslationRequestError(Exception):
    """Raised when a translation request is missing required fields."""

    def __init__(self, msg: str):
        super().__init__(msg)
        self.message = msg


def check_translate_request(data: TranslateRequest):
    """
    Applies the request field checks in order: both fields present, then text not empty.
    The locale value and the text type are checked by the Translator itself.
    """
    if data.text is None or data.locale is None:
        raise TranslationRequestError(ErrorMessages.REQUIRED_FIELDS_MISSING)

    if data.text == "":
        raise TranslationRequestError(ErrorMessages.NO_TEXT_TO_TRANSLATE)


async def translate_text(translator: Translator, data: TranslateRequest) -> TranslateResponse:
    check_translate_request(data)

    result = await LogsHandler.with_logging(
        Action.TRANSLATE_TEXT,
        run_in_threadpool(translator.translate, data.text, data.locale),
    )
    logger.info("Translation finished for locale %s with %s replacements", data.locale, result.replacements)

    return TranslateResponse(**result.client_response())
