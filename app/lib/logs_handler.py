import asyncio
import contextvars
import logging
from enum import Enum, auto
from typing import Awaitable, Callable, Optional, TypeVar, Union

from app.config import DEBUG_TRANSLATOR

T = TypeVar("T")

# configure request-id context
request_id_var = contextvars.ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    def filter(self, record):
        # Add request_id from contextvar to the log record
        record.request_id = request_id_var.get()
        return True


# === Logging ===
logger = logging.getLogger()

for h in logger.handlers:
    h.addFilter(RequestIdFilter())

translator_logger = logging.getLogger("app.services.translator")


class Action(str, Enum):
    LOAD_DICTIONARIES = auto()
    TRANSLATE_TEXT = auto()


def translator_trace_sink(enabled: bool = DEBUG_TRANSLATOR) -> Optional[Callable[..., None]]:
    """
    Returns a trace sink for the Translator that writes each event to the translator logger,
    or None when tracing is disabled (the DEBUG_TRANSLATOR environment variable is not set).
    """
    if not enabled:
        return None

    # the root logger stays at WARNING unless the host configures it
    translator_logger.setLevel(logging.INFO)
    if not translator_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s [%(request_id)s] %(message)s"))
        handler.addFilter(RequestIdFilter())
        translator_logger.addHandler(handler)

    def trace(event: str, **fields) -> None:
        translator_logger.info("[Translator] %s %s", event, fields)

    return trace


class LogsHandler:
    logger = logger

    @staticmethod
    def error(error: Exception, task: str = "unamed task"):
        err_message = f"Error occurred during {task}: {error}"
        logger.error(err_message)

    @staticmethod
    async def with_logging(
        action: Action,
        callback: Union[Callable[..., T], Awaitable[T]],
    ) -> T:
        """
        Executes a given callable and logs if any error occurs. It supports both
        synchronous callables and awaitables.

        Parameters:
            action (Action): The action being executed, used for logging context.
            callback (Union[Callable[..., T], Awaitable[T]]):
                A callable or coroutine representing the action to execute.

        Returns:
            T: The result of the callback function.

        Raises:
            Exception: Any exception raised during the callback execution,
            re-raised after logging.
        """
        try:
            logger.info("Executing %s", action)
            if asyncio.iscoroutine(callback):
                return await callback

            return callback()
        except Exception:
            logger.error("Got error executing action %s", action)
            raise
