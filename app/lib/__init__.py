from .error_messages import ErrorMessages
from .logs_handler import Action, LogsHandler, logger, translator_trace_sink

__all__ = ["Action", "ErrorMessages", "LogsHandler", "logger", "translator_trace_sink"]
