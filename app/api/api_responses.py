from fastapi import status
from fastapi.responses import JSONResponse

from app.lib.error_messages import ErrorMessages
from app.lib.logs_handler import LogsHandler, logger


class ApiResponses:
    @staticmethod
    def error(e: Exception, task: str):
        LogsHandler.error(e, task)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "failed",
                "error": ErrorMessages.default(task, e),
            },
        )

    @staticmethod
    def bad_request(message: str, task: str):
        logger.info("Rejected %s: %s", task, message)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"status": "failed", "error": message},
        )

    @staticmethod
    def timed_out():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "failed",
                "error_code": "REQUEST_TIMED_OUT",
                "status_message": ErrorMessages.REQUEST_TIMED_OUT,
            },
        )
