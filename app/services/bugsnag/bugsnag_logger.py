import logging
import os

import bugsnag
import bugsnag.handlers
from bugsnag.asgi import BugsnagMiddleware
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

# request fields never sent to Bugsnag; "text" holds the user's document
FILTERED_PARAMS = ["text", "X-Request-ID"]


class BugsnagLogger:
    """
    BugsnagLogger reports translator service failures to Bugsnag.

    Unexpected exceptions and malformed request bodies are notified, ERROR level logs
    (for example a failed dictionary load logged by LogsHandler.with_logging) are forwarded,
    and the text being translated is filtered out of every report.
    """

    def __init__(self):
        """
        Read the Bugsnag API key, release stage and the disable switch from environment variables,
        and configure the bugsnag client when reporting is enabled.

        Raises:
            Exception: If BUGSNAG_API_KEY or BUGSNAG_RELEASE_STAGE is not set in the environment.
        """
        self.api_key = os.getenv("BUGSNAG_API_KEY")
        self.release_stage = os.getenv("BUGSNAG_RELEASE_STAGE")
        disabled = os.getenv("DISABLE_BUGSNAG_LOGGING", False)

        if not self.api_key:
            raise Exception("BUGSNAG_API_KEY is required")
        if not self.release_stage:
            raise Exception("BUGSNAG_RELEASE_STAGE is required")

        self.enabled = not disabled
        if self.enabled:
            self._configure_bugsnag()

    def _configure_bugsnag(self):
        """
        Configure the bugsnag client. FILTERED_PARAMS keeps the submitted text and the
        request id out of the metadata attached to each report.
        """
        bugsnag.configure(
            api_key=self.api_key,
            project_root=".",
            release_stage=self.release_stage,
            params_filters=FILTERED_PARAMS,
        )

    async def _catch_all_exception_handler(self, request: Request, exc: Exception) -> JSONResponse:
        bugsnag.notify(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )

    async def _not_found_exception_handler(self, request: Request, exc: Exception) -> JSONResponse:
        # unknown paths are client mistakes, so they are logged but not reported
        logger.info(f"404 error: {str(exc)}")
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"message": "Not found"},
        )

    async def _validation_exception_handler(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Reports request bodies that are missing or are not JSON objects, e.g. an empty POST to /api/translate.
        Missing or invalid translate fields are answered with 400 by the translation handlers instead.
        """
        bugsnag.notify(exc)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.errors()},
        )

    def _send_error_level_logs_to_bugsnag(self):
        """
        Attach a BugsnagHandler to the root logger so ERROR records from the service reach Bugsnag.
        """
        bugsnag_handler = bugsnag.handlers.BugsnagHandler()
        bugsnag_handler.setLevel(logging.ERROR)
        logging.getLogger().addHandler(bugsnag_handler)

    def setup_bugsnag(self, app: FastAPI):
        """
        Add the Bugsnag middleware and the 500, 404 and 422 exception handlers to the translator app,
        then start forwarding ERROR level logs.

        Args:
            app (FastAPI): The FastAPI app instance to which the middleware and handlers will be added.
        """
        app.add_middleware(BugsnagMiddleware)
        app.add_exception_handler(Exception, self._catch_all_exception_handler)
        app.add_exception_handler(404, self._not_found_exception_handler)
        app.add_exception_handler(RequestValidationError, self._validation_exception_handler)

        self._send_error_level_logs_to_bugsnag()
