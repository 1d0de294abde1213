import logging
import os
from unittest.mock import patch

import bugsnag.handlers
import pytest
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError

from app.services.bugsnag import BugsnagLogger

pytestmark = [
    pytest.mark.general,
]

BUGSNAG_TEST_ENV = {
    "BUGSNAG_API_KEY": "test-api-key",
    "BUGSNAG_RELEASE_STAGE": "test",
    "DISABLE_BUGSNAG_LOGGING": "True",
}


@pytest.fixture
def bugsnag_logger():
    with patch.dict(os.environ, BUGSNAG_TEST_ENV):
        return BugsnagLogger()


def test_not_found_exception_handler(test_client):
    # Test with a non-existent endpoint
    response = test_client.get("/non-existent-endpoint")

    assert response.status_code == 404


def test_validation_error_for_missing_body(test_client):
    response = test_client.post("/api/translate")

    assert response.status_code == 422


async def test_catch_all_exception_handler(bugsnag_logger):
    request = Request(scope={"type": "http"})
    exc = Exception("Test exception")

    with patch("bugsnag.notify") as mock_notify:
        response = await bugsnag_logger._catch_all_exception_handler(request, exc)

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.body == b'{"message":"Internal server error"}'
    mock_notify.assert_called_once_with(exc)


async def test_not_found_handler_does_not_notify(bugsnag_logger):
    request = Request(scope={"type": "http"})

    with patch("bugsnag.notify") as mock_notify:
        response = await bugsnag_logger._not_found_exception_handler(request, Exception("missing"))

    assert response.status_code == status.HTTP_404_NOT_FOUND
    mock_notify.assert_not_called()


async def test_validation_exception_handler(bugsnag_logger):
    request = Request(scope={"type": "http"})
    exc = RequestValidationError(
        errors=[{"loc": ("body", "text"), "msg": "field required", "type": "value_error.missing"}],
    )

    with patch("bugsnag.notify") as mock_notify:
        response = await bugsnag_logger._validation_exception_handler(request, exc)

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert "detail" in response.body.decode()
    mock_notify.assert_called_once_with(exc)


def test_bugsnag_configured_with_text_filtered():
    env = {**BUGSNAG_TEST_ENV, "DISABLE_BUGSNAG_LOGGING": ""}
    with patch.dict(os.environ, env), patch("bugsnag.configure") as mock_configure:
        bugsnag_logger = BugsnagLogger()

    assert bugsnag_logger.enabled
    assert "text" in mock_configure.call_args.kwargs["params_filters"]


def test_bugsnag_logger_initialization_without_api_key():
    with pytest.raises(Exception, match="BUGSNAG_API_KEY is required"):
        with patch.dict(os.environ, {"BUGSNAG_API_KEY": "", "BUGSNAG_RELEASE_STAGE": "test"}):
            BugsnagLogger()


def test_bugsnag_logger_initialization_without_release_stage():
    with pytest.raises(Exception, match="BUGSNAG_RELEASE_STAGE is required"):
        with patch.dict(os.environ, {"BUGSNAG_API_KEY": "test-api-key", "BUGSNAG_RELEASE_STAGE": ""}):
            BugsnagLogger()


def test_bugsnag_logger_disabled(bugsnag_logger):
    assert not bugsnag_logger.enabled


def test_error_logs_do_not_fail_without_bugsnag():
    logging.getLogger().error("Test error")


def test_setup_bugsnag_forwards_error_logs(bugsnag_logger):
    app = FastAPI()
    root_logger = logging.getLogger()
    handlers_before = list(root_logger.handlers)

    bugsnag_logger.setup_bugsnag(app)

    added = [h for h in root_logger.handlers if h not in handlers_before]
    try:
        assert len(added) == 1
        assert isinstance(added[0], bugsnag.handlers.BugsnagHandler)
        assert added[0].level == logging.ERROR
        assert RequestValidationError in app.exception_handlers
    finally:
        for handler in added:
            root_logger.removeHandler(handler)


def test_bugsnag_disabled_for_test_app():
    from app.services import bugsnag as bugsnag_service

    assert not bugsnag_service.BUGSNAG_ENABLED
