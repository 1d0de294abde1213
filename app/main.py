import asyncio
from asyncio import exceptions
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, RedirectResponse

from app.api import ApiResponses
from app.config import IS_DEV, PORT, REQUEST_TIMEOUT_SECS, URL_HOSTNAME
from app.lib.logs_handler import Action, LogsHandler, logger, request_id_var
from app.lib.translation import TranslationRequestError
from app.routers import healthcheck, translate
from app.services.bugsnag import BUGSNAG_ENABLED, BugsnagLogger
from app.services.translator import DictionaryLoadError, DictionaryProvider, TranslatorError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan function that runs code before startup and on shutdown.

    Loads the translator dictionaries before the first request is served.

    Args:
        app (FastAPI): The FastAPI application instance

    Yields:
        None: Yields control to the main API code
    """
    dictionaries = await LogsHandler.with_logging(Action.LOAD_DICTIONARIES, DictionaryProvider.get)
    logger.info("Translator dictionaries loaded: %s", dictionaries.sizes())

    yield

    logger.info("Shutting down translator service")


app = FastAPI(title="American British Translator API", version="0.1.0", lifespan=lifespan)
app.openapi_version = "3.0.2"

# Configure CORS
if IS_DEV:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins in development
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
else:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[URL_HOSTNAME],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
# Setup Bugsnag logger
logger.info(f"BUGSNAG_ENABLED: {BUGSNAG_ENABLED}")
if BUGSNAG_ENABLED:
    bugsnag_logger = BugsnagLogger()
    bugsnag_logger.setup_bugsnag(app)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID")
    if request_id:
        request_id_var.set(request_id)

    response = await call_next(request)
    return response


@app.get("/robots.txt", response_class=PlainTextResponse)
def robots():
    """
    Returns robots.txt content to prevent web crawlers from indexing the API.

    Returns:
        str: robots.txt content disallowing all crawlers
    """
    return "User-agent: *\nDisallow: /"


@app.get("/", include_in_schema=False)
def root():
    """
    Redirects root URL to API documentation.

    Returns:
        RedirectResponse: Redirect to /docs endpoint
    """
    return RedirectResponse(url="/docs")


# Include routers
app.include_router(healthcheck.router, prefix="/healthcheck", tags=["Health Check"])
app.include_router(translate.router, prefix="/api", tags=["Translation"])


# exception handlers
@app.exception_handler(TranslationRequestError)
async def translation_request_exception_handler(request: Request, exc: TranslationRequestError):
    """
    Handles requests with missing or empty fields by returning a 400 response.

    Args:
        request (Request): The incoming request
        exc (TranslationRequestError): The request error

    Returns:
        JSONResponse: With 400 status code and the error message
    """
    return ApiResponses.bad_request(exc.message, "translation request")


@app.exception_handler(TranslatorError)
async def translator_exception_handler(request: Request, exc: TranslatorError):
    """
    Handles InvalidInputError and InvalidDirectionError raised by the Translator.

    Returns:
        JSONResponse: With 400 status code and the error message
    """
    return ApiResponses.bad_request(exc.message, "translation")


@app.exception_handler(DictionaryLoadError)
async def dictionary_exception_handler(request: Request, exc: DictionaryLoadError):
    return ApiResponses.error(exc, "loading translator dictionaries")


@app.middleware("http")
async def set_global_timeout(request: Request, call_next):
    try:
        response = await asyncio.wait_for(call_next(request), timeout=REQUEST_TIMEOUT_SECS)
        return response
    except exceptions.TimeoutError:
        return ApiResponses.timed_out()


def run():
    """Serve the API with uvicorn on PORT; `translator-api` and `python -m app.main` both call this."""
    uvicorn.run("app.main:app", host="0.0.0.0", port=PORT, reload=bool(IS_DEV))


if __name__ == "__main__":
    run()
