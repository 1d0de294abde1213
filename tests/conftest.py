import logging
import os
from collections.abc import Generator
from typing import TypeVar

import pytest
from fastapi.testclient import TestClient

# read by app.services.bugsnag at import time, so it has to be set before the app is imported
os.environ["DISABLE_BUGSNAG_LOGGING"] = "True"

from app.api import ENDPOINTS  # noqa: E402
from app.main import app as app_under_test  # noqa: E402
from app.services.translator import DictionaryProvider, Translator, TranslatorDictionaries  # noqa: E402
from app.services.translator.dictionaries import bundled_dictionaries  # noqa: E402

logger = logging.getLogger(__name__)

T = TypeVar("T")

YieldFixture = Generator[T, None, None]
api = ENDPOINTS()


@pytest.fixture
def test_app():
    return app_under_test


@pytest.fixture
def test_client(test_app) -> YieldFixture[TestClient]:
    # entering the client runs the lifespan, which loads the dictionaries
    with TestClient(test_app) as client:
        yield client


@pytest.fixture
def reset_dictionary_provider():
    DictionaryProvider.reset()
    yield
    DictionaryProvider.reset()


@pytest.fixture
def translator() -> Translator:
    """Translator over the bundled dictionaries."""
    return Translator(bundled_dictionaries())


@pytest.fixture
def make_translator():
    """
    Builds a Translator over small hand-written dictionaries so a test controls
    exactly which rules exist.
    """

    def _make(american_only=None, spelling=None, titles=None, british_only=None, trace=None) -> Translator:
        dictionaries = TranslatorDictionaries(
            american_only=american_only or {},
            american_to_british_spelling=spelling or {},
            american_to_british_titles=titles or {},
            british_only=british_only or {},
        )
        return Translator(dictionaries, trace=trace)

    return _make
