import logging

import pytest

from app.api import ENDPOINTS
from app.services.translator import NO_DIFFERENCES_FOUND

api = ENDPOINTS()
logger = logging.getLogger(__name__)

pytestmark = [
    pytest.mark.end_to_end,
]


def post_translate(test_client, payload):
    response = test_client.post(api.translate(), json=payload)
    logger.debug(f"translate response: {response.status_code} {response.text}")
    return response


def test_translate_american_to_british(test_client):
    text = "Mangoes are my favorite fruit."
    response = post_translate(test_client, {"text": text, "locale": "american-to-british"})

    assert response.status_code == 200
    assert response.json() == {
        "text": text,
        "translation": 'Mangoes are my <span class="highlight">favourite</span> fruit.',
    }


def test_translate_british_to_american(test_client):
    text = "Tea time is usually around 4 or 4.30."
    response = post_translate(test_client, {"text": text, "locale": "british-to-american"})

    assert response.status_code == 200
    assert response.json()["translation"] == 'Tea time is usually around 4 or <span class="highlight">4:30</span>.'


def test_translate_nothing_to_change(test_client):
    text = "SaintPeter and nhcarrigan give their regards!"
    response = post_translate(test_client, {"text": text, "locale": "british-to-american"})

    assert response.status_code == 200
    assert response.json() == {"text": text, "translation": NO_DIFFERENCES_FOUND}


@pytest.mark.parametrize(
    "payload, error",
    [
        ({"locale": "american-to-british"}, "Required field(s) missing"),
        ({"text": "Mangoes are my favorite fruit."}, "Required field(s) missing"),
        ({}, "Required field(s) missing"),
        ({"text": "", "locale": "american-to-british"}, "No text to translate"),
        ({"text": "Mangoes are my favorite fruit.", "locale": "french-to-german"}, "Invalid value for locale field"),
        ({"text": 42, "locale": "american-to-british"}, "Invalid value for text field"),
    ],
)
def test_translate_rejected(test_client, payload, error):
    response = post_translate(test_client, payload)

    assert response.status_code == 400
    assert response.json() == {"status": "failed", "error": error}


def test_empty_text_checked_before_locale(test_client):
    response = post_translate(test_client, {"text": "", "locale": "french-to-german"})

    assert response.json()["error"] == "No text to translate"


def test_translate_locales(test_client):
    response = test_client.get(api.translate_locales())

    assert response.status_code == 200
    assert response.json() == {"locales": ["american-to-british", "british-to-american"]}


def test_request_id_header_is_accepted(test_client):
    response = test_client.post(
        api.translate(),
        json={"text": "Lunch is at 12:15 today.", "locale": "american-to-british"},
        headers={"X-Request-ID": "test-request-id"},
    )

    assert response.status_code == 200


def test_healthcheck(test_client):
    response = test_client.get("/healthcheck")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "fine"
    assert body["dictionaries"]["american_to_british_titles"] > 0


def test_robots(test_client):
    response = test_client.get("/robots.txt")

    assert response.status_code == 200
    assert response.text == "User-agent: *\nDisallow: /"


def test_root_redirects_to_docs(test_client):
    response = test_client.get("/", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/docs"
