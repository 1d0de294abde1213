"""
A script to translate text with a running translator service.

This script:
1. Reads text from the command line or from a file
2. Sends it to the /api/translate endpoint with the chosen locale
3. Prints the highlighted translation, or the error returned by the API

Prerequisites:
- Start the API locally or point TRANSLATOR_API_URL at the target environment
- Run as: python3 scripts/translate/translate_text.py "My favorite color" --locale american-to-british
"""

##########################################################################
### Setup

import argparse
import logging
import os
import sys

import requests
from dotenv import load_dotenv

# Load environment variables from .env file, overwriting if needed
load_dotenv(override=True)

# The base URL for the API. We use this to send requests to the API.
base_url = os.getenv("TRANSLATOR_API_URL", "http://localhost:5312")

LOCALES = ["american-to-british", "british-to-american"]

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

##########################################################################
### Function definitions


def translate(text: str, locale: str, timeout: int = 30) -> dict:
    """
    Send text to the translator API.

    Args:
        text (str): The text to translate.
        locale (str): "american-to-british" or "british-to-american".
        timeout (int): Request timeout in seconds.

    Returns:
        dict: The JSON body returned by the API.
    """
    url = f"{base_url}/api/translate"
    logger.debug("POST %s", url)
    response = requests.post(url, json={"text": text, "locale": locale}, timeout=timeout)

    if response.status_code not in (200, 400):
        response.raise_for_status()

    return response.json()


def create_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate text between American and British English")
    parser.add_argument("text", nargs="?", help="Text to translate (omit when using --file)")
    parser.add_argument("--file", help="Read the text to translate from this file")
    parser.add_argument("--locale", choices=LOCALES, default="american-to-british", help="Translation direction")
    return parser


##########################################################################
### Run


def main():
    args = create_cli_parser().parse_args()

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            text = f.read()
    else:
        text = args.text

    if not text:
        logger.error("No text provided")
        sys.exit(1)

    body = translate(text, args.locale)
    if "error" in body:
        logger.error("Translation failed: %s", body["error"])
        sys.exit(1)

    print(body["translation"])


if __name__ == "__main__":
    main()
