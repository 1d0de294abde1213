import os
from typing import Union

from dotenv import load_dotenv


def load_environment_variables():
    if os.path.exists("../.env"):
        load_dotenv("../.env")


def env_variable(name: str, default=None) -> Union[str, bool]:
    value = os.getenv(name, default)
    if value and str(value).lower() == "false":
        return False
    if value and str(value).lower() == "true":
        return True
    return value


load_environment_variables()

IS_DEV = env_variable("IS_DEV")
PORT = int(os.getenv("PORT", "5312"))
URL_HOSTNAME = os.getenv("URL_HOSTNAME", f"http://localhost:{PORT}")

REQUEST_TIMEOUT_SECS = int(os.getenv("REQUEST_TIMEOUT_SECS", "120"))

# Translator
DEBUG_TRANSLATOR = bool(env_variable("DEBUG_TRANSLATOR", False))
TRANSLATOR_DICTIONARY_DIR = os.getenv("TRANSLATOR_DICTIONARY_DIR")
