import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from app.config import TRANSLATOR_DICTIONARY_DIR

from .american_only import AMERICAN_ONLY
from .american_to_british_spelling import AMERICAN_TO_BRITISH_SPELLING
from .american_to_british_titles import AMERICAN_TO_BRITISH_TITLES
from .british_only import BRITISH_ONLY

logger = logging.getLogger(__name__)

DICTIONARY_FILES = {
    "american_only": "american_only.json",
    "american_to_british_spelling": "american_to_british_spelling.json",
    "american_to_british_titles": "american_to_british_titles.json",
    "british_only": "british_only.json",
}


class DictionaryLoadError(Exception):
    """Raised when dictionary data cannot be read."""


@dataclass(frozen=True)
class TranslatorDictionaries:
    """
    The four read-only mappings the translator works from.

    Only the American to British direction of the spelling and title pairs is
    stored; the translator inverts them for British to American.
    """

    american_only: Mapping[str, str]
    american_to_british_spelling: Mapping[str, str]
    american_to_british_titles: Mapping[str, str]
    british_only: Mapping[str, str]

    def __post_init__(self):
        for name in DICTIONARY_FILES:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    def sizes(self) -> dict:
        return {name: len(getattr(self, name)) for name in DICTIONARY_FILES}


def bundled_dictionaries() -> TranslatorDictionaries:
    return TranslatorDictionaries(
        american_only=AMERICAN_ONLY,
        american_to_british_spelling=AMERICAN_TO_BRITISH_SPELLING,
        american_to_british_titles=AMERICAN_TO_BRITISH_TITLES,
        british_only=BRITISH_ONLY,
    )


def _read_mapping(path: Path) -> dict:
    if not path.is_file():
        raise DictionaryLoadError(f"Dictionary file '{path}' not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise DictionaryLoadError(f"Dictionary file '{path}' could not be read: {e}") from e

    if not isinstance(data, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in data.items()):
        raise DictionaryLoadError(f"Dictionary file '{path}' must be a JSON object of strings")

    return {key.lower(): value for key, value in data.items()}


def load_dictionaries(directory: Union[str, Path]) -> TranslatorDictionaries:
    """
    Load the four dictionaries from JSON files in a directory.

    Args:
        directory (str | Path): Folder holding american_only.json, american_to_british_spelling.json,
            american_to_british_titles.json and british_only.json.

    Returns:
        TranslatorDictionaries: The loaded mappings, keys lowercased.

    Raises:
        DictionaryLoadError: If a file is missing or is not a JSON object of strings.
    """
    directory = Path(directory)
    mappings = {name: _read_mapping(directory / filename) for name, filename in DICTIONARY_FILES.items()}
    logger.info("Loaded translator dictionaries from %s", directory)

    return TranslatorDictionaries(**mappings)


class DictionaryProvider:
    """
    Provides a single instance of TranslatorDictionaries.
    It loads the dictionaries on first call and returns the same instance on subsequent calls
    """

    __dictionaries: Optional[TranslatorDictionaries] = None

    @classmethod
    def get(cls) -> TranslatorDictionaries:
        if cls.__dictionaries is None:
            if TRANSLATOR_DICTIONARY_DIR:
                cls.__dictionaries = load_dictionaries(TRANSLATOR_DICTIONARY_DIR)
            else:
                cls.__dictionaries = bundled_dictionaries()

        return cls.__dictionaries

    @classmethod
    def reset(cls):
        cls.__dictionaries = None
