from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType
from typing import Mapping, Optional

NO_DIFFERENCES_FOUND = "Everything looks good to me!"
HIGHLIGHT_TEMPLATE = '<span class="highlight">{}</span>'


class Locale(str, Enum):
    AMERICAN_TO_BRITISH = "american-to-british"
    BRITISH_TO_AMERICAN = "british-to-american"


class TranslatorErrorType(str, Enum):
    INVALID_INPUT = auto()
    INVALID_DIRECTION = auto()


class TranslatorError(Exception):
    """Base class for all translator exceptions."""

    def __init__(self, msg: str, error_type: Optional[TranslatorErrorType] = None):
        super().__init__(msg)
        self.message = msg
        self.error_type = error_type


class InvalidInputError(TranslatorError):
    def __init__(self, msg: str = "Invalid value for text field"):
        super().__init__(msg, TranslatorErrorType.INVALID_INPUT)


class InvalidDirectionError(TranslatorError):
    def __init__(self, msg: str = "Invalid value for locale field"):
        super().__init__(msg, TranslatorErrorType.INVALID_DIRECTION)


@dataclass(frozen=True)
class RuleConfig:
    """
    Rewrite rules for one translation direction.

    Built fresh for every call and only ever read while rewriting.
    """

    locale: Locale
    words: Mapping[str, str]
    titles: Mapping[str, str]
    time_from: str
    time_to: str

    def __post_init__(self):
        # freeze whatever mapping was handed in
        object.__setattr__(self, "words", MappingProxyType(dict(self.words)))
        object.__setattr__(self, "titles", MappingProxyType(dict(self.titles)))


@dataclass(frozen=True)
class TranslationResult:
    text: str
    translation: str
    replacements: int = 0

    @property
    def changed(self) -> bool:
        return self.replacements > 0

    def client_response(self) -> dict:
        return {"text": self.text, "translation": self.translation}
