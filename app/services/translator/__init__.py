from .dictionaries import DictionaryLoadError, DictionaryProvider, TranslatorDictionaries, load_dictionaries
from .translator import Translator
from .translator_types import (
    NO_DIFFERENCES_FOUND,
    InvalidDirectionError,
    InvalidInputError,
    Locale,
    RuleConfig,
    TranslationResult,
    TranslatorError,
    TranslatorErrorType,
)

__all__ = [
    "DictionaryLoadError",
    "DictionaryProvider",
    "InvalidDirectionError",
    "InvalidInputError",
    "Locale",
    "NO_DIFFERENCES_FOUND",
    "RuleConfig",
    "TranslationResult",
    "Translator",
    "TranslatorDictionaries",
    "TranslatorError",
    "TranslatorErrorType",
    "load_dictionaries",
]
