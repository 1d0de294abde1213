import re
from types import MappingProxyType
from typing import Mapping

from app.services.translator.translator_types import HIGHLIGHT_TEMPLATE

# Case shapes of a matched source term
CAPITALISED_PATTERN = re.compile(r"^[A-Z][a-z]")
UPPERCASE_PATTERN = re.compile(r"^[A-Z]+$")


def preserve_case(source: str, replacement: str) -> str:
    """
    Shape the replacement after the casing of the matched source text.

    "Mom" -> "Mum", "MOM" -> "MUM", anything else keeps the stored casing.
    """
    if CAPITALISED_PATTERN.match(source):
        return replacement[:1].upper() + replacement[1:]
    if UPPERCASE_PATTERN.match(source):
        return replacement.upper()
    return replacement


def invert_mapping(mapping: Mapping[str, str]) -> Mapping[str, str]:
    """Swap keys and values, returning a new read-only mapping."""
    return MappingProxyType({value: key for key, value in mapping.items()})


def title_pattern(title: str) -> re.Pattern:
    # titles may end in "." so \b cannot be used on the right hand side
    return re.compile(r"(?<!\w)" + re.escape(title) + r"(?!\w)", re.IGNORECASE)


def word_pattern(word: str) -> re.Pattern:
    # ASCII word boundaries: accented letters count as non-word characters
    return re.compile(r"\b" + re.escape(word) + r"\b", re.IGNORECASE | re.ASCII)


def time_pattern(separator: str) -> re.Pattern:
    return re.compile(r"\b([0-1]?[0-9]|2[0-3])" + re.escape(separator) + r"([0-5][0-9])\b", re.ASCII)


def highlight(text: str) -> str:
    return HIGHLIGHT_TEMPLATE.format(text)
