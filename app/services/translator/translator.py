import re
from typing import Callable, List, Optional, Tuple, Union

from app.services.translator.dictionaries import TranslatorDictionaries
from app.services.translator.text_rules import (
    highlight,
    invert_mapping,
    preserve_case,
    time_pattern,
    title_pattern,
    word_pattern,
)
from app.services.translator.translator_types import (
    NO_DIFFERENCES_FOUND,
    InvalidDirectionError,
    InvalidInputError,
    Locale,
    RuleConfig,
    TranslationResult,
)

TraceSink = Callable[..., None]

# (text, highlighted) pairs; highlighted segments are never scanned again
Segment = Tuple[str, bool]

WORD_MATCHES_TRACED = 3


def _no_trace(event: str, **fields) -> None:
    return None


def parse_locale(locale: Union[Locale, str]) -> Locale:
    try:
        return Locale(locale)
    except (ValueError, TypeError) as e:
        raise InvalidDirectionError() from e


def _rewrite(
    segments: List[Segment],
    pattern: re.Pattern,
    replace: Callable[[re.Match], str],
) -> Tuple[List[Segment], int]:
    """
    Substitute every match of pattern in the plain segments.

    A segment edge behaves like a text boundary, which is what a highlight
    marker (starting with "<" and ending with ">") looks like to \\b.
    """
    rewritten: List[Segment] = []
    count = 0
    for text, highlighted in segments:
        if highlighted:
            rewritten.append((text, True))
            continue

        position = 0
        for match in pattern.finditer(text):
            if match.start() > position:
                rewritten.append((text[position : match.start()], False))
            rewritten.append((replace(match), True))
            position = match.end()
            count += 1

        if position < len(text):
            rewritten.append((text[position:], False))

    return rewritten, count


def _render(segments: List[Segment]) -> str:
    return "".join(highlight(text) if highlighted else text for text, highlighted in segments)


class Translator:
    """
    Converts text between American and British English.

    Three passes run in a fixed order: honorific titles, then words and
    phrases (longest key first), then times. Every substitution is wrapped
    in a highlight marker. The translator holds no state between calls.
    """

    def __init__(self, dictionaries: TranslatorDictionaries, trace: Optional[TraceSink] = None):
        self.dictionaries = dictionaries
        self._trace = trace or _no_trace

    def translate(self, text: str, locale: Union[Locale, str]) -> TranslationResult:
        """
        Translate text in the given direction.

        Args:
            text (str): The text to translate.
            locale (Locale | str): "american-to-british" or "british-to-american".

        Returns:
            TranslationResult: The original text and the highlighted translation, or
            NO_DIFFERENCES_FOUND when nothing was replaced.

        Raises:
            InvalidInputError: If text is not a string.
            InvalidDirectionError: If locale is not a supported direction.
        """
        if not isinstance(text, str):
            raise InvalidInputError()

        self._trace("translate_called", text=text, locale=locale)
        config = self.build_rule_config(locale)

        return self._translate(text, config)

    def build_rule_config(self, locale: Union[Locale, str]) -> RuleConfig:
        locale = parse_locale(locale)
        dictionaries = self.dictionaries

        if locale == Locale.AMERICAN_TO_BRITISH:
            config = RuleConfig(
                locale=locale,
                words={**dictionaries.american_to_british_spelling, **dictionaries.american_only},
                titles=dictionaries.american_to_british_titles,
                time_from=":",
                time_to=".",
            )
        else:
            config = RuleConfig(
                locale=locale,
                words={**invert_mapping(dictionaries.american_to_british_spelling), **dictionaries.british_only},
                titles=invert_mapping(dictionaries.american_to_british_titles),
                time_from=".",
                time_to=":",
            )

        self._trace("config_built", locale=locale.value, titles=len(config.titles), words=len(config.words))
        return config

    def _translate(self, text: str, config: RuleConfig) -> TranslationResult:
        segments: List[Segment] = [(text, False)]
        replacements = 0

        # 1) titles
        for source, target in config.titles.items():
            if not source:
                continue

            def replace_title(match: re.Match, target=target) -> str:
                replacement = preserve_case(match.group(0), target)
                self._trace("title_match", match=match.group(0), replacement=replacement)
                return replacement

            segments, count = _rewrite(segments, title_pattern(source), replace_title)
            if count:
                replacements += count
                self._trace("title_pass", source=source, target=target, count=count)

        # 2) words and phrases, longest first
        entries = sorted(config.words.items(), key=lambda entry: len(entry[0]), reverse=True)
        for source, target in entries:
            if not source:
                continue
            traced = 0

            def replace_word(match: re.Match, source=source, target=target) -> str:
                nonlocal traced
                replacement = preserve_case(match.group(0), target)
                traced += 1
                if traced <= WORD_MATCHES_TRACED:
                    self._trace("word_match", source=source, match=match.group(0), replacement=replacement)
                return replacement

            segments, count = _rewrite(segments, word_pattern(source), replace_word)
            if count:
                replacements += count
                self._trace("word_pass", source=source, target=target, count=count)

        # 3) times
        def replace_time(match: re.Match) -> str:
            replacement = f"{match.group(1)}{config.time_to}{match.group(2)}"
            self._trace("time_match", match=match.group(0), replacement=replacement)
            return replacement

        segments, count = _rewrite(segments, time_pattern(config.time_from), replace_time)
        if count:
            replacements += count
            self._trace("time_pass", count=count)

        result = TranslationResult(
            text=text,
            translation=_render(segments) if replacements else NO_DIFFERENCES_FOUND,
            replacements=replacements,
        )
        self._trace("result", translation=result.translation, replacements=replacements)
        return result
