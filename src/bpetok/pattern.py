"""Pre-tokenization of raw text into coarse segments."""

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Final

import regex as re

from .errors import PatternError, TokenizationError

log = logging.getLogger(__name__)


class SegmentClass(str, Enum):
    """
    Segment classes of the GPT-2 split pattern, in match priority order.

    Source: https://github.com/openai/tiktoken/blob/main/tiktoken_ext/openai_public.py
    """

    CONTRACTION = r"'(?:s|t|re|ve|m|ll|d)"
    LETTERS = r" ?\p{L}+"
    DIGITS = r" ?\p{N}+"
    SYMBOLS = r" ?[^\s\p{L}\p{N}]+"
    # whitespace that leaves its last character to lead the next word
    TRAILING_WHITESPACE = r"\s+(?!\S)"
    WHITESPACE = r"\s+"

    @classmethod
    def get(cls, name: str) -> "SegmentClass":
        """Get a segment class by name (case-insensitive)."""
        try:
            return cls[name.upper().replace("-", "_")]
        except KeyError:
            raise PatternError(
                f"Unknown segment class: {name!r}. "
                f"Valid classes: {', '.join(seg.name for seg in cls)}"
            )


DEFAULT_SEGMENT_CLASSES: Final[tuple[SegmentClass, ...]] = tuple(SegmentClass)


class PreTokenizer:
    """
    Splits text into segments using an ordered list of segment matchers.

    At every scan position the classes are tried in order and the first one
    that matches wins; each class consumes its longest run. The produced
    segments cover the input exactly.
    """

    def __init__(
        self, classes: Iterable[SegmentClass | str] = DEFAULT_SEGMENT_CLASSES
    ) -> None:
        self.classes: tuple[SegmentClass, ...] = tuple(
            seg if isinstance(seg, SegmentClass) else SegmentClass.get(seg)
            for seg in classes
        )
        if not self.classes:
            raise PatternError("at least one segment class is required")
        self._matchers: list[tuple[SegmentClass, re.Pattern[str]]] = [
            (seg, _compile_pattern(seg.value)) for seg in self.classes
        ]

    def iter_segments(self, text: str) -> Iterator[tuple[SegmentClass, str]]:
        """
        Yield ``(segment class, segment)`` pairs left to right.

        :raises TokenizationError: If no class matches at some position. The
            default class set matches every character, so this only happens
            with a reduced set of classes.
        """
        pos = 0
        while pos < len(text):
            for seg_class, matcher in self._matchers:
                m = matcher.match(text, pos)
                # every class consumes at least one character
                if m is not None and m.end() > pos:
                    yield seg_class, m.group(0)
                    pos = m.end()
                    break
            else:
                raise TokenizationError(
                    "no segment class matches", position=pos, input_text=text
                )

    def segment(self, text: str) -> list[str]:
        """Split ``text`` into pre-tokenization segments."""
        return [seg for _, seg in self.iter_segments(text)]


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile and validate a regex pattern.

    :param pattern: Regex pattern string to compile.
    :return: Compiled regex pattern.
    :raises PatternError: If pattern is invalid.
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError("invalid regex pattern", pattern=pattern, regex_err=e)


__all__ = ["SegmentClass", "DEFAULT_SEGMENT_CLASSES", "PreTokenizer"]
