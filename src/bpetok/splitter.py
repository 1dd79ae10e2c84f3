"""Splits text around added tokens before any pre-tokenization."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """A piece of input text, either an added token or ordinary text."""

    text: str
    is_special: bool = False


def split_added_tokens(text: str, added_tokens: Iterable[str]) -> list[Segment]:
    """
    Split ``text`` at every literal occurrence of the added tokens.

    Added tokens are applied one at a time, longest first, so a token that is
    a substring of a longer one never pre-empts it. Each pass splits the
    ordinary segments left to right at non-overlapping occurrences; segments
    matched by an earlier pass are left untouched. Equal length tokens are
    applied in lexicographic order.

    :param text: Raw input text.
    :param added_tokens: Added token strings.
    :returns: Segments in text order. Empty pieces are not emitted.
    """
    if not text:
        return []

    segments = [Segment(text)]
    for token in sorted(set(added_tokens), key=lambda t: (-len(t), t)):
        if not token:
            log.warning("ignoring empty added token")
            continue

        split: list[Segment] = []
        for segment in segments:
            if segment.is_special or token not in segment.text:
                split.append(segment)
                continue
            # str.split scans left to right without overlaps
            for idx, piece in enumerate(segment.text.split(token)):
                if idx:
                    split.append(Segment(token, is_special=True))
                if piece:
                    split.append(Segment(piece))
        segments = split

    return segments


__all__ = ["Segment", "split_added_tokens"]
