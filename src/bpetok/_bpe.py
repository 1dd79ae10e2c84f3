"""
Core Byte Pair Encoding (BPE) operations.
"""

import logging

from .merges import MergeTable
from .types import MergePair, Symbol

log = logging.getLogger(__name__)


class BPECache:
    """
    Memo of merged chunks for one encoding session.

    Maps a byte-remapped chunk to its space-joined symbol sequence. A cache
    belongs to a single ``encode`` call at a time; share one between threads
    only with external locking.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def get(self, chunk: str) -> str | None:
        return self._entries.get(chunk)

    def put(self, chunk: str, merged: str) -> None:
        self._entries[chunk] = merged

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, chunk: object) -> bool:
        return chunk in self._entries


def get_pairs(symbols: list[Symbol]) -> set[MergePair]:
    """Return the set of adjacent symbol pairs."""
    return set(zip(symbols, symbols[1:]))


def merge_pair(symbols: list[Symbol], target: MergePair) -> list[Symbol]:
    """
    Replace every occurrence of ``target`` with the concatenated symbol.

    Occurrences are found left to right and never overlap, so ``a a a`` merged
    on ``(a, a)`` gives ``aa a``.
    """
    merged: list[Symbol] = []

    i = 0
    while i < len(symbols):
        # check if we can form a pair and it matches the target
        if (
            i < len(symbols) - 1
            and symbols[i] == target[0]
            and symbols[i + 1] == target[1]
        ):
            merged.append(symbols[i] + symbols[i + 1])
            i += 2
        else:
            merged.append(symbols[i])
            i += 1

    return merged


class BPEEngine:
    """Applies ranked merge rules to byte-remapped chunks."""

    def __init__(self, merges: MergeTable) -> None:
        self.merges = merges

    def merge(self, chunk: str, cache: BPECache | None = None) -> str:
        """
        Merge ``chunk`` down to its final symbols.

        The chunk starts as one symbol per unicode character. The adjacent
        pair with the lowest rank is merged everywhere it occurs until no
        ranked pair remains or a single symbol is left.

        :param chunk: Byte-remapped text; contains no spaces.
        :param cache: Session cache to read from and populate.
        :returns: Final symbols joined by single spaces. An empty chunk gives
            an empty string.
        """
        if not chunk:
            return ""

        if cache is not None:
            hit = cache.get(chunk)
            if hit is not None:
                return hit

        symbols = list(chunk)
        while len(symbols) > 1:
            target = self.merges.best_pair(get_pairs(symbols))
            if target is None:
                break
            symbols = merge_pair(symbols, target)

        merged = " ".join(symbols)
        if cache is not None:
            cache.put(chunk, merged)
        return merged


__all__ = ["BPECache", "BPEEngine", "get_pairs", "merge_pair"]
