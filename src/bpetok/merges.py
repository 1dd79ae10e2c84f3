"""Ordered merge rules exposed as a rank lookup."""

import logging
from collections.abc import Iterable, Iterator

from .types import MergePair, Symbol

log = logging.getLogger(__name__)


class MergeTable:
    """
    Merge rules keyed by symbol pair.

    The rank of a pair is its position in load order; lower ranks are merged
    first. A pair listed more than once keeps the rank of its last listing.
    """

    def __init__(self, pairs: Iterable[MergePair] = ()) -> None:
        self._pairs: list[MergePair] = []
        self._ranks: dict[MergePair, int] = {}
        for left, right in pairs:
            self._append((left, right))

    @classmethod
    def from_entries(cls, entries: Iterable[object]) -> "MergeTable":
        """
        Build a table from raw artifact entries.

        An entry is either a two element list of strings or a single string
        split at its first space. Malformed entries are skipped and do not
        take up a rank.
        """
        table = cls()
        skipped = 0
        for idx, entry in enumerate(entries):
            pair = parse_merge_entry(entry)
            if pair is None:
                log.warning(f"skipping malformed merge entry {idx}: {entry!r}")
                skipped += 1
                continue
            table._append(pair)

        if skipped:
            log.warning(f"skipped {skipped} malformed merge entries")
        log.debug(f"loaded {len(table)} merge rules")
        return table

    def _append(self, pair: MergePair) -> None:
        if pair in self._ranks:
            log.debug(f"merge {pair} listed more than once, keeping last rank")
        self._ranks[pair] = len(self._pairs)
        self._pairs.append(pair)

    def rank_of(self, left: Symbol, right: Symbol) -> int | None:
        """Return the rank of ``(left, right)``, or ``None`` if it never merges."""
        return self._ranks.get((left, right))

    def best_pair(self, pairs: Iterable[MergePair]) -> MergePair | None:
        """Return the pair with the lowest rank, ignoring pairs without one."""
        best: MergePair | None = None
        best_rank = -1
        for pair in pairs:
            rank = self._ranks.get(pair)
            if rank is not None and (best is None or rank < best_rank):
                best, best_rank = pair, rank
        return best

    def __len__(self) -> int:
        return len(self._pairs)

    def __contains__(self, pair: object) -> bool:
        return pair in self._ranks

    def __iter__(self) -> Iterator[MergePair]:
        return iter(self._pairs)


def parse_merge_entry(entry: object) -> MergePair | None:
    """Parse one artifact merge entry, returning ``None`` when malformed."""
    if isinstance(entry, str):
        left, sep, right = entry.partition(" ")
        if not sep:
            return None
        return left, right

    if isinstance(entry, (list, tuple)) and len(entry) == 2:
        left, right = entry
        if isinstance(left, str) and isinstance(right, str):
            return left, right

    return None


__all__ = ["MergeTable", "parse_merge_entry"]
