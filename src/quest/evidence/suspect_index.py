"""Clue -> suspect lookup table with separate chaining."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from quest import config

_MASK64 = (1 << 64) - 1


def djb2(text: str) -> int:
    value = 5381
    for byte in text.encode("utf-8"):
        value = (value * 33 + byte) & _MASK64
    return value


@dataclass
class _Entry:
    clue: str
    suspect: str
    next: "_Entry | None" = None


class SuspectIndex:
    """Fixed bucket count; ``put`` on an existing clue overwrites its suspect."""

    def __init__(self, buckets: int = config.HASH_BUCKETS) -> None:
        if buckets <= 0:
            raise ValueError("bucket count must be positive")
        self._buckets: list[_Entry | None] = [None] * buckets
        self._size = 0

    @classmethod
    def from_pairs(
        cls, pairs: Iterable[tuple[str, str]], buckets: int = config.HASH_BUCKETS
    ) -> "SuspectIndex":
        index = cls(buckets)
        for clue, suspect in pairs:
            index.put(clue, suspect)
        return index

    @property
    def bucket_count(self) -> int:
        return len(self._buckets)

    def _slot(self, clue: str) -> int:
        return djb2(clue) % len(self._buckets)

    def _find(self, clue: str) -> _Entry | None:
        entry = self._buckets[self._slot(clue)]
        while entry is not None:
            if entry.clue == clue:
                return entry
            entry = entry.next
        return None

    def put(self, clue: str, suspect: str) -> None:
        existing = self._find(clue)
        if existing is not None:
            existing.suspect = suspect
            return
        slot = self._slot(clue)
        self._buckets[slot] = _Entry(clue=clue, suspect=suspect, next=self._buckets[slot])
        self._size += 1

    def get(self, clue: str) -> str | None:
        entry = self._find(clue)
        return entry.suspect if entry is not None else None

    def chain_length(self, clue: str) -> int:
        length = 0
        entry = self._buckets[self._slot(clue)]
        while entry is not None:
            length += 1
            entry = entry.next
        return length

    def items(self) -> Iterator[tuple[str, str]]:
        for head in self._buckets:
            entry = head
            while entry is not None:
                yield entry.clue, entry.suspect
                entry = entry.next

    def suspects(self) -> list[str]:
        return sorted({suspect for _, suspect in self.items()})

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self._find(clue) is not None

    def __len__(self) -> int:
        return self._size
