"""Accusation checks against collected clues."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from quest import config
from quest.domain.enums import VerdictKind
from quest.domain.errors import InvalidAccusationError
from quest.evidence.suspect_index import SuspectIndex


@dataclass(frozen=True)
class Verdict:
    accused: str
    count: int
    kind: VerdictKind
    matched_clues: list[str] = field(default_factory=list)
    unlinked_clues: list[str] = field(default_factory=list)

    @property
    def is_guilty(self) -> bool:
        return self.kind == VerdictKind.GUILTY


def normalize_accusation(raw: str | None) -> str:
    if raw is None:
        raise InvalidAccusationError("Accusation could not be read")
    accused = raw.rstrip("\r\n")
    if not accused:
        raise InvalidAccusationError("No name given")
    return accused


def evaluate_accusation(
    clues: Iterable[str],
    index: SuspectIndex,
    accused_raw: str | None,
    threshold: int = config.GUILTY_THRESHOLD,
) -> Verdict:
    accused = normalize_accusation(accused_raw)
    matched: list[str] = []
    unlinked: list[str] = []
    for clue in clues:
        suspect = index.get(clue)
        if suspect is None:
            unlinked.append(clue)
        elif suspect == accused:
            matched.append(clue)
    kind = VerdictKind.GUILTY if len(matched) >= threshold else VerdictKind.INSUFFICIENT
    return Verdict(
        accused=accused,
        count=len(matched),
        kind=kind,
        matched_clues=matched,
        unlinked_clues=unlinked,
    )


def tally_suspects(clues: Iterable[str], index: SuspectIndex) -> dict[str, int]:
    counts: dict[str, int] = {}
    for clue in clues:
        suspect = index.get(clue)
        if suspect is not None:
            counts[suspect] = counts.get(suspect, 0) + 1
    return counts
