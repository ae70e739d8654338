"""Collected clues and the clue/suspect index."""

from .clue_set import ClueSet
from .suspect_index import SuspectIndex, djb2

__all__ = [
    "ClueSet",
    "SuspectIndex",
    "djb2",
]
