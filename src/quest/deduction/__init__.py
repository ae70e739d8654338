"""Verdict evaluation."""

from .verdict import Verdict, evaluate_accusation, normalize_accusation, tally_suspects

__all__ = [
    "Verdict",
    "evaluate_accusation",
    "normalize_accusation",
    "tally_suspects",
]
