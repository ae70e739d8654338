"""Shared enums for navigation and verdicts."""

from __future__ import annotations

from enum import StrEnum


class Side(StrEnum):
    LEFT = "left"
    RIGHT = "right"


class Command(StrEnum):
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"


class VerdictKind(StrEnum):
    GUILTY = "guilty"
    INSUFFICIENT = "insufficient"
