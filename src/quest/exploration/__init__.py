"""Exploration state machine and navigation commands."""

from .commands import parse_command
from .engine import ExplorationEngine
from .results import EngineState, RoomReport, StepOutcome, StepResult

__all__ = [
    "EngineState",
    "ExplorationEngine",
    "RoomReport",
    "StepOutcome",
    "StepResult",
    "parse_command",
]
