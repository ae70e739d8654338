"""Result structures for exploration steps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from quest.domain.enums import Command, Side
from quest.world.room_map import Room


class EngineState(StrEnum):
    AT_ROOM = "at_room"
    ENDED = "ended"


class StepOutcome(StrEnum):
    MOVED = "moved"
    NO_PATH = "no_path"
    INVALID = "invalid"
    IGNORED = "ignored"
    QUIT = "quit"
    INPUT_CLOSED = "input_closed"


@dataclass(frozen=True)
class RoomReport:
    room: Room
    clue: str
    is_new: bool


@dataclass(frozen=True)
class StepResult:
    outcome: StepOutcome
    room: Room
    command: Command | None = None
    side: Side | None = None
    report: RoomReport | None = None
    raw: str = ""

    @property
    def ended(self) -> bool:
        return self.outcome in (StepOutcome.QUIT, StepOutcome.INPUT_CLOSED)
