"""Stateful walk over the room map that fills the clue set."""

from __future__ import annotations

import logging

from quest.domain.enums import Command, Side
from quest.evidence.clue_set import ClueSet
from quest.exploration.commands import parse_command
from quest.exploration.results import (
    EngineState,
    RoomReport,
    StepOutcome,
    StepResult,
)
from quest.world.room_map import Room, RoomMap

logger = logging.getLogger(__name__)

_SIDES = {Command.LEFT: Side.LEFT, Command.RIGHT: Side.RIGHT}


class ExplorationEngine:
    """Two states: AT_ROOM(current) and ENDED.

    The root is entered by an explicit ``enter()`` or, failing that, by the
    first command; every successful move enters the new room itself and
    returns its report in the step result.
    """

    def __init__(self, room_map: RoomMap, clues: ClueSet | None = None) -> None:
        self.room_map = room_map
        self.clues = clues if clues is not None else ClueSet()
        self.current: Room = room_map.root
        self.state = EngineState.AT_ROOM
        self.path: list[str] = []
        self._entered = False

    @property
    def ended(self) -> bool:
        return self.state == EngineState.ENDED

    def enter(self) -> RoomReport:
        self._require_active()
        self._entered = True
        room = self.current
        self.path.append(room.name)
        is_new = self.clues.insert(room.clue) if room.has_clue else False
        logger.debug("Entered %s (clue=%r, new=%s)", room.name, room.clue, is_new)
        return RoomReport(room=room, clue=room.clue, is_new=is_new)

    def handle(self, line: str) -> StepResult:
        self._require_active()
        self._ensure_entered()
        if not line.strip():
            return StepResult(outcome=StepOutcome.IGNORED, room=self.current, raw=line)
        command = parse_command(line)
        if command is None:
            logger.debug("Invalid command %r in %s", line, self.current.name)
            return StepResult(outcome=StepOutcome.INVALID, room=self.current, raw=line)
        if command == Command.QUIT:
            self.state = EngineState.ENDED
            logger.info("Exploration ended by player in %s", self.current.name)
            return StepResult(
                outcome=StepOutcome.QUIT, room=self.current, command=command, raw=line
            )
        return self.move(_SIDES[command], command=command, raw=line)

    def move(self, side: Side, command: Command | None = None, raw: str = "") -> StepResult:
        self._require_active()
        self._ensure_entered()
        child = self.room_map.child(self.current.name, side)
        if child is None:
            return StepResult(
                outcome=StepOutcome.NO_PATH,
                room=self.current,
                command=command,
                side=side,
                raw=raw,
            )
        self.current = child
        report = self.enter()
        return StepResult(
            outcome=StepOutcome.MOVED,
            room=child,
            command=command,
            side=side,
            report=report,
            raw=raw,
        )

    def end_of_input(self) -> StepResult:
        self._require_active()
        self._ensure_entered()
        self.state = EngineState.ENDED
        logger.info("Command input closed in %s", self.current.name)
        return StepResult(outcome=StepOutcome.INPUT_CLOSED, room=self.current)

    def _ensure_entered(self) -> None:
        if not self._entered:
            self.enter()

    def _require_active(self) -> None:
        if self.state == EngineState.ENDED:
            raise RuntimeError("Exploration has already ended")
