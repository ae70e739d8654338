"""Console session: explore, list clues, accuse."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable

from quest.cases.loader import CaseWorld
from quest.deduction.verdict import Verdict, evaluate_accusation
from quest.domain.errors import InvalidAccusationError
from quest.evidence.clue_set import ClueSet
from quest.exploration.engine import ExplorationEngine
from quest.narrative import messages

logger = logging.getLogger(__name__)

ReadLine = Callable[[str], "str | None"]
Write = Callable[[str], None]


@dataclass
class SessionResult:
    clues: list[str]
    path: list[str]
    verdict: Verdict | None = None


def console_read_line(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _emit(write: Write, lines: list[str]) -> None:
    for line in lines:
        write(line)


def explore(engine: ExplorationEngine, read_line: ReadLine, write: Write) -> None:
    _emit(write, messages.room_lines(engine.enter()))
    while not engine.ended:
        write("")
        write(messages.MENU)
        line = read_line(messages.PROMPT)
        result = engine.end_of_input() if line is None else engine.handle(line)
        _emit(write, messages.step_lines(result))


def accuse(clues: ClueSet, world: CaseWorld, read_line: ReadLine, write: Write) -> Verdict | None:
    write("")
    write(messages.CLUES_HEADER)
    collected = clues.enumerate()
    _emit(write, messages.clue_lines(collected))
    write("")
    raw = read_line(messages.ACCUSE_PROMPT)
    if raw is None:
        write(messages.READ_ERROR)
        return None
    try:
        verdict = evaluate_accusation(collected, world.index, raw)
    except InvalidAccusationError:
        write(messages.EMPTY_ACCUSATION)
        return None
    logger.info("Accused %r: %d matching clue(s), %s", verdict.accused, verdict.count, verdict.kind)
    _emit(write, messages.verdict_lines(verdict))
    return verdict


def run_session(
    world: CaseWorld,
    read_line: ReadLine = console_read_line,
    write: Write = print,
) -> SessionResult:
    _emit(write, messages.banner(world.case.title, world.case.intro))
    engine = ExplorationEngine(world.room_map)
    explore(engine, read_line, write)
    verdict = accuse(engine.clues, world, read_line, write)
    write("")
    write(messages.FAREWELL)
    return SessionResult(clues=engine.clues.enumerate(), path=list(engine.path), verdict=verdict)
