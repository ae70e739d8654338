import pytest

from quest.domain.enums import Command, Side
from quest.exploration.commands import parse_command
from quest.exploration.engine import ExplorationEngine
from quest.exploration.results import EngineState, StepOutcome


def _run(room_map, lines):
    engine = ExplorationEngine(room_map)
    engine.enter()
    for line in lines:
        engine.handle(line)
    return engine


@pytest.mark.parametrize(
    "line, expected",
    [
        ("e", Command.LEFT),
        ("E", Command.LEFT),
        ("esquerda", Command.LEFT),
        ("  d   trailing junk", Command.RIGHT),
        ("RIGHT", Command.RIGHT),
        ("s", Command.QUIT),
        ("quit now", Command.QUIT),
        ("x", None),
        ("", None),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


def test_root_clue_collected_on_entry(room_map):
    engine = ExplorationEngine(room_map)
    report = engine.enter()
    assert report.room.name == "Hall de Entrada"
    assert report.clue == "Pegada suja"
    assert report.is_new
    assert engine.clues.enumerate() == ["Pegada suja"]


def test_left_left_quit(room_map):
    engine = _run(room_map, ["e", "e", "s"])
    assert engine.state == EngineState.ENDED
    assert engine.current.name == "Cozinha"
    assert engine.path == ["Hall de Entrada", "Sala de Estar", "Cozinha"]
    assert engine.clues.enumerate() == [
        "Copo com fragmento de esmalte",
        "Pegada suja",
        "Perfume feminino caro",
    ]


def test_right_right_quit(room_map):
    engine = _run(room_map, ["d", "d", "s"])
    assert engine.current.name == "Porão"
    assert engine.clues.enumerate() == ["Livro rasgado", "Luva encharcada", "Pegada suja"]


def test_missing_child_keeps_room_and_clues(room_map):
    engine = _run(room_map, ["d"])
    before = engine.clues.enumerate()
    result = engine.handle("e")
    assert result.outcome == StepOutcome.NO_PATH
    assert result.side == Side.LEFT
    assert engine.current.name == "Biblioteca"
    assert engine.clues.enumerate() == before
    assert not engine.ended


def test_invalid_and_blank_input_do_not_change_state(room_map):
    engine = _run(room_map, [])
    assert engine.handle("norte").outcome == StepOutcome.INVALID
    assert engine.handle("   ").outcome == StepOutcome.IGNORED
    assert engine.current.name == "Hall de Entrada"
    assert engine.state == EngineState.AT_ROOM


def test_moved_result_carries_room_report(room_map):
    engine = _run(room_map, [])
    result = engine.handle("e")
    assert result.outcome == StepOutcome.MOVED
    assert result.command == Command.LEFT
    assert result.report.clue == "Perfume feminino caro"
    assert result.report.is_new


def test_reentering_a_room_does_not_duplicate_clues(room_map):
    engine = _run(room_map, ["e"])
    snapshot = engine.clues.enumerate()
    for _ in range(3):
        report = engine.enter()
        assert not report.is_new
    assert engine.clues.enumerate() == snapshot


def test_end_of_input_is_an_implicit_quit(room_map):
    engine = _run(room_map, ["e"])
    result = engine.end_of_input()
    assert result.outcome == StepOutcome.INPUT_CLOSED
    assert result.ended
    assert engine.ended


def test_ended_engine_rejects_commands(room_map):
    engine = _run(room_map, ["s"])
    with pytest.raises(RuntimeError):
        engine.handle("e")


def test_quit_without_explicit_entry_collects_root_clue(room_map):
    engine = ExplorationEngine(room_map)
    engine.handle("s")
    assert engine.clues.enumerate() == ["Pegada suja"]
    assert engine.path == ["Hall de Entrada"]


def test_first_move_without_explicit_entry_collects_both_clues(room_map):
    engine = ExplorationEngine(room_map)
    engine.handle("e")
    assert engine.path == ["Hall de Entrada", "Sala de Estar"]
    assert engine.clues.enumerate() == ["Pegada suja", "Perfume feminino caro"]


def test_closed_input_without_explicit_entry_collects_root_clue(room_map):
    engine = ExplorationEngine(room_map)
    engine.end_of_input()
    assert engine.clues.enumerate() == ["Pegada suja"]


def test_explicit_entry_is_not_repeated_by_first_command(room_map):
    engine = ExplorationEngine(room_map)
    engine.enter()
    engine.handle("s")
    assert engine.path == ["Hall de Entrada"]
