import pytest

from quest import config
from quest.cases.loader import build_case_world, load_case_file, load_case_world
from quest.cases.mansion import MANSION_CASE
from quest.domain.errors import CaseFileError
from quest.domain.models import CaseFile

MINIMAL = """
root: Hall
rooms:
  - name: Hall
    clue: Pegada
    left: Sala
  - name: Sala
associations:
  - {clue: Pegada, suspect: Carlos}
"""


def _write(tmp_path, text):
    path = tmp_path / "case.yml"
    path.write_text(text, encoding="utf-8")
    return path


def test_shipped_case_file_matches_builtin_case():
    case = load_case_file(config.DATA_DIR / "cases" / "mansion.yml")
    assert case == MANSION_CASE


def test_minimal_case_without_wrapper(tmp_path):
    world = load_case_world(_write(tmp_path, MINIMAL))
    assert world.room_map.root.name == "Hall"
    assert world.room_map.room("Sala").clue == ""
    assert world.index.get("Pegada") == "Carlos"
    assert world.case.title == "Detective Quest"


def test_default_world_is_the_mansion():
    world = load_case_world()
    assert world.case is MANSION_CASE
    assert len(world.room_map) == 6


def test_duplicate_association_keeps_last_suspect():
    data = MANSION_CASE.model_dump()
    data["associations"].append({"clue": "Pegada suja", "suspect": "Dona Beatriz"})
    world = build_case_world(CaseFile.model_validate(data))
    assert world.index.get("Pegada suja") == "Dona Beatriz"
    assert len(world.index) == 6


@pytest.mark.parametrize(
    "text",
    [
        "root: Hall\nrooms:\n  - name: Hall\n    left: Nowhere\n",
        "root: Missing\nrooms:\n  - name: Hall\n",
        "root: Hall\nrooms:\n  - name: Hall\n  - name: Hall\n",
        "root: Hall\nrooms:\n  - name: Hall\n    left: A\n    right: A\n  - name: A\n",
        "root: Hall\nrooms:\n  - name: Hall\n    left: A\n  - name: A\n    left: Hall\n",
        "root: Hall\nrooms:\n  - name: Hall\n  - name: Orphan\n",
        "root: Hall\nrooms:\n  - name: Hall\n    secret: 1\n",
        "root: Hall\nrooms:\n  - name: Hall\nassociations:\n  - {clue: '', suspect: X}\n",
        "- just\n- a list\n",
        "root: [unclosed\n",
    ],
)
def test_invalid_case_files_raise(tmp_path, text):
    with pytest.raises(CaseFileError):
        load_case_file(_write(tmp_path, text))


def test_missing_file_raises(tmp_path):
    with pytest.raises(CaseFileError):
        load_case_file(tmp_path / "absent.yml")


def test_unlinked_room_clue_is_logged(tmp_path, caplog):
    text = MINIMAL.replace("  - name: Sala\n", "  - name: Sala\n    clue: Batom\n")
    with caplog.at_level("WARNING", logger="quest.cases.loader"):
        load_case_world(_write(tmp_path, text))
    assert "Batom" in caplog.text
