"""Load case files from YAML and build the read-only world for a session."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from quest import config
from quest.cases.mansion import MANSION_CASE
from quest.domain.errors import CaseFileError
from quest.domain.models import CaseFile
from quest.evidence.suspect_index import SuspectIndex
from quest.world.room_map import RoomMap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CaseWorld:
    case: CaseFile
    room_map: RoomMap
    index: SuspectIndex


def load_case_file(path: Path) -> CaseFile:
    """Parse and validate a YAML case file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CaseFileError(f"Cannot read case file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise CaseFileError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise CaseFileError(f"Case file {path} must contain a mapping")
    try:
        case = CaseFile.model_validate(data.get("case", data))
    except ValidationError as exc:
        raise CaseFileError(f"Invalid case file {path}:\n{exc}") from exc
    logger.info("Loaded case %r from %s (%d rooms)", case.title, path, len(case.rooms))
    return case


def build_case_world(case: CaseFile, buckets: int = config.HASH_BUCKETS) -> CaseWorld:
    room_map = RoomMap.build(case.root, case.rooms)
    index = SuspectIndex.from_pairs(
        ((item.clue, item.suspect) for item in case.associations), buckets=buckets
    )
    unreferenced = [
        room.clue
        for _, _, room in room_map.walk()
        if room.has_clue and room.clue not in index
    ]
    for clue in unreferenced:
        logger.warning("Clue %r has no suspect and will not count toward any accusation", clue)
    return CaseWorld(case=case, room_map=room_map, index=index)


def load_case_world(path: Path | None = None) -> CaseWorld:
    case = load_case_file(path) if path is not None else MANSION_CASE
    return build_case_world(case)
