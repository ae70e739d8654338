"""Map dump helpers for debugging."""

from __future__ import annotations

from quest.evidence.suspect_index import SuspectIndex
from quest.world.room_map import RoomMap


def dump_map(room_map: RoomMap, index: SuspectIndex, title: str = "") -> str:
    lines: list[str] = []
    if title:
        lines.append(f"Case: {title}")
    lines.append(f"Rooms ({len(room_map)}):")
    for depth, side, room in room_map.walk():
        prefix = "  " * depth
        side_text = f"[{side}] " if side else ""
        clue_text = f" - clue: {room.clue}" if room.has_clue else ""
        lines.append(f"{prefix}- {side_text}{room.name}{clue_text}")
    lines.append("")
    lines.append(f"Associations ({len(index)}, {index.bucket_count} buckets):")
    for clue, suspect in sorted(index.items()):
        lines.append(f"- {clue} -> {suspect}")
    lines.append("")
    lines.append("Suspects:")
    for suspect in index.suspects():
        lines.append(f"- {suspect}")
    return "\n".join(lines)
