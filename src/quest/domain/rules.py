"""Invariant checks for case data and the room tree."""

from __future__ import annotations

from typing import Mapping


def ensure_room_exists(name: str, rooms: Mapping[str, object], label: str = "room") -> None:
    if name not in rooms:
        raise KeyError(f"Unknown {label}: {name}")


def ensure_not_blank(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{label} must not be empty")
    return value


def ensure_single_parent(child: str, parents: Mapping[str, str], parent: str) -> None:
    existing = parents.get(child)
    if existing is not None:
        raise ValueError(
            f"Room {child!r} is linked from both {existing!r} and {parent!r}"
        )


def ensure_known_room(name: str, rooms: Mapping[str, object], label: str = "room") -> None:
    if name not in rooms:
        raise ValueError(f"Unknown {label}: {name}")
