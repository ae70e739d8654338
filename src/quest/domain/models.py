"""Domain models for start-up case data."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from quest.domain import rules
from quest.domain.enums import Side


class RoomSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    clue: str = ""
    left: Optional[str] = None
    right: Optional[str] = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        return rules.ensure_not_blank(value, "room name")

    @field_validator("clue", mode="before")
    @classmethod
    def _clue_none_is_empty(cls, value: object) -> object:
        return "" if value is None else value

    def link(self, side: Side) -> Optional[str]:
        return self.left if side == Side.LEFT else self.right


class Association(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    clue: str
    suspect: str

    @field_validator("clue")
    @classmethod
    def _clue_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("association clue must not be empty")
        return value

    @field_validator("suspect")
    @classmethod
    def _suspect_not_blank(cls, value: str) -> str:
        return rules.ensure_not_blank(value, "suspect name")


class CaseFile(BaseModel):
    """Rooms, topology and clue/suspect associations for one mystery."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    title: str = "Detective Quest"
    intro: str = ""
    root: str
    rooms: List[RoomSpec] = Field(min_length=1)
    associations: List[Association] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_topology(self) -> "CaseFile":
        by_name: dict[str, RoomSpec] = {}
        for room in self.rooms:
            if room.name in by_name:
                raise ValueError(f"Duplicate room name: {room.name}")
            by_name[room.name] = room
        rules.ensure_known_room(self.root, by_name, "root room")

        parents: dict[str, str] = {}
        for room in self.rooms:
            for side in Side:
                child = room.link(side)
                if child is None:
                    continue
                rules.ensure_known_room(child, by_name, f"{side} child of {room.name!r}")
                if child == self.root:
                    raise ValueError(f"Root room {self.root!r} cannot be a child")
                rules.ensure_single_parent(child, parents, room.name)
                parents[child] = room.name

        reachable = {self.root}
        stack = [self.root]
        while stack:
            room = by_name[stack.pop()]
            for side in Side:
                child = room.link(side)
                if child is not None and child not in reachable:
                    reachable.add(child)
                    stack.append(child)
        orphans = [name for name in by_name if name not in reachable]
        if orphans:
            raise ValueError(f"Rooms unreachable from root: {', '.join(orphans)}")
        return self

    def room_specs(self) -> dict[str, RoomSpec]:
        return {room.name: room for room in self.rooms}
