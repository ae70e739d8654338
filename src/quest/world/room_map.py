"""Immutable binary room map wrapped around a NetworkX digraph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

import networkx as nx

from quest.domain import rules
from quest.domain.enums import Side
from quest.domain.models import RoomSpec


@dataclass(frozen=True)
class Room:
    name: str
    clue: str = ""

    @property
    def has_clue(self) -> bool:
        return bool(self.clue)


class RoomMap:
    """Rooms keyed by name; child links are ``side``-labeled edges."""

    def __init__(self, root: str, rooms: Iterable[Room]) -> None:
        self._rooms: dict[str, Room] = {}
        self.graph = nx.DiGraph()
        for room in rooms:
            if room.name in self._rooms:
                raise ValueError(f"Duplicate room name: {room.name}")
            self._rooms[room.name] = room
            self.graph.add_node(room.name, clue=room.clue)
        rules.ensure_room_exists(root, self._rooms, "root room")
        self.root_name = root
        self._sealed = False

    @classmethod
    def build(cls, root: str, specs: Iterable[RoomSpec]) -> "RoomMap":
        spec_list = list(specs)
        room_map = cls(root, (Room(name=spec.name, clue=spec.clue) for spec in spec_list))
        for spec in spec_list:
            for side in Side:
                child = spec.link(side)
                if child is not None:
                    room_map.link(spec.name, child, side)
        room_map.seal()
        return room_map

    def link(self, parent: str, child: str, side: Side) -> None:
        if self._sealed:
            raise RuntimeError("Room map is sealed")
        rules.ensure_room_exists(parent, self._rooms)
        rules.ensure_room_exists(child, self._rooms)
        if self._child_name(parent, side) is not None:
            raise ValueError(f"Room {parent!r} already has a {side} link")
        if child == self.root_name or self.graph.in_degree(child) > 0:
            raise ValueError(f"Room {child!r} already has a parent")
        if nx.has_path(self.graph, child, parent):
            raise ValueError(f"Linking {parent!r} -> {child!r} would create a cycle")
        self.graph.add_edge(parent, child, side=side)

    def seal(self) -> None:
        self._sealed = True
        self.graph = nx.freeze(self.graph)

    @property
    def root(self) -> Room:
        return self._rooms[self.root_name]

    def room(self, name: str) -> Room:
        rules.ensure_room_exists(name, self._rooms)
        return self._rooms[name]

    def _child_name(self, name: str, side: Side) -> str | None:
        for _, child, data in self.graph.out_edges(name, data=True):
            if data.get("side") == side:
                return child
        return None

    def child(self, name: str, side: Side) -> Room | None:
        rules.ensure_room_exists(name, self._rooms)
        child = self._child_name(name, side)
        return self._rooms[child] if child is not None else None

    def children(self, name: str) -> dict[Side, Room]:
        linked: dict[Side, Room] = {}
        for side in Side:
            room = self.child(name, side)
            if room is not None:
                linked[side] = room
        return linked

    def walk(self) -> Iterator[tuple[int, Side | None, Room]]:
        """Pre-order walk yielding (depth, side taken from parent, room)."""
        stack: list[tuple[int, Side | None, str]] = [(0, None, self.root_name)]
        while stack:
            depth, side, name = stack.pop()
            yield depth, side, self._rooms[name]
            for child_side in (Side.RIGHT, Side.LEFT):
                child = self._child_name(name, child_side)
                if child is not None:
                    stack.append((depth + 1, child_side, child))

    def __contains__(self, name: object) -> bool:
        return name in self._rooms

    def __len__(self) -> int:
        return len(self._rooms)
