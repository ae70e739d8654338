"""Ordered, duplicate-free set of collected clues backed by a binary search tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass
class _Node:
    clue: str
    left: "_Node | None" = None
    right: "_Node | None" = None


class ClueSet:
    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, clue: str) -> bool:
        """Add ``clue``; returns False for an empty or already collected clue."""
        if not clue:
            return False
        if self._root is None:
            self._root = _Node(clue)
            self._size = 1
            return True
        node = self._root
        while True:
            if clue < node.clue:
                if node.left is None:
                    node.left = _Node(clue)
                    break
                node = node.left
            elif clue > node.clue:
                if node.right is None:
                    node.right = _Node(clue)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def enumerate(self) -> list[str]:
        return list(self)

    def __iter__(self) -> Iterator[str]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.clue
            node = node.right

    def __contains__(self, clue: object) -> bool:
        if not isinstance(clue, str):
            return False
        node = self._root
        while node is not None:
            if clue == node.clue:
                return True
            node = node.left if clue < node.clue else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0
