"""Navigation command parsing."""

from __future__ import annotations

from quest.domain.enums import Command

ALIASES = {
    "e": Command.LEFT,
    "esquerda": Command.LEFT,
    "l": Command.LEFT,
    "left": Command.LEFT,
    "d": Command.RIGHT,
    "direita": Command.RIGHT,
    "r": Command.RIGHT,
    "right": Command.RIGHT,
    "s": Command.QUIT,
    "sair": Command.QUIT,
    "q": Command.QUIT,
    "quit": Command.QUIT,
}


def first_token(line: str) -> str:
    parts = line.split(maxsplit=1)
    return parts[0] if parts else ""


def parse_command(line: str) -> Command | None:
    """Only the first token counts; the rest of the line is discarded."""
    return ALIASES.get(first_token(line).lower())
