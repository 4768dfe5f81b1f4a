"""Validation and storage of the map section of a scene."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import CubError, ErrorCode

_WHITESPACE = " \t\n\v\f\r"
_PLAYER_CHARS = "NSEW"
_INNER_CHARS = "01NSEW "
_BORDER_CHARS = "1 "


@dataclass(frozen=True)
class PlayerSpawn:
    """Where the player starts and which way it faces (N, S, E or W)."""

    x: float
    y: float
    direction: str


@dataclass(frozen=True)
class GameMap:
    """The validated map grid; rows may differ in length."""

    rows: tuple[str, ...]
    width: int = 0

    @property
    def height(self) -> int:
        """Number of rows in the grid."""
        return len(self.rows)

    def cell(self, x: int, y: int) -> Optional[str]:
        """Return the character at column ``x`` of row ``y``, or None outside the grid."""
        if y < 0 or y >= len(self.rows):
            return None
        row = self.rows[y]
        if x < 0 or x >= len(row):
            return None
        return row[x]


def check_border_line(line: str) -> None:
    """Check that the first or last map row holds only walls and blanks."""
    if any(ch not in _BORDER_CHARS for ch in line):
        raise CubError(ErrorCode.INVALID_MAP_CHARACTER)


def _check_first_and_last(line: str) -> None:
    content = line.strip(_WHITESPACE)
    if not content or content[0] != "1" or content[-1] != "1":
        raise CubError(ErrorCode.INVALID_MAP_FORMAT)


def _overhangs(line: str, neighbour: str, x: int) -> bool:
    return (
        len(line) > len(neighbour)
        and x > len(neighbour) - 1
        and line[x] not in _BORDER_CHARS
    )


def check_inner_line(prev_line: str, line: str, next_line: str) -> list[tuple[int, str]]:
    """Validate an inner map row against its neighbours.

    Returns the column and direction of every player marker found in the row.
    """
    _check_first_and_last(line)
    players: list[tuple[int, str]] = []
    for x, ch in enumerate(line):
        if ch not in _INNER_CHARS:
            raise CubError(ErrorCode.INVALID_MAP_CHARACTER)
        if ch == "0":
            following = line[x + 1] if x + 1 < len(line) else ""
            if following in (" ", "\n") or x == 0 or line[x - 1] == " ":
                raise CubError(ErrorCode.INVALID_MAP_FORMAT)
        if _overhangs(line, prev_line, x) or _overhangs(line, next_line, x):
            raise CubError(ErrorCode.INVALID_MAP_FORMAT)
        if ch in _PLAYER_CHARS:
            players.append((x, ch))
    return players


def validate_map(lines: Sequence[str]) -> tuple[int, Optional[PlayerSpawn]]:
    """Validate all map rows; return the map width and the player spawn, if any."""
    last = len(lines) - 1
    width = 0
    spawn: Optional[PlayerSpawn] = None
    for y, line in enumerate(lines):
        if y == 0 or y == last:
            check_border_line(line)
            continue
        for x, direction in check_inner_line(lines[y - 1], line, lines[y + 1]):
            if spawn is not None:
                raise CubError(ErrorCode.DUP_PLAYER_POS)
            spawn = PlayerSpawn(x + 0.5, y + 0.5, direction)
        width = max(width, len(line))
    return width, spawn


def store_map(lines: Sequence[str], width: int) -> GameMap:
    """Freeze validated rows into a GameMap."""
    return GameMap(rows=tuple(lines), width=width)