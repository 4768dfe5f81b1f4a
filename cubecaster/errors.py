"""Error codes, their messages and the exception carrying them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Failure reasons; the value doubles as the process exit status."""

    OK = 0
    USAGE = 1
    INVALID_FILENAME = 2
    INVALID_PATH = 3
    INVALID_ORDER = 4
    DUP_TEXTURE = 5
    UNKNOWN_TEXTURE_ID = 6
    INVALID_COLORS = 7
    DUP_COLOR = 8
    ALLOC = 9
    INVALID_MAP_CHARACTER = 10
    INVALID_MAP_FORMAT = 11
    DUP_PLAYER_POS = 12
    INVALID_DATA_FORMAT = 13


_MESSAGES = {
    ErrorCode.OK: "",
    ErrorCode.USAGE: "Usage: ./cub3d <path/to/map.cub>\n",
    ErrorCode.INVALID_FILENAME: (
        "Invalid file. The filename musthave a '.cub' extension\n "
    ),
    ErrorCode.INVALID_PATH: "Invalid path. No '.cub'file at given path\n",
    ErrorCode.INVALID_ORDER: (
        "Invalid order. Map mustcome last in '.cub' file\n "
    ),
    ErrorCode.DUP_TEXTURE: "Duplicate texture assignment in '.cub' file\n",
    ErrorCode.UNKNOWN_TEXTURE_ID: "Unknown texture id in '.cub' file\n",
    ErrorCode.INVALID_COLORS: (
        "Invalid colors in '.cub' file. Colors mustbe in range 0-255 "
        "and formatted as 'r,g,b'\n"
    ),
    ErrorCode.DUP_COLOR: "Duplicate color assignment in '.cub' file\n",
    ErrorCode.ALLOC: "Memory allocation failure\n",
    ErrorCode.INVALID_MAP_CHARACTER: "Invalid character in map\n",
    ErrorCode.INVALID_MAP_FORMAT: "Invalid map format\n",
    ErrorCode.DUP_PLAYER_POS: "Duplicate player position in map\n",
}

_UNKNOWN = "Unknown error\n"


def error_message(code: int) -> str:
    """Return the user-facing message for an error code."""
    try:
        return _MESSAGES.get(ErrorCode(code), _UNKNOWN)
    except ValueError:
        return _UNKNOWN


class CubError(Exception):
    """Raised when loading or validating a scene fails."""

    def __init__(self, code: int) -> None:
        self.code = ErrorCode(code)
        super().__init__(error_message(self.code).strip())


def exit_err(message: str, exit_code: int) -> None:
    """Print an error line and terminate with ``exit_code``."""
    print(f"cub3d ERROR: {message}")
    raise SystemExit(exit_code)