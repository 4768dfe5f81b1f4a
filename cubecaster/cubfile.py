"""Reading and validating the header and map lines of a ``.cub`` scene file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .errors import CubError, ErrorCode
from .mathutils import rgb_to_int

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_TEXTURE_PREFIXES = {
    "NO ": "no_texture",
    "SO ": "so_texture",
    "WE ": "we_texture",
    "EA ": "ea_texture",
}


@dataclass
class SceneConfig:
    """Everything a scene file declares before validation of the map."""

    no_texture: Optional[str] = None
    so_texture: Optional[str] = None
    we_texture: Optional[str] = None
    ea_texture: Optional[str] = None
    floor_color: Optional[int] = None
    ceiling_color: Optional[int] = None
    in_map: bool = False
    map_lines: list[str] = field(default_factory=list)

    def all_assigned(self) -> bool:
        """True once every texture path and both colours are set."""
        return (
            self.no_texture is not None
            and self.so_texture is not None
            and self.ea_texture is not None
            and self.we_texture is not None
            and self.floor_color is not None
            and self.ceiling_color is not None
        )


def is_data_identifier(c: str) -> bool:
    """True if ``c`` starts a texture or colour line."""
    return len(c) == 1 and c in "NSWEFC"


def is_number(s: Optional[str]) -> bool:
    """True if ``s`` is a non-empty string of decimal digits."""
    return bool(s) and all(ch in _DIGITS for ch in s)


def check_args(argv: Sequence[str]) -> str:
    """Validate the command arguments and return the scene path."""
    if len(argv) != 1:
        raise CubError(ErrorCode.USAGE)
    path = argv[0]
    if len(path) <= 4 or not path.endswith(".cub"):
        raise CubError(ErrorCode.INVALID_FILENAME)
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise CubError(ErrorCode.INVALID_PATH) from exc
    return path


def parse_color_line(scene: SceneConfig, line: str, id_index: int, data_index: int) -> None:
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into ``scene``."""
    parts = [part for part in line[data_index:].split(",") if part]
    if len(parts) != 3 or not all(is_number(part) for part in parts):
        raise CubError(ErrorCode.INVALID_COLORS)
    rgb = [int(part) for part in parts]
    if any(channel > 255 for channel in rgb):
        raise CubError(ErrorCode.INVALID_COLORS)
    ident = line[id_index:id_index + 2]
    if ident == "F " and scene.floor_color is None:
        scene.floor_color = rgb_to_int(rgb)
    elif ident == "C " and scene.ceiling_color is None:
        scene.ceiling_color = rgb_to_int(rgb)
    else:
        raise CubError(ErrorCode.DUP_COLOR)


def parse_texture_line(scene: SceneConfig, line: str, id_index: int, data_index: int) -> None:
    """Parse a ``NO``/``SO``/``WE``/``EA`` texture path line into ``scene``."""
    attr = _TEXTURE_PREFIXES.get(line[id_index:id_index + 3])
    if attr is None:
        raise CubError(ErrorCode.UNKNOWN_TEXTURE_ID)
    if getattr(scene, attr) is not None:
        raise CubError(ErrorCode.DUP_TEXTURE)
    setattr(scene, attr, line[data_index:].rstrip("\n"))


def parse_data_line(scene: SceneConfig, line: str, id_index: int) -> None:
    """Parse a header line whose identifier starts at ``id_index``."""
    if scene.in_map:
        raise CubError(ErrorCode.INVALID_ORDER)
    data_index = id_index + 1
    if line[id_index] in "NSWE":
        data_index += 1
    while data_index < len(line) and line[data_index] in _WHITESPACE:
        data_index += 1
    if data_index >= len(line) or line[data_index] == "\n":
        raise CubError(ErrorCode.INVALID_DATA_FORMAT)
    if line[id_index:id_index + 2] in ("F ", "C "):
        parse_color_line(scene, line, id_index, data_index)
    else:
        parse_texture_line(scene, line, id_index, data_index)


def parse_map_line(scene: SceneConfig, line: str) -> None:
    """Store a map row with trailing blanks removed."""
    scene.in_map = True
    scene.map_lines.append(line.rstrip("\t\n "))


def parse_cub_line(scene: SceneConfig, line: str) -> None:
    """Dispatch one line of a scene file."""
    i = 0
    while i < len(line) and line[i] in _WHITESPACE:
        i += 1
    if i >= len(line):
        return
    if is_data_identifier(line[i]):
        parse_data_line(scene, line, i)
    elif scene.all_assigned():
        parse_map_line(scene, line)
    else:
        raise CubError(ErrorCode.INVALID_ORDER)


def parse_cub_lines(lines: Iterable[str]) -> SceneConfig:
    """Parse scene lines (with or without line endings) into a config."""
    scene = SceneConfig()
    for line in lines:
        parse_cub_line(scene, line.rstrip("\r\n"))
    return scene


def parse_cub_file(path: str) -> SceneConfig:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_cub_lines(handle)
    except OSError as exc:
        raise CubError(ErrorCode.INVALID_PATH) from exc