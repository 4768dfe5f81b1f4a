"""Software frame buffer, wall column rendering and mini-map drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Protocol, Sequence, Union

from .mathutils import convrad
from .vectors import Vec2

_MAP_COLOR = 0x0000FF
_SHADE_START = 1.5
_SHADE_LENGTH = 3.0
_MAX_LINE_HEIGHT = 2**31 - 1


class TextureId(IntEnum):
    """Which wall face a texture belongs to."""

    NORTH = 0
    SOUTH = 1
    WEST = 2
    EAST = 3


@dataclass
class Texture:
    """A decoded image as row-major 0xRRGGBB integers."""

    width: int
    height: int
    pixels: Sequence[int]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        return self.pixels[y * self.width + x]


class FrameBuffer:
    """An in-memory image of 32-bit pixels."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Write a pixel; coordinates outside the buffer are ignored."""
        ix, iy = int(x), int(y)
        if ix >= self.width or iy >= self.height or ix < 0 or iy < 0:
            return
        self.pixels[iy * self.width + ix] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Read the pixel at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels = [0] * (self.width * self.height)


class RayHit(Protocol):
    """What the renderer needs to know about a cast ray."""

    side: bool
    dir: Vec2
    intersection: Vec2
    perp_dist: float


def calculate_shading(dist: float) -> float:
    """Return a brightness factor in [0, 1] that fades with distance."""
    if dist <= _SHADE_START:
        return 1.0
    if dist >= _SHADE_START + _SHADE_LENGTH:
        return 0.0
    return 1.0 - (dist - _SHADE_START) / _SHADE_LENGTH


def shade_color(color: int, factor: float) -> int:
    """Scale each RGB channel of ``color`` by ``factor``."""
    r = int(((color >> 16) & 0xFF) * factor)
    g = int(((color >> 8) & 0xFF) * factor)
    b = int((color & 0xFF) * factor)
    return (r << 16) | (g << 8) | b


def get_wall_texture(side: bool, dir_x: float, dir_y: float) -> TextureId:
    """Pick the wall texture from the hit side and ray direction."""
    if side:
        return TextureId.NORTH if dir_y > 0 else TextureId.SOUTH
    return TextureId.WEST if dir_x > 0 else TextureId.EAST


def get_texture_x(ray: RayHit, texture_width: int) -> int:
    """Return the texture column hit by ``ray``."""
    wall_x = ray.intersection.x if ray.side else ray.intersection.y
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * texture_width)
    if (not ray.side and ray.dir.x > 0) or (ray.side and ray.dir.y < 0):
        tex_x = texture_width - tex_x - 1
    return tex_x


def _plane_shading(screen_y: int, pos_z: float, half_height: float) -> float:
    p = screen_y - half_height
    if p == 0:
        p = 0.0001
    return calculate_shading(abs(pos_z / p))


def draw_column(
    frame: FrameBuffer,
    ray: RayHit,
    textures: Union[Mapping[TextureId, Texture], Sequence[Texture]],
    floor_color: int,
    ceiling_color: int,
    screen_x: int,
) -> None:
    """Draw ceiling, textured wall slice and floor for one screen column."""
    height = frame.height
    half = height // 2
    pos_z = 0.5 * height
    if ray.perp_dist > 0:
        line_height = min(int(height / ray.perp_dist), _MAX_LINE_HEIGHT)
    else:
        line_height = _MAX_LINE_HEIGHT
    draw_start = max(0, -(line_height // 2) + half)
    draw_end = min(height - 1, line_height // 2 + half)
    shading = calculate_shading(ray.perp_dist)
    tex_id = get_wall_texture(ray.side, ray.dir.x, ray.dir.y)
    texture = textures[tex_id]
    tex_x = get_texture_x(ray, texture.width)
    tex_step = texture.height / line_height if line_height else 0.0
    tex_pos = (draw_start - half + line_height // 2) * tex_step

    screen_y = 0
    while screen_y < draw_start:
        factor = _plane_shading(screen_y, pos_z, height / 2.0)
        frame.put_pixel(screen_x, screen_y, shade_color(ceiling_color, factor))
        screen_y += 1
    while screen_y <= draw_end:
        tex_y = int(tex_pos) % texture.height
        tex_pos += tex_step
        color = shade_color(texture.pixel(tex_x, tex_y), shading)
        frame.put_pixel(screen_x, screen_y, color)
        screen_y += 1
    while screen_y < height - 1:
        factor = _plane_shading(screen_y, pos_z, height / 2.0)
        frame.put_pixel(screen_x, screen_y, shade_color(floor_color, factor))
        screen_y += 1


def draw_circle(
    frame: FrameBuffer, cx: float, cy: float, radius: float, color: int, scale: float
) -> None:
    """Plot a dotted circle of 36 points around (cx, cy) in map units."""
    for angle in range(0, 360, 10):
        theta = convrad(angle)
        px = cx + radius * math.cos(theta)
        py = cy + radius * math.sin(theta)
        frame.put_pixel(px * scale, py * scale, color)


def draw_square(frame: FrameBuffer, x: int, y: int, size: int, color: int) -> None:
    """Draw the outline of a square with its top-left corner at (x, y)."""
    for i in range(size):
        frame.put_pixel(x + i, y, color)
        frame.put_pixel(x, y + i, color)
        frame.put_pixel(x + size, y + i, color)
        frame.put_pixel(x + i, y + size, color)


def draw_map(frame: FrameBuffer, grid: Sequence[str], scale: int) -> None:
    """Outline every wall cell of ``grid`` on the mini-map."""
    for y, row in enumerate(grid):
        for x, ch in enumerate(row):
            if ch == "1":
                draw_square(frame, x * scale, y * scale, scale, _MAP_COLOR)


def touch_wall(grid: Sequence[str], px: float, py: float, block_size: float) -> bool:
    """True if the pixel position lies in a wall cell; outside the grid counts as wall."""
    x = int(px / block_size)
    y = int(py / block_size)
    if y < 0 or y >= len(grid) or x < 0 or x >= len(grid[y]):
        return True
    return grid[y][x] == "1"