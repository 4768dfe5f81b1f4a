"""Grid traversal (DDA) ray casting against the map."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

from .mapcheck import GameMap
from .vectors import Vec2

DRAW_DISTANCE = 20.0
"""Rays travelling further than this without a hit give up."""

DDA_MARKER = (0.1, 0x00FF00)
"""Radius and colour used to mark ray hits on the mini-map."""


@dataclass
class Ray:
    """State and result of one cast ray."""

    camera_x: float = 0.0
    start: Vec2 = field(default_factory=Vec2)
    dir: Vec2 = field(default_factory=Vec2)
    delta: Vec2 = field(default_factory=Vec2)
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    side_dist_x: float = 0.0
    side_dist_y: float = 0.0
    travel_dist: float = 0.0
    hit: bool = False
    side: bool = False
    intersection: Vec2 = field(default_factory=Vec2)
    perp_dist: float = 0.0


def _inverse_abs(value: float) -> float:
    return math.inf if value == 0 else abs(1.0 / value)


def _init_ray(pos: Vec2, direction: Vec2, plane: Vec2, screen_x: int, width: int) -> Ray:
    camera_x = 2 * screen_x / float(width) - 1
    ray_dir = Vec2(direction.x + plane.x * camera_x, direction.y + plane.y * camera_x)
    return Ray(
        camera_x=camera_x,
        start=pos,
        dir=ray_dir,
        delta=Vec2(_inverse_abs(ray_dir.x), _inverse_abs(ray_dir.y)),
        map_x=int(pos.x),
        map_y=int(pos.y),
    )


def _init_dda(ray: Ray) -> None:
    if ray.dir.x < 0:
        ray.step_x = -1
        ray.side_dist_x = (ray.start.x - ray.map_x) * ray.delta.x
    else:
        ray.step_x = 1
        ray.side_dist_x = ((ray.map_x + 1) - ray.start.x) * ray.delta.x
    if ray.dir.y < 0:
        ray.step_y = -1
        ray.side_dist_y = (ray.start.y - ray.map_y) * ray.delta.y
    else:
        ray.step_y = 1
        ray.side_dist_y = ((ray.map_y + 1) - ray.start.y) * ray.delta.y


def _advance(ray: Ray) -> None:
    if ray.side_dist_x < ray.side_dist_y:
        ray.map_x += ray.step_x
        ray.travel_dist = ray.side_dist_x
        ray.side_dist_x += ray.delta.x
        ray.side = False
    else:
        ray.map_y += ray.step_y
        ray.travel_dist = ray.side_dist_y
        ray.side_dist_y += ray.delta.y
        ray.side = True


def _run_dda(ray: Ray, game_map: Optional[GameMap]) -> None:
    if game_map is None or game_map.height == 0:
        return
    last_row = game_map.height - 1
    while not ray.hit and ray.travel_dist < DRAW_DISTANCE:
        _advance(ray)
        if (
            0 <= ray.map_x <= game_map.width
            and 0 <= ray.map_y <= last_row
            and game_map.cell(ray.map_x, ray.map_y) == "1"
        ):
            ray.hit = True
            ray.intersection = ray.start + ray.dir.scale(ray.travel_dist)


def compute_perp_dist(ray: Ray) -> float:
    """Set and return the distance from the camera plane to the hit point."""
    if not ray.hit:
        ray.perp_dist = DRAW_DISTANCE
        return ray.perp_dist
    if ray.side:
        delta, component = ray.intersection.y - ray.start.y, ray.dir.y
    else:
        delta, component = ray.intersection.x - ray.start.x, ray.dir.x
    ray.perp_dist = abs(delta / component) if component != 0 else abs(ray.travel_dist)
    return ray.perp_dist


def cast_ray(
    pos: Vec2,
    direction: Vec2,
    plane: Vec2,
    screen_x: int,
    width: int,
    game_map: Optional[GameMap],
) -> Ray:
    """Cast the ray for screen column ``screen_x`` of a view ``width`` wide."""
    ray = _init_ray(pos, direction, plane, screen_x, width)
    _init_dda(ray)
    _run_dda(ray, game_map)
    compute_perp_dist(ray)
    return ray


def cast_all(
    pos: Vec2, direction: Vec2, plane: Vec2, width: int, game_map: Optional[GameMap]
) -> list[Ray]:
    """Cast one ray per screen column, left to right."""
    return [cast_ray(pos, direction, plane, x, width, game_map) for x in range(width)]