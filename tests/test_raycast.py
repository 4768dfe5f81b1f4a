import math

import pytest

from cubecaster.mapcheck import GameMap
from cubecaster.raycast import DRAW_DISTANCE, Ray, cast_all, cast_ray, compute_perp_dist
from cubecaster.vectors import Vec2

ROOM = GameMap(rows=("11111", "10001", "10001", "10001", "11111"), width=5)
CENTRE = Vec2(2.5, 2.5)


def test_centre_ray_east_hits_wall():
    ray = cast_ray(CENTRE, Vec2(1.0, 0.0), Vec2(0.0, 0.66), 2, 4, ROOM)
    assert ray.hit is True
    assert ray.side is False
    assert ROOM.cell(ray.map_x, ray.map_y) == "1"
    assert ray.perp_dist == pytest.approx(4 - CENTRE.x)
    assert ray.intersection.x == pytest.approx(ray.map_x)
    assert ray.intersection.y == pytest.approx(CENTRE.y)


def test_centre_ray_south_uses_horizontal_side():
    ray = cast_ray(CENTRE, Vec2(0.0, 1.0), Vec2(-0.66, 0.0), 2, 4, ROOM)
    assert ray.hit is True
    assert ray.side is True
    assert math.isinf(ray.delta.x)
    assert ray.perp_dist == pytest.approx(4 - CENTRE.y)


def test_camera_x_spans_minus_one_to_one():
    ray = cast_ray(CENTRE, Vec2(1.0, 0.0), Vec2(0.0, 0.66), 0, 8, ROOM)
    assert ray.camera_x == pytest.approx(-1.0)
    assert ray.dir.y == pytest.approx(-0.66)


def test_ray_without_wall_gives_up_at_draw_distance():
    open_row = GameMap(rows=("00000",), width=5)
    ray = cast_ray(Vec2(0.5, 0.5), Vec2(1.0, 0.0), Vec2(0.0, 0.66), 2, 4, open_row)
    assert ray.hit is False
    assert ray.perp_dist == DRAW_DISTANCE
    assert ray.travel_dist >= DRAW_DISTANCE


def test_cast_without_map_does_not_hit():
    ray = cast_ray(CENTRE, Vec2(1.0, 0.0), Vec2(0.0, 0.66), 1, 4, None)
    assert ray.hit is False
    assert ray.perp_dist == DRAW_DISTANCE


def test_cast_all_one_ray_per_column_and_symmetric():
    rays = cast_all(CENTRE, Vec2(1.0, 0.0), Vec2(0.0, 0.66), 4, ROOM)
    assert len(rays) == 4
    assert all(r.hit for r in rays)
    assert rays[1].perp_dist == pytest.approx(rays[3].perp_dist)
    assert rays[1].dir.y == pytest.approx(-rays[3].dir.y)


def test_perpendicular_distance_is_flat_against_facing_wall():
    rays = cast_all(CENTRE, Vec2(1.0, 0.0), Vec2(0.0, 0.66), 4, ROOM)
    facing = [r for r in rays if not r.side]
    assert facing
    for ray in facing:
        assert ray.perp_dist == pytest.approx(4 - CENTRE.x)


def test_compute_perp_dist_without_hit():
    ray = Ray(hit=False)
    assert compute_perp_dist(ray) == DRAW_DISTANCE
    assert ray.perp_dist == DRAW_DISTANCE


def test_compute_perp_dist_uses_side_axis():
    ray = Ray(
        hit=True,
        side=True,
        start=Vec2(1.0, 1.0),
        dir=Vec2(0.5, -2.0),
        intersection=Vec2(1.5, -1.0),
    )
    assert compute_perp_dist(ray) == pytest.approx(abs((-1.0 - 1.0) / -2.0))

    ray.side = False
    assert compute_perp_dist(ray) == pytest.approx(abs((1.5 - 1.0) / 0.5))