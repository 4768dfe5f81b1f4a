from types import SimpleNamespace

import pytest

from cubecaster.render import (
    FrameBuffer,
    Texture,
    TextureId,
    calculate_shading,
    draw_circle,
    draw_column,
    draw_map,
    draw_square,
    get_texture_x,
    get_wall_texture,
    shade_color,
    touch_wall,
)
from cubecaster.vectors import Vec2


def test_shading_bounds():
    assert calculate_shading(0.0) == 1.0
    assert calculate_shading(1.5) == 1.0
    assert calculate_shading(4.5) == 0.0
    assert calculate_shading(100.0) == 0.0


def test_shading_decreases_with_distance():
    values = [calculate_shading(d / 10) for d in range(0, 60)]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert 0.0 < calculate_shading(3.0) < 1.0


def test_shade_color_identity_and_black():
    assert shade_color(0xABCDEF, 1.0) == 0xABCDEF
    assert shade_color(0xABCDEF, 0.0) == 0


def test_shade_color_never_brightens():
    color = 0x804020
    shaded = shade_color(color, 0.5)
    for shift in (16, 8, 0):
        assert (shaded >> shift) & 0xFF <= (color >> shift) & 0xFF


@pytest.mark.parametrize(
    "side, dx, dy, expected",
    [
        (True, 0.0, 1.0, TextureId.NORTH),
        (True, 0.0, -1.0, TextureId.SOUTH),
        (False, 1.0, 0.0, TextureId.WEST),
        (False, -1.0, 0.0, TextureId.EAST),
    ],
)
def test_get_wall_texture(side, dx, dy, expected):
    assert get_wall_texture(side, dx, dy) == expected


def test_texture_x_and_its_mirror():
    hit = Vec2(3.0, 2.25)
    left = SimpleNamespace(side=False, dir=Vec2(-1.0, 0.0), intersection=hit)
    right = SimpleNamespace(side=False, dir=Vec2(1.0, 0.0), intersection=hit)
    base = get_texture_x(left, 64)
    assert base == 16
    assert get_texture_x(right, 64) == 64 - base - 1


def test_texture_pixel_lookup():
    tex = Texture(width=2, height=2, pixels=[1, 2, 3, 4])
    assert tex.pixel(1, 0) == 2
    assert tex.pixel(0, 1) == 3


def test_framebuffer_put_get_clear():
    frame = FrameBuffer(4, 3)
    frame.put_pixel(2, 1, 0x123456)
    frame.put_pixel(10, 1, 0xFFFFFF)
    frame.put_pixel(-1, 0, 0xFFFFFF)
    assert frame.get_pixel(2, 1) == 0x123456
    assert sum(1 for p in frame.pixels if p) == 1
    frame.clear()
    assert all(p == 0 for p in frame.pixels)
    with pytest.raises(IndexError):
        frame.get_pixel(4, 0)


def _textures(color):
    return {tid: Texture(2, 2, [color] * 4) for tid in TextureId}


def test_close_wall_fills_column_with_texture():
    frame = FrameBuffer(10, 20)
    ray = SimpleNamespace(
        side=False, dir=Vec2(1.0, 0.0), intersection=Vec2(5.5, 2.5), perp_dist=1.0
    )
    draw_column(frame, ray, _textures(0x00FF00), 0x111111, 0x222222, 3)
    column = [frame.get_pixel(3, y) for y in range(frame.height)]
    assert column == [0x00FF00] * frame.height
    assert frame.get_pixel(2, 0) == 0


def test_far_wall_draws_ceiling_wall_and_floor():
    frame = FrameBuffer(10, 20)
    ray = SimpleNamespace(
        side=True, dir=Vec2(0.0, 1.0), intersection=Vec2(2.5, 6.0), perp_dist=4.0
    )
    tex_color = 0x00FF00
    ceiling, floor = 0x0000AA, 0xAA0000
    draw_column(frame, ray, _textures(tex_color), floor, ceiling, 0)
    wall = shade_color(tex_color, calculate_shading(4.0))
    rows = [y for y in range(frame.height) if frame.get_pixel(0, y) == wall]
    assert rows == list(range(8, 13))
    assert frame.get_pixel(0, 0) == ceiling
    assert frame.get_pixel(0, frame.height - 2) == floor
    assert frame.get_pixel(0, frame.height - 1) == 0


def test_draw_square_outline():
    frame = FrameBuffer(20, 20)
    draw_square(frame, 2, 3, 5, 0xFF)
    assert frame.get_pixel(2, 3) == 0xFF
    assert frame.get_pixel(7, 3) == 0xFF
    assert frame.get_pixel(2, 8) == 0xFF
    assert frame.get_pixel(4, 5) == 0
    assert frame.get_pixel(7, 8) == 0


def test_draw_map_outlines_walls_only():
    frame = FrameBuffer(30, 30)
    draw_map(frame, ["10", "01"], 10)
    assert frame.get_pixel(0, 0) == 0x0000FF
    assert frame.get_pixel(10, 10) == 0x0000FF
    assert frame.get_pixel(15, 0) == 0
    assert frame.get_pixel(0, 15) == 0


def test_draw_circle_plots_point_at_angle_zero():
    frame = FrameBuffer(50, 50)
    draw_circle(frame, 2.0, 2.0, 0.5, 0xFF0000, 10)
    assert frame.get_pixel(25, 20) == 0xFF0000
    assert frame.get_pixel(20, 20) == 0
    assert 0 < sum(1 for p in frame.pixels if p) <= 36


def test_touch_wall():
    grid = ["111", "101", "111"]
    assert touch_wall(grid, 10, 10, 64) is True
    assert touch_wall(grid, 74, 74, 64) is False
    assert touch_wall(grid, 64 * 5, 10, 64) is True