import math

import pytest
from PIL import Image

from cubraycaster.errors import TextureNotFoundError
from cubraycaster.player import Player
from cubraycaster.raycast import HitSide, Ray
from cubraycaster.render import (
    BLACK,
    GRIS,
    Frame,
    Renderer,
    Texture,
    load_texture,
)
from cubraycaster.scene import Scene

CEILING = 0x102030
FLOOR = 0x405060
COLORS = {"NO": 0xAA0000, "SO": 0x00AA00, "WE": 0x0000AA, "EA": 0xAAAA00}

GRID = ["11111", "10001", "10N01", "10001", "11111"]


def make_scene():
    return Scene(
        north="./n.xpm",
        south="./s.xpm",
        west="./w.xpm",
        east="./e.xpm",
        floor_color=FLOOR,
        ceiling_color=CEILING,
        grid=list(GRID),
        player_col=2,
        player_row=2,
        player_angle=270,
    )


def make_textures():
    return {key: Texture(1, 1, [color]) for key, color in COLORS.items()}


def test_frame_put_get_roundtrip():
    frame = Frame(4, 3)
    frame.put(2, 1, 0x123456)
    assert frame.get(2, 1) == 0x123456
    assert frame.get(0, 0) == 0


def test_frame_put_outside_is_ignored():
    frame = Frame(2, 2)
    frame.put(5, 5, 0xFFFFFF)
    frame.put(-1, 0, 0xFFFFFF)
    assert frame.pixels == [0, 0, 0, 0]


def test_frame_get_outside_raises():
    with pytest.raises(IndexError):
        Frame(2, 2).get(2, 0)


def test_frame_put_scaled_divides_by_four():
    frame = Frame(10, 10)
    frame.put_scaled(8, 12, 0xABCDEF)
    assert frame.get(2, 3) == 0xABCDEF


def test_frame_to_bytes():
    frame = Frame(2, 1)
    frame.put(0, 0, 0x123456)
    data = frame.to_bytes()
    assert len(data) == 6
    assert data[:3] == b"\x12\x34\x56"


def test_texture_pixel_and_clamping():
    tex = Texture(2, 2, [1, 2, 3, 4])
    assert tex.pixel(1, 0) == 2
    assert tex.pixel(0, 1) == 3
    assert tex.pixel(10, 10) == 4
    assert tex.pixel(-3, -3) == 1


def test_load_texture(tmp_path):
    path = tmp_path / "wall.png"
    image = Image.new("RGB", (2, 1))
    image.putpixel((0, 0), (0x12, 0x34, 0x56))
    image.putpixel((1, 0), (0xAB, 0xCD, 0xEF))
    image.save(path)
    tex = load_texture(path)
    assert (tex.width, tex.height) == (2, 1)
    assert tex.pixel(0, 0) == 0x123456
    assert tex.pixel(1, 0) == 0xABCDEF


def test_load_texture_missing(tmp_path):
    with pytest.raises(TextureNotFoundError):
        load_texture(tmp_path / "absent.xpm")


def test_clear_splits_ceiling_and_floor():
    renderer = Renderer(make_scene(), make_textures())
    frame = Frame(renderer.width, renderer.height)
    renderer.clear(frame)
    assert frame.get(0, 0) == CEILING
    assert frame.get(0, renderer.height // 2) == CEILING
    assert frame.get(0, renderer.height - 1) == FLOOR


@pytest.mark.parametrize(
    "side, angle, key",
    [
        (HitSide.HORIZONTAL, 1.0, "NO"),
        (HitSide.HORIZONTAL, 4.0, "SO"),
        (HitSide.VERTICAL, math.pi, "WE"),
        (HitSide.VERTICAL, 0.1, "EA"),
    ],
)
def test_texture_for(side, angle, key):
    renderer = Renderer(make_scene(), make_textures())
    ray = Ray(0, angle=angle, side=side)
    assert renderer.texture_for(ray).pixel(0, 0) == COLORS[key]


@pytest.mark.parametrize("angle, key", [(0, "EA"), (180, "WE")])
def test_render_center_column_shows_facing_wall(angle, key):
    renderer = Renderer(make_scene(), make_textures())
    frame = Frame(renderer.width, renderer.height)
    renderer.render(frame, Player(125.0, 125.0, angle))
    middle = renderer.width // 2
    assert frame.get(middle, renderer.height // 2) == COLORS[key]
    assert frame.get(middle, 0) == CEILING
    assert frame.get(middle, renderer.height - 1) == FLOOR


def test_render_fills_rays():
    renderer = Renderer(make_scene(), make_textures())
    frame = Frame(renderer.width, renderer.height)
    renderer.render(frame, Player(125.0, 125.0, 0))
    assert len(renderer.rays) == renderer.width
    assert all(ray.length > 0 for ray in renderer.rays)
    assert all(0 <= ray.angle < 2 * math.pi for ray in renderer.rays)


def test_minimap_draws_walls_and_player():
    renderer = Renderer(make_scene(), make_textures(), minimap=True)
    frame = Frame(renderer.width, renderer.height)
    renderer.render(frame, Player(125.0, 125.0, 0))
    assert frame.get(31, 31) == BLACK
    assert frame.get(5, 5) == GRIS


def test_no_minimap_leaves_view_untouched():
    renderer = Renderer(make_scene(), make_textures(), minimap=False)
    frame = Frame(renderer.width, renderer.height)
    renderer.render(frame, Player(125.0, 125.0, 0))
    assert frame.get(31, 31) == CEILING