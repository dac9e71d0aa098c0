import pytest

from cubcaster.framebuffer import Image
from cubcaster.raycast import (
    FAR,
    Point,
    Ray,
    cast_horizontal,
    cast_vertical,
    dist,
    draw_floor_ceiling,
    draw_line,
    draw_minimap,
    draw_rays,
    render,
)
from cubcaster.state import Game, Player

ROWS = ["1111111111"] + ["1000000001"] * 8 + ["1111111111"]


def make_game(angle=0.0, minimap=False):
    return Game(points=list(ROWS), floor=0x00112233, ceiling=0x00445566,
                player=Player(angle=angle, x=352.0, y=352.0), minimap=minimap)


def test_dist():
    assert dist(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert dist(Point(2, 2), Point(2, 2)) == 0


def test_draw_line_horizontal():
    image = Image(20, 20)
    draw_line(image, Point(0, 5), Point(10, 5), 7)
    assert all(image.get_pixel(x, 5) == 7 for x in range(10))
    assert image.get_pixel(10, 5) == 0


def test_draw_line_zero_length():
    image = Image(5, 5)
    draw_line(image, Point(2, 2), Point(2, 2), 9)
    assert image.get_pixel(2, 2) == 0


def test_floor_ceiling():
    image = Image(800, 800)
    draw_floor_ceiling(image, 1, 2)
    assert image.get_pixel(0, 0) == 1
    assert image.get_pixel(799, 399) == 1
    assert image.get_pixel(0, 400) == 2
    assert image.get_pixel(799, 799) == 2


def test_cast_horizontal_hits_wall():
    game = make_game()
    ray = Ray(r_angle=90.5, player=Point(352.0, 352.0))
    cast_horizontal(game, ray)
    assert ray.disth < FAR
    assert game.points[int(ray.rayh.y / 64)][int(ray.rayh.x / 64)] == "1"


def test_cast_horizontal_degenerate_angle():
    game = make_game()
    ray = Ray(r_angle=0.3, player=Point(352.0, 352.0))
    cast_horizontal(game, ray)
    assert ray.disth == FAR


def test_cast_vertical_hits_wall():
    game = make_game()
    ray = Ray(r_angle=10.0, player=Point(352.0, 352.0))
    cast_vertical(game, ray)
    assert ray.distv < FAR
    assert game.points[int(ray.rayv.y / 64)][int(ray.rayv.x / 64)] == "1"


def test_render_layout_and_texture():
    game = make_game(angle=90.0)
    for key in ("north", "south", "east", "west"):
        tex = Image(64, 64)
        tex.fill(0x00ABCDEF)
        game.textures[key] = tex
    image = render(game)
    assert (image.width, image.height) == (800, 800)
    assert image.get_pixel(400, 0) == game.ceiling
    assert image.get_pixel(400, 799) == game.floor
    assert image.get_pixel(400, 400) == 0x00ABCDEF


def test_draw_rays_without_textures_draws_black_wall():
    game = make_game(angle=180.0)
    image = Image(800, 800)
    image.fill(0x00FFFFFF)
    draw_rays(game, image)
    assert image.get_pixel(400, 400) == 0


def test_minimap_draws_walls_and_player():
    game = make_game(minimap=True)
    image = Image(800, 800)
    draw_minimap(game, image)
    assert image.get_pixel(int(352 / 4), int(352 / 4)) == 0x00FF0000
    assert image.get_pixel(16, 16) == 0x00FFFFFF
    assert image.get_pixel(0, 0) == 0