"""Ray casting against the map grid and drawing a frame into an image."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cubcaster.framebuffer import Image
from cubcaster.state import DOF, SCREEN_SIZE, deg2rad

if TYPE_CHECKING:
    from cubcaster.state import Game

TILE = 64
FAR = 100000.0
FOV_HALF = 30
RAY_STEP = 0.075
RAY_COUNT = 800
HALF = 400
MINIMAP_TILE = 16
RAY_COLOR = 0x0055FFFF
PLAYER_COLOR = 0x00FF0000
WALL_COLOR = 0x00FFFFFF
BORDER_COLOR = 0x00DDDDDD


@dataclass
class Point:
    """A point in map or screen coordinates."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Ray:
    """State of one cast ray: both grid intersections and where to draw."""

    r_angle: float = 0.0
    angle_diff: float = 0.0
    dof: int = 0
    disth: float = FAR
    distv: float = FAR
    distt: float = FAR
    rayh: Point = field(default_factory=Point)
    rayv: Point = field(default_factory=Point)
    off: Point = field(default_factory=Point)
    player: Point = field(default_factory=Point)
    lines: Point = field(default_factory=Point)
    height: Point = field(default_factory=Point)


def dist(player: Point, ray: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(ray.x - player.x, ray.y - player.y)


def _steps(start: Point, end: Point) -> float:
    return max(abs(end.x - start.x), abs(end.y - start.y))


def draw_line(image: Image, start: Point, end: Point, color: int) -> None:
    """Draw a straight line, leaving out its last pixel."""
    steps = _steps(start, end)
    if steps == 0:
        return
    inc_x = (end.x - start.x) / steps
    inc_y = (end.y - start.y) / steps
    for k in range(math.floor(steps)):
        image.put_pixel(start.x + inc_x * k, start.y + inc_y * k, color)


def draw_floor_ceiling(image: Image, ceiling: int, floor: int) -> None:
    """Paint the top half with the ceiling colour and the bottom with the floor."""
    for y in range(SCREEN_SIZE):
        color = ceiling if y < HALF else floor
        draw_line(image, Point(0, y), Point(SCREEN_SIZE, y), color)


def _is_wall(game: Game, x: float, y: float) -> bool:
    if not (0 <= x / TILE < game.map_width and 0 <= y / TILE < game.map_height):
        return False
    row = game.points[int(y / TILE)]
    col = int(x / TILE)
    return col < len(row) and row[col] == "1"


def cast_horizontal(game: Game, ray: Ray) -> None:
    """Step the ray along horizontal grid lines until it meets a wall."""
    px, py = game.player.x, game.player.y
    ray.dof = 0
    if ray.r_angle > 180:
        ray.rayh.y = ((int(py) >> 6) << 6) - 0.0001
        inv = 1 / math.tan(deg2rad(ray.r_angle))
        ray.rayh.x = (py - ray.rayh.y) * inv + px
        ray.off.y = -TILE
        ray.off.x = -ray.off.y * inv
    elif int(ray.r_angle) in (0, 180):
        ray.rayh.x, ray.rayh.y = px, py
        ray.dof = DOF
        ray.disth = FAR
    else:
        ray.rayh.y = ((int(py) >> 6) << 6) + TILE
        inv = 1 / math.tan(deg2rad(ray.r_angle))
        ray.rayh.x = (py - ray.rayh.y) * inv + px
        ray.off.y = TILE
        ray.off.x = -ray.off.y * inv
    while ray.dof < DOF:
        ray.dof += 1
        ray.disth = FAR
        if _is_wall(game, ray.rayh.x, ray.rayh.y):
            ray.disth = dist(ray.player, ray.rayh)
            ray.dof = DOF
        else:
            ray.rayh.x += ray.off.x
            ray.rayh.y += ray.off.y
    ray.rayh.x = max(ray.rayh.x, 0.0)
    ray.rayh.y = max(ray.rayh.y, 0.0)


def cast_vertical(game: Game, ray: Ray) -> None:
    """Step the ray along vertical grid lines until it meets a wall."""
    px, py = game.player.x, game.player.y
    ray.dof = 0
    if 90 < ray.r_angle < 270:
        ray.rayv.x = ((int(px) >> 6) << 6) + TILE
        tan = math.tan(deg2rad(ray.r_angle))
        ray.rayv.y = (px - ray.rayv.x) * tan + py
        ray.off.x = TILE
        ray.off.y = -ray.off.x * tan
    elif int(ray.r_angle) in (90, 270):
        ray.rayv.x, ray.rayv.y = px, py
        ray.dof = DOF
        ray.distv = FAR
    else:
        ray.rayv.x = ((int(px) >> 6) << 6) - 0.0001
        tan = math.tan(deg2rad(ray.r_angle))
        ray.rayv.y = (px - ray.rayv.x) * tan + py
        ray.off.x = -TILE
        ray.off.y = -ray.off.x * tan
    while ray.dof < DOF:
        ray.distv = FAR
        if _is_wall(game, ray.rayv.x, ray.rayv.y):
            ray.distv = dist(ray.player, ray.rayv)
            ray.dof = DOF
        else:
            ray.rayv.x += ray.off.x
            ray.rayv.y += ray.off.y
        ray.dof += 1


def _texel(texture: Image | None, row: float, col: float) -> int:
    if texture is None:
        return 0
    r = min(max(int(abs(row)), 0), texture.height - 1)
    c = min(max(int(col) % TILE, 0), texture.width - 1)
    return texture.get_pixel(c, r)


def _on_screen(x: float, y: float) -> bool:
    return 0 <= x < SCREEN_SIZE and 0 <= y < SCREEN_SIZE


def _wall_vertical(game: Game, image: Image, start: Point, end: Point, ray: Ray) -> None:
    steps = _steps(start, end)
    if steps == 0:
        return
    inc_x = (end.x - start.x) / steps
    inc_y = (end.y - start.y) / steps
    inc_t = TILE / steps
    facing_east = 90 < ray.r_angle < 270
    column = ray.rayv.y * 4
    for k in range(math.ceil(steps)):
        x = start.x + inc_x * k
        y = start.y + inc_y * k
        key = "east" if facing_east and _on_screen(x, y) else "west"
        image.put_pixel(x, y, _texel(game.textures.get(key), inc_t * k, column))


def _wall_horizontal(game: Game, image: Image, start: Point, end: Point, ray: Ray) -> None:
    steps = _steps(start, end)
    if steps == 0:
        return
    inc_x = (end.x - start.x) / steps
    inc_y = (end.y - start.y) / steps
    inc_t = TILE / steps
    key = "south" if 0 < ray.r_angle < 180 else "north"
    texture = game.textures.get(key)
    column = ray.rayh.x * 4
    for k in range(math.floor(steps) + 1):
        image.put_pixel(start.x + inc_x * k, start.y + inc_y * k,
                        _texel(texture, inc_t * k, column))


def _project(game: Game, image: Image, ray: Ray) -> None:
    vertical = ray.distv <= ray.disth
    ray.distt = (ray.distv if vertical else ray.disth) * math.cos(deg2rad(ray.angle_diff))
    if ray.distt <= 0:
        ray.distt = 1e-6
    ray.height.y = TILE * HALF / ray.distt
    ray.lines.y = HALF - ray.height.y / 2
    ray.height.y += ray.lines.y
    if vertical:
        _wall_vertical(game, image, ray.height, ray.lines, ray)
    else:
        _wall_horizontal(game, image, ray.height, ray.lines, ray)
    ray.height.x -= 1
    ray.lines.x -= 1
    if game.minimap:
        draw_line(image, ray.player, ray.rayv if vertical else ray.rayh, RAY_COLOR)
    ray.r_angle += RAY_STEP
    if ray.r_angle < 0:
        ray.r_angle += 360
    elif ray.r_angle >= 360:
        ray.r_angle -= 360


def draw_rays(game: Game, image: Image) -> None:
    """Cast one ray per screen column and draw the textured walls."""
    ray = Ray(r_angle=game.player.angle - FOV_HALF)
    if ray.r_angle < 0:
        ray.r_angle += 360
    ray.lines = Point(SCREEN_SIZE, 0)
    ray.height = Point(SCREEN_SIZE, 0)
    for _ in range(RAY_COUNT):
        ray.angle_diff = game.player.angle - ray.r_angle
        if ray.angle_diff < 0:
            ray.angle_diff += 360
        ray.player = Point(game.player.x, game.player.y)
        cast_horizontal(game, ray)
        cast_vertical(game, ray)
        for point in (ray.player, ray.rayv, ray.rayh):
            point.x /= 4
            point.y /= 4
        _project(game, image, ray)


def _draw_square(image: Image, row: int, col: int, color: int) -> None:
    top, left = row * MINIMAP_TILE, col * MINIMAP_TILE
    bottom, right = top + MINIMAP_TILE, left + MINIMAP_TILE
    for y in range(top, bottom):
        for x in range(left, right):
            edge = y == bottom - 1 or x == right - 1
            image.put_pixel(x, y, BORDER_COLOR if edge else color)


def draw_minimap(game: Game, image: Image) -> None:
    """Draw wall squares, the player marker and the facing line."""
    for row, line in enumerate(game.points[1:], start=1):
        for col, char in enumerate(line):
            if char == "1":
                _draw_square(image, row, col, WALL_COLOR)
    px, py = game.player.x, game.player.y
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            image.put_pixel(px / 4 + dx, py / 4 + dy, PLAYER_COLOR)
    tip_x = game.player.dx + px
    tip_y = game.player.dy + py
    step_x, step_y = px - tip_x, py - tip_y
    length = max(abs(step_x), abs(step_y))
    if length == 0:
        return
    step_x /= length
    step_y /= length
    i = 0
    while i <= length:
        image.put_pixel(tip_x / 4, tip_y / 4, PLAYER_COLOR)
        tip_x += step_x
        tip_y += step_y
        i += 1


def render(game: Game) -> Image:
    """Draw one complete frame of the game."""
    image = Image(game.width, game.height)
    draw_floor_ceiling(image, game.ceiling, game.floor)
    draw_rays(game, image)
    if game.minimap:
        draw_minimap(game, image)
    return image