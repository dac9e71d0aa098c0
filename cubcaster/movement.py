"""Moving the player with wall collision."""

from __future__ import annotations

from collections.abc import Sequence

from cubcaster.framebuffer import Image
from cubcaster.raycast import render
from cubcaster.state import Game

_TILE = 64
_REACH = 15
_OFFSETS = ((0, 0), (-_REACH, -_REACH), (0, -_REACH), (-_REACH, 0),
            (_REACH, _REACH), (0, _REACH), (_REACH, 0), (-_REACH, _REACH),
            (_REACH, -_REACH))


def _cell(points: Sequence[str], row: int, col: int) -> str:
    if not 0 <= row < len(points):
        return ""
    line = points[row]
    return line[col] if 0 <= col < len(line) else ""


def collides(points: Sequence[str], x: float, y: float) -> bool:
    """Return True when the player's box at (x, y) touches a wall cell."""
    row0, col0 = int(y), int(x)
    return any(
        _cell(points, int((row0 + dr) / _TILE), int((col0 + dc) / _TILE)) == "1"
        for dr, dc in _OFFSETS
    )


def _shift(game: Game, dx: float, dy: float) -> None:
    player = game.player
    player.x += dx
    if collides(game.points, player.x, player.y):
        player.x -= dx
    player.y += dy
    if collides(game.points, player.x, player.y):
        player.y -= dy


def move(game: Game) -> Image:
    """Apply held keys for one tick and return the newly drawn frame."""
    player, keys = game.player, game.direction
    player.turn(keys)
    player.update_step(keys)
    if keys.w:
        _shift(game, player.dx, player.dy)
    if keys.s:
        _shift(game, -player.dx, -player.dy)
    if keys.a:
        _shift(game, player.dy, -player.dx)
    if keys.d:
        _shift(game, -player.dy, player.dx)
    return render(game)