import math

import pytest

from cubcaster.state import Direction, Game, Key, Player, deg2rad


def test_deg2rad_uses_game_pi():
    assert deg2rad(180) == pytest.approx(3.14)
    assert deg2rad(0) == 0


def test_raw_key_codes_are_recognised():
    direction = Direction()
    direction.press(65505)
    assert direction.shift is True
    assert direction.release(65307) is True
    assert Key(65361) is Key.LEFT


@pytest.mark.parametrize(
    "key, name",
    [(Key.W, "w"), (Key.A, "a"), (Key.S, "s"), (Key.D, "d"),
     (Key.LEFT, "left"), (Key.RIGHT, "right"), (Key.SHIFT, "shift")],
)
def test_press_and_release(key, name):
    direction = Direction()
    direction.press(key)
    assert getattr(direction, name) is True
    assert direction.release(key) is False
    assert getattr(direction, name) is False


def test_unknown_key_changes_nothing():
    direction = Direction()
    direction.press(12345)
    assert direction == Direction()


def test_escape_requests_quit():
    direction = Direction(w=True)
    assert direction.release(Key.ESC) is True
    assert direction.w is True


def test_turn_wraps_below_zero_to_360():
    player = Player(angle=0)
    player.turn(Direction(right=True))
    assert player.angle == 360


def test_turn_wraps_at_360_to_zero():
    player = Player(angle=359)
    player.turn(Direction(left=True))
    assert player.angle == 0


def test_turn_both_keys_cancel():
    player = Player(angle=90)
    player.turn(Direction(left=True, right=True))
    assert player.angle == 90


@pytest.mark.parametrize("angle", [0, 45, 90, 180, 270, 333])
def test_step_length_is_speed(angle):
    player = Player(angle=angle)
    player.update_step(Direction())
    assert math.hypot(player.dx, player.dy) == pytest.approx(1)
    slow = (player.dx, player.dy)
    player.update_step(Direction(shift=True))
    assert player.dx == pytest.approx(slow[0] * 3)
    assert player.dy == pytest.approx(slow[1] * 3)


def test_step_at_angle_zero_points_negative_x():
    player = Player(angle=0)
    player.update_step(Direction())
    assert player.dx == pytest.approx(-1)
    assert player.dy == pytest.approx(0)


def test_game_map_dimensions():
    game = Game(points=["111", "10N01", "111"], floor=0, ceiling=0)
    assert game.map_width == len("10N01")
    assert game.map_height == 3
    assert game.direction == Direction()