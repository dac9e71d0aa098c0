from cubcaster.movement import collides, move
from cubcaster.state import Game, Key, Player

ROWS = ["1111111111"] + ["1000000001"] * 8 + ["1111111111"]


def make_game(x=352.0, y=352.0, angle=0.0):
    return Game(points=list(ROWS), floor=1, ceiling=2,
                player=Player(angle=angle, x=x, y=y))


def test_collides_open_and_wall():
    assert not collides(ROWS, 352, 352)
    assert collides(ROWS, 70, 352)
    assert collides(ROWS, 32, 32)


def test_move_forward_changes_position():
    game = make_game(angle=0.0)
    game.direction.press(Key.W)
    image = move(game)
    assert game.player.x < 352.0
    assert image.width == game.width


def test_move_backward_is_opposite():
    game = make_game(angle=0.0)
    game.direction.press(Key.S)
    move(game)
    assert game.player.x > 352.0


def test_turning_changes_angle():
    game = make_game(angle=10.0)
    game.direction.press(Key.LEFT)
    move(game)
    assert game.player.angle == 11.0


def test_wall_blocks_movement():
    game = make_game(x=80.0, y=352.0, angle=0.0)
    game.direction.press(Key.W)
    for _ in range(3):
        move(game)
    assert not collides(game.points, game.player.x, game.player.y)
    assert game.player.x >= 79.0


def test_strafe_moves_sideways():
    game = make_game(angle=0.0)
    game.direction.press(Key.D)
    move(game)
    assert game.player.y != 352.0 or game.player.x != 352.0
    assert abs(game.player.x - 352.0) < 1e-6 or abs(game.player.y - 352.0) < 1e-6