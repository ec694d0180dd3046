import math

import pytest

from cubraycaster.player import Key, Player

GRID = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]
START = 125.0


def test_angle_rad_follows_degrees():
    assert Player(START, START, 180).angle_rad == pytest.approx(math.pi)


def test_forward_then_back_returns_to_start():
    player = Player(START, START, 30)
    assert player.move_forward(GRID) is True
    assert player.move_back(GRID) is True
    assert player.x == pytest.approx(START)
    assert player.y == pytest.approx(START)


def test_forward_moves_one_step_east():
    player = Player(START, START, 0)
    player.move_forward(GRID)
    assert player.x == pytest.approx(START + 10)
    assert player.y == pytest.approx(START)


def test_left_then_right_returns_to_start():
    player = Player(START, START, 0)
    assert player.move_left(GRID) is True
    assert player.y < START
    assert player.move_right(GRID) is True
    assert player.x == pytest.approx(START)
    assert player.y == pytest.approx(START)


def test_right_strafe_moves_south_when_facing_east():
    player = Player(START, START, 0)
    player.move_right(GRID)
    assert player.y > START
    assert player.x == pytest.approx(START)


def test_wall_blocks_movement():
    player = Player(190.0, START, 0)
    assert player.move_forward(GRID) is False
    assert (player.x, player.y) == (190.0, START)


def test_turn_round_trip():
    player = Player(START, START, 90)
    assert player.turn(Key.CAMERA_RIGHT) is True
    assert player.angle == 100
    assert player.turn(Key.CAMERA_LEFT) is True
    assert player.angle == 90


def test_turn_ignores_other_keys():
    player = Player(START, START, 90)
    assert player.turn(Key.UP) is False
    assert player.angle == 90


def test_handle_key_moves_and_turns():
    player = Player(START, START, 0)
    assert player.handle_key(Key.UP, GRID) is True
    assert player.x > START
    assert player.handle_key(Key.CAMERA_LEFT, GRID) is True
    assert player.angle == -10


def test_handle_key_unknown_and_escape_change_nothing():
    player = Player(START, START, 0)
    assert player.handle_key(99, GRID) is False
    assert player.handle_key(Key.ESC, GRID) is False
    assert (player.x, player.y, player.angle) == (START, START, 0)


def test_raw_key_codes_drive_the_player():
    player = Player(START, START, 0)
    assert player.handle_key(124, GRID) is True
    assert player.angle == 10
    assert player.handle_key(123, GRID) is True
    assert player.angle == 0
    assert player.handle_key(13, GRID) is True
    assert player.x == pytest.approx(START + 10)
    assert player.handle_key(53, GRID) is False
    assert player.x == pytest.approx(START + 10)