import pytest

from ponggame.controlled import ControlledCharacter
from ponggame.geometry import Rect, RectangleShape, Vec2
from ponggame.types import UserInput

SIZE = Vec2(10, 40)
BOUNDS = Rect(0, 0, 200, 300)


def make_paddle(position=Vec2(20, 100), speed=100.0):
    paddle = ControlledCharacter()
    paddle.render_target.drawable = RectangleShape(size=SIZE)
    paddle.render_target.position = position
    paddle.movement_bounds = BOUNDS
    paddle.movement_velocity = speed
    return paddle


def test_forward_input_moves_vertically():
    start = Vec2(20, 100)
    paddle = make_paddle(start, speed=100.0)
    paddle.on_move(UserInput.MOVE_FORWARD, 1.0)
    paddle.tick(0.25)
    assert paddle.render_target.position == Vec2(start.x, start.y + 100.0 * 0.25)


def test_right_input_moves_horizontally():
    start = Vec2(20, 100)
    paddle = make_paddle(start, speed=40.0)
    paddle.on_move(UserInput.MOVE_RIGHT, -1.0)
    paddle.tick(0.5)
    assert paddle.render_target.position == Vec2(start.x - 40.0 * 0.5, start.y)


def test_clamped_to_top_and_left():
    paddle = make_paddle(Vec2(2, 3), speed=1000.0)
    paddle.on_move(UserInput.MOVE_FORWARD, -1.0)
    paddle.on_move(UserInput.MOVE_RIGHT, -1.0)
    paddle.tick(1.0)
    assert paddle.render_target.position == Vec2(BOUNDS.left, BOUNDS.top)


def test_clamped_to_bottom_and_right():
    paddle = make_paddle(speed=1000.0)
    paddle.on_move(UserInput.MOVE_FORWARD, 1.0)
    paddle.on_move(UserInput.MOVE_RIGHT, 1.0)
    paddle.tick(1.0)
    position = paddle.render_target.position
    assert position.x + SIZE.x == pytest.approx(BOUNDS.right())
    assert position.y + SIZE.y == pytest.approx(BOUNDS.bottom())


def test_input_is_consumed_by_tick():
    paddle = make_paddle()
    paddle.on_move(UserInput.MOVE_FORWARD, 1.0)
    paddle.tick(0.1)
    moved = paddle.render_target.position
    paddle.tick(0.1)
    assert paddle.render_target.position == moved
    assert (paddle.input_forward, paddle.input_right) == (0.0, 0.0)


def test_no_input_keeps_position():
    start = Vec2(20, 100)
    paddle = make_paddle(start)
    paddle.tick(1.0)
    assert paddle.render_target.position == start