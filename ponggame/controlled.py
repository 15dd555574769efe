"""The paddle moved by the local player."""

from __future__ import annotations

from .actor import Character
from .geometry import RectangleShape, Vec2
from .types import UserInput


class ControlledCharacter(Character):
    """A paddle that follows player input and stays inside its movement bounds."""

    def __init__(self) -> None:
        super().__init__()
        self.input_forward = 0.0
        self.input_right = 0.0

    def tick(self, delta: float) -> None:
        move = Vec2(
            self.input_right * self.movement_velocity * delta,
            self.input_forward * self.movement_velocity * delta,
        )
        if move.x == 0.0 and move.y == 0.0:
            self._clear_input()
            return

        shape = self.render_target.drawable
        if not isinstance(shape, RectangleShape):
            return

        position = self.render_target.position + move
        size = shape.size
        bounds = self.movement_bounds
        x, y = position.x, position.y
        if x < bounds.left:
            x = bounds.left
        if x + size.x > bounds.right():
            x = bounds.right() - size.x
        if y < bounds.top:
            y = bounds.top
        if y + size.y > bounds.bottom():
            y = bounds.bottom() - size.y

        self.render_target.position = Vec2(x, y)
        self._clear_input()

    def on_move(self, user_input: UserInput, value: float) -> None:
        if user_input == UserInput.MOVE_FORWARD:
            self.input_forward = value
        elif user_input == UserInput.MOVE_RIGHT:
            self.input_right = value

    def _clear_input(self) -> None:
        self.input_forward = 0.0
        self.input_right = 0.0