"""The computer-controlled paddle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .actor import Actor, Character
from .geometry import RectangleShape, Vec2
from .types import GameDifficulty

if TYPE_CHECKING:
    from .ball import BounceBall

_DEAD_ZONE = 5.0


class EnemyCharacter(Character):
    """A paddle that tracks the ball vertically within its movement bounds."""

    def __init__(self) -> None:
        super().__init__()
        self.target_ball: BounceBall | Actor | None = None

    def tick(self, delta: float) -> None:
        if self.target_ball is None:
            return
        shape = self.render_target.drawable
        if not isinstance(shape, RectangleShape):
            return

        position = self.render_target.position
        size = shape.size
        ball_y = self.target_ball.render_target.position.y
        offset = ball_y - (position.y + size.y * 0.5)

        direction = 0.0
        if abs(offset) > _DEAD_ZONE:
            direction = 1.0 if offset > 0.0 else -1.0

        y = position.y + direction * self.movement_velocity * delta
        bounds = self.movement_bounds
        if y < bounds.top:
            y = bounds.top
        if y + size.y > bounds.bottom():
            y = bounds.bottom() - size.y

        self.render_target.position = Vec2(position.x, y)

    def add_target(self, ball: BounceBall | Actor | None) -> None:
        self.target_ball = ball

    def on_difficulty_changed(self, difficulty: GameDifficulty) -> None:
        self.movement_velocity = difficulty.enemy_speed