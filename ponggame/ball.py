"""The ball: wall and paddle bounces, scoring and resets."""

from __future__ import annotations

import random
from typing import Any

from .actor import Character
from .delegate import Delegate
from .geometry import CircleShape, Rect, Vec2
from .types import GameDifficulty, GameSettings

_SEPARATION = 0.1


def circle_intersects_rect(position: Vec2, radius: float, rect: Rect) -> tuple[bool, Vec2]:
    """Test a circle against a rectangle.

    Returns whether they overlap and the circle's position pushed out of the
    rectangle along the shortest way; a centre inside the rectangle is moved
    above it.
    """
    closest_x = min(max(position.x, rect.left), rect.right())
    closest_y = min(max(position.y, rect.top), rect.bottom())
    dx = position.x - closest_x
    dy = position.y - closest_y
    distance_sq = dx * dx + dy * dy
    if distance_sq >= radius * radius:
        return False, position

    distance = distance_sq ** 0.5
    if distance < 0.0001:
        return True, Vec2(position.x, rect.top - radius)

    overlap = radius - distance
    return True, Vec2(
        position.x + dx / distance * overlap,
        position.y + dy / distance * overlap,
    )


class BounceBall(Character):
    """A ball that bounces off walls and paddles and signals scores."""

    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self.on_player_scored = Delegate()
        self.on_enemy_scored = Delegate()
        self.on_bounce = Delegate()
        self.obstacles: list[Character] = []
        self.reset_position = Vec2()
        self.initial_direction_fan = (0.0, 0.0)
        self.acceleration = 1.0
        self._rng = rng or random.Random()

    def _radius(self) -> float:
        shape = self.render_target.drawable
        if not isinstance(shape, CircleShape):
            raise TypeError("the ball needs a circle drawable")
        return shape.radius

    def tick(self, delta: float) -> None:
        if self.world is None:
            raise RuntimeError("the ball is not attached to a world")
        position = (
            self.render_target.position
            + self.move_direction * (self.movement_velocity * delta)
        )
        position = self._handle_wall_collision(position)
        position = self._handle_character_collision(position)
        self.render_target.position = position

        width = self.world.window_size.x
        if position.x < 0.0:
            self.on_enemy_scored.broadcast()
            self.reset()
        if position.x > width:
            self.on_player_scored.broadcast()
            self.reset()

    def initialize(self, world: Any, settings: GameSettings, window_size: Vec2) -> None:
        """Take speed, start point and launch angles from ``settings``, then reset."""
        if world is None:
            return
        self.world = world
        self.movement_velocity = settings.ball_speed
        self.reset_position = Vec2(
            settings.ball_default_position_x * window_size.x,
            settings.ball_default_position_y * window_size.y,
        )
        self.initial_direction_fan = (
            settings.ball_initial_dir_min_y,
            settings.ball_initial_dir_max_y,
        )
        self.reset()

    def add_obstacle(self, obstacle: Character) -> None:
        self.obstacles.append(obstacle)

    def reset(self) -> None:
        """Return to the start point with a random launch direction."""
        self.render_target.position = self.reset_position
        dir_x = self._rng.choice((-1.0, 1.0))
        low, high = self.initial_direction_fan
        dir_y = low + self._rng.random() * (high - low)
        self.move_direction = Vec2(dir_x, dir_y).normalized()

    def on_difficulty_changed(self, difficulty: GameDifficulty) -> None:
        self.movement_velocity = difficulty.ball_speed
        self.acceleration = difficulty.ball_speed_acceleration

    def _handle_wall_collision(self, position: Vec2) -> Vec2:
        radius = self._radius()
        top = 0.0
        bottom = self.world.window_size.y
        if position.y - radius <= top:
            position = Vec2(position.x, top + radius)
            self.move_direction = Vec2(self.move_direction.x, -self.move_direction.y)
            self.on_bounce.broadcast(None)
        if position.y + radius >= bottom:
            position = Vec2(position.x, bottom - radius)
            self.move_direction = Vec2(self.move_direction.x, -self.move_direction.y)
            self.on_bounce.broadcast(None)
        return position

    def _handle_character_collision(self, position: Vec2) -> Vec2:
        radius = self._radius()
        for obstacle in self.obstacles:
            rect = obstacle.bounds()
            hit, position = circle_intersects_rect(position, radius, rect)
            if not hit:
                continue
            paddle_center_x = rect.left + rect.width * 0.5
            moving_right = self.move_direction.x > 0
            ball_to_left = position.x < paddle_center_x
            if moving_right == ball_to_left:
                position = self._bounce(rect, position, radius)
                self.on_bounce.broadcast(obstacle)
                self.movement_velocity *= self.acceleration
                break
        return position

    def _bounce(self, rect: Rect, position: Vec2, radius: float) -> Vec2:
        center_y = rect.top + rect.height * 0.5
        normalized = (position.y - center_y) / (rect.height * 0.5)
        normalized = min(max(normalized, -1.0), 1.0)
        self.move_direction = Vec2(-self.move_direction.x, normalized).normalized()
        if self.move_direction.x > 0:
            x = rect.right() + radius + _SEPARATION
        else:
            x = rect.left - radius - _SEPARATION
        return Vec2(x, position.y)