"""Base actors: anything that is drawn and ticks, pawns that take input, and characters."""

from __future__ import annotations

from typing import Any

from .geometry import Rect, RectangleShape, Vec2
from .types import GameDifficulty, MouseInput, RenderTarget, UserInput


class Actor:
    """Something that lives in the world, is rendered and ticks every frame."""

    def __init__(self) -> None:
        self.render_target = RenderTarget()
        self.render_text = RenderTarget()

    def begin_play(self, controller: Any = None) -> None:
        """Called once before the first tick; nothing to do by default."""

    def tick(self, delta: float) -> None:
        """Advance the actor by ``delta`` seconds; nothing to do by default."""


class Pawn(Actor):
    """An actor that receives movement and mouse input from a player controller."""

    def __init__(self) -> None:
        super().__init__()
        self.world: Any = None
        self.last_move: tuple[UserInput, float] | None = None
        self.last_mouse: tuple[MouseInput, Vec2] | None = None

    def begin_play(self, controller: Any = None) -> None:
        """Subscribe to the controller's movement and mouse events."""
        if controller is None:
            return
        controller.on_move_event.bind(self, self._handle_move)
        controller.on_mouse_event.bind(self, self._handle_mouse)

    def detach(self, controller: Any) -> None:
        """Stop receiving events from ``controller``."""
        if controller is None:
            return
        controller.on_move_event.remove(self)
        controller.on_mouse_event.remove(self)

    def on_move(self, user_input: UserInput, value: float) -> None:
        """React to a movement axis; by default only remembers the latest one."""
        self.last_move = (user_input, value)

    def on_mouse_event(self, mouse_input: MouseInput, position: Vec2) -> None:
        """React to a mouse event; by default only remembers the latest one."""
        self.last_mouse = (mouse_input, position)

    def _handle_move(self, user_input: UserInput, value: float) -> None:
        self.on_move(user_input, value)

    def _handle_mouse(self, mouse_input: MouseInput, position: Vec2) -> None:
        self.on_mouse_event(mouse_input, position)


class Character(Pawn):
    """A pawn with speed, direction and a region it may move in."""

    def __init__(self) -> None:
        super().__init__()
        self.movement_velocity = 0.0
        self.move_direction = Vec2()
        self.movement_bounds = Rect()

    def bounds(self) -> Rect:
        """The rectangle the character occupies in world space."""
        shape = self.render_target.drawable
        if not isinstance(shape, RectangleShape):
            raise TypeError("character bounds need a rectangle drawable")
        return Rect.from_position_size(self.render_target.position, shape.size)

    def bind_world(self, world: Any) -> None:
        """Attach to ``world`` and follow its difficulty changes."""
        self.world = world
        if world is not None:
            world.on_game_difficulty_changed.bind(self, self._handle_difficulty_change)

    def unbind_world(self) -> None:
        """Stop following the world's difficulty changes."""
        if self.world is not None:
            self.world.on_game_difficulty_changed.remove(self)

    def on_difficulty_changed(self, difficulty: GameDifficulty) -> None:
        """Adapt to a new difficulty; ignored by default."""

    def _handle_difficulty_change(self, difficulty: GameDifficulty) -> None:
        self.on_difficulty_changed(difficulty)