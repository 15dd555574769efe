"""The invisible actor that turns raw window input into game events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .actor import Actor
from .delegate import Delegate
from .geometry import Vec2
from .types import MouseInput, UserInput


class EventKind(Enum):
    KEY_PRESSED = "key_pressed"
    MOUSE_BUTTON_RELEASED = "mouse_button_released"
    CLOSED = "closed"


@dataclass(frozen=True)
class InputEvent:
    """One window event; ``key`` is a lower-case key name."""

    kind: EventKind
    key: str | None = None
    position: Vec2 = field(default_factory=Vec2)


class PlayerController(Actor):
    """Broadcasts escape, mouse and movement events from the frame's input.

    ``input_events`` holds the events polled this frame and ``pressed_keys``
    the names of the keys currently held down.
    """

    def __init__(self) -> None:
        super().__init__()
        self.on_move_event = Delegate()
        self.on_mouse_event = Delegate()
        self.on_escape = Delegate()
        self.input_events: list[InputEvent] = []
        self.pressed_keys: set[str] = set()

    def tick(self, delta: float) -> None:
        for event in self.input_events:
            if event.kind is EventKind.KEY_PRESSED and event.key == "escape":
                self.on_escape.broadcast()
            if event.kind is EventKind.MOUSE_BUTTON_RELEASED:
                self.on_mouse_event.broadcast(MouseInput.MOUSE_BUTTON_RELEASED, event.position)

        forward = 0.0
        right = 0.0
        if "w" in self.pressed_keys:
            forward -= 1.0
        if "s" in self.pressed_keys:
            forward += 1.0
        if "a" in self.pressed_keys:
            right -= 1.0
        if "d" in self.pressed_keys:
            right += 1.0

        if forward != 0.0:
            self.on_move_event.broadcast(UserInput.MOVE_FORWARD, forward)
        if right != 0.0:
            self.on_move_event.broadcast(UserInput.MOVE_RIGHT, right)