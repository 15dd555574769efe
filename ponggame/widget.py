"""Menu widgets: clickable rectangles with a text label."""

from __future__ import annotations

from .actor import Pawn
from .delegate import Delegate
from .geometry import BLACK, WHITE, RectangleShape, TextShape, Vec2
from .types import MouseInput


class Widget(Pawn):
    """A rectangle that reports mouse releases inside it and shows a hover outline."""

    def __init__(self) -> None:
        super().__init__()
        self.on_mouse_released = Delegate()
        self.focusable = True
        self.default_outline_color = BLACK
        self.hover_outline_color = WHITE
        self.default_outline_thickness = 1.0
        self.hover_outline_thickness = 5.0

    def text(self) -> str:
        """The label's text, or an empty string when there is none."""
        label = self.render_text.drawable
        if isinstance(label, TextShape):
            return label.string
        return ""

    def set_hovered(self) -> None:
        self._outline(self.hover_outline_color, self.hover_outline_thickness)

    def set_unhovered(self) -> None:
        self._outline(self.default_outline_color, self.default_outline_thickness)

    def _outline(self, color, thickness: float) -> None:
        slot = self.render_target.drawable
        if isinstance(slot, RectangleShape):
            slot.outline_color = color
            slot.outline_thickness = thickness

    def on_mouse_event(self, mouse_input: MouseInput, position: Vec2) -> None:
        if mouse_input not in (MouseInput.MOUSE_BUTTON_CLICK, MouseInput.MOUSE_BUTTON_RELEASED):
            return
        slot = self.render_target.drawable
        if not isinstance(slot, RectangleShape):
            return
        area = slot.local_bounds().translated(self.render_target.position)
        if self.focusable and self.render_target.visible and area.contains(position):
            self.on_mouse_released.broadcast(self)
            self.set_hovered()