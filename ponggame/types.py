"""Settings, enumerations and render data shared across the game."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .geometry import Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 0-255 components."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)


@dataclass
class WindowSettings:
    width: int = 1280
    height: int = 720
    fullscreen: bool = False
    vsync: bool = True
    fps_cap: int = 60
    title: str = "PongGame"


@dataclass
class MenuSettings:
    background_size_x: float = 1.0
    background_size_y: float = 1.0
    background_position_x: float = 0.0
    background_position_y: float = 0.0
    buttons_num: int = 0
    button_default_scale_x: float = 0.0
    button_default_scale_y: float = 0.0
    difficulty_button_scale_x: float = 0.0
    difficulty_button_scale_y: float = 0.0
    menu_buttons_default_position_x: float = 0.0
    menu_buttons_default_position_y: float = 0.0
    buttons_y_gap: float = 0.0
    button_continue: str = ""
    button_easy: str = ""
    button_normal: str = ""
    button_hard: str = ""
    button_settings: str = ""
    button_quit: str = ""
    character_size: int = 24
    background_color: Color = field(default_factory=Color)
    default_button_color: Color = field(default_factory=Color)
    easy_button_color: Color = field(default_factory=Color)
    normal_button_color: Color = field(default_factory=Color)
    hard_button_color: Color = field(default_factory=Color)
    text_color: Color = field(default_factory=Color)
    logo_color: Color = field(default_factory=Color)


@dataclass
class GameSettings:
    players_num: int = 2
    local_player_default_position_x: float = 0.0
    local_player_default_position_y: float = 0.0
    enemy_default_position_x: float = 0.0
    enemy_default_position_y: float = 0.0
    player_speed: float = 0.0
    enemy_speed_easy: float = 150.0
    enemy_speed: float = 0.0
    enemy_speed_hard: float = 500.0
    ball_default_radius: float = 1.0
    ball_default_position_x: float = 0.0
    ball_default_position_y: float = 0.0
    ball_speed_easy: float = 250.0
    ball_speed: float = 500.0
    ball_speed_hard: float = 750.0
    ball_speed_acceleration_easy: float = 1.01
    ball_speed_acceleration: float = 1.1
    ball_speed_acceleration_hard: float = 1.2
    ball_initial_dir_min_y: float = -0.7
    ball_initial_dir_max_y: float = 0.7
    background_split: float = 0.5
    left_bg_color: Color = field(default_factory=Color)
    right_bg_color: Color = field(default_factory=Color)
    score_text_color: Color = field(default_factory=Color)
    score_text_size: int = 48
    character_width: float = 0.01
    character_height: float = 0.2
    player_color: Color = field(default_factory=Color)
    enemy_color: Color = field(default_factory=Color)
    ball_color: Color = field(default_factory=Color)
    middle_line_width: float = 0.005
    middle_line_color: Color = field(default_factory=Color)


@dataclass
class GameDifficulty:
    """The speeds that the selected difficulty level resolves to."""

    enemy_speed: float = 0.0
    ball_speed: float = 0.0
    ball_speed_acceleration: float = 0.0


class GamePhase(IntEnum):
    MENU = 0
    GAME = 1
    TRANSIT_LEVEL = 2


class DifficultyLevel(IntEnum):
    EASY = 0
    NORMAL = 1
    HARD = 2


class SubsystemKind(IntEnum):
    INPUT_HANDLER = 0
    UI_HANDLER = 1
    GAME_FLOW_MANAGER = 2
    SAVE_GAME_MANAGER = 3
    ANIMATION_2D_MANAGER = 4
    SOUND_MANAGER = 5


class UserInput(IntEnum):
    MOVE_FORWARD = 0
    MOVE_RIGHT = 1


class MouseInput(IntEnum):
    MOUSE_BUTTON_CLICK = 0
    MOUSE_BUTTON_RELEASED = 1


@dataclass
class RenderTarget:
    """A drawable placed at a translation, with a visibility flag."""

    drawable: Any = None
    position: Vec2 = field(default_factory=Vec2)
    visible: bool = True


class RenderData:
    """An ordered buffer of render targets captured for one frame."""

    def __init__(self) -> None:
        self._targets: list[RenderTarget] = []

    def add_target(self, target: RenderTarget) -> None:
        """Store a snapshot of ``target``; the drawable itself is shared."""
        self._targets.append(dataclasses.replace(target))

    def targets(self) -> tuple[RenderTarget, ...]:
        return tuple(self._targets)

    def clear(self) -> None:
        self._targets.clear()

    def __len__(self) -> int:
        return len(self._targets)