"""Builds the actors of the main menu and of a game level."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .ball import BounceBall
from .controlled import ControlledCharacter
from .enemy import EnemyCharacter
from .geometry import CircleShape, Rect, RectangleShape, TextShape, Vec2
from .types import DifficultyLevel, GameSettings, MenuSettings, RenderTarget
from .widget import Widget

LOGO_TEXT = "PongGame"
_SCORE_TEXT_TOP = 10.0


def _centered(text: TextShape, box_position: Vec2, box_size: Vec2) -> Vec2:
    """Position that centres ``text`` inside the box."""
    bounds = text.local_bounds()
    return Vec2(
        box_position.x + (box_size.x - bounds.width) * 0.5 - bounds.left,
        box_position.y + (box_size.y - bounds.height) * 0.5 - bounds.top,
    )


@dataclass
class MenuScene:
    """The widgets of the menu, in drawing order."""

    background: Widget
    logo: Widget
    continue_button: Widget
    settings_button: Widget
    quit_button: Widget
    easy_button: Widget
    normal_button: Widget
    hard_button: Widget

    @property
    def buttons(self) -> list[Widget]:
        """Every widget whose release the menu reacts to."""
        return [
            self.continue_button,
            self.settings_button,
            self.quit_button,
            self.easy_button,
            self.normal_button,
            self.hard_button,
        ]

    @property
    def actors(self) -> list[Widget]:
        return [self.background, self.logo, *self.buttons]


@dataclass
class GameScene:
    """The actors of a level and the two score labels."""

    left_background: Widget
    right_background: Widget
    player: ControlledCharacter
    enemy: EnemyCharacter
    ball: BounceBall
    splitter: Widget
    player_score: TextShape
    enemy_score: TextShape

    @property
    def actors(self) -> list[Any]:
        return [
            self.left_background,
            self.right_background,
            self.player,
            self.enemy,
            self.splitter,
            self.ball,
        ]


def build_menu(
    settings: MenuSettings,
    window_size: Vec2,
    difficulty: DifficultyLevel,
    visible: bool = True,
) -> MenuScene:
    """Create the menu widgets laid out for a window of ``window_size``."""
    width, height = window_size.x, window_size.y

    background = Widget()
    background.focusable = False
    background.render_target = RenderTarget(
        RectangleShape(
            size=Vec2(settings.background_size_x * width, settings.background_size_y * height),
            fill_color=settings.background_color.to_tuple(),
        ),
        Vec2(settings.background_position_x * width, settings.background_position_y * height),
        visible,
    )

    cursor = Vec2(
        settings.menu_buttons_default_position_x * width,
        settings.menu_buttons_default_position_y * height,
    )
    button_size = Vec2(
        settings.button_default_scale_x * width, settings.button_default_scale_y * height
    )
    difficulty_size = Vec2(
        settings.difficulty_button_scale_x * width,
        settings.difficulty_button_scale_y * height,
    )
    skip = settings.buttons_y_gap * height
    character_size = settings.character_size
    text_color = settings.text_color.to_tuple()

    logo = Widget()
    logo.set_unhovered()
    logo_text = TextShape(
        LOGO_TEXT, character_size * 2, settings.logo_color.to_tuple()
    )
    logo_box = Vec2(cursor.x, cursor.y - button_size.y - skip)
    logo.render_text = RenderTarget(
        logo_text, _centered(logo_text, logo_box, button_size), visible
    )

    def make_button(name: str, position: Vec2, size: Vec2) -> Widget:
        button = Widget()
        button.render_target = RenderTarget(RectangleShape(size=size), position, visible)
        label = TextShape(name, character_size, text_color)
        button.render_text = RenderTarget(label, _centered(label, position, size), visible)
        button.set_unhovered()
        return button

    def menu_button(name: str, double_skip: bool = False) -> Widget:
        nonlocal cursor
        button = make_button(name, cursor, button_size)
        button.render_target.drawable.fill_color = settings.default_button_color.to_tuple()
        extra = skip + button_size.y if double_skip else 0.0
        cursor = Vec2(cursor.x, cursor.y + skip + extra)
        return button

    def difficulty_button(name: str) -> Widget:
        nonlocal cursor
        button = make_button(name, cursor, difficulty_size)
        cursor = Vec2(cursor.x + difficulty_size.x + skip, cursor.y)
        return button

    continue_button = menu_button(settings.button_continue, double_skip=True)
    settings_button = menu_button(settings.button_settings)
    quit_button = menu_button(settings.button_quit)

    cursor = Vec2(
        settings.menu_buttons_default_position_x * width,
        settings.menu_buttons_default_position_y * height
        + settings.menu_buttons_default_position_y
        + skip,
    )
    easy_button = difficulty_button(settings.button_easy)
    normal_button = difficulty_button(settings.button_normal)
    hard_button = difficulty_button(settings.button_hard)

    easy_button.render_target.drawable.fill_color = settings.easy_button_color.to_tuple()
    normal_button.render_target.drawable.fill_color = settings.normal_button_color.to_tuple()
    hard_button.render_target.drawable.fill_color = settings.hard_button_color.to_tuple()

    selected = {
        DifficultyLevel.EASY: easy_button,
        DifficultyLevel.NORMAL: normal_button,
        DifficultyLevel.HARD: hard_button,
    }[DifficultyLevel(difficulty)]
    selected.set_hovered()

    return MenuScene(
        background=background,
        logo=logo,
        continue_button=continue_button,
        settings_button=settings_button,
        quit_button=quit_button,
        easy_button=easy_button,
        normal_button=normal_button,
        hard_button=hard_button,
    )


def _score_label(settings: GameSettings) -> TextShape:
    return TextShape("0", settings.score_text_size, settings.score_text_color.to_tuple())


def build_game(settings: GameSettings, window_size: Vec2, world: Any) -> GameScene:
    """Create the level's actors; paddles and ball follow ``world``'s difficulty."""
    width, height = window_size.x, window_size.y
    half_width = width * settings.background_split

    left_background = Widget()
    left_background.focusable = False
    left_background.render_target = RenderTarget(
        RectangleShape(size=Vec2(half_width, height), fill_color=settings.left_bg_color.to_tuple()),
        Vec2(0.0, 0.0),
    )
    player_score = _score_label(settings)
    bounds = player_score.local_bounds()
    left_background.render_text = RenderTarget(
        player_score,
        Vec2((half_width - bounds.width) * 0.5 - bounds.left, _SCORE_TEXT_TOP),
    )

    right_background = Widget()
    right_background.render_target = RenderTarget(
        RectangleShape(size=Vec2(half_width, height), fill_color=settings.right_bg_color.to_tuple()),
        Vec2(half_width, 0.0),
    )
    enemy_score = _score_label(settings)
    bounds = enemy_score.local_bounds()
    right_background.render_text = RenderTarget(
        enemy_score,
        Vec2(half_width + (half_width - bounds.width) * 0.5 - bounds.left, _SCORE_TEXT_TOP),
    )

    paddle_size = Vec2(settings.character_width * width, settings.character_height * height)

    player = ControlledCharacter()
    player.render_target = RenderTarget(
        RectangleShape(size=paddle_size, fill_color=settings.player_color.to_tuple()),
        Vec2(
            settings.local_player_default_position_x * width,
            settings.local_player_default_position_y * height,
        ),
    )
    player.movement_bounds = Rect(0.0, 0.0, width * settings.background_split / 2.0, height)
    player.movement_velocity = settings.player_speed

    enemy = EnemyCharacter()
    enemy.bind_world(world)
    enemy.render_target = RenderTarget(
        RectangleShape(size=paddle_size, fill_color=settings.enemy_color.to_tuple()),
        Vec2(
            settings.enemy_default_position_x * width,
            settings.enemy_default_position_y * height,
        ),
    )
    enemy.movement_bounds = Rect(half_width, 0.0, half_width, height)

    ball = BounceBall()
    ball.initialize(world, settings, window_size)
    ball.add_obstacle(player)
    ball.add_obstacle(enemy)
    ball.bind_world(world)
    radius = settings.ball_default_radius * width / 100.0 * height / 100.0
    ball.render_target = RenderTarget(
        CircleShape(
            radius=radius,
            fill_color=settings.ball_color.to_tuple(),
            origin=Vec2(radius, radius),
        ),
        Vec2(
            settings.ball_default_position_x * width,
            settings.ball_default_position_y * height,
        ),
    )

    splitter = Widget()
    splitter.focusable = False
    line_width = settings.middle_line_width * width
    splitter.render_target = RenderTarget(
        RectangleShape(size=Vec2(line_width, height), fill_color=settings.middle_line_color.to_tuple()),
        Vec2(half_width - line_width * 0.5, 0.0),
    )

    enemy.add_target(ball)

    return GameScene(
        left_background=left_background,
        right_background=right_background,
        player=player,
        enemy=enemy,
        ball=ball,
        splitter=splitter,
        player_score=player_score,
        enemy_score=enemy_score,
    )