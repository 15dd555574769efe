from ponggame.actor import Actor
from ponggame.enemy import EnemyCharacter
from ponggame.geometry import Rect, RectangleShape, Vec2
from ponggame.types import GameDifficulty

SIZE = Vec2(10, 40)
BOUNDS = Rect(400, 0, 400, 600)


def make_enemy(position=Vec2(700, 200), speed=100.0):
    enemy = EnemyCharacter()
    enemy.render_target.drawable = RectangleShape(size=SIZE)
    enemy.render_target.position = position
    enemy.movement_bounds = BOUNDS
    enemy.movement_velocity = speed
    return enemy


def make_ball(position):
    ball = Actor()
    ball.render_target.position = position
    return ball


def test_without_target_stays_put():
    start = Vec2(700, 200)
    enemy = make_enemy(start)
    enemy.tick(1.0)
    assert enemy.render_target.position == start


def test_follows_ball_downwards():
    start = Vec2(700, 200)
    enemy = make_enemy(start, speed=100.0)
    enemy.add_target(make_ball(Vec2(500, 500)))
    enemy.tick(0.5)
    assert enemy.render_target.position == Vec2(start.x, start.y + 100.0 * 0.5)


def test_follows_ball_upwards():
    start = Vec2(700, 200)
    enemy = make_enemy(start, speed=100.0)
    enemy.add_target(make_ball(Vec2(500, 10)))
    enemy.tick(0.5)
    assert enemy.render_target.position == Vec2(start.x, start.y - 100.0 * 0.5)


def test_dead_zone_keeps_still():
    start = Vec2(700, 200)
    enemy = make_enemy(start)
    enemy.add_target(make_ball(Vec2(500, start.y + SIZE.y * 0.5 + 3)))
    enemy.tick(1.0)
    assert enemy.render_target.position == start


def test_clamped_to_bounds():
    enemy = make_enemy(Vec2(700, 550), speed=10000.0)
    enemy.add_target(make_ball(Vec2(500, 600)))
    enemy.tick(1.0)
    assert enemy.render_target.position.y + SIZE.y == BOUNDS.bottom()

    enemy.add_target(make_ball(Vec2(500, 0)))
    enemy.tick(1.0)
    assert enemy.render_target.position.y == BOUNDS.top


def test_difficulty_sets_speed():
    enemy = make_enemy()
    enemy.on_difficulty_changed(GameDifficulty(enemy_speed=321.0, ball_speed=9.0))
    assert enemy.movement_velocity == 321.0