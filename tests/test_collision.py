"""Tests for collision detection and response."""

import pytest

from breakout.game.entities.ball import Ball, BallConfig
from breakout.game.entities.brick import Brick
from breakout.game.entities.paddle import Paddle, PaddleConfig
from breakout.game.physics.collision import (
    check_brick_collision,
    check_paddle_collision,
    check_wall_collision,
    is_horizontal_hit,
    resolve_brick_collision,
    resolve_paddle_collision,
)

WIDTH = 1425
HEIGHT = 800


@pytest.fixture
def cfg():
    return BallConfig(radius=12.0)


@pytest.fixture
def brick():
    return Brick(135, 50, x=100, y=100)


@pytest.fixture
def paddle():
    # Left edge 597.5, top 760, center 712.5
    return Paddle(PaddleConfig(), WIDTH, HEIGHT)


class TestWallCollision:
    """Tests for wall bounces and the floor."""

    def test_open_space_unchanged(self, cfg):
        ball = Ball(cfg, 700, 400, 3, -4)
        new_ball, fell = check_wall_collision(ball, WIDTH, HEIGHT)
        assert (new_ball.dx, new_ball.dy) == (3, -4)
        assert not fell

    def test_right_wall_flips_dx(self, cfg):
        ball = Ball(cfg, 1410, 400, 5, -4)
        new_ball, fell = check_wall_collision(ball, WIDTH, HEIGHT)
        assert (new_ball.dx, new_ball.dy) == (-5, -4)
        assert not fell

    def test_left_wall_flips_dx(self, cfg):
        ball = Ball(cfg, 15, 400, -5, -4)
        new_ball, _ = check_wall_collision(ball, WIDTH, HEIGHT)
        assert new_ball.dx == 5

    def test_exactly_at_boundary_does_not_flip(self, cfg):
        # 1408 + 5 == 1413 == WIDTH - radius, not beyond it
        ball = Ball(cfg, 1408, 400, 5, -4)
        new_ball, _ = check_wall_collision(ball, WIDTH, HEIGHT)
        assert new_ball.dx == 5

    def test_ceiling_flips_dy(self, cfg):
        ball = Ball(cfg, 700, 14, 2, -5)
        new_ball, fell = check_wall_collision(ball, WIDTH, HEIGHT)
        assert (new_ball.dx, new_ball.dy) == (2, 5)
        assert not fell

    def test_corner_flips_both(self, cfg):
        ball = Ball(cfg, 15, 14, -5, -5)
        new_ball, _ = check_wall_collision(ball, WIDTH, HEIGHT)
        assert (new_ball.dx, new_ball.dy) == (5, 5)

    def test_bounce_keeps_speed(self, cfg):
        ball = Ball(cfg, 1410, 14, 3, -4)
        new_ball, _ = check_wall_collision(ball, WIDTH, HEIGHT)
        assert new_ball.speed == pytest.approx(ball.speed)

    def test_floor_is_not_a_bounce(self, cfg):
        ball = Ball(cfg, 700, 783, 0, 5)
        new_ball, fell = check_wall_collision(ball, WIDTH, HEIGHT)
        assert fell
        assert new_ball.dy == 5

    def test_above_floor(self, cfg):
        ball = Ball(cfg, 700, 782, 0, 5)
        _, fell = check_wall_collision(ball, WIDTH, HEIGHT)
        assert not fell

    def test_position_not_changed(self, cfg):
        ball = Ball(cfg, 1410, 14, 5, -5)
        new_ball, _ = check_wall_collision(ball, WIDTH, HEIGHT)
        assert (new_ball.x, new_ball.y) == (1410, 14)


class TestBrickCollision:
    """Tests for ball-brick overlap and bounce direction."""

    def test_overlap(self, cfg, brick):
        assert check_brick_collision(Ball(cfg, 90, 120), brick)

    def test_no_overlap(self, cfg, brick):
        assert not check_brick_collision(Ball(cfg, 80, 120), brick)

    def test_touching_edge_is_not_overlap(self, cfg, brick):
        # Ball right edge exactly at brick left edge
        assert not check_brick_collision(Ball(cfg, 88, 120), brick)
        # Ball top exactly at brick bottom
        assert not check_brick_collision(Ball(cfg, 150, 162), brick)

    def test_destroyed_brick_never_collides(self, cfg, brick):
        assert not check_brick_collision(Ball(cfg, 150, 120), brick.destroy())

    def test_side_approach_is_horizontal(self, cfg, brick):
        # Previous right edge: 90 + 12 - 5 = 97 <= 100
        ball = Ball(cfg, 90, 125, 5, 1)
        assert is_horizontal_hit(ball, brick)
        bounced = resolve_brick_collision(ball, brick)
        assert (bounced.dx, bounced.dy) == (-5, 1)

    def test_right_side_approach_is_horizontal(self, cfg, brick):
        # Previous left edge: 245 - 12 + 5 = 238 >= 235
        ball = Ball(cfg, 245, 125, -5, 1)
        assert is_horizontal_hit(ball, brick)
        assert resolve_brick_collision(ball, brick).dx == 5

    def test_top_approach_is_vertical(self, cfg, brick):
        ball = Ball(cfg, 150, 92, 2, 5)
        assert not is_horizontal_hit(ball, brick)
        bounced = resolve_brick_collision(ball, brick)
        assert (bounced.dx, bounced.dy) == (2, -5)

    def test_bottom_approach_is_vertical(self, cfg, brick):
        ball = Ball(cfg, 150, 158, -2, -5)
        bounced = resolve_brick_collision(ball, brick)
        assert (bounced.dx, bounced.dy) == (-2, 5)


class TestPaddleCollision:
    """Tests for ball-paddle detection and re-aim."""

    def test_hit(self, cfg, paddle):
        assert check_paddle_collision(Ball(cfg, 712.5, 750, 0, 3), paddle)

    def test_above_paddle(self, cfg, paddle):
        assert not check_paddle_collision(Ball(cfg, 712.5, 748, 0, 3), paddle)

    def test_outside_paddle_span(self, cfg, paddle):
        assert not check_paddle_collision(Ball(cfg, 590, 750, 0, 3), paddle)
        assert not check_paddle_collision(Ball(cfg, 830, 750, 0, 3), paddle)

    def test_edges_are_exclusive(self, cfg, paddle):
        assert not check_paddle_collision(Ball(cfg, paddle.x, 750, 0, 3), paddle)
        assert not check_paddle_collision(Ball(cfg, paddle.right, 750, 0, 3), paddle)

    def test_resolve_center(self, cfg, paddle):
        bounced = resolve_paddle_collision(Ball(cfg, 712.5, 755, 3, 4), paddle)
        assert bounced.dx == pytest.approx(0.0)
        assert bounced.dy == -4
        assert bounced.y == 748

    def test_resolve_near_left_edge(self, cfg, paddle):
        bounced = resolve_paddle_collision(Ball(cfg, paddle.x + 0.001, 755, 3, 4), paddle)
        assert bounced.dx == pytest.approx(-5.0, abs=1e-3)

    def test_resolve_near_right_edge(self, cfg, paddle):
        bounced = resolve_paddle_collision(Ball(cfg, paddle.right - 0.001, 755, -3, 4), paddle)
        assert bounced.dx == pytest.approx(5.0, abs=1e-3)

    def test_resolve_upward_ball_stays_upward(self, cfg, paddle):
        bounced = resolve_paddle_collision(Ball(cfg, 700, 755, 1, -4), paddle)
        assert bounced.dy == -4
