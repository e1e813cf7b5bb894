"""Collision detection and response for Breakout.

Handles ball-wall, ball-paddle, and ball-brick collisions. Wall and loss
checks look at the pending displacement (where the ball will be after this
tick's integration), not its current position.
"""

from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle
    from ..entities.brick import Brick


def check_wall_collision(
    ball: 'Ball',
    arena_width: float,
    arena_height: float,
) -> Tuple['Ball', bool]:
    """Check and handle ball-wall collisions.

    Side walls negate dx and the ceiling negates dy when the next position
    would cross them. The floor does not bounce.

    Args:
        ball: Ball to check
        arena_width: Arena width in pixels
        arena_height: Arena height in pixels

    Returns:
        Tuple of (updated ball, True if ball is about to cross the floor)
    """
    new_ball = ball
    r = ball.radius

    next_x = new_ball.x + new_ball.dx
    if next_x > arena_width - r or next_x < r:
        new_ball = new_ball.bounce_horizontal()

    if new_ball.y + new_ball.dy < r:
        new_ball = new_ball.bounce_vertical()

    fell_below = new_ball.y + new_ball.dy >= arena_height - r
    return new_ball, fell_below


def check_brick_collision(ball: 'Ball', brick: 'Brick') -> bool:
    """Check if the ball's bounding square overlaps an alive brick.

    Edges that only touch do not count.

    Args:
        ball: Ball to check
        brick: Brick to check against

    Returns:
        True if ball hits brick
    """
    if not brick.is_alive:
        return False

    ball_left, ball_top, ball_right, ball_bottom = ball.get_bounds()
    brick_left, brick_top, brick_right, brick_bottom = brick.get_bounds()

    return (ball_right > brick_left and ball_left < brick_right and
            ball_bottom > brick_top and ball_top < brick_bottom)


def is_horizontal_hit(ball: 'Ball', brick: 'Brick') -> bool:
    """Guess whether the ball came in from the brick's left or right side.

    Steps the ball's x-extent back by one tick of dx. If it was then fully
    left or fully right of the brick, the hit is horizontal. This is an
    approximation, not a swept test.

    Args:
        ball: Ball overlapping the brick
        brick: Brick that was hit

    Returns:
        True for a side hit, False for a top/bottom hit
    """
    brick_left, _, brick_right, _ = brick.get_bounds()
    return (ball.x + ball.radius - ball.dx <= brick_left or
            ball.x - ball.radius - ball.dx >= brick_right)


def resolve_brick_collision(ball: 'Ball', brick: 'Brick') -> 'Ball':
    """Bounce the ball off a brick it overlaps.

    Args:
        ball: Ball that hit the brick
        brick: Brick that was hit

    Returns:
        Ball with dx negated for a side hit, otherwise dy negated
    """
    if is_horizontal_hit(ball, brick):
        return ball.bounce_horizontal()
    return ball.bounce_vertical()


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball is on the paddle.

    The ball's bottom must be below the paddle top and its center strictly
    between the paddle's left and right edges.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    return (ball.y + ball.radius > paddle.y and
            paddle.x < ball.x < paddle.right)


def resolve_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> 'Ball':
    """Re-aim the ball off the paddle it hit."""
    return ball.bounce_off_paddle(
        paddle.center_x,
        paddle.width,
        paddle.y,
        paddle.aim_speed,
    )
