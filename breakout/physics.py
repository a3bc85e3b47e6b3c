"""Per-tick ball physics — integration, wall, paddle and brick collisions.

All collision tests are deliberately loose: the paddle is a horizontal band
check and bricks are hit-tested with the ball's center point only. Velocities
are reflected by sign flip with no positional correction, so a ball may
overlap a wall for one tick.
"""

from typing import Union

from breakout.types import (
    BallLost,
    BoardCleared,
    BrickHit,
    GameState,
    PaddleHit,
    WallBounce,
)
from breakout import arena

Event = Union[WallBounce, PaddleHit, BrickHit, BallLost, BoardCleared]


def _integrate(state: GameState) -> GameState:
    state.ball.x += state.ball.dx
    state.ball.y += state.ball.dy
    return state


def _check_walls(state: GameState) -> tuple[GameState, list[WallBounce]]:
    """Invert dx on a side-wall crossing and dy on a ceiling crossing."""
    events: list[WallBounce] = []
    ball = state.ball

    if ball.x + ball.radius > state.width or ball.x - ball.radius < 0:
        ball.dx = -ball.dx
        side = "left" if ball.x - ball.radius < 0 else "right"
        events.append(WallBounce(x=ball.x, y=ball.y, tick=state.tick, side=side))

    if ball.y - ball.radius < 0:
        ball.dy = -ball.dy
        events.append(WallBounce(x=ball.x, y=ball.y, tick=state.tick, side="top"))

    return state, events


def _check_paddle(state: GameState) -> tuple[GameState, list[PaddleHit]]:
    """Bounce the ball upward once its bottom edge enters the paddle band.

    Only the band line and the paddle's horizontal span are tested, not the
    ball's full vertical extent against the paddle surface.
    """
    events: list[PaddleHit] = []
    ball = state.ball
    paddle = state.paddle

    in_band = ball.y + ball.radius > state.height - paddle.height
    over_paddle = paddle.x < ball.x < paddle.x + paddle.width
    if in_band and over_paddle:
        offset = ball.x - paddle.center_x
        # Always upward, whatever the incoming sign
        ball.dy = -abs(ball.dy)
        ball.dx += offset * arena.ENGLISH_FACTOR
        events.append(PaddleHit(x=ball.x, y=ball.y, tick=state.tick, offset=offset))

    return state, events


def _check_ball_lost(state: GameState) -> tuple[GameState, list[BallLost]]:
    events: list[BallLost] = []
    ball = state.ball
    if ball.y + ball.radius > state.height:
        state.game_over = True
        events.append(BallLost(x=ball.x, y=ball.y, tick=state.tick))
    return state, events


def _check_bricks(state: GameState) -> tuple[GameState, list[Union[BrickHit, BoardCleared]]]:
    """Destroy at most one brick, then decide whether the board is clear.

    Bricks are scanned in grid order and the first visible brick containing
    the ball center wins. The scan always runs to the end so it can tell
    whether any brick is still standing afterwards.
    """
    events: list[Union[BrickHit, BoardCleared]] = []
    ball = state.ball
    hit = False
    remaining = False

    for i, brick in enumerate(state.bricks):
        if not brick.visible:
            continue
        if not hit and brick.contains(ball.x, ball.y):
            brick.visible = False
            ball.dy = -ball.dy
            state.score += arena.BRICK_POINTS
            hit = True
            events.append(BrickHit(
                x=ball.x, y=ball.y, tick=state.tick,
                index=i, row=brick.row, col=brick.col,
            ))
            continue
        remaining = True

    if not remaining:
        state.game_won = True
        events.append(BoardCleared(tick=state.tick))

    return state, events


def step(state: GameState) -> list[Event]:
    """Advance the state by one tick in place.

    Returns the collision events produced during the tick. A terminal state
    is left untouched and yields no events.
    """
    if state.terminal:
        return []

    all_events: list[Event] = []
    state.tick += 1

    state = _integrate(state)

    state, wall_events = _check_walls(state)
    all_events.extend(wall_events)

    state, paddle_events = _check_paddle(state)
    all_events.extend(paddle_events)

    state, lost_events = _check_ball_lost(state)
    all_events.extend(lost_events)
    if state.game_over:
        return all_events

    state, brick_events = _check_bricks(state)
    all_events.extend(brick_events)

    return all_events
