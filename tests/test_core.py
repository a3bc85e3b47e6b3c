"""Tests for the simulation core API."""

import dataclasses
import math
import random
import threading

import pytest

from breakout.types import Ball, BrickHit, Snapshot
from breakout.core import SimulationCore, build_bricks, create_state
from breakout.autopilot import Autopilot
from breakout import arena


def test_initial_grid_layout():
    """5x8 grid with equal-width bricks padded on both ends."""
    bricks = build_bricks()
    assert len(bricks) == 40

    brick_w = (800 - 9 * 10) / 8
    assert all(b.width == pytest.approx(brick_w) for b in bricks)
    assert all(b.height == arena.BRICK_HEIGHT for b in bricks)

    assert (bricks[0].x, bricks[0].y) == (10, 40)
    # Row 1, column 1
    assert bricks[9].x == pytest.approx(brick_w + 10 + 10)
    assert bricks[9].y == 70
    # Last brick ends one padding short of the right wall
    assert bricks[-1].x + bricks[-1].width == pytest.approx(790)


def test_initial_colors_by_row():
    """Every brick in a row shares that row's palette color."""
    for b in build_bricks():
        assert b.color == arena.BRICK_PALETTE[b.row]


def test_initial_state():
    """Fresh match: centered paddle, ball above it moving up-right, nothing scored."""
    snap = SimulationCore().initialize()
    assert snap.paddle.x == 350
    assert snap.paddle.y == 590
    assert (snap.ball.x, snap.ball.y) == (400, 570)
    assert (snap.ball.dx, snap.ball.dy) == (4, -4)
    assert snap.ball.radius == 8
    assert snap.score == 0
    assert snap.game_over is False
    assert snap.game_won is False
    assert snap.bricks_remaining == 40
    assert len(snap.visible_bricks) == 40


@pytest.mark.parametrize("raw_x", [-1e9, -100, -0.1, 0, 123.5, 700, 700.1, 1000, 1e9])
def test_paddle_clamp(raw_x):
    """Paddle x always lands in [0, W - width]."""
    core = SimulationCore()
    core.set_paddle_target(raw_x)
    x = core.state.paddle.x
    assert 0 <= x <= arena.ARENA_WIDTH - arena.PADDLE_WIDTH
    assert x == max(0, min(700, raw_x))


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, 10**400, -10**400, None, "100", True])
def test_invalid_paddle_input_ignored(bad):
    """Non-finite or non-numeric input leaves the paddle where it was."""
    core = SimulationCore()
    core.set_paddle_target(200)
    core.set_paddle_target(bad)
    assert core.state.paddle.x == 200


def test_latest_input_wins():
    """Only the last input before a tick matters."""
    core = SimulationCore()
    for x in (10, 500, 42):
        core.set_paddle_target(x)
    snap = core.advance()
    assert snap.paddle.x == 42


def test_determinism():
    """Identical input sequences produce identical snapshot sequences."""
    rng = random.Random(7)
    inputs = [rng.uniform(-50, 850) for _ in range(1500)]

    def run():
        core = SimulationCore()
        core.initialize()
        snaps = []
        for x in inputs:
            core.set_paddle_target(x)
            snaps.append(core.advance())
        return snaps

    assert run() == run()


def test_freeze_on_terminal():
    """After game over, advance() changes nothing."""
    state = create_state()
    state.ball = Ball(x=400, y=595, dx=0, dy=6)
    core = SimulationCore(state)
    core.set_paddle_target(0)
    first = core.advance()
    assert first.game_over is True

    for _ in range(10):
        core.set_paddle_target(500)
        snap = core.advance()
        assert snap.ball == first.ball
        assert snap.score == first.score
        assert snap.bricks == first.bricks
        assert snap.tick == first.tick
    assert core.last_events == []


def test_invariants_over_long_match():
    """Brick count never grows, drops by at most one, and score tracks it."""
    random.seed(3)
    pilot = Autopilot("P", "steady")
    core = SimulationCore()
    snap = core.initialize()
    prev_visible = snap.bricks_remaining

    for _ in range(4000):
        core.set_paddle_target(pilot.target_x(snap))
        snap = core.advance()
        visible = snap.bricks_remaining
        assert 0 <= prev_visible - visible <= 1
        assert snap.score == 10 * (40 - visible)
        assert not (snap.game_over and snap.game_won)
        if visible == 0:
            assert snap.game_won
        prev_visible = visible
        if snap.terminal:
            break


def test_full_clear():
    """40 single-brick ticks clear the board: won, 400 points, not lost."""
    core = SimulationCore()
    core.initialize()

    for i, brick in enumerate(core.state.bricks):
        ball = core.state.ball
        ball.x = brick.x + brick.width / 2 - ball.dx
        ball.y = brick.y + brick.height / 2 - ball.dy
        snap = core.advance()
        assert snap.bricks_remaining == 40 - i - 1
        assert any(isinstance(e, BrickHit) for e in core.last_events)
        if i < 39:
            assert snap.game_won is False

    assert snap.game_won is True
    assert snap.game_over is False
    assert snap.score == 400

    # Board cleared: further ticks change nothing
    for _ in range(10):
        core.set_paddle_target(0)
        frozen = core.advance()
        assert frozen.ball == snap.ball
        assert frozen.score == 400
        assert frozen.bricks == snap.bricks
        assert frozen.tick == snap.tick
        assert frozen.game_won is True
        assert frozen.game_over is False
    assert core.last_events == []


def test_restart_replaces_state():
    """initialize() after a loss gives a completely fresh match."""
    state = create_state()
    state.ball = Ball(x=400, y=595, dx=0, dy=6)
    core = SimulationCore(state)
    lost = core.advance()
    assert lost.game_over

    fresh = core.initialize()
    assert fresh == SimulationCore().snapshot()
    assert fresh.tick == 0
    assert core.state is not state
    # The old snapshot is untouched
    assert lost.game_over is True


def test_snapshot_is_immutable():
    """Snapshots are frozen and detached from the live state."""
    core = SimulationCore()
    snap = core.advance()
    assert isinstance(snap, Snapshot)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 99
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.ball.x = 0

    core.advance()
    assert snap.tick == 1


def test_concurrent_input_stays_clamped():
    """Pointer events from another thread never push the paddle out of range."""
    core = SimulationCore()
    stop = threading.Event()

    def pointer():
        rng = random.Random(11)
        while not stop.is_set():
            core.set_paddle_target(rng.choice([rng.uniform(-500, 1300), math.nan]))

    t = threading.Thread(target=pointer)
    t.start()
    try:
        for _ in range(300):
            snap = core.advance()
            assert 0 <= snap.paddle.x <= 700
    finally:
        stop.set()
        t.join()
