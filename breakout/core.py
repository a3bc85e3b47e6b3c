"""Simulation core — owns the game state and exposes the per-tick API.

The host drives three calls:
- initialize()            at startup and on every restart
- set_paddle_target(x)    on every pointer move (raw, unclamped)
- advance()               once per frame, returns a Snapshot to draw

State is only ever mutated under one lock, so pointer events delivered from
another thread land atomically between ticks and a restart swaps the whole
state at once.
"""

import logging
import math
import threading
from numbers import Real
from typing import Optional

from breakout.types import Ball, Brick, GameState, Paddle, Snapshot
from breakout.physics import step
from breakout import arena

logger = logging.getLogger(__name__)


def build_bricks(
    width: float = arena.ARENA_WIDTH,
    rows: int = arena.BRICK_ROWS,
    cols: int = arena.BRICK_COLS,
) -> list[Brick]:
    """Lay out the brick grid row by row, padded on both ends of each row."""
    pad = arena.BRICK_PADDING
    brick_w = (width - (cols + 1) * pad) / cols
    palette = arena.BRICK_PALETTE

    bricks = []
    for row in range(rows):
        for col in range(cols):
            bricks.append(Brick(
                x=col * (brick_w + pad) + pad,
                y=row * (arena.BRICK_HEIGHT + pad) + pad + arena.BRICK_TOP_OFFSET,
                width=brick_w,
                height=arena.BRICK_HEIGHT,
                color=palette[row % len(palette)],
                row=row,
                col=col,
            ))
    return bricks


def create_state(
    width: float = arena.ARENA_WIDTH,
    height: float = arena.ARENA_HEIGHT,
) -> GameState:
    """Create a fresh match: full grid, centered paddle, ball launched up-right."""
    return GameState(
        width=width,
        height=height,
        paddle=Paddle(x=width / 2 - arena.PADDLE_WIDTH / 2),
        ball=Ball(x=width / 2, y=height - arena.BALL_START_OFFSET),
        bricks=build_bricks(width),
    )


class SimulationCore:
    """Authoritative Breakout simulation, advanced one tick at a time."""

    def __init__(self, state: Optional[GameState] = None):
        """Create a core.

        Args:
            state: Starting state. A fresh match is created when omitted.
        """
        self._lock = threading.Lock()
        self._state = state if state is not None else create_state()
        self.last_events: list = []

    @property
    def state(self) -> GameState:
        """The live state. Hosts should draw from snapshots instead."""
        return self._state

    def initialize(self) -> Snapshot:
        """Replace the whole state with a fresh match."""
        with self._lock:
            fresh = create_state(self._state.width, self._state.height)
            self._state = fresh
            self.last_events = []
            snap = fresh.snapshot()
        logger.info("New match: %d bricks", len(fresh.bricks))
        return snap

    def set_paddle_target(self, raw_x) -> None:
        """Move the paddle to a raw pointer x, clamped to the arena.

        Non-numeric or non-finite input is dropped and the paddle stays put.
        """
        if isinstance(raw_x, bool) or not isinstance(raw_x, Real):
            logger.debug("Ignoring non-numeric paddle input %r", raw_x)
            return
        try:
            value = float(raw_x)
        except OverflowError:
            logger.debug("Ignoring out-of-range paddle input %r", raw_x)
            return
        if not math.isfinite(value):
            logger.debug("Ignoring non-finite paddle input %r", raw_x)
            return

        with self._lock:
            paddle = self._state.paddle
            max_x = self._state.width - paddle.width
            paddle.x = max(0.0, min(max_x, value))

    def advance(self) -> Snapshot:
        """Run one tick and return the resulting snapshot.

        Once the match has been won or lost this is a no-op that returns the
        frozen final snapshot.
        """
        with self._lock:
            state = self._state
            was_terminal = state.terminal
            self.last_events = step(state)
            snap = state.snapshot()

        if not was_terminal:
            if snap.game_over:
                logger.info("Ball lost at tick %d, score %d", snap.tick, snap.score)
            elif snap.game_won:
                logger.info("Board cleared at tick %d, score %d", snap.tick, snap.score)
        return snap

    def snapshot(self) -> Snapshot:
        """Current snapshot without advancing."""
        with self._lock:
            return self._state.snapshot()
