"""Headless match runner — drives a SimulationCore with an autopilot.

Each tick the autopilot reads the latest snapshot and posts a pointer x,
then the core advances. A match ends when the board is cleared ("won"),
the ball is lost ("lost"), or the tick limit runs out ("timeout").
"""

from dataclasses import dataclass, field
from typing import Optional

from breakout.types import BallLost, BoardCleared, BrickHit, PaddleHit, Snapshot, WallBounce
from breakout.core import SimulationCore
from breakout.autopilot import Autopilot
from breakout import arena


VALID_OUTCOMES = ["won", "lost", "timeout"]


@dataclass
class MatchResult:
    """The outcome of one headless match."""
    pilot: Autopilot
    final: Snapshot
    outcome: str            # see VALID_OUTCOMES
    ticks: int
    bricks_remaining: list  # list[int], one entry per tick (index 0 = start)
    trail: list             # list[(x, y)] ball centers, one per tick
    events: list            # every event, in order
    stats: dict = field(default_factory=dict)


def _outcome(snap: Snapshot) -> str:
    if snap.game_won:
        return "won"
    if snap.game_over:
        return "lost"
    return "timeout"


def simulate_match(
    pilot: Autopilot,
    max_ticks: int = arena.MAX_TICKS,
    core: Optional[SimulationCore] = None,
) -> MatchResult:
    """Play one match from a fresh state until it ends or max_ticks elapse.

    Args:
        pilot: Pointer source for the paddle.
        max_ticks: Safety limit; a perfectly periodic rally can run forever.
        core: Core to drive. A new one is created when omitted; a given core
            is re-initialized first.

    Returns:
        MatchResult with the final snapshot, traces and stats.
    """
    if core is None:
        core = SimulationCore()
    snap = core.initialize()
    pilot.reset()

    bricks_remaining = [snap.bricks_remaining]
    trail = [(snap.ball.x, snap.ball.y)]
    events = []

    for _ in range(max_ticks):
        if snap.terminal:
            break
        core.set_paddle_target(pilot.target_x(snap))
        snap = core.advance()
        events.extend(core.last_events)
        bricks_remaining.append(snap.bricks_remaining)
        trail.append((snap.ball.x, snap.ball.y))

    result = MatchResult(
        pilot=pilot,
        final=snap,
        outcome=_outcome(snap),
        ticks=snap.tick,
        bricks_remaining=bricks_remaining,
        trail=trail,
        events=events,
    )
    result.stats = _compute_match_stats(result)
    return result


def _compute_match_stats(result: MatchResult) -> dict:
    """Compute match statistics."""
    events = result.events
    paddle_hits = [e for e in events if isinstance(e, PaddleHit)]
    wall_bounces = [e for e in events if isinstance(e, WallBounce)]
    brick_hits = [e for e in events if isinstance(e, BrickHit)]

    offsets = [abs(e.offset) for e in paddle_hits]
    avg_offset = sum(offsets) / max(len(offsets), 1)

    rows_cleared = {}
    for e in brick_hits:
        rows_cleared[e.row] = rows_cleared.get(e.row, 0) + 1

    max_dx = 0.0
    for (x0, _), (x1, _) in zip(result.trail, result.trail[1:]):
        max_dx = max(max_dx, abs(x1 - x0))

    return {
        "outcome": result.outcome,
        "ticks": result.ticks,
        "score": result.final.score,
        "bricks_destroyed": len(brick_hits),
        "bricks_left": result.final.bricks_remaining,
        "paddle_hits": len(paddle_hits),
        "wall_bounces": len(wall_bounces),
        "ceiling_bounces": sum(1 for e in wall_bounces if e.side == "top"),
        "avg_paddle_offset": round(avg_offset, 2),
        "max_abs_dx": round(max_dx, 2),
        "rows_cleared": rows_cleared,
        "ball_lost": any(isinstance(e, BallLost) for e in events),
        "board_cleared": any(isinstance(e, BoardCleared) for e in events),
        "pilot_name": result.pilot.name,
        "pilot_style": result.pilot.label,
    }
