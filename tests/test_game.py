"""Tests for the headless match runner."""

import random
import pytest

from breakout.autopilot import Autopilot, PLAYSTYLES
from breakout.core import SimulationCore
from breakout.game import simulate_match, MatchResult, VALID_OUTCOMES


def test_match_produces_result():
    """A match always ends with a known outcome."""
    random.seed(42)
    result = simulate_match(Autopilot("P", "casual"), max_ticks=5000)
    assert isinstance(result, MatchResult)
    assert result.outcome in VALID_OUTCOMES
    assert 0 < result.ticks <= 5000


def test_traces_have_one_entry_per_tick():
    """Brick and trail traces include the start plus every tick."""
    random.seed(42)
    result = simulate_match(Autopilot("P", "steady"), max_ticks=3000)
    assert len(result.bricks_remaining) == result.ticks + 1
    assert len(result.trail) == result.ticks + 1
    assert result.bricks_remaining[0] == 40
    assert result.trail[0] == (400, 570)


def test_tick_limit_gives_timeout():
    """A short limit stops the match before anything can happen."""
    result = simulate_match(Autopilot("P", "perfect"), max_ticks=50)
    assert result.outcome == "timeout"
    assert result.ticks == 50
    assert result.final.game_over is False
    assert result.final.game_won is False


def test_stats_consistent_with_final_state():
    """Stats agree with the final snapshot."""
    random.seed(5)
    result = simulate_match(Autopilot("P", "spinner"), max_ticks=6000)
    s = result.stats
    assert s["score"] == result.final.score
    assert s["score"] == 10 * s["bricks_destroyed"]
    assert s["bricks_left"] == 40 - s["bricks_destroyed"]
    assert sum(s["rows_cleared"].values()) == s["bricks_destroyed"]
    assert s["ceiling_bounces"] <= s["wall_bounces"]
    assert s["outcome"] == result.outcome
    assert s["ball_lost"] == (result.outcome == "lost")
    assert s["board_cleared"] == (result.outcome == "won")


def test_stats_populated():
    """Stats dictionary should contain expected keys."""
    random.seed(42)
    result = simulate_match(Autopilot("P", "steady"), max_ticks=2000)
    for key in (
        "outcome", "ticks", "score", "bricks_destroyed", "bricks_left",
        "paddle_hits", "wall_bounces", "ceiling_bounces",
        "avg_paddle_offset", "max_abs_dx", "rows_cleared",
        "pilot_name", "pilot_style",
    ):
        assert key in result.stats
    assert result.stats["pilot_style"] == PLAYSTYLES["steady"]["label"]


def test_same_seed_same_match():
    """Seeding the autopilot's randomness reproduces the match exactly."""
    outcomes = []
    for _ in range(2):
        random.seed(9)
        result = simulate_match(Autopilot("P", "casual"), max_ticks=4000)
        outcomes.append((result.outcome, result.ticks, result.final))
    assert outcomes[0] == outcomes[1]


def test_given_core_is_reinitialized():
    """A supplied core is reset first and left holding the final state."""
    core = SimulationCore()
    core.set_paddle_target(0)
    for _ in range(20):
        core.advance()

    result = simulate_match(Autopilot("P", "perfect"), max_ticks=100, core=core)
    assert result.ticks == 100
    assert core.snapshot() == result.final


def test_terminal_matches_stop_early():
    """Won or lost matches end before the tick limit."""
    random.seed(1)
    for style in PLAYSTYLES:
        result = simulate_match(Autopilot("P", style), max_ticks=8000)
        if result.outcome != "timeout":
            assert result.final.terminal
            assert result.ticks < 8000
            assert result.ticks == len(result.trail) - 1
