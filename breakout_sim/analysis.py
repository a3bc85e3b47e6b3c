"""Matplotlib analysis charts: match length, brick clearing, ball coverage and outcomes."""

import os
import random

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from breakout.autopilot import Autopilot, PLAYSTYLES
from breakout.game import simulate_match, VALID_OUTCOMES
from breakout import arena

STYLE_COLORS = {
    "perfect": "#28a745",
    "steady": "#4ecdc4",
    "spinner": "#a855f7",
    "casual": "#ffc107",
    "beginner": "#dc3545",
}
OUTCOME_COLORS = {"won": "#28a745", "lost": "#dc3545", "timeout": "#64748b"}


def _style_chart(ax, title):
    """Apply dark theme styling to chart."""
    ax.set_facecolor("#0f0f1a")
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")


def _run_matches(style, n_games, seed_base, max_ticks):
    results = []
    for seed in range(n_games):
        random.seed(seed_base + seed)
        pilot = Autopilot(style, style)
        results.append(simulate_match(pilot, max_ticks=max_ticks))
    return results


def chart_ticks_to_finish(n_games=5, max_ticks=arena.MAX_TICKS, save_path=None):
    """Chart 1: Ticks until the match ends, per autopilot playstyle.

    Bars show the mean, dots show every individual match colored by outcome.
    """
    style_keys = list(PLAYSTYLES.keys())
    means = []
    scatter = []

    for i, style in enumerate(style_keys):
        results = _run_matches(style, n_games, seed_base=i * 100, max_ticks=max_ticks)
        ticks = [r.ticks for r in results]
        means.append(np.mean(ticks))
        scatter.extend((i, r.ticks, r.outcome) for r in results)

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Match Length by Playstyle")

    x = np.arange(len(style_keys))
    ax.bar(x, means, color=[STYLE_COLORS.get(s, "#888") for s in style_keys], alpha=0.6)
    for i, t, outcome in scatter:
        ax.scatter(i, t, c=OUTCOME_COLORS[outcome], s=30, zorder=5, edgecolors="white", linewidth=0.5)

    ax.set_xticks(x)
    ax.set_xticklabels([PLAYSTYLES[s]["label"] for s in style_keys], rotation=20, ha="right")
    ax.set_ylabel("Ticks")
    ax.grid(True, alpha=0.15, axis="y")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_bricks_remaining(max_ticks=arena.MAX_TICKS, save_path=None):
    """Chart 2: Bricks remaining over time, one line per playstyle."""
    fig, ax = plt.subplots(figsize=(9, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Bricks Remaining Over Time")

    for i, style in enumerate(PLAYSTYLES):
        random.seed(i * 7)
        result = simulate_match(Autopilot(style, style), max_ticks=max_ticks)
        label = f"{PLAYSTYLES[style]['label']} ({result.outcome})"
        ax.step(
            np.arange(len(result.bricks_remaining)), result.bricks_remaining,
            where="post", color=STYLE_COLORS.get(style, "#888"), linewidth=2, label=label,
        )

    ax.set_xlabel("Tick")
    ax.set_ylabel("Bricks")
    ax.set_ylim(0, arena.BRICK_ROWS * arena.BRICK_COLS + 2)
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_ball_heatmap(style="steady", max_ticks=arena.MAX_TICKS, save_path=None):
    """Chart 3: Where the ball spends its time during one match."""
    random.seed(42)
    result = simulate_match(Autopilot(style, style), max_ticks=max_ticks)
    trail = np.array(result.trail)

    heat, _, _ = np.histogram2d(
        trail[:, 0], trail[:, 1],
        bins=(40, 30),
        range=[[0, arena.ARENA_WIDTH], [0, arena.ARENA_HEIGHT]],
    )

    fig, ax = plt.subplots(figsize=(8, 6))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, f"Ball Coverage ({PLAYSTYLES[style]['label']}, {result.ticks} ticks)")

    im = ax.imshow(
        heat.T, origin="upper", cmap="magma", aspect="auto",
        extent=[0, arena.ARENA_WIDTH, arena.ARENA_HEIGHT, 0],
    )
    ax.set_xlabel("x (px)")
    ax.set_ylabel("y (px)")

    cbar = fig.colorbar(im, ax=ax, shrink=0.8)
    cbar.set_label("Ticks", color="#aaa")
    cbar.ax.tick_params(colors="#888")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_outcomes(n_games=5, max_ticks=arena.MAX_TICKS, save_path=None):
    """Chart 4: Won / lost / timeout breakdown per playstyle (stacked bars)."""
    style_keys = list(PLAYSTYLES.keys())
    counts = {o: np.zeros(len(style_keys)) for o in VALID_OUTCOMES}

    for i, style in enumerate(style_keys):
        for r in _run_matches(style, n_games, seed_base=i * 31, max_ticks=max_ticks):
            counts[r.outcome][i] += 1

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Match Outcomes by Playstyle")

    x = np.arange(len(style_keys))
    bottom = np.zeros(len(style_keys))
    for outcome in VALID_OUTCOMES:
        ax.bar(x, counts[outcome], bottom=bottom, color=OUTCOME_COLORS[outcome],
               label=outcome, alpha=0.85, edgecolor="#333")
        bottom += counts[outcome]

    ax.set_xticks(x)
    ax.set_xticklabels([PLAYSTYLES[s]["label"] for s in style_keys], rotation=20, ha="right")
    ax.set_ylabel("Matches")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15, axis="y")

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def generate_all_charts(output_dir=".", n_games=3, max_ticks=arena.MAX_TICKS):
    """Generate all analysis charts and save to output directory."""
    os.makedirs(output_dir, exist_ok=True)

    paths = []

    path = os.path.join(output_dir, "chart_ticks_to_finish.png")
    print("  Generating match lengths (running autopilot matches)...")
    chart_ticks_to_finish(n_games=n_games, max_ticks=max_ticks, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    path = os.path.join(output_dir, "chart_bricks_remaining.png")
    chart_bricks_remaining(max_ticks=max_ticks, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    path = os.path.join(output_dir, "chart_ball_heatmap.png")
    chart_ball_heatmap(max_ticks=max_ticks, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    path = os.path.join(output_dir, "chart_outcomes.png")
    print("  Generating outcome breakdown...")
    chart_outcomes(n_games=n_games, max_ticks=max_ticks, save_path=path)
    paths.append(path)
    print(f"  Saved: {path}")

    plt.close("all")
    return paths
