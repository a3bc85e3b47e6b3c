#!/usr/bin/env python3
"""CLI entry point for the Breakout simulation.

Usage:
    python main.py play [style]      Launch Pygame window (mouse, or autopilot style)
    python main.py game [style]      Run a headless autopilot match and print stats
    python main.py analyze           Generate comparison charts
    python main.py test              Run all tests
    python main.py demo              Full demo: one match per style, then charts

Add -v anywhere for debug logging.
"""

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


VERBOSE_FLAGS = ("-v", "--verbose")


def _split_argv(argv):
    """Separate the verbose flags from the positional arguments."""
    verbose = any(a in VERBOSE_FLAGS for a in argv)
    return verbose, [a for a in argv if a not in VERBOSE_FLAGS]


def _args():
    """Positional arguments after the command name."""
    return _split_argv(sys.argv[1:])[1][1:]


def cmd_play():
    """Launch the Pygame visualizer."""
    from breakout.autopilot import PLAYSTYLES

    args = _args()
    style = args[0] if args and args[0] in PLAYSTYLES else None
    print("Launching Breakout...")
    print("Controls: MOUSE=paddle  A=autopilot  R=restart  Q=quit")
    print("-" * 60)
    from breakout_sim.visualizer import run_visualizer
    run_visualizer(autopilot_style=style)


def cmd_game(style=None):
    """Run a headless autopilot match and print stats."""
    import random
    from breakout.autopilot import Autopilot, PLAYSTYLES
    from breakout.game import simulate_match

    styles = list(PLAYSTYLES.keys())
    if style is None:
        args = _args()
        style = args[0] if args and args[0] in styles else "steady"

    print("=" * 60)
    print("  AUTOPILOT BREAKOUT MATCH")
    print("=" * 60)

    random.seed(42)
    pilot = Autopilot("Autopilot", style)
    print(f"\n  Pilot: {pilot.label} (react:{pilot.reaction:.0%} jitter:{pilot.jitter:.0f}px aim:{pilot.aim:.0f}px)")
    print()

    result = simulate_match(pilot)
    s = result.stats

    print(f"  OUTCOME: {result.outcome.upper()} after {result.ticks} ticks")
    print(f"  SCORE:   {s['score']}  ({s['bricks_destroyed']} bricks, {s['bricks_left']} left)")
    print()
    print(f"  Paddle hits: {s['paddle_hits']}  |  Wall bounces: {s['wall_bounces']} "
          f"(ceiling {s['ceiling_bounces']})")
    print(f"  Avg paddle offset: {s['avg_paddle_offset']} px  |  Max |dx|: {s['max_abs_dx']}")
    print(f"  Bricks per row: {dict(sorted(s['rows_cleared'].items()))}")
    print()
    print("  Available styles: " + ", ".join(styles))
    print("  Usage: python main.py game [style]")
    print("=" * 60)
    return result


def cmd_analyze():
    """Generate all analysis charts."""
    print("Generating analysis charts...")
    print("-" * 60)
    from breakout_sim.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(__file__), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\nDone! {len(paths)} charts saved to {output_dir}/")


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


def cmd_demo():
    """Full demo: one match per autopilot style, then charts."""
    from breakout.autopilot import PLAYSTYLES

    print("=" * 60)
    print("  BREAKOUT — AUTOPILOT DEMO")
    print("=" * 60)
    print()

    for style in PLAYSTYLES:
        cmd_game(style)
        print()

    print("-" * 60)
    cmd_analyze()

    print()
    print("=" * 60)
    print("  Demo complete! Check the 'output' folder for charts.")
    print("=" * 60)


COMMANDS = {
    "play": cmd_play,
    "game": cmd_game,
    "analyze": cmd_analyze,
    "test": cmd_test,
    "demo": cmd_demo,
}


def main():
    verbose, args = _split_argv(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not args or args[0] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[args[0]]()


if __name__ == "__main__":
    main()
