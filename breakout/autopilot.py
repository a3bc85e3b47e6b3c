"""Autopilot — a scripted pointer that plays the paddle for headless matches.

The autopilot never touches the simulation directly. Like a mouse it only
produces a raw horizontal coordinate, which the host feeds to
SimulationCore.set_paddle_target().
"""

import random

from breakout.types import Snapshot


# Autopilot playstyle presets
#   reaction: fraction of the gap to the target closed each tick (0-1]
#   jitter:   gaussian pointer noise in pixels
#   aim:      offset of the paddle center from the ball, to put English on it
PLAYSTYLES = {
    "perfect": {
        "label": "Perfect Tracker",
        "reaction": 1.0,
        "jitter": 0.0,
        "aim": 0.0,
    },
    "steady": {
        "label": "Steady",
        "reaction": 0.6,
        "jitter": 2.0,
        "aim": 6.0,
    },
    "spinner": {
        "label": "Spinner",
        "reaction": 0.8,
        "jitter": 1.0,
        "aim": 22.0,
    },
    "casual": {
        "label": "Casual",
        "reaction": 0.25,
        "jitter": 6.0,
        "aim": 10.0,
    },
    "beginner": {
        "label": "Beginner",
        "reaction": 0.08,
        "jitter": 14.0,
        "aim": 0.0,
    },
}


class Autopilot:
    """A pointer source that chases the ball with a given playstyle."""

    def __init__(self, name: str, playstyle: str):
        """Create an autopilot.

        Args:
            name: Display name.
            playstyle: Key from PLAYSTYLES.
        """
        self.name = name
        preset = PLAYSTYLES[playstyle]
        self.playstyle = playstyle
        self.label = preset["label"]
        self.reaction = preset["reaction"]
        self.jitter = preset["jitter"]
        self.aim = preset["aim"]
        self._pointer = None

    def reset(self):
        self._pointer = None

    def _desired_center(self, snap: Snapshot) -> float:
        ball = snap.ball
        if self.aim == 0.0:
            return ball.x
        # Paddle center sits on the wall side of the ball: English points inward
        side = 1.0 if ball.x > snap.width / 2 else -1.0
        return ball.x + side * self.aim

    def target_x(self, snap: Snapshot) -> float:
        """Raw pointer x for the next tick (may lie outside the arena)."""
        desired = self._desired_center(snap) - snap.paddle.width / 2
        if self._pointer is None:
            self._pointer = snap.paddle.x

        self._pointer += (desired - self._pointer) * self.reaction
        if self.jitter > 0:
            return self._pointer + random.gauss(0, self.jitter)
        return self._pointer
