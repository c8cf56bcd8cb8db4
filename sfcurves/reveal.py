"""Progressive reveal: cursor state machine and per-segment colouring.

The reveal never touches the points themselves.  It only tracks how many of
them are visible, so a renderer draws segments [i, i+1] for
i in [0, min(cursor, len - 1)) in generation order.
"""

import math
import numbers
from enum import Enum

import numpy as np

from sfcurves.config import PALETTE
from sfcurves.errors import InvalidSpeed
from sfcurves.geometry import as_points


def check_speed(speed):
    """Return speed if it is a whole number of points (>= 1) per frame."""
    if isinstance(speed, bool) or not isinstance(speed, numbers.Integral) or speed < 1:
        raise InvalidSpeed(speed)
    return speed


class RevealState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETE = "complete"


class Reveal:
    """Reveal cursor over ``total`` points, advanced ``speed`` points per frame.

    Transitions::

        IDLE/PAUSED/COMPLETE --start--> RUNNING     (rewinds if at the end)
        RUNNING --pause--> PAUSED --resume--> RUNNING
        RUNNING --advance--> RUNNING | COMPLETE
        any --reset--> IDLE

    A transition that does not apply in the current state is ignored.  A
    speed below one point per frame raises InvalidSpeed.
    """

    def __init__(self, total, speed=1):
        self.total = total
        self.speed = speed
        self.cursor = 0
        self.state = RevealState.IDLE

    def __repr__(self):
        return (f"Reveal(cursor={self.cursor}/{self.total}, "
                f"state={self.state.value})")

    @property
    def speed(self):
        return self._speed

    @speed.setter
    def speed(self, speed):
        self._speed = check_speed(speed)

    @property
    def at_end(self):
        return self.cursor >= self.total - 1

    @property
    def running(self):
        return self.state is RevealState.RUNNING

    def start(self):
        if self.state is RevealState.RUNNING:
            return
        if self.at_end:
            self.cursor = 0
        self.state = RevealState.RUNNING

    def pause(self):
        if self.state is RevealState.RUNNING:
            self.state = RevealState.PAUSED

    def resume(self):
        if self.state is RevealState.PAUSED:
            self.state = RevealState.RUNNING

    def reset(self):
        self.cursor = 0
        self.state = RevealState.IDLE

    def advance(self):
        """One animation frame.  Returns True if another frame should follow."""
        if self.state is not RevealState.RUNNING:
            return False
        self.cursor += self.speed
        if self.cursor >= self.total:
            self.cursor = max(self.total - 1, 0)
            self.state = RevealState.COMPLETE
            return False
        return True

    @property
    def progress(self):
        """Percent of points revealed."""
        return self.cursor / self.total * 100 if self.total else 0.0

    def status_text(self):
        if self.state is RevealState.RUNNING:
            return f"Drawing... {round(self.progress)}%"
        if self.state is RevealState.COMPLETE or (self.total and self.at_end):
            return "Completed!"
        return "Ready to start"


def visible_count(points, cursor):
    """Number of segments drawn at this cursor."""
    return max(0, min(cursor, len(points) - 1))


def step_reveal(points, cursor):
    """Segments visible at ``cursor`` as a (k, 2, 2) array of (start, end) pairs."""
    pts = as_points(points)
    k = visible_count(pts, cursor)
    return np.stack([pts[:k], pts[1:k + 1]], axis=1)


def palette_index(i, n, palette_size=len(PALETTE)):
    """Palette slot for segment i of an n-point path.

    The palette is spread once over the whole path so colour tracks how far
    along the curve a segment lies.
    """
    if n <= 1:
        return 0
    return math.floor(i / (n - 1) * palette_size) % palette_size


def segment_colors(points, cursor, palette=PALETTE):
    """Colours for the segments returned by ``step_reveal``."""
    n = len(points)
    return [palette[palette_index(i, n, len(palette))]
            for i in range(visible_count(points, cursor))]
