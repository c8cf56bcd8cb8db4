"""Matplotlib renderer: still frames, PNG export, and animated GIF reveals.

The figure is sized so one data unit is one pixel, with y growing down, so
generated points are drawn exactly where a canvas would put them.
"""

import math

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.animation import FuncAnimation, PillowWriter
from matplotlib.collections import LineCollection

from sfcurves.config import (
    BACKGROUND, CURSOR_MARKER_COLOR, CURSOR_MARKER_RADIUS, DEFAULT_FPS, DPI,
    LINE_WIDTH, PALETTE, START_MARKER_COLOR, START_MARKER_RADIUS,
)
from sfcurves.reveal import segment_colors, step_reveal


# ── Figure setup ─────────────────────────────────────────────────────────

def new_canvas(width, height):
    """Figure + borderless axes covering width × height pixels."""
    fig = plt.figure(figsize=(width / DPI, height / DPI), dpi=DPI)
    fig.set_facecolor(BACKGROUND)
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_facecolor(BACKGROUND)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return fig, ax


class FrameArtists:
    """The three artists a frame needs, created once and updated per frame."""

    def __init__(self, ax, palette=PALETTE):
        self.palette = palette
        self.lines = LineCollection([], linewidths=LINE_WIDTH * 72 / DPI,
                                    capstyle="round", joinstyle="round")
        ax.add_collection(self.lines)
        self.start = mpatches.Circle((0, 0), radius=START_MARKER_RADIUS,
                                     color=START_MARKER_COLOR, visible=False,
                                     zorder=3)
        self.current = mpatches.Circle((0, 0), radius=CURSOR_MARKER_RADIUS,
                                       color=CURSOR_MARKER_COLOR, visible=False,
                                       zorder=4)
        ax.add_patch(self.start)
        ax.add_patch(self.current)

    def update(self, points, cursor):
        self.lines.set_segments(step_reveal(points, cursor))
        self.lines.set_color(segment_colors(points, cursor, self.palette))

        if len(points) > 0:
            self.start.center = tuple(points[0])
            self.start.set_visible(True)
        else:
            self.start.set_visible(False)

        if 0 < cursor < len(points):
            self.current.center = tuple(points[cursor])
            self.current.set_visible(True)
        else:
            self.current.set_visible(False)
        return self.lines, self.start, self.current


def draw_frame(ax, points, cursor, palette=PALETTE):
    """Draw the path up to ``cursor`` on ax; returns the FrameArtists."""
    artists = FrameArtists(ax, palette)
    artists.update(points, cursor)
    return artists


# ── Still image ──────────────────────────────────────────────────────────

def render_png(points, width, height, out_path, cursor=None):
    """Save one frame.  ``cursor=None`` draws the whole path."""
    if cursor is None:
        cursor = len(points)
    fig, ax = new_canvas(width, height)
    draw_frame(ax, points, cursor)
    fig.savefig(out_path, dpi=DPI, facecolor=fig.get_facecolor())
    plt.close(fig)
    return out_path


# ── Animation ────────────────────────────────────────────────────────────

def _reveal_frames(session):
    """Yield the cursor for each frame until the reveal stops running.

    Pausing or resetting the session between frames ends the sequence
    before the next frame is produced.
    """
    session.start()
    while True:
        yield session.reveal.cursor
        if not session.reveal.running:
            return
        session.frame()


def frame_count(total, speed):
    """Frames a full reveal from cursor 0 takes, including the first and last."""
    if total <= 1:
        return 1
    return math.ceil(total / max(speed, 1)) + 1


def animate_gif(session, out_path, fps=DEFAULT_FPS, on_frame=None):
    """Write the progressive reveal of ``session`` to a GIF.

    ``on_frame(session)`` is called after every drawn frame, e.g. to print
    progress.  Returns the number of frames written.
    """
    fig, ax = new_canvas(session.size, session.size)
    artists = FrameArtists(ax)
    drawn = 0

    def update(cursor):
        nonlocal drawn
        drawn += 1
        result = artists.update(session.points, cursor)
        if on_frame is not None:
            on_frame(session)
        return result

    def init():
        return artists.update(session.points, session.reveal.cursor)

    # init_func keeps matplotlib from spending the first frame on its setup draw
    anim = FuncAnimation(
        fig, update, frames=_reveal_frames(session), init_func=init,
        save_count=frame_count(len(session.points), session.speed),
        cache_frame_data=False, blit=False,
    )
    anim.save(out_path, writer=PillowWriter(fps=fps),
              savefig_kwargs={"facecolor": fig.get_facecolor()})
    plt.close(fig)
    return drawn
