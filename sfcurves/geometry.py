"""Shared 2D helpers: midpoints, base shapes, bounding boxes, viewport fitting.

Point sequences are (n, 2) float arrays.  Screen convention throughout:
x grows right, y grows down.
"""

import math

import numpy as np

from sfcurves.config import MARGIN
from sfcurves.errors import DegenerateViewport


def as_points(points):
    """Coerce a list of (x, y) pairs to an (n, 2) float array."""
    arr = np.asarray(points, dtype=float)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def midpoint(a, b):
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def hexagon(center, radius):
    """Six vertices of a regular hexagon, starting at angle 0, 60° apart."""
    cx, cy = center
    return [(cx + radius * math.cos(i * math.pi / 3),
             cy + radius * math.sin(i * math.pi / 3))
            for i in range(6)]


def equilateral_triangle(center, side):
    """Apex-up equilateral triangle (top, bottom-left, bottom-right)."""
    cx, cy = center
    h = side * math.sqrt(3) / 2
    return [
        (cx, cy - h / 2),
        (cx - side / 2, cy + h / 2),
        (cx + side / 2, cy + h / 2),
    ]


def bounding_box(points):
    """Return (min_x, min_y, max_x, max_y) of a non-empty point set."""
    pts = as_points(points)
    if len(pts) == 0:
        raise ValueError("bounding box of an empty point set")
    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    return float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1])


def check_viewport(width, height):
    if width <= 0 or height <= 0:
        raise DegenerateViewport(width, height)


def _usable(extent, margin):
    # Viewports narrower than both margins are fitted edge to edge.
    return extent - 2 * margin if extent > 2 * margin else extent


def _offset(extent, margin):
    return margin if extent > 2 * margin else 0


def place_on_grid(grid_points, grid_size, width, height, margin=MARGIN):
    """Map integer grid coordinates in [0, grid_size) to pixels.

    Each grid unit becomes ``(min(width, height) - 2*margin) / grid_size``
    pixels and the whole grid is offset by ``margin``.  A viewport too small
    for both margins is filled from its corner.
    """
    check_viewport(width, height)
    short = min(width, height)
    segment = _usable(short, margin) / grid_size
    return as_points(grid_points) * segment + _offset(short, margin)


def normalize(points, width, height, margin=MARGIN):
    """Centre a point set in the viewport, shrinking it only if it overflows.

    The bounding box is moved to the viewport centre.  When its extent is
    larger than the viewport minus ``margin`` on each side, the set is also
    scaled uniformly about that centre so it just fits.  Shapes that already
    fit are never scaled.  Applying this twice gives the same result.
    """
    check_viewport(width, height)
    pts = as_points(points)
    if len(pts) == 0:
        return pts.copy()

    lo = pts.min(axis=0)
    hi = pts.max(axis=0)
    extent = hi - lo
    box_center = (lo + hi) / 2
    target = np.array([width / 2, height / 2])
    usable = (_usable(width, margin), _usable(height, margin))

    ratios = [usable[axis] / extent[axis] for axis in (0, 1) if extent[axis] > 0]
    scale = min(ratios) if ratios else 1.0
    if scale < 1:
        return (pts - box_center) * scale + target
    return pts - box_center + target
