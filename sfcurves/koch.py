"""Koch-Flowsnake: a Koch-edged hexagon with a small flowsnake inside."""

import math

import numpy as np

from sfcurves.config import KOCH_INNER_SCALE, KOCH_RADIUS_DIVISOR
from sfcurves.geometry import as_points, check_viewport, hexagon
from sfcurves.lsystem import flowsnake_symbols, turtle_points


def koch_edge(start, end, order):
    """Replace a segment by four thirds-length segments with a 60° bump.

    The bump apex sits at height ``sqrt(3)/6 * |end - start|`` along the edge
    vector rotated by +90° (``(-dy, dx)``).  Returns ``4**order + 1`` points,
    both endpoints included.
    """
    if order == 0:
        return [start, end]

    dx = end[0] - start[0]
    dy = end[1] - start[1]
    length = math.hypot(dx, dy)

    p1 = (start[0] + dx / 3, start[1] + dy / 3)
    p3 = (start[0] + 2 * dx / 3, start[1] + 2 * dy / 3)
    mid_x = (p1[0] + p3[0]) / 2
    mid_y = (p1[1] + p3[1]) / 2
    height = math.sqrt(3) / 6 * length
    p2 = (mid_x - height * dy / length, mid_y + height * dx / length)

    seg1 = koch_edge(start, p1, order - 1)
    seg2 = koch_edge(p1, p2, order - 1)
    seg3 = koch_edge(p2, p3, order - 1)
    seg4 = koch_edge(p3, end, order - 1)
    # Each sub-edge starts where the previous one ended
    return seg1[:-1] + seg2[:-1] + seg3[:-1] + seg4


def koch_boundary(center, radius, order):
    """Closed Koch outline over a hexagon: 6 * 4**order points plus the closing one."""
    corners = hexagon(center, radius)
    points = []
    for i in range(6):
        side = koch_edge(corners[i], corners[(i + 1) % 6], order)
        points.extend(side[:-1])
    points.append(points[0])
    return points


def inner_order(order):
    return max(1, order - 1)


def inner_flowsnake(center, radius, order):
    """Flowsnake of ``inner_order(order)`` iterations starting at ``center``."""
    mini = inner_order(order)
    step = radius / 3 ** (mini + 1)
    return turtle_points(flowsnake_symbols(mini), step=step, start=center)


def koch_flowsnake_raw(order):
    """Unit-radius Koch hexagon at the origin followed by its inner flowsnake.

    Both parts share one frame; the inner pattern is not fitted on its own.
    """
    outline = as_points(koch_boundary((0.0, 0.0), 1.0, order))
    inner = inner_flowsnake((0.0, 0.0), KOCH_INNER_SCALE, order)
    return np.vstack([outline, inner])


def place_koch_flowsnake(raw, order, width, height):
    check_viewport(width, height)
    radius = min(width, height) / KOCH_RADIUS_DIVISOR
    return raw * radius + (width / 2, height / 2)
