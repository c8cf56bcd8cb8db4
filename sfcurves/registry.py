"""Curve catalogue and the generate() entry point.

Each CurveInfo bundles a curve's display metadata, its order cap, and the
two stages of its generator: ``raw(order)`` builds the points in the curve's
own frame and ``place(raw, order, width, height)`` maps them into a pixel
viewport.  The order caps keep point counts (4**k, 9**k, 7**k) and
recursion depth manageable.
"""

import numbers
from dataclasses import dataclass
from typing import Callable

from sfcurves.curves import (
    hilbert_grid, peano_grid, place_hilbert, place_peano, place_triangle,
    triangle_raw,
)
from sfcurves.errors import DegenerateViewport, InvalidOrder, UnknownCurve
from sfcurves.koch import koch_flowsnake_raw, place_koch_flowsnake
from sfcurves.lsystem import flowsnake_raw, place_flowsnake


@dataclass(frozen=True)
class CurveInfo:
    id: str
    title: str
    description: str
    max_order: int
    default_order: int
    default_speed: int          # points revealed per animation frame
    raw: Callable
    place: Callable


CURVES = {
    info.id: info for info in [
        CurveInfo(
            id="hilbert",
            title="Hilbert Curve",
            description="The Hilbert curve is a continuous fractal space-filling "
                        "curve that maps a one-dimensional line to a "
                        "two-dimensional square through recursive patterns.",
            max_order=7, default_order=4, default_speed=10,
            raw=hilbert_grid, place=place_hilbert,
        ),
        CurveInfo(
            id="peano",
            title="Peano Curve",
            description="The Peano curve is one of the first space-filling "
                        "curves discovered, mapping a line to completely fill "
                        "a square through recursive self-similar patterns.",
            max_order=5, default_order=3, default_speed=15,
            raw=peano_grid, place=place_peano,
        ),
        CurveInfo(
            id="triangle",
            title="Triangle Filling Curve",
            description="The Triangle Filling Curve uses recursive patterns to "
                        "fill triangular regions, creating beautiful "
                        "self-similar fractal structures.",
            max_order=6, default_order=4, default_speed=20,
            raw=triangle_raw, place=place_triangle,
        ),
        CurveInfo(
            id="flowsnake",
            title="Flow Snake (Gosper Curve)",
            description="The Flow Snake is a space-filling curve that creates "
                        "beautiful hexagonal patterns through recursive "
                        "L-system rules and turtle graphics.",
            max_order=6, default_order=4, default_speed=25,
            raw=flowsnake_raw, place=place_flowsnake,
        ),
        CurveInfo(
            id="koch",
            title="Koch Flow Snake",
            description="The Koch Flow Snake combines the classic Koch "
                        "snowflake pattern with hexagonal flow snake, "
                        "creating intricate self-similar structures.",
            max_order=5, default_order=3, default_speed=30,
            raw=koch_flowsnake_raw, place=place_koch_flowsnake,
        ),
    ]
}


def list_curves():
    """Return [{id, title, description, max_order}] in display order."""
    return [
        {"id": c.id, "title": c.title, "description": c.description,
         "max_order": c.max_order}
        for c in CURVES.values()
    ]


def get_curve(curve_id):
    try:
        return CURVES[curve_id]
    except KeyError:
        raise UnknownCurve(curve_id) from None


def check_order(curve_id, order):
    """Return the CurveInfo for curve_id, or raise if order is out of range."""
    info = get_curve(curve_id)
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise InvalidOrder(curve_id, order, info.max_order)
    if order < 0 or order > info.max_order:
        raise InvalidOrder(curve_id, order, info.max_order)
    return info


def clamp_order(curve_id, order):
    """Pull order into [0, max_order] for the given curve."""
    info = get_curve(curve_id)
    return min(max(order, 0), info.max_order)


def generate_raw(curve_id, order):
    """Points in the curve's natural frame (grid cells, unit side/step/radius)."""
    return check_order(curve_id, order).raw(order)


def generate(curve_id, order, width, height):
    """Generate curve_id at order, fitted into a width × height viewport.

    Raises UnknownCurve / InvalidOrder before any points are built.  For a
    viewport with no area the raw, unplaced sequence is returned instead.
    The number of points depends only on (curve_id, order).
    """
    info = check_order(curve_id, order)
    raw = info.raw(order)
    try:
        return info.place(raw, order, width, height)
    except DegenerateViewport:
        return raw
