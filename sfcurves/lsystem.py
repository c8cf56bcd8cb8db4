"""L-system rewriting, turtle interpretation, and the Gosper flowsnake."""

import math

from sfcurves.config import FLOWSNAKE_INSET, TURN_ANGLE
from sfcurves.geometry import as_points, check_viewport, normalize

FLOWSNAKE_AXIOM = "A"
FLOWSNAKE_RULES = {"A": "A-B--B+A++AA+B-", "B": "+A-BB--B-A++A+B"}

DRAW_SYMBOLS = frozenset("AB")


def rewrite(axiom, rules, iterations):
    """Apply the production rules to every symbol at once, ``iterations`` times.

    Symbols without a rule (the turns) are copied through unchanged.
    """
    s = axiom
    for _ in range(iterations):
        s = "".join(rules.get(c, c) for c in s)
    return s


def turtle_points(symbols, step=1.0, start=(0.0, 0.0), heading=0.0,
                  angle=TURN_ANGLE):
    """Walk a symbol string and return every position the turtle visits.

    ``A``/``B`` move forward by ``step`` and record the new position, ``+``
    turns by ``+angle`` degrees and ``-`` by ``-angle``.  Anything else is
    ignored.  The start position is the first point.
    """
    x, y = start
    direction = heading
    points = [(x, y)]
    for c in symbols:
        if c in DRAW_SYMBOLS:
            rad = math.radians(direction)
            x += step * math.cos(rad)
            y += step * math.sin(rad)
            points.append((x, y))
        elif c == "+":
            direction += angle
        elif c == "-":
            direction -= angle
    return as_points(points)


def flowsnake_symbols(order):
    return rewrite(FLOWSNAKE_AXIOM, FLOWSNAKE_RULES, order)


def flowsnake_raw(order):
    """Gosper curve with unit step from the origin: 7**order + 1 points."""
    return turtle_points(flowsnake_symbols(order))


def flowsnake_step(order, width, height):
    short = min(width, height)
    usable = short - FLOWSNAKE_INSET if short > FLOWSNAKE_INSET else short
    return usable / 3 ** order


def place_flowsnake(raw, order, width, height):
    """Scale to the viewport step length, then centre (and shrink if needed)."""
    check_viewport(width, height)
    step = flowsnake_step(order, width, height)
    return normalize(raw * step + (width / 2, height / 2), width, height)
