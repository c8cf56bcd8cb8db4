"""Grid curves (Hilbert, Peano) and the recursive triangle infill.

Each curve has a raw stage, which works in its own natural frame, and a
placement stage that maps the raw points into a pixel viewport.
"""

from sfcurves.config import TRIANGLE_DROP, TRIANGLE_INSET
from sfcurves.geometry import (
    as_points, check_viewport, equilateral_triangle, midpoint, place_on_grid,
)


# ── Hilbert curve ─────────────────────────────────────────────────────

def hilbert_d2xy(n, d):
    """Convert distance d along a Hilbert curve to (x, y) in an n×n grid."""
    x = y = 0
    s = 1
    while s < n:
        rx = 1 & (d // 2)
        ry = 1 & (d ^ rx)
        if ry == 0:
            if rx == 1:
                x = s - 1 - x
                y = s - 1 - y
            x, y = y, x
        x += s * rx
        y += s * ry
        d //= 4
        s *= 2
    return x, y


def hilbert_grid(order):
    """Return the 4**order grid points of a Hilbert curve, in path order."""
    n = 2 ** order
    return as_points([hilbert_d2xy(n, d) for d in range(n * n)])


def place_hilbert(raw, order, width, height):
    return place_on_grid(raw, 2 ** order, width, height)


# ── Peano curve ───────────────────────────────────────────────────────

def peano_d2xy(order, d):
    """Convert distance d along a Peano curve to (x, y) in a 3**order grid.

    d is read as 2*order base-3 digits, most significant first, one
    (x, y) digit pair per level.  A digit is reflected (k -> 2 - k) when the
    digits that came before it on the other axis sum to an odd number, which
    turns each 3×3 block into a serpentine that enters where the previous
    block left off.
    """
    digits = []
    for _ in range(2 * order):
        d, k = divmod(d, 3)
        digits.append(k)
    digits.reverse()

    x = y = 0
    x_sum = y_sum = 0
    for level in range(order):
        a, b = digits[2 * level], digits[2 * level + 1]
        dx = 2 - a if y_sum % 2 else a
        x_sum += a
        dy = 2 - b if x_sum % 2 else b
        y_sum += b
        x = 3 * x + dx
        y = 3 * y + dy
    return x, y


def peano_grid(order):
    """Return the 9**order grid points of a Peano curve, in path order."""
    n = 3 ** order
    return as_points([peano_d2xy(order, d) for d in range(n * n)])


def place_peano(raw, order, width, height):
    return place_on_grid(raw, 3 ** order, width, height)


# ── Triangle infill ───────────────────────────────────────────────────

def _subdivide(a, b, c, order, out):
    if order == 0:
        out.extend((a, b, c, a))
        return

    ab = midpoint(a, b)
    bc = midpoint(b, c)
    ca = midpoint(c, a)

    # Corner triangles only; the central one stays open.
    _subdivide(a, ab, ca, order - 1, out)
    _subdivide(ab, b, bc, order - 1, out)
    _subdivide(ca, bc, c, order - 1, out)

    if order > 1:
        out.extend((ab, bc, ca, ab))


def subdivide_triangle(a, b, c, order):
    """Depth-first outline of a Sierpinski-style triangle subdivision.

    Order 0 is the closed outline a, b, c, a.  Higher orders recurse into the
    three corner triangles and, above order 1, trace the loop joining the
    edge midpoints afterwards.
    """
    out = []
    _subdivide(a, b, c, order, out)
    return as_points(out)


def triangle_raw(order):
    """Subdivision of a unit-side triangle centred on the origin."""
    a, b, c = equilateral_triangle((0.0, 0.0), 1.0)
    return subdivide_triangle(a, b, c, order)


def place_triangle(raw, order, width, height):
    check_viewport(width, height)
    short = min(width, height)
    if short > TRIANGLE_INSET:
        side, drop = short - TRIANGLE_INSET, TRIANGLE_DROP
    else:
        # Too small for the inset: fill the short side, no drop.
        side, drop = short, 0
    return raw * side + (width / 2, height / 2 + drop)
