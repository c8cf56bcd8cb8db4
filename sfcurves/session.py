"""One curve engine for every curve kind.

A CurveSession holds what a viewer needs between frames: the chosen curve,
its order, the viewport size, the reveal speed, the generated points, and
the reveal cursor.  Any change to curve, order, or size rebuilds the points
from scratch and rewinds the reveal.
"""

from sfcurves.config import DEFAULT_SIZE
from sfcurves.registry import check_order, clamp_order, generate, get_curve
from sfcurves.reveal import Reveal, check_speed, segment_colors, step_reveal


class CurveSession:

    def __init__(self, curve_id="hilbert", order=None, size=DEFAULT_SIZE,
                 speed=None):
        info = get_curve(curve_id)
        self.curve_id = curve_id
        self.order = info.default_order if order is None else order
        self.size = size
        self.speed = check_speed(info.default_speed if speed is None else speed)
        self.points = None
        self.reveal = None
        check_order(self.curve_id, self.order)
        self.regenerate()

    def __repr__(self):
        return (f"CurveSession({self.curve_id!r}, order={self.order}, "
                f"size={self.size}, points={len(self.points)})")

    @property
    def info(self):
        return get_curve(self.curve_id)

    def regenerate(self):
        """Rebuild the points for the current settings and rewind the reveal."""
        self.points = generate(self.curve_id, self.order, self.size, self.size)
        self.reveal = Reveal(len(self.points), self.speed)
        return self.points

    def set_curve(self, curve_id):
        """Switch curve kind, clamping the order to the new curve's maximum."""
        get_curve(curve_id)
        self.curve_id = curve_id
        self.order = clamp_order(curve_id, self.order)
        self.regenerate()

    def set_order(self, order):
        check_order(self.curve_id, order)
        self.order = order
        self.regenerate()

    def set_size(self, size):
        self.size = size
        self.regenerate()

    def set_speed(self, speed):
        self.speed = check_speed(speed)
        self.reveal.speed = speed

    # Reveal controls, forwarded so a UI only talks to the session.

    def start(self):
        self.reveal.start()

    def pause(self):
        self.reveal.pause()

    def resume(self):
        self.reveal.resume()

    def reset(self):
        self.reveal.reset()

    def frame(self):
        """Advance one frame; returns True while the reveal is still running."""
        return self.reveal.advance()

    def visible_segments(self):
        return step_reveal(self.points, self.reveal.cursor)

    def visible_colors(self):
        return segment_colors(self.points, self.reveal.cursor)
