"""Errors raised by the curve engine.

All of them are caller mistakes that the caller can recover from (clamp the
order, pick a listed curve, resize the viewport), so they subclass
ValueError.
"""


class CurveError(ValueError):
    """Base class for curve engine errors."""


class UnknownCurve(CurveError):
    def __init__(self, curve_id):
        self.curve_id = curve_id
        super().__init__(f"unknown curve {curve_id!r}")


class InvalidOrder(CurveError):
    def __init__(self, curve_id, order, max_order):
        self.curve_id = curve_id
        self.order = order
        self.max_order = max_order
        super().__init__(
            f"order {order} out of range for {curve_id} (0..{max_order})")


class DegenerateViewport(CurveError):
    def __init__(self, width, height):
        self.width = width
        self.height = height
        super().__init__(f"viewport {width}x{height} has no drawable area")


class InvalidSpeed(CurveError):
    def __init__(self, speed):
        self.speed = speed
        super().__init__(f"reveal speed must be a positive integer, got {speed!r}")
