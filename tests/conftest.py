"""Shared fixtures and path checks for sfcurves tests."""

import numpy as np
import pytest

from sfcurves.session import CurveSession


@pytest.fixture
def session():
    """Small Hilbert session: 16 points on a 300 px square."""
    return CurveSession("hilbert", order=2, size=300, speed=4)


def chebyshev_steps(points):
    """Chebyshev distance between consecutive points."""
    pts = np.asarray(points)
    return np.abs(np.diff(pts, axis=0)).max(axis=1)


def grid_cells(points):
    """Set of integer cells visited by grid-space points."""
    return {(int(round(x)), int(round(y))) for x, y in points}


def inside(points, width, height, margin=0.0, tol=1e-6):
    pts = np.asarray(points)
    return bool(
        (pts[:, 0] >= margin - tol).all() and (pts[:, 0] <= width - margin + tol).all()
        and (pts[:, 1] >= margin - tol).all() and (pts[:, 1] <= height - margin + tol).all()
    )
