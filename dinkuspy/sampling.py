"""
Batch evaluation of curves into numpy arrays.

These helpers only call the public curve contract, they exist so rendering
and analysis code can sample many parameters or grid points in one call.
"""

from typing import Optional

import numpy as np

from .cad_types import P2
from .constants import DEFAULT_SAMPLE_COUNT
from .curve_like import CurveLike


def sample_parameters(count: int = DEFAULT_SAMPLE_COUNT, closed: bool = False) -> np.ndarray:
    """
    Evenly spaced parameters over the unit domain.

    Args:
        count: Number of parameters
        closed: Leave out 1.0 because it repeats 0.0 on a closed curve

    Returns:
        np.ndarray: ``count`` parameters in ascending order
    """
    if count < 1:
        raise ValueError(f"Sample count must be positive, got {count}")
    if count == 1:
        return np.zeros(1)
    return np.linspace(0.0, 1.0, count, endpoint=not closed)


def sample_points(curve: CurveLike, count: int = DEFAULT_SAMPLE_COUNT) -> np.ndarray:
    """Evaluate ``curve`` at ``count`` even parameters, returning an array of shape (count, 2)."""
    parameters = sample_parameters(count)
    points = [curve.point_at(float(t)) for t in parameters]
    return np.array([(p.x, p.y) for p in points], dtype=float)


def sample_tangents(curve: CurveLike, count: int = DEFAULT_SAMPLE_COUNT) -> np.ndarray:
    parameters = sample_parameters(count)
    tangents = [curve.tangent_at(float(t)) for t in parameters]
    return np.array([(v.x, v.y) for v in tangents], dtype=float)


def nearest_sample_parameter(
    curve: CurveLike, point: P2, count: int = DEFAULT_SAMPLE_COUNT
) -> float:
    """
    Brute-force nearest parameter: the sampled parameter whose point lies closest to ``point``.

    Accurate only to the sampling step, use it to check ``parameter_near``
    rather than to replace it.
    """
    parameters = sample_parameters(count)
    points = sample_points(curve, count)
    distances = np.linalg.norm(points - np.array([point.x, point.y]), axis=1)
    return float(parameters[int(np.argmin(distances))])


def distance_grid(
    curve: CurveLike,
    xs: np.ndarray,
    ys: np.ndarray,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    """
    Distance from every grid point to ``curve``.

    Args:
        curve: Curve to measure against
        xs: Grid x coordinates, one per column
        ys: Grid y coordinates, one per row
        out: Optional array of shape (len(ys), len(xs)) to fill

    Returns:
        np.ndarray: Distances indexed ``[row, column]``
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)
    shape = (len(ys), len(xs))
    if out is None:
        out = np.empty(shape)
    elif out.shape != shape:
        raise ValueError(f"Output array has shape {out.shape}, expected {shape}")

    for row, y in enumerate(ys):
        for column, x in enumerate(xs):
            out[row, column] = curve.distance_to(P2(x, y))
    return out
