"""Closeness metrics: equation disagreement, axis lines and grid lines.

All functions work elementwise on numpy arrays and return float intensities
in [0, 255], where 255 means "fully on the curve".
"""

import itertools

import numpy as np

from ._common import AXIS_CONST, GRID_CONST


def distance(lhs, rhs, plain=False):
    """Disagreement between one value of each side.

    The proportional form divides by |lhs + rhs| so that large and small
    expressions are drawn with a similar thickness. A 0/0 result counts as
    infinitely far.
    """
    with np.errstate(all="ignore"):
        d = np.abs(lhs - rhs)
        if not plain:
            d = d / np.abs(lhs + rhs)
    return np.where(np.isnan(d), np.inf, d)


def min_distance(lhs_values, rhs_values, plain=False):
    """Smallest disagreement over every pairing of multi-valued results."""
    best = np.inf
    for lhs, rhs in itertools.product(lhs_values, rhs_values):
        best = np.fmin(best, distance(lhs, rhs, plain))
    return best


def intensity(min_d, accuracy):
    """Map a distance to [0, 255]: 255 at zero, falling to 0 at infinity."""
    with np.errstate(all="ignore"):
        value = 255.0 / (1.0 + np.square(min_d * accuracy))
    return np.where(np.isnan(value), 0.0, value)


def plot_intensity(plot, contexts, params, shape):
    """Intensity of one plot, taking the closest of all polar branches."""
    best = np.zeros(shape)
    for context in contexts:
        lhs_values = plot.lhs.evaluate(context)
        rhs_values = plot.rhs.evaluate(context)
        d = min_distance(lhs_values, rhs_values, params.plain_diff)
        best = np.maximum(best, intensity(d, params.accuracy))
    return best


def _line_falloff(offset_x, offset_y, pixel_radius, peak):
    with np.errstate(all="ignore"):
        value = peak * pixel_radius**2 * (np.power(offset_x, -2.0) + np.power(offset_y, -2.0))
    return np.clip(np.nan_to_num(value, nan=255.0, posinf=255.0), 0.0, 255.0)


def axis_intensity(point, params):
    """Darkening near x = 0 or y = 0."""
    x = np.asarray(point.x, dtype=np.float64)
    y = np.asarray(point.y, dtype=np.float64)
    return _line_falloff(x, y, params.pixel_radius, AXIS_CONST)


def grid_intensity(point, params):
    """Fainter darkening near every multiple of the grid size."""
    x = np.asarray(point.x, dtype=np.float64)
    y = np.asarray(point.y, dtype=np.float64)
    g = params.grid_size
    if g == 0:
        return np.zeros(np.broadcast(x, y).shape)
    dx = np.mod(x - g / 2.0, g) - g / 2.0
    dy = np.mod(y - g / 2.0, g) - g / 2.0
    return _line_falloff(dx, dy, params.pixel_radius, AXIS_CONST * GRID_CONST)


def overlay_intensity(point, params):
    """Combined axis and grid intensity, or zero when axes are off."""
    if not params.draw_axes:
        x = np.asarray(point.x)
        y = np.asarray(point.y)
        return np.zeros(np.broadcast(x, y).shape)
    return axis_intensity(point, params) + grid_intensity(point, params)
