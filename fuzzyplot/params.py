"""Immutable run configuration derived from the command line."""

import math
from dataclasses import dataclass

from ._common import (
    ACCURACY_CONST,
    DEFAULT_CENTER,
    DEFAULT_GRID_SIZE,
    DEFAULT_SHARPNESS,
    DEFAULT_T_RANGE,
    DEFAULT_ZOOM,
    ArgumentError,
)
from .geometry import Rect, graph_rect, image_rect


@dataclass(frozen=True)
class Params:
    width: int
    height: int
    image_rect: Rect
    graph_rect: Rect
    pixel_radius: float
    thickness: float
    sharpness: float
    accuracy: float
    plain_diff: bool
    draw_axes: bool
    grid_size: float
    theta_range: tuple


def _check_finite(name, value):
    if not math.isfinite(value):
        raise ArgumentError(f"{name} must be a finite number, got {value}")


def make_params(
    width,
    height,
    zoom=DEFAULT_ZOOM,
    t_range=DEFAULT_T_RANGE,
    plain_diff=False,
    draw_axes=True,
    grid_size=DEFAULT_GRID_SIZE,
    sharpness=DEFAULT_SHARPNESS,
    center=DEFAULT_CENTER,
):
    """Validate the user's settings and derive the rendering geometry.

    ``t_range`` is the inclusive range of full-turn indices; it is stored as
    the half-open ``(min, max + 1)``.
    """
    if width <= 0 or height <= 0:
        raise ArgumentError(
            f"The width and height must both be greater than zero, got {width} x {height}"
        )
    _check_finite("Zoom", zoom)
    _check_finite("Sharpness", sharpness)
    _check_finite("Grid size", grid_size)
    for value in center:
        _check_finite("Center", value)
    if grid_size < 0:
        raise ArgumentError(f"Grid size must not be negative, got {grid_size}")

    t_min, t_max = t_range
    if t_min > t_max:
        raise ArgumentError(f"Theta range is empty: {t_min} > {t_max}")

    pixels = image_rect(width, height)
    graph = graph_rect(width, height, zoom, center)
    thickness = graph.w * graph.h
    try:
        accuracy = math.sqrt(255.0 * ACCURACY_CONST / thickness) * 2.0**sharpness
    except OverflowError:
        raise ArgumentError(f"Sharpness {sharpness} is out of range") from None

    return Params(
        width=int(width),
        height=int(height),
        image_rect=pixels,
        graph_rect=graph,
        pixel_radius=graph.w / width / 2.0,
        thickness=thickness,
        sharpness=float(sharpness),
        accuracy=accuracy,
        plain_diff=bool(plain_diff),
        draw_axes=bool(draw_axes),
        grid_size=float(grid_size),
        theta_range=(int(t_min), int(t_max) + 1),
    )
