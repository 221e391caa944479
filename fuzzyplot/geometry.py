"""Points, rectangles, and the pixel <-> graph coordinate mapping."""

import math
from typing import NamedTuple

from ._common import ArgumentError


class Point(NamedTuple):
    """A coordinate pair. Fields may be floats or equally shaped arrays."""

    x: object
    y: object


class Rect(NamedTuple):
    """Axis-aligned rectangle with its origin at (x, y)."""

    x: float
    y: float
    w: float
    h: float

    def map_point(self, p, target):
        """Map point p, given relative to this rectangle, into target."""
        return Point(
            (p.x - self.x) / self.w * target.w + target.x,
            (p.y - self.y) / self.h * target.h + target.y,
        )


def make_rect(x, y, w, h):
    """Build a Rect, rejecting empty or non-finite extents."""
    for value in (x, y, w, h):
        if not math.isfinite(value):
            raise ArgumentError(f"Rectangle values must be finite, got {value}")
    if w <= 0 or h <= 0:
        raise ArgumentError(f"Rectangle size must be positive, got {w} x {h}")
    return Rect(float(x), float(y), float(w), float(h))


def image_rect(width, height):
    """The pixel-space rectangle of a width x height image."""
    return make_rect(0.0, 0.0, width, height)


def graph_rect(width, height, zoom, center=(0.0, 0.0)):
    """The graph-space view for an image of the given size.

    ``2 ** -zoom`` is the "radius" of the view along the shorter image side;
    the longer side scales in proportion, so pixels stay square.
    """
    try:
        radius = 2.0 ** -zoom
    except OverflowError:
        raise ArgumentError(f"Zoom level {zoom} is out of range") from None
    if width >= height:
        half_w = radius * width / height
        half_h = radius
    else:
        half_w = radius
        half_h = radius * height / width
    cx, cy = center
    return make_rect(cx - half_w, cy - half_h, 2.0 * half_w, 2.0 * half_h)


def pixel_to_image_point(px, py, height):
    """Flip a top-left pixel coordinate into a bottom-left image point."""
    return Point(px, height - 1 - py)
