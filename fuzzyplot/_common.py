"""Shared constants and error types for fuzzyplot."""

import os

# ---------------------------------------------------------------------------
# Rendering constants
# ---------------------------------------------------------------------------

# Distance scaling: an intensity of 1 is reached at a distance of roughly
# sqrt(thickness / ACCURACY_CONST).
ACCURACY_CONST = float(1 << 16)

# Axis intensity half a pixel away from an axis line
AXIS_CONST = 256.0

# Grid lines are drawn at this fraction of the axis intensity
GRID_CONST = 0.25

# Fractional powers with a denominator above this only use the principal value
MAX_ROOT_BRANCHES = 8

# Worker pool size and rows per work item
WORKERS = os.cpu_count() or 4
CHUNK_ROWS = 16

# Point used to dry-run expressions before rendering
CANONICAL_POINT = (1.0, 1.0)

# Channel bits: 0 = red, 1 = green, 2 = blue
ALL_CHANNELS = 0b111
SINGLE_PLOT_MASK = 0b110  # darken green and blue, so the curve reads red
MAX_EQUATIONS = 3

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_OUTFILE = "graph.png"
DEFAULT_SIZE = (800, 800)
DEFAULT_ZOOM = -1.0
DEFAULT_T_RANGE = (0, 0)
DEFAULT_GRID_SIZE = 1.0
DEFAULT_SHARPNESS = 0.0
DEFAULT_CENTER = (0.0, 0.0)

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class FuzzyplotError(Exception):
    """Base class for errors reported to the user."""


class ArgumentError(FuzzyplotError):
    """Invalid command-line values, detected before any rendering."""


class ParseError(FuzzyplotError):
    """An equation string could not be split or parsed."""


class EvaluationError(FuzzyplotError):
    """An expression cannot be evaluated at any point."""


class RenderError(FuzzyplotError):
    """The rendered image could not be written."""
