"""Turn "<lhs>=<rhs>" strings into plots with their colour masks."""

from dataclasses import dataclass

from ._common import (
    ALL_CHANNELS,
    CANONICAL_POINT,
    MAX_EQUATIONS,
    SINGLE_PLOT_MASK,
    ArgumentError,
    EvaluationError,
    ParseError,
)
from .branches import make_contexts
from .expression import Expression, parse_expression
from .geometry import Point


@dataclass(frozen=True)
class Plot:
    equation: str
    lhs: Expression
    rhs: Expression
    mask: int


def split_equation(equation):
    """Split an equation into its left and right sides."""
    sides = equation.split("=")
    if len(sides) != 2:
        raise ParseError(f"Equations should have exactly 1 '=' sign: '{equation}'")
    return sides[0], sides[1]


def channel_mask(index, count):
    """Channels darkened by equation ``index`` of ``count``.

    A lone equation is drawn in red. With several, equation i leaves
    channel i alone, so overlaps mix subtractively.
    """
    if count == 1:
        return SINGLE_PLOT_MASK
    return ALL_CHANNELS ^ (1 << index)


def make_plot(equation, index=0, count=1):
    lhs_text, rhs_text = split_equation(equation)
    lhs = parse_expression(lhs_text)
    rhs = parse_expression(rhs_text)
    return Plot(equation, lhs, rhs, channel_mask(index, count))


def check_plot(plot):
    """Evaluate both sides once so structural errors surface before rendering.

    Raises EvaluationError for constructs the evaluator can't handle at
    any point.
    """
    context = make_contexts(Point(*CANONICAL_POINT), (0, 1))[0]
    try:
        plot.lhs.evaluate(context)
        plot.rhs.evaluate(context)
    except EvaluationError as exc:
        variables = sorted(set(plot.lhs.variables) | set(plot.rhs.variables))
        raise EvaluationError(
            f"Can't plot '{plot.equation}' (variables: {', '.join(variables) or 'none'}): {exc}"
        ) from exc


def make_plots(equations):
    if not equations:
        raise ArgumentError("No equation given. See 'fuzzyplot --help' for usage")
    if len(equations) > MAX_EQUATIONS:
        raise ArgumentError(f"Maximum of {MAX_EQUATIONS} equations allowed, got {len(equations)}")

    plots = []
    for i, equation in enumerate(equations):
        plot = make_plot(equation, i, len(equations))
        check_plot(plot)
        plots.append(plot)
    return plots
