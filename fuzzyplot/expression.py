"""Parse expression strings with sympy and evaluate them over numpy arrays.

Evaluation is multi-valued: fractional powers return every root, and sums,
products and function calls combine the values of their operands. Each
result is a complex numpy scalar or array shaped like the bound variables.
"""

import itertools
import operator
from functools import reduce
from tokenize import TokenError

import numpy as np
import sympy as sp
from sympy.core.function import AppliedUndef
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)

from ._common import MAX_ROOT_BRANCHES, EvaluationError, ParseError

VARIABLES = ("x", "y", "r", "t")

_SYMBOLS = dict(zip(VARIABLES, sp.symbols(VARIABLES)))

NAMESPACE = {
    **_SYMBOLS,
    "e": sp.E,
    "i": sp.I,
    "pi": sp.pi,
    "tau": 2 * sp.pi,
    "sin": sp.sin,
    "cos": sp.cos,
    "tan": sp.tan,
    "asin": sp.asin,
    "acos": sp.acos,
    "atan": sp.atan,
    "sinh": sp.sinh,
    "cosh": sp.cosh,
    "tanh": sp.tanh,
    "exp": sp.exp,
    "log": sp.log,
    "ln": sp.log,
    "sqrt": sp.sqrt,
    "abs": sp.Abs,
    "re": sp.re,
    "im": sp.im,
    "arg": sp.arg,
}

TRANSFORMATIONS = standard_transformations + (
    implicit_multiplication_application,
    convert_xor,
)

# Single-argument functions and their numpy counterparts
FUNCTIONS = {
    sp.sin: np.sin,
    sp.cos: np.cos,
    sp.tan: np.tan,
    sp.sec: lambda v: 1.0 / np.cos(v),
    sp.csc: lambda v: 1.0 / np.sin(v),
    sp.cot: lambda v: 1.0 / np.tan(v),
    sp.asin: np.arcsin,
    sp.acos: np.arccos,
    sp.atan: np.arctan,
    sp.sinh: np.sinh,
    sp.cosh: np.cosh,
    sp.tanh: np.tanh,
    sp.asinh: np.arcsinh,
    sp.acosh: np.arccosh,
    sp.atanh: np.arctanh,
    sp.exp: np.exp,
    sp.log: np.log,
    sp.Abs: np.abs,
    sp.re: np.real,
    sp.im: np.imag,
    sp.arg: np.angle,
    sp.conjugate: np.conjugate,
}


class Expression:
    """A parsed expression. Immutable, so safe to share between threads."""

    def __init__(self, text, tree):
        self.text = text
        self.tree = tree

    def __repr__(self):
        return f"Expression({self.text!r})"

    @property
    def variables(self):
        return sorted(s.name for s in self.tree.free_symbols)

    def evaluate(self, context):
        """Return every value of the expression under ``context``.

        ``context`` maps variable names to complex scalars or arrays.
        Numeric trouble such as division by zero shows up as inf or nan
        in the results rather than as an exception.
        """
        with np.errstate(all="ignore"):
            return _values(self.tree, context)


def parse_expression(text):
    """Parse one side of an equation."""
    if not text.strip():
        raise ParseError("Empty expression")
    try:
        tree = parse_expr(
            text,
            local_dict=dict(NAMESPACE),
            transformations=TRANSFORMATIONS,
            evaluate=False,
        )
    except (SyntaxError, TokenError, TypeError, ValueError, AttributeError, sp.SympifyError) as exc:
        raise ParseError(f"Couldn't parse expression '{text.strip()}': {exc}") from exc

    if not isinstance(tree, sp.Expr):
        raise ParseError(f"'{text.strip()}' is not an arithmetic expression")

    unknown = sorted(s.name for s in tree.free_symbols if s.name not in VARIABLES)
    if unknown:
        raise ParseError(
            f"Unknown variable(s) {', '.join(unknown)} in '{text.strip()}' "
            f"(available: {', '.join(VARIABLES)})"
        )
    undefined = sorted({str(f.func) for f in tree.atoms(AppliedUndef)})
    if undefined:
        raise ParseError(f"Unknown function(s) {', '.join(undefined)} in '{text.strip()}'")

    return Expression(text.strip(), tree)


def _combine(op, value_lists):
    """Apply a binary op across every combination of operand values."""
    return [reduce(op, combo) for combo in itertools.product(*value_lists)]


def _constant(node):
    try:
        return np.complex128(complex(node))
    except (TypeError, ValueError):
        # zoo, nan and friends
        return np.complex128(complex("nan"))


def _root_values(base_values, p, q):
    """All q values of b ** (p/q)."""
    out = []
    for b in base_values:
        log_b = np.log(np.asarray(b, dtype=np.complex128))
        for k in range(q):
            out.append(np.exp(p / q * (log_b + 2j * np.pi * k)))
    return out


def _power_values(node, context):
    base_values = _values(node.base, context)
    exponent = node.exp
    if not exponent.free_symbols:
        exponent = exponent.doit()

    if exponent.is_Integer:
        n = int(exponent)
        return [np.power(np.asarray(b, dtype=np.complex128), n) for b in base_values]
    if exponent.is_Rational and 1 < exponent.q <= MAX_ROOT_BRANCHES:
        return _root_values(base_values, int(exponent.p), int(exponent.q))

    exponent_values = _values(exponent, context)
    return _combine(np.power, [base_values, exponent_values])


def _values(node, context):
    if node.is_Symbol:
        try:
            return [context[node.name]]
        except KeyError:
            raise EvaluationError(f"Variable '{node.name}' is not bound") from None
    if node.is_Atom:
        return [_constant(node)]
    if node.is_Add:
        return _combine(operator.add, [_values(a, context) for a in node.args])
    if node.is_Mul:
        return _combine(operator.mul, [_values(a, context) for a in node.args])
    if node.is_Pow:
        return _power_values(node, context)

    if node.func is sp.log and len(node.args) == 2:
        # log(n, base)
        value_vals = [np.log(v) for v in _values(node.args[0], context)]
        base_vals = [np.log(v) for v in _values(node.args[1], context)]
        return _combine(operator.truediv, [value_vals, base_vals])

    func = FUNCTIONS.get(node.func)
    if func is None or len(node.args) != 1:
        raise EvaluationError(f"Unsupported operation '{node.func.__name__}' in expression")
    return [np.asarray(func(v), dtype=np.complex128) for v in _values(node.args[0], context)]
