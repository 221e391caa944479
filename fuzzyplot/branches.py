"""Polar branch contexts for evaluating expressions in r and t."""

import numpy as np

TAU = 2.0 * np.pi


def make_contexts(point, theta_range):
    """Return one variable binding per angular sheet at ``point``.

    A Cartesian point has many polar spellings: the angle can be shifted by
    whole turns, and a negative radius pairs with the angle rotated by half a
    turn. For every turn index n in ``range(*theta_range)`` this yields the
    positive-radius branch followed by the negative-radius branch.

    ``point`` may hold scalars or arrays; bound values are complex.
    """
    x = np.asarray(point.x, dtype=np.float64)
    y = np.asarray(point.y, dtype=np.float64)
    r0 = np.hypot(x, y)
    t0 = np.arctan2(y, x)
    # Pinned convention: t0 == 0 turns by -tau/2
    half_turn = np.where(t0 < 0, TAU / 2.0, -TAU / 2.0)

    cx = x.astype(np.complex128)
    cy = y.astype(np.complex128)
    contexts = []
    for n in range(*theta_range):
        t = t0 + TAU * n
        contexts.append({"x": cx, "y": cy, "r": (r0 + 0j), "t": (t + 0j)})
        contexts.append({"x": cx, "y": cy, "r": (-r0 + 0j), "t": (t + half_turn + 0j)})
    return contexts
