"""Tests for the polar branch context builder."""

# Third Party
import numpy as np
import pytest

# local repo modules
from fuzzyplot.branches import TAU, make_contexts
from fuzzyplot.geometry import Point


#============================================
def test_default_range_gives_two_contexts():
    contexts = make_contexts(Point(1.0, 1.0), (0, 1))
    assert len(contexts) == 2


#============================================
@pytest.mark.parametrize("t_min, t_max", [(0, 0), (-1, 1), (2, 5), (-3, -3)])
def test_context_count(t_min, t_max):
    contexts = make_contexts(Point(0.3, -0.2), (t_min, t_max + 1))
    assert len(contexts) == 2 * (t_max - t_min + 1)


#============================================
def test_positive_and_negative_radius_branches():
    positive, negative = make_contexts(Point(0.0, 2.0), (0, 1))
    assert positive["x"] == 0.0
    assert positive["y"] == 2.0
    assert positive["r"] == pytest.approx(2.0)
    assert positive["t"] == pytest.approx(TAU / 4)
    assert negative["r"] == pytest.approx(-2.0)
    assert negative["t"] == pytest.approx(TAU / 4 - TAU / 2)


#============================================
def test_negative_angle_turns_forward():
    _, negative = make_contexts(Point(0.0, -1.0), (0, 1))
    assert negative["t"] == pytest.approx(-TAU / 4 + TAU / 2)


#============================================
def test_zero_angle_tie_break_is_pinned():
    # Pinned convention, not a principled choice: t0 == 0 turns by -tau/2.
    _, negative = make_contexts(Point(1.0, 0.0), (0, 1))
    assert negative["t"] == pytest.approx(-TAU / 2)


#============================================
def test_turn_offsets():
    contexts = make_contexts(Point(1.0, 1.0), (-1, 2))
    angles = [float(c["t"].real) for c in contexts[::2]]
    assert angles == pytest.approx([TAU / 8 - TAU, TAU / 8, TAU / 8 + TAU])


#============================================
def test_negative_branch_describes_same_point():
    for context in make_contexts(Point(-0.7, 0.4), (-1, 2)):
        r = float(context["r"].real)
        t = float(context["t"].real)
        assert r * np.cos(t) == pytest.approx(-0.7)
        assert r * np.sin(t) == pytest.approx(0.4)


#============================================
def test_array_points():
    xs = np.array([[1.0, -1.0], [0.0, 2.0]])
    ys = np.array([[0.0, 1.0], [-3.0, 2.0]])
    contexts = make_contexts(Point(xs, ys), (0, 1))
    assert contexts[0]["r"].shape == (2, 2)
    assert np.allclose(contexts[0]["r"].real, np.hypot(xs, ys))
    assert np.allclose(contexts[1]["r"].real, -np.hypot(xs, ys))
    assert contexts[0]["x"].dtype == np.complex128
