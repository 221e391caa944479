"""Tests for the subtractive compositor."""

# Third Party
import numpy as np

# local repo modules
from fuzzyplot.compose import apply_mask, blank_canvas, saturating_sub, to_channel


#============================================
def test_blank_canvas_is_white():
    pixels = blank_canvas(2, 3)
    assert pixels.shape == (2, 3, 3)
    assert pixels.dtype == np.uint8
    assert np.all(pixels == 255)


#============================================
def test_to_channel_clips_and_truncates():
    values = to_channel(np.array([-5.0, 0.4, 12.9, 254.99, 1e9, np.inf]))
    assert values.tolist() == [0, 0, 12, 254, 255, 255]


#============================================
def test_saturating_sub_never_underflows():
    channel = np.array([0, 10, 200, 255], dtype=np.uint8)
    amount = np.array([5, 10, 100, 255], dtype=np.uint8)
    assert saturating_sub(channel, amount).tolist() == [0, 0, 100, 0]


#============================================
def test_repeated_darkening_saturates_at_zero():
    pixels = blank_canvas(1, 1)
    for _ in range(5):
        apply_mask(pixels, np.full((1, 1), 200.0), 0b111)
    assert pixels.tolist() == [[[0, 0, 0]]]


#============================================
def test_red_only_mask_leaves_green_and_blue():
    pixels = blank_canvas(1, 2)
    apply_mask(pixels, np.array([[100.0, 1e6]]), 0b001)
    assert pixels[..., 0].tolist() == [[155, 0]]
    assert np.all(pixels[..., 1:] == 255)


#============================================
def test_order_independent():
    a = blank_canvas(1, 3)
    b = blank_canvas(1, 3)
    first = np.array([[30.0, 200.0, 90.0]])
    second = np.array([[250.0, 80.0, 10.0]])
    apply_mask(a, first, 0b110)
    apply_mask(a, second, 0b101)
    apply_mask(b, second, 0b101)
    apply_mask(b, first, 0b110)
    assert np.array_equal(a, b)


#============================================
def test_overlap_is_darker_than_either_plot():
    alone_a = apply_mask(blank_canvas(1, 1), np.full((1, 1), 255.0), 0b110)
    alone_b = apply_mask(blank_canvas(1, 1), np.full((1, 1), 255.0), 0b101)
    both = apply_mask(alone_a.copy(), np.full((1, 1), 255.0), 0b101)
    assert alone_a.tolist() == [[[255, 0, 0]]]
    assert alone_b.tolist() == [[[0, 255, 0]]]
    assert both.tolist() == [[[0, 0, 0]]]
    assert int(both.sum()) < min(int(alone_a.sum()), int(alone_b.sum()))
