"""Subtractive compositing of overlay and plot intensities onto white."""

import numpy as np

from ._common import ALL_CHANNELS

OVERLAY_MASK = ALL_CHANNELS


def blank_canvas(height, width):
    return np.full((height, width, 3), 255, dtype=np.uint8)


def to_channel(intensity):
    """Clip a float intensity to [0, 255] and truncate to uint8."""
    return np.clip(intensity, 0.0, 255.0).astype(np.uint8)


def saturating_sub(channel, amount):
    """channel - amount, stopping at 0."""
    return np.where(channel > amount, channel - amount, 0).astype(np.uint8)


def apply_mask(pixels, intensity, mask):
    """Darken the channels selected by ``mask`` in place and return pixels.

    Channels outside the mask are left untouched. Because each step
    saturates independently, plots can be applied in any order.
    """
    amount = to_channel(intensity)
    for channel in range(3):
        if (mask >> channel) & 1:
            pixels[..., channel] = saturating_sub(pixels[..., channel], amount)
    return pixels
