"""Conversion of composited channel values to 8-bit pixels."""

import numpy as np


def to_8bit(values: np.ndarray) -> np.ndarray:
    """Clamp channel values to [0, 255] and truncate to 8-bit integers.

    Args:
        values: Channel values already on the 0-255 scale

    Returns:
        np.ndarray: uint8 values
    """
    return np.floor(np.clip(values, 0.0, 255.0)).astype(np.uint8)


def apply_tint(rgb_8bit: np.ndarray, tint: np.ndarray) -> np.ndarray:
    """Multiply 8-bit RGB channels componentwise by a [0, 1] tint.

    Equivalent to scaling each channel to [0, 1], multiplying by the tint
    and scaling back, without the round trip through division.

    Args:
        rgb_8bit: uint8 array with 3 channels in the last axis
        tint: RGB tint in [0, 1]

    Returns:
        np.ndarray: Tinted uint8 array with the same shape
    """
    return to_8bit(rgb_8bit.astype(np.float64) * np.asarray(tint, dtype=np.float64))
