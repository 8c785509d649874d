"""Temperature and density driven tint color."""

from typing import Optional

import numpy as np
from colour import HSL_to_RGB

MIN_TEMPERATURE_K = 50.0
MAX_TEMPERATURE_K = 400.0

# Hue of the coldest tint (blue); the hottest is 0 (red)
MAX_HUE_DEG = 240.0

DENSE_BODY_THRESHOLD = 5.0
DENSE_BODY_DARKENING = 0.8


def normalize_temperature(temperature: Optional[float]) -> float:
    """Map a temperature onto [0, 1] over the tint scale.

    Args:
        temperature: Kelvin, or None for no data (treated as the scale minimum)

    Returns:
        float: 0.0 at or below MIN_TEMPERATURE_K, 1.0 at or above MAX_TEMPERATURE_K
    """
    kelvin = temperature if temperature is not None else 0.0
    normalized = (kelvin - MIN_TEMPERATURE_K) / (MAX_TEMPERATURE_K - MIN_TEMPERATURE_K)
    return min(max(normalized, 0.0), 1.0)


def temperature_to_color(temperature: Optional[float]) -> np.ndarray:
    """Convert a temperature to a fully saturated tint color.

    Sweeps hue from blue (cold) to red (hot) at saturation 1 and
    lightness 0.5: hue = (1 - normalized) * MAX_HUE_DEG.

    Args:
        temperature: Kelvin, or None for no data

    Returns:
        np.ndarray: RGB tint in [0, 1]
    """
    normalized = normalize_temperature(temperature)
    hue = (1.0 - normalized) * MAX_HUE_DEG / 360.0
    rgb = HSL_to_RGB(np.array([hue, 1.0, 0.5]))
    return np.clip(np.asarray(rgb, dtype=np.float64), 0.0, 1.0)


def apply_density(tint: np.ndarray, density: Optional[float]) -> np.ndarray:
    """Darken the tint for dense bodies.

    Args:
        tint: RGB tint in [0, 1]
        density: Body density, or None when unknown (treated as not dense)

    Returns:
        np.ndarray: Tint scaled by DENSE_BODY_DARKENING if density exceeds the threshold
    """
    if density is not None and density > DENSE_BODY_THRESHOLD:
        return tint * DENSE_BODY_DARKENING
    return tint.copy()


def body_tint(temperature: Optional[float], density: Optional[float]) -> np.ndarray:
    return apply_density(temperature_to_color(temperature), density)
