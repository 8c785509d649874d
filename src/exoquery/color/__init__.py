from .encoding import apply_tint, to_8bit
from .tint import (
    apply_density,
    body_tint,
    normalize_temperature,
    temperature_to_color,
)

__all__ = [
    "apply_tint",
    "to_8bit",
    "apply_density",
    "body_tint",
    "normalize_temperature",
    "temperature_to_color",
]
