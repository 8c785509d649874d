from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Optional

import numpy as np
from PIL import Image

if TYPE_CHECKING:
    from .bodies import CelestialBody


@dataclass(frozen=True)
class PlanetTexture:
    pixels: np.ndarray
    texture_path: str
    used_fallback: bool
    tint: tuple[float, float, float]
    body: "CelestialBody"
    axial_tilt: Optional[float]
    mean_radius: float
    color_space: Literal["linear"] = "linear"

    def __post_init__(self):
        if self.pixels.dtype != np.uint8:
            raise ValueError("pixels must be uint8")
        if self.pixels.ndim != 3 or self.pixels.shape[2] != 4:
            raise ValueError("pixels must have shape (height, width, 4)")

    def to_image(self) -> Image.Image:
        """Return the texture as an RGBA PIL image."""
        return Image.fromarray(self.pixels)
