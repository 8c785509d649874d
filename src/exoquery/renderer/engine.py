"""CPU-only procedural texture synthesizer for celestial bodies."""

from pathlib import Path
from typing import Awaitable, Callable, Optional, Tuple, Union

import numpy as np
import structlog
from PIL import Image

from ..assets.catalog import FALLBACK_TEXTURE, resolve_texture_path, select_texture
from ..assets.loader import load_texture
from ..color.encoding import apply_tint
from ..color.tint import body_tint
from ..config import settings
from ..errors import AssetLoadError, FallbackLoadError
from ..models.bodies import CelestialBody, effective_temperature
from ..models.texture import PlanetTexture

logger = structlog.get_logger(__name__)

# Half-height beyond which a row belongs to a polar band
POLAR_BAND_THRESHOLD = 0.4
ICE_CAP_TILT_THRESHOLD_DEG = 20.0

TextureLoader = Callable[[Union[str, Path]], Awaitable[Image.Image]]


def polar_mask(width: int, height: int) -> np.ndarray:
    """Boolean mask of pixels inside the polar ice bands.

    Uses normalized coordinates nx = x / width - 0.5 and
    ny = y / height - 0.5; a pixel is polar when |ny| > 0.4 and |nx| < 0.5.

    Args:
        width: Texture width in pixels
        height: Texture height in pixels

    Returns:
        np.ndarray: Boolean array with shape (height, width)
    """
    nx = np.arange(width, dtype=np.float64) / width - 0.5
    ny = np.arange(height, dtype=np.float64) / height - 0.5

    polar_rows = np.abs(ny) > POLAR_BAND_THRESHOLD
    inside_columns = np.abs(nx) < 0.5

    return polar_rows[:, np.newaxis] & inside_columns[np.newaxis, :]


class TextureSynthesizer:
    """Composes a body's surface texture from a base image and its attributes."""

    def __init__(
        self,
        size: Optional[int] = None,
        asset_root: Optional[Union[str, Path]] = None,
        loader: TextureLoader = load_texture,
    ):
        """Initialize synthesizer.

        Args:
            size: Output edge length in pixels (default: settings.texture_size)
            asset_root: Directory holding the base textures (default: settings.asset_root)
            loader: Coroutine function loading an image from a path
        """
        size = settings.texture_size if size is None else size
        if size < 1:
            raise ValueError("Texture size must be at least 1 pixel")

        self.size = size
        self.asset_root = Path(
            settings.asset_root if asset_root is None else asset_root
        )
        self.loader = loader

        self._polar_mask = polar_mask(self.size, self.size)

    async def synthesize(self, body: CelestialBody) -> PlanetTexture:
        """Build the finished texture for a body.

        Args:
            body: Body to texture

        Returns:
            PlanetTexture with RGBA pixels tagged as linear color space

        Raises:
            FallbackLoadError: If both the selected and the fallback texture fail to load
        """
        temperature = effective_temperature(body)
        texture_key = select_texture(body)

        base_image, texture_path, used_fallback = await self._load_base_texture(
            texture_key
        )

        tint = body_tint(temperature, body.density)
        pixels = self.composite(base_image, tint, body.axial_tilt)

        logger.debug(
            "texture_synthesized",
            body=body.name or body.id,
            texture=str(texture_path),
            used_fallback=used_fallback,
            temperature=temperature,
        )

        return PlanetTexture(
            pixels=pixels,
            texture_path=str(texture_path),
            used_fallback=used_fallback,
            tint=(float(tint[0]), float(tint[1]), float(tint[2])),
            body=body,
            axial_tilt=body.axial_tilt,
            mean_radius=body.mean_radius,
        )

    async def _load_base_texture(
        self, texture_key: str
    ) -> Tuple[Image.Image, Path, bool]:
        """Load the selected texture, falling back once to the fallback texture."""
        primary_path = resolve_texture_path(texture_key, self.asset_root)
        fallback_path = resolve_texture_path(FALLBACK_TEXTURE, self.asset_root)

        logger.info("texture_loading", path=str(primary_path))
        try:
            return await self.loader(primary_path), primary_path, False
        except AssetLoadError as primary_error:
            # Retried once even when the primary already is the fallback
            logger.warning(
                "texture_load_failed",
                path=str(primary_path),
                error=primary_error.reason,
                fallback=str(fallback_path),
            )
            error = primary_error

        try:
            image = await self.loader(fallback_path)
        except AssetLoadError as fallback_error:
            logger.error(
                "fallback_texture_failed",
                path=str(fallback_path),
                error=fallback_error.reason,
            )
            raise FallbackLoadError(str(fallback_path), error) from fallback_error

        return image, fallback_path, True

    def composite(
        self,
        base_image: Image.Image,
        tint: np.ndarray,
        axial_tilt: Optional[float],
    ) -> np.ndarray:
        """Composite the base image, ice caps and tint into RGBA pixels.

        Args:
            base_image: Loaded base texture of any size
            tint: RGB multiplier in [0, 1]
            axial_tilt: Degrees; ice caps are drawn above ICE_CAP_TILT_THRESHOLD_DEG

        Returns:
            np.ndarray: uint8 RGBA array with shape (size, size, 4)
        """
        scaled = base_image.convert("RGBA").resize(
            (self.size, self.size), Image.Resampling.BILINEAR
        )
        pixels = np.array(scaled, dtype=np.uint8)

        if axial_tilt is not None and axial_tilt > ICE_CAP_TILT_THRESHOLD_DEG:
            pixels[self._polar_mask, :3] = 255

        pixels[:, :, :3] = apply_tint(pixels[:, :, :3], tint)

        return pixels


async def synthesize_texture(
    body: CelestialBody,
    size: Optional[int] = None,
    asset_root: Optional[Union[str, Path]] = None,
) -> PlanetTexture:
    """Convenience coroutine for one-off synthesis.

    Args:
        body: Body to texture
        size: Output edge length in pixels (default: settings.texture_size)
        asset_root: Directory holding the base textures (default: settings.asset_root)

    Returns:
        PlanetTexture for the body
    """
    synthesizer = TextureSynthesizer(size=size, asset_root=asset_root)
    return await synthesizer.synthesize(body)
