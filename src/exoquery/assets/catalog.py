"""Texture asset table and base texture selection."""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..models.bodies import CelestialBody, effective_temperature

FALLBACK_TEXTURE = "mercury"

# First entry is the fallback family
TEXTURE_ASSETS: Mapping[str, str] = MappingProxyType(
    {
        "mercury": "2k_mercury.jpg",
        "venus": "2k_venus_surface.jpg",
        "mars": "2k_mars.jpg",
        "jupiter": "2k_jupiter.jpg",
        "saturn": "2k_saturn.jpg",
        "uranus": "2k_uranus.jpg",
        "neptune": "2k_neptune.jpg",
    }
)

HOT_GAS_TEXTURE = "jupiter"
COOL_GAS_TEXTURE = "saturn"
HOT_ROCKY_TEXTURE = "venus"
COOL_ROCKY_TEXTURE = "mars"

GAS_GIANT_HOT_THRESHOLD_K = 500.0
ROCKY_HOT_THRESHOLD_K = 300.0


def validate_asset_table(table: Mapping[str, str] = TEXTURE_ASSETS) -> None:
    """Check that the fallback texture is present and listed first.

    Raises:
        ValueError: If the fallback entry is missing or not first
    """
    keys = list(table.keys())
    if not keys or keys[0] != FALLBACK_TEXTURE:
        raise ValueError(
            f"Texture asset table must start with the fallback entry '{FALLBACK_TEXTURE}'"
        )
    if not table[FALLBACK_TEXTURE]:
        raise ValueError("Fallback texture identifier must not be empty")


validate_asset_table()


def select_texture(body: CelestialBody) -> str:
    """Pick the base texture family for a body.

    Gas giants and rocky bodies are split into hot and cool variants by
    effective temperature; every other body type gets the fallback texture.
    A body with no temperature data counts as cold.

    Args:
        body: Body to texture

    Returns:
        Key into TEXTURE_ASSETS
    """
    temperature = effective_temperature(body)
    kelvin = temperature if temperature is not None else 0.0

    if body.body_type == "Gas Giant":
        if kelvin > GAS_GIANT_HOT_THRESHOLD_K:
            return HOT_GAS_TEXTURE
        return COOL_GAS_TEXTURE
    if body.body_type == "Rocky":
        if kelvin > ROCKY_HOT_THRESHOLD_K:
            return HOT_ROCKY_TEXTURE
        return COOL_ROCKY_TEXTURE
    return FALLBACK_TEXTURE


def resolve_texture_path(
    key: Optional[str], asset_root: Union[str, Path]
) -> Path:
    """Resolve a texture key to a file path under asset_root.

    Unknown keys resolve to the fallback texture.
    """
    identifier = TEXTURE_ASSETS.get(key) if key is not None else None
    if identifier is None:
        identifier = TEXTURE_ASSETS[FALLBACK_TEXTURE]
    return Path(asset_root) / identifier
