from .bodies import (
    AroundPlanet,
    CelestialBody,
    REFERENCE_TEMPERATURES,
    effective_temperature,
    reference_temperature,
)
from .texture import PlanetTexture

__all__ = [
    "AroundPlanet",
    "CelestialBody",
    "REFERENCE_TEMPERATURES",
    "effective_temperature",
    "reference_temperature",
    "PlanetTexture",
]
