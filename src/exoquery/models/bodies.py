from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class AroundPlanet:
    planet: Optional[str] = None


@dataclass(frozen=True)
class CelestialBody:
    mean_radius: float = 0.0
    avg_temp: Optional[float] = None
    body_type: str = ""
    density: Optional[float] = None
    axial_tilt: Optional[float] = None
    around_planet: Optional[AroundPlanet] = None
    id: str = ""
    name: str = ""
    english_name: str = ""
    alternative_name: str = ""
    aphelion: Optional[float] = None
    perihelion: Optional[float] = None
    discovery_date: str = ""
    discovered_by: str = ""
    eccentricity: Optional[float] = None
    is_planet: bool = False

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CelestialBody":
        """Build a body from a raw catalog record.

        Args:
            record: One entry of the catalog's ``bodies`` list

        Returns:
            CelestialBody with absent optional fields set to None

        Raises:
            TypeError: If the record is not a mapping
            ValueError: If a numeric field holds a non-numeric value
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"body record must be a mapping, got {type(record).__name__}")

        around = record.get("aroundPlanet")
        around_planet = None
        if isinstance(around, Mapping):
            around_planet = AroundPlanet(planet=around.get("planet") or None)

        return cls(
            mean_radius=_as_float(record, "meanRadius") or 0.0,
            avg_temp=_as_float(record, "avgTemp"),
            body_type=str(record.get("bodyType") or ""),
            density=_as_float(record, "density"),
            axial_tilt=_as_float(record, "axialTilt"),
            around_planet=around_planet,
            id=str(record.get("id") or ""),
            name=str(record.get("name") or ""),
            english_name=str(record.get("englishName") or ""),
            alternative_name=str(record.get("alternativeName") or ""),
            aphelion=_as_float(record, "aphelion"),
            perihelion=_as_float(record, "perihelion"),
            discovery_date=str(record.get("discoveryDate") or ""),
            discovered_by=str(record.get("discoveredBy") or ""),
            eccentricity=_as_float(record, "eccentricity"),
            is_planet=bool(record.get("isPlanet", False)),
        )


def _as_float(record: Mapping[str, Any], key: str) -> Optional[float]:
    value = record.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"field '{key}' must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"field '{key}' must be numeric, got {value!r}") from e


# Mean temperatures in Kelvin, keyed by catalog id (None = no data)
REFERENCE_TEMPERATURES: Mapping[str, Optional[float]] = MappingProxyType(
    {
        "terre": 288.0,  # Earth
        "mars": 210.0,
        "jupiter": 165.0,  # upper atmosphere
        "saturne": 134.0,  # upper atmosphere
        "uranus": 76.0,
        "neptune": 72.0,
        "pluton": 44.0,
        "haumea": 73.0,
        "eris": 43.0,
        "null": None,
        "eugenia": 90.0,
        "sylvia": 90.0,
        "orcus": 70.0,
        "ida": 200.0,
        "kleopatra": 220.0,
        "quaoar": 70.0,
        "makemake": 75.0,
    }
)


def reference_temperature(key: Optional[str]) -> Optional[float]:
    """Look up a reference temperature; unknown keys mean no data."""
    if key is None:
        return None
    return REFERENCE_TEMPERATURES.get(key)


def effective_temperature(body: CelestialBody) -> Optional[float]:
    """Resolve the temperature used for tinting and texture selection.

    A body orbiting a planet listed in REFERENCE_TEMPERATURES takes that
    planet's value, which may itself be None. Otherwise the body's own
    avg_temp is used.

    Args:
        body: Body to resolve

    Returns:
        Temperature in Kelvin, or None when no data is available
    """
    planet = body.around_planet.planet if body.around_planet else None
    if planet is not None and planet in REFERENCE_TEMPERATURES:
        return REFERENCE_TEMPERATURES[planet]
    return body.avg_temp
