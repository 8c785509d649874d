from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.bodies import CelestialBody


def generate_summary(body: "CelestialBody") -> str:
    """Generate a details summary for a body.

    Args:
        body: Body record including its pass-through catalog fields.

    Returns:
        Human-readable summary string. Absent fields are left out.
    """
    title = body.english_name or body.name or body.id or "Unknown body"
    if body.alternative_name:
        title += f" ({body.alternative_name})"

    parts = [title]

    if body.body_type:
        parts.append(f"Type: {body.body_type}")

    if body.around_planet and body.around_planet.planet:
        parts.append(f"Orbits {body.around_planet.planet}")

    # Relative scale factor, no unit
    if body.mean_radius > 0:
        parts.append(f"Mean radius {body.mean_radius:g}")

    # 0 K is the catalog's placeholder for unknown
    if body.avg_temp:
        parts.append(f"Average temperature {body.avg_temp:.0f} K")

    if body.axial_tilt is not None:
        parts.append(f"Axial tilt {body.axial_tilt:g}°")

    if body.density is not None:
        parts.append(f"Density {body.density:g} g/cm³")

    if body.aphelion:
        parts.append(f"Aphelion {body.aphelion:.0f} km")

    if body.eccentricity is not None:
        parts.append(f"Eccentricity {body.eccentricity:.4f}")

    if body.discovery_date and body.discovered_by:
        parts.append(f"Discovered {body.discovery_date} by {body.discovered_by}")
    elif body.discovery_date:
        parts.append(f"Discovered {body.discovery_date}")
    elif body.discovered_by:
        parts.append(f"Discovered by {body.discovered_by}")

    return ". ".join(parts) + "."
