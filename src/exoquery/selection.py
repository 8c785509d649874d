from typing import Optional, Sequence

import numpy as np

from .models.bodies import CelestialBody


def select_body(
    bodies: Sequence[CelestialBody], seed: Optional[int] = None
) -> Optional[CelestialBody]:
    """Pick one body at random.

    Args:
        bodies: Candidate bodies
        seed: Random seed for deterministic selection

    Returns:
        Selected body, or None if there is nothing to select
    """
    if not bodies:
        return None

    rng = np.random.default_rng(seed)
    return bodies[int(rng.integers(len(bodies)))]


def find_body(
    bodies: Sequence[CelestialBody], name: str
) -> Optional[CelestialBody]:
    """Find a body by catalog id, name or English name (case-insensitive)."""
    wanted = name.strip().lower()
    for body in bodies:
        if wanted in (body.id.lower(), body.name.lower(), body.english_name.lower()):
            return body
    return None
