"""Shared fixtures: on-disk base textures and body records."""

import pytest
from PIL import Image

from exoquery.assets.catalog import TEXTURE_ASSETS
from exoquery.models.bodies import AroundPlanet, CelestialBody

TEST_SIZE = 64

# Distinct gray levels so tests can tell which base texture was used
TEXTURE_GRAYS = {
    "mercury": 100,
    "venus": 110,
    "mars": 120,
    "jupiter": 200,
    "saturn": 140,
    "uranus": 150,
    "neptune": 160,
}


def write_texture(path, gray, size=TEST_SIZE):
    # PNG payload under the catalog's .jpg names keeps pixel values exact
    Image.new("RGB", (size, size), (gray, gray, gray)).save(path, format="PNG")


@pytest.fixture
def asset_root(tmp_path):
    """Directory holding every base texture at the test resolution."""
    root = tmp_path / "textures"
    root.mkdir()
    for key, filename in TEXTURE_ASSETS.items():
        write_texture(root / filename, TEXTURE_GRAYS[key])
    return root


@pytest.fixture
def hot_gas_giant():
    return CelestialBody(
        name="Hot Jupiter",
        body_type="Gas Giant",
        avg_temp=600.0,
        density=3.0,
        axial_tilt=5.0,
        mean_radius=71492.0,
    )


@pytest.fixture
def martian_moon():
    return CelestialBody(
        id="phobos",
        name="Phobos",
        body_type="Moon",
        avg_temp=350.0,
        density=1.9,
        axial_tilt=25.0,
        mean_radius=11.1,
        around_planet=AroundPlanet(planet="mars"),
    )
