"""Tests for temperature tint and 8-bit encoding."""

import numpy as np
import pytest
from colour import RGB_to_HSL

from exoquery.color import (
    apply_density,
    apply_tint,
    body_tint,
    normalize_temperature,
    temperature_to_color,
    to_8bit,
)


def hue_degrees(rgb):
    return float(RGB_to_HSL(np.asarray(rgb))[0]) * 360.0


class TestNormalizeTemperature:
    def test_range_endpoints(self):
        assert normalize_temperature(50.0) == 0.0
        assert normalize_temperature(400.0) == 1.0

    def test_midpoint(self):
        assert normalize_temperature(225.0) == pytest.approx(0.5)

    def test_clamped(self):
        assert normalize_temperature(-10.0) == 0.0
        assert normalize_temperature(30.0) == 0.0
        assert normalize_temperature(5000.0) == 1.0

    def test_no_data_is_minimum(self):
        assert normalize_temperature(None) == 0.0


class TestTemperatureToColor:
    def test_cold_is_blue(self):
        np.testing.assert_allclose(temperature_to_color(50.0), [0.0, 0.0, 1.0], atol=1e-9)

    def test_hot_is_red(self):
        np.testing.assert_allclose(temperature_to_color(400.0), [1.0, 0.0, 0.0], atol=1e-9)

    def test_full_saturation_half_lightness(self):
        hsl = RGB_to_HSL(temperature_to_color(180.0))
        assert hsl[1] == pytest.approx(1.0)
        assert hsl[2] == pytest.approx(0.5)

    def test_hue_strictly_decreasing(self):
        temperatures = np.linspace(50.0, 400.0, 36)
        hues = [hue_degrees(temperature_to_color(t)) for t in temperatures]
        # Red at 400 K reports hue 0, the end of the sweep
        assert all(a > b for a, b in zip(hues, hues[1:]))
        assert hues[0] == pytest.approx(240.0)
        assert hues[-1] == pytest.approx(0.0, abs=1e-6)

    def test_expected_hue(self):
        # 225 K is the middle of the scale
        assert hue_degrees(temperature_to_color(225.0)) == pytest.approx(120.0)

    def test_clamping_is_idempotent(self):
        np.testing.assert_array_equal(temperature_to_color(30.0), temperature_to_color(50.0))
        np.testing.assert_array_equal(temperature_to_color(500.0), temperature_to_color(400.0))

    def test_no_data_matches_scale_minimum(self):
        np.testing.assert_array_equal(temperature_to_color(None), temperature_to_color(50.0))

    def test_channels_in_unit_range(self):
        for t in np.linspace(0.0, 600.0, 25):
            color = temperature_to_color(t)
            assert np.all(color >= 0.0) and np.all(color <= 1.0)


class TestDensity:
    def test_dense_body_darkened(self):
        tint = temperature_to_color(260.0)
        np.testing.assert_allclose(apply_density(tint, 5.5), tint * 0.8)

    @pytest.mark.parametrize("density", [None, 0.0, 3.0, 5.0])
    def test_light_body_unchanged(self, density):
        tint = temperature_to_color(260.0)
        np.testing.assert_array_equal(apply_density(tint, density), tint)

    def test_dense_never_brighter(self):
        for t in np.linspace(0.0, 500.0, 21):
            dense = body_tint(t, 5.2)
            light = body_tint(t, 4.0)
            assert np.all(dense <= light)

    def test_input_not_mutated(self):
        tint = np.array([1.0, 0.5, 0.25])
        apply_density(tint, 9.0)
        np.testing.assert_array_equal(tint, [1.0, 0.5, 0.25])


class TestEncoding:
    def test_to_8bit_clamps(self):
        values = np.array([-20.0, 0.0, 127.9, 255.0, 300.0])
        np.testing.assert_array_equal(to_8bit(values), [0, 0, 127, 255, 255])
        assert to_8bit(values).dtype == np.uint8

    def test_apply_tint_identity(self):
        rgb = np.arange(256, dtype=np.uint8).reshape(-1, 1).repeat(3, axis=1)
        np.testing.assert_array_equal(apply_tint(rgb, np.ones(3)), rgb)

    def test_apply_tint_componentwise(self):
        rgb = np.array([[200, 100, 50]], dtype=np.uint8)
        np.testing.assert_array_equal(
            apply_tint(rgb, np.array([0.5, 1.0, 0.0])), [[100, 100, 0]]
        )

    def test_apply_tint_truncates(self):
        rgb = np.array([[255, 255, 255]], dtype=np.uint8)
        np.testing.assert_array_equal(apply_tint(rgb, np.array([0.8, 0.8, 0.8])), [[204, 204, 204]])
