"""Tests for sea metrics, wave geometry and the ship pose."""

from __future__ import annotations

import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from sailor.renderers.sea.state import (CLOSING_DEPTH_PX, SeaState,
                                        amplitude_factor, sea_metrics,
                                        ship_top_y, target_body_fraction,
                                        tilt_height_progress, wave_geometry)


class TestSeaMetrics:
    """Keep sea sizing consistent so every layer agrees on where the sea starts."""

    def test_expanded_sea_on_tall_screen(self) -> None:
        """A level 1000x2000 screen with 30% sea puts sea level at y=1385."""
        metrics = sea_metrics(1000, 2000, 0.3, 0.0)

        assert metrics.body_height == pytest.approx(600)
        assert metrics.amplitude == pytest.approx(15)
        assert metrics.total_height == pytest.approx(615)
        assert metrics.sea_level == pytest.approx(1385)

    def test_steep_tilt_shrinks_sea(self) -> None:
        """At 75 degrees the body loses half of the maximum 25% height reduction."""
        metrics = sea_metrics(1000, 2000, 0.3, 75.0)

        assert metrics.height_offset == pytest.approx(250)
        assert metrics.body_height == pytest.approx(350)
        assert metrics.amplitude == pytest.approx(7.2176, abs=1e-3)

    def test_zero_fraction_has_no_sea(self) -> None:
        metrics = sea_metrics(1000, 2000, 0.0, 0.0)

        assert metrics.total_height == 0.0
        assert metrics.sea_level == 2000

    def test_degenerate_window_is_empty(self) -> None:
        metrics = sea_metrics(0, 0, 0.3, 0.0)

        assert metrics.total_height == 0.0
        assert metrics.sea_level == 0.0

    @given(st.floats(min_value=-720, max_value=720, allow_nan=False))
    def test_amplitude_factor_bounds(self, rotation: float) -> None:
        assert 0.3 - 1e-9 <= amplitude_factor(rotation) <= 1.0

    def test_tilt_progress_piecewise(self) -> None:
        assert tilt_height_progress(60.0) == 0.0
        assert tilt_height_progress(-75.0) == pytest.approx(0.5)
        assert tilt_height_progress(120.0) == 1.0

    def test_target_fraction(self) -> None:
        assert target_body_fraction(has_appeared=False, is_expanded=True) == 0.0
        assert target_body_fraction(has_appeared=True, is_expanded=True) == 0.3
        assert target_body_fraction(has_appeared=True, is_expanded=False) == 0.1


class TestWaveGeometry:
    """Cover the closed wave outlines so the fill always reaches past the screen bottom."""

    @given(
        phase=st.floats(min_value=0, max_value=2 * math.pi),
        amplitude=st.floats(min_value=0, max_value=40),
    )
    def test_samples_stay_within_amplitude(self, phase: float, amplitude: float) -> None:
        geometry = wave_geometry(400, 300, phase, amplitude)

        for samples in (geometry.front_samples, geometry.back_samples):
            ys = samples[:, 1]
            assert np.all(ys >= geometry.mid_line_y - amplitude - 1e-9)
            assert np.all(ys <= geometry.mid_line_y + amplitude + 1e-9)

    def test_outline_is_closed_below_screen(self) -> None:
        geometry = wave_geometry(400, 300, 0.0, 15.0)
        bottom = 300 + CLOSING_DEPTH_PX

        assert geometry.front[0, 1] == bottom
        assert geometry.front[-1, 1] == bottom
        assert geometry.front[0, 0] == geometry.front[-1, 0]

    def test_samples_cover_rotated_screen(self) -> None:
        """The sampled range spans four times the larger dimension, centred on the screen."""
        geometry = wave_geometry(400, 300, 0.0, 15.0)
        xs = geometry.front_samples[:, 0]

        assert xs[0] == pytest.approx(-600)
        assert xs[-1] == pytest.approx(1000)
        assert np.allclose(np.diff(xs), 10.0)

    def test_empty_when_no_height(self) -> None:
        assert wave_geometry(400, 0, 0.0, 15.0).is_empty()

    def test_ship_sits_on_front_wave_mid_screen(self) -> None:
        geometry = wave_geometry(400, 300, math.pi / 2, 10.0)

        assert geometry.ship.x == 200
        assert geometry.ship.y == pytest.approx(10.0 + 10.0 * math.sin(2.5 * math.pi * 0.5 + math.pi / 2))

    def test_ship_is_level_on_flat_sea(self) -> None:
        assert wave_geometry(400, 300, 1.0, 0.0).ship.tilt_degrees == 0.0


class TestSeaState:
    """Exercise the per-frame sea update."""

    def test_expands_after_appearing(self) -> None:
        state = SeaState()
        for _ in range(100):
            state.update(
                dt_ms=16, width=1000, height=2000, tilt_degrees=0.0, target_fraction=0.3
            )

        assert state.sea_level == pytest.approx(1385, abs=0.5)
        assert not state.geometry.is_empty()

    def test_tilt_is_negated_and_smoothed(self) -> None:
        state = SeaState()
        state.update(dt_ms=16, width=100, height=100, tilt_degrees=30.0, target_fraction=0.3)
        first = state.rotation

        assert -30.0 < first < 0.0
        for _ in range(600):
            state.update(
                dt_ms=16, width=100, height=100, tilt_degrees=30.0, target_fraction=0.3
            )
        assert state.rotation == pytest.approx(-30.0, abs=0.05)

    def test_tilt_sign_flip_is_continuous(self) -> None:
        """Flipping from +80 to -80 moves the sea smoothly rather than jumping."""
        state = SeaState()
        for _ in range(600):
            state.update(
                dt_ms=16, width=100, height=100, tilt_degrees=80.0, target_fraction=0.3
            )
        previous = state.rotation
        for _ in range(120):
            state.update(
                dt_ms=16, width=100, height=100, tilt_degrees=-80.0, target_fraction=0.3
            )
            assert abs(state.rotation - previous) < 15.0
            previous = state.rotation

    def test_contains_only_points_on_sea(self) -> None:
        state = SeaState()
        for _ in range(100):
            state.update(
                dt_ms=16, width=1000, height=2000, tilt_degrees=0.0, target_fraction=0.3
            )

        assert state.contains((500, 1900), 1000)
        assert not state.contains((500, 100), 1000)
        assert not state.contains((1200, 1900), 1000)

    def test_ship_top_y(self) -> None:
        assert ship_top_y(1385, 1.0) == pytest.approx(1385 - 15 - 32 * 4.5)
        assert ship_top_y(1385, 2.0) == pytest.approx(1385 - 30 - 32 * 4.5 * 2)


class TestShipPose:
    """The ship follows the front wave slope smoothly."""

    @given(phase=st.floats(min_value=0, max_value=2 * math.pi))
    def test_tilt_is_continuous_in_phase(self, phase: float) -> None:
        here = wave_geometry(400, 300, phase, 15.0).ship.tilt_degrees
        nearby = wave_geometry(400, 300, phase + 1e-3, 15.0).ship.tilt_degrees

        assert abs(here - nearby) < 0.5

    def test_level_at_crest(self) -> None:
        """At a crest the central difference is zero, so the ship sits level."""
        geometry = wave_geometry(400, 300, 0.25 * math.pi, 15.0)

        assert geometry.ship.tilt_degrees == pytest.approx(0.0, abs=1e-9)
        assert geometry.ship.y == pytest.approx(geometry.mid_line_y - 15.0)
