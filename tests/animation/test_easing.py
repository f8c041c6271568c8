"""Tests for easing curves."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sailor.animation import clamp, fast_out_slow_in, lerp, linear
from sailor.animation.easing import cubic_bezier


class TestEasing:
    """Keep easing curves anchored at their endpoints and monotonic in between."""

    @pytest.mark.parametrize("easing", [linear, fast_out_slow_in])
    def test_endpoints_are_fixed(self, easing) -> None:
        assert easing(0.0) == 0.0
        assert easing(1.0) == 1.0

    @pytest.mark.parametrize("easing", [linear, fast_out_slow_in])
    def test_inputs_outside_unit_range_are_clamped(self, easing) -> None:
        assert easing(-3.0) == 0.0
        assert easing(7.0) == 1.0

    def test_fast_out_slow_in_leads_linear_midway(self) -> None:
        """The standard curve front-loads motion, so halfway it is past 0.5."""
        assert fast_out_slow_in(0.5) > 0.7

    @given(
        st.floats(min_value=0.0, max_value=1.0),
        st.floats(min_value=0.0, max_value=1.0),
    )
    def test_fast_out_slow_in_is_monotonic(self, a: float, b: float) -> None:
        low, high = sorted((a, b))
        assert fast_out_slow_in(low) <= fast_out_slow_in(high) + 1e-5

    def test_symmetric_bezier_matches_linear(self) -> None:
        ease = cubic_bezier(0.25, 0.25, 0.75, 0.75)
        for t in (0.1, 0.3, 0.6, 0.9):
            assert ease(t) == pytest.approx(t, abs=1e-4)

    def test_lerp_and_clamp(self) -> None:
        assert lerp(10.0, 20.0, 0.25) == 12.5
        assert clamp(5.0, 0.0, 1.0) == 1.0
        assert clamp(-5.0, 0.0, 1.0) == 0.0
