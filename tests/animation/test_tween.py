"""Tests for tweens and looping transitions."""

from __future__ import annotations

import pytest

from sailor.animation import ColorTween, InfiniteTransition, Tween, linear


class TestTween:
    """Cover tween retargeting so animated values never jump."""

    def test_settles_at_target_after_duration(self) -> None:
        tween = Tween(value=0.3, duration_ms=1200)
        tween.animate_to(0.1)

        assert tween.is_running
        tween.advance(600)
        assert 0.1 < tween.value < 0.3
        tween.advance(600)
        assert tween.value == pytest.approx(0.1)
        assert not tween.is_running

    def test_retarget_starts_from_current_value(self) -> None:
        """Verify a reversal mid-flight continues from the displayed value."""
        tween = Tween(value=0.0, duration_ms=1000, easing=linear)
        tween.animate_to(1.0)
        tween.advance(400)
        midway = tween.value

        tween.animate_to(0.0)
        assert tween.advance(0) == pytest.approx(midway)
        tween.advance(500)
        assert tween.value == pytest.approx(midway / 2)

    def test_same_target_does_not_restart(self) -> None:
        tween = Tween(value=0.0, duration_ms=1000, easing=linear)
        tween.animate_to(1.0)
        tween.advance(500)
        tween.animate_to(1.0)

        assert tween.advance(500) == pytest.approx(1.0)

    def test_snap_to_stops_animation(self) -> None:
        tween = Tween(value=0.0, duration_ms=1000)
        tween.animate_to(1.0)
        tween.snap_to(0.5)

        assert not tween.is_running
        assert tween.advance(100) == 0.5

    def test_negative_dt_is_ignored(self) -> None:
        tween = Tween(value=0.0, duration_ms=100, easing=linear)
        tween.animate_to(1.0)

        assert tween.advance(-50) == 0.0


class TestColorTween:
    def test_crossfades_channels(self) -> None:
        tween = ColorTween(color=(0, 0, 0), duration_ms=100, easing=linear)
        tween.animate_to((200, 100, 50))

        assert tween.advance(50) == (100, 50, 25)
        assert tween.advance(50) == (200, 100, 50)
        assert tween.target == (200, 100, 50)


class TestInfiniteTransition:
    def test_wraps_every_period(self) -> None:
        clock = InfiniteTransition(period_ms=2000)

        assert clock.advance(500) == pytest.approx(0.25)
        assert clock.advance(2000) == pytest.approx(0.25)
        assert clock.advance(1500) == pytest.approx(0.0)

    def test_zero_period_stays_at_zero(self) -> None:
        assert InfiniteTransition(period_ms=0).advance(100) == 0.0
