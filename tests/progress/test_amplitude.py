"""Tests for the spatial amplitude fade."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from squiggle.progress.amplitude import (AmplitudeProfile, profile_for,
                                         wave_progress_px)
from squiggle.progress.state import Bounds, RenderState, WaveParameters


def _profile(**overrides) -> AmplitudeProfile:
    values = dict(
        wave_progress_px=200.0,
        half_width=41.25,
        height_fraction=1.0,
        line_amplitude=6.0,
        transition_enabled=True,
    )
    values.update(overrides)
    return AmplitudeProfile(**values)


class TestAmplitudeProfile:
    """Amplitude fade across the transition zone around the progress point."""

    def test_full_amplitude_behind_the_zone(self) -> None:
        """Verify positions well behind the progress point get the full signed peak."""
        profile = _profile()
        assert profile(0.0, 1.0) == pytest.approx(6.0)
        assert profile(0.0, -1.0) == pytest.approx(-6.0)

    def test_zero_at_and_beyond_the_far_edge(self) -> None:
        """Verify the fade reaches exactly zero at progress + half width and stays there."""
        profile = _profile()
        assert profile(241.25, 1.0) == 0.0
        assert profile(500.0, -1.0) == 0.0

    def test_half_amplitude_at_the_progress_point(self) -> None:
        """Verify the fade is linear, so the centre of the zone has half the peak."""
        assert _profile()(200.0, 1.0) == pytest.approx(3.0)

    @pytest.mark.parametrize("edge", [200.0 - 41.25, 200.0 + 41.25], ids=["near", "far"])
    def test_continuous_across_zone_edges(self, edge: float) -> None:
        """Verify there is no jump on either side of a zone boundary."""
        profile = _profile()
        eps = 1e-6
        assert profile(edge - eps, 1.0) == pytest.approx(profile(edge + eps, 1.0), abs=1e-4)

    @given(x=st.floats(min_value=-1e4, max_value=1e4))
    def test_disabled_transition_is_constant(self, x: float) -> None:
        """Verify a disabled transition applies the same amplitude everywhere."""
        profile = _profile(transition_enabled=False, height_fraction=0.5)
        assert profile(x, -1.0) == pytest.approx(-3.0)

    @given(
        x=st.floats(min_value=-1e4, max_value=1e4),
        height=st.floats(min_value=0.0, max_value=1.0),
    )
    def test_magnitude_never_exceeds_peak(self, x: float, height: float) -> None:
        """Verify the fade only ever scales the amplitude down."""
        profile = _profile(height_fraction=height)
        assert abs(profile(x, 1.0)) <= 6.0 * height + 1e-9


class TestWaveProgress:
    """Where the fade is centred for a given bar width and progress."""

    def test_transition_width_is_subtracted_before_scaling(self) -> None:
        """Verify the 500 px, 50 % scenario centres the fade so it ends right at 250 px."""
        params = WaveParameters(wave_length=55.0, line_amplitude=6.0)
        state = RenderState(bounds=Bounds.from_size(500, 40), level_fraction=0.5)

        centre = wave_progress_px(state, params)
        profile = profile_for(state, params)

        assert centre == pytest.approx((500 - 82.5) * 0.5)
        assert profile(250.0, 1.0) == 0.0
        assert profile(centre - profile.half_width, 1.0) == pytest.approx(6.0)

    def test_without_transition_uses_full_width(self) -> None:
        """Verify no width is reserved for the fade when the transition is off."""
        params = WaveParameters(wave_length=55.0)
        state = RenderState(
            bounds=Bounds.from_size(500, 40), level_fraction=0.3, transition_enabled=False
        )
        assert wave_progress_px(state, params) == pytest.approx(150.0)

    def test_zero_progress_with_zero_endpoints(self) -> None:
        """Verify the endpoint interpolation collapses to the bar start at zero progress."""
        params = WaveParameters()
        state = RenderState(bounds=Bounds.from_size(500, 40), level_fraction=0.0)
        assert wave_progress_px(state, params) == 0.0
