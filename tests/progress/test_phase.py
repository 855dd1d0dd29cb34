"""Tests for the phase integrator."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from squiggle.progress.phase import advance_phase, phase_delta, wrap_phase
from squiggle.progress.state import RenderState, WaveParameters


@st.composite
def _frame_sequences(draw: st.DrawFn) -> tuple[float, float, list[float]]:
    wave_length = draw(st.floats(min_value=1e-3, max_value=500.0))
    phase_speed = draw(st.floats(min_value=-1e4, max_value=1e4))
    steps = draw(
        st.lists(st.floats(min_value=-5e3, max_value=5e3), min_size=1, max_size=40)
    )
    return wave_length, phase_speed, steps


class TestPhaseIntegrator:
    """Keep the wave offset moving with time while staying inside one wavelength."""

    @given(data=_frame_sequences())
    def test_phase_stays_within_one_wavelength(self, data: tuple[float, float, list[float]]) -> None:
        """Verify any sequence of frame times, even backwards ones, keeps 0 <= phase < wave length."""
        wave_length, phase_speed, steps = data
        params = WaveParameters(wave_length=wave_length, phase_speed=phase_speed)
        state = RenderState(last_frame_ms=0.0)
        now = 0.0
        for step in steps:
            now += step
            advance_phase(state, params, now)
            assert 0.0 <= state.phase_offset < wave_length

    def test_phase_advances_by_speed_times_elapsed_seconds(self) -> None:
        """Verify 500 ms at 16 px/s moves the wave by 8 px and records the frame time."""
        params = WaveParameters(wave_length=55.0, phase_speed=16.0)
        state = RenderState(last_frame_ms=1000.0)

        advance_phase(state, params, 1500.0)

        assert state.phase_offset == pytest.approx(8.0)
        assert state.last_frame_ms == 1500.0

    def test_phase_wraps_past_the_wavelength(self) -> None:
        """Verify overshooting the wavelength wraps back to the start of the period."""
        params = WaveParameters(wave_length=55.0, phase_speed=16.0)
        state = RenderState(phase_offset=50.0, last_frame_ms=0.0)

        advance_phase(state, params, 1000.0)

        assert state.phase_offset == pytest.approx(11.0)

    def test_unset_timestamp_yields_zero_delta(self) -> None:
        """Verify the first timed frame does not jump by the whole uptime."""
        assert phase_delta(123_456.0, None, 16.0) == 0.0

    def test_negative_phase_wraps_from_the_top(self) -> None:
        """Verify a negative offset is reduced into range rather than left negative."""
        assert wrap_phase(-5.0, 55.0) == pytest.approx(50.0)
        assert wrap_phase(-1e-18, 55.0) < 55.0

    def test_non_positive_wavelength_freezes_phase(self) -> None:
        """Verify a degenerate wavelength pins the phase at zero."""
        assert wrap_phase(12.0, 0.0) == 0.0
