from __future__ import annotations

from dataclasses import dataclass

from squiggle.progress.interpolation import lerp, lerp_inv, lerp_inv_sat
from squiggle.progress.state import RenderState, WaveParameters


@dataclass(frozen=True, slots=True)
class AmplitudeProfile:
    """Wave height as a function of horizontal position for one frame.

    With the transition enabled the amplitude is full behind
    ``wave_progress_px - half_width``, fades linearly across the transition
    zone and is exactly zero from ``wave_progress_px + half_width`` onwards.
    Without it the amplitude is constant.
    """

    wave_progress_px: float
    half_width: float
    height_fraction: float
    line_amplitude: float
    transition_enabled: bool

    def coefficient(self, x: float) -> float:
        if not self.transition_enabled:
            return 1.0
        return lerp_inv_sat(
            self.wave_progress_px + self.half_width,
            self.wave_progress_px - self.half_width,
            x,
        )

    def __call__(self, x: float, sign: float) -> float:
        return sign * self.height_fraction * self.line_amplitude * self.coefficient(x)


def wave_progress_px(state: RenderState, params: WaveParameters) -> float:
    """Pixel position the wave's transition zone is centred on.

    When the transition is enabled the usable width shrinks by one transition
    width so the fade still fits inside the bar at full progress.
    """
    progress = state.level_fraction
    total_width = state.bounds.width
    if not state.transition_enabled:
        return total_width * progress

    total_width -= params.transition_width
    if progress > params.matched_wave_endpoint:
        return total_width * progress
    return total_width * lerp(
        params.min_wave_endpoint,
        params.matched_wave_endpoint,
        lerp_inv(0.0, params.matched_wave_endpoint, progress),
    )


def profile_for(state: RenderState, params: WaveParameters) -> AmplitudeProfile:
    return AmplitudeProfile(
        wave_progress_px=wave_progress_px(state, params),
        half_width=params.transition_width / 2.0,
        height_fraction=state.height_fraction,
        line_amplitude=params.line_amplitude,
        transition_enabled=state.transition_enabled,
    )
