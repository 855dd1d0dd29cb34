from __future__ import annotations

import math
from dataclasses import dataclass, field

from squiggle.utilities.env import Configuration

MIN_WAVE_LENGTH = 1.0
TRANSITION_PERIODS = 1.5


@dataclass(frozen=True, slots=True)
class Bounds:
    left: float
    top: float
    width: float
    height: float

    @property
    def center_y(self) -> float:
        return self.top + self.height / 2.0

    @classmethod
    def from_size(cls, width: float, height: float) -> "Bounds":
        return cls(left=0.0, top=0.0, width=width, height=height)

    def sanitized(self) -> "Bounds":
        """Copy with non-finite values zeroed and negative sizes clamped to 0."""
        return Bounds(
            left=_finite_or_zero(self.left),
            top=_finite_or_zero(self.top),
            width=max(0.0, _finite_or_zero(self.width)),
            height=max(0.0, _finite_or_zero(self.height)),
        )


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


@dataclass(slots=True)
class WaveParameters:
    wave_length: float = 55.0
    line_amplitude: float = 6.0
    # px per second
    phase_speed: float = 16.0
    stroke_width: float = 8.0
    # distance over which amplitude drops to zero, measured in wavelengths
    transition_periods: float = TRANSITION_PERIODS
    # wave endpoint as a fraction of the bar while the play position is zero
    min_wave_endpoint: float = 0.0
    # wave endpoint as a fraction of the bar once the play position catches up
    matched_wave_endpoint: float = 0.0

    @property
    def transition_width(self) -> float:
        return self.transition_periods * self.wave_length

    @classmethod
    def from_configuration(cls) -> "WaveParameters":
        return cls(
            wave_length=Configuration.wave_length(),
            line_amplitude=Configuration.line_amplitude(),
            phase_speed=Configuration.phase_speed(),
            stroke_width=Configuration.stroke_width(),
        )


@dataclass(slots=True)
class RenderState:
    bounds: Bounds = field(default_factory=lambda: Bounds(0.0, 0.0, 0.0, 0.0))
    level_fraction: float = 0.0
    phase_offset: float = 0.0
    # ``None`` until the first animated frame has been timed
    last_frame_ms: float | None = None
    height_fraction: float = 1.0
    animate_enabled: bool = True
    transition_enabled: bool = True
