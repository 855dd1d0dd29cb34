from __future__ import annotations

import logging
import math
import time
from typing import Callable

from squiggle.display.color import Color
from squiggle.progress.amplitude import profile_for
from squiggle.progress.canvas import Canvas
from squiggle.progress.colors import ColorState, derive_color_state
from squiggle.progress.compositor import CompositeLayout, composite
from squiggle.progress.interpolation import saturate
from squiggle.progress.path import (WavePath, build_wave_path,
                                    start_cap_height, wave_start_for)
from squiggle.progress.phase import advance_phase, wrap_phase
from squiggle.progress.state import (MIN_WAVE_LENGTH, Bounds, RenderState,
                                     WaveParameters)
from squiggle.progress.tween import DEFAULT_EASING, HeightAnimator, HeightPhase
from squiggle.utilities.logging import get_logger
from squiggle.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)
log_controller = get_logging_controller()

LEVEL_SCALE = 10_000


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SquigglyProgress:
    """Animated progress bar whose played part is drawn as a travelling wave.

    The host calls :meth:`draw` once per frame. ``draw`` returns ``True``
    while another frame is needed (the wave is moving or its height is still
    tweening); the optional ``on_invalidate`` callback is fired for the same
    reasons so event-driven hosts can schedule the next frame instead.

    Every setter clamps or ignores bad values rather than raising: a thrown
    error here would take the whole bar off screen.
    """

    def __init__(
        self,
        params: WaveParameters | None = None,
        *,
        tint: Color | None = None,
        alpha: int = 255,
        transition_enabled: bool = True,
        animate: bool = True,
        easing: str = DEFAULT_EASING,
        monotonic_ms: Callable[[], float] = _monotonic_ms,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        self._monotonic_ms = monotonic_ms
        self.on_invalidate = on_invalidate
        self._params = WaveParameters()
        self._state = RenderState(
            height_fraction=1.0 if animate else 0.0,
            animate_enabled=animate,
            transition_enabled=transition_enabled,
        )
        self._height = HeightAnimator(
            self._state.height_fraction,
            easing=easing,
            on_update=self._on_height_update,
        )
        self._colors = derive_color_state(tint or Color.white(), alpha)
        self._path = WavePath()

        if params is not None:
            self.wave_length = params.wave_length
            self.line_amplitude = params.line_amplitude
            self.phase_speed = params.phase_speed
            self.stroke_width = params.stroke_width

    # -- configuration -----------------------------------------------------

    @property
    def params(self) -> WaveParameters:
        return self._params

    @property
    def state(self) -> RenderState:
        return self._state

    @property
    def wave_length(self) -> float:
        return self._params.wave_length

    @wave_length.setter
    def wave_length(self, value: float) -> None:
        if not math.isfinite(value):
            return
        self._params.wave_length = max(MIN_WAVE_LENGTH, value)
        self._state.phase_offset = wrap_phase(
            self._state.phase_offset, self._params.wave_length
        )

    @property
    def line_amplitude(self) -> float:
        return self._params.line_amplitude

    @line_amplitude.setter
    def line_amplitude(self, value: float) -> None:
        if math.isfinite(value):
            self._params.line_amplitude = max(0.0, value)

    @property
    def phase_speed(self) -> float:
        return self._params.phase_speed

    @phase_speed.setter
    def phase_speed(self, value: float) -> None:
        if math.isfinite(value):
            self._params.phase_speed = value

    @property
    def stroke_width(self) -> float:
        return self._params.stroke_width

    @stroke_width.setter
    def stroke_width(self, value: float) -> None:
        # wave and line paints are both built from this one value at draw time
        if math.isfinite(value):
            self._params.stroke_width = max(0.0, value)

    @property
    def transition_enabled(self) -> bool:
        return self._state.transition_enabled

    @transition_enabled.setter
    def transition_enabled(self, value: bool) -> None:
        self._state.transition_enabled = bool(value)
        self.invalidate()

    @property
    def animate(self) -> bool:
        return self._state.animate_enabled

    @animate.setter
    def animate(self, value: bool) -> None:
        value = bool(value)
        if value == self._state.animate_enabled:
            return
        self._state.animate_enabled = value
        now = self._monotonic_ms()
        if value:
            self._state.last_frame_ms = now
        self._height.set_target(value, now_ms=now)
        logger.debug("squiggle.animate", extra={"animate": value})
        self.invalidate()

    # -- colors -------------------------------------------------------------

    @property
    def colors(self) -> ColorState:
        return self._colors

    @property
    def tint(self) -> Color:
        return self._colors.tint

    @tint.setter
    def tint(self, value: Color | None) -> None:
        if value is None:
            return
        self._colors = derive_color_state(value, self._colors.alpha)

    @property
    def alpha(self) -> int:
        return self._colors.alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        self._colors = derive_color_state(self._colors.tint, value)

    # -- progress -----------------------------------------------------------

    @property
    def progress(self) -> float:
        return self._state.level_fraction

    @progress.setter
    def progress(self, value: float) -> None:
        if math.isfinite(value):
            self._state.level_fraction = saturate(value)

    @property
    def level(self) -> int:
        return int(round(self._state.level_fraction * LEVEL_SCALE))

    def set_level(self, level: int) -> bool:
        """Set progress on the 0-10000 scale; returns whether a redraw is due."""
        self.progress = level / LEVEL_SCALE
        return self._state.animate_enabled

    # -- animation state ----------------------------------------------------

    @property
    def height_fraction(self) -> float:
        return self._state.height_fraction

    @property
    def height_phase(self) -> HeightPhase:
        return self._height.phase

    @property
    def phase_offset(self) -> float:
        return self._state.phase_offset

    @property
    def path(self) -> WavePath:
        """The path built by the most recent :meth:`draw`."""
        return self._path

    def invalidate(self) -> None:
        if self.on_invalidate is not None:
            self.on_invalidate()

    def _on_height_update(self, value: float) -> None:
        self._state.height_fraction = value
        self.invalidate()

    # -- drawing ------------------------------------------------------------

    def draw(self, canvas: Canvas, bounds: Bounds, now_ms: float | None = None) -> bool:
        now = self._monotonic_ms() if now_ms is None else now_ms
        start_ns = time.perf_counter_ns()
        state = self._state
        params = self._params
        bounds = bounds.sanitized()
        state.bounds = bounds

        self._height.advance(now)
        if state.animate_enabled:
            self.invalidate()
            advance_phase(state, params, now)

        profile = profile_for(state, params)
        wave_start = wave_start_for(state.phase_offset, params.wave_length)
        wave_end = bounds.width if state.transition_enabled else profile.wave_progress_px
        build_wave_path(
            self._path,
            profile,
            wave_start=wave_start,
            wave_end=wave_end,
            wave_length=params.wave_length,
        )

        layout = CompositeLayout(
            bounds=bounds,
            progress_px=bounds.width * state.level_fraction,
            clip_top=params.line_amplitude + params.stroke_width,
            transition_enabled=state.transition_enabled,
            cap_y=start_cap_height(
                profile, wave_start=wave_start, wave_length=params.wave_length
            ),
        )
        composite(canvas, self._path, layout, self._colors, params.stroke_width)

        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        log_controller.log(
            key="squiggle.frame",
            logger=logger,
            level=logging.INFO,
            msg="squiggle.frame segments=%d duration_ms=%.3f",
            args=(len(self._path), duration_ms),
        )
        return state.animate_enabled or self._height.phase is HeightPhase.ANIMATING
