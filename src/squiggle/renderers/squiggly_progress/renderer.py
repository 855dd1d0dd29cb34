from __future__ import annotations

from typing import Callable

import pygame

from squiggle.progress.canvas import PygameCanvas
from squiggle.progress.drawable import SquigglyProgress
from squiggle.progress.state import Bounds, WaveParameters
from squiggle.renderers import (ObservableProvider, StatefulBaseRenderer,
                                 StaticStateProvider)
from squiggle.renderers.squiggly_progress.state import SquigglyProgressState


class SquigglyProgressRenderer(StatefulBaseRenderer[SquigglyProgressState]):
    """Draws a :class:`SquigglyProgress` bar across the window.

    Each incoming state snapshot is pushed through the engine's clamping
    setters; the bar spans the window width minus ``margin`` on both sides
    and is centred vertically.
    """

    def __init__(
        self,
        provider: ObservableProvider[SquigglyProgressState] | None = None,
        *,
        state: SquigglyProgressState | None = None,
        params: WaveParameters | None = None,
        margin: float = 0.0,
        monotonic_ms: Callable[[], float] | None = None,
    ) -> None:
        if provider is not None and state is not None:
            raise ValueError(
                "SquigglyProgressRenderer accepts either a provider or a state snapshot"
            )
        engine_kwargs = {} if monotonic_ms is None else {"monotonic_ms": monotonic_ms}
        self.engine = SquigglyProgress(
            params or WaveParameters.from_configuration(), **engine_kwargs
        )
        self.margin = max(0.0, margin)
        self._needs_frame = True
        self._canvas: PygameCanvas | None = None
        if provider is None:
            provider = StaticStateProvider(state or SquigglyProgressState())
        super().__init__(provider)

    @property
    def needs_frame(self) -> bool:
        return self._needs_frame

    def set_state(self, state: SquigglyProgressState) -> None:
        super().set_state(state)
        engine = self.engine
        engine.progress = state.progress
        engine.tint = state.tint
        engine.alpha = state.alpha
        if engine.transition_enabled != state.transition_enabled:
            engine.transition_enabled = state.transition_enabled
        engine.animate = state.animate
        self._needs_frame = True

    def bounds_for(self, window: pygame.Surface) -> Bounds:
        width, height = window.get_size()
        return Bounds(
            left=self.margin,
            top=0.0,
            width=max(0.0, width - 2 * self.margin),
            height=float(height),
        )

    def _canvas_for(self, window: pygame.Surface) -> PygameCanvas:
        if self._canvas is None or self._canvas.surface is not window:
            self._canvas = PygameCanvas(window)
        return self._canvas

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        canvas = self._canvas_for(window)
        self._needs_frame = self.engine.draw(canvas, self.bounds_for(window))
