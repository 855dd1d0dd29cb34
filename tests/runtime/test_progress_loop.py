from __future__ import annotations

import pygame
import pytest

from squiggle.progress.state import WaveParameters
from squiggle.renderers.squiggly_progress import (SquigglyProgressInputs,
                                                  SquigglyProgressRenderer,
                                                  SquigglyProgressState,
                                                  SquigglyProgressStateProvider)
from squiggle.runtime.loop import ProgressLoop


def _renderer(**state) -> SquigglyProgressRenderer:
    return SquigglyProgressRenderer(
        state=SquigglyProgressState(**state), params=WaveParameters()
    )


class TestProgressLoop:
    """The pygame host only draws when the bar asks for a frame."""

    def test_runs_requested_frames_and_cleans_up(self) -> None:
        """Verify the loop stops at ``max_frames`` and tears the renderer down."""
        renderer = _renderer(progress=0.5)
        loop = ProgressLoop(renderer, size=(120, 32), max_fps=1000)

        loop.start(max_frames=3)

        assert loop.frames_drawn == 3
        assert not renderer.is_initialized()
        assert renderer.engine.on_invalidate is None

    def test_frame_hook_drives_inputs(self) -> None:
        """Verify inputs pushed from the frame hook reach the engine."""
        inputs = SquigglyProgressInputs()
        renderer = SquigglyProgressRenderer(
            SquigglyProgressStateProvider(inputs), params=WaveParameters()
        )
        loop = ProgressLoop(renderer, size=(120, 32), max_fps=1000)
        seen: list[int] = []

        def on_frame(frame: int, elapsed: float) -> None:
            seen.append(frame)
            inputs.progress.on_next(min(1.0, 0.25 * (frame + 1)))

        loop.start(max_frames=4, on_frame=on_frame)

        assert seen[:4] == [0, 1, 2, 3]
        assert renderer.engine.progress == 1.0

    def test_quit_event_stops_loop(self) -> None:
        loop = ProgressLoop(_renderer(), size=(120, 32), max_fps=1000)

        def on_frame(frame: int, elapsed: float) -> None:
            if frame == 1:
                pygame.event.post(pygame.event.Event(pygame.QUIT))

        loop.start(max_frames=50, on_frame=on_frame)

        assert loop.frames_drawn == 2

    def test_idle_bar_does_not_redraw(self, clock) -> None:
        """Verify a hidden bar stops requesting frames once its hide tween finishes."""
        renderer = SquigglyProgressRenderer(
            state=SquigglyProgressState(animate=False),
            params=WaveParameters(),
            monotonic_ms=clock,
        )
        loop = ProgressLoop(renderer, size=(120, 32), max_fps=1000)
        screen = pygame.Surface((120, 32))
        renderer.initialize(screen, pygame.time.Clock())

        clock.advance(600.0)
        loop.draw_frame(screen, pygame.time.Clock())
        assert loop.should_draw() is False

        loop.invalidate()
        assert loop.should_draw() is True

    @pytest.mark.parametrize("key", [pygame.K_ESCAPE, pygame.K_q], ids=["escape", "q"])
    def test_quit_keys(self, key: int) -> None:
        loop = ProgressLoop(_renderer(), size=(120, 32), max_fps=1000)
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))
        assert loop._handle_events() is False
