from __future__ import annotations

import time
from typing import Callable

import pygame

from squiggle.renderers.squiggly_progress import SquigglyProgressRenderer
from squiggle.utilities.env import Configuration
from squiggle.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SIZE = (480, 64)
DEFAULT_BACKGROUND = (18, 18, 24)

FrameHook = Callable[[int, float], None]


class ProgressLoop:
    """Minimal pygame host for a :class:`SquigglyProgressRenderer`.

    A frame is drawn only when the renderer asked for one (its last draw
    reported more animation, or a new state arrived) or when the engine
    invalidated itself. Otherwise the loop just keeps pumping events at
    ``max_fps``.
    """

    def __init__(
        self,
        renderer: SquigglyProgressRenderer,
        *,
        size: tuple[int, int] = DEFAULT_SIZE,
        max_fps: int | None = None,
        background: tuple[int, int, int] = DEFAULT_BACKGROUND,
        title: str = "squiggle",
    ) -> None:
        self.renderer = renderer
        self.size = size
        self.max_fps = max_fps if max_fps is not None else Configuration.max_fps()
        self.background = background
        self.title = title
        self.running = False
        self.frames_drawn = 0
        self._dirty = True

    def invalidate(self) -> None:
        self._dirty = True

    def should_draw(self) -> bool:
        return self._dirty or self.renderer.needs_frame

    def _handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
        return True

    def draw_frame(self, screen: pygame.Surface, clock: pygame.time.Clock) -> None:
        self._dirty = False
        screen.fill(self.background)
        self.renderer.process(screen, clock)
        self.frames_drawn += 1

    def start(self, *, max_frames: int | None = None, on_frame: FrameHook | None = None) -> None:
        logger.info("Starting ProgressLoop")
        pygame.init()
        screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption(self.title)
        clock = pygame.time.Clock()

        self.renderer.engine.on_invalidate = self.invalidate
        self.renderer.initialize(screen, clock)
        self.running = True
        started = time.monotonic()

        try:
            while self.running:
                if not self._handle_events():
                    self.running = False
                    break
                if on_frame is not None:
                    on_frame(self.frames_drawn, time.monotonic() - started)
                if self.should_draw():
                    self.draw_frame(screen, clock)
                    pygame.display.flip()
                if max_frames is not None and self.frames_drawn >= max_frames:
                    break
                clock.tick(self.max_fps)
        finally:
            logger.info("Stopping ProgressLoop after %d frames", self.frames_drawn)
            self.renderer.engine.on_invalidate = None
            self.renderer.reset()
            pygame.quit()
