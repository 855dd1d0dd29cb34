from __future__ import annotations

import time
from typing import Generic, TypeVar

import pygame
from reactivex.disposable import Disposable

from squiggle.renderers.providers import ObservableProvider
from squiggle.utilities.logging import get_logger

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class StatefulBaseRenderer(Generic[StateT]):
    """Renderer driven by a stream of immutable state snapshots.

    The renderer subscribes to ``builder`` on :meth:`initialize`, keeps the
    latest snapshot in :attr:`state` and draws one warmup frame.
    """

    def __init__(self, builder: ObservableProvider[StateT]) -> None:
        self.builder = builder
        self.initialized = False
        self._state: StateT | None = None
        self._subscription: Disposable | None = None

    @property
    def name(self) -> str:
        return self.__class__.__name__

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def set_state(self, state: StateT) -> None:
        self._state = state

    def is_initialized(self) -> bool:
        return self.initialized

    def initialize(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        self._subscription = self.builder.observable().subscribe(
            on_next=self.set_state
        )
        try:
            self.real_process(window=window, clock=clock)
        except Exception as e:
            logger.warning(f"Error initializing renderer ({type(self)}): {e}")
            raise
        self.initialized = True

    def process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        if not self.is_initialized():
            raise ValueError("Needs to be initialized")

        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        logger.debug(
            "renderer.frame",
            extra={
                "renderer": self.name,
                "duration_ms": duration_ms,
            },
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        raise NotImplementedError("Please implement")

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.initialized = False
