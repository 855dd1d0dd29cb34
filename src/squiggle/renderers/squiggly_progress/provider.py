from __future__ import annotations

from functools import cached_property
from typing import Any

import reactivex
from reactivex import operators as ops
from reactivex.subject import BehaviorSubject

from squiggle.display.color import Color
from squiggle.renderers.providers import ObservableProvider
from squiggle.renderers.squiggly_progress.state import SquigglyProgressState


class SquigglyProgressInputs:
    """Host-facing input streams, each holding its latest value.

    Push new values with ``inputs.progress.on_next(0.4)`` and the like.
    """

    def __init__(self, initial: SquigglyProgressState | None = None) -> None:
        self._initial = initial or SquigglyProgressState()

    @cached_property
    def progress(self) -> BehaviorSubject[float]:
        return BehaviorSubject(self._initial.progress)

    @cached_property
    def tint(self) -> BehaviorSubject[Color]:
        return BehaviorSubject(self._initial.tint)

    @cached_property
    def alpha(self) -> BehaviorSubject[float]:
        return BehaviorSubject(self._initial.alpha)

    @cached_property
    def animate(self) -> BehaviorSubject[bool]:
        return BehaviorSubject(self._initial.animate)

    @cached_property
    def transition_enabled(self) -> BehaviorSubject[bool]:
        return BehaviorSubject(self._initial.transition_enabled)


class SquigglyProgressStateProvider(ObservableProvider[SquigglyProgressState]):
    def __init__(self, inputs: SquigglyProgressInputs | None = None) -> None:
        self.inputs = inputs or SquigglyProgressInputs()

    @staticmethod
    def _to_state(values: tuple[Any, ...]) -> SquigglyProgressState:
        progress, tint, alpha, animate, transition_enabled = values
        return SquigglyProgressState(
            progress=float(progress),
            tint=tint,
            alpha=alpha,
            animate=bool(animate),
            transition_enabled=bool(transition_enabled),
        )

    def observable(self) -> reactivex.Observable[SquigglyProgressState]:
        return reactivex.combine_latest(
            self.inputs.progress,
            self.inputs.tint,
            self.inputs.alpha,
            self.inputs.animate,
            self.inputs.transition_enabled,
        ).pipe(
            ops.map(self._to_state),
            ops.distinct_until_changed(),
            ops.share(),
        )
