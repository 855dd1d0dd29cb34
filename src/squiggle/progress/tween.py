"""Show/hide animation for the wave height.

``HeightTween`` is a plain value type that interpolates between two heights
over a delay plus a duration. ``HeightAnimator`` owns at most one tween at a
time and replaces it whenever the target flips.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable

from squiggle.progress.interpolation import lerp, saturate
from squiggle.utilities.logging import get_logger

logger = get_logger(__name__)

APPEAR_DELAY_MS = 60.0
APPEAR_DURATION_MS = 800.0
DISAPPEAR_DELAY_MS = 0.0
DISAPPEAR_DURATION_MS = 550.0


def linear(t: float) -> float:
    return t


def accelerate_decelerate(t: float) -> float:
    return math.cos((t + 1.0) * math.pi) / 2.0 + 0.5


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Callable[[float], float]:
    """CSS-style timing curve through ``(0, 0)``, ``(x1, y1)``, ``(x2, y2)``, ``(1, 1)``."""

    def sample(a1: float, a2: float, s: float) -> float:
        return 3.0 * a1 * (1.0 - s) ** 2 * s + 3.0 * a2 * (1.0 - s) * s**2 + s**3

    def ease(t: float) -> float:
        t = saturate(t)
        low, high = 0.0, 1.0
        # x(s) is monotonic for control x in [0, 1]; bisection is plenty for a
        # handful of evaluations per frame.
        for _ in range(30):
            mid = (low + high) / 2.0
            if sample(x1, x2, mid) < t:
                low = mid
            else:
                high = mid
        return saturate(sample(y1, y2, (low + high) / 2.0))

    return ease


standard_decelerate = cubic_bezier(0.0, 0.0, 0.0, 1.0)
emphasized_decelerate = cubic_bezier(0.05, 0.7, 0.1, 1.0)

EASINGS: dict[str, Callable[[float], float]] = {
    "linear": linear,
    "accelerate_decelerate": accelerate_decelerate,
    "standard_decelerate": standard_decelerate,
    "emphasized_decelerate": emphasized_decelerate,
}
DEFAULT_EASING = "accelerate_decelerate"


@dataclass
class HeightTween:
    start_val: float
    end_val: float
    duration_ms: float
    delay_ms: float = 0.0
    elapsed_ms: float = 0.0
    easing: str = DEFAULT_EASING

    @property
    def done(self) -> bool:
        return self.elapsed_ms >= self.delay_ms + self.duration_ms

    def value(self) -> float:
        if self.done:
            return self.end_val
        active_ms = self.elapsed_ms - self.delay_ms
        if active_ms <= 0.0 or self.duration_ms <= 0.0:
            return self.start_val
        easing_fn = EASINGS.get(self.easing, linear)
        eased = saturate(easing_fn(active_ms / self.duration_ms))
        return lerp(self.start_val, self.end_val, eased)

    def tick(self, dt_ms: float) -> tuple[float, bool]:
        """Advance by ``dt_ms`` and return ``(value, done)``.

        Negative steps are ignored so a clock hiccup can't rewind the tween.
        """
        if dt_ms > 0.0:
            self.elapsed_ms += dt_ms
        return self.value(), self.done

    @classmethod
    def appear(cls, start_val: float, easing: str = DEFAULT_EASING) -> "HeightTween":
        return cls(
            start_val=start_val,
            end_val=1.0,
            delay_ms=APPEAR_DELAY_MS,
            duration_ms=APPEAR_DURATION_MS,
            easing=easing,
        )

    @classmethod
    def disappear(cls, start_val: float, easing: str = DEFAULT_EASING) -> "HeightTween":
        return cls(
            start_val=start_val,
            end_val=0.0,
            delay_ms=DISAPPEAR_DELAY_MS,
            duration_ms=DISAPPEAR_DURATION_MS,
            easing=easing,
        )


class HeightPhase(StrEnum):
    IDLE = "idle"
    ANIMATING = "animating"


class HeightAnimator:
    """Drives the height fraction between 0 and 1.

    ``set_target`` cancels whatever tween is in flight before starting the
    next one; a cancelled tween never reports completion. ``advance`` is
    called once per frame with the host clock.
    """

    def __init__(
        self,
        value: float = 1.0,
        *,
        easing: str = DEFAULT_EASING,
        on_update: Callable[[float], None] | None = None,
    ) -> None:
        self._value = saturate(value)
        self._target = 1.0 if self._value >= 0.5 else 0.0
        self._easing = easing if easing in EASINGS else DEFAULT_EASING
        self._tween: HeightTween | None = None
        self._last_tick_ms: float | None = None
        self._on_update = on_update

    @property
    def value(self) -> float:
        return self._value

    @property
    def target(self) -> float:
        return self._target

    @property
    def phase(self) -> HeightPhase:
        return HeightPhase.IDLE if self._tween is None else HeightPhase.ANIMATING

    def set_target(self, enabled: bool, now_ms: float | None = None) -> HeightTween:
        """Start a tween towards 1 (``enabled``) or 0.

        ``now_ms`` is the toggle time; when given, the next :meth:`advance`
        counts from it so the tween runs on toggle time rather than frame time.
        """
        if self._tween is not None:
            logger.debug(
                "height.tween.cancel",
                extra={"value": self._value, "target": self._tween.end_val},
            )
        self._tween = None
        self._last_tick_ms = now_ms

        if enabled:
            tween = HeightTween.appear(self._value, easing=self._easing)
        else:
            tween = HeightTween.disappear(self._value, easing=self._easing)
        self._target = tween.end_val
        self._tween = tween
        logger.debug(
            "height.tween.start",
            extra={"value": self._value, "target": tween.end_val},
        )
        return tween

    def tick(self, dt_ms: float) -> bool:
        """Step the active tween; returns ``True`` while still animating."""
        tween = self._tween
        if tween is None:
            return False

        value, done = tween.tick(dt_ms)
        self._value = saturate(value)
        if done:
            self._tween = None
            self._last_tick_ms = None
            logger.debug("height.tween.complete", extra={"value": self._value})
        if self._on_update is not None:
            self._on_update(self._value)
        return not done

    def advance(self, now_ms: float) -> bool:
        """Tick using wall-clock time.

        Without a toggle time from :meth:`set_target` the first call only
        records ``now_ms``.
        """
        if self._tween is None:
            return False
        last = self._last_tick_ms
        self._last_tick_ms = now_ms
        dt_ms = 0.0 if last is None else now_ms - last
        return self.tick(dt_ms)
