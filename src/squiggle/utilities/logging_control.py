from __future__ import annotations

import logging
import os
import time
from functools import cache
from typing import Callable, Sequence

LOG_INTERVAL_ENV_VAR = "SQUIGGLE_LOG_INTERVAL"
DEFAULT_INTERVAL_SECONDS = 1.0
DEFAULT_FALLBACK_LEVEL = logging.DEBUG


class LoggingController:
    """Rate-limits hot-path log statements per key.

    Draw calls happen every frame, so anything logged from them would flood
    the handlers. Each key is allowed one statement at the requested level per
    ``interval`` seconds; the rest are demoted to ``fallback_level`` (or
    dropped when that is ``None``).
    """

    def __init__(
        self,
        *,
        interval: float | None,
        fallback_level: int | None = DEFAULT_FALLBACK_LEVEL,
        monotonic: Callable[[], float] = time.monotonic,
    ) -> None:
        self._interval = interval
        self._fallback_level = fallback_level
        self._monotonic = monotonic
        self._next_emit: dict[str, float] = {}

    def log(
        self,
        *,
        key: str,
        logger: logging.Logger,
        level: int,
        msg: str,
        args: Sequence[object] | None = None,
        extra: dict[str, object] | None = None,
    ) -> bool:
        """Emit ``msg`` honouring the sampling interval for ``key``.

        Returns ``True`` when the statement went out at ``level``.
        """

        if self._interval is None:
            logger.log(level, msg, *(args or ()), extra=extra)
            return True

        now = self._monotonic()
        if now >= self._next_emit.get(key, 0.0):
            self._next_emit[key] = now + self._interval
            logger.log(level, msg, *(args or ()), extra=extra)
            return True

        if self._fallback_level is not None:
            logger.log(self._fallback_level, msg, *(args or ()), extra=extra)
        return False


def _parse_interval(value: str) -> float | None:
    if value.strip().lower() == "none":
        return None
    try:
        interval = float(value)
    except ValueError as exc:
        raise ValueError(
            f"{LOG_INTERVAL_ENV_VAR} must be a number of seconds or 'none'"
        ) from exc
    if interval < 0:
        raise ValueError(f"{LOG_INTERVAL_ENV_VAR} must not be negative")
    return interval


@cache
def get_logging_controller() -> LoggingController:
    """Return the process-wide controller configured from the environment."""

    raw = os.getenv(LOG_INTERVAL_ENV_VAR)
    interval = DEFAULT_INTERVAL_SECONDS if raw is None else _parse_interval(raw)
    return LoggingController(interval=interval)
