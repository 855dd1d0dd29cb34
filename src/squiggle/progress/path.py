"""Cubic-curve approximation of the progress wave.

The wave is emitted one half wavelength at a time. Each half period is a
single cubic segment between alternating peaks, with its control points
pulled ``CONTROL_POINT_RATIO * dist`` inwards from either endpoint at the
endpoint's own height. That ratio keeps the joined segments close to a sine
curve with horizontal tangents at every peak.
"""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from squiggle.progress.state import MIN_WAVE_LENGTH

CONTROL_POINT_RATIO = 0.36
DEFAULT_CAPACITY = 64

AmplitudeFn = Callable[[float, float], float]


class WavePath:
    """A single open sub-path made of cubic segments.

    Segments live in a reusable ``(n, 6)`` buffer laid out as
    ``c1x, c1y, c2x, c2y, x, y``; ``rewind`` keeps the storage so a path
    rebuilt every frame stops allocating once it has grown to the bar width.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._buffer = np.empty((max(1, capacity), 6), dtype=np.float64)
        self._count = 0
        self._start = (0.0, 0.0)

    def rewind(self) -> None:
        self._count = 0
        self._start = (0.0, 0.0)

    def move_to(self, x: float, y: float) -> None:
        self._count = 0
        self._start = (float(x), float(y))

    def cubic_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> None:
        if self._count == len(self._buffer):
            grown = np.empty((len(self._buffer) * 2, 6), dtype=np.float64)
            grown[: self._count] = self._buffer
            self._buffer = grown
        self._buffer[self._count] = (c1x, c1y, c2x, c2y, x, y)
        self._count += 1

    @property
    def start(self) -> tuple[float, float]:
        return self._start

    @property
    def segments(self) -> np.ndarray:
        """Read-only view of the emitted segments."""
        view = self._buffer[: self._count]
        view.flags.writeable = False
        return view

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def __len__(self) -> int:
        return self._count

    @property
    def end(self) -> tuple[float, float]:
        if self._count == 0:
            return self._start
        x, y = self._buffer[self._count - 1, 4:6]
        return float(x), float(y)

    def anchor_xs(self) -> np.ndarray:
        """x of the start point followed by every segment endpoint."""
        return np.concatenate(([self._start[0]], self._buffer[: self._count, 4]))

    def flatten(self, samples: int) -> np.ndarray:
        """Evaluate every segment at ``samples`` evenly spaced parameters.

        Returns an ``(1 + len(self) * samples, 2)`` array of points starting
        with the move-to point, suitable for polyline rasterisation.
        """
        samples = max(1, int(samples))
        start = np.asarray(self._start, dtype=np.float64).reshape(1, 2)
        if self._count == 0:
            return start

        segments = self._buffer[: self._count]
        p0 = np.vstack((start, segments[:-1, 4:6]))
        p1 = segments[:, 0:2]
        p2 = segments[:, 2:4]
        p3 = segments[:, 4:6]

        t = np.linspace(0.0, 1.0, samples + 1)[1:]
        mt = 1.0 - t
        b0 = (mt**3)[None, :, None]
        b1 = (3.0 * mt**2 * t)[None, :, None]
        b2 = (3.0 * mt * t**2)[None, :, None]
        b3 = (t**3)[None, :, None]

        points = (
            b0 * p0[:, None, :]
            + b1 * p1[:, None, :]
            + b2 * p2[:, None, :]
            + b3 * p3[:, None, :]
        )
        return np.vstack((start, points.reshape(-1, 2)))


def wave_start_for(phase_offset: float, wave_length: float) -> float:
    return -phase_offset - wave_length / 2.0


def build_wave_path(
    path: WavePath,
    amplitude: AmplitudeFn,
    *,
    wave_start: float,
    wave_end: float,
    wave_length: float,
) -> WavePath:
    """Rebuild ``path`` as a wave spanning ``[wave_start, wave_end]``.

    ``amplitude(x, sign)`` gives the signed peak height at ``x``. The last
    segment ends at or past ``wave_end``.
    """
    path.move_to(wave_start, 0.0)

    if not wave_length >= MIN_WAVE_LENGTH or not math.isfinite(wave_end):
        # Too short to step through, or no finite end to stop at; one flat
        # segment keeps the bar drawn.
        end_x = max(wave_end, wave_start) if math.isfinite(wave_end) else wave_start
        path.cubic_to(wave_start, 0.0, end_x, 0.0, end_x, 0.0)
        return path

    dist = wave_length / 2.0
    control = dist * CONTROL_POINT_RATIO
    current_x = wave_start
    sign = 1.0
    current_amp = amplitude(current_x, sign)

    while current_x < wave_end:
        sign = -sign
        next_x = current_x + dist
        next_amp = amplitude(next_x, sign)
        path.cubic_to(
            current_x + control,
            current_amp,
            next_x - control,
            next_amp,
            next_x,
            next_amp,
        )
        current_amp = next_amp
        current_x = next_x

    return path


def start_cap_height(amplitude: AmplitudeFn, *, wave_start: float, wave_length: float) -> float:
    """Height of the wave where it enters the bar at ``x = 0``."""
    if wave_length <= 0.0:
        return 0.0
    phase = abs(wave_start) / wave_length * math.tau
    return amplitude(0.0, math.cos(phase))
