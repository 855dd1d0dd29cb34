from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

import numpy as np
import pygame

from squiggle.display.color import Color
from squiggle.progress.path import WavePath
from squiggle.utilities.env import Configuration


@dataclass(frozen=True, slots=True)
class Paint:
    color: Color
    stroke_width: float
    round_cap: bool = True


class Canvas(Protocol):
    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None: ...

    def draw_path(self, path: WavePath, paint: Paint) -> None: ...

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, paint: Paint) -> None: ...

    def draw_point(self, x: float, y: float, paint: Paint) -> None: ...


class PygameCanvas:
    """``Canvas`` over a pygame surface.

    Translation and clip live on a save/restore stack. Strokes are drawn onto
    a transparent scratch layer first and then blitted through the current
    clip, so translucent paint blends with what is already on the surface
    instead of overwriting it.
    """

    def __init__(self, surface: pygame.Surface, *, curve_samples: int | None = None) -> None:
        self.surface = surface
        self.curve_samples = (
            curve_samples if curve_samples is not None else Configuration.curve_samples()
        )
        self._origin = (0.0, 0.0)
        self._clip = surface.get_clip().copy()
        self._stack: list[tuple[tuple[float, float], pygame.Rect]] = []
        self._layer: pygame.Surface | None = None

    @property
    def save_count(self) -> int:
        return len(self._stack)

    @property
    def origin(self) -> tuple[float, float]:
        return self._origin

    @property
    def clip(self) -> pygame.Rect:
        return self._clip.copy()

    def save(self) -> None:
        self._stack.append((self._origin, self._clip.copy()))

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() called without a matching save()")
        self._origin, self._clip = self._stack.pop()
        self.surface.set_clip(self._clip)

    def translate(self, dx: float, dy: float) -> None:
        ox, oy = self._origin
        self._origin = (ox + dx, oy + dy)

    def clip_rect(self, left: float, top: float, right: float, bottom: float) -> None:
        ox, oy = self._origin
        edges = (left + ox, top + oy, right + ox, bottom + oy)
        if not all(math.isfinite(edge) for edge in edges):
            self._clip = pygame.Rect(self._clip.topleft, (0, 0))
            self.surface.set_clip(self._clip)
            return
        # edges round the same way so clips sharing an edge never overlap
        x0, y0, x1, y1 = (round(edge) for edge in edges)
        x1 = max(x0, x1)
        y1 = max(y0, y1)
        self._clip = self._clip.clip(pygame.Rect(x0, y0, x1 - x0, y1 - y0))
        self.surface.set_clip(self._clip)

    def draw_path(self, path: WavePath, paint: Paint) -> None:
        points = path.flatten(self.curve_samples)
        self._stroke(points + np.asarray(self._origin), paint)

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, paint: Paint) -> None:
        points = np.array([[x0, y0], [x1, y1]], dtype=np.float64)
        self._stroke(points + np.asarray(self._origin), paint)

    def draw_point(self, x: float, y: float, paint: Paint) -> None:
        points = np.array([[x, y]], dtype=np.float64)
        self._stroke(points + np.asarray(self._origin), paint)

    def _scratch_layer(self) -> pygame.Surface:
        size = self.surface.get_size()
        if self._layer is None or self._layer.get_size() != size:
            self._layer = pygame.Surface(size, pygame.SRCALPHA)
        self._layer.fill((0, 0, 0, 0))
        return self._layer

    def _stroke(self, points: np.ndarray, paint: Paint) -> None:
        if paint.color.a == 0 or paint.stroke_width <= 0 or self._clip.width == 0:
            return

        layer = self._scratch_layer()
        color = paint.color.rgba()
        width = max(1, int(round(paint.stroke_width)))
        coords = points.tolist()

        if len(coords) > 1:
            pygame.draw.lines(layer, color, False, coords, width)
        if paint.round_cap and (width > 1 or len(coords) == 1):
            radius = max(0.5, paint.stroke_width / 2.0)
            for x, y in coords:
                pygame.draw.circle(layer, color, (x, y), radius)

        self.surface.blit(layer, self._clip.topleft, area=self._clip)
