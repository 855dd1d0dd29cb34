from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from squiggle.progress.canvas import Canvas, Paint
from squiggle.progress.colors import ColorState
from squiggle.progress.path import WavePath
from squiggle.progress.state import Bounds


@contextmanager
def saved(canvas: Canvas) -> Iterator[Canvas]:
    canvas.save()
    try:
        yield canvas
    finally:
        canvas.restore()


@dataclass(frozen=True, slots=True)
class CompositeLayout:
    bounds: Bounds
    # clip boundary between the played and remaining regions
    progress_px: float
    # half height of both clip regions
    clip_top: float
    transition_enabled: bool
    cap_y: float


def composite(
    canvas: Canvas,
    path: WavePath,
    layout: CompositeLayout,
    colors: ColorState,
    stroke_width: float,
) -> None:
    """Draw the wave in two tones split at ``layout.progress_px``.

    With the transition enabled the same path is drawn twice, once per clip
    region, so the remainder keeps its decaying tail in the dimmed color.
    Without it the remainder is a flat line. The canvas transform and clip
    are restored on the way out whether or not drawing succeeds.
    """
    wave_paint = Paint(color=colors.active, stroke_width=stroke_width)
    line_paint = Paint(color=colors.inactive, stroke_width=stroke_width)
    bounds = layout.bounds
    clip_top = layout.clip_top

    with saved(canvas):
        canvas.translate(bounds.left, bounds.center_y)

        with saved(canvas):
            canvas.clip_rect(0.0, -clip_top, layout.progress_px, clip_top)
            canvas.draw_path(path, wave_paint)

        if layout.transition_enabled:
            with saved(canvas):
                canvas.clip_rect(layout.progress_px, -clip_top, bounds.width, clip_top)
                canvas.draw_path(path, line_paint)
        else:
            # the seam at progress_px is left to the host's thumb to cover
            canvas.draw_line(layout.progress_px, 0.0, bounds.width, 0.0, line_paint)

        canvas.draw_point(0.0, layout.cap_y, wave_paint)
