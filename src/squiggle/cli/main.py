from __future__ import annotations

import os
from pathlib import Path

import pygame
import typer

from squiggle.display.color import Color
from squiggle.progress.canvas import PygameCanvas
from squiggle.progress.drawable import SquigglyProgress
from squiggle.progress.state import Bounds, WaveParameters
from squiggle.renderers.squiggly_progress import (SquigglyProgressInputs,
                                                  SquigglyProgressRenderer,
                                                  SquigglyProgressState,
                                                  SquigglyProgressStateProvider)
from squiggle.runtime.frame_exporter import FrameExporter
from squiggle.runtime.loop import DEFAULT_BACKGROUND, ProgressLoop
from squiggle.utilities.env import Configuration
from squiggle.utilities.logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(help="Animated squiggly progress bar.")

DEFAULT_TINT = "#8ab4f8"


def _parse_tint(value: str) -> Color:
    try:
        return Color.from_hex(value)
    except ValueError as exc:
        logger.error("Invalid tint %r: %s", value, exc)
        raise typer.Exit(code=1) from exc


def _wave_parameters(
    wave_length: float | None,
    amplitude: float | None,
    phase_speed: float | None,
    stroke_width: float | None,
) -> WaveParameters:
    params = WaveParameters.from_configuration()
    if wave_length is not None:
        params.wave_length = wave_length
    if amplitude is not None:
        params.line_amplitude = amplitude
    if phase_speed is not None:
        params.phase_speed = phase_speed
    if stroke_width is not None:
        params.stroke_width = stroke_width
    return params


def _transition(value: bool | None) -> bool:
    return Configuration.transition_enabled() if value is None else value


@app.command()
def demo(
    width: int = typer.Option(480, min=16, help="Window width in px."),
    height: int = typer.Option(64, min=16, help="Window height in px."),
    sweep_seconds: float = typer.Option(12.0, min=0.5, help="Seconds per 0 to 1 sweep."),
    pause_every: float = typer.Option(
        5.0, min=0.0, help="Toggle the wave every N seconds (0 disables)."
    ),
    frames: int = typer.Option(0, min=0, help="Stop after N frames (0 runs until closed)."),
    wave_length: float | None = typer.Option(None, help="Wave length in px."),
    amplitude: float | None = typer.Option(None, help="Peak height in px."),
    phase_speed: float | None = typer.Option(None, help="Wave speed in px/s."),
    stroke_width: float | None = typer.Option(None, help="Stroke width in px."),
    transition: bool | None = typer.Option(
        None, "--transition/--no-transition", help="Defaults to SQUIGGLE_TRANSITION_ENABLED."
    ),
    tint: str = typer.Option(DEFAULT_TINT, help="Hex tint, e.g. #8ab4f8."),
) -> None:
    """Open a window and sweep the bar from empty to full, repeatedly."""
    inputs = SquigglyProgressInputs(
        SquigglyProgressState(tint=_parse_tint(tint), transition_enabled=_transition(transition))
    )
    renderer = SquigglyProgressRenderer(
        SquigglyProgressStateProvider(inputs),
        params=_wave_parameters(wave_length, amplitude, phase_speed, stroke_width),
        margin=16.0,
    )

    def drive(_frame: int, elapsed: float) -> None:
        inputs.progress.on_next((elapsed / sweep_seconds) % 1.0)
        if pause_every > 0:
            inputs.animate.on_next(int(elapsed // pause_every) % 2 == 0)

    loop = ProgressLoop(renderer, size=(width, height))
    loop.start(max_frames=frames or None, on_frame=drive)


@app.command()
def snapshot(
    output: Path = typer.Argument(..., help="PNG file to write."),
    progress: float = typer.Option(0.5, min=0.0, max=1.0),
    time_ms: float = typer.Option(0.0, min=0.0, help="Animation time to advance the phase by."),
    width: int = typer.Option(480, min=1),
    height: int = typer.Option(64, min=1),
    wave_length: float | None = typer.Option(None),
    amplitude: float | None = typer.Option(None),
    phase_speed: float | None = typer.Option(None),
    stroke_width: float | None = typer.Option(None),
    transition: bool | None = typer.Option(
        None, "--transition/--no-transition", help="Defaults to SQUIGGLE_TRANSITION_ENABLED."
    ),
    tint: str = typer.Option(DEFAULT_TINT),
) -> None:
    """Render a single frame headlessly and save it as a PNG."""
    color = _parse_tint(tint)
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    try:
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        surface.fill(DEFAULT_BACKGROUND)
        engine = SquigglyProgress(
            _wave_parameters(wave_length, amplitude, phase_speed, stroke_width),
            tint=color,
            transition_enabled=_transition(transition),
        )
        engine.progress = progress
        canvas = PygameCanvas(surface)
        bounds = Bounds.from_size(width, height)
        engine.draw(canvas, bounds, now_ms=0.0)
        if time_ms > 0:
            surface.fill(DEFAULT_BACKGROUND)
            engine.draw(canvas, bounds, now_ms=time_ms)
        FrameExporter().export(surface).save(output)
    finally:
        pygame.quit()
    typer.echo(f"Wrote {output}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
