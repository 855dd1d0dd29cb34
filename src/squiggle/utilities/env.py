import math
import os
from enum import StrEnum

TRUE_FLAG_VALUES = {"true", "1", "yes", "on"}


class FrameExportStrategy(StrEnum):
    BUFFER = "buffer"
    ARRAY = "array"


def _env_flag(env_var: str, *, default: bool = False) -> bool:
    """Return the boolean value of ``env_var`` respecting common true strings."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    return value.strip().lower() in TRUE_FLAG_VALUES


def _env_int(
    env_var: str, *, default: int, minimum: int | None = None
) -> int:
    """Return the integer value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be an integer") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


def _env_float(
    env_var: str, *, default: float, minimum: float | None = None
) -> float:
    """Return the finite float value of ``env_var`` with optional lower bound."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a number") from exc
    if not math.isfinite(parsed):
        raise ValueError(f"{env_var} must be finite")
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    return parsed


class Configuration:
    @classmethod
    def wave_length(cls) -> float:
        return _env_float("SQUIGGLE_WAVE_LENGTH", default=55.0, minimum=1.0)

    @classmethod
    def line_amplitude(cls) -> float:
        return _env_float("SQUIGGLE_LINE_AMPLITUDE", default=6.0, minimum=0.0)

    @classmethod
    def phase_speed(cls) -> float:
        return _env_float("SQUIGGLE_PHASE_SPEED", default=16.0)

    @classmethod
    def stroke_width(cls) -> float:
        return _env_float("SQUIGGLE_STROKE_WIDTH", default=8.0, minimum=0.0)

    @classmethod
    def transition_enabled(cls) -> bool:
        return _env_flag("SQUIGGLE_TRANSITION_ENABLED", default=True)

    @classmethod
    def curve_samples(cls) -> int:
        """Number of polyline points each cubic segment is flattened into."""
        return _env_int("SQUIGGLE_CURVE_SAMPLES", default=8, minimum=1)

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("SQUIGGLE_MAX_FPS", default=60, minimum=1)

    @classmethod
    def frame_export_strategy(cls) -> FrameExportStrategy:
        raw = os.environ.get("SQUIGGLE_FRAME_EXPORT_STRATEGY", "buffer")
        try:
            return FrameExportStrategy(raw.strip().lower())
        except ValueError as exc:
            raise ValueError(
                "SQUIGGLE_FRAME_EXPORT_STRATEGY must be 'buffer' or 'array'"
            ) from exc
