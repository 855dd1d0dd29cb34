from __future__ import annotations

from squiggle.progress.state import RenderState, WaveParameters


def wrap_phase(phase: float, wave_length: float) -> float:
    """Reduce ``phase`` into ``[0, wave_length)``.

    Negative phases wrap from the top, so a negative speed or a clock that
    steps backwards still leaves the offset in range.
    """
    if wave_length <= 0.0:
        return 0.0
    wrapped = phase % wave_length
    # float modulo of a tiny negative number can land exactly on wave_length
    if wrapped >= wave_length:
        return 0.0
    return wrapped


def phase_delta(now_ms: float, last_ms: float | None, phase_speed: float) -> float:
    if last_ms is None:
        return 0.0
    return (now_ms - last_ms) / 1000.0 * phase_speed


def advance_phase(state: RenderState, params: WaveParameters, now_ms: float) -> float:
    """Move the wave along by the time elapsed since the previous frame.

    Only meaningful while animating; the caller skips it otherwise so the
    phase freezes and no time bookkeeping happens.
    """
    delta = phase_delta(now_ms, state.last_frame_ms, params.phase_speed)
    state.phase_offset = wrap_phase(state.phase_offset + delta, params.wave_length)
    state.last_frame_ms = now_ms
    return state.phase_offset
