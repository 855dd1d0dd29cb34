from __future__ import annotations

import math
from dataclasses import dataclass

from squiggle.display.color import Color
from squiggle.progress.interpolation import constrain

# alpha (out of 255) of the remainder line when the bar is fully opaque
DISABLED_ALPHA = 77
MAX_ALPHA = 255


def normalize_alpha(alpha: float) -> int:
    """Clamp a 0-255 alpha; non-finite input becomes fully opaque."""
    if not math.isfinite(alpha):
        return MAX_ALPHA
    return int(round(constrain(alpha, 0, MAX_ALPHA)))


@dataclass(frozen=True, slots=True)
class ColorState:
    tint: Color
    alpha: int
    active: Color
    inactive: Color


def derive_color_state(tint: Color, alpha: float) -> ColorState:
    """Derive the wave and remainder-line colors from one tint and alpha.

    Both colors always come from the same inputs, so they can never drift
    apart.
    """
    alpha = normalize_alpha(alpha)
    fraction = alpha / MAX_ALPHA
    return ColorState(
        tint=tint,
        alpha=alpha,
        active=tint.with_alpha(fraction),
        inactive=tint.with_alpha(DISABLED_ALPHA * fraction / MAX_ALPHA),
    )
