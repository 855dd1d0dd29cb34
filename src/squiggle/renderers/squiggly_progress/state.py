from __future__ import annotations

from dataclasses import dataclass, field

from squiggle.display.color import Color


@dataclass(frozen=True)
class SquigglyProgressState:
    progress: float = 0.0
    tint: Color = field(default_factory=Color.white)
    alpha: float = 255
    animate: bool = True
    transition_enabled: bool = True
