from squiggle.progress.amplitude import AmplitudeProfile  # noqa: F401
from squiggle.progress.canvas import Canvas, Paint, PygameCanvas  # noqa: F401
from squiggle.progress.colors import (DISABLED_ALPHA, ColorState,  # noqa: F401
                                      derive_color_state)
from squiggle.progress.drawable import SquigglyProgress  # noqa: F401
from squiggle.progress.path import WavePath, build_wave_path  # noqa: F401
from squiggle.progress.state import (Bounds, RenderState,  # noqa: F401
                                     WaveParameters)
from squiggle.progress.tween import (HeightAnimator, HeightPhase,  # noqa: F401
                                     HeightTween)
