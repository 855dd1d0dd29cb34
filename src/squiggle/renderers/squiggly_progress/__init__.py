from squiggle.renderers.squiggly_progress.provider import (  # noqa: F401
    SquigglyProgressInputs, SquigglyProgressStateProvider)
from squiggle.renderers.squiggly_progress.renderer import \
    SquigglyProgressRenderer  # noqa: F401
from squiggle.renderers.squiggly_progress.state import \
    SquigglyProgressState  # noqa: F401
