from squiggle.renderers.base import StatefulBaseRenderer  # noqa: F401
from squiggle.renderers.providers import (ObservableProvider,  # noqa: F401
                                          StaticStateProvider)
