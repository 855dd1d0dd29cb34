import os
import tempfile

# Loggers are configured at import time; keep their files out of $HOME.
os.environ.setdefault("SQUIGGLE_LOG_DIR", tempfile.mkdtemp(prefix="squiggle-logs-"))

import pygame  # noqa: E402
import pytest  # noqa: E402
from helpers.canvas import RecordingCanvas  # noqa: E402
from helpers.time import DeterministicClock  # noqa: E402
from hypothesis import HealthCheck, settings  # noqa: E402

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def clock() -> DeterministicClock:
    return DeterministicClock()


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()
