from __future__ import annotations

from collections.abc import Callable

import pygame
from PIL import Image

from squiggle.utilities.env import Configuration, FrameExportStrategy

RGBA_IMAGE_FORMAT = "RGBA"


class FrameExporter:
    """Convert pygame surfaces into PIL images using configurable strategies."""

    def __init__(
        self,
        strategy_provider: Callable[[], FrameExportStrategy] | None = None,
    ) -> None:
        self._strategy_provider = (
            strategy_provider or Configuration.frame_export_strategy
        )

    def export(self, surface: pygame.Surface) -> Image.Image:
        if self._strategy_provider() == FrameExportStrategy.ARRAY:
            return self._export_array(surface)
        return self._export_buffer(surface)

    def _export_buffer(self, surface: pygame.Surface) -> Image.Image:
        image_bytes = pygame.image.tobytes(surface, RGBA_IMAGE_FORMAT)
        return Image.frombytes(RGBA_IMAGE_FORMAT, surface.get_size(), image_bytes)

    def _export_array(self, surface: pygame.Surface) -> Image.Image:
        # surfarray is indexed (x, y); images are (row, column)
        array = pygame.surfarray.array3d(surface)
        return Image.fromarray(array.swapaxes(0, 1))
