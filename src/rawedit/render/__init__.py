"""Full-repaint renderer and the surfaces it draws on."""

from .renderer import Renderer, move_cursor
from .surface import MemorySurface, RenderSurface, StreamSurface

__all__ = [
    "MemorySurface",
    "RenderSurface",
    "Renderer",
    "StreamSurface",
    "move_cursor",
]
