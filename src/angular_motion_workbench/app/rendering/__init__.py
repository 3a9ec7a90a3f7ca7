from .base import DisplayOptions, Renderer

__all__ = [
    "DisplayOptions",
    "Renderer",
]
