"""A small ray tracer for .rt scene files, rendering to a Tk window or a PPM file."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "controls",
    "elements",
    "errors",
    "lights",
    "objects",
    "parser",
    "render",
    "scene",
    "vector",
]