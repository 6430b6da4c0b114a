"""Command line entry point: load a map, render it, show or save the image."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .controls import KeyAction, handle_key
from .errors import USAGE, SceneError, format_error
from .objects import Ambient
from .parser import parse_map
from .render import WIN_HEIGHT, WIN_WIDTH, WINDOW_NAME, render_scene
from .scene import Scene, create_scene
from .vector import Rgb


@dataclass(frozen=True)
class _Options:
    map_path: str
    output: str | None = None
    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT


def load_scene(path: str | Path) -> Scene:
    """Read the map at *path*; a scene without ambient light gets a dark one."""
    scene = create_scene()
    parse_map(path, scene)
    if scene.ambient is None:
        scene.ambient = Ambient(0.0, Rgb(0, 0, 0))
    return scene


def _parse_size(text: str) -> tuple[int, int]:
    width_text, sep, height_text = text.partition("x")
    if not sep:
        raise ValueError(text)
    width, height = int(width_text), int(height_text)
    if width <= 0 or height <= 0:
        raise ValueError(text)
    return width, height


def _parse_args(args: Sequence[str]) -> _Options:
    positional: list[str] = []
    output: str | None = None
    width, height = WIN_WIDTH, WIN_HEIGHT
    items = iter(args)
    for arg in items:
        if arg in ("-o", "--output"):
            output = next(items, None)
            if output is None:
                raise ValueError(arg)
        elif arg == "--size":
            width, height = _parse_size(next(items, ""))
        else:
            positional.append(arg)
    if len(positional) != 1:
        raise ValueError("expected exactly one map path")
    return _Options(positional[0], output, width, height)


def _write_ppm(path: str, pixels: list[list[int]], width: int, height: int) -> None:
    body = bytearray()
    for row in pixels:
        for pixel in row:
            body += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    Path(path).write_bytes(f"P6\n{width} {height}\n255\n".encode("ascii") + body)


def _tk_rows(pixels: list[list[int]]) -> str:
    return " ".join(
        "{" + " ".join(f"#{pixel:06x}" for pixel in row) + "}" for row in pixels
    )


def _show_window(scene: Scene, width: int, height: int) -> None:
    import tkinter as tk

    root = tk.Tk()
    root.title(WINDOW_NAME)
    image = tk.PhotoImage(width=width, height=height)
    tk.Label(root, image=image, borderwidth=0).pack()

    def draw() -> None:
        image.put(_tk_rows(render_scene(scene, width, height)))

    def on_key(event: tk.Event) -> None:
        if handle_key(scene, event.keysym_num) is KeyAction.CLOSE:
            root.destroy()
        else:
            draw()

    root.bind("<Key>", on_key)
    root.protocol("WM_DELETE_WINDOW", root.destroy)
    draw()
    root.mainloop()


def _fail(message: str, code: int) -> int:
    print(format_error(message), end="", file=sys.stderr)
    return code


def main(argv: Sequence[str] | None = None) -> int:
    """Run the renderer; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = _parse_args(args)
    except ValueError:
        return _fail(USAGE, 1)
    try:
        scene = load_scene(options.map_path)
        if options.output is not None:
            pixels = render_scene(scene, options.width, options.height)
            _write_ppm(options.output, pixels, options.width, options.height)
        else:
            _show_window(scene, options.width, options.height)
    except SceneError as exc:
        return _fail(exc.message, exc.exit_code)
    except OSError as exc:
        return _fail(str(exc), 2)
    except ImportError as exc:
        return _fail(str(exc), 2)
    scene.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())