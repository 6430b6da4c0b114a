"""Reading scene maps: one object per line, values separated by whitespace."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import MapNotFoundError, UnknownObjectError
from .scene import Scene, SceneObject

_SEPARATORS = re.compile(r"[ \t\r\v\f]+")


def parse_object(line: str, scene: Scene) -> SceneObject:
    """Parse one map line and register the object it describes in *scene*."""
    words = [word for word in _SEPARATORS.split(line) if word]
    if not words:
        raise UnknownObjectError()
    parser = scene.parser_for(words[0])
    if parser is None:
        raise UnknownObjectError()
    obj = parser(words[1:])
    scene.register_object(obj)
    print(f"Register object with id {obj.id}")
    return obj


def parse_lines(content: str, scene: Scene) -> list[SceneObject]:
    """Parse every non-empty line of *content*, stopping at the first error."""
    return [parse_object(line, scene) for line in content.split("\n") if line]


def parse_map(path: str | Path, scene: Scene) -> list[SceneObject]:
    """Read the map at *path* into *scene*."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError as exc:
        raise MapNotFoundError() from exc
    return parse_lines(content, scene)