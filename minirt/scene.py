"""The scene: registered object types and every object read from a map."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Sequence, Union

from .errors import RegistrationError
from .objects import (
    AMBIENT_ID,
    CAMERA_ID,
    CYLINDER_ID,
    LIGHT_ID,
    PLANE_ID,
    SPHERE_ID,
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Sphere,
    parse_ambient,
    parse_camera,
    parse_cylinder,
    parse_light,
    parse_plane,
    parse_sphere,
)

SceneObject = Union[Ambient, Camera, Cylinder, Light, Plane, Sphere]
Parser = Callable[[Sequence[str]], SceneObject]


@dataclass(frozen=True)
class ObjectType:
    """A kind of object that may appear in a map, with the parser for its values."""

    id: str
    parser: Parser


@dataclass
class Scene:
    """Everything needed to render: types, shapes, lights, ambient light and camera.

    Shapes and lights are kept newest first.
    """

    types: dict[str, ObjectType] = field(default_factory=dict)
    objects: list[SceneObject] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    ambient: Ambient | None = None
    camera: Camera | None = None

    def register_type(self, type_id: str, parser: Parser) -> bool:
        """Add an object type; return False if one with this id already exists."""
        if self.exists_type(type_id):
            return False
        self.types[type_id] = ObjectType(type_id, parser)
        return True

    def exists_type(self, type_id: str) -> bool:
        """Whether a type with this id is registered."""
        return type_id in self.types

    def parser_for(self, type_id: str) -> Parser | None:
        """The parser registered for *type_id*, or None."""
        object_type = self.types.get(type_id)
        return object_type.parser if object_type else None

    def register_object(self, obj: SceneObject | None) -> None:
        """Place *obj* where its kind belongs in the scene."""
        if obj is None:
            raise RegistrationError()
        if obj.id == AMBIENT_ID:
            self.set_ambient(obj)
        elif obj.id == LIGHT_ID:
            self.register_light(obj)
        elif obj.id == CAMERA_ID:
            self.set_camera(obj)
        else:
            self.objects.insert(0, obj)

    def register_light(self, light: Light | None) -> None:
        """Add a light to the scene."""
        if light is None or light.id != LIGHT_ID:
            raise RegistrationError()
        self.lights.insert(0, light)

    def set_ambient(self, ambient: Ambient | None) -> None:
        """Set the ambient light, replacing any previous one."""
        if ambient is None or ambient.id != AMBIENT_ID:
            raise RegistrationError()
        self.ambient = ambient

    def set_camera(self, camera: Camera | None) -> None:
        """Set the camera, replacing any previous one."""
        if camera is None or camera.id != CAMERA_ID:
            raise RegistrationError()
        self.camera = camera

    def clear(self) -> None:
        """Drop every type and object held by the scene."""
        self.types.clear()
        self.objects.clear()
        self.lights.clear()
        self.ambient = None
        self.camera = None


def create_scene() -> Scene:
    """A new scene with the standard object types registered."""
    scene = Scene()
    scene.register_type(AMBIENT_ID, parse_ambient)
    scene.register_type(CAMERA_ID, parse_camera)
    scene.register_type(CYLINDER_ID, parse_cylinder)
    scene.register_type(LIGHT_ID, parse_light)
    scene.register_type(PLANE_ID, parse_plane)
    scene.register_type(SPHERE_ID, parse_sphere)
    return scene