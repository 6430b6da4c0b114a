"""Scene objects: ambient light, camera, lights and the shapes, with their parsers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar, Iterable, Sequence

from . import errors
from .elements import (
    is_numeric,
    is_out_of_int,
    parse_color,
    parse_float,
    parse_int,
    parse_normal,
    parse_vector,
)
from .errors import ObjectFormatError
from .lights import HitData, apply_lights_modifier, lights_modifier
from .vector import Ray, Rgb, Vec3

AMBIENT_ID = "A"
CAMERA_ID = "C"
CYLINDER_ID = "cy"
LIGHT_ID = "L"
PLANE_ID = "pl"
SPHERE_ID = "sp"

WORLD_UP = Vec3(0.0, 1.0, 0.0)
MIN_FOV = 0
MAX_FOV = 180

_PARALLEL_EPSILON = 0.000001
_SPHERE_EPSILON = 0.001


def _image_plane_scale(fov: int) -> float:
    return math.tan((fov // 2) * (math.pi / 180.0))


@dataclass(frozen=True)
class Ambient:
    """Ambient lighting; its effective colour is the base colour scaled by level."""

    level: float
    base_color: Rgb
    id: ClassVar[str] = AMBIENT_ID

    @property
    def color(self) -> Rgb:
        return Rgb(
            int(self.base_color.r * self.level),
            int(self.base_color.g * self.level),
            int(self.base_color.b * self.level),
        )


@dataclass(eq=False)
class Camera:
    """The point of view, with an orthonormal basis derived from its normal."""

    position: Vec3
    normal: Vec3
    fov: int
    right: Vec3 = field(init=False)
    up: Vec3 = field(init=False)
    iplane_scale: float = field(init=False)
    id: ClassVar[str] = CAMERA_ID

    def __post_init__(self) -> None:
        self.normal = self.normal.normalized()
        self.right = self.normal.cross(WORLD_UP).normalized()
        self.up = self.right.cross(self.normal)
        self.iplane_scale = _image_plane_scale(self.fov)

    def update_yaw(self, theta: float) -> None:
        """Turn the camera around the vertical axis by *theta* radians."""
        world = WORLD_UP
        if self.up.dot(world) < 0:
            theta = -theta
            world = -WORLD_UP
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        n = self.normal
        self.normal = Vec3(
            n.x * cos_t - n.z * sin_t,
            n.y,
            n.x * sin_t + n.z * cos_t,
        ).normalized()
        self.right = self.normal.cross(world).normalized()
        self.up = self.right.cross(self.normal)

    def update_pitch(self, theta: float) -> None:
        """Tilt the camera up or down by *theta* radians."""
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        self.normal = (self.normal * cos_t + self.up * sin_t).normalized()
        self.up = self.right.cross(self.normal).normalized()

    def update_fov(self, increment: int) -> None:
        """Change the field of view by *increment*, staying within [0, 180]."""
        if (self.fov == MIN_FOV and increment == -1) or (
            self.fov == MAX_FOV and increment == 1
        ):
            return
        self.fov += increment
        self.iplane_scale = _image_plane_scale(self.fov)


@dataclass(frozen=True)
class Cylinder:
    """A cylinder; it is parsed and kept in the scene but not drawn."""

    position: Vec3
    normal: Vec3
    diameter: float
    height: float
    color: Rgb
    id: ClassVar[str] = CYLINDER_ID


@dataclass(frozen=True)
class Light:
    """A point light."""

    position: Vec3
    level: float
    color: Rgb
    id: ClassVar[str] = LIGHT_ID


@dataclass(eq=False)
class Plane:
    """An infinite plane through a point, with a unit normal."""

    position: Vec3
    normal: Vec3
    color: Rgb
    id: ClassVar[str] = PLANE_ID

    def __post_init__(self) -> None:
        self.normal = self.normal.normalized()

    def intersect(self, ray: Ray) -> float:
        """Distance along *ray* to the plane, or -1.0 if it is not hit."""
        denominator = ray.direction.dot(self.normal)
        if abs(denominator) < _PARALLEL_EPSILON:
            return -1.0
        distance = (self.position - ray.origin).dot(self.normal) / denominator
        return distance if distance >= 0.0 else -1.0

    def render(self, ray: Ray, ambient: Ambient, lights: Iterable[Light]) -> bool:
        """Shade *ray* if the plane is its nearest hit so far; report whether it was."""
        dist = self.intersect(ray)
        if not 0 < dist <= ray.dist:
            return False
        normal = self.normal
        if ray.direction.dot(normal) > 0:
            normal = -normal
        hit = HitData(
            impact_point=ray.origin + ray.direction * dist,
            normal=normal,
            position=self.position,
        )
        ray.color = apply_lights_modifier(
            lights_modifier(ambient, lights, hit, 0.0), self.color
        )
        ray.dist = dist
        return True


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and diameter."""

    position: Vec3
    diameter: float
    color: Rgb
    id: ClassVar[str] = SPHERE_ID

    @property
    def radius(self) -> float:
        return self.diameter / 2.0

    def intersect(self, ray: Ray) -> float:
        """Distance along *ray* to the nearest surface point ahead, or -1.0."""
        oc = ray.origin - self.position
        b = 2.0 * oc.dot(ray.direction)
        delta = b * b - 4.0 * (oc.dot(oc) - self.radius * self.radius)
        if delta < 0:
            return -1.0
        root = math.sqrt(delta)
        near = (-b - root) / 2.0
        far = (-b + root) / 2.0
        if near > _SPHERE_EPSILON:
            return near
        if far > _SPHERE_EPSILON:
            return far
        return -1.0

    def render(self, ray: Ray, ambient: Ambient, lights: Iterable[Light]) -> bool:
        """Shade *ray* if the sphere is its nearest hit so far; report whether it was.

        Seen from inside, only lights inside the sphere light it.
        """
        dist = self.intersect(ray)
        if not 0 < dist <= ray.dist:
            return False
        impact = ray.origin + ray.direction * dist
        normal = (impact - self.position).normalized()
        inside = (ray.origin - self.position).length() < self.radius
        if inside:
            normal = -normal
        hit = HitData(impact_point=impact, normal=normal, position=self.position)
        radius = self.radius if inside else -self.radius
        ray.color = apply_lights_modifier(
            lights_modifier(ambient, lights, hit, radius), self.color
        )
        ray.dist = dist
        return True


def _require_count(values: Sequence[str], count: int, message: str) -> None:
    if len(values) != count:
        raise ObjectFormatError(message)


def _parse_size(value: str, message: str) -> float:
    if not is_numeric(value) or is_out_of_int(value):
        raise ObjectFormatError(message)
    size = parse_float(value)
    if size < 0.0:
        raise ObjectFormatError(message)
    return size


def parse_ambient(values: Sequence[str]) -> Ambient:
    """Build an Ambient from '<level> <color>'."""
    _require_count(values, 2, errors.A_ARGS)
    if not is_numeric(values[0]):
        raise ObjectFormatError(errors.A_LVL)
    level = parse_float(values[0])
    if not 0.0 <= level <= 1.0:
        raise ObjectFormatError(errors.A_LVL)
    color = parse_color(values[1], errors.A_RGB)
    return Ambient(level, color)


def parse_camera(values: Sequence[str]) -> Camera:
    """Build a Camera from '<position> <normal> <fov>'."""
    _require_count(values, 3, errors.C_ARGS)
    position = parse_vector(values[0], errors.C_POS)
    normal = parse_normal(values[1], errors.C_NORM)
    if not is_numeric(values[2]) or is_out_of_int(values[2]):
        raise ObjectFormatError(errors.C_FOV)
    fov = parse_int(values[2])
    if not MIN_FOV <= fov <= MAX_FOV:
        raise ObjectFormatError(errors.C_FOV)
    return Camera(position, normal, fov)


def parse_cylinder(values: Sequence[str]) -> Cylinder:
    """Build a Cylinder from '<position> <normal> <diameter> <height> <color>'."""
    _require_count(values, 5, errors.CY_ARGS)
    position = parse_vector(values[0], errors.CY_POS)
    normal = parse_normal(values[1], errors.CY_NORM)
    diameter = _parse_size(values[2], errors.CY_DIAM)
    height = _parse_size(values[3], errors.CY_HEI)
    color = parse_color(values[4], errors.CY_RGB)
    return Cylinder(position, normal, diameter, height, color)


def parse_light(values: Sequence[str]) -> Light:
    """Build a Light from '<position> <level> <color>'."""
    _require_count(values, 3, errors.L_ARGS)
    position = parse_vector(values[0], errors.L_POS)
    level = parse_float(values[1])
    if not 0.0 <= level <= 1.0:
        raise ObjectFormatError(errors.L_LVL)
    color = parse_color(values[2], errors.L_RGB)
    return Light(position, level, color)


def parse_plane(values: Sequence[str]) -> Plane:
    """Build a Plane from '<position> <normal> <color>'."""
    _require_count(values, 3, errors.PL_ARGS)
    position = parse_vector(values[0], errors.PL_POS)
    normal = parse_normal(values[1], errors.PL_NORM)
    color = parse_color(values[2], errors.PL_RGB)
    return Plane(position, normal, color)


def parse_sphere(values: Sequence[str]) -> Sphere:
    """Build a Sphere from '<position> <diameter> <color>'."""
    _require_count(values, 3, errors.SP_ARGS)
    position = parse_vector(values[0], errors.SP_POS)
    diameter = _parse_size(values[1], errors.SP_DIAM)
    color = parse_color(values[2], errors.SP_RGB)
    return Sphere(position, diameter, color)