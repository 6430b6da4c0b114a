"""Casting one ray per pixel through the camera's image plane."""

from __future__ import annotations

from .errors import SceneError
from .objects import Ambient, Camera
from .scene import Scene
from .vector import Ray, Rgb, Vec3

WIN_WIDTH = 1100
WIN_HEIGHT = 700
WINDOW_NAME = "miniRT"

_NO_AMBIENT = Ambient(0.0, Rgb(0, 0, 0))


def ray_direction(
    camera: Camera,
    x: int,
    y: int,
    ratio: float,
    width: int = WIN_WIDTH,
    height: int = WIN_HEIGHT,
) -> Vec3:
    """Unit direction of the ray through the centre of pixel (*x*, *y*)."""
    ndc_x = -(2.0 * ((x + 0.5) / width) - 1.0) * ratio
    ndc_y = -(2.0 * ((y + 0.5) / height) - 1.0) * camera.iplane_scale
    return (camera.right * ndc_x + camera.up * ndc_y + camera.normal).normalized()


def trace(scene: Scene, ray: Ray) -> Rgb:
    """Colour seen along *ray*: that of the nearest drawable object, else black."""
    ambient = scene.ambient if scene.ambient is not None else _NO_AMBIENT
    for obj in scene.objects:
        render = getattr(obj, "render", None)
        if callable(render):
            render(ray, ambient, scene.lights)
    return ray.color


def render_scene(
    scene: Scene, width: int = WIN_WIDTH, height: int = WIN_HEIGHT
) -> list[list[int]]:
    """Render the scene as rows of 0xRRGGBB pixels, top row first."""
    camera = scene.camera
    if camera is None:
        raise SceneError("Scene has no camera")
    ratio = (width / height) * camera.iplane_scale
    origin = camera.position
    return [
        [
            trace(
                scene,
                Ray(origin, ray_direction(camera, x, y, ratio, width, height)),
            ).to_int()
            for x in range(width)
        ]
        for y in range(height)
    ]