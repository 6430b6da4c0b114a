"""Light accumulation and shading of surface colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from .vector import FloatRgb, Rgb, Vec3

if TYPE_CHECKING:
    from .objects import Ambient, Light

GAMMA = 2.2
LINEAR_ATTENUATION_COEF = 0.0004
QUADRATIC_ATTENUATION_COEF = 0.004


@dataclass(frozen=True)
class HitData:
    """Where a ray hit a surface, the surface normal there and the object's position."""

    impact_point: Vec3
    normal: Vec3
    position: Vec3


def _linear(channel: float) -> float:
    return (channel / 255.0) ** GAMMA


def light_level(light: Light, impact_point: Vec3, normal: Vec3) -> float:
    """Diffuse factor of *light* at *impact_point*, attenuated by distance."""
    direction = light.position - impact_point
    distance = direction.length()
    dot = normal.dot(direction.normalized())
    if dot <= 0.0:
        return 0.0
    return dot * (
        1.0
        / (
            1.0
            + LINEAR_ATTENUATION_COEF * distance
            + QUADRATIC_ATTENUATION_COEF * distance * distance
        )
    )


def lights_modifier(
    ambient: Ambient, lights: Iterable[Light], hit: HitData, radius: float
) -> FloatRgb:
    """Total light reaching a hit point, each channel capped at 1.0.

    With a positive *radius*, only lights within that distance of the hit
    object's position contribute.
    """
    ambient_color = ambient.color
    r = _linear(ambient_color.r) * ambient.level
    g = _linear(ambient_color.g) * ambient.level
    b = _linear(ambient_color.b) * ambient.level
    for light in lights:
        if radius <= 0.0 or (light.position - hit.position).length() <= radius:
            level = light_level(light, hit.impact_point, hit.normal) * light.level
            r += _linear(light.color.r) * level
            g += _linear(light.color.g) * level
            b += _linear(light.color.b) * level
    return FloatRgb(min(r, 1.0), min(g, 1.0), min(b, 1.0))


def _shade_channel(base: int, factor: float) -> int:
    factor = max(0.0, min(factor, 1.0))
    value = (_linear(base) * factor) ** (1.0 / GAMMA) * 255.0
    return int(min(value, 255.0))


def apply_lights_modifier(modifier: FloatRgb, base: Rgb) -> Rgb:
    """Colour *base* as lit by *modifier*, in gamma-corrected space."""
    return Rgb(
        _shade_channel(base.r, modifier.r),
        _shade_channel(base.g, modifier.g),
        _shade_channel(base.b, modifier.b),
    )