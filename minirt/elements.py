"""Parsing of the values found on a scene line: numbers, vectors, colours."""

from __future__ import annotations

import re

from .errors import ObjectFormatError
from .vector import Rgb, Vec3

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NUMERIC = re.compile(r"[+-]?\d+(?:\.\d+)?")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")
_CHANNEL = re.compile(r"\d{1,3}")


def is_numeric(value: str) -> bool:
    """Whether *value* is a plain decimal number, optionally signed."""
    return _NUMERIC.fullmatch(value) is not None


def is_out_of_int(value: str) -> bool:
    """Whether the integer part of *value* lies outside the 32-bit int range."""
    match = _INT_PREFIX.match(value)
    if match is None:
        return False
    return not INT_MIN <= int(match.group(1)) <= INT_MAX


def parse_float(value: str) -> float:
    """Read the leading number of *value*; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(value)
    return float(match.group(1)) if match else 0.0


def parse_int(value: str) -> int:
    """Read the leading integer of *value*; 0 when there is none."""
    match = _INT_PREFIX.match(value)
    return int(match.group(1)) if match else 0


def _split(value: str, sep: str = ",") -> list[str]:
    return [part for part in value.split(sep) if part]


def parse_vector(value: str, error: str) -> Vec3:
    """Parse 'x,y,z'; raise ObjectFormatError carrying *error* if malformed."""
    parts = _split(value)
    if len(parts) != 3 or not all(
        is_numeric(part) and not is_out_of_int(part) for part in parts
    ):
        raise ObjectFormatError(error)
    return Vec3(*(parse_float(part) for part in parts))


def parse_normal(value: str, error: str) -> Vec3:
    """Parse a vector whose components all lie in [-1.0, 1.0]."""
    normal = parse_vector(value, error)
    if any(not -1.0 <= component <= 1.0 for component in normal):
        raise ObjectFormatError(error)
    return normal


def parse_color(value: str, error: str) -> Rgb:
    """Parse 'r,g,b' with each channel in [0, 255]."""
    parts = value.split(",")
    if len(parts) != 3 or not all(_CHANNEL.fullmatch(part) for part in parts):
        raise ObjectFormatError(error)
    channels = [int(part) for part in parts]
    if any(channel > 255 for channel in channels):
        raise ObjectFormatError(error)
    return Rgb(*channels)