"""Angle conversion, the shared random source and PPM image output."""

from __future__ import annotations

import random
from os import PathLike
from typing import Union

PI = 3.1415926535897932384626433
RAND_MAX = 2**31 - 1

_rng = random.Random()


def deg2rad(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * PI / 180


def seed(value: int) -> None:
    """Reseed the random source shared by the renderer."""
    _rng.seed(value)


def _rand() -> int:
    return _rng.randint(0, RAND_MAX)


def random01() -> float:
    """Return a random number in [0, 1]."""
    return _rand() / RAND_MAX


def random_range(low: float, high: float) -> float:
    """Return a random number starting at ``low``, spread over ``high - low + 1``."""
    return low + _rand() / (RAND_MAX / (high - low + 1) + 1)


def encode_ppm(width: int, height: int, pixels: bytes) -> bytes:
    """Encode RGB pixel data as a binary (P6) PPM image."""
    if width < 0 or height < 0:
        raise ValueError(f"invalid image size {width}x{height}")
    count = width * height * 3
    data = bytes(pixels)
    if len(data) < count:
        raise ValueError(f"expected {count} bytes of pixel data, got {len(data)}")
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    return header + data[:count]


def write_ppm(
    path: Union[str, "PathLike[str]"], width: int, height: int, pixels: bytes
) -> None:
    """Write RGB pixel data to ``path`` as a binary PPM image."""
    payload = encode_ppm(width, height, pixels)
    with open(path, "wb") as handle:
        handle.write(payload)