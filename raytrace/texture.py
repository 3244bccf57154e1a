"""Textures read from binary (P6) PPM images."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import List, NamedTuple, Optional, Union

_WHITESPACE = b" \t\n\v\f\r"


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


class TextureError(ValueError):
    """Raised when a texture image cannot be decoded."""


@dataclass
class Texture:
    """An RGB image stored row by row."""

    width: int = 0
    height: int = 0
    pixels: List[Pixel] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


class _Scanner:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    def _peek(self) -> Optional[int]:
        return self.data[self.pos] if self.pos < len(self.data) else None

    def skip_whitespace(self) -> None:
        while (c := self._peek()) is not None and c in _WHITESPACE:
            self.pos += 1

    def skip_whitespace_and_comments(self) -> None:
        while (c := self._peek()) is not None:
            if c in _WHITESPACE:
                self.pos += 1
            elif c == ord("#"):
                end = self.data.find(b"\n", self.pos)
                self.pos = len(self.data) if end < 0 else end + 1
            else:
                break

    def token(self, limit: int) -> bytes:
        self.skip_whitespace()
        start = self.pos
        while (
            self.pos - start < limit
            and (c := self._peek()) is not None
            and c not in _WHITESPACE
        ):
            self.pos += 1
        return self.data[start:self.pos]

    def integer(self) -> int:
        """Read a decimal integer; yields 0 if none is present."""
        self.skip_whitespace()
        start = self.pos
        if self._peek() in (ord("+"), ord("-")):
            self.pos += 1
        digits_start = self.pos
        while (c := self._peek()) is not None and ord("0") <= c <= ord("9"):
            self.pos += 1
        if self.pos == digits_start:
            self.pos = start
            return 0
        return int(self.data[start:self.pos])

    def byte(self) -> None:
        if self.pos < len(self.data):
            self.pos += 1

    def rest(self, count: int) -> bytes:
        chunk = self.data[self.pos:self.pos + count]
        self.pos += len(chunk)
        return chunk


def parse_ppm(data: bytes) -> Texture:
    """Decode a binary PPM image with a maximum colour value of 255."""
    scanner = _Scanner(bytes(data))
    magic = scanner.token(2)
    if not magic:
        raise TextureError("failed to read magic number")
    if magic != b"P6":
        shown = magic.decode("latin-1")
        raise TextureError(f"Unsupported format or failed to read magic number: got '{shown}'")

    scanner.skip_whitespace_and_comments()
    width = scanner.integer()
    scanner.skip_whitespace_and_comments()
    height = scanner.integer()
    scanner.skip_whitespace_and_comments()
    max_color = scanner.integer()

    if max_color != 255:
        raise TextureError(f"Only max color 255 supported (got {max_color})")
    if width < 0 or height < 0:
        raise TextureError(f"invalid image size {width}x{height}")

    scanner.byte()
    expected = width * height
    raw = scanner.rest(expected * 3)
    if len(raw) != expected * 3:
        raise TextureError(
            f"Failed to read all pixel data (expected {expected}, got {len(raw) // 3})"
        )
    channels = iter(raw)
    pixels = [Pixel(r, g, b) for r, g, b in zip(channels, channels, channels)]
    return Texture(width, height, pixels)


def load_texture(path: Union[str, "PathLike[str]"]) -> Texture:
    """Read a texture from a binary PPM file."""
    with open(path, "rb") as handle:
        return parse_ppm(handle.read())