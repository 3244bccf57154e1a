"""Camera description and 4x4 matrix helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from .vectors import Vec3


@dataclass
class Camera:
    """A pinhole camera; ``fov`` is the vertical field of view in degrees."""

    fov: float
    position: Vec3
    target: Vec3
    up: Vec3
    near: float
    far: float
    aspect_ratio: float

    def cam_to_world(self) -> List[float]:
        """Return the camera-to-world matrix as 16 row-major numbers."""
        f = (self.target - self.position).normalized()
        u = self.up.normalized()
        s = f.cross(u).normalized()
        u = s.cross(f)
        pos = self.position
        return [
            s.x, s.y, s.z, -s.dot(pos),
            u.x, u.y, u.z, -u.dot(pos),
            -f.x, -f.y, -f.z, f.dot(pos),
            0.0, 0.0, 0.0, 1.0,
        ]


def _order(matrix: Sequence[float]) -> int:
    n = math.isqrt(len(matrix))
    if n == 0 or n * n != len(matrix):
        raise ValueError(f"not a square matrix: {len(matrix)} elements")
    return n


def cofactor(matrix: Sequence[float], p: int, q: int, n: int) -> List[float]:
    """Return the n-1 square minor of ``matrix`` without row p and column q."""
    return [
        matrix[row * n + col]
        for row in range(n)
        if row != p
        for col in range(n)
        if col != q
    ]


def determinant(matrix: Sequence[float]) -> float:
    """Determinant of a square row-major matrix, by expansion along the first row."""
    n = _order(matrix)
    if n == 1:
        return matrix[0]
    return sum(
        (-1) ** q * matrix[q] * determinant(cofactor(matrix, 0, q, n))
        for q in range(n)
        if matrix[q] != 0
    )


def adjugate(matrix: Sequence[float]) -> List[float]:
    """Adjugate (transposed cofactor matrix) of a square row-major matrix."""
    n = _order(matrix)
    if n == 1:
        return [1.0]
    return [
        (-1) ** (row + col) * determinant(cofactor(matrix, col, row, n))
        for row in range(n)
        for col in range(n)
    ]


def inverse(matrix: Sequence[float]) -> List[float]:
    """Inverse of a square row-major matrix; raises ValueError if singular."""
    det = determinant(matrix)
    if det == 0:
        raise ValueError("Matrix is not invertible.")
    return [value / det for value in adjugate(matrix)]