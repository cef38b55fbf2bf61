"""Vectors in three-dimensional space."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector3D:
    """An immutable vector with three real components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def scale(self, factor: float) -> Vector3D:
        """Return the vector with every component multiplied by ``factor``."""
        return Vector3D(self.x * factor, self.y * factor, self.z * factor)

    def normalize(self) -> Vector3D:
        """Return a vector of length one pointing the same way."""
        length = self.magnitude()
        if length == 0:
            raise ValueError("cannot normalize a zero vector")
        return self.scale(1 / length)

    def dot(self, other: Vector3D) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Return the cross product with ``other``."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def format(self) -> str:
        """Return the printable form: a header and one component per line."""
        body = "".join(f"{component:g}\n" for component in self)
        return "--- 3 Dimensional Vector ---\n" + body

    def __add__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))