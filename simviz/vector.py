"""Small immutable 3D vector type and the default transform directions."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Vec3:
    """A point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def with_y(self, y: float) -> Vec3:
        """Return a copy with the y component replaced."""
        return replace(self, y=y)

    def to_list(self) -> list[float]:
        """Return the components as ``[x, y, z]``."""
        return [self.x, self.y, self.z]


def forward() -> Vec3:
    """Forward direction of an identity transform (negative Z)."""
    return Vec3(0.0, 0.0, -1.0)


def right() -> Vec3:
    """Right direction of an identity transform (positive X)."""
    return Vec3(1.0, 0.0, 0.0)


def up() -> Vec3:
    """Up direction of an identity transform (positive Y)."""
    return Vec3(0.0, 1.0, 0.0)