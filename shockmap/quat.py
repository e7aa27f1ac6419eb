"""Quaternion and 3D vector maths used for motion processing."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion, identity by default."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def angle_axis(cls, angle: float, x: float, y: float, z: float) -> Quat:
        """Build a rotation of ``angle`` radians around the axis (x, y, z)."""
        return cls(math.cos(angle * 0.5), x, y, z).normalized()

    def __mul__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(
            self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
            self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
            self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
        )

    def normalized(self) -> Quat:
        """Rescale the vector part so the quaternion has unit length.

        The scalar part is kept; a degenerate quaternion becomes the identity.
        """
        length = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        target = 1.0 - self.w * self.w
        if target <= 0.0 or length <= 0.0:
            return Quat()
        factor = math.sqrt(target) / length
        return Quat(self.w, self.x * factor, self.y * factor, self.z * factor)

    def inverse(self) -> Quat:
        """The conjugate, which is the inverse of a unit quaternion."""
        return Quat(self.w, -self.x, -self.y, -self.z)


@dataclass(frozen=True)
class Vec:
    """A three dimensional vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vec:
        """Unit vector in the same direction; the zero vector is returned as is."""
        length = self.length()
        if length == 0.0:
            return self
        factor = 1.0 / length
        return Vec(self.x * factor, self.y * factor, self.z * factor)

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: float | Quat) -> Vec:
        """Scale by a number, or rotate by a quaternion."""
        if isinstance(other, Quat):
            return self.rotated(other)
        if isinstance(other, (int, float)):
            return Vec(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __truediv__(self, other: float) -> Vec:
        if not isinstance(other, (int, float)):
            return NotImplemented
        return Vec(self.x / other, self.y / other, self.z / other)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec) -> Vec:
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def rotated(self, rotation: Quat) -> Vec:
        """Rotate this vector by ``rotation``."""
        result = rotation * Quat(0.0, self.x, self.y, self.z) * rotation.inverse()
        return Vec(result.x, result.y, result.z)