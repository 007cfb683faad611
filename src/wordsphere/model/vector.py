"""
Vector math for the sphere.
Axis-angle rotation without any graphics-API dependency.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector3:
    """
    An immutable vector in 3D space.
    """
    x: float
    y: float
    z: float

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector3:
        mag = self.magnitude
        if mag == 0.0: return Vector3(0.0, 0.0, 0.0)
        return self * (1.0 / mag)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def apply_axis_angle(self, axis: Vector3, angle_rad: float) -> Vector3:
        """
        Rotate this vector by `angle_rad` about `axis` (right-handed).

        Uses Rodrigues' rotation formula:
            v' = v cos(a) + (k x v) sin(a) + k (k . v)(1 - cos(a))
        where k is the normalized axis.
        """
        k = axis.normalize()
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return (
            self * cos_a
            + k.cross(self) * sin_a
            + k * (k.dot(self) * (1.0 - cos_a))
        )

    def rotate_y(self, angle_rad: float) -> Vector3:
        """Rotate vector around the vertical (Y) axis."""
        return self.apply_axis_angle(Y_AXIS, angle_rad)

    def rotate_x(self, angle_rad: float) -> Vector3:
        """Rotate vector around the horizontal (X) axis."""
        return self.apply_axis_angle(X_AXIS, angle_rad)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, arr: npt.ArrayLike) -> Vector3:
        x, y, z = np.asarray(arr, dtype=np.float64)
        return cls(float(x), float(y), float(z))


ORIGIN = Vector3(0.0, 0.0, 0.0)
X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
