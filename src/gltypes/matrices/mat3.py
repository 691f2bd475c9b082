"""
3x3 matrices.

Besides the general algebra these build 3D rotation/scale blocks from
quaternions and homogeneous 2D transforms (position, scale, angle).
"""

import numpy as np

from .base import Matrix
from ..transforms import rotation_values, rotation_scale_values


class Matrix3(Matrix):
    __slots__ = ()
    size = 3

    @classmethod
    def from_scale(cls, scale):
        sx, sy, sz = cls._vector_values(scale, 3)
        return cls.from_values(
            sx, 0, 0,
            0, sy, 0,
            0, 0, sz,
        )

    @classmethod
    def from_rot(cls, rot):
        """Rotation matrix of a quaternion (r, i, j, k)."""
        return cls.from_values(*rotation_values(rot, cls.dtype))

    @classmethod
    def from_transform(cls, scale, rot):
        """Rotation applied after scale."""
        return cls.from_values(*rotation_scale_values(scale, rot, cls.dtype))

    @classmethod
    def from_2d_transform(cls, pos, scale, angle):
        """Homogeneous 2D transform: scale, then rotate by `angle`, then translate."""
        px, py = cls._vector_values(pos, 2)
        sx, sy = cls._vector_values(scale, 2)
        angle = cls.dtype(angle)
        cos, sin = np.cos(angle), np.sin(angle)
        return cls.from_values(
            sx * cos, sy * -sin, px,
            sx * sin, sy * cos, py,
            0, 0, 1,
        )

    def _entries(self):
        # textbook order, a b c / d e f / g h i
        return self._m.T.ravel()

    def determinant(self):
        a, b, c, d, e, f, g, h, i = self._entries()
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def _inverse(self):
        a, b, c, d, e, f, g, h, i = self._entries()
        cofactor_a = e * i - f * h
        cofactor_b = -(d * i - f * g)
        cofactor_c = d * h - e * g
        determinant = a * cofactor_a + b * cofactor_b + c * cofactor_c
        return type(self).from_values(
            cofactor_a, -(b * i - c * h), b * f - c * e,
            cofactor_b, a * i - c * g, -(a * f - c * d),
            cofactor_c, -(a * h - b * g), a * e - b * d,
        ).scale(self.dtype(1) / determinant)


class Mat3(Matrix3):
    """Single precision 3x3 matrix."""
    __slots__ = ()
    dtype = np.float32


class DMat3(Matrix3):
    """Double precision 3x3 matrix."""
    __slots__ = ()
    dtype = np.float64
