"""2x2 matrices: 2D rotation and scale."""

import numpy as np

from .base import Matrix


class Matrix2(Matrix):
    __slots__ = ()
    size = 2

    @classmethod
    def from_scale(cls, scale):
        sx, sy = cls._vector_values(scale, 2)
        return cls.from_values(
            sx, 0,
            0, sy,
        )

    @classmethod
    def from_rot(cls, angle):
        """Counter-clockwise rotation by `angle` radians."""
        angle = cls.dtype(angle)
        cos, sin = np.cos(angle), np.sin(angle)
        return cls.from_values(
            cos, -sin,
            sin, cos,
        )

    @classmethod
    def from_transform(cls, scale, angle):
        """Rotation applied after scale, without a matrix product."""
        sx, sy = cls._vector_values(scale, 2)
        angle = cls.dtype(angle)
        cos, sin = np.cos(angle), np.sin(angle)
        return cls.from_values(
            cos * sx, -sin * sy,
            sin * sx, cos * sy,
        )

    def determinant(self):
        (a, c), (b, d) = self._m
        return a * d - b * c

    def _inverse(self):
        (a, c), (b, d) = self._m
        determinant = a * d - b * c
        return type(self).from_values(
            d, -b,
            -c, a,
        ).scale(self.dtype(1) / determinant)


class Mat2(Matrix2):
    """Single precision 2x2 matrix."""
    __slots__ = ()
    dtype = np.float32


class DMat2(Matrix2):
    """Double precision 2x2 matrix."""
    __slots__ = ()
    dtype = np.float64
