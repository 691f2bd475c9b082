"""
4x4 matrices: homogeneous 3D transforms.

The determinant and inverse use a 2x2 minor decomposition. With ``a`` the
column-major storage, six ``s`` minors come from storage rows 0-1 and six ``c``
minors from storage rows 2-3; the determinant is

    s0*c5 - s1*c4 + s2*c3 + s3*c2 - s4*c1 + s5*c0

and every inverse entry reuses the same twelve minors.
"""

import numpy as np

from .base import Matrix
from ..transforms import rotation_values, rotation_scale_values, transform_values, inverse_transform_values


def _minors(a):
    s0 = a[0][0] * a[1][1] - a[1][0] * a[0][1]
    s1 = a[0][0] * a[1][2] - a[1][0] * a[0][2]
    s2 = a[0][0] * a[1][3] - a[1][0] * a[0][3]
    s3 = a[0][1] * a[1][2] - a[1][1] * a[0][2]
    s4 = a[0][1] * a[1][3] - a[1][1] * a[0][3]
    s5 = a[0][2] * a[1][3] - a[1][2] * a[0][3]

    c5 = a[2][2] * a[3][3] - a[3][2] * a[2][3]
    c4 = a[2][1] * a[3][3] - a[3][1] * a[2][3]
    c3 = a[2][1] * a[3][2] - a[3][1] * a[2][2]
    c2 = a[2][0] * a[3][3] - a[3][0] * a[2][3]
    c1 = a[2][0] * a[3][2] - a[3][0] * a[2][2]
    c0 = a[2][0] * a[3][1] - a[3][0] * a[2][1]
    return (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5)


class Matrix4(Matrix):
    __slots__ = ()
    size = 4

    # =========================================================================
    # Elementary transforms
    # =========================================================================

    @classmethod
    def from_scale(cls, scale):
        sx, sy, sz = cls._vector_values(scale, 3)
        return cls.from_values(
            sx, 0, 0, 0,
            0, sy, 0, 0,
            0, 0, sz, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def from_pos(cls, pos):
        """Translation by `pos`."""
        px, py, pz = cls._vector_values(pos, 3)
        return cls.from_values(
            1, 0, 0, px,
            0, 1, 0, py,
            0, 0, 1, pz,
            0, 0, 0, 1,
        )

    @classmethod
    def from_rot(cls, rot):
        """Rotation by the quaternion `rot`."""
        a, b, c, d, e, f, g, h, i = rotation_values(rot, cls.dtype)
        return cls.from_values(
            a, b, c, 0,
            d, e, f, 0,
            g, h, i, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def from_scale_and_rot(cls, scale, rot):
        a, b, c, d, e, f, g, h, i = rotation_scale_values(scale, rot, cls.dtype)
        return cls.from_values(
            a, b, c, 0,
            d, e, f, 0,
            g, h, i, 0,
            0, 0, 0, 1,
        )

    @classmethod
    def from_pos_and_rot(cls, pos, rot):
        px, py, pz = cls._vector_values(pos, 3)
        a, b, c, d, e, f, g, h, i = rotation_values(rot, cls.dtype)
        return cls.from_values(
            a, b, c, px,
            d, e, f, py,
            g, h, i, pz,
            0, 0, 0, 1,
        )

    @classmethod
    def from_pos_and_scale(cls, pos, scale):
        px, py, pz = cls._vector_values(pos, 3)
        sx, sy, sz = cls._vector_values(scale, 3)
        return cls.from_values(
            sx, 0, 0, px,
            0, sy, 0, py,
            0, 0, sz, pz,
            0, 0, 0, 1,
        )

    @classmethod
    def from_transform(cls, pos, scale, rot):
        """
        Scale, then rotate, then translate.

        Equivalent to ``from_pos(pos) * from_rot(rot) * from_scale(scale)``
        without the two matrix products.
        """
        return cls.from_values(*transform_values(pos, scale, rot, cls.dtype))

    @classmethod
    def from_inverse_transform(cls, pos, scale, rot):
        """
        Inverse of ``from_transform(pos, scale, rot)`` in closed form.

        This is the view matrix of a camera placed with that transform.
        """
        return cls.from_values(*inverse_transform_values(pos, scale, rot, cls.dtype))

    def position(self):
        """Translation part as an (x, y, z) tuple."""
        return tuple(self._m[3][:3])

    # =========================================================================
    # Determinant and inverse
    # =========================================================================

    def determinant(self):
        (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5) = _minors(self._m)
        return s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0

    def _inverse(self):
        a = self._m
        (s0, s1, s2, s3, s4, s5), (c0, c1, c2, c3, c4, c5) = _minors(a)
        invdet = self.dtype(1) / (s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0)

        b = (
            (
                a[1][1] * c5 - a[1][2] * c4 + a[1][3] * c3,
                -a[0][1] * c5 + a[0][2] * c4 - a[0][3] * c3,
                a[3][1] * s5 - a[3][2] * s4 + a[3][3] * s3,
                -a[2][1] * s5 + a[2][2] * s4 - a[2][3] * s3,
            ),
            (
                -a[1][0] * c5 + a[1][2] * c2 - a[1][3] * c1,
                a[0][0] * c5 - a[0][2] * c2 + a[0][3] * c1,
                -a[3][0] * s5 + a[3][2] * s2 - a[3][3] * s1,
                a[2][0] * s5 - a[2][2] * s2 + a[2][3] * s1,
            ),
            (
                a[1][0] * c4 - a[1][1] * c2 + a[1][3] * c0,
                -a[0][0] * c4 + a[0][1] * c2 - a[0][3] * c0,
                a[3][0] * s4 - a[3][1] * s2 + a[3][3] * s0,
                -a[2][0] * s4 + a[2][1] * s2 - a[2][3] * s0,
            ),
            (
                -a[1][0] * c3 + a[1][1] * c1 - a[1][2] * c0,
                a[0][0] * c3 - a[0][1] * c1 + a[0][2] * c0,
                -a[3][0] * s3 + a[3][1] * s1 - a[3][2] * s0,
                a[2][0] * s3 - a[2][1] * s1 + a[2][2] * s0,
            ),
        )
        return self._from_storage(np.array(b, dtype=self.dtype) * invdet)


class Mat4(Matrix4):
    """Single precision 4x4 matrix."""
    __slots__ = ()
    dtype = np.float32


class DMat4(Matrix4):
    """Double precision 4x4 matrix."""
    __slots__ = ()
    dtype = np.float64
