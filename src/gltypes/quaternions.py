"""
Rotation quaternions.

A quaternion is stored as (r, i, j, k) with r the real part. Unit quaternions
represent rotations; the type does not normalise on its own, so callers that
build quaternions by hand are responsible for keeping them unit length.

Multiplication is the Hamilton product and composes rotations the same way
matrix products do: ``a * b`` applies b first, then a.
"""

import numbers

import numpy as np

from .config import get_config
from .errors import ZeroQuaternionError
from .matrices.base import matrix_type
from .uniforms import UniformValue
from .vectors.base import Vector, vector_type, sum_in_order


_FIELDS = ('r', 'i', 'j', 'k')


def _component_property(index, name):
    return property(lambda self: self._data[index], doc=f"The {name} component.")


class Quaternion:
    """Quaternion over a floating point scalar type. Subclasses set `dtype`."""
    __slots__ = ('_data',)

    dtype = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.dtype is None:
            return
        for index, name in enumerate(_FIELDS):
            setattr(cls, name, _component_property(index, name))
        cls.IDENTITY = cls._from_array((1, 0, 0, 0))
        cls.ZERO = cls._from_array((0, 0, 0, 0))

    def __init__(self, *components):
        if len(components) == 1 and isinstance(components[0], (Vector, tuple, list, np.ndarray)):
            components = tuple(components[0])
        if len(components) != 4:
            raise ValueError(f"{type(self).__name__} expects 4 components, got {len(components)}")
        data = np.array(components, dtype=self.dtype)
        data.flags.writeable = False
        object.__setattr__(self, '_data', data)

    @classmethod
    def _from_array(cls, data):
        quaternion = cls.__new__(cls)
        data = np.array(data, dtype=cls.dtype)
        data.flags.writeable = False
        object.__setattr__(quaternion, '_data', data)
        return quaternion

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls, r, i, j, k):
        return cls(r, i, j, k)

    @classmethod
    def from_axis_rotation(cls, angle, axis):
        """
        Rotation of `angle` radians around `axis`.

        The axis is used as given; pass a unit vector for a unit quaternion.
        """
        half = cls.dtype(angle) / cls.dtype(2)
        sin = np.sin(half)
        x, y, z = np.asarray(axis, dtype=cls.dtype)
        return cls._from_array((np.cos(half), sin * x, sin * y, sin * z))

    @classmethod
    def from_x_rotation(cls, angle):
        return cls.from_axis_rotation(angle, (1, 0, 0))

    @classmethod
    def from_y_rotation(cls, angle):
        return cls.from_axis_rotation(angle, (0, 1, 0))

    @classmethod
    def from_z_rotation(cls, angle):
        return cls.from_axis_rotation(angle, (0, 0, 1))

    @classmethod
    def from_vec4(cls, vector):
        """Build from a 4-component vector laid out as (r, i, j, k)."""
        return cls._from_array(np.asarray(vector, dtype=cls.dtype))

    @classmethod
    def from_rotation_matrix(cls, matrix):
        """
        Recover the unit quaternion of a rotation matrix.

        Accepts any 3x3 or 4x4 matrix type; only the upper-left 3x3 block is
        read. The branch with the largest divisor is used to stay stable near
        180 degree rotations. Of the two quaternions for a rotation (q and -q)
        the one with a non-negative real part is returned when the trace is
        positive.
        """
        mat = np.asarray(matrix, dtype=cls.dtype).T[:3, :3]
        one = cls.dtype(1)
        quarter = cls.dtype(0.25)
        trace = mat[0, 0] + mat[1, 1] + mat[2, 2]
        if trace > 0:
            s = np.sqrt(trace + one) * 2
            r = quarter * s
            i = (mat[2, 1] - mat[1, 2]) / s
            j = (mat[0, 2] - mat[2, 0]) / s
            k = (mat[1, 0] - mat[0, 1]) / s
        else:
            largest = int(np.argmax(np.diag(mat)))
            if largest == 0:
                s = np.sqrt(one + mat[0, 0] - mat[1, 1] - mat[2, 2]) * 2
                r = (mat[2, 1] - mat[1, 2]) / s
                i = quarter * s
                j = (mat[0, 1] + mat[1, 0]) / s
                k = (mat[0, 2] + mat[2, 0]) / s
            elif largest == 1:
                s = np.sqrt(one + mat[1, 1] - mat[0, 0] - mat[2, 2]) * 2
                r = (mat[0, 2] - mat[2, 0]) / s
                i = (mat[0, 1] + mat[1, 0]) / s
                j = quarter * s
                k = (mat[1, 2] + mat[2, 1]) / s
            else:
                s = np.sqrt(one + mat[2, 2] - mat[0, 0] - mat[1, 1]) * 2
                r = (mat[1, 0] - mat[0, 1]) / s
                i = (mat[0, 2] + mat[2, 0]) / s
                j = (mat[1, 2] + mat[2, 1]) / s
                k = quarter * s
        return cls._from_array((r, i, j, k)).normalise()

    # =========================================================================
    # Protocols
    # =========================================================================

    def __len__(self):
        return 4

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        return self._data[index]

    def __array__(self, dtype=None, copy=None):
        return np.array(self._data, dtype=dtype)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self):
        return hash((type(self).__name__, self.to_tuple()))

    def __repr__(self):
        r, i, j, k = self._data.tolist()
        return f"{type(self).__name__}(r={r!r}, i={i!r}, j={j!r}, k={k!r})"

    def to_tuple(self):
        return tuple(self._data.tolist())

    def is_close(self, other, epsilon=None) -> bool:
        if epsilon is None:
            epsilon = get_config().epsilon
        return bool(np.allclose(self._data, np.asarray(other, dtype=self.dtype), rtol=0.0, atol=epsilon))

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __mul__(self, other):
        if type(other) is type(self):
            ar, ai, aj, ak = self._data
            br, bi, bj, bk = other._data
            return self._from_array((
                ar * br - ai * bi - aj * bj - ak * bk,
                ar * bi + ai * br + aj * bk - ak * bj,
                ar * bj - ai * bk + aj * br + ak * bi,
                ar * bk + ai * bj - aj * bi + ak * br,
            ))
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other):
        if type(other) is type(self):
            return self * other.inverse()
        if isinstance(other, numbers.Number):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self.scale(self.dtype(1) / self.dtype(other))
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, numbers.Number):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self._from_array(np.fmod(self._data, self.dtype(other)))
        return NotImplemented

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_array(self._data + other._data)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_array(self._data - other._data)

    def __neg__(self):
        return self._from_array(-self._data)

    def scale(self, scalar):
        return self._from_array(self._data * self.dtype(scalar))

    def dot(self, other):
        return sum_in_order(self._data * other._data)

    def length_squared(self):
        return sum_in_order(self._data * self._data)

    def length(self):
        return np.sqrt(self.length_squared())

    def conjugate(self):
        r, i, j, k = self._data
        return self._from_array((r, -i, -j, -k))

    def _require_nonzero(self, operation):
        if not self._data.any():
            raise ZeroQuaternionError(f"Cannot {operation} the zero quaternion")

    def normalise(self):
        """Scale to unit length. The zero quaternion raises ZeroQuaternionError."""
        self._require_nonzero('normalise')
        return self.scale(self.dtype(1) / self.length())

    def inverse(self):
        """
        Multiplicative inverse, the conjugate divided by the squared norm.

        The zero quaternion has no inverse and no rotational meaning, so it
        raises ZeroQuaternionError instead of producing NaNs.
        """
        self._require_nonzero('invert')
        r, i, j, k = self._data
        norm_squared = self.length_squared()
        return self._from_array((r / norm_squared, -i / norm_squared, -j / norm_squared, -k / norm_squared))

    # =========================================================================
    # Rotation
    # =========================================================================

    def to_mat3(self):
        """3x3 rotation matrix. Non-unit quaternions give an implicitly scaled matrix."""
        return matrix_type(self.dtype, 3).from_rot(self)

    def to_mat4(self):
        return matrix_type(self.dtype, 4).from_rot(self)

    def rotate(self, vector):
        """Rotate a 3-component vector, returning the same vector type."""
        return self.to_mat3() * vector

    def to_axis_angle(self):
        """
        Return ``(angle, axis)`` for a unit quaternion.

        The angle is in radians in [0, 2*pi]. The identity rotation has no
        defined axis and reports the x axis.
        """
        r, i, j, k = self._data
        axis_type = vector_type(self.dtype, 3)
        norm = np.sqrt(i * i + j * j + k * k)
        angle = self.dtype(2) * np.arctan2(norm, r)
        if norm == 0:
            return angle, axis_type.X
        return angle, axis_type._from_array((i / norm, j / norm, k / norm))

    # =========================================================================
    # Conversion
    # =========================================================================

    def astype(self, cls):
        return cls._from_array(self._data)

    def to_vec4(self):
        """The components as a 4-component vector (r, i, j, k)."""
        return vector_type(self.dtype, 4)._from_array(self._data)

    def as_uniform_value(self) -> UniformValue:
        """Quaternions upload as 4-component vectors (r, i, j, k)."""
        return UniformValue.from_array(self._data)


class Quat(Quaternion):
    """Single precision quaternion."""
    __slots__ = ()
    dtype = np.float32


class DQuat(Quaternion):
    """Double precision quaternion."""
    __slots__ = ()
    dtype = np.float64
