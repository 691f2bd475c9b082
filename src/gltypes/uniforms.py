"""
Uniform conversion for gltypes values.

Every vector, matrix and quaternion converts into a UniformValue that a
rendering backend can upload without knowing anything about gltypes:

    Vectors:     flat tuple, one entry per component
    Matrices:    column-major nested tuple, value[column][row]
    Quaternions: 4-component vector (r, i, j, k)

Binary layout (to_bytes):
    Little-endian scalars of the slot's type, columns written one after
    another for matrices. A float mat4 is therefore 64 bytes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Any

import numpy as np


class UniformKind(Enum):
    """Uniform slot kinds, keyed by (scalar layout, shape)."""
    FLOAT_VEC2 = ('f4', (2,))
    FLOAT_VEC3 = ('f4', (3,))
    FLOAT_VEC4 = ('f4', (4,))
    DOUBLE_VEC2 = ('f8', (2,))
    DOUBLE_VEC3 = ('f8', (3,))
    DOUBLE_VEC4 = ('f8', (4,))
    INT_VEC2 = ('i4', (2,))
    INT_VEC3 = ('i4', (3,))
    INT_VEC4 = ('i4', (4,))
    UNSIGNED_INT_VEC2 = ('u4', (2,))
    UNSIGNED_INT_VEC3 = ('u4', (3,))
    UNSIGNED_INT_VEC4 = ('u4', (4,))
    INT64_VEC2 = ('i8', (2,))
    INT64_VEC3 = ('i8', (3,))
    INT64_VEC4 = ('i8', (4,))
    UNSIGNED_INT64_VEC2 = ('u8', (2,))
    UNSIGNED_INT64_VEC3 = ('u8', (3,))
    UNSIGNED_INT64_VEC4 = ('u8', (4,))
    BOOL_VEC2 = ('b1', (2,))
    BOOL_VEC3 = ('b1', (3,))
    BOOL_VEC4 = ('b1', (4,))
    FLOAT_MAT2 = ('f4', (2, 2))
    FLOAT_MAT3 = ('f4', (3, 3))
    FLOAT_MAT4 = ('f4', (4, 4))
    DOUBLE_MAT2 = ('f8', (2, 2))
    DOUBLE_MAT3 = ('f8', (3, 3))
    DOUBLE_MAT4 = ('f8', (4, 4))

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value[0])

    @property
    def shape(self) -> Tuple[int, ...]:
        return self.value[1]

    @property
    def is_matrix(self) -> bool:
        return len(self.shape) == 2

    @classmethod
    def for_array(cls, array: np.ndarray) -> 'UniformKind':
        """Look up the slot kind for an array's scalar type and shape."""
        dtype = np.dtype(array.dtype)
        key = (f"{dtype.kind}{dtype.itemsize}", tuple(array.shape))
        try:
            return _KINDS_BY_LAYOUT[key]
        except KeyError:
            raise TypeError(f"No uniform slot for dtype {dtype} with shape {array.shape}") from None


_KINDS_BY_LAYOUT = {kind.value: kind for kind in UniformKind}


@dataclass(frozen=True)
class UniformValue:
    """
    A value ready for upload to a shader uniform.

    Attributes:
        kind: The uniform slot kind.
        value: Flat tuple for vectors, column-major nested tuple for matrices.
    """
    kind: UniformKind
    value: Tuple[Any, ...]

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'UniformValue':
        """Build from a component array (column-major for matrices)."""
        return cls(UniformKind.for_array(array), _to_nested_tuple(array))

    def to_array(self) -> np.ndarray:
        """Return the value as a numpy array of the slot's scalar type."""
        return np.array(self.value, dtype=self.kind.dtype)

    def to_bytes(self) -> bytes:
        """Pack the value little-endian, column after column for matrices."""
        return self.to_array().astype(self.kind.dtype.newbyteorder('<')).tobytes()


def _to_nested_tuple(array: np.ndarray):
    items = array.tolist()
    if array.ndim == 1:
        return tuple(items)
    return tuple(tuple(column) for column in items)


def as_uniform_value(value) -> UniformValue:
    """Convert any gltypes vector, matrix or quaternion into a UniformValue."""
    try:
        convert = value.as_uniform_value
    except AttributeError:
        raise TypeError(f"{type(value).__name__} has no uniform representation") from None
    return convert()
