"""
Generic square matrices with column-major storage.

Storage is indexed ``m[column][row]``, which is the layout shaders expect for
uniform upload. Construction through ``from_values`` takes textbook row-major
order and transposes once; after that the row/column accessors hide the
storage order from the algebra:

    m = Mat2.from_values(a, b,
                         c, d)
    m.row(0)    == (a, b)
    m.column(0) == (a, c)
    m[0]        == (a, c)      # storage column

Products follow the usual convention: ``A * B`` applies B first, then A.
"""

import numbers
import warnings

import numpy as np

from ..config import get_config
from ..errors import SingularMatrixError, SingularMatrixWarning
from ..uniforms import UniformValue
from ..vectors.base import Vector, layout_key, sum_in_order


_REGISTRY = {}


def matrix_type(dtype, size):
    """Return the registered matrix class for a scalar type and dimension."""
    try:
        return _REGISTRY[(layout_key(dtype), size)]
    except KeyError:
        raise TypeError(f"No {size}x{size} matrix type for {np.dtype(dtype)}") from None


class Matrix:
    """An immutable N x N matrix. Subclasses set `size` and `dtype`."""
    __slots__ = ('_m',)

    size = None
    dtype = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.size is None or cls.dtype is None:
            return
        _REGISTRY[(layout_key(cls.dtype), cls.size)] = cls
        cls.IDENTITY = cls._from_storage(np.identity(cls.size))
        cls.ZERO = cls._from_storage(np.zeros((cls.size, cls.size)))

    def __init__(self, columns=None):
        """
        Create a matrix from column-major nested values, or the identity.

        Args:
            columns: N columns of N values each; ``columns[c][r]`` is row r of
                column c. Defaults to the identity matrix.
        """
        if columns is None:
            columns = np.identity(self.size)
        object.__setattr__(self, '_m', self._checked_storage(columns))

    @classmethod
    def _checked_storage(cls, columns):
        storage = np.array(columns, dtype=cls.dtype)
        if storage.shape != (cls.size, cls.size):
            raise ValueError(
                f"{cls.__name__} expects {cls.size}x{cls.size} values, got shape {storage.shape}"
            )
        storage.flags.writeable = False
        return storage

    @classmethod
    def _from_storage(cls, storage):
        matrix = cls.__new__(cls)
        object.__setattr__(matrix, '_m', cls._checked_storage(storage))
        return matrix

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_values(cls, *values):
        """Build from N*N values given in row-major (textbook) order."""
        if len(values) != cls.size * cls.size:
            raise ValueError(f"{cls.__name__}.from_values expects {cls.size * cls.size} values, got {len(values)}")
        return cls._from_storage(np.array(values, dtype=cls.dtype).reshape(cls.size, cls.size).T)

    @classmethod
    def from_column_major_array(cls, columns):
        return cls._from_storage(columns)

    @classmethod
    def from_row_major_array(cls, rows):
        return cls._from_storage(np.array(rows, dtype=cls.dtype).T)

    def into_column_major_array(self):
        return tuple(tuple(column) for column in self._m.tolist())

    def into_row_major_array(self):
        return tuple(tuple(row) for row in self._m.T.tolist())

    @classmethod
    def _vector_values(cls, value, count):
        values = np.asarray(value, dtype=cls.dtype)
        if values.shape != (count,):
            raise ValueError(f"Expected {count} components, got shape {values.shape}")
        return values

    # =========================================================================
    # Access
    # =========================================================================

    def row(self, pos):
        """Row `pos` in textbook order."""
        return tuple(self._m[:, pos])

    def column(self, pos):
        """Column `pos` in textbook order."""
        return tuple(self._m[pos])

    def __getitem__(self, column):
        if not isinstance(column, numbers.Integral):
            raise TypeError(f"{type(self).__name__} indices must be integers")
        return tuple(self._m[column])

    def __len__(self):
        return self.size

    def __iter__(self):
        return (tuple(column) for column in self._m)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._m, dtype=dtype)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self):
        return hash((type(self).__name__, self.into_column_major_array()))

    def __repr__(self):
        rows = ', '.join(repr(tuple(row)) for row in self._m.T.tolist())
        return f"{type(self).__name__}.from_row_major_array(({rows}))"

    def is_close(self, other, epsilon=None) -> bool:
        """Whether every entry is within `epsilon` of the other matrix's."""
        if epsilon is None:
            epsilon = get_config().epsilon
        return bool(np.allclose(self._m, np.asarray(other, dtype=self.dtype), rtol=0.0, atol=epsilon))

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _product(self, other):
        # result[x][y] = dot(self.row(y), other.column(x)), summed left to right
        products = self._m.T[np.newaxis, :, :] * other._m[:, np.newaxis, :]
        return self._from_storage(sum_in_order([products[..., k] for k in range(self.size)]))

    def _transform(self, vector):
        if len(vector) != self.size:
            raise ValueError(f"Cannot multiply {type(self).__name__} by {type(vector).__name__}")
        values = np.asarray(vector, dtype=self.dtype)
        products = self._m.T * values
        return type(vector)._from_array(sum_in_order([products[:, k] for k in range(self.size)]))

    def __mul__(self, other):
        if type(other) is type(self):
            return self._product(other)
        if isinstance(other, Vector):
            return self._transform(other)
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Number):
            return self.scale(other)
        return NotImplemented

    def __matmul__(self, other):
        if type(other) is type(self):
            return self._product(other)
        if isinstance(other, Vector):
            return self._transform(other)
        return NotImplemented

    def __truediv__(self, other):
        if type(other) is type(self):
            return self * other.inverse()
        if isinstance(other, numbers.Number):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self.scale(self.dtype(1) / self.dtype(other))
        return NotImplemented

    def __rtruediv__(self, other):
        if isinstance(other, numbers.Number):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self._from_storage(self.dtype(other) / self._m)
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, numbers.Number):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self._from_storage(np.fmod(self._m, self.dtype(other)))
        return NotImplemented

    def __rmod__(self, other):
        if isinstance(other, numbers.Number):
            with np.errstate(divide='ignore', invalid='ignore'):
                return self._from_storage(np.fmod(self.dtype(other), self._m))
        return NotImplemented

    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_storage(self._m + other._m)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_storage(self._m - other._m)

    def __neg__(self):
        return self._from_storage(-self._m)

    def scale(self, scalar):
        """Multiply every entry by a scalar."""
        return self._from_storage(self._m * self.dtype(scalar))

    def transpose(self):
        return self._from_storage(self._m.T)

    # =========================================================================
    # Determinant and inverse
    # =========================================================================

    def determinant(self):
        raise NotImplementedError

    def _inverse(self):
        raise NotImplementedError

    def inverse(self):
        """
        Invert the matrix.

        A singular matrix is handled according to the active config's
        `singular_matrix` policy: 'raise' raises SingularMatrixError, 'warn'
        issues a SingularMatrixWarning and 'ignore' stays silent. Unless an
        error is raised, the IEEE result is returned, so entries of a singular
        inverse are inf or NaN.
        """
        determinant = self.determinant()
        if determinant == 0:
            policy = get_config().singular_matrix
            if policy == 'raise':
                raise SingularMatrixError(f"{type(self).__name__} is singular and has no inverse")
            if policy == 'warn':
                warnings.warn(
                    f"Inverting singular {type(self).__name__}, entries will be inf or NaN",
                    SingularMatrixWarning,
                    stacklevel=2,
                )
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return self._inverse()

    # =========================================================================
    # Conversion
    # =========================================================================

    def astype(self, cls):
        """Convert to another matrix type, resizing if the dimensions differ."""
        if cls.size == self.size:
            return cls._from_storage(self._m)
        return self._resized(cls.size).astype(cls)

    def _resized(self, size):
        # upper-left block; extra entries come from the identity
        storage = np.identity(size, dtype=self.dtype)
        keep = min(size, self.size)
        storage[:keep, :keep] = self._m[:keep, :keep]
        return matrix_type(self.dtype, size)._from_storage(storage)

    def to_mat2(self):
        return self._resized(2)

    def to_mat3(self):
        return self._resized(3)

    def to_mat4(self):
        return self._resized(4)

    def as_uniform_value(self) -> UniformValue:
        """Column-major uniform value, ``value[column][row]``."""
        return UniformValue.from_array(self._m)
