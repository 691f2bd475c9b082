"""
Generic fixed-size vectors backed by numpy scalar types.

Concrete vector types (Vec3, IVec2, BVec4, ...) are small subclasses that only
declare their component names and scalar type. Everything else is shared:

    Vector          storage, indexing, equality, conversion, uniforms
    NumericVector   arithmetic, dot, comparisons returning boolean vectors
    FloatVector     length, distance, normalise
    BoolVector      componentwise logic

Components live in a read-only numpy array of the declared scalar type, so a
float32 vector rounds to single precision after every operation and unsigned
vectors wrap like GPU uints.
"""

import numbers

import numpy as np

from ..config import get_config
from ..uniforms import UniformValue


# (scalar layout, component count) -> vector class, filled in by __init_subclass__
_REGISTRY = {}


def layout_key(dtype) -> str:
    """Short scalar layout code for a numpy type ('f4', 'u8', 'b1', ...)."""
    dtype = np.dtype(dtype)
    return f"{dtype.kind}{dtype.itemsize}"


def vector_type(dtype, size):
    """Return the registered vector class for a scalar type and component count."""
    try:
        return _REGISTRY[(layout_key(dtype), size)]
    except KeyError:
        raise TypeError(f"No {size}-component vector type for {np.dtype(dtype)}") from None


def sum_in_order(values):
    """Left-to-right sum, so rounding matches a hand-written a + b + c + d."""
    total = values[0]
    for value in values[1:]:
        total = total + value
    return total


def _is_sequence(value) -> bool:
    return isinstance(value, (Vector, tuple, list, np.ndarray))


def _component_property(index, name):
    return property(lambda self: self._data[index], doc=f"The {name} component.")


class Vector:
    """An immutable, fixed-size tuple of scalars."""
    __slots__ = ('_data',)

    dtype = None
    fields = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.dtype is None or not cls.fields:
            return
        for index, name in enumerate(cls.fields):
            setattr(cls, name, _component_property(index, name))
        _REGISTRY[(layout_key(cls.dtype), len(cls.fields))] = cls
        cls._install_constants()

    @classmethod
    def _install_constants(cls):
        pass

    def __init__(self, *components):
        if len(components) == 1 and _is_sequence(components[0]):
            components = tuple(components[0])
        if len(components) != len(self.fields):
            raise ValueError(
                f"{type(self).__name__} expects {len(self.fields)} components, got {len(components)}"
            )
        data = np.array(components, dtype=self.dtype)
        data.flags.writeable = False
        object.__setattr__(self, '_data', data)

    @classmethod
    def _from_array(cls, data):
        vector = cls.__new__(cls)
        data = np.array(data, dtype=cls.dtype)
        data.flags.writeable = False
        object.__setattr__(vector, '_data', data)
        return vector

    @classmethod
    def new(cls, *components):
        return cls(*components)

    @classmethod
    def splat(cls, value):
        """Create a vector with every component equal to `value`."""
        return cls._from_array(np.full(len(cls.fields), value, dtype=cls.dtype))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self):
        return len(self.fields)

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index):
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"{type(self).__name__} indices must be integers")
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
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._data.tolist())})"

    def to_tuple(self):
        return tuple(self._data.tolist())

    def to_list(self):
        return self._data.tolist()

    # -------------------------------------------------------------------------
    # Dimensionality and type conversion
    # -------------------------------------------------------------------------

    def _sibling(self, size):
        return vector_type(self.dtype, size)

    def extend(self, value):
        """Append one component, returning the next larger vector type."""
        cls = self._sibling(len(self) + 1)
        return cls._from_array(np.append(self._data, np.array(value, dtype=self.dtype)))

    def truncate(self):
        """Drop the last component. Two-component vectors return their x scalar."""
        if len(self) == 2:
            return self._data[0]
        return self._sibling(len(self) - 1)._from_array(self._data[:-1])

    def astype(self, cls):
        """Convert to another vector type with the same number of components."""
        if len(cls.fields) != len(self):
            raise ValueError(f"Cannot convert {type(self).__name__} to {cls.__name__}")
        return cls._from_array(self._data)

    def as_uniform_value(self) -> UniformValue:
        return UniformValue.from_array(self._data)


class NumericVector(Vector):
    """Vector over a numeric scalar type."""
    __slots__ = ()

    @classmethod
    def _install_constants(cls):
        cls.ZERO = cls.splat(0)
        cls.ONE = cls.splat(1)
        for index, name in enumerate(cls.fields):
            axis = np.zeros(len(cls.fields), dtype=cls.dtype)
            axis[index] = 1
            setattr(cls, name.upper(), cls._from_array(axis))

    @property
    def is_unsigned(self):
        return np.dtype(self.dtype).kind == 'u'

    @property
    def is_integer(self):
        return np.dtype(self.dtype).kind in 'iu'

    def _operand(self, other):
        """
        Unwrap the right-hand side of a componentwise operation.

        Integer vectors only take integral operands; a fractional scalar or
        float sequence gives None rather than being truncated.
        """
        if type(other) is type(self):
            return other._data
        if isinstance(other, numbers.Number):
            if self.is_integer and not isinstance(other, numbers.Integral):
                return None
            return other
        if isinstance(other, (tuple, list, np.ndarray)) and len(other) == len(self):
            values = np.asarray(other)
            if self.is_integer and values.dtype.kind not in 'iub':
                return None
            return np.array(values, dtype=self.dtype)
        return None

    def _binary(self, other, operation, reflected=False):
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        if reflected:
            lhs = np.broadcast_to(np.asarray(rhs, dtype=self.dtype), self._data.shape)
            return self._from_array(operation(lhs, self._data))
        return self._from_array(operation(self._data, rhs))

    def __add__(self, other):
        return self._binary(other, np.add)

    def __radd__(self, other):
        return self._binary(other, np.add, reflected=True)

    def __sub__(self, other):
        return self._binary(other, np.subtract)

    def __rsub__(self, other):
        return self._binary(other, np.subtract, reflected=True)

    def __mul__(self, other):
        return self._binary(other, np.multiply)

    def __rmul__(self, other):
        return self._binary(other, np.multiply, reflected=True)

    def __truediv__(self, other):
        return self._binary(other, self._divide)

    def __rtruediv__(self, other):
        return self._binary(other, self._divide, reflected=True)

    def __mod__(self, other):
        return self._binary(other, self._remainder)

    def __rmod__(self, other):
        return self._binary(other, self._remainder, reflected=True)

    def __neg__(self):
        if self.is_unsigned:
            raise TypeError(f"bad operand type for unary -: '{type(self).__name__}'")
        return self._from_array(-self._data)

    def __pos__(self):
        return self

    def _divide(self, lhs, rhs):
        if self.is_integer:
            if np.any(np.asarray(rhs) == 0):
                raise ZeroDivisionError(f"{type(self).__name__} division by zero")
            lhs = np.asarray(lhs, dtype=self.dtype)
            rhs = np.asarray(rhs, dtype=self.dtype)
            quotient = np.abs(lhs) // np.abs(rhs)
            # truncate toward zero
            return np.where((lhs < 0) != (rhs < 0), -quotient, quotient)
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            if np.ndim(rhs) == 0:
                # scalar division multiplies by the reciprocal
                return lhs * (self.dtype(1) / self.dtype(rhs))
            return np.divide(lhs, rhs, dtype=self.dtype)

    def _remainder(self, lhs, rhs):
        if self.is_integer and np.any(np.asarray(rhs) == 0):
            raise ZeroDivisionError(f"{type(self).__name__} remainder by zero")
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.fmod(lhs, rhs)

    def scale(self, scalar):
        """Multiply each component by the scalar."""
        if not isinstance(scalar, numbers.Number):
            raise TypeError(f"{type(self).__name__}.scale expects a scalar, got {type(scalar).__name__}")
        return self._from_array(self._data * self._operand_or_raise(scalar))

    def dot(self, other):
        """Sum of componentwise products."""
        return sum_in_order(self._data * self._vector_operand(other))

    def length_squared(self):
        """Length of the vector before being square rooted."""
        return sum_in_order(self._data * self._data)

    def distance_squared(self, other):
        """Distance between two vectors before being square rooted."""
        return (self - other).length_squared()

    def transform(self, matrix):
        """Transform by a matrix: each output component is a matrix row dotted with this vector."""
        return matrix * self

    # -------------------------------------------------------------------------
    # Componentwise comparisons
    # -------------------------------------------------------------------------

    def _compare(self, other, operation):
        bool_type = vector_type(np.bool_, len(self))
        return bool_type._from_array(operation(self._data, self._operand_or_raise(other)))

    def _operand_or_raise(self, other):
        rhs = self._operand(other)
        if rhs is None:
            raise TypeError(f"Unsupported operand for {type(self).__name__}: {type(other).__name__}")
        return rhs

    def _vector_operand(self, other):
        # same-size vector or sequence, no scalar broadcast
        if isinstance(other, numbers.Number):
            raise TypeError(f"Expected a {len(self)}-component operand for {type(self).__name__}, got a scalar")
        return self._operand_or_raise(other)

    def eq(self, other):
        """Whether each pair of components is equal."""
        return self._compare(other, np.equal)

    def less(self, other):
        """Whether each component is less than the other's."""
        return self._compare(other, np.less)

    def more(self, other):
        """Whether each component is more than the other's."""
        return self._compare(other, np.greater)

    def less_or_eq(self, other):
        return self._compare(other, np.less_equal)

    def more_or_eq(self, other):
        return self._compare(other, np.greater_equal)


class FloatVector(NumericVector):
    """Vector over a floating point scalar type."""
    __slots__ = ()

    def length(self):
        """Length of the vector."""
        return np.sqrt(self.length_squared())

    def distance(self, other):
        """Distance between two vectors."""
        return (self - other).length()

    def normalise(self):
        """
        Scale the vector to a length of 1.

        A zero-length vector has no direction, so the zero vector is returned
        unchanged instead of dividing by zero. Callers that need a unit vector
        must check for this case.
        """
        length = self.length()
        if length == 0:
            return type(self).ZERO
        return self.scale(self.dtype(1) / length)

    def is_close(self, other, epsilon=None):
        """Whether every component is within `epsilon` of the other's."""
        if epsilon is None:
            epsilon = get_config().epsilon
        return bool(np.allclose(self._data, np.asarray(other, dtype=self.dtype), rtol=0.0, atol=epsilon))


class Cross3:
    """Cross product for three-component numeric vectors."""
    __slots__ = ()

    def cross(self, other):
        """
        Right-handed cross product: X.cross(Y) == Z.

        The result is perpendicular to both inputs and is not normalised.
        """
        a = self._data
        b = self._vector_operand(other)
        # array arithmetic so unsigned components wrap silently
        return self._from_array(a[[1, 2, 0]] * b[[2, 0, 1]] - a[[2, 0, 1]] * b[[1, 2, 0]])


class BoolVector(Vector):
    """Vector of booleans, produced by componentwise comparisons."""
    __slots__ = ()

    @classmethod
    def _install_constants(cls):
        cls.TRUE = cls.splat(True)
        cls.FALSE = cls.splat(False)
        for index, name in enumerate(cls.fields):
            axis = np.zeros(len(cls.fields), dtype=np.bool_)
            axis[index] = True
            setattr(cls, name.upper(), cls._from_array(axis))

    def _logic(self, other, operation):
        if type(other) is not type(self):
            return NotImplemented
        return self._from_array(operation(self._data, other._data))

    def __or__(self, other):
        return self._logic(other, np.logical_or)

    def __and__(self, other):
        return self._logic(other, np.logical_and)

    def __xor__(self, other):
        return self._logic(other, np.logical_xor)

    def __invert__(self):
        return self._from_array(np.logical_not(self._data))

    def __bool__(self):
        raise TypeError(f"The truth value of a {type(self).__name__} is ambiguous. Use any() or all()")

    def any(self):
        return bool(self._data.any())

    def all(self):
        return bool(self._data.all())
