"""Exceptions and warnings raised by gltypes."""


class GLTypesError(Exception):
    """Base class for gltypes errors."""


class SingularMatrixError(GLTypesError, ArithmeticError):
    """Raised when inverting a matrix with a zero determinant under the 'raise' policy."""


class ZeroQuaternionError(GLTypesError, ZeroDivisionError):
    """Raised when a zero quaternion is inverted or normalised.

    A zero quaternion has no rotational meaning, so this always indicates a
    logic error in the caller.
    """


class SingularMatrixWarning(RuntimeWarning):
    """Issued when a singular matrix is inverted under the 'warn' policy."""
