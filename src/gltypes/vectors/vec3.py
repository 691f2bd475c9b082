"""
Three-component vector types.

Every numeric variant carries a right-handed cross product; the unsigned
variants compute it modulo 2^N like the rest of their arithmetic.
"""

import numpy as np

from .base import FloatVector, NumericVector, BoolVector, Cross3


_FIELDS = ('x', 'y', 'z')


class Vec3(Cross3, FloatVector):
    """Single precision 3D vector, the usual position/scale/direction type."""
    __slots__ = ()
    dtype = np.float32
    fields = _FIELDS


class DVec3(Cross3, FloatVector):
    """Double precision 3D vector."""
    __slots__ = ()
    dtype = np.float64
    fields = _FIELDS


class IVec3(Cross3, NumericVector):
    __slots__ = ()
    dtype = np.int32
    fields = _FIELDS


class UVec3(Cross3, NumericVector):
    __slots__ = ()
    dtype = np.uint32
    fields = _FIELDS


class DIVec3(Cross3, NumericVector):
    __slots__ = ()
    dtype = np.int64
    fields = _FIELDS


class DUVec3(Cross3, NumericVector):
    __slots__ = ()
    dtype = np.uint64
    fields = _FIELDS


class BVec3(BoolVector):
    __slots__ = ()
    dtype = np.bool_
    fields = _FIELDS


def vec3(x, y, z) -> Vec3:
    return Vec3(x, y, z)


def dvec3(x, y, z) -> DVec3:
    return DVec3(x, y, z)


def ivec3(x, y, z) -> IVec3:
    return IVec3(x, y, z)


def uvec3(x, y, z) -> UVec3:
    return UVec3(x, y, z)


def divec3(x, y, z) -> DIVec3:
    return DIVec3(x, y, z)


def duvec3(x, y, z) -> DUVec3:
    return DUVec3(x, y, z)


def bvec3(x, y, z) -> BVec3:
    return BVec3(x, y, z)
