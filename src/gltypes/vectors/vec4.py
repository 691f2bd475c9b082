"""Four-component vector types."""

import numpy as np

from .base import FloatVector, NumericVector, BoolVector


_FIELDS = ('x', 'y', 'z', 'w')


class Vec4(FloatVector):
    """Single precision 4D vector (homogeneous coordinates, colours)."""
    __slots__ = ()
    dtype = np.float32
    fields = _FIELDS


class DVec4(FloatVector):
    __slots__ = ()
    dtype = np.float64
    fields = _FIELDS


class IVec4(NumericVector):
    __slots__ = ()
    dtype = np.int32
    fields = _FIELDS


class UVec4(NumericVector):
    __slots__ = ()
    dtype = np.uint32
    fields = _FIELDS


class DIVec4(NumericVector):
    __slots__ = ()
    dtype = np.int64
    fields = _FIELDS


class DUVec4(NumericVector):
    __slots__ = ()
    dtype = np.uint64
    fields = _FIELDS


class BVec4(BoolVector):
    __slots__ = ()
    dtype = np.bool_
    fields = _FIELDS


def vec4(x, y, z, w) -> Vec4:
    return Vec4(x, y, z, w)


def dvec4(x, y, z, w) -> DVec4:
    return DVec4(x, y, z, w)


def ivec4(x, y, z, w) -> IVec4:
    return IVec4(x, y, z, w)


def uvec4(x, y, z, w) -> UVec4:
    return UVec4(x, y, z, w)


def divec4(x, y, z, w) -> DIVec4:
    return DIVec4(x, y, z, w)


def duvec4(x, y, z, w) -> DUVec4:
    return DUVec4(x, y, z, w)


def bvec4(x, y, z, w) -> BVec4:
    return BVec4(x, y, z, w)
