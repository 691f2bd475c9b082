"""Two-component vector types."""

import numpy as np

from .base import FloatVector, NumericVector, BoolVector


_FIELDS = ('x', 'y')


class Vec2(FloatVector):
    """Single precision 2D vector."""
    __slots__ = ()
    dtype = np.float32
    fields = _FIELDS


class DVec2(FloatVector):
    """Double precision 2D vector."""
    __slots__ = ()
    dtype = np.float64
    fields = _FIELDS


class IVec2(NumericVector):
    __slots__ = ()
    dtype = np.int32
    fields = _FIELDS


class UVec2(NumericVector):
    __slots__ = ()
    dtype = np.uint32
    fields = _FIELDS


class DIVec2(NumericVector):
    __slots__ = ()
    dtype = np.int64
    fields = _FIELDS


class DUVec2(NumericVector):
    __slots__ = ()
    dtype = np.uint64
    fields = _FIELDS


class BVec2(BoolVector):
    __slots__ = ()
    dtype = np.bool_
    fields = _FIELDS


def vec2(x, y) -> Vec2:
    return Vec2(x, y)


def dvec2(x, y) -> DVec2:
    return DVec2(x, y)


def ivec2(x, y) -> IVec2:
    return IVec2(x, y)


def uvec2(x, y) -> UVec2:
    return UVec2(x, y)


def divec2(x, y) -> DIVec2:
    return DIVec2(x, y)


def duvec2(x, y) -> DUVec2:
    return DUVec2(x, y)


def bvec2(x, y) -> BVec2:
    return BVec2(x, y)
