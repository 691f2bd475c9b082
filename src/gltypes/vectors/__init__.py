"""Vector types in every supported dimension and scalar type."""

from .base import Vector, NumericVector, FloatVector, BoolVector, vector_type
from .vec2 import Vec2, DVec2, IVec2, UVec2, DIVec2, DUVec2, BVec2, vec2, dvec2, ivec2, uvec2, divec2, duvec2, bvec2
from .vec3 import Vec3, DVec3, IVec3, UVec3, DIVec3, DUVec3, BVec3, vec3, dvec3, ivec3, uvec3, divec3, duvec3, bvec3
from .vec4 import Vec4, DVec4, IVec4, UVec4, DIVec4, DUVec4, BVec4, vec4, dvec4, ivec4, uvec4, divec4, duvec4, bvec4

__all__ = [
    'Vector', 'NumericVector', 'FloatVector', 'BoolVector', 'vector_type',
    'Vec2', 'DVec2', 'IVec2', 'UVec2', 'DIVec2', 'DUVec2', 'BVec2',
    'Vec3', 'DVec3', 'IVec3', 'UVec3', 'DIVec3', 'DUVec3', 'BVec3',
    'Vec4', 'DVec4', 'IVec4', 'UVec4', 'DIVec4', 'DUVec4', 'BVec4',
    'vec2', 'dvec2', 'ivec2', 'uvec2', 'divec2', 'duvec2', 'bvec2',
    'vec3', 'dvec3', 'ivec3', 'uvec3', 'divec3', 'duvec3', 'bvec3',
    'vec4', 'dvec4', 'ivec4', 'uvec4', 'divec4', 'duvec4', 'bvec4',
]
