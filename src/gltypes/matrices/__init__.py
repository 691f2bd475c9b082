"""Square matrix types, stored column-major and built row-major."""

from .base import Matrix, matrix_type
from .mat2 import Matrix2, Mat2, DMat2
from .mat3 import Matrix3, Mat3, DMat3
from .mat4 import Matrix4, Mat4, DMat4

__all__ = [
    'Matrix', 'matrix_type',
    'Matrix2', 'Mat2', 'DMat2',
    'Matrix3', 'Mat3', 'DMat3',
    'Matrix4', 'Mat4', 'DMat4',
]
