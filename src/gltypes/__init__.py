"""gltypes - Fixed-size vectors, matrices and quaternions for shader uniforms."""

__version__ = "0.1.0"

from .config import AlgebraConfig, set_config, get_config, configure, reset_config
from .errors import GLTypesError, SingularMatrixError, SingularMatrixWarning, ZeroQuaternionError
from .vectors import *
from .vectors import __all__ as _vector_names
from .matrices import Mat2, DMat2, Mat3, DMat3, Mat4, DMat4
from .quaternions import Quaternion, Quat, DQuat
from .projection import view_matrix_3d, view_matrix_2d
from .uniforms import UniformKind, UniformValue, as_uniform_value


# =============================================================================
# Quaternion Factories
# =============================================================================

def quat(r, i, j, k) -> Quat:
    return Quat(r, i, j, k)


def dquat(r, i, j, k) -> DQuat:
    return DQuat(r, i, j, k)


__all__ = [
    'AlgebraConfig', 'set_config', 'get_config', 'configure', 'reset_config',
    'GLTypesError', 'SingularMatrixError', 'SingularMatrixWarning', 'ZeroQuaternionError',
    *_vector_names,
    'Mat2', 'DMat2', 'Mat3', 'DMat3', 'Mat4', 'DMat4',
    'Quaternion', 'Quat', 'DQuat', 'quat', 'dquat',
    'view_matrix_3d', 'view_matrix_2d',
    'UniformKind', 'UniformValue', 'as_uniform_value',
]
