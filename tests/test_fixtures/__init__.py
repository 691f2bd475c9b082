"""Test fixtures and utilities for gltypes testing.

Organized into logical modules:
- assertions: Custom assertion functions (assert_matrix_close, assert_vector_close, assert_quat_close)
"""

from .assertions import assert_matrix_close, assert_vector_close, assert_quat_close, assert_identity

__all__ = [
    'assert_matrix_close',
    'assert_vector_close',
    'assert_quat_close',
    'assert_identity',
]
