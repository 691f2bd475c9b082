"""
Projection matrices handed to the renderer.

Both helpers take the viewport as ``(width, height)`` and squash the x axis by
``height / width`` so a unit of x and a unit of y cover the same number of
pixels on screen.
"""

import numpy as np

from .matrices import Mat4


def _aspect(dimensions, dtype):
    width, height = dimensions
    return dtype(height) / dtype(width)


def view_matrix_3d(dimensions, fov, zfar, znear, matrix_type=Mat4):
    """
    Perspective projection.

    Args:
        dimensions: Viewport (width, height) in pixels.
        fov: Vertical field of view in radians.
        zfar: Distance to the far clipping plane.
        znear: Distance to the near clipping plane.
        matrix_type: Mat4 or DMat4.

    Returns:
        The projection matrix. Depth maps from [znear, zfar] to [-1, 1] and w
        takes the view-space z, so +z points into the screen.
    """
    dtype = matrix_type.dtype
    aspect = _aspect(dimensions, dtype)
    zfar = dtype(zfar)
    znear = dtype(znear)
    f = dtype(1) / np.tan(dtype(fov) / dtype(2))
    return matrix_type.from_column_major_array((
        (f * aspect, 0, 0, 0),
        (0, f, 0, 0),
        (0, 0, (zfar + znear) / (zfar - znear), 1),
        (0, 0, -(dtype(2) * zfar * znear) / (zfar - znear), 0),
    ))


def view_matrix_2d(dimensions, matrix_type=Mat4):
    """Orthographic projection: only corrects the aspect ratio."""
    aspect = _aspect(dimensions, matrix_type.dtype)
    return matrix_type.from_scale((aspect, 1, 1))
