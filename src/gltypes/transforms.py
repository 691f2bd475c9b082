"""
Closed-form TRS (translation, rotation, scale) composition.

These helpers expand position, scale and a rotation quaternion straight into
matrix entries instead of multiplying elementary matrices together. Entries are
returned in row-major (textbook) order, ready for ``from_values``.

The forward transform applies scale, then rotation, then translation:

    transform_values(p, s, q)  ==  from_pos(p) * from_rot(q) * from_scale(s)

and ``inverse_transform_values`` is its inverse, the usual camera view matrix.
"""

import numpy as np


def _components(value, count, dtype):
    values = np.asarray(value, dtype=dtype)
    if values.shape != (count,):
        raise ValueError(f"Expected {count} components, got shape {values.shape}")
    return values


def rotation_values(rot, dtype=np.float32):
    """Nine row-major entries of the rotation matrix of quaternion (r, i, j, k)."""
    r, i, j, k = _components(rot, 4, dtype)
    one = dtype(1)
    two = dtype(2)
    return (
        one - two * (j * j + k * k), two * (i * j - k * r), two * (i * k + j * r),
        two * (i * j + k * r), one - two * (i * i + k * k), two * (j * k - i * r),
        two * (i * k - j * r), two * (j * k + i * r), one - two * (i * i + j * j),
    )


def rotation_scale_values(scale, rot, dtype=np.float32):
    """Nine row-major entries of ``from_rot(rot) * from_scale(scale)``."""
    r, i, j, k = _components(rot, 4, dtype)
    sx, sy, sz = _components(scale, 3, dtype) * dtype(2)
    half = dtype(0.5)
    return (
        sx * (half - (j * j + k * k)), sy * (i * j - k * r), sz * (i * k + j * r),
        sx * (i * j + k * r), sy * (half - (i * i + k * k)), sz * (j * k - i * r),
        sx * (i * k - j * r), sy * (j * k + i * r), sz * (half - (i * i + j * j)),
    )


def transform_values(pos, scale, rot, dtype=np.float32):
    """Sixteen row-major entries of the TRS matrix for position, scale and rotation."""
    px, py, pz = _components(pos, 3, dtype)
    a, b, c, d, e, f, g, h, i = rotation_scale_values(scale, rot, dtype)
    zero = dtype(0)
    return (
        a, b, c, px,
        d, e, f, py,
        g, h, i, pz,
        zero, zero, zero, dtype(1),
    )


def inverse_transform_values(pos, scale, rot, dtype=np.float32):
    """
    Sixteen row-major entries of the inverse TRS matrix.

    Inverts without a general 4x4 inverse: the rotation block is transposed,
    each row divided by its scale, and the translation is rotated and scaled
    back into the new frame. Useful for turning a camera's world transform into
    its view matrix.

    Args:
        pos: Position (x, y, z).
        scale: Scale (x, y, z). Zero components give inf/NaN entries.
        rot: Rotation quaternion (r, i, j, k). Exact for unit quaternions.
        dtype: Scalar type of the returned entries.
    """
    px, py, pz = _components(pos, 3, dtype)
    r, i, j, k = _components(rot, 4, dtype)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        x, y, z = dtype(1) / _components(scale, 3, dtype)
        norm_squared = r * r + i * i + j * j + k * k
        s = dtype(2) / (norm_squared * norm_squared)
        sx, sy, sz = s * x, s * y, s * z

        a = x - sx * (j * j + k * k)
        b = sx * (i * j + k * r)
        c = sx * (i * k - j * r)

        d = sy * (i * j - k * r)
        e = y - sy * (i * i + k * k)
        f = sy * (j * k + i * r)

        g = sz * (i * k + j * r)
        h = sz * (j * k - i * r)
        m = z - sz * (i * i + j * j)

        tx = -a * px - b * py - c * pz
        ty = -d * px - e * py - f * pz
        tz = -g * px - h * py - m * pz

    zero = dtype(0)
    return (
        a, b, c, tx,
        d, e, f, ty,
        g, h, m, tz,
        zero, zero, zero, dtype(1),
    )
