"""Geometric rotation of matrices about their centre.

This module provides the nearest-neighbour :func:`rotate` used by forward
projection and backprojection, and :func:`extend`, which pads an image so that
no content is lost in the corners while it is rotated.
"""

import math

import numpy as np

from .containers import Matrix
from .exceptions import InvalidArgument
from .kernels import _rotate_2d_kernel
from .utils import as_matrix


# ============================================================================
# Rotation
# ============================================================================

def rotate(matrix, angle):
    """Rotate `matrix` about its centre by `angle` degrees.

    Parameters
    ----------
    matrix : Matrix, numpy.ndarray or torch.Tensor
        Image to rotate.
    angle : float
        Rotation angle in degrees. Positive angles give a right-hand-rule
        rotation; pass a negative angle to rotate the other way.

    Returns
    -------
    Matrix
        New matrix with the same dimensions as `matrix`. Pixels rotated in
        from outside the image are zero.

    Raises
    ------
    InvalidArgument
        If `matrix` is None.

    Notes
    -----
    Uses inverse mapping with nearest-neighbour resampling, no
    interpolation. The centring on an odd integer grid is done in
    :func:`radonct.kernels.rotation._rotate_2d_kernel`. A zero angle
    reproduces the input exactly.

    Examples
    --------
    >>> m = Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])
    >>> rotate(m, 0).to_numpy()
    array([[1., 2.],
           [3., 4.]])
    """
    if matrix is None:
        raise InvalidArgument("Cannot rotate None")
    matrix = as_matrix(matrix)
    alpha = -angle * math.pi / 180
    out = np.empty_like(matrix.data)
    _rotate_2d_kernel(matrix.data, out, matrix.width, matrix.height,
                      math.cos(alpha), math.sin(alpha))
    return Matrix(out)


# ============================================================================
# Padding
# ============================================================================

def extended_shape(width, height):
    """Return the ``(width, height)`` produced by :func:`extend`.

    Both sides start at the diagonal ``ceil(sqrt(width**2 + height**2))`` and
    each is increased by one when its parity differs from the original side,
    so the original image can be centred exactly.
    """
    diagonal = math.ceil(math.sqrt(width * width + height * height))
    w = diagonal
    h = diagonal
    if width % 2 != w % 2:
        w += 1
    if height % 2 != h % 2:
        h += 1
    return w, h


def extend(matrix):
    """Pad `matrix` with zeros so it can be rotated without losing corners.

    Parameters
    ----------
    matrix : Matrix
        Image to pad.

    Returns
    -------
    Matrix
        Zero matrix of the size given by :func:`extended_shape` with `matrix`
        pasted in its centre.

    Raises
    ------
    InvalidArgument
        If `matrix` is None.
    """
    if matrix is None:
        raise InvalidArgument("Cannot extend None")
    matrix = as_matrix(matrix)
    w, h = extended_shape(matrix.width, matrix.height)
    out = Matrix.create(w, h)
    out.paste_region((w - matrix.width) // 2, (h - matrix.height) // 2, matrix)
    return out


__all__ = ['rotate', 'extend', 'extended_shape']
