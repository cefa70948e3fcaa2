"""Numba kernel for nearest-neighbour image rotation.

This module contains the compiled inverse-mapping loop used by
:func:`radonct.rotation.rotate` for both forward projection and
backprojection.
"""

import math

from ..constants import _JIT_DECORATOR


# ============================================================================
# 2D Nearest-Neighbour Rotation Kernel
# ============================================================================

@_JIT_DECORATOR
def _rotate_2d_kernel(d_src, d_dst, Nx, Ny, cos_a, sin_a):
    """Rotate a 2D image about its centre by inverse mapping.

    Parameters
    ----------
    d_src : numpy.ndarray
        Source image of shape (Ny, Nx), indexed ``[y, x]``.
    d_dst : numpy.ndarray
        Destination image of shape (Ny, Nx). Every pixel is written.
    Nx : int
        Number of columns.
    Ny : int
        Number of rows.
    cos_a : float
        Cosine of the (already negated) rotation angle.
    sin_a : float
        Sine of the (already negated) rotation angle.

    Notes
    -----
    Pixel coordinates are moved to an odd centred integer grid,
    ``e = 2 * (p - c) + 1`` with ``c = N // 2``, before rotating. Rotated
    coordinates are rounded half up and mapped back with an integer division
    that truncates toward zero. Destination pixels whose source falls outside
    the image are set to zero.
    """
    cx = Nx // 2
    cy = Ny // 2
    for iy in range(Ny):
        ey = 2 * (iy - cy) + 1
        for ix in range(Nx):
            ex = 2 * (ix - cx) + 1

            # === ROTATE IN THE ODD CENTRED GRID ===
            rot_x = math.floor(ex * cos_a - ey * sin_a + 0.5)
            rot_y = math.floor(ex * sin_a + ey * cos_a + 0.5)

            # === MAP BACK TO SOURCE INDICES ===
            src_x = int((rot_x - 1) / 2) + cx
            src_y = int((rot_y - 1) / 2) + cy

            if 0 <= src_x < Nx and 0 <= src_y < Ny:
                d_dst[iy, ix] = d_src[src_y, src_x]
            else:
                d_dst[iy, ix] = 0.0
