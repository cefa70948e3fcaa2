"""Synthetic test images for forward projection."""

import numpy as np

from .constants import _DTYPE
from .containers import Matrix
from .exceptions import InvalidArgument

# (x0, y0, a, b, angle in degrees, amplitude), in normalized [-1, 1] coordinates
_SHEPP_LOGAN_ELLIPSES = [
    (0.0, 0.0, 0.69, 0.92, 0, 1.0),
    (0.0, -0.0184, 0.6624, 0.8740, 0, -0.8),
    (0.22, 0.0, 0.11, 0.31, -18.0, -0.8),
    (-0.22, 0.0, 0.16, 0.41, 18.0, -0.8),
    (0.0, 0.35, 0.21, 0.25, 0, 0.7),
]


def point_phantom(size, value=1.0):
    """Odd-sized square image with a single pixel set at the exact centre.

    Raises
    ------
    InvalidArgument
        If `size` is smaller than 1 or even.
    """
    if size is None or size < 1 or size % 2 == 0:
        raise InvalidArgument(f"Point phantom size must be a positive odd number, got {size}")
    phantom = Matrix.create(size, size)
    phantom.update(size // 2, size // 2, value)
    return phantom


def shepp_logan_2d(Nx, Ny):
    """Modified Shepp-Logan phantom of `Nx` columns and `Ny` rows.

    Ellipse amplitudes are summed and the result is clipped to ``[0, 1]``.
    """
    Nx = int(Nx)
    Ny = int(Ny)
    if Nx < 1 or Ny < 1:
        raise InvalidArgument(f"Phantom dimensions must be >= 1, got {Nx}x{Ny}")
    cx = (Nx - 1) / 2
    cy = (Ny - 1) / 2
    ynorm, xnorm = np.meshgrid((np.arange(Ny) - cy) / (Ny / 2),
                               (np.arange(Nx) - cx) / (Nx / 2), indexing='ij')
    phantom = np.zeros((Ny, Nx), dtype=_DTYPE)
    for (x0, y0, a, b, angdeg, ampl) in _SHEPP_LOGAN_ELLIPSES:
        th = np.deg2rad(angdeg)
        xprime = (xnorm - x0) * np.cos(th) + (ynorm - y0) * np.sin(th)
        yprime = -(xnorm - x0) * np.sin(th) + (ynorm - y0) * np.cos(th)
        phantom[xprime * xprime / (a * a) + yprime * yprime / (b * b) <= 1.0] += ampl
    return Matrix.from_array(np.clip(phantom, 0.0, 1.0))


__all__ = ['point_phantom', 'shepp_logan_2d']
