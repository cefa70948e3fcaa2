"""Ramp filter design and application in the spatial domain.

The ramp filter compensates the 1/|frequency| blur of plain backprojection.
It is realised here as a closed-form sinc-based convolution kernel that is
convolved directly with every sinogram row; no FFT is involved.
"""

import logging

import numpy as np

from .constants import _DTYPE
from .containers import Vector
from .exceptions import InvalidArgument
from .utils import as_matrix

logger = logging.getLogger(__name__)


def sinc(t):
    """Normalized sinc, ``sin(pi*t) / (pi*t)`` with ``sinc(0) == 1``.

    Accepts scalars or NumPy arrays.
    """
    return np.sinc(t)


def compute_ramp_kernel(size):
    """Build the band-limited ramp filter kernel.

    Parameters
    ----------
    size : int
        Half-width of the kernel. The kernel covers offsets
        ``-size .. size``.

    Returns
    -------
    Vector
        Kernel of length ``2 * size + 1`` with
        ``kernel[i + size] = sinc(i) / 2 - sinc(i / 2)**2 / 4``. The kernel
        is even: ``kernel[size - i] == kernel[size + i]``.

    Raises
    ------
    InvalidArgument
        If `size` is negative.

    Examples
    --------
    >>> compute_ramp_kernel(1).to_numpy()
    array([-0.10132118,  0.25      , -0.10132118])
    """
    if size is None or size < 0:
        raise InvalidArgument(f"Kernel size must be >= 0, got {size}")
    offsets = np.arange(-size, size + 1, dtype=_DTYPE)
    half = sinc(offsets / 2)
    return Vector.from_buffer(sinc(offsets) / 2 - half * half / 4)


def apply_filter(sinogram, kernel=None):
    """Convolve every row of `sinogram` with the ramp kernel, in place.

    Parameters
    ----------
    sinogram : Matrix, numpy.ndarray or torch.Tensor
        Sinogram to filter. Its rows are overwritten. A float64 C-contiguous
        array is filtered in place; other arrays and tensors are converted to
        a new matrix first.
    kernel : Vector, optional
        Filter kernel. Defaults to ``compute_ramp_kernel(sinogram.width)``.

    Returns
    -------
    Matrix
        The filtered sinogram: `sinogram` itself when it is a Matrix.

    Notes
    -----
    Each full convolution is cut back to ``width`` samples symmetrically:
    with ``start = (len - width) // 2`` and ``end = len - start - 1`` the
    samples ``start .. end`` replace the row, written through
    :meth:`Matrix.row` without copying the row out of the matrix.
    """
    if sinogram is None:
        raise InvalidArgument("Cannot filter None")
    sinogram = as_matrix(sinogram)
    width = sinogram.width
    if kernel is None:
        kernel = compute_ramp_kernel(width)
    logger.debug("Filtering %d sinogram rows with a %d-tap kernel",
                 sinogram.height, kernel.size)
    for y in range(sinogram.height):
        row = sinogram.row(y)
        conv = row.convolve(kernel)
        start = (conv.size - width) // 2
        end = conv.size - start - 1
        row.paste(0, Vector.from_buffer(conv.data[start:end + 1]))
    return sinogram


__all__ = ['sinc', 'compute_ramp_kernel', 'apply_filter']
