"""Numba kernel for direct 1D linear convolution.

This module contains the compiled inner loop behind ``Vector.convolve``. The
convolution is evaluated as an explicit double sum rather than through the
FFT so that short filter kernels and long detector rows give exactly the
same result as the textbook definition.
"""

from ..constants import _JIT_DECORATOR


# ============================================================================
# 1D Direct Convolution Kernel
# ============================================================================

@_JIT_DECORATOR
def _convolve_1d_kernel(d_signal, d_kernel, d_out):
    """Accumulate the full linear convolution of two 1D arrays.

    Parameters
    ----------
    d_signal : numpy.ndarray
        Input signal of length ``n``.
    d_kernel : numpy.ndarray
        Convolution kernel of length ``m``.
    d_out : numpy.ndarray
        Zero-initialised output of length ``n + m - 1``. Updated in place.

    Notes
    -----
    Every pair ``(i, j)`` contributes ``d_signal[i] * d_kernel[j]`` to
    ``d_out[i + j]``. Both loops run from the last element to the first,
    which fixes the order in which partial products are added.
    """
    n = d_signal.shape[0]
    m = d_kernel.shape[0]
    for i in range(n - 1, -1, -1):
        s = d_signal[i]
        for j in range(m - 1, -1, -1):
            d_out[i + j] += s * d_kernel[j]
