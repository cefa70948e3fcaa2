"""Numba kernels for CT projections.

This subpackage contains the compiled inner loops for 1D convolution and
2D nearest-neighbour rotation.
"""

from .convolution import (
    _convolve_1d_kernel,
)

from .rotation import (
    _rotate_2d_kernel,
)

__all__ = [
    '_convolve_1d_kernel',
    '_rotate_2d_kernel',
]
