"""Global constants and configuration for RadonCT package.

This module defines core constants used throughout the RadonCT package,
including data types, the Numba JIT decorator used for the inner loops and
the defaults of the demonstration pipeline.
"""

import numpy as np
from numba import njit

# ---------------------------------------------------------------------------
# Data Types and Numerical Constants
# ---------------------------------------------------------------------------

_DTYPE = np.float64
"""Default data type for vector and matrix storage (numpy.float64)."""

PIXEL_MAX = 255
"""Largest value of an 8-bit grayscale pixel."""

MAX_ANGULAR_RANGE = 360
"""Largest accepted angular range in degrees."""

# ---------------------------------------------------------------------------
# Acquisition Defaults
# ---------------------------------------------------------------------------

DEFAULT_NUM_PROJECTIONS = 180
"""Number of projections in a per-angle dataset directory."""

DEFAULT_ANGULAR_RANGE = 180
"""Angular range (degrees) covered by the default acquisition."""

DEFAULT_DETECTOR_WIDTH = 256
"""Number of detector columns in a per-angle dataset image."""

DEFAULT_SLICE_INDEX = 137
"""Image row used as the slice when reading a per-angle dataset."""

PROJECTION_NAME_FORMAT = "{:03d}.{}"
"""File name of one projection: zero-padded index and extension."""

# ---------------------------------------------------------------------------
# Numba JIT Decorators
# ---------------------------------------------------------------------------

# No fastmath: the rotation kernel rounds exact odd integer coordinates.
_JIT_DECORATOR = njit(cache=True)
"""Numba CPU JIT decorator used for the convolution and rotation kernels."""
