# radonct/__init__.py
"""RadonCT - Parallel beam CT by rotation-based projection.

Forward projection (discrete Radon transform) and filtered backprojection on
dense NumPy-backed containers, with Numba-compiled inner loops.
"""

from .containers import (
    Vector,
    Matrix,
)

from .exceptions import (
    RadonCTError,
    InvalidArgument,
    SizeMismatch,
    IndexOutOfRange,
)

from .rotation import (
    rotate,
    extend,
)

from .filters import (
    sinc,
    compute_ramp_kernel,
    apply_filter,
)

from .projectors import (
    make_sinogram,
    reconstruct,
    filtered_backprojection,
)

from .phantoms import (
    point_phantom,
    shepp_logan_2d,
)

from .utils import (
    TorchBridge,
    as_matrix,
)

__version__ = '1.0.0'

__all__ = [
    'Vector',
    'Matrix',
    'RadonCTError',
    'InvalidArgument',
    'SizeMismatch',
    'IndexOutOfRange',
    'rotate',
    'extend',
    'sinc',
    'compute_ramp_kernel',
    'apply_filter',
    'make_sinogram',
    'reconstruct',
    'filtered_backprojection',
    'point_phantom',
    'shepp_logan_2d',
    'TorchBridge',
    'as_matrix',
]
