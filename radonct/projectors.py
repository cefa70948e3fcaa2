"""Forward projection and backprojection for parallel beam CT.

This module builds sinograms from phantom images (discrete Radon transform)
and reconstructs slices from sinograms by backprojection. Both directions
rotate whole images with :func:`radonct.rotation.rotate` and work on equally
spaced angles over a user-given range, in degrees.
"""

import logging

from .constants import MAX_ANGULAR_RANGE
from .containers import Matrix
from .exceptions import InvalidArgument
from .filters import apply_filter
from .rotation import rotate, extend
from .utils import as_matrix, _angle_step

logger = logging.getLogger(__name__)


# ============================================================================
# Forward Projection
# ============================================================================

def make_sinogram(phantom, angular_range, num_projections, truncate_step=True,
                  extend_phantom=False):
    """Compute the sinogram of `phantom` by rotation and column summation.

    Parameters
    ----------
    phantom : Matrix, numpy.ndarray or torch.Tensor
        2D image of shape (H, W).
    angular_range : float
        Angular range covered by the projections, in degrees, within
        ``[1, 360]``.
    num_projections : int
        Number of projections, at least 1.
    truncate_step : bool, optional
        Round the angular step down to whole degrees (default: True).
    extend_phantom : bool, optional
        Pad the phantom with :func:`radonct.rotation.extend` first, so that
        corners are not cut off by the rotation (default: False). The
        sinogram is then as wide as the padded image.

    Returns
    -------
    Matrix
        Sinogram with ``width`` columns (detector positions) and
        `num_projections` rows. Row ``i`` holds the column sums of the
        phantom rotated by ``i * step`` degrees.

    Raises
    ------
    InvalidArgument
        If `phantom` is None, `angular_range` is NaN or lies outside
        ``[1, 360]``, or `num_projections` is smaller than 1.

    Examples
    --------
    >>> from radonct.phantoms import point_phantom
    >>> sino = make_sinogram(point_phantom(5), 360, 4)
    >>> sino.width, sino.height
    (5, 4)
    """
    if phantom is None:
        raise InvalidArgument("Phantom must not be None")
    if not (1 <= angular_range <= MAX_ANGULAR_RANGE):
        raise InvalidArgument(
            f"Angular range must be within [1, {MAX_ANGULAR_RANGE}], got {angular_range}"
        )
    if num_projections < 1:
        raise InvalidArgument(
            f"Number of projections must be >= 1, got {num_projections}"
        )

    image = as_matrix(phantom)
    if extend_phantom:
        image = extend(image)

    step = _angle_step(angular_range, num_projections, truncate_step)
    logger.info("Building sinogram: %d projections over %s degrees (step %s)",
                num_projections, angular_range, step)

    sinogram = Matrix.create(image.width, num_projections)
    for i in range(num_projections):
        sinogram.replace_row(i, rotate(image, i * step).sum_columns())
    return sinogram


# ============================================================================
# Backprojection
# ============================================================================

def reconstruct(sinogram, angular_range, truncate_step=True):
    """Reconstruct a slice from `sinogram` by backprojection.

    Every projection is smeared uniformly across a square slab, the slab is
    rotated back to its acquisition angle and summed into the result. The
    output is a plain backprojection for a raw sinogram and a filtered
    backprojection for a sinogram passed through
    :func:`radonct.filters.apply_filter`.

    Parameters
    ----------
    sinogram : Matrix, numpy.ndarray or torch.Tensor
        Sinogram with one projection per row.
    angular_range : float
        Angular range covered by the sinogram rows, in degrees.
    truncate_step : bool, optional
        Round the angular step down to whole degrees (default: True).

    Returns
    -------
    Matrix
        Square ``width x width`` slice. Values are not normalized.

    Raises
    ------
    InvalidArgument
        If `sinogram` is None.

    Notes
    -----
    An `angular_range` outside ``[0, 360]``, or NaN, does not raise: the
    result is an all-zero slice and a warning is logged.
    """
    image = as_matrix(sinogram)
    width = image.width
    out = Matrix.create(width, width)
    if not (0 <= angular_range <= MAX_ANGULAR_RANGE):
        logger.warning("Angular range %s outside [0, %d]; returning an empty slice",
                       angular_range, MAX_ANGULAR_RANGE)
        return out

    step = _angle_step(angular_range, image.height, truncate_step)
    logger.info("Reconstructing %dx%d slice from %d projections (step %s)",
                width, width, image.height, step)

    slab = Matrix.create(width, width)
    for y in range(image.height):
        projection = image.row(y)
        for z in range(width):
            slab.replace_row(z, projection)
        out.sum(rotate(slab, -(y * step)))
    return out


def filtered_backprojection(sinogram, angular_range, truncate_step=True):
    """Ramp-filter a copy of `sinogram` and reconstruct it.

    The input sinogram is left untouched.

    See Also
    --------
    radonct.filters.apply_filter, reconstruct
    """
    filtered = as_matrix(sinogram).copy()
    logger.info("Filtering sinogram")
    apply_filter(filtered)
    return reconstruct(filtered, angular_range, truncate_step)


__all__ = ['make_sinogram', 'reconstruct', 'filtered_backprojection']
