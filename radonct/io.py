"""Image file reading and writing, and per-angle dataset ingestion.

Images are read and written with scikit-image. Pixel values are mapped to
``[0, 1]`` on input and rescaled to 8-bit grayscale on output. File system
errors are not caught here.
"""

import errno
import logging
from pathlib import Path

import numpy as np
from skimage.color import rgb2gray
from skimage.io import imread, imsave
from skimage.util import img_as_float

from .constants import (
    PIXEL_MAX,
    DEFAULT_NUM_PROJECTIONS,
    DEFAULT_DETECTOR_WIDTH,
    PROJECTION_NAME_FORMAT,
)
from .containers import Matrix
from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)


# ============================================================================
# Image Codec
# ============================================================================

def load_image(path):
    """Read an image file as a grayscale :class:`Matrix` with values in ``[0, 1]``.

    Colour images are converted with :func:`skimage.color.rgb2gray` after
    dropping any alpha channel; integer images are scaled from their native
    range (0-255 for 8-bit files).

    Parameters
    ----------
    path : str or pathlib.Path
        Image file to read.

    Returns
    -------
    Matrix
        Matrix with the image's width and height.

    Raises
    ------
    FileNotFoundError
        If `path` does not name an existing file.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(errno.ENOENT, "Image file not found", str(path))
    image = imread(str(path))
    if image.ndim == 3:
        if image.shape[-1] in (3, 4):
            image = rgb2gray(image[..., :3])
        else:
            # Gray + alpha
            image = image[..., 0]
    logger.debug("Loaded %s with shape %s", path, image.shape)
    return Matrix.from_array(img_as_float(image))


def to_grayscale_bytes(matrix):
    """Map a matrix to 8-bit pixels as ``round(255 * |value| / matrix.max())``.

    The divisor is the signed maximum of the matrix, not the largest
    magnitude, so strongly negative values can exceed 255; those pixels are
    clipped to 255 and a warning is logged. A matrix whose maximum is not
    positive gives an all-black image.

    Returns
    -------
    numpy.ndarray
        ``uint8`` array of shape (height, width).
    """
    peak = matrix.max()
    if peak <= 0:
        logger.warning("Image maximum is %s; writing a black image", peak)
        return np.zeros(matrix.shape, dtype=np.uint8)
    scaled = np.floor(np.abs(matrix.data) * (PIXEL_MAX / peak) + 0.5)
    if scaled.max() > PIXEL_MAX:
        logger.warning("%d pixels exceed %d and are clipped",
                       int(np.count_nonzero(scaled > PIXEL_MAX)), PIXEL_MAX)
    return np.clip(scaled, 0, PIXEL_MAX).astype(np.uint8)


def save_image(path, matrix):
    """Write `matrix` as an 8-bit grayscale image.

    The format is taken from the file extension. See
    :func:`to_grayscale_bytes` for the value mapping.

    Raises
    ------
    InvalidArgument
        If `matrix` is None.
    """
    if matrix is None:
        raise InvalidArgument("Cannot save None")
    imsave(str(path), to_grayscale_bytes(matrix), check_contrast=False)
    logger.info("Saved %s", path)


# ============================================================================
# Per-Angle Dataset Ingestion
# ============================================================================

def projection_filename(index, extension="png"):
    """Return the file name of projection `index`, e.g. ``"007.png"``."""
    return PROJECTION_NAME_FORMAT.format(index, extension)


def load_projection_stack(directory, slice_index, num_projections=DEFAULT_NUM_PROJECTIONS,
                          width=DEFAULT_DETECTOR_WIDTH, extension="png"):
    """Assemble a sinogram from a directory holding one image per angle.

    Projection ``p`` is read from ``directory/<p:03d>.<extension>``; its row
    `slice_index` becomes row ``p`` of the sinogram.

    Parameters
    ----------
    directory : str or pathlib.Path
        Directory containing the projection images.
    slice_index : int
        Image row to extract from every projection.
    num_projections : int, optional
        Number of projection files (default: 180).
    width : int, optional
        Expected image width (default: 256). Pass None to take it from the
        first image.
    extension : str, optional
        File extension (default: ``"png"``).

    Returns
    -------
    Matrix
        Sinogram of shape ``width x num_projections``.

    Raises
    ------
    FileNotFoundError
        If a projection file is missing.
    SizeMismatch
        If an image is not `width` pixels wide.
    IndexOutOfRange
        If `slice_index` is not a row of an image.
    """
    directory = Path(directory)
    if num_projections < 1:
        raise InvalidArgument(f"Number of projections must be >= 1, got {num_projections}")
    logger.info("Reading slice %d from %d projections in %s",
                slice_index, num_projections, directory)

    sinogram = None
    for p in range(num_projections):
        image = load_image(directory / projection_filename(p, extension))
        if sinogram is None:
            sinogram = Matrix.create(image.width if width is None else width, num_projections)
        sinogram.replace_row(p, image.row(slice_index))
    return sinogram


__all__ = [
    'load_image',
    'save_image',
    'to_grayscale_bytes',
    'projection_filename',
    'load_projection_stack',
]
