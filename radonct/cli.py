"""Command-line driver for the reconstruction pipeline.

Builds a sinogram, either from a directory of per-angle projection images or
from a synthetic phantom, and writes the sinogram, the plain backprojection,
the ramp-filtered sinogram and the filtered backprojection as PNG files.
"""

import argparse
import logging
import sys
from pathlib import Path

from .constants import (
    DEFAULT_ANGULAR_RANGE,
    DEFAULT_DETECTOR_WIDTH,
    DEFAULT_NUM_PROJECTIONS,
    DEFAULT_SLICE_INDEX,
)
from .exceptions import RadonCTError
from .filters import apply_filter
from .io import load_projection_stack, save_image
from .phantoms import point_phantom, shepp_logan_2d
from .projectors import make_sinogram, reconstruct

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Configure logging to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def run_pipeline(sinogram, angular_range, output, prefix, truncate_step=True):
    """Save the sinogram and both reconstructions under `output`.

    Files are named ``<prefix>sin.png``, ``<prefix>slice.png``,
    ``<prefix>sinf.png`` and ``<prefix>slicef.png``. The sinogram is
    filtered in place. Returns the filtered reconstruction.
    """
    output.mkdir(parents=True, exist_ok=True)
    save_image(output / f"{prefix}sin.png", sinogram)

    logger.info("Reconstructing a slice from the unfiltered sinogram")
    save_image(output / f"{prefix}slice.png",
               reconstruct(sinogram, angular_range, truncate_step))

    logger.info("Filtering sinogram")
    apply_filter(sinogram)
    save_image(output / f"{prefix}sinf.png", sinogram)

    logger.info("Reconstructing a slice from the filtered sinogram")
    slice_f = reconstruct(sinogram, angular_range, truncate_step)
    save_image(output / f"{prefix}slicef.png", slice_f)
    return slice_f


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="radonct", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--projections", type=int, default=DEFAULT_NUM_PROJECTIONS,
                        help="Number of projections.")
    common.add_argument("--range", dest="angular_range", type=float, default=DEFAULT_ANGULAR_RANGE,
                        help="Angular range covered by the projections, in degrees.")
    common.add_argument("--output", type=Path, default=Path("output"),
                        help="Directory for the output images.")
    common.add_argument("--exact-step", action="store_true",
                        help="Use the exact angular step instead of whole degrees.")

    dataset = subparsers.add_parser("dataset", parents=[common],
                                    help="Reconstruct one slice of a per-angle image directory.")
    dataset.add_argument("directory", type=Path, help="Directory with 000.png, 001.png, ...")
    dataset.add_argument("--slice", dest="slice_index", type=int, default=DEFAULT_SLICE_INDEX,
                         help="Image row to reconstruct.")
    dataset.add_argument("--width", type=int, default=DEFAULT_DETECTOR_WIDTH,
                         help="Width of the projection images.")

    phantom = subparsers.add_parser("phantom", parents=[common],
                                    help="Simulate and reconstruct a synthetic phantom.")
    phantom.add_argument("--size", type=int, default=129, help="Phantom side length in pixels.")
    phantom.add_argument("--point", action="store_true",
                         help="Use a single centre pixel instead of Shepp-Logan (odd size).")
    phantom.add_argument("--extend", action="store_true",
                         help="Pad the phantom so rotation does not cut its corners.")
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point of the ``radonct`` console script."""
    args = _parse_args(argv)
    setup_logging(args.verbose)
    truncate_step = not args.exact_step
    try:
        if args.command == "dataset":
            logger.info("Processing slice No %d", args.slice_index)
            sinogram = load_projection_stack(args.directory, args.slice_index,
                                             args.projections, args.width)
            prefix = str(args.slice_index)
        else:
            image = point_phantom(args.size) if args.point else shepp_logan_2d(args.size, args.size)
            sinogram = make_sinogram(image, args.angular_range, args.projections,
                                     truncate_step=truncate_step, extend_phantom=args.extend)
            prefix = "phantom"
        run_pipeline(sinogram, args.angular_range, args.output, prefix, truncate_step)
    except (RadonCTError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
