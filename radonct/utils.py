"""Utility classes and helper functions for RadonCT package.

This module provides the bridge between PyTorch tensors, NumPy arrays and
:class:`~radonct.containers.Matrix`, and the angular-step arithmetic shared by
forward projection and reconstruction.
"""

import numpy as np
import torch

from .constants import _DTYPE
from .containers import Matrix
from .exceptions import InvalidArgument


# ============================================================================
# PyTorch Bridge
# ============================================================================

class TorchBridge:
    """Bridge between PyTorch tensors and RadonCT matrices."""

    @staticmethod
    def tensor_to_matrix(tensor):
        """Convert a 2D PyTorch tensor to a :class:`Matrix`.

        The tensor is detached and moved to the CPU first, so tensors that
        require gradients or live on a CUDA device are accepted.

        Parameters
        ----------
        tensor : torch.Tensor
            2D tensor of shape (H, W).

        Returns
        -------
        Matrix
            Matrix with ``width == W`` and ``height == H``.

        Raises
        ------
        InvalidArgument
            If `tensor` is not two-dimensional or is empty.

        Examples
        --------
        >>> TorchBridge.tensor_to_matrix(torch.ones(2, 3))
        Matrix(width=3, height=2)
        """
        if tensor.dim() != 2:
            raise InvalidArgument(f"Expected 2D tensor, got {tensor.dim()}D")
        return Matrix.from_array(tensor.detach().cpu().numpy())

    @staticmethod
    def matrix_to_tensor(matrix, device=None, dtype=torch.float64):
        """Convert a :class:`Matrix` to a PyTorch tensor.

        Parameters
        ----------
        matrix : Matrix
            Matrix to convert.
        device : torch.device or str, optional
            Target device. Defaults to the CPU.
        dtype : torch.dtype, optional
            Tensor data type (default: torch.float64).

        Returns
        -------
        torch.Tensor
            Tensor of shape (height, width). On the CPU with the default dtype
            the tensor shares memory with `matrix`.
        """
        tensor = torch.from_numpy(matrix.data)
        if device is not None or dtype != tensor.dtype:
            tensor = tensor.to(device=device, dtype=dtype)
        return tensor


def as_matrix(data):
    """Return `data` as a :class:`Matrix`.

    Matrices are returned unchanged, 2D NumPy arrays (or nested sequences) are
    wrapped and PyTorch tensors go through :class:`TorchBridge`.

    Raises
    ------
    InvalidArgument
        If `data` is None or cannot be read as a non-empty 2D array.
    """
    if data is None:
        raise InvalidArgument("Expected an image, got None")
    if isinstance(data, Matrix):
        return data
    if isinstance(data, torch.Tensor):
        return TorchBridge.tensor_to_matrix(data)
    try:
        array = np.asarray(data, dtype=_DTYPE)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"Cannot convert {type(data).__name__} to a matrix") from exc
    return Matrix.from_array(array)


# ============================================================================
# Angular Step Arithmetic
# ============================================================================

def _angle_step(angular_range, count, truncate=True):
    """Angle in degrees between two consecutive projections.

    Parameters
    ----------
    angular_range : float
        Total angular range in degrees.
    count : int
        Number of projections covering the range.
    truncate : bool, optional
        If True (default) the step is rounded down to whole degrees.
        Ranges that are not a multiple of `count` then cover less than
        `angular_range`. If False, the exact quotient is used.

    Returns
    -------
    float
        The angular step.

    Examples
    --------
    >>> _angle_step(180, 4)
    45.0
    >>> _angle_step(180, 7)
    25.0
    >>> round(_angle_step(180, 7, truncate=False), 4)
    25.7143
    """
    if truncate:
        return float(np.floor(angular_range / count))
    return angular_range / count


__all__ = ['TorchBridge', 'as_matrix']
