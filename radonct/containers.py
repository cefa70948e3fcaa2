"""Dense 1D and 2D containers used by the reconstruction pipeline.

This module provides :class:`Vector`, a fixed-length row of real numbers, and
:class:`Matrix`, a fixed-size stack of equally long row vectors. Both are thin
wrappers around NumPy float64 arrays with bounds-checked accessors, in-place
arithmetic and the silent clipping paste used when assembling images.
"""

import numpy as np

from .constants import _DTYPE
from .exceptions import InvalidArgument, SizeMismatch, IndexOutOfRange
from .kernels import _convolve_1d_kernel


def _is_count(value):
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


# ============================================================================
# Vector
# ============================================================================

class Vector:
    """Fixed-length 1D array of real numbers.

    Use :meth:`create` for a zero-filled vector or :meth:`from_buffer` to wrap
    an existing array. The size never changes after construction.

    Examples
    --------
    >>> v = Vector.create(3)
    >>> v.update(1, 2.5)
    >>> v.get(1)
    2.5
    """

    __slots__ = ('_data',)

    def __init__(self, data):
        # Callers go through create/from_buffer, which validate `data`.
        self._data = data

    @classmethod
    def create(cls, size):
        """Create a zero-filled vector.

        Parameters
        ----------
        size : int
            Number of elements, at least 1.

        Returns
        -------
        Vector
            New vector with every element equal to 0.0.

        Raises
        ------
        InvalidArgument
            If `size` is not an integer or is smaller than 1.
        """
        if not _is_count(size) or size < 1:
            raise InvalidArgument(f"Vector size must be an integer >= 1, got {size!r}")
        return cls(np.zeros(int(size), dtype=_DTYPE))

    @classmethod
    def from_buffer(cls, buffer):
        """Wrap an existing 1D buffer without copying it.

        The vector takes ownership of `buffer`: writes through the vector are
        visible in the buffer and vice versa, so the caller must not keep
        mutating the buffer independently. Inputs that are not float64
        arrays (lists, integer arrays) are converted once, which copies.

        Parameters
        ----------
        buffer : array-like
            Non-empty 1D sequence of numbers.

        Returns
        -------
        Vector
            Vector backed by `buffer`.

        Raises
        ------
        InvalidArgument
            If `buffer` is None, empty or not one-dimensional.
        """
        if buffer is None:
            raise InvalidArgument("Vector buffer must not be None")
        data = np.asarray(buffer, dtype=_DTYPE)
        if data.ndim != 1 or data.shape[0] == 0:
            raise InvalidArgument(
                f"Vector buffer must be a non-empty 1D array, got shape {data.shape}"
            )
        return cls(data)

    @property
    def size(self):
        """Number of elements."""
        return self._data.shape[0]

    @property
    def data(self):
        """Underlying NumPy buffer (shared, not a copy)."""
        return self._data

    def __len__(self):
        return self._data.shape[0]

    def __repr__(self):
        return f"Vector(size={self.size})"

    def _check_index(self, i):
        if not 0 <= i < self._data.shape[0]:
            raise IndexOutOfRange(
                f"Index {i} out of range for vector of size {self.size}"
            )

    def get(self, i):
        """Return element `i`."""
        self._check_index(i)
        return float(self._data[i])

    def update(self, i, value):
        """Set element `i` to `value`."""
        self._check_index(i)
        self._data[i] = value

    def sum(self, other):
        """Add `other` to this vector element by element, in place.

        Raises
        ------
        InvalidArgument
            If `other` is None.
        SizeMismatch
            If `other` has a different size.
        """
        if other is None:
            raise InvalidArgument("Cannot add None to a vector")
        if other.size != self.size:
            raise SizeMismatch(
                f"Cannot add vector of size {other.size} to vector of size {self.size}"
            )
        self._data += other.data

    def max(self):
        """Return the largest (signed) element."""
        return float(self._data.max())

    def paste(self, offset, other):
        """Copy `other` into this vector starting at `offset`.

        Elements of `other` that would land past the end of this vector are
        dropped without error. An offset at or beyond the end copies nothing.

        Parameters
        ----------
        offset : int
            First destination index, non-negative.
        other : Vector
            Source vector.

        Raises
        ------
        InvalidArgument
            If `other` is None.
        IndexOutOfRange
            If `offset` is negative.
        """
        if other is None:
            raise InvalidArgument("Cannot paste None into a vector")
        if offset < 0:
            raise IndexOutOfRange(f"Paste offset must be >= 0, got {offset}")
        count = min(other.size, self.size - offset)
        if count > 0:
            self._data[offset:offset + count] = other.data[:count]

    def convolve(self, kernel):
        """Full discrete linear convolution with `kernel`.

        Parameters
        ----------
        kernel : Vector
            Convolution kernel.

        Returns
        -------
        Vector
            New vector of size ``self.size + kernel.size - 1``. Neither input
            is modified.

        Raises
        ------
        InvalidArgument
            If `kernel` is None.

        Examples
        --------
        >>> a = Vector.from_buffer([1.0, 2.0])
        >>> b = Vector.from_buffer([1.0, 1.0, 1.0])
        >>> a.convolve(b).to_numpy()
        array([1., 3., 3., 2.])
        """
        if kernel is None:
            raise InvalidArgument("Convolution kernel must not be None")
        out = np.zeros(self.size + kernel.size - 1, dtype=_DTYPE)
        _convolve_1d_kernel(self._data, kernel.data, out)
        return Vector(out)

    def copy(self):
        """Return an independent copy."""
        return Vector(self._data.copy())

    def to_numpy(self):
        """Return a copy of the elements as a NumPy array."""
        return self._data.copy()


# ============================================================================
# Matrix
# ============================================================================

class Matrix:
    """Fixed-size 2D array made of `height` row vectors of length `width`.

    Elements are addressed as ``(x, y)``: `x` is the column, `y` the row.
    Storage is a single C-contiguous ``(height, width)`` array; each row
    :class:`Vector` wraps a view of one array row, so edits made through
    :meth:`row` show up in the matrix.

    Examples
    --------
    >>> m = Matrix.create(4, 2)
    >>> m.update(3, 1, 7.0)
    >>> m.row(1).get(3)
    7.0
    """

    __slots__ = ('_data', '_rows')

    def __init__(self, data):
        self._data = data
        self._rows = [Vector(data[y]) for y in range(data.shape[0])]

    @classmethod
    def create(cls, width, height):
        """Create a zero-filled matrix.

        Raises
        ------
        InvalidArgument
            If `width` or `height` is not an integer or is smaller than 1.
        """
        if not (_is_count(width) and _is_count(height)) or width < 1 or height < 1:
            raise InvalidArgument(
                f"Matrix dimensions must be integers >= 1, got {width!r}x{height!r}"
            )
        return cls(np.zeros((int(height), int(width)), dtype=_DTYPE))

    @classmethod
    def from_array(cls, array):
        """Wrap a 2D array of shape (height, width).

        No copy is made when `array` is already a C-contiguous float64 array;
        the matrix then owns it in the same sense as :meth:`Vector.from_buffer`.

        Raises
        ------
        InvalidArgument
            If `array` is None, empty or not two-dimensional.
        """
        if array is None:
            raise InvalidArgument("Matrix array must not be None")
        data = np.ascontiguousarray(array, dtype=_DTYPE)
        if data.ndim != 2 or data.size == 0:
            raise InvalidArgument(
                f"Matrix array must be a non-empty 2D array, got shape {data.shape}"
            )
        return cls(data)

    @property
    def width(self):
        """Number of columns."""
        return self._data.shape[1]

    @property
    def height(self):
        """Number of rows."""
        return self._data.shape[0]

    @property
    def shape(self):
        """``(height, width)``, matching the NumPy layout."""
        return self._data.shape

    @property
    def data(self):
        """Underlying ``(height, width)`` NumPy array (shared, not a copy)."""
        return self._data

    def __repr__(self):
        return f"Matrix(width={self.width}, height={self.height})"

    def _check_coords(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexOutOfRange(
                f"Coordinates ({x}, {y}) out of range for {self.width}x{self.height} matrix"
            )

    def _check_row(self, y):
        if not 0 <= y < self.height:
            raise IndexOutOfRange(
                f"Row {y} out of range for matrix of height {self.height}"
            )

    def get(self, x, y):
        """Return the element in column `x`, row `y`."""
        self._check_coords(x, y)
        return float(self._data[y, x])

    def update(self, x, y, value):
        """Set the element in column `x`, row `y` to `value`."""
        self._check_coords(x, y)
        self._data[y, x] = value

    def row(self, y):
        """Return row `y` by reference.

        The returned :class:`Vector` shares storage with this matrix and stays
        valid for the matrix's lifetime; writing to it edits the matrix.
        """
        self._check_row(y)
        return self._rows[y]

    def sum(self, other):
        """Add `other` to this matrix element by element, in place.

        Raises
        ------
        InvalidArgument
            If `other` is None.
        SizeMismatch
            If the dimensions differ.
        """
        if other is None:
            raise InvalidArgument("Cannot add None to a matrix")
        if other.shape != self.shape:
            raise SizeMismatch(
                f"Cannot add {other.width}x{other.height} matrix to "
                f"{self.width}x{self.height} matrix"
            )
        self._data += other.data

    def sum_columns(self):
        """Sum every column over all rows.

        Returns
        -------
        Vector
            Vector of length `width` whose element `k` is the sum of column
            `k`. This is the discrete line integral along the columns.
        """
        line = Vector.create(self.width)
        for row in self._rows:
            line.sum(row)
        return line

    def max(self):
        """Return the largest (signed) element of the whole matrix."""
        return float(self._data.max())

    def paste_region(self, x, y, other):
        """Copy `other` into this matrix with its top-left corner at ``(x, y)``.

        Columns and rows of `other` that fall outside this matrix are dropped
        without error, independently along each axis.

        Raises
        ------
        InvalidArgument
            If `other` is None.
        IndexOutOfRange
            If `x` or `y` is negative.
        """
        if other is None:
            raise InvalidArgument("Cannot paste None into a matrix")
        if x < 0 or y < 0:
            raise IndexOutOfRange(f"Paste offset must be >= 0, got ({x}, {y})")
        paste_height = min(other.height, self.height - y)
        for yy in range(max(paste_height, 0)):
            self._rows[y + yy].paste(x, other.row(yy))

    def replace_row(self, y, vector):
        """Overwrite row `y` with `vector`.

        Unlike :meth:`paste_region` no clipping takes place.

        Raises
        ------
        InvalidArgument
            If `vector` is None.
        SizeMismatch
            If ``vector.size`` differs from `width`.
        IndexOutOfRange
            If `y` is not a valid row.
        """
        if vector is None:
            raise InvalidArgument("Replacement row must not be None")
        if vector.size != self.width:
            raise SizeMismatch(
                f"Row of size {vector.size} does not fit matrix of width {self.width}"
            )
        self._check_row(y)
        self._data[y, :] = vector.data

    def copy(self):
        """Return an independent copy."""
        return Matrix(self._data.copy())

    def to_numpy(self):
        """Return a copy of the elements as a ``(height, width)`` NumPy array."""
        return self._data.copy()


__all__ = ['Vector', 'Matrix']
