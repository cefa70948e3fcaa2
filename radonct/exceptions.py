"""Exception hierarchy for RadonCT.

Every error raised by the package derives from :class:`RadonCTError`. The
concrete classes also derive from the matching builtin so callers can catch
``ValueError`` or ``IndexError`` without importing this module. Errors from
the file system are not wrapped: ``OSError`` propagates unchanged.
"""


class RadonCTError(Exception):
    """Base class for all RadonCT errors."""


class InvalidArgument(RadonCTError, ValueError):
    """Raised for absent inputs, non-positive sizes or out-of-range parameters."""


class SizeMismatch(RadonCTError, ValueError):
    """Raised when an elementwise operation receives operands of different size."""


class IndexOutOfRange(RadonCTError, IndexError):
    """Raised when a coordinate lies outside a vector or matrix."""


__all__ = [
    'RadonCTError',
    'InvalidArgument',
    'SizeMismatch',
    'IndexOutOfRange',
]
