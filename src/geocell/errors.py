"""
Exception hierarchy for geocell.

Every error raised by the package derives from :class:`GeoCellError`, which is
itself a :class:`ValueError` so plain ``except ValueError`` handlers keep
working.
"""
from typing import Any, Optional


class GeoCellError(ValueError):
    """Base exception for all geocell errors.

    Attributes:
        field: Name of the offending argument, if known
        value: The rejected value, if known
    """

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value

    def __str__(self):
        base = super().__str__()
        if self.field is not None:
            return f"{base} ({self.field}={self.value!r})"
        return base


class InvalidArgumentError(GeoCellError):
    """A code or argument is malformed.

    Raised for empty codes, codes over the maximum length, a bad axis start
    index, or a bit length that does not match a base32 code.

    Example:
        >>> raise InvalidArgumentError("base32 code must not be empty", field="code", value="")
    """
    pass


class OutOfRangeError(InvalidArgumentError):
    """A coordinate or precision lies outside its open interval.

    Example:
        >>> raise OutOfRangeError("longitude must be in (-180, 180)", field="lon", value=180.0)
    """
    pass


class InvalidAlphabetError(InvalidArgumentError):
    """A symbol is outside the alphabet of the code being decoded."""
    pass


class BoundaryExceededError(GeoCellError):
    """A table-driven move ran past the top-level cell without resolving.

    The neighbor lies outside the grid (beyond the poles or the
    anti-meridian) and the lookup tables cannot express it.
    """
    pass
