"""
Exception hierarchy for olsfit.

All exceptions inherit from OlsFitError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Zero variance in x is deliberately absent: a degenerate fit is reported
as NaN/Inf coefficients plus a RuntimeWarning, not as an exception.
"""


class OlsFitError(Exception):
    """Base exception for all olsfit errors."""
    pass


class ValidationError(OlsFitError):
    """
    Input validation failed.
    
    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.
    
    Raised when x and y have different lengths or are not 1-dimensional.
    """
    pass


class InputError(OlsFitError):
    """
    Point input could not be read.
    
    Attributes:
        path: File that failed to open or read, if any
    """
    
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ParseError(InputError):
    """
    The token scanner could not turn the input into points.
    
    No partial point sequence is ever returned alongside this error.
    """
    pass


class TokenOverflowError(ParseError):
    """
    A numeric token ran past the scanner's maximum length.
    
    Attributes:
        max_length: The token length limit that was exceeded
        offset: Byte offset in the stream where the token started
    """
    
    def __init__(
        self,
        message: str,
        max_length: int,
        offset: int | None = None,
        path: str | None = None,
    ):
        super().__init__(message, path=path)
        self.max_length = max_length
        self.offset = offset
