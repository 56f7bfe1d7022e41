"""
Core infrastructure for olsfit.

Shared abstractions used by the point data model and the regression solver.

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from olsfit.core.protocols import Backend
from olsfit.core.result import Result
from olsfit.core.exceptions import (
    OlsFitError,
    ValidationError,
    DimensionError,
    InputError,
    ParseError,
    TokenOverflowError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "OlsFitError",
    "ValidationError",
    "DimensionError",
    "InputError",
    "ParseError",
    "TokenOverflowError",
]
