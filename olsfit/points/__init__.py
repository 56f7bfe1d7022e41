"""
Point input for olsfit.

Public API:
    PointSequence: validated, read-only (x, y) data
    scan(stream) / scan_bytes(data): free-form numeric token scanner

Example:
    >>> from olsfit.points import PointSequence
    >>> points = PointSequence.from_file("data.csv")
    >>> points.n
    6
"""

from olsfit.points.design import PointSequence
from olsfit.points.scanner import (
    MAX_TOKEN_LENGTH,
    scan,
    scan_bytes,
    iter_tokens,
    parse_token,
)

__all__ = [
    "PointSequence",
    "MAX_TOKEN_LENGTH",
    "scan",
    "scan_bytes",
    "iter_tokens",
    "parse_token",
]
