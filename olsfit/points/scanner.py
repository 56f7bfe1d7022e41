"""
Free-form numeric token scanner.

Turns any byte stream into (x, y) pairs. Every byte is either digit-class
(ASCII digit, '.', '-') or a separator; anything else counts as a separator,
so commas, tabs, newlines and letters all delimit tokens equally.

    43,99
    21;65
    25 79   ->  [(43.0, 99.0), (21.0, 65.0), (25.0, 79.0)]

Tokens are read x, y, x, y, ... A trailing x without its y is dropped.
'-' is always digit-class, so '3-4' is one token and parses as 3.0.
"""

from __future__ import annotations

import re
from typing import BinaryIO, Iterable, Iterator

from olsfit.core.exceptions import TokenOverflowError


MAX_TOKEN_LENGTH = 256

# A maximal run of digit-class bytes. Separator runs never match,
# so they produce no token at all.
_TOKEN = re.compile(rb'[0-9.\-]+')

# strtod-style prefix over the digit-class alphabet
_NUMERIC_PREFIX = re.compile(rb'-?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)')


def parse_token(token: bytes) -> float | None:
    """
    Parse the longest numeric prefix of a token.
    
    Characters after the prefix are ignored, as C's strtod does:
    b'3-4' -> 3.0, b'1.2.3' -> 1.2, b'7-' -> 7.0.
    
    Returns:
        The value, or None when the token has no numeric prefix
        (b'-', b'.', b'--1').
    """
    match = _NUMERIC_PREFIX.match(token)
    if match is None:
        return None
    return float(match.group().decode('ascii'))


def iter_tokens(
    data: bytes,
    *,
    max_token_length: int = MAX_TOKEN_LENGTH,
    source: str | None = None,
) -> Iterator[float]:
    """
    Yield the numeric value of every token in data, in order.
    
    A token without a numeric prefix (b"-", b".") repeats the last
    value read, or 0.0 before any, the way a failed sscanf leaves its
    target untouched. It still takes its x or y slot.
    
    Raises:
        TokenOverflowError: A token is longer than max_token_length
    """
    last = 0.0
    for match in _TOKEN.finditer(data):
        token = match.group()
        if len(token) > max_token_length:
            where = f" in '{source}'" if source else ""
            raise TokenOverflowError(
                f"Numeric token at byte {match.start()}{where} is {len(token)} "
                f"characters long, limit is {max_token_length}",
                max_length=max_token_length,
                offset=match.start(),
                path=source,
            )
        value = parse_token(token)
        if value is not None:
            last = value
        yield last


def pair_values(values: Iterable[float]) -> list[tuple[float, float]]:
    """Group values as (x, y) pairs, dropping an incomplete trailing pair."""
    it = iter(values)
    return list(zip(it, it))


def scan_bytes(
    data: bytes,
    *,
    max_token_length: int = MAX_TOKEN_LENGTH,
    source: str | None = None,
) -> list[tuple[float, float]]:
    """
    Scan an in-memory buffer into (x, y) pairs.
    
    Args:
        data: Raw input
        max_token_length: Longest numeric token accepted
        source: Name used in error messages (usually a file path)
        
    Returns:
        Complete pairs in input order
        
    Raises:
        TokenOverflowError: A token exceeded max_token_length. Nothing
            is returned in that case, not even the pairs read so far.
    """
    return pair_values(
        iter_tokens(data, max_token_length=max_token_length, source=source)
    )


def scan(
    stream: BinaryIO,
    *,
    max_token_length: int = MAX_TOKEN_LENGTH,
    source: str | None = None,
) -> list[tuple[float, float]]:
    """
    Read a binary stream to the end and scan it into (x, y) pairs.
    
    See scan_bytes() for details. The stream is not closed.
    """
    return scan_bytes(stream.read(), max_token_length=max_token_length, source=source)
