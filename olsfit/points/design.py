"""
Point sequence design.

PointSequence holds the (x, y) observations a fit consumes. It is built
once from arrays, pairs, command-line arguments or a scanned file and is
read-only afterwards: both coordinate arrays are flagged non-writeable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from olsfit.core.exceptions import InputError, ValidationError
from olsfit.core.validation import check_array, check_1d, check_consistent_length
from olsfit.points.scanner import MAX_TOKEN_LENGTH, scan, scan_bytes


@dataclass(frozen=True, eq=False)
class PointSequence:
    """
    Ordered, immutable sequence of (x, y) points.

    Construction:
        PointSequence.from_arrays(x, y)
        PointSequence.from_pairs([(43, 99), (21, 65)])
        PointSequence.from_arguments(['43', '99', '21', '65'])
        PointSequence.from_file('data.csv')
        PointSequence.from_bytes(b'43,99\\n21,65')

    An empty sequence is allowed here; fit() is what requires points.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    _metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_arrays(cls, x: ArrayLike, y: ArrayLike) -> PointSequence:
        """Build from separate x and y arrays."""
        return cls._build(check_array(x, 'x'), check_array(y, 'y'), source='arrays')

    @classmethod
    def from_pairs(cls, pairs: Iterable[Sequence[float]]) -> PointSequence:
        """
        Build from an iterable of (x, y) pairs.

        Raises:
            ValidationError: If any element is not a pair
        """
        arr = check_array(list(pairs), 'pairs')
        if arr.size == 0:
            arr = arr.reshape(0, 2)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValidationError(
                f"pairs: expected a sequence of (x, y) pairs, got shape {arr.shape}"
            )
        return cls._build(arr[:, 0], arr[:, 1], source='pairs')

    @classmethod
    def from_arguments(cls, args: Sequence[str]) -> PointSequence:
        """
        Build from a flat x1 y1 x2 y2 ... argument list.

        An odd trailing argument is ignored; callers that want to warn
        about it can compare len(args) with 2 * n.

        Raises:
            ValidationError: If an argument is not a number
        """
        values = []
        for i, arg in enumerate(args[:len(args) - len(args) % 2]):
            try:
                values.append(float(arg))
            except ValueError:
                raise ValidationError(
                    f"argument {i + 1}: {arg!r} is not a number"
                ) from None
        it = iter(values)
        seq = cls.from_pairs(list(zip(it, it)))
        seq._metadata.update(source='arguments', n_arguments=len(args))
        return seq

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        *,
        max_token_length: int = MAX_TOKEN_LENGTH,
    ) -> PointSequence:
        """Build by scanning an in-memory buffer of numeric tokens."""
        pairs = scan_bytes(data, max_token_length=max_token_length)
        seq = cls.from_pairs(pairs)
        seq._metadata.update(source='bytes')
        return seq

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        *,
        max_token_length: int = MAX_TOKEN_LENGTH,
    ) -> PointSequence:
        """
        Build by scanning a file of delimiter-separated numbers.

        Any non-numeric byte separates tokens, so CSV, TSV and
        whitespace-separated files all work.

        Raises:
            InputError: If the file cannot be opened or read
            TokenOverflowError: If a token exceeds max_token_length
        """
        path = Path(path)
        try:
            with path.open('rb') as f:
                pairs = scan(f, max_token_length=max_token_length, source=str(path))
        except OSError as e:
            raise InputError(
                f"Could not read file '{path}': {e.strerror or e}",
                path=str(path),
            ) from e
        seq = cls.from_pairs(pairs)
        seq._metadata.update(source='file', source_path=str(path))
        return seq

    @classmethod
    def _build(
        cls,
        x: NDArray[np.floating[Any]],
        y: NDArray[np.floating[Any]],
        source: str,
    ) -> PointSequence:
        """Internal builder with validation."""
        check_1d(x, 'x')
        check_1d(y, 'y')
        check_consistent_length(x, y, names=('x', 'y'))

        x = np.array(x, dtype=np.float64)
        y = np.array(y, dtype=np.float64)
        x.flags.writeable = False
        y.flags.writeable = False
        return cls(_x=x, _y=y, _metadata={'source': source})

    # === Properties ===

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """x coordinates (n,), read-only."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """y coordinates (n,), read-only."""
        return self._y

    @property
    def n(self) -> int:
        """Number of points."""
        return int(self._x.shape[0])

    @property
    def metadata(self) -> dict[str, Any]:
        """Where the points came from."""
        return self._metadata.copy()

    def swapped(self) -> PointSequence:
        """Return a new sequence with x and y exchanged for every point."""
        return PointSequence(
            _x=self._y,
            _y=self._x,
            _metadata={**self._metadata, 'swapped': not self._metadata.get('swapped', False)},
        )

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self._x.tolist(), self._y.tolist())

    def __getitem__(self, index: int) -> tuple[float, float]:
        return float(self._x[index]), float(self._y[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointSequence):
            return NotImplemented
        return (
            np.array_equal(self._x, other._x, equal_nan=True)
            and np.array_equal(self._y, other._y, equal_nan=True)
        )

    def __repr__(self) -> str:
        return f"PointSequence(n={self.n}, source={self._metadata.get('source')!r})"
