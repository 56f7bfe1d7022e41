"""
Generic result container for olsfit computations.

The Result class is the envelope every backend returns. It keeps the
numeric payload separate from metadata (method, timing, warnings) so
that the user-facing solution can expose both without recomputation.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (convention, degeneracy)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for a fit.
    
    Type Parameters:
        P: The parameter payload type
        
    Attributes:
        params: Parameter payload (intercept, slope, sums)
        info: Structured metadata (method, convention, degenerate)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
    
    Examples:
        >>> Result(
        ...     params=FitParams(...),
        ...     info={'method': 'normal_equations', 'convention': 'slope_intercept'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_sums'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    
    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
