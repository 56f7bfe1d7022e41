"""
Tolerance tiers for numerical validation.

The closed-form solver runs in float64 with naive summation, so results
carry accumulated rounding error. These tiers say how close two fits of
the same data must be.

Used by the test suite when comparing the two solver conventions
and when checking against an independent reference fit.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Same data, same sums, different algebraic arrangement
CPU_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, naive summation',
)

# Comparison against an independent reference implementation
# (different summation order, centred formulas)
CPU_FP64_REFERENCE = ToleranceTier(
    rtol=1e-7,
    atol=1e-9,
    name='cpu_fp64_reference',
    description='CPU double precision vs. independent reference fit',
)


def select_tolerance(against_reference: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a comparison."""
    if against_reference:
        return CPU_FP64_REFERENCE
    return CPU_FP64
