"""
Shared compute infrastructure for olsfit.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from olsfit.core.compute.timing import Timer, timed
from olsfit.core.compute.tolerances import ToleranceTier, CPU_FP64

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
]
