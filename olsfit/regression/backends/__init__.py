"""
Regression backends.

Available backends:
    CPUSumsBackend: closed-form OLS from running sums
"""

from olsfit.regression.backends.cpu import CPUSumsBackend

__all__ = [
    "CPUSumsBackend",
]
