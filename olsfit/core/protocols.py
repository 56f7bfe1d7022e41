"""
Core protocols for olsfit.

Backends are described structurally (Protocol) rather than nominally (ABC),
so any object with a name and a solve() method can be plugged into fit().
"""

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar('P')  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Input type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.
    
    A backend takes a validated PointSequence and produces a parameter
    payload wrapped in a Result. Backends are stateless; the output
    convention is passed to solve().
    
    Type Parameters:
        D: The input type this backend accepts
        P: The parameter payload type this backend produces
    """
    
    @property
    def name(self) -> str:
        """
        Backend identifier.
        
        Convention: '{device}_{algorithm}', e.g. 'cpu_sums'.
        """
        ...
    
    def solve(self, design: D, *, convention: str) -> 'Result[P]':
        """
        Execute the fit.
        
        Args:
            design: Validated input
            convention: Output convention name
            
        Returns:
            Result envelope containing parameter payload and metadata
        """
        ...
