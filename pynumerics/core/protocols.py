"""
Core protocols for PyNumerics.

Backends are matched structurally (Protocol) rather than nominally (ABC),
so a domain backend only needs a name and a solve() method.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pynumerics.core.result import Result

# Type variables for generic payloads
P = TypeVar('P', covariant=True)  # Parameter payload type
D = TypeVar('D', contravariant=True)  # Design type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a domain-specific design and produces a
    domain-specific parameter payload wrapped in a Result.

    Backends are stateless: all inputs arrive through the design. This
    makes them safe to share between callers and easy to swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}'
        Examples: 'cpu_moments', 'cpu_normal_equations'
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Degenerate designs produce a zero payload with a warning; they
        never raise.
        """
        ...
