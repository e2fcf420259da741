"""
Core protocols for pygauss.

Structural interfaces that backends must satisfy. Protocol (structural
typing) rather than ABC keeps backends plain classes that are easy to
test and swap.
"""

from typing import Protocol, TypeVar, runtime_checkable

from pygauss.core.result import Result

D = TypeVar('D')  # Design type
P = TypeVar('P')  # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a parameter payload
    wrapped in a Result. Backends are stateless: all configuration travels
    with the design or is fixed at construction time.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss'.
        """
        ...

    def solve(self, design: D) -> Result[P]:
        """
        Execute the computation.

        Raises:
            CalculationError: If the system cannot be solved
            ValidationError: If design is invalid for this backend
        """
        ...
