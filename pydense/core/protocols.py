"""
Core protocols for pydense.

These define structural interfaces that element types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that float, complex, NumPy scalars, fractions.Fraction and automatic
differentiation numbers all qualify without registering anywhere.

Design Principles:
    - Minimal contracts: prescribe only what the kernels actually call
    - Identities are the Python ints 0 and 1, which promote into any
      conforming type
"""

from typing import Protocol, Any, runtime_checkable


@runtime_checkable
class Scalar(Protocol):
    """
    The scalar contract for matrix and tensor elements.

    Elimination needs the four arithmetic operations and negation; pivot
    selection and the norms need a magnitude (``abs``) whose results can be
    ordered. For real numbers the magnitude is the absolute value, for
    complex numbers the modulus.

    Note:
        isinstance() checks against this protocol only verify that the
        methods exist, not their signatures or the ordering of abs().
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...

    def __neg__(self) -> Any:
        ...

    def __abs__(self) -> Any:
        ...
