"""Generator polynomial computation for narrow-sense binary BCH codes.

This module is the entry point of the package. It validates the request,
builds the field, determines the error-correcting capability and
assembles the generator polynomial.

Notes
-----
Every call builds its own :class:`~bchgen.field.arithmetic.FiniteField`;
nothing is cached between calls, so identical inputs always produce
identical outputs and concurrent callers share no state.

Examples
--------
>>> genpoly, t = compute_generator_polynomial(15, 5)
>>> genpoly
[1, 0, 1, 0, 0, 1, 1, 0, 1, 1, 1]
>>> t
3
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple, Union

import numpy as np

from bchgen.codes import gf2poly
from bchgen.codes.capability import capability
from bchgen.codes.cosets import decompose
from bchgen.codes.generator import assemble
from bchgen.core.constants import OUTPUT_BINARY, OUTPUT_GF
from bchgen.core.exceptions import FieldConsistencyError, InvalidOutputFormatError
from bchgen.field.arithmetic import FiniteField, build_field, extension_degree
from bchgen.utils.logging import get_logger

logger = get_logger(__name__)


class OutputFormat(Enum):
    """Representation of the generator polynomial coefficients.

    BINARY_COEFFS
        Plain Python ints 0 and 1 in a list.
    FIELD_ELEMENTS
        A numpy array whose dtype is the field's element dtype, i.e. the
        coefficients embedded as elements 0 and 1 of GF(2^m).
    """

    BINARY_COEFFS = OUTPUT_BINARY
    FIELD_ELEMENTS = OUTPUT_GF


def parse_output_format(value: Any) -> OutputFormat:
    """Validate an output format given as an enum member or its string value.

    Raises
    ------
    InvalidOutputFormatError
        If value is not a supported representation.
    """
    if isinstance(value, OutputFormat):
        return value
    if isinstance(value, str):
        try:
            return OutputFormat(value.lower())
        except ValueError:
            pass
    supported = ", ".join(repr(f.value) for f in OutputFormat)
    raise InvalidOutputFormatError(
        f"Output format must be one of {supported}, got {value!r}"
    )


def compute_generator_polynomial(
    n: int,
    k: int,
    primitive_polynomial: Any = None,
    output_format: Union[OutputFormat, str] = OutputFormat.BINARY_COEFFS,
) -> Tuple[Union[List[int], np.ndarray], int]:
    """Compute the generator polynomial of a narrow-sense binary BCH code.

    Parameters
    ----------
    n : int
        Codeword length, 2^m - 1 with m in [3, 16].
    k : int
        Message length, 0 < k < n.
    primitive_polynomial : Any, optional
        Primitive polynomial of GF(n + 1) whose root is alpha, as an
        integer with coefficients in descending powers. None or an empty
        sequence selects the field-standard default.
    output_format : Union[OutputFormat, str], optional
        Coefficient representation (default BINARY_COEFFS).

    Returns
    -------
    Tuple[Union[List[int], np.ndarray], int]
        The n - k + 1 generator coefficients in descending powers (leading
        entry 1) and the error-correcting capability t.

    Raises
    ------
    InvalidLengthError
        If n is not 2^m - 1 with m in [3, 16].
    InvalidOutputFormatError
        If output_format is not supported.
    InvalidPrimitivePolynomialError
        If primitive_polynomial is present but not a scalar integer.
    NotPrimitiveError
        If primitive_polynomial does not generate GF(n + 1).
    InvalidMessageLengthError
        If no BCH code of length n has message length k.
    FieldConsistencyError
        On internal invariant failure.
    """
    fmt = parse_output_format(output_format)
    field, generator, t = _solve(n, k, primitive_polynomial)

    if fmt is OutputFormat.FIELD_ELEMENTS:
        return np.array(generator, dtype=field.element_dtype), t
    return generator, t


def _solve(
    n: Any, k: Any, primitive_polynomial: Any
) -> Tuple[FiniteField, List[int], int]:
    m = extension_degree(n)
    field = build_field(m, primitive_polynomial)

    t = capability(field, k)
    generator = generator_for(field, t)

    expected = field.order - int(k)
    if len(generator) != expected + 1:
        raise FieldConsistencyError(
            f"Generator polynomial has degree {len(generator) - 1}, expected {expected}"
        )

    logger.info(
        f"BCH({field.order},{int(k)}) t={t}: g(x) = {gf2poly.to_string(generator)}"
    )
    return field, generator, t


def generator_for(field: FiniteField, t: int) -> List[int]:
    """Assemble the generator polynomial of a field for a given capability."""
    return assemble(field, t, decompose(field))


@dataclass(frozen=True)
class BCHCode:
    """A narrow-sense binary BCH code and its generator polynomial.

    Attributes
    ----------
    n : int
        Codeword length.
    k : int
        Message length.
    t : int
        Error-correcting capability.
    m : int
        Extension degree of the field.
    primitive_polynomial : int
        Primitive polynomial defining alpha.
    generator : Tuple[int, ...]
        Binary generator coefficients, highest power first.
    """

    n: int
    k: int
    t: int
    m: int
    primitive_polynomial: int
    generator: Tuple[int, ...]

    @property
    def design_distance(self) -> int:
        """Return the designed distance 2t + 1."""
        return 2 * self.t + 1

    @property
    def rate(self) -> float:
        """Return the code rate k / n."""
        return self.k / self.n

    @property
    def polynomial_string(self) -> str:
        """Return g(x) formatted as a sum of powers of x."""
        return gf2poly.to_string(self.generator)

    def is_cyclic_generator(self) -> bool:
        """Check that g(x) divides x^n - 1."""
        return gf2poly.divides(gf2poly.bits_to_int(self.generator), self.n)


def design_code(n: int, k: int, primitive_polynomial: Any = None) -> BCHCode:
    """Compute a BCH code description for (n, k).

    Parameters
    ----------
    n : int
        Codeword length.
    k : int
        Message length.
    primitive_polynomial : Any, optional
        Primitive polynomial; None selects the default.

    Returns
    -------
    BCHCode
        Code parameters and generator polynomial.

    Raises
    ------
    BCHError
        Any error raised by :func:`compute_generator_polynomial`.
    """
    field, generator, t = _solve(n, k, primitive_polynomial)
    return BCHCode(
        n=field.order,
        k=int(k),
        t=t,
        m=field.m,
        primitive_polynomial=field.primitive_polynomial,
        generator=tuple(generator),
    )
