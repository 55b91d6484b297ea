"""GF(2^m) arithmetic with discrete log / antilog tables.

This module builds the finite field used by the BCH construction. Field
elements are m-bit integers (polynomial basis); the primitive root alpha
is the element ``0b10`` (the class of x modulo the primitive polynomial).

Notes
-----
In GF(2^m):
- Addition is XOR
- Multiplication is addition of discrete logarithms modulo N = 2^m - 1

A :class:`FiniteField` is immutable. Every computation in the package
receives the field explicitly; there are no module-level tables.
"""

import numbers
from typing import Any, Optional

import numpy as np

from bchgen.core.constants import (
    DEFAULT_PRIMITIVE_POLYNOMIALS,
    MAX_EXTENSION_DEGREE,
    MIN_EXTENSION_DEGREE,
)
from bchgen.core.exceptions import (
    FieldConsistencyError,
    InvalidLengthError,
    InvalidPrimitivePolynomialError,
    NotPrimitiveError,
)
from bchgen.field.primitivity import is_primitive
from bchgen.utils.logging import get_logger

logger = get_logger(__name__)


def coerce_integer(value: Any) -> Optional[int]:
    """Return value as a Python int if it is a scalar integer, else None.

    Integral floats (e.g. ``19.0``) and numpy integer scalars are accepted;
    booleans, strings, sequences and arrays are not.
    """
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    return None


def is_absent(value: Any) -> bool:
    """Return True for None and for empty lists, tuples or arrays.

    Strings are never absent, so ``""`` is treated as a malformed value.
    """
    if value is None:
        return True
    if isinstance(value, np.ndarray):
        return value.size == 0
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


def extension_degree(n: Any) -> int:
    """Return m such that n = 2^m - 1.

    Parameters
    ----------
    n : Any
        Codeword length.

    Returns
    -------
    int
        Extension degree m in [3, 16].

    Raises
    ------
    InvalidLengthError
        If n is not an integer of the form 2^m - 1 with m in [3, 16].

    Examples
    --------
    >>> extension_degree(15)
    4
    """
    value = coerce_integer(n)
    if value is None or value < 1 or (value + 1) & value:
        raise InvalidLengthError(
            f"Codeword length must be 2^m - 1 for an integer m, got {n!r}"
        )

    m = value.bit_length()
    if not MIN_EXTENSION_DEGREE <= m <= MAX_EXTENSION_DEGREE:
        raise InvalidLengthError(
            f"Codeword length must be 2^m - 1 with m in "
            f"[{MIN_EXTENSION_DEGREE}, {MAX_EXTENSION_DEGREE}], got {n!r}"
        )
    return m


class FiniteField:
    """Binary extension field GF(2^m) defined by a primitive polynomial.

    Parameters
    ----------
    m : int
        Extension degree.
    primitive_polynomial : int
        Primitive polynomial of degree m. Must already be validated;
        use :func:`build_field` to construct fields from user input.

    Attributes
    ----------
    log_table : np.ndarray
        ``log_table[e]`` is the discrete log of element e; entry 0 is -1.
    antilog_table : np.ndarray
        ``antilog_table[i]`` is alpha^i for i in 0 .. N-1.

    Notes
    -----
    Both tables are read-only numpy arrays. Construction steps through
    alpha^0 .. alpha^N by repeated multiplication by x and checks that the
    sequence cycles back to 1 exactly at alpha^N.
    """

    def __init__(self, m: int, primitive_polynomial: int) -> None:
        if primitive_polynomial < 0 or primitive_polynomial.bit_length() != m + 1:
            raise FieldConsistencyError(
                f"Polynomial {primitive_polynomial:#b} does not have degree {m}"
            )
        self._m = m
        self._poly = primitive_polynomial
        self._order = (1 << m) - 1

        log_values = [-1] * (1 << m)
        antilog_values = [0] * self._order

        element = 1
        for exponent in range(self._order):
            if log_values[element] != -1:
                raise FieldConsistencyError(
                    f"alpha^{exponent} repeats alpha^{log_values[element]} "
                    f"for polynomial {primitive_polynomial:#b}"
                )
            antilog_values[exponent] = element
            log_values[element] = exponent

            # Multiply by x, reduce if degree reaches m
            element <<= 1
            if element >> m:
                element ^= primitive_polynomial

        if element != 1:
            raise FieldConsistencyError(
                f"alpha^{self._order} = {element} != 1 "
                f"for polynomial {primitive_polynomial:#b}"
            )

        self._log = np.array(log_values, dtype=np.int64)
        self._antilog = np.array(antilog_values, dtype=self.element_dtype)
        self._log.flags.writeable = False
        self._antilog.flags.writeable = False

    @property
    def m(self) -> int:
        """Return the extension degree."""
        return self._m

    @property
    def primitive_polynomial(self) -> int:
        """Return the primitive polynomial defining the field."""
        return self._poly

    @property
    def order(self) -> int:
        """Return N = 2^m - 1, the size of the multiplicative group."""
        return self._order

    @property
    def size(self) -> int:
        """Return 2^m, the number of field elements."""
        return 1 << self._m

    @property
    def element_dtype(self) -> type:
        """Return the numpy dtype used to store field elements."""
        return np.uint8 if self._m <= 8 else np.uint16

    @property
    def log_table(self) -> np.ndarray:
        """Return the (read-only) discrete log table."""
        return self._log

    @property
    def antilog_table(self) -> np.ndarray:
        """Return the (read-only) antilog table."""
        return self._antilog

    def _check_element(self, element: int) -> None:
        if not 0 <= element < self.size:
            raise ValueError(
                f"{element} is not an element of GF(2^{self._m})"
            )

    def log(self, element: int) -> int:
        """Return the discrete logarithm of a nonzero element.

        Raises
        ------
        ValueError
            If element is zero or not in the field.
        """
        self._check_element(element)
        if element == 0:
            raise ValueError("Logarithm of zero is undefined")
        return int(self._log[element])

    def antilog(self, exponent: int) -> int:
        """Return alpha^exponent (exponent is reduced modulo N)."""
        return int(self._antilog[exponent % self._order])

    def add(self, a: int, b: int) -> int:
        """Add two elements (XOR)."""
        return a ^ b

    def multiply(self, a: int, b: int) -> int:
        """Multiply two elements via the log tables."""
        self._check_element(a)
        self._check_element(b)
        if a == 0 or b == 0:
            return 0
        return int(self._antilog[(self._log[a] + self._log[b]) % self._order])

    def power(self, a: int, exponent: int) -> int:
        """Raise an element to a non-negative integer power.

        Raises
        ------
        ValueError
            If exponent is negative.
        """
        if exponent < 0:
            raise ValueError("Exponent must be non-negative")
        self._check_element(a)
        if exponent == 0:
            return 1
        if a == 0:
            return 0
        return self.antilog(int(self._log[a]) * exponent)

    def inverse(self, a: int) -> int:
        """Return the multiplicative inverse of a nonzero element.

        Raises
        ------
        ValueError
            If a is zero.
        """
        self._check_element(a)
        if a == 0:
            raise ValueError("Zero has no multiplicative inverse")
        return self.antilog(-int(self._log[a]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteField):
            return NotImplemented
        return (self._m, self._poly) == (other._m, other._poly)

    def __hash__(self) -> int:
        return hash((self._m, self._poly))

    def __repr__(self) -> str:
        return f"FiniteField(m={self._m}, primitive_polynomial={self._poly:#b})"


def build_field(m: int, primitive_polynomial: Any = None) -> FiniteField:
    """Construct GF(2^m), validating the primitive polynomial.

    Parameters
    ----------
    m : int
        Extension degree in [3, 16].
    primitive_polynomial : Any, optional
        Primitive polynomial as an integer. None or an empty sequence
        selects the field-standard default for m.

    Returns
    -------
    FiniteField
        The constructed field.

    Raises
    ------
    InvalidLengthError
        If m is outside [3, 16].
    InvalidPrimitivePolynomialError
        If primitive_polynomial is present but not a scalar integer.
    NotPrimitiveError
        If primitive_polynomial is not primitive of degree m.

    Examples
    --------
    >>> field = build_field(3)
    >>> field.antilog(3)
    3
    """
    degree = coerce_integer(m)
    if degree is None or not MIN_EXTENSION_DEGREE <= degree <= MAX_EXTENSION_DEGREE:
        raise InvalidLengthError(
            f"Extension degree must be an integer in "
            f"[{MIN_EXTENSION_DEGREE}, {MAX_EXTENSION_DEGREE}], got {m!r}"
        )

    if is_absent(primitive_polynomial):
        poly = DEFAULT_PRIMITIVE_POLYNOMIALS[degree]
    else:
        poly = coerce_integer(primitive_polynomial)
        if poly is None:
            raise InvalidPrimitivePolynomialError(
                f"Primitive polynomial must be a scalar integer, "
                f"got {primitive_polynomial!r}"
            )
        if not is_primitive(poly, degree):
            raise NotPrimitiveError(
                f"{poly} ({poly:#b}) is not a primitive polynomial of degree {degree}"
            )

    field = FiniteField(degree, poly)
    logger.debug(f"Built {field!r} with {field.order} nonzero elements")
    return field
