"""Polynomials over GF(2).

Two representations are used throughout the package:

- coefficient lists, most-significant (highest power) first, e.g.
  ``[1, 0, 1, 1]`` for x^3 + x + 1. This is the external form.
- Python integers whose binary representation is the coefficient list,
  e.g. ``0b1011``. Multiplication and reduction work on this form, where
  coefficient addition is XOR of whole words.

Notes
-----
Leading zeros are meaningful in the list form (fixed-width minimal
polynomials) and vanish in the integer form.
"""

from typing import List, Sequence


def bits_to_int(bits: Sequence[int]) -> int:
    """Convert a coefficient list (highest power first) to an integer.

    Parameters
    ----------
    bits : Sequence[int]
        Coefficients, each 0 or 1.

    Returns
    -------
    int
        Integer representation (native Python int).

    Raises
    ------
    ValueError
        If a coefficient is not 0 or 1.

    Examples
    --------
    >>> bits_to_int([1, 0, 1, 1])
    11
    >>> bits_to_int([])
    0
    """
    result = 0
    for bit in bits:
        # Ensure bit is native Python int to avoid numpy type issues
        bit = int(bit)
        if bit not in (0, 1):
            raise ValueError(f"GF(2) coefficient must be 0 or 1, got {bit}")
        result = (result << 1) | bit
    return result


def int_to_bits(value: int, num_bits: int) -> List[int]:
    """Convert an integer to a coefficient list of fixed width.

    Parameters
    ----------
    value : int
        Polynomial as an integer.
    num_bits : int
        Width of the output; must be at least ``value.bit_length()``.

    Returns
    -------
    List[int]
        Coefficients, highest power first, left-padded with zeros.

    Raises
    ------
    ValueError
        If value does not fit in num_bits.

    Examples
    --------
    >>> int_to_bits(11, 4)
    [1, 0, 1, 1]
    >>> int_to_bits(3, 5)
    [0, 0, 0, 1, 1]
    """
    if value < 0 or value.bit_length() > num_bits:
        raise ValueError(f"{value} does not fit in {num_bits} coefficients")

    bits = []
    for _ in range(num_bits):
        bits.append(value & 1)
        value >>= 1
    bits.reverse()
    return bits


def degree(poly: int) -> int:
    """Return the degree of a polynomial (-1 for the zero polynomial)."""
    return poly.bit_length() - 1


def multiply(a: int, b: int) -> int:
    """Multiply two polynomials over GF(2) (carry-less product).

    Examples
    --------
    >>> multiply(0b11, 0b11)  # (x + 1)^2 = x^2 + 1
    5
    """
    result = 0
    shift = 0
    while b:
        if b & 1:
            result ^= a << shift
        b >>= 1
        shift += 1
    return result


def mod(a: int, b: int) -> int:
    """Return the remainder of a divided by b over GF(2).

    Raises
    ------
    ZeroDivisionError
        If b is the zero polynomial.
    """
    if b == 0:
        raise ZeroDivisionError("Division by the zero polynomial")

    db = b.bit_length()
    while a.bit_length() >= db:
        a ^= b << (a.bit_length() - db)
    return a


def divides(generator: int, n: int) -> bool:
    """Check whether a polynomial divides x^n - 1 over GF(2).

    Parameters
    ----------
    generator : int
        Candidate divisor (nonzero).
    n : int
        Exponent n >= 1.

    Returns
    -------
    bool
        True if x^n - 1 = x^n + 1 is a multiple of generator.
    """
    return mod((1 << n) | 1, generator) == 0


def strip_leading_zeros(bits: Sequence[int]) -> List[int]:
    """Drop leading zero coefficients, keeping at least one entry."""
    bits = [int(b) for b in bits]
    while len(bits) > 1 and bits[0] == 0:
        bits.pop(0)
    return bits


def to_string(bits: Sequence[int]) -> str:
    """Format a coefficient list (highest power first) as a polynomial.

    Examples
    --------
    >>> to_string([1, 0, 1, 1])
    'x^3 + x + 1'
    >>> to_string([0, 0])
    '0'
    """
    terms = []
    top = len(bits) - 1
    for i, bit in enumerate(bits):
        if not bit:
            continue
        power = top - i
        if power == 0:
            terms.append("1")
        elif power == 1:
            terms.append("x")
        else:
            terms.append(f"x^{power}")
    return " + ".join(terms) if terms else "0"
