"""Primitivity test for binary polynomials.

A polynomial p(x) of degree m over GF(2) is primitive when x has
multiplicative order exactly N = 2^m - 1 modulo p(x). Stepping through
the powers of x visits every nonzero residue before returning to 1, so
the residue ring is a field and p(x) is also irreducible.

Notes
-----
Polynomials are integers whose binary representation lists coefficients
in order of descending powers (bit m is the coefficient of x^m).
"""

from typing import Iterator, Optional


def multiplicative_order_of_x(poly: int) -> Optional[int]:
    """Compute the multiplicative order of x modulo a binary polynomial.

    Parameters
    ----------
    poly : int
        Modulus polynomial of degree m >= 1.

    Returns
    -------
    Optional[int]
        Smallest k >= 1 with x^k = 1 (mod poly), or None if x is not a
        unit modulo poly (zero constant term).

    Raises
    ------
    ValueError
        If poly has degree < 1.

    Examples
    --------
    >>> multiplicative_order_of_x(0b1011)  # x^3 + x + 1
    7
    >>> multiplicative_order_of_x(0b11111)  # x^4 + x^3 + x^2 + x + 1
    5
    """
    m = poly.bit_length() - 1
    if m < 1:
        raise ValueError(f"Modulus must have degree >= 1, got {poly}")
    if not poly & 1:
        return None

    # The unit group has at most 2^m - 1 elements, which bounds the order
    residue = 1
    for k in range(1, (1 << m)):
        residue <<= 1
        if residue >> m:
            residue ^= poly
        if residue == 1:
            return k
    return None


def is_primitive(poly: int, m: int) -> bool:
    """Check whether poly is a primitive polynomial of degree m.

    Parameters
    ----------
    poly : int
        Candidate polynomial, an (m+1)-bit integer.
    m : int
        Required degree.

    Returns
    -------
    bool
        True if poly has degree m, a nonzero constant term and x has
        order 2^m - 1 modulo poly.
    """
    if m < 1 or poly <= 0 or poly.bit_length() != m + 1:
        return False
    return multiplicative_order_of_x(poly) == (1 << m) - 1


def find_primitive_polynomials(m: int) -> Iterator[int]:
    """Yield all primitive polynomials of degree m in increasing order.

    Parameters
    ----------
    m : int
        Polynomial degree (>= 1).

    Yields
    ------
    int
        Primitive polynomials as (m+1)-bit integers.

    Notes
    -----
    Each candidate costs up to 2^m - 1 steps, so exhausting the generator
    for large m is slow. Use ``itertools.islice`` to take only a few.
    """
    if m < 1:
        raise ValueError(f"Degree must be positive, got {m}")

    # Leading and constant coefficients are always set
    for poly in range((1 << m) + 1, 1 << (m + 1), 2):
        if is_primitive(poly, m):
            yield poly
