"""Minimal polynomials of cyclotomic cosets.

For a coset C the minimal polynomial is

    M_C(x) = prod_{i in C} (x + alpha^i)

The product is expanded with coefficients in GF(2^m). Because C is closed
under squaring, every coefficient is fixed by the Frobenius map and lies
in the prime subfield {0, 1}.
"""

from typing import List

from bchgen.codes.cosets import CyclotomicCoset
from bchgen.core.exceptions import FieldConsistencyError
from bchgen.field.arithmetic import FiniteField


def minimal_polynomial(field: FiniteField, coset: CyclotomicCoset) -> List[int]:
    """Compute the minimal polynomial of a coset over GF(2).

    Parameters
    ----------
    field : FiniteField
        Field supplying alpha and the coefficient arithmetic.
    coset : CyclotomicCoset
        Coset of exponents modulo ``field.order``.

    Returns
    -------
    List[int]
        Binary coefficients, highest power first, left-padded with zeros
        to width m + 1.

    Raises
    ------
    ValueError
        If the coset belongs to a different modulus.
    FieldConsistencyError
        If an expanded coefficient is not 0 or 1.

    Examples
    --------
    >>> from bchgen.field.arithmetic import build_field
    >>> field = build_field(4)
    >>> minimal_polynomial(field, CyclotomicCoset((5, 10), 15))
    [0, 0, 1, 1, 1]
    """
    if coset.modulus != field.order:
        raise ValueError(
            f"Coset modulo {coset.modulus} does not belong to GF(2^{field.m})"
        )

    # Coefficients in GF(2^m), highest power first
    poly = [1]
    for exponent in coset:
        root = field.antilog(exponent)
        # poly * (x + root): shift by x, then add root * poly one place lower
        product = poly + [0]
        for i, coeff in enumerate(poly):
            product[i + 1] = field.add(product[i + 1], field.multiply(root, coeff))
        poly = product

    for coeff in poly:
        if coeff not in (0, 1):
            raise FieldConsistencyError(
                f"Minimal polynomial of coset {coset.representative} in {field!r} "
                f"has coefficient {coeff} outside GF(2)"
            )

    return [0] * (field.m + 1 - len(poly)) + poly
