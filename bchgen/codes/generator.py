"""Generator polynomial assembly.

The narrow-sense generator polynomial for capability t is

    g(x) = LCM[m_1(x), m_2(x), ..., m_2t(x)]

Distinct cosets have coprime minimal polynomials, so the LCM is the
product of the minimal polynomials of the cosets whose representative is
below 2t, each taken once.
"""

from typing import List, Optional, Sequence

from bchgen.codes import gf2poly
from bchgen.codes.capability import max_capability
from bchgen.codes.cosets import CyclotomicCoset, decompose
from bchgen.codes.minimal_poly import minimal_polynomial
from bchgen.core.exceptions import FieldConsistencyError
from bchgen.field.arithmetic import FiniteField
from bchgen.utils.logging import get_logger

logger = get_logger(__name__)


def select_cosets(
    cosets: Sequence[CyclotomicCoset], t: int
) -> List[CyclotomicCoset]:
    """Return the nonzero cosets with representative strictly below 2t."""
    return [c for c in cosets if 0 < c.representative < 2 * t]


def assemble(
    field: FiniteField,
    t: int,
    cosets: Optional[Sequence[CyclotomicCoset]] = None,
) -> List[int]:
    """Assemble the generator polynomial for capability t.

    Parameters
    ----------
    field : FiniteField
        Field defining N and alpha.
    t : int
        Error-correcting capability, 1 <= t <= (N - 1) / 2.
    cosets : Sequence[CyclotomicCoset], optional
        Precomputed decomposition of ``field``, in increasing order of
        representative.

    Returns
    -------
    List[int]
        Binary coefficients of g(x), highest power first. The length is
        deg g + 1 and the leading entry is 1.

    Raises
    ------
    ValueError
        If t is out of range.
    FieldConsistencyError
        If the product has nonzero terms above the expected degree or
        does not have the expected degree.

    Examples
    --------
    >>> from bchgen.field.arithmetic import build_field
    >>> assemble(build_field(3), 1)
    [1, 0, 1, 1]
    """
    if not 1 <= t <= max_capability(field):
        raise ValueError(
            f"Capability must be in [1, {max_capability(field)}], got {t}"
        )
    if cosets is None:
        cosets = decompose(field)

    selected = select_cosets(cosets, t)
    expected_degree = sum(len(c) for c in selected)

    # Repeated GF(2) multiplication on the integer form
    product = 1
    for coset in selected:
        product = gf2poly.multiply(
            product, gf2poly.bits_to_int(minimal_polynomial(field, coset))
        )

    width = expected_degree + 1
    if product >> width:
        raise FieldConsistencyError(
            f"Generator polynomial for t={t} in {field!r} has nonzero terms "
            f"above degree {expected_degree}"
        )
    generator = gf2poly.int_to_bits(product, width)
    if generator[0] != 1:
        raise FieldConsistencyError(
            f"Generator polynomial for t={t} in {field!r} has degree "
            f"{gf2poly.degree(product)}, expected {expected_degree}"
        )

    logger.debug(
        f"t={t}: {len(selected)} minimal polynomials, degree {expected_degree}"
    )
    return generator
