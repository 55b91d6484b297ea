"""Cyclotomic coset decomposition.

The exponents 0 .. N-1 of alpha split into orbits under the Frobenius map
e -> 2e (mod N). The elements alpha^e of one orbit are conjugates and
share a single minimal polynomial.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from bchgen.field.arithmetic import FiniteField
from bchgen.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CyclotomicCoset:
    """One cyclotomic coset of exponents modulo N.

    Attributes
    ----------
    exponents : Tuple[int, ...]
        Orbit in doubling order: (s, 2s mod N, 4s mod N, ...).
    modulus : int
        N = 2^m - 1.
    """

    exponents: Tuple[int, ...]
    modulus: int

    def __post_init__(self) -> None:
        """Validate that the exponents form a closed doubling orbit."""
        if not self.exponents:
            raise ValueError("Coset cannot be empty")
        for i, e in enumerate(self.exponents):
            following = self.exponents[(i + 1) % len(self.exponents)]
            if (2 * e) % self.modulus != following:
                raise ValueError(
                    f"Exponents {self.exponents} are not a doubling orbit mod {self.modulus}"
                )

    @property
    def representative(self) -> int:
        """Return the canonical representative (smallest exponent)."""
        return min(self.exponents)

    def __len__(self) -> int:
        return len(self.exponents)

    def __iter__(self) -> Iterator[int]:
        return iter(self.exponents)

    def __contains__(self, exponent: object) -> bool:
        return exponent in self.exponents


def orbit(start: int, modulus: int) -> Tuple[int, ...]:
    """Return the doubling orbit of an exponent modulo N.

    Examples
    --------
    >>> orbit(3, 15)
    (3, 6, 12, 9)
    """
    start %= modulus
    exponents = [start]
    e = (2 * start) % modulus
    while e != start:
        exponents.append(e)
        e = (2 * e) % modulus
    return tuple(exponents)


def decompose(field: FiniteField) -> List[CyclotomicCoset]:
    """Partition the exponents 0 .. N-1 into cyclotomic cosets.

    Parameters
    ----------
    field : FiniteField
        Field defining N = 2^m - 1.

    Returns
    -------
    List[CyclotomicCoset]
        Cosets in increasing order of representative. The first coset is
        always {0}.

    Notes
    -----
    Exponents are scanned in increasing order, so the first unassigned
    exponent of an orbit is its smallest element.
    """
    n = field.order
    assigned = np.zeros(n, dtype=bool)
    cosets = []

    for start in range(n):
        if assigned[start]:
            continue
        exponents = orbit(start, n)
        assigned[list(exponents)] = True
        cosets.append(CyclotomicCoset(exponents=exponents, modulus=n))

    logger.debug(f"GF(2^{field.m}): {len(cosets)} cyclotomic cosets")
    return cosets
