"""BCH code construction package.

Modules
-------
gf2poly
    Polynomials over GF(2) as coefficient lists and integers.
cosets
    Cyclotomic coset decomposition of the exponents modulo N.
minimal_poly
    Minimal polynomial of a coset.
capability
    Error-correcting capability search and code tables.
generator
    Generator polynomial assembly.
"""

from bchgen.codes.capability import (
    capability,
    enumerate_codes,
    max_capability,
    redundancy,
)
from bchgen.codes.cosets import CyclotomicCoset, decompose, orbit
from bchgen.codes.generator import assemble, select_cosets
from bchgen.codes.minimal_poly import minimal_polynomial

__all__ = [
    "CyclotomicCoset",
    "decompose",
    "orbit",
    "minimal_polynomial",
    "capability",
    "enumerate_codes",
    "max_capability",
    "redundancy",
    "assemble",
    "select_cosets",
]
