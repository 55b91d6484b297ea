"""Finite field package.

Modules
-------
primitivity
    Multiplicative-order primitivity test and primitive polynomial search.
arithmetic
    FiniteField with log/antilog tables and the build_field constructor.
"""

from bchgen.field.arithmetic import (
    FiniteField,
    build_field,
    coerce_integer,
    extension_degree,
    is_absent,
)
from bchgen.field.primitivity import (
    find_primitive_polynomials,
    is_primitive,
    multiplicative_order_of_x,
)

__all__ = [
    "FiniteField",
    "build_field",
    "coerce_integer",
    "extension_degree",
    "is_absent",
    "find_primitive_polynomials",
    "is_primitive",
    "multiplicative_order_of_x",
]
