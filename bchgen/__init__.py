"""Generator polynomials of narrow-sense binary BCH codes.

Modules
-------
core
    Entry point, constants and exceptions.
field
    GF(2^m) construction and primitivity testing.
codes
    Cyclotomic cosets, minimal polynomials, capability search and
    generator assembly.
configs
    YAML scenario configuration.
utils
    Logging and result handling.

Examples
--------
>>> from bchgen import compute_generator_polynomial
>>> compute_generator_polynomial(7, 4)
([1, 0, 1, 1], 1)
"""

from bchgen.core.exceptions import (
    BCHError,
    FieldConsistencyError,
    InvalidLengthError,
    InvalidMessageLengthError,
    InvalidOutputFormatError,
    InvalidPrimitivePolynomialError,
    NotPrimitiveError,
)
from bchgen.core.pipeline import (
    BCHCode,
    OutputFormat,
    compute_generator_polynomial,
    design_code,
)

__version__ = "0.1.0"

__all__ = [
    "compute_generator_polynomial",
    "design_code",
    "BCHCode",
    "OutputFormat",
    "BCHError",
    "InvalidLengthError",
    "InvalidPrimitivePolynomialError",
    "NotPrimitiveError",
    "InvalidOutputFormatError",
    "InvalidMessageLengthError",
    "FieldConsistencyError",
]
