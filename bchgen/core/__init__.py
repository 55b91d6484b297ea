"""Core package initialization."""

from bchgen.core.constants import (
    DEFAULT_PRIMITIVE_POLYNOMIALS,
    MAX_EXTENSION_DEGREE,
    MIN_EXTENSION_DEGREE,
    OUTPUT_BINARY,
    OUTPUT_GF,
)
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
    generator_for,
    parse_output_format,
)

__all__ = [
    # Constants
    "DEFAULT_PRIMITIVE_POLYNOMIALS",
    "MIN_EXTENSION_DEGREE",
    "MAX_EXTENSION_DEGREE",
    "OUTPUT_BINARY",
    "OUTPUT_GF",
    # Exceptions
    "BCHError",
    "InvalidLengthError",
    "InvalidPrimitivePolynomialError",
    "NotPrimitiveError",
    "InvalidOutputFormatError",
    "InvalidMessageLengthError",
    "FieldConsistencyError",
    # Pipeline
    "BCHCode",
    "OutputFormat",
    "compute_generator_polynomial",
    "design_code",
    "generator_for",
    "parse_output_format",
]
