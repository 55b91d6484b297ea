"""Field and code constants.

Notes
-----
Primitive polynomials are stored as integers whose binary representation
lists the coefficients in order of descending powers, e.g. 11 = 0b1011
is x^3 + x + 1.
"""

from typing import Dict

# Supported extension degrees m, i.e. codeword lengths N = 2^m - 1 from 7 to 65535
MIN_EXTENSION_DEGREE: int = 3
MAX_EXTENSION_DEGREE: int = 16

# Field-standard default primitive polynomial for each m
DEFAULT_PRIMITIVE_POLYNOMIALS: Dict[int, int] = {
    3: 0b1011,  # x^3 + x + 1
    4: 0b10011,  # x^4 + x + 1
    5: 0b100101,  # x^5 + x^2 + 1
    6: 0b1000011,  # x^6 + x + 1
    7: 0b10001001,  # x^7 + x^3 + 1
    8: 0b100011101,  # x^8 + x^4 + x^3 + x^2 + 1
    9: 0b1000010001,  # x^9 + x^4 + 1
    10: 0b10000001001,  # x^10 + x^3 + 1
    11: 0b100000000101,  # x^11 + x^2 + 1
    12: 0b1000001010011,  # x^12 + x^6 + x^4 + x + 1
    13: 0b10000000011011,  # x^13 + x^4 + x^3 + x + 1
    14: 0b100010001000011,  # x^14 + x^10 + x^6 + x + 1
    15: 0b1000000000000011,  # x^15 + x + 1
    16: 0b10001000000001011,  # x^16 + x^12 + x^3 + x + 1
}

# Output representations accepted as plain strings (CLI, YAML)
OUTPUT_BINARY: str = "binary"
OUTPUT_GF: str = "gf"

# Scenario result keys
RESULT_N: str = "n"
RESULT_K: str = "k"
RESULT_T: str = "t"
RESULT_GENERATOR: str = "generator"
RESULT_ERROR: str = "error"
