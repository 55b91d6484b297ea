"""Exceptions raised while constructing BCH generator polynomials.

All errors are deterministic: they describe either an invalid request
(subclasses of ``ValueError``) or a broken internal invariant
(``FieldConsistencyError``). None of them is retried or downgraded.
"""


class BCHError(Exception):
    """Base exception for generator polynomial construction failures."""


class InvalidLengthError(BCHError, ValueError):
    """Codeword length is not of the form 2^m - 1 with m in [3, 16]."""


class InvalidPrimitivePolynomialError(BCHError, ValueError):
    """Primitive polynomial argument is not a scalar integer."""


class NotPrimitiveError(BCHError, ValueError):
    """Primitive polynomial candidate does not generate the full field."""


class InvalidOutputFormatError(BCHError, ValueError):
    """Requested output representation is not supported."""


class InvalidMessageLengthError(BCHError, ValueError):
    """No error-correcting capability yields the requested message length."""


class FieldConsistencyError(BCHError, ArithmeticError):
    """Internal invariant failure in the field or polynomial algebra.

    Raised when a minimal polynomial has a coefficient outside GF(2) or
    when the assembled generator polynomial has nonzero terms above its
    expected degree. Either indicates a defect in field construction or
    coset decomposition.
    """
