"""Error-correcting capability search.

For a narrow-sense binary BCH code with designed distance 2t + 1 the
generator polynomial is the product of the minimal polynomials of the
cosets containing alpha^1 .. alpha^2t, so its degree (the redundancy) is

    r(t) = sum of |C| over cosets C with representative in 1 .. 2t

Given N and K the capability is the largest t with r(t) = N - K.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from bchgen.codes.cosets import CyclotomicCoset, decompose
from bchgen.core.exceptions import InvalidMessageLengthError
from bchgen.field.arithmetic import FiniteField, coerce_integer
from bchgen.utils.logging import get_logger

logger = get_logger(__name__)


def max_capability(field: FiniteField) -> int:
    """Return the largest meaningful capability, floor((N - 1) / 2)."""
    return (field.order - 1) // 2


def redundancy(
    field: FiniteField, t: int, cosets: Optional[Sequence[CyclotomicCoset]] = None
) -> int:
    """Compute the generator polynomial degree for capability t.

    Parameters
    ----------
    field : FiniteField
        Field defining N.
    t : int
        Error-correcting capability (>= 1).
    cosets : Sequence[CyclotomicCoset], optional
        Precomputed decomposition of ``field``.

    Returns
    -------
    int
        Sum of the sizes of the cosets whose representative is in 1 .. 2t.
    """
    if t < 1:
        raise ValueError(f"Capability must be positive, got {t}")
    if cosets is None:
        cosets = decompose(field)
    return sum(len(c) for c in cosets if 1 <= c.representative <= 2 * t)


def _redundancy_profile(
    field: FiniteField, cosets: Sequence[CyclotomicCoset]
) -> Iterator[Tuple[int, int]]:
    """Yield (t, r(t)) for t = 1 .. floor((N - 1) / 2).

    Cosets are in increasing order of representative, so r(t) is a running
    sum over the cosets admitted as 2t grows.
    """
    nonzero = [c for c in cosets if c.representative > 0]
    index = 0
    total = 0
    for t in range(1, max_capability(field) + 1):
        while index < len(nonzero) and nonzero[index].representative <= 2 * t:
            total += len(nonzero[index])
            index += 1
        yield t, total


def capability(field: FiniteField, k: int) -> int:
    """Find the error-correcting capability for message length k.

    Parameters
    ----------
    field : FiniteField
        Field defining N = 2^m - 1.
    k : int
        Message length, 0 < k < N.

    Returns
    -------
    int
        Largest t whose generator polynomial has degree exactly N - k.

    Raises
    ------
    InvalidMessageLengthError
        If k is not an integer in (0, N) or no t yields degree N - k.

    Examples
    --------
    >>> from bchgen.field.arithmetic import build_field
    >>> capability(build_field(4), 5)
    3
    """
    n = field.order
    value = coerce_integer(k)
    if value is None or not 0 < value < n:
        raise InvalidMessageLengthError(
            f"Message length must be an integer in [1, {n - 1}], got {k!r}"
        )
    target = n - value

    found = None
    for t, r in _redundancy_profile(field, decompose(field)):
        if r == target:
            found = t
        elif r > target:
            break

    if found is None:
        raise InvalidMessageLengthError(
            f"No BCH code with N={n} has message length K={value}"
        )

    logger.debug(f"N={n}, K={value}: t={found}")
    return found


def enumerate_codes(field: FiniteField) -> List[Tuple[int, int, int]]:
    """List every realizable narrow-sense BCH code for a field.

    Parameters
    ----------
    field : FiniteField
        Field defining N = 2^m - 1.

    Returns
    -------
    List[Tuple[int, int, int]]
        ``(N, K, t)`` triples in decreasing order of K. Each K appears once,
        with the largest t that realizes it.

    Examples
    --------
    >>> from bchgen.field.arithmetic import build_field
    >>> enumerate_codes(build_field(3))
    [(7, 4, 1), (7, 1, 3)]
    """
    n = field.order
    best = {}
    for t, r in _redundancy_profile(field, decompose(field)):
        k = n - r
        if k < 1:
            break
        best[k] = t

    return [(n, k, best[k]) for k in sorted(best, reverse=True)]
