#!/usr/bin/env python3
"""Print the generator polynomial of a narrow-sense binary BCH code.

Usage:
    bchgenpoly N K                      # Generator polynomial and t
    bchgenpoly N K --prim-poly 0b11001  # Use a non-default primitive polynomial
    bchgenpoly N --table                # All realizable (N, K, t)

Examples:
    # The (15, 5) triple-error-correcting code
    bchgenpoly 15 5

    # Field-element output, checking g(x) | x^N - 1
    bchgenpoly 63 45 --output-format gf --verify
"""

import argparse
import logging
import sys
from typing import List, Optional

from bchgen.codes import gf2poly
from bchgen.codes.capability import enumerate_codes
from bchgen.core.constants import OUTPUT_BINARY
from bchgen.core.exceptions import BCHError
from bchgen.core.pipeline import compute_generator_polynomial
from bchgen.field.arithmetic import build_field, extension_degree
from bchgen.utils.logging import get_logger, set_log_level

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Parameters
    ----------
    argv : Optional[List[str]]
        Arguments (defaults to sys.argv[1:]).

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Compute BCH generator polynomials",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("n", type=int, help="Codeword length N = 2^m - 1")
    parser.add_argument(
        "k",
        type=int,
        nargs="?",
        default=None,
        help="Message length K (not needed with --table)",
    )
    parser.add_argument(
        "--prim-poly", "-p",
        type=lambda s: int(s, 0),
        default=None,
        help="Primitive polynomial as an integer (decimal, 0b or 0x)",
    )
    parser.add_argument(
        "--output-format", "-f",
        type=str,
        default=OUTPUT_BINARY,
        help="Coefficient representation: binary or gf (default: binary)",
    )
    parser.add_argument(
        "--table", "-t",
        action="store_true",
        help="List every realizable (N, K, t) instead",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check that g(x) divides x^N - 1",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    if args.k is None and not args.table:
        parser.error("K is required unless --table is given")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns
    -------
    int
        Exit code (0 for success, 1 for an invalid request).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    set_log_level(args.log_level)

    try:
        if args.table:
            field = build_field(extension_degree(args.n), args.prim_poly)
            print(f"{'N':>6} {'K':>6} {'t':>4}")
            for n, k, t in enumerate_codes(field):
                print(f"{n:>6} {k:>6} {t:>4}")
            return 0

        genpoly, t = compute_generator_polynomial(
            args.n, args.k, args.prim_poly, args.output_format
        )
    except BCHError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    coefficients = [int(c) for c in genpoly]
    print(f"genpoly = {coefficients}")
    print(f"t = {t}")
    print(f"g(x) = {gf2poly.to_string(coefficients)}")

    if args.verify:
        ok = gf2poly.divides(gf2poly.bits_to_int(coefficients), args.n)
        print(f"g(x) divides x^{args.n} - 1: {ok}")
        if not ok:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
