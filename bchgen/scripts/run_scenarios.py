#!/usr/bin/env python3
"""Run generator polynomial scenarios from configuration files.

This script provides batch computation of BCH generator polynomials for
the codes listed in YAML scenarios, collecting and saving the results.

Usage:
    bchgen-run-scenarios                        # Run all scenarios
    bchgen-run-scenarios --scenario hamming     # Run specific scenario
    bchgen-run-scenarios --list                 # List available scenarios

Examples:
    # Run one scenario with verbose output and a text report
    bchgen-run-scenarios --scenario tables --log-level DEBUG --report

    # Run with custom output directory
    bchgen-run-scenarios --output-dir ./my_results

Reference:
- configs/base.yaml
- configs/scenarios/*.yaml
"""

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from bchgen.codes import gf2poly
from bchgen.codes.capability import enumerate_codes
from bchgen.configs import list_scenarios, load_scenario
from bchgen.core.constants import OUTPUT_BINARY
from bchgen.core.exceptions import BCHError
from bchgen.core.pipeline import compute_generator_polynomial
from bchgen.field.arithmetic import build_field, extension_degree
from bchgen.utils.logging import get_logger, set_log_level
from bchgen.utils.results import (
    CodeResult,
    ScenarioResult,
    generate_result_filename,
    generate_summary_report,
    save_results_csv,
    save_results_json,
)

logger = get_logger(__name__)

RESULTS_DIR = Path("results")


def run_code(
    n: int,
    k: int,
    prim_poly: Optional[int] = None,
    output_format: str = OUTPUT_BINARY,
    verify: bool = True,
) -> CodeResult:
    """Compute one generator polynomial, capturing failures.

    Parameters
    ----------
    n : int
        Codeword length.
    k : int
        Message length.
    prim_poly : Optional[int]
        Primitive polynomial (None for the default).
    output_format : str
        Coefficient representation passed to the computation.
    verify : bool
        Whether to check that g(x) divides x^n - 1.

    Returns
    -------
    CodeResult
        Successful or failed result; invalid requests do not raise.
    """
    start = time.perf_counter()
    try:
        genpoly, t = compute_generator_polynomial(n, k, prim_poly, output_format)
    except BCHError as e:
        logger.warning(f"N={n}, K={k}: {e}")
        return CodeResult(
            n=n,
            k=k,
            success=False,
            primitive_polynomial=prim_poly,
            error_message=f"{type(e).__name__}: {e}",
            duration_ms=(time.perf_counter() - start) * 1000,
        )

    coefficients = [int(c) for c in genpoly]
    divides = None
    if verify:
        divides = gf2poly.divides(gf2poly.bits_to_int(coefficients), n)
        if not divides:
            logger.error(f"N={n}, K={k}: generator does not divide x^{n} - 1")

    return CodeResult(
        n=n,
        k=k,
        success=True,
        t=t,
        primitive_polynomial=prim_poly,
        generator="".join(str(c) for c in coefficients),
        polynomial=gf2poly.to_string(coefficients),
        divides=divides,
        duration_ms=(time.perf_counter() - start) * 1000,
    )


def run_scenario(
    config: Dict[str, Any], log_level: Optional[str] = None
) -> ScenarioResult:
    """Run every code and table listed in a scenario configuration.

    Parameters
    ----------
    config : Dict[str, Any]
        Merged scenario configuration.
    log_level : Optional[str]
        Overrides the configured ``logging.log_level`` when given.

    Returns
    -------
    ScenarioResult
        Results with the summary computed.

    Raises
    ------
    BCHError
        If a table entry names an invalid length or primitive polynomial.
    """
    scenario_name = config.get("scenario", {}).get("name", "unknown")

    # Set logging
    logging_config = config.get("logging", {})
    set_log_level(log_level or logging_config.get("log_level", "WARNING"))

    logger.info(f"Running scenario: {scenario_name}")

    output_config = config.get("output", {})
    output_format = output_config.get("format", OUTPUT_BINARY)
    verify = output_config.get("verify", True)

    requests = []
    for entry in config.get("codes", []):
        requests.append((entry["n"], entry["k"], entry.get("prim_poly")))

    for n in config.get("tables", []):
        field = build_field(extension_degree(n))
        for _, k, _ in enumerate_codes(field):
            requests.append((n, k, None))

    codes = [
        run_code(n, k, prim_poly, output_format, verify)
        for n, k, prim_poly in requests
    ]

    scenario_result = ScenarioResult(
        scenario_name=scenario_name,
        config=config,
        codes=codes,
    )
    scenario_result.compute_summary()

    return scenario_result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Run BCH generator polynomial scenarios",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--scenario", "-s",
        type=str,
        default=None,
        help="Run specific scenario (name without .yaml, or a YAML path)",
    )
    parser.add_argument(
        "--list", "-l",
        action="store_true",
        help="List available scenarios",
    )
    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        default=str(RESULTS_DIR),
        help=f"Output directory for results (default: {RESULTS_DIR})",
    )
    parser.add_argument(
        "--save-format",
        type=str,
        choices=["json", "csv", "both"],
        default="both",
        help="Result file format (default: both)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: the scenario's logging.log_level)",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Don't save results to files",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a summary report",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns
    -------
    int
        Exit code (0 for success).
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level or "INFO"),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    set_log_level(args.log_level or "INFO")

    if args.list:
        print("Available scenarios:")
        for s in list_scenarios():
            print(f"  - {s}")
        return 0

    scenarios = [args.scenario] if args.scenario else list_scenarios()
    if not scenarios:
        print("No scenarios found!")
        return 1

    all_results = []
    for name in scenarios:
        try:
            config = load_scenario(name)
            result = run_scenario(config, args.log_level)
        except (FileNotFoundError, BCHError) as e:
            logger.error(f"Scenario {name} failed: {e}")
            return 1
        all_results.append(result)

        if not args.no_save:
            output_dir = Path(args.output_dir)
            if args.save_format in ("json", "both"):
                save_results_json(
                    result, output_dir / generate_result_filename(result.scenario_name, "json")
                )
            if args.save_format in ("csv", "both"):
                save_results_csv(
                    result, output_dir / generate_result_filename(result.scenario_name, "csv")
                )

    if args.report:
        print(generate_summary_report(all_results))

    return 0


if __name__ == "__main__":
    sys.exit(main())
