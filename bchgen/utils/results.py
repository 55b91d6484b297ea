"""Result handling utilities for batch generator polynomial runs.

Provides dataclasses for computed codes, and functions for saving,
loading and summarizing them in JSON and CSV formats.

Notes
-----
Results are stored with timestamps and scenario metadata for traceability.
Generator polynomials are stored as strings of 0/1 characters, highest
power first, so that CSV files stay one row per code.
"""

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import numpy as np

from bchgen.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class CodeResult:
    """Result for a single (N, K) request.

    Attributes
    ----------
    n : int
        Codeword length.
    k : int
        Message length.
    success : bool
        Whether a generator polynomial was computed.
    t : Optional[int]
        Error-correcting capability (if successful).
    primitive_polynomial : Optional[int]
        Primitive polynomial requested (None for the default).
    generator : str
        Generator coefficients as a 0/1 string, highest power first.
    polynomial : str
        Generator formatted as a sum of powers of x.
    divides : Optional[bool]
        Whether g(x) divides x^N - 1 (None if not checked).
    error_message : Optional[str]
        Error message if the request failed.
    duration_ms : float
        Execution time in milliseconds.
    """

    n: int
    k: int
    success: bool
    t: Optional[int] = None
    primitive_polynomial: Optional[int] = None
    generator: str = ""
    polynomial: str = ""
    divides: Optional[bool] = None
    error_message: Optional[str] = None
    duration_ms: float = 0.0

    @property
    def redundancy(self) -> int:
        """Return the generator degree N - K."""
        return self.n - self.k


@dataclass
class ScenarioResult:
    """Aggregated results from a scenario execution.

    Attributes
    ----------
    scenario_name : str
        Name of the scenario.
    timestamp : str
        ISO timestamp when the scenario was executed.
    config : Dict[str, Any]
        Configuration used for the scenario.
    codes : List[CodeResult]
        Results for individual codes.
    summary : Dict[str, Any]
        Computed summary statistics.
    """

    scenario_name: str
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())
    config: Dict[str, Any] = field(default_factory=dict)
    codes: List[CodeResult] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

    def compute_summary(self) -> Dict[str, Any]:
        """Compute summary statistics from code results.

        Returns
        -------
        Dict[str, Any]
            Summary statistics including success rate and rate/capability
            ranges.
        """
        if not self.codes:
            return {}

        successful = [c for c in self.codes if c.success]
        failed = [c for c in self.codes if not c.success]

        summary = {
            "total_codes": len(self.codes),
            "successful_codes": len(successful),
            "failed_codes": len(failed),
            "success_rate": len(successful) / len(self.codes),
        }

        if successful:
            rates = [c.k / c.n for c in successful]
            capabilities = [c.t for c in successful]
            summary.update({
                "avg_rate": float(np.mean(rates)),
                "min_rate": float(np.min(rates)),
                "max_rate": float(np.max(rates)),
                "max_t": int(np.max(capabilities)),
                "total_duration_ms": float(np.sum([c.duration_ms for c in successful])),
                "all_divide": all(c.divides is not False for c in successful),
            })

        if failed:
            error_counts: Dict[str, int] = {}
            for c in failed:
                err = c.error_message or "Unknown"
                error_counts[err] = error_counts.get(err, 0) + 1
            summary["error_distribution"] = error_counts

        self.summary = summary
        return summary


def save_results_json(
    results: Union[ScenarioResult, List[ScenarioResult]],
    output_path: Union[str, Path],
) -> Path:
    """Save results to JSON file.

    Parameters
    ----------
    results : Union[ScenarioResult, List[ScenarioResult]]
        Results to save.
    output_path : Union[str, Path]
        Output file path (will add .json extension if missing).

    Returns
    -------
    Path
        Path to the saved file.
    """
    output_path = Path(output_path)
    if output_path.suffix != ".json":
        output_path = output_path.with_suffix(".json")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(results, ScenarioResult):
        results = [results]

    data = []
    for result in results:
        data.append({
            "scenario_name": result.scenario_name,
            "timestamp": result.timestamp,
            "config": result.config,
            "codes": [asdict(code) for code in result.codes],
            "summary": result.summary,
        })

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)

    logger.info(f"Saved results to {output_path}")
    return output_path


def save_results_csv(
    results: Union[ScenarioResult, List[ScenarioResult]],
    output_path: Union[str, Path],
) -> Path:
    """Save results to CSV file (one row per code).

    Parameters
    ----------
    results : Union[ScenarioResult, List[ScenarioResult]]
        Results to save.
    output_path : Union[str, Path]
        Output file path (will add .csv extension if missing).

    Returns
    -------
    Path
        Path to the saved file.
    """
    output_path = Path(output_path)
    if output_path.suffix != ".csv":
        output_path = output_path.with_suffix(".csv")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    if isinstance(results, ScenarioResult):
        results = [results]

    rows = []
    for scenario in results:
        for code in scenario.codes:
            row = {"scenario": scenario.scenario_name, "timestamp": scenario.timestamp}
            row.update(asdict(code))
            rows.append(row)

    if not rows:
        logger.warning("No results to save")
        return output_path

    fieldnames = list(rows[0].keys())
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    logger.info(f"Saved results to {output_path}")
    return output_path


def load_results_json(input_path: Union[str, Path]) -> List[ScenarioResult]:
    """Load results from JSON file.

    Parameters
    ----------
    input_path : Union[str, Path]
        Path to JSON file.

    Returns
    -------
    List[ScenarioResult]
        Loaded results.
    """
    input_path = Path(input_path)

    with open(input_path, "r") as f:
        data = json.load(f)

    results = []
    for item in data:
        codes = [CodeResult(**code) for code in item.get("codes", [])]
        results.append(ScenarioResult(
            scenario_name=item["scenario_name"],
            timestamp=item.get("timestamp", ""),
            config=item.get("config", {}),
            codes=codes,
            summary=item.get("summary", {}),
        ))

    return results


def load_results_csv(input_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load results from CSV file.

    Parameters
    ----------
    input_path : Union[str, Path]
        Path to CSV file.

    Returns
    -------
    List[Dict[str, Any]]
        List of row dictionaries (all values are strings).
    """
    input_path = Path(input_path)

    with open(input_path, "r", newline="") as f:
        reader = csv.DictReader(f)
        return list(reader)


def generate_result_filename(scenario_name: str, extension: str = "json") -> str:
    """Generate a timestamped filename for results.

    Parameters
    ----------
    scenario_name : str
        Name of the scenario.
    extension : str
        File extension (without dot).

    Returns
    -------
    str
        Generated filename.
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{scenario_name}_{timestamp}.{extension}"


def generate_summary_report(results: List[ScenarioResult]) -> str:
    """Generate a plain-text summary report.

    Parameters
    ----------
    results : List[ScenarioResult]
        Results to summarize.

    Returns
    -------
    str
        Multi-line report with one table per scenario.
    """
    lines = ["=" * 70, "BCH GENERATOR POLYNOMIAL REPORT", "=" * 70]

    for scenario in results:
        summary = scenario.summary or scenario.compute_summary()
        lines.append("")
        lines.append(f"Scenario: {scenario.scenario_name} ({scenario.timestamp})")
        lines.append("-" * 70)
        lines.append(f"{'N':>6} {'K':>6} {'t':>4}  generator")
        for code in scenario.codes:
            if code.success:
                lines.append(f"{code.n:>6} {code.k:>6} {code.t:>4}  {code.polynomial}")
            else:
                lines.append(f"{code.n:>6} {code.k:>6} {'-':>4}  FAILED: {code.error_message}")
        if summary:
            lines.append(
                f"Success: {summary['successful_codes']}/{summary['total_codes']}"
                f" ({summary['success_rate']:.0%})"
            )
            if "max_t" in summary:
                lines.append(
                    f"Rate: {summary['min_rate']:.3f} - {summary['max_rate']:.3f}"
                    f", max t = {summary['max_t']}"
                )

    return "\n".join(lines)
