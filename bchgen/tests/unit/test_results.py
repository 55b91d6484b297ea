"""Tests for the results infrastructure, configuration and logging.

Tests for:
- Result dataclasses
- JSON/CSV serialization
- Config loading and merging
- Logger setup
"""

import json
import logging

import pytest

from bchgen.configs import (
    SCENARIOS_DIR,
    list_scenarios,
    load_base_config,
    load_scenario,
)
from bchgen.utils.logging import get_logger, set_log_level
from bchgen.utils.results import (
    CodeResult,
    ScenarioResult,
    generate_result_filename,
    generate_summary_report,
    load_results_csv,
    load_results_json,
    save_results_csv,
    save_results_json,
)


def _sample_scenario() -> ScenarioResult:
    return ScenarioResult(
        scenario_name="sample",
        config={"output": {"format": "binary"}},
        codes=[
            CodeResult(
                n=7,
                k=4,
                success=True,
                t=1,
                generator="1011",
                polynomial="x^3 + x + 1",
                divides=True,
                duration_ms=1.5,
            ),
            CodeResult(
                n=15,
                k=5,
                success=True,
                t=3,
                generator="10100110111",
                polynomial="x^10 + x^8 + x^5 + x^4 + x^2 + x + 1",
                divides=True,
                duration_ms=2.5,
            ),
            CodeResult(
                n=15,
                k=6,
                success=False,
                error_message="InvalidMessageLengthError: No BCH code with N=15 has message length K=6",
            ),
        ],
    )


# =============================================================================
# CodeResult / ScenarioResult Tests
# =============================================================================


class TestCodeResult:
    """Tests for CodeResult dataclass."""

    def test_default_values(self):
        """Test default values of a failed result."""
        result = CodeResult(n=15, k=6, success=False)
        assert result.t is None
        assert result.generator == ""
        assert result.divides is None
        assert result.error_message is None
        assert result.duration_ms == 0.0

    def test_redundancy(self):
        """Test N - K."""
        assert CodeResult(n=15, k=5, success=True).redundancy == 10


class TestScenarioResult:
    """Tests for ScenarioResult summaries."""

    def test_empty_summary(self):
        """Test that an empty scenario has an empty summary."""
        assert ScenarioResult(scenario_name="empty").compute_summary() == {}

    def test_summary(self):
        """Test summary statistics."""
        summary = _sample_scenario().compute_summary()
        assert summary["total_codes"] == 3
        assert summary["successful_codes"] == 2
        assert summary["failed_codes"] == 1
        assert summary["success_rate"] == pytest.approx(2 / 3)
        assert summary["max_t"] == 3
        assert summary["min_rate"] == pytest.approx(1 / 3)
        assert summary["max_rate"] == pytest.approx(4 / 7)
        assert summary["total_duration_ms"] == pytest.approx(4.0)
        assert summary["all_divide"] is True
        assert len(summary["error_distribution"]) == 1

    def test_timestamp_default(self):
        """Test that a timestamp is filled in."""
        assert ScenarioResult(scenario_name="x").timestamp


# =============================================================================
# Serialization Tests
# =============================================================================


class TestSerialization:
    """Tests for JSON and CSV result files."""

    def test_json_roundtrip(self, tmp_path):
        """Test that saved JSON loads back to equal results."""
        scenario = _sample_scenario()
        scenario.compute_summary()

        path = save_results_json(scenario, tmp_path / "out")
        assert path.suffix == ".json"

        loaded = load_results_json(path)
        assert len(loaded) == 1
        assert loaded[0].scenario_name == "sample"
        assert loaded[0].codes == scenario.codes
        assert loaded[0].summary["successful_codes"] == 2

    def test_json_is_list(self, tmp_path):
        """Test the on-disk JSON layout."""
        path = save_results_json([_sample_scenario(), _sample_scenario()], tmp_path / "r.json")
        with open(path) as f:
            data = json.load(f)
        assert len(data) == 2
        assert data[0]["codes"][1]["generator"] == "10100110111"

    def test_csv(self, tmp_path):
        """Test one CSV row per code."""
        path = save_results_csv(_sample_scenario(), tmp_path / "nested" / "out")
        assert path.suffix == ".csv"

        rows = load_results_csv(path)
        assert len(rows) == 3
        assert rows[0]["scenario"] == "sample"
        assert rows[0]["generator"] == "1011"
        assert rows[2]["success"] == "False"

    def test_csv_empty(self, tmp_path):
        """Test that an empty scenario writes no file."""
        path = save_results_csv(ScenarioResult(scenario_name="empty"), tmp_path / "empty.csv")
        assert not path.exists()

    def test_result_filename(self):
        """Test timestamped filenames."""
        name = generate_result_filename("hamming", "csv")
        assert name.startswith("hamming_")
        assert name.endswith(".csv")

    def test_summary_report(self):
        """Test the text report."""
        report = generate_summary_report([_sample_scenario()])
        assert "Scenario: sample" in report
        assert "x^3 + x + 1" in report
        assert "FAILED" in report
        assert "Success: 2/3" in report


# =============================================================================
# Config Tests
# =============================================================================


class TestConfigs:
    """Tests for YAML configuration loading."""

    def test_base_config(self):
        """Test the base defaults."""
        config = load_base_config()
        assert config["output"]["format"] == "binary"
        assert config["output"]["verify"] is True

    def test_list_scenarios(self):
        """Test that the bundled scenarios are found."""
        scenarios = list_scenarios()
        assert {"hamming", "double_error", "tables"} <= set(scenarios)
        assert scenarios == sorted(scenarios)

    def test_scenario_inherits_base(self):
        """Test deep merge of a scenario over the base config."""
        config = load_scenario("tables")
        assert config["scenario"]["name"] == "tables"
        assert config["output"]["format"] == "gf"
        assert config["output"]["verify"] is True
        assert config["tables"] == [7, 15, 31, 63]

    def test_scenario_codes(self):
        """Test code entries with an optional primitive polynomial."""
        codes = load_scenario("double_error")["codes"]
        assert {"n": 15, "k": 5, "prim_poly": 25} in codes
        assert {"n": 15, "k": 6} in codes

    def test_scenario_from_path(self, tmp_path):
        """Test loading a scenario file outside the package."""
        path = tmp_path / "custom.yaml"
        path.write_text("scenario:\n  name: custom\ncodes:\n  - {n: 7, k: 4}\n")
        config = load_scenario(str(path))
        assert config["scenario"]["name"] == "custom"
        assert config["output"]["format"] == "binary"

    def test_missing_scenario(self):
        """Test that an unknown scenario raises."""
        with pytest.raises(FileNotFoundError, match="Scenario not found"):
            load_scenario("does_not_exist")

    def test_scenarios_dir(self):
        """Test the scenarios directory location."""
        assert (SCENARIOS_DIR / "hamming.yaml").exists()


# =============================================================================
# Logging Tests
# =============================================================================


class TestLogging:
    """Tests for the logging helpers."""

    def test_namespaced(self):
        """Test that loggers live under the package namespace."""
        assert get_logger("tests.example").name == "bchgen.tests.example"
        assert get_logger("bchgen.codes.cosets").name == "bchgen.codes.cosets"

    def test_cached(self):
        """Test that the same logger is returned twice with one handler."""
        first = get_logger("tests.cached")
        second = get_logger("tests.cached")
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False

    def test_set_log_level(self):
        """Test that set_log_level updates created loggers."""
        logger = get_logger("tests.level")
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        set_log_level("nonsense")
        assert logger.level == logging.INFO
        set_log_level("WARNING")
