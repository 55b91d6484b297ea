"""Integration tests for the command-line scripts and scenario runner."""

import logging

import pytest

from bchgen.configs import load_base_config, load_scenario
from bchgen.scripts import bchgenpoly, run_scenarios
from bchgen.utils.logging import get_logger, set_log_level
from bchgen.utils.results import load_results_json


class TestRunScenario:
    """Tests for run_scenario() on the bundled scenarios."""

    def test_hamming(self):
        """Test that every single-error code succeeds with t = 1."""
        result = run_scenarios.run_scenario(load_scenario("hamming"))
        assert result.scenario_name == "hamming"
        assert result.summary["success_rate"] == 1.0
        assert all(code.t == 1 for code in result.codes)
        assert all(code.divides for code in result.codes)
        assert result.codes[0].generator == "1011"

    def test_double_error_records_failure(self):
        """Test that an unrealizable K is recorded, not raised."""
        result = run_scenarios.run_scenario(load_scenario("double_error"))
        failures = [c for c in result.codes if not c.success]
        assert len(failures) == 1
        assert failures[0].k == 6
        assert failures[0].error_message.startswith("InvalidMessageLengthError")

        custom = [c for c in result.codes if c.primitive_polynomial == 25]
        assert custom[0].generator == "10100110111"[::-1]

    def test_tables(self):
        """Test table expansion: 2 + 4 + 6 + 12 codes."""
        result = run_scenarios.run_scenario(load_scenario("tables"))
        assert len(result.codes) == 24
        assert result.summary["successful_codes"] == 24
        assert result.summary["max_t"] == 31

    def test_run_code_without_verify(self):
        """Test that verification can be skipped."""
        code = run_scenarios.run_code(15, 7, verify=False)
        assert code.success
        assert code.divides is None
        assert code.polynomial == "x^8 + x^7 + x^6 + x^4 + 1"


class TestRunScenariosMain:
    """Tests for the bchgen-run-scenarios entry point."""

    def test_list(self, capsys):
        """Test --list."""
        assert run_scenarios.main(["--list"]) == 0
        assert "hamming" in capsys.readouterr().out

    def test_run_and_save(self, tmp_path, capsys):
        """Test running one scenario and saving JSON results."""
        exit_code = run_scenarios.main([
            "--scenario", "hamming",
            "--output-dir", str(tmp_path),
            "--save-format", "json",
            "--log-level", "WARNING",
            "--report",
        ])
        assert exit_code == 0
        assert "Scenario: hamming" in capsys.readouterr().out

        files = list(tmp_path.glob("hamming_*.json"))
        assert len(files) == 1
        loaded = load_results_json(files[0])
        assert len(loaded[0].codes) == 6

    def test_missing_scenario(self):
        """Test that an unknown scenario returns a failure code."""
        assert run_scenarios.main(["--scenario", "nope", "--no-save"]) == 1


class TestBchgenpolyMain:
    """Tests for the bchgenpoly entry point."""

    def test_generator(self, capsys):
        """Test printing the (15, 5) generator."""
        assert bchgenpoly.main(["15", "5", "--verify"]) == 0
        out = capsys.readouterr().out
        assert "genpoly = [1, 0, 1, 0, 0, 1, 1, 0, 1, 1, 1]" in out
        assert "t = 3" in out
        assert "x^10 + x^8 + x^5 + x^4 + x^2 + x + 1" in out
        assert "divides x^15 - 1: True" in out

    def test_prim_poly_binary_literal(self, capsys):
        """Test a 0b primitive polynomial argument and gf output."""
        assert bchgenpoly.main(["15", "5", "--prim-poly", "0b11001", "-f", "gf"]) == 0
        assert "genpoly = [1, 1, 1, 0, 1, 1, 0, 0, 1, 0, 1]" in capsys.readouterr().out

    def test_table(self, capsys):
        """Test --table."""
        assert bchgenpoly.main(["15", "--table"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 5
        assert lines[-1].split() == ["15", "1", "7"]

    def test_invalid_request(self, capsys):
        """Test that invalid requests exit with status 1."""
        assert bchgenpoly.main(["15", "6"]) == 1
        assert "No BCH code" in capsys.readouterr().err

        assert bchgenpoly.main(["7", "4", "--prim-poly", "9"]) == 1
        assert bchgenpoly.main(["7", "4", "--output-format", "double"]) == 1
        assert bchgenpoly.main(["16", "4"]) == 1

    def test_missing_k(self):
        """Test that K is required without --table."""
        with pytest.raises(SystemExit):
            bchgenpoly.main(["15"])


class TestScenarioLogLevel:
    """Tests for the logging.log_level scenario key."""

    @pytest.fixture(autouse=True)
    def restore_level(self):
        yield
        set_log_level("WARNING")

    @pytest.fixture
    def quiet_scenario(self, tmp_path):
        path = tmp_path / "quiet.yaml"
        path.write_text(
            "scenario:\n"
            "  name: quiet\n"
            "codes:\n"
            "  - {n: 7, k: 4}\n"
            "logging:\n"
            "  log_level: ERROR\n"
        )
        return path

    def test_base_default(self):
        """Test that base.yaml sets the package to WARNING."""
        assert load_base_config()["logging"]["log_level"] == "WARNING"

    def test_config_level_applied(self, quiet_scenario):
        """Test that the scenario's log level reaches the package loggers."""
        assert run_scenarios.main(["--scenario", str(quiet_scenario), "--no-save"]) == 0
        assert get_logger("bchgen.core.pipeline").level == logging.ERROR

    def test_command_line_overrides_config(self, quiet_scenario):
        """Test that --log-level wins over the scenario file."""
        exit_code = run_scenarios.main([
            "--scenario", str(quiet_scenario),
            "--no-save",
            "--log-level", "DEBUG",
        ])
        assert exit_code == 0
        assert get_logger("bchgen.core.pipeline").level == logging.DEBUG
