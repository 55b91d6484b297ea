"""Configuration package for batch generator polynomial runs.

This package provides YAML configuration management. A scenario lists
codes to compute (``codes``) and/or whole code tables (``tables``); keys
it does not set are inherited from ``base.yaml``.

Usage:
    from bchgen.configs import load_scenario, list_scenarios

    # List available scenarios
    scenarios = list_scenarios()

    # Load a specific scenario
    config = load_scenario("hamming")
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml

CONFIGS_DIR = Path(__file__).parent
SCENARIOS_DIR = CONFIGS_DIR / "scenarios"


def load_base_config() -> Dict[str, Any]:
    """Load the base configuration.

    Returns
    -------
    Dict[str, Any]
        Base configuration dictionary.
    """
    base_path = CONFIGS_DIR / "base.yaml"
    if not base_path.exists():
        return {}

    with open(base_path, "r") as f:
        return yaml.safe_load(f) or {}


def load_scenario(name: str) -> Dict[str, Any]:
    """Load a scenario configuration with base inheritance.

    Parameters
    ----------
    name : str
        Scenario name (without .yaml extension), or a path to a YAML file.

    Returns
    -------
    Dict[str, Any]
        Merged configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If scenario file doesn't exist.
    """
    scenario_path = Path(name)
    if scenario_path.suffix not in (".yaml", ".yml"):
        scenario_path = SCENARIOS_DIR / f"{name}.yaml"
    if not scenario_path.exists():
        raise FileNotFoundError(f"Scenario not found: {scenario_path}")

    # Start with base config
    config = load_base_config()

    # Load and merge scenario
    with open(scenario_path, "r") as f:
        scenario = yaml.safe_load(f) or {}

    return _deep_merge(config, scenario)


def list_scenarios() -> List[str]:
    """List available scenarios.

    Returns
    -------
    List[str]
        List of scenario names.
    """
    if not SCENARIOS_DIR.exists():
        return []
    return sorted(f.stem for f in SCENARIOS_DIR.glob("*.yaml"))


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """Deep merge two dictionaries.

    Parameters
    ----------
    base : Dict
        Base dictionary.
    override : Dict
        Override dictionary (values take precedence).

    Returns
    -------
    Dict
        Merged dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


__all__ = [
    "load_base_config",
    "load_scenario",
    "list_scenarios",
    "CONFIGS_DIR",
    "SCENARIOS_DIR",
]
