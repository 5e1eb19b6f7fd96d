"""Simulation settings read from a ``key=value`` variables file."""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from pathlib import Path

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Keys holding integers, mapped to the setting they fill.
_INT_KEYS: dict[str, str] = {
    "num_chefs": "num_chefs",
    "num_bakers": "num_bakers",
    "num_sellers": "num_sellers",
    "num_supply_chain": "num_supply_chain",
    "max_customers": "max_customers",
    "time_limit": "simulation_time_limit",
    "simulation_time_limit": "simulation_time_limit",
    "max_frustrated_customers": "max_frustrated_customers",
    "max_complaining_customers": "max_complaining_customers",
    "max_missing_item_customers": "max_missing_item_customers",
}


@dataclass(frozen=True)
class SimulationConfig:
    """Staff sizes, limits and the start flag of one simulation run."""

    num_chefs: int = 0
    num_bakers: int = 0
    num_sellers: int = 0
    num_supply_chain: int = 0
    max_customers: int = 0
    simulation_time_limit: int = 0
    max_frustrated_customers: int = 0
    max_complaining_customers: int = 0
    max_missing_item_customers: int = 0
    profit_threshold: float = 0.0
    simulation_running: bool = True


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def parse_config(text: str) -> SimulationConfig:
    """Build a configuration from ``key=value`` lines; unknown keys are ignored.

    The key is everything before the first ``=``; the value is the first
    whitespace-separated word after it. Numbers are read from the start of
    the value, as far as they go, and a value that starts with no number
    counts as zero. Later lines override earlier ones.
    """
    values: dict[str, object] = {}
    for line in text.splitlines():
        key, separator, rest = line.partition("=")
        if not separator or not key:
            continue
        words = rest.split()
        if not words:
            continue
        value = words[0]
        if key in _INT_KEYS:
            values[_INT_KEYS[key]] = _leading_int(value)
        elif key == "profit_threshold":
            values["profit_threshold"] = _leading_float(value)
        elif key == "simulation_running":
            values["simulation_running"] = value == "true"
    return dataclasses.replace(SimulationConfig(), **values)


def load_config(path: str | Path) -> SimulationConfig:
    """Read and parse the variables file at ``path``."""
    return parse_config(Path(path).read_text(encoding="utf-8"))