"""
Experiment configuration for the benchmark runner.

An experiment is a YAML file:

    experiment_name: random_scaling
    output_dir: results
    seed: 1234
    repeats: 5
    warmup: true
    disable_gc: true
    timeout_seconds: 2.0
    dataset:
      dist: random
      params: {range: [-1000000, 1000000]}
    sizes: [100, 1000, 10000]
    algorithms:
      - name: quick
      - name: merge
        config: {order: descending}
      - name: radix
        config: {width: 8, signed: true}

Public API (stable):
    load_experiment_config(path) -> ExperimentConfig
    parse_experiment_config(cfg: dict) -> ExperimentConfig
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from sortlib.algorithms import ALGORITHMS
from sortlib.contracts import Comparator, natural_order, reverse_order

REQUIRED_KEYS: Tuple[str, ...] = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)

_ORDERS: Dict[str, Comparator] = {
    "ascending": natural_order,
    "descending": reverse_order,
}

__all__ = [
    "REQUIRED_KEYS",
    "AlgoSpec",
    "ExperimentConfig",
    "load_experiment_config",
    "parse_experiment_config",
]


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    order: str = "ascending"
    radix_width: int = 8
    radix_signed: bool = True
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def compare(self) -> Comparator:
        return _ORDERS[self.order]


@dataclass(frozen=True)
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: List[int]
    algorithms: List[AlgoSpec]
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)


def load_experiment_config(path: Path) -> ExperimentConfig:
    with Path(path).open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a YAML mapping: {path}")
    return parse_experiment_config(cfg)


def parse_experiment_config(cfg: Dict[str, Any]) -> ExperimentConfig:
    """Validate a raw config mapping and convert it to an ExperimentConfig."""
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    sizes = [int(n) for n in cfg["sizes"] or []]
    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    repeats = int(cfg["repeats"])
    if repeats < 1:
        raise ValueError("Config 'repeats' must be >= 1")

    timeout_seconds = float(cfg["timeout_seconds"])
    if timeout_seconds <= 0:
        raise ValueError("Config 'timeout_seconds' must be positive")

    if not isinstance(cfg["dataset"], dict):
        raise ValueError("Config 'dataset' must be a mapping with 'dist' and 'params'")

    return ExperimentConfig(
        experiment_name=str(cfg["experiment_name"]),
        output_dir=Path(cfg["output_dir"]),
        seed=int(cfg["seed"]),
        repeats=repeats,
        warmup=bool(cfg["warmup"]),
        disable_gc=bool(cfg["disable_gc"]),
        timeout_seconds=timeout_seconds,
        dataset=dict(cfg["dataset"]),
        sizes=sizes,
        algorithms=_parse_algorithms(cfg["algorithms"]),
        raw=dict(cfg),
    )


def _parse_algorithms(entries: Any) -> List[AlgoSpec]:
    if not isinstance(entries, list) or not entries:
        raise ValueError("Config 'algorithms' must be a non-empty list")

    specs: List[AlgoSpec] = []
    seen = set()
    for entry in entries:
        if isinstance(entry, str):
            entry = {"name": entry}
        name = entry.get("name") if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {name!r}. Supported: {list(ALGORITHMS)}")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        order = config.get("order", "ascending")
        if order not in _ORDERS:
            raise ValueError(f"Algorithm '{name}': order must be one of {sorted(_ORDERS)}; got {order!r}")
        if name == "radix" and order != "ascending":
            raise ValueError("Algorithm 'radix': only ascending order is supported")

        width = config.get("width", 8)
        if not isinstance(width, int) or width < 1:
            raise ValueError(f"Algorithm '{name}': width must be a positive integer; got {width!r}")

        specs.append(
            AlgoSpec(
                name=name,
                order=order,
                radix_width=width,
                radix_signed=bool(config.get("signed", True)),
                config=config,
            )
        )
    return specs
