"""
Benchmark harness public API.

Re-exports:
    load_experiment_config / ExperimentConfig / AlgoSpec
    time_sort_call

The experiment runner lives in `sortlib.bench.runner` (imported on demand, it
pulls in pandas, rich and tqdm).
"""

from .config import AlgoSpec, ExperimentConfig, load_experiment_config, parse_experiment_config
from .measure import time_sort_call

__all__ = [
    "AlgoSpec",
    "ExperimentConfig",
    "load_experiment_config",
    "parse_experiment_config",
    "time_sort_call",
]
