"""
Experiment runner: orchestrates a full benchmarking sweep from a YAML config.

Usage (from repo root):
    sortlib-bench experiments/random_scaling.yaml
    python -m sortlib.bench.runner experiments/random_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram)
    - results.jsonl           # one JSON line per timing sample (+ timeout/error lines)
    - summary.csv             # median + IQR time and median comparisons per (algo, n)
    - (console) rich/tqdm summaries

Design notes:
- For each size n, we generate ONE dataset and give a copy of it to every algorithm.
- Harness handles warmup/GC; we keep timing clean.
- On timeout/error/unsorted output for an algorithm at size n, we skip larger
  sizes for that algorithm.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import logging
import os
import platform
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sortlib.algorithms import sort_in_place
from sortlib.bench.config import AlgoSpec, ExperimentConfig, load_experiment_config
from sortlib.bench.measure import SortFn, time_sort_call
from sortlib.contracts import CallCounter
from sortlib.datasets import make_dataset

logger = logging.getLogger(__name__)
_console = Console()

_SUMMARY_COLUMNS = [
    "algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "median_comparisons",
]


# ------------------------- helpers: IO & meta ------------------------- #

def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _make_sort_fn(spec: AlgoSpec) -> SortFn:
    def sort_fn(seq: List[Any], counter: CallCounter) -> None:
        sort_in_place(
            spec.name,
            seq,
            spec.compare,
            counter=counter,
            radix_width=spec.radix_width,
            radix_signed=spec.radix_signed,
        )

    return sort_fn


# ------------------------- summary ------------------------- #

def _iqr_ns(group: pd.Series) -> int:
    return int(group.quantile(0.75) - group.quantile(0.25))


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)
    # Only successful samples carry time_ns
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=_SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr_ns),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            median_comparisons=("comparisons", "median"),
        )
    )
    # even sample counts give half-integer comparison medians; that column stays float
    int_cols = ["n", "median_ns", "iqr_ns", "min_ns", "max_ns"]
    out[int_cols] = out[int_cols].astype("int64")
    out["median_comparisons"] = out["median_comparisons"].astype("float64")
    return out[_SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms / comparisons)")
    table.add_column("Algorithm", style="bold")

    # first / middle / last n
    picks: List[Tuple[str, int]] = []
    for npick in dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]):
        picks.append((f"n={npick}", npick))
        table.add_column(f"n={npick}", justify="right")

    def _format_cell(row: Optional[pd.Series]) -> str:
        if row is None:
            return "—"
        median_ms = int(row["median_ns"]) / 1e6
        iqr_ms = int(row["iqr_ns"]) / 1e6
        return f"{median_ms:.2f} ± {iqr_ms:.2f} / {row['median_comparisons']:.1f}"

    for algo in summary["algo"].unique():
        cells = [f"[bold]{algo}[/]"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            cells.append(_format_cell(None if s.empty else s.iloc[0]))
        table.add_row(*cells)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg: ExperimentConfig = load_experiment_config(config_path)

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg.raw, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(cfg.seed)
    per_algo_skip = {a.name: False for a in cfg.algorithms}
    sort_fns = {a.name: _make_sort_fn(a) for a in cfg.algorithms}

    logger.info("run directory: %s", run_dir)
    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in cfg.algorithms)}")
    _console.print()

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(int(n), cfg.dataset, rng)

        for spec in cfg.algorithms:
            if per_algo_skip[spec.name]:
                continue

            res = time_sort_call(
                algo_name=spec.name,
                sort_fn=sort_fns[spec.name],
                a=base_a,
                compare=spec.compare,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
            )

            for trial_idx, (t_ns, comparisons) in enumerate(zip(res["samples_ns"], res["comparisons"])):
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": int(n),
                        "dataset": cfg.dataset,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "comparisons": int(comparisons),
                        "config": spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                per_algo_skip[spec.name] = True
                logger.warning("skipping %s for sizes above %d (%s)", spec.name, n, status)
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": int(n),
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": spec.config,
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_rich_summary(summary_df, cfg.sizes)
    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
