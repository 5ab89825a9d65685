"""
Experiment runner: sweeps the sorts over growing input sizes from a YAML config.

This is developer tooling for measuring the sorts. It is not part of the
sortkit library API, and the library itself exposes no command line.

Usage (from repo root):
    python -m sortkit.bench.runner experiments/configs/01_elementary_scaling.yaml

Each run creates `<output_dir>/<timestamp>_<experiment_name>/` holding:
    - config_resolved.yaml    # the config as loaded
    - meta.json               # interpreter, library versions, machine, git commit
    - results.jsonl           # one line per timing sample, plus status lines
    - summary.csv             # per (algo, n): time median/IQR/min/max, comparisons, exchanges

Notes:
- One dataset per size n; every algorithm sorts its own copy of it.
- `config.ordering` per algorithm is "natural" (default) or "reversed".
- After a timeout or error an algorithm sits out the remaining (larger) sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sortkit.bench.measure import time_sort_call
from sortkit.datasets import make_dataset
from sortkit.ordering import Ordering, reversed_order

__all__ = ["AlgoSpec", "ExperimentConfig", "REQUIRED_KEYS", "run_experiment", "main"]

_console = Console()

REQUIRED_KEYS = (
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

_ORDERINGS: Dict[str, Callable[[], Optional[Ordering]]] = {
    "natural": lambda: None,
    "reversed": reversed_order,
}

_SUMMARY_COLUMNS = [
    "algo",
    "n",
    "samples_ok",
    "median_ns",
    "iqr_ns",
    "min_ns",
    "max_ns",
    "comparisons",
    "exchanges",
]


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[..., None]
    ordering: Optional[Ordering]
    config: Dict[str, Any]


@dataclass
class ExperimentConfig:
    """A validated experiment config; `raw` is what gets written back out."""

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
    raw: Dict[str, Any] = field(repr=False)

    @classmethod
    def load(cls, path: Path) -> "ExperimentConfig":
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        if not isinstance(raw, dict):
            raise ValueError(f"Config {path} must be a YAML mapping")

        missing = [k for k in REQUIRED_KEYS if k not in raw]
        if missing:
            raise ValueError(f"Missing required config keys: {missing}")

        sizes = [int(n) for n in raw["sizes"]]
        if not sizes or any(n < 0 for n in sizes):
            raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

        return cls(
            experiment_name=str(raw["experiment_name"]),
            output_dir=Path(raw["output_dir"]),
            seed=int(raw["seed"]),
            repeats=int(raw["repeats"]),
            warmup=bool(raw["warmup"]),
            disable_gc=bool(raw["disable_gc"]),
            timeout_seconds=float(raw["timeout_seconds"]),
            dataset=dict(raw["dataset"]),
            sizes=sizes,
            algorithms=_resolve_algorithms(list(raw["algorithms"])),
            raw=raw,
        )


class _RunDirectory:
    """Owns the files of a single run."""

    def __init__(self, base_dir: Path, experiment_name: str) -> None:
        base_dir.mkdir(parents=True, exist_ok=True)
        stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
        self.path = base_dir / f"{stamp}_{experiment_name}"
        self.path.mkdir(exist_ok=False)
        self.results = self.path / "results.jsonl"
        self.summary = self.path / "summary.csv"
        self.meta = self.path / "meta.json"
        self.config = self.path / "config_resolved.yaml"

    def write_config(self, raw: Dict[str, Any]) -> None:
        with self.config.open("w", encoding="utf-8") as f:
            yaml.safe_dump(raw, f, sort_keys=False)

    def write_meta(self, meta: Dict[str, Any]) -> None:
        self.meta.write_text(json.dumps(meta, indent=2), encoding="utf-8")

    def record(self, line: Dict[str, Any]) -> None:
        with self.results.open("a", encoding="utf-8") as f:
            f.write(json.dumps(line, separators=(",", ":"), ensure_ascii=False) + "\n")

    def files(self) -> List[Path]:
        return [self.results, self.summary, self.meta, self.config]


# ------------------------- helpers ------------------------- #

def _resolve_algorithms(entries: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    labels = set()
    for entry in entries:
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        ordering_name = config.get("ordering", "natural")
        if ordering_name not in _ORDERINGS:
            raise ValueError(
                f"Algorithm '{name}': unknown ordering {ordering_name!r}. "
                f"Supported: {sorted(_ORDERINGS)}"
            )

        # The same algorithm may appear once per ordering.
        label = name if ordering_name == "natural" else f"{name}[{ordering_name}]"
        if label in labels:
            raise ValueError(f"Duplicate algorithm entry in config: {label}")
        labels.add(label)

        module_name = f"sortkit.algorithms.{name}"
        try:
            mod = importlib.import_module(module_name)
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module '{module_name}': {e!r}") from e
        sort_fn = getattr(mod, "sort", None)
        if not callable(sort_fn):
            raise AttributeError(
                f"Algorithm module '{name}' must define a callable "
                "`sort(a, lo=None, hi=None, *, ordering=None, stats=None)`"
            )

        specs.append(AlgoSpec(label, sort_fn, _ORDERINGS[ordering_name](), config))
    return specs


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _environment_meta() -> Dict[str, Any]:
    vm = psutil.virtual_memory()
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(vm.total / 2**30, 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _summarize(results_path: Path) -> pd.DataFrame:
    empty = pd.DataFrame(columns=_SUMMARY_COLUMNS)
    if not results_path.exists():
        return empty
    df = pd.read_json(results_path, lines=True)
    # status lines have no time_ns
    if "time_ns" not in df.columns:
        return empty
    df = df[df["time_ns"].notna()]
    if df.empty:
        return empty

    out = df.groupby(["algo", "n"], as_index=False).agg(
        samples_ok=("time_ns", "count"),
        median_ns=("time_ns", "median"),
        q1_ns=("time_ns", lambda s: s.quantile(0.25)),
        q3_ns=("time_ns", lambda s: s.quantile(0.75)),
        min_ns=("time_ns", "min"),
        max_ns=("time_ns", "max"),
        comparisons=("comparisons", "max"),
        exchanges=("exchanges", "max"),
    )
    out["iqr_ns"] = out["q3_ns"] - out["q1_ns"]
    out = out[_SUMMARY_COLUMNS].copy()
    numeric = _SUMMARY_COLUMNS[1:]
    out[numeric] = out[numeric].astype("int64")
    return out.sort_values(["algo", "n"], ignore_index=True)


def _summary_table(summary: pd.DataFrame, sizes: List[int]) -> Table:
    table = Table(title="Benchmark Summary (median ± IQR ms, comparisons / exchanges)")
    table.add_column("Algorithm", style="bold")
    # first, middle and last size, without repeats
    picks = list(dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]))
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo, rows in summary.groupby("algo", sort=True):
        by_n = rows.set_index("n")
        cells = [f"[bold]{algo}[/]"]
        for n in picks:
            if n not in by_n.index:
                cells.append("—")
                continue
            r = by_n.loc[n]
            cells.append(
                f"{r['median_ns'] / 1e6:.2f} ± {r['iqr_ns'] / 1e6:.2f}\n"
                f"{r['comparisons']} cmp / {r['exchanges']} exch"
            )
        table.add_row(*cells)
    return table


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = ExperimentConfig.load(config_path)

    run = _RunDirectory(cfg.output_dir, cfg.experiment_name)
    run.write_config(cfg.raw)
    run.write_meta(_environment_meta())

    rng = np.random.default_rng(cfg.seed)
    skipped: set = set()

    _console.print(f"[bold green]Run directory:[/bold green] {run.path}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in cfg.algorithms)}")

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        data = make_dataset(n, cfg.dataset, rng)

        for algo in cfg.algorithms:
            if algo.name in skipped:
                continue

            res = time_sort_call(
                algo_name=algo.name,
                algo_fn=algo.sort_fn,
                a=data,
                ordering=algo.ordering,
                repeats=cfg.repeats,
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
                timeout_seconds=cfg.timeout_seconds,
            )

            for trial, t_ns in enumerate(res["samples_ns"]):
                run.record(
                    {
                        "algo": algo.name,
                        "n": n,
                        "dataset": cfg.dataset,
                        "trial": trial,
                        "time_ns": t_ns,
                        "comparisons": res["comparisons"],
                        "exchanges": res["exchanges"],
                        "config": algo.config,
                    }
                )

            if res["status"] != "ok":
                skipped.add(algo.name)
                run.record(
                    {
                        "algo": algo.name,
                        "n": n,
                        "status": res["status"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "error": res["error"],
                        "config": algo.config,
                    }
                )
                _console.print(
                    f"[yellow]{algo.name}: {res['status']} at n={n}; skipping larger sizes[/yellow]"
                )

    summary = _summarize(run.results)
    summary.to_csv(run.summary, index=False)

    _console.print()
    _console.print(_summary_table(summary, cfg.sizes))
    _console.print()
    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in run.files():
        _console.print(f" - {p}")

    return run.path


# ------------------------- CLI ------------------------- #

def main(argv: Optional[List[str]] = None) -> None:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    args = p.parse_args(argv)

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
