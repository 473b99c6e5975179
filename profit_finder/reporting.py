"""
Console output and report files for search timings and benchmarks.
"""
import json
from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd
from rich.console import Console
from rich.table import Table

from profit_finder.config import Config
from profit_finder.types import AlgorithmTiming, TradeResult

__all__ = ["format_trade_result", "print_timings", "print_benchmark", "generate_all_reports"]


def _to_json_serializable(data):
    """Recursively converts non-serializable types in a dictionary."""
    if isinstance(data, dict):
        return {k: _to_json_serializable(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_json_serializable(i) for i in data]
    if isinstance(data, Path):
        return str(data)
    if data is None or (isinstance(data, float) and np.isnan(data)):
        return None
    # Convert numpy types to native Python types
    if isinstance(data, np.integer):
        return int(data)
    if isinstance(data, np.floating):
        return None if np.isnan(data) else float(data)
    if isinstance(data, np.bool_):
        return bool(data)
    return data


def format_trade_result(result: TradeResult) -> str:
    """Renders a result as the Buy Date / Sell Date / Profit block."""
    return str(result)


def print_timings(timings: Sequence[AlgorithmTiming], console: Console) -> None:
    """Prints one row per timed algorithm and flags disagreeing profits."""
    table = Table(title="Maximum Profit Search")
    table.add_column("Algorithm")
    table.add_column("Time Taken (ns)", justify="right")
    table.add_column("Buy Date", justify="right")
    table.add_column("Sell Date", justify="right")
    table.add_column("Profit", justify="right")

    for timing in timings:
        result = timing.result
        table.add_row(
            timing.algorithm,
            f"{timing.elapsed_ns:,}",
            str(result.buy_day),
            str(result.sell_day),
            str(result.profit),
        )
    console.print(table)

    if len({t.result.profit for t in timings}) > 1:
        console.print("[bold yellow]Warning:[/bold yellow] algorithms reported different profits.")


def print_benchmark(frame: pd.DataFrame, fit: pd.DataFrame, console: Console) -> None:
    """Prints the benchmark measurements and the fitted growth exponents."""
    table = Table(title="Benchmark")
    for column in ["Algorithm", "Size", "Elapsed (ns)", "Profit", "ns / op"]:
        table.add_column(column, justify="left" if column == "Algorithm" else "right")
    for row in frame.itertuples(index=False):
        table.add_row(row.algorithm, str(row.size), f"{int(row.elapsed_ns):,}", str(row.profit), f"{row.ns_per_op:.3f}")
    console.print(table)

    fit_table = Table(title="Growth Exponent (time ~ n^k)")
    fit_table.add_column("Algorithm")
    fit_table.add_column("Empirical k", justify="right")
    fit_table.add_column("Theoretical k", justify="right")
    for row in fit.itertuples(index=False):
        fit_table.add_row(row.algorithm, f"{row.empirical_exponent:.2f}", f"{row.theoretical_exponent:.2f}")
    console.print(fit_table)


# impure
def _generate_benchmark_csv(frame: pd.DataFrame, output_dir: Path) -> None:
    """Writes every benchmark measurement to a CSV file."""
    frame.to_csv(output_dir / "benchmark.csv", index=False)


# impure
def _generate_summary_json(frame: pd.DataFrame, fit: pd.DataFrame, config: Config, output_dir: Path) -> None:
    """Generates a JSON file with the run settings, measurements, and fitted exponents."""
    summary = {
        "run_name": config.run.name,
        "seed": config.run.seed,
        "repeats": config.benchmark.repeats,
        "measurements": _to_json_serializable(frame.to_dict(orient="records")),
        "complexity": _to_json_serializable(fit.to_dict(orient="records")),
    }
    with (output_dir / "summary.json").open("w") as f:
        json.dump(summary, f, indent=2)


# impure
def _generate_summary_markdown(frame: pd.DataFrame, fit: pd.DataFrame, config: Config, output_dir: Path) -> None:
    """Generates a Markdown file with a human-readable summary."""
    md = f"# Benchmark Summary: {config.run.name}\n\n"
    md += "## Measurements\n\n"
    md += "| Algorithm | Size | Elapsed (ns) | Profit |\n|---|---|---|---|\n"
    for row in frame.itertuples(index=False):
        md += f"| {row.algorithm} | {row.size} | {row.elapsed_ns} | {row.profit} |\n"

    md += "\n## Growth Exponent\n\n"
    for row in fit.itertuples(index=False):
        md += (
            f"- **{row.algorithm}**: empirical {row.empirical_exponent:.2f}, "
            f"theoretical {row.theoretical_exponent:.2f}\n"
        )

    (output_dir / "summary.md").write_text(md)


# impure
def generate_all_reports(
    config: Config,
    frame: pd.DataFrame,
    fit: pd.DataFrame,
    run_dir: Path,
    console: Console,
) -> None:
    """
    Orchestrates the generation of all output reports.
    #impure: Writes to the filesystem.
    """
    if frame.empty:
        console.print("[bold red]Error: No benchmark measurements. Cannot generate reports.[/bold red]")
        return

    formats = config.reporting.output_formats

    if "csv" in formats:
        console.print("Generating benchmark CSV...")
        _generate_benchmark_csv(frame, run_dir)

    if "json" in formats:
        console.print("Generating summary JSON...")
        _generate_summary_json(frame, fit, config, run_dir)

    if "markdown" in formats:
        console.print("Generating summary Markdown...")
        _generate_summary_markdown(frame, fit, config, run_dir)

    console.print("All reports generated.")
