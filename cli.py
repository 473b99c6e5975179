"""
CLI entry point for the profit-finder application.
"""
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from profit_finder.benchmark import complexity_fit, run_benchmark
from profit_finder.config import Config, load_config
from profit_finder.data import generate_price_series, load_price_series, write_price_file
from profit_finder.errors import ProfitFinderError
from profit_finder.reporting import format_trade_result, generate_all_reports, print_benchmark, print_timings
from profit_finder.timing import ALGORITHMS, time_algorithm

# Console is created once and passed down. Log to stderr to keep stdout for results.
app = typer.Typer(pretty_exceptions_show_locals=False, help="Maximum profit stock trade finder.")
console = Console(stderr=True)

ALGORITHM_TITLES = {"exhaustive": "Brute Force", "divide_and_conquer": "Divide & Conquer"}


def _load_config_or_exit(config_path: Path) -> Config:
    """Helper to load config and exit on failure."""
    try:
        return load_config(config_path)
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[bold red]Configuration Error:[/bold red] {e}")
        raise typer.Exit(code=1)


def _setup_logging(verbose: bool) -> None:
    """Routes library log records through rich on stderr when asked to."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(message)s", handlers=[RichHandler(console=console)]
        )


VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Log progress to stderr.")


@app.command()
def run(
    input_path: Optional[Path] = typer.Option(
        None, "--input", "-i", help="Price file: a day count followed by that many prices.",
        exists=True, dir_okay=False,
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML configuration naming data.input_path.", exists=True
    ),
    verbose: bool = VERBOSE_OPTION,
):
    """Search a price file with every algorithm and compare their times."""
    _setup_logging(verbose)
    algorithms: List[str] = list(ALGORITHMS)
    if config_path is not None:
        config = _load_config_or_exit(config_path)
        algorithms = list(config.benchmark.algorithms)
        if input_path is None:
            input_path = config.data.input_path

    if input_path is None:
        console.print("[bold red]Error:[/bold red] Provide --input or a config with data.input_path.")
        raise typer.Exit(code=1)

    try:
        series = load_price_series(input_path)
        timings = []
        for name in algorithms:
            timing = time_algorithm(name, series)
            timings.append(timing)
            console.rule(f"[bold]{ALGORITHM_TITLES[name]}[/bold]")
            console.print(f"Time Taken: {timing.elapsed_ns} nano seconds")
            console.print(format_trade_result(timing.result), highlight=False)
    except (ProfitFinderError, FileNotFoundError) as e:
        console.print(f"[bold red]Input Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    print_timings(timings, console)


@app.command()
def generate(
    size: int = typer.Option(..., "--size", "-n", min=0, help="Number of days to generate."),
    output: Path = typer.Option(..., "--output", "-o", help="Where to write the price file."),
    seed: int = typer.Option(42, "--seed", help="Random seed."),
    low: int = typer.Option(1, "--low", help="Lowest possible price."),
    high: int = typer.Option(500, "--high", help="Highest possible price."),
):
    """Write a random price file usable by `run`."""
    try:
        series = generate_price_series(size, low, high, seed)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)

    write_price_file([point.price for point in series], output)
    console.print(f"[bold green]Wrote {size} prices to {output}.[/bold green]")


@app.command()
def benchmark(
    config_path: Path = typer.Option(
        ..., "--config", "-c", help="Path to the YAML configuration file.", exists=True
    ),
    verbose: bool = VERBOSE_OPTION,
):
    """Time every algorithm over growing series and fit their growth rate."""
    _setup_logging(verbose)
    config = _load_config_or_exit(config_path)

    console.rule("[bold]1. Running Benchmark[/bold]")
    try:
        frame = run_benchmark(config)
    except RuntimeError as e:
        console.print(f"[bold red]Benchmark Error:[/bold red] {e}")
        raise typer.Exit(code=1)
    fit = complexity_fit(frame)
    print_benchmark(frame, fit, console)

    console.rule("[bold]2. Generating Reports[/bold]")
    run_dir = Path(config.run.output_dir)
    run_dir.mkdir(parents=True, exist_ok=True)
    console.print(f"Run artifacts will be saved to: [cyan]{run_dir}[/cyan]")
    generate_all_reports(config, frame, fit, run_dir, console)

    console.print("[bold green]Benchmark command finished.[/bold green]")


if __name__ == "__main__":
    app()
