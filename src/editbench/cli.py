from __future__ import annotations

"""CLI entrypoint for editbench."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import reports
from .config import ConfigNotFoundError, load_config
from .distance import available_variants
from .interactive import collect_words
from .runner.benchmark import BenchmarkRunner, persist_run

app = typer.Typer(help="Edit-distance calculator and memory/time benchmark.")
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _show_distances(first: str, second: str) -> None:
    table = Table(title="Edit Distance")
    table.add_column("variant")
    table.add_column("distance", justify="right")
    for name, fn in available_variants().items():
        table.add_row(name, str(fn(first, second)))
    console.print(f"{first!r} -> {second!r}", markup=False)
    console.print(table)


@app.command()
def distance(
    first: str = typer.Argument(..., help="Source sequence."),
    second: str = typer.Argument(..., help="Target sequence."),
    ignore_case: bool = typer.Option(
        False, "--ignore-case", "-i", help="Lower-case both inputs before comparing."
    ),
) -> None:
    if ignore_case:
        first, second = first.lower(), second.lower()
    _show_distances(first, second)


@app.command()
def interactive() -> None:
    first, second = collect_words()
    _show_distances(first, second)


@app.command()
def bench(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML benchmark config."
    ),
    sizes: Optional[List[int]] = typer.Option(
        None,
        "--size",
        "-s",
        min=1,
        help="Input size to run; repeat to give several.",
    ),
    limit: Optional[int] = typer.Option(
        None, "--limit", "-l", help="Run only the first N sizes."
    ),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store run artefacts."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
) -> None:
    _configure_logging(verbose)
    try:
        config = load_config(config_path)
    except (ConfigNotFoundError, ValueError) as exc:
        console.print(f"[red]Bad config[/red]: {exc}")
        raise typer.Exit(code=1)

    runner = BenchmarkRunner(config)
    results = runner.run(sizes=sizes or None, limit=limit)

    table = Table(title="Edit Distance Benchmark")
    table.add_column("size", justify="right")
    table.add_column("variant")
    table.add_column("distance", justify="right")
    table.add_column("seconds", justify="right")
    table.add_column("memory_bytes", justify="right")
    for record in results:
        table.add_row(
            str(record.size),
            record.variant,
            "skipped" if record.skipped else str(record.distance),
            "" if record.seconds is None else f"{record.seconds:.6f}",
            str(record.memory_bytes),
        )
    console.print(table)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    run_dir = run_path or Path("runs") / f"{timestamp}_{config.workload}"
    summary = persist_run(results, run_dir, config=config)
    console.print(f"Artefacts written to [green]{run_dir}[/green]")

    if summary["distance_mismatches"]:
        console.print(
            f"[red]Variants disagree at sizes[/red]: {summary['distance_mismatches']}"
        )
        raise typer.Exit(code=1)


@app.command()
def report(
    run_path: Path = typer.Argument(..., help="Run directory containing trace.jsonl")
) -> None:
    if not run_path.exists():
        console.print(f"[red]Run path not found:[/red] {run_path}")
        raise typer.Exit(code=1)

    try:
        records = reports.load_trace(run_path)
    except FileNotFoundError as exc:
        console.print(f"[red]Trace not found:[/red] {exc}")
        raise typer.Exit(code=1)
    summary = reports.summarise(records)

    table = Table(title="Run Metrics")
    table.add_column("variant")
    table.add_column("runs", justify="right")
    table.add_column("skipped", justify="right")
    table.add_column("seconds", justify="right")
    table.add_column("max_size", justify="right")
    table.add_column("peak_bytes", justify="right")
    for name, stats in summary["variants"].items():
        table.add_row(
            name,
            str(stats["runs"]),
            str(stats["skipped"]),
            f"{stats['total_seconds']:.3f}",
            str(stats["max_size"]),
            str(stats["peak_memory_bytes"]),
        )
    console.print(table)

    ratio = summary["full_over_rolling_time"]
    if ratio is not None:
        console.print(f"full_table / rolling_row time: {ratio:.3f}")
    if summary["distance_mismatches"]:
        console.print(
            f"[red]Distance mismatches at sizes[/red]: {summary['distance_mismatches']}"
        )


if __name__ == "__main__":  # pragma: no cover
    app()
