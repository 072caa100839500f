from __future__ import annotations

"""CLI entrypoint for lexdist."""

import logging
from pathlib import Path
from typing import Optional, Union

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import load_pairs, load_settings
from .engine import compute_distance, prepare_sequences
from .harness import InputTooLongError, PairHarness, load_trace, summarise, write_report
from .matrix import SequenceTooLongError, distance_matrix

app = typer.Typer(help="Levenshtein edit distance over characters or UTF-8 bytes.")
console = Console()

FAST_HELP = "Compare UTF-8 bytes instead of characters (overcounts non-ASCII text)."


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def distance(
    a: str = typer.Argument(..., help="First text."),
    b: str = typer.Argument(..., help="Second text."),
    fast: bool = typer.Option(False, "--fast", "-f", help=FAST_HELP),
) -> None:
    console.print(compute_distance(a, b, fast))


def _element_label(element: Union[int, str]) -> str:
    if isinstance(element, int):
        return f"{element:02x}"
    return element if element.isprintable() and element != " " else repr(element)


@app.command()
def matrix(
    a: str = typer.Argument(..., help="Text laid out down the rows."),
    b: str = typer.Argument(..., help="Text laid out across the columns."),
    fast: bool = typer.Option(False, "--fast", "-f", help=FAST_HELP),
) -> None:
    try:
        table_values = distance_matrix(a, b, fast)
    except SequenceTooLongError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2)
    seq_a, seq_b = prepare_sequences(a, b, fast)

    table = Table(title=f"Edit distance: {int(table_values[-1, -1])}")
    table.add_column("")
    table.add_column("ε", justify="right")
    for element in seq_b:
        table.add_column(_element_label(element), justify="right")
    for i, row in enumerate(table_values):
        label = "ε" if i == 0 else _element_label(seq_a[i - 1])
        table.add_row(label, *(str(int(value)) for value in row))
    console.print(table)


@app.command()
def pairs(
    pair_set: str = typer.Argument(..., help="Pair-set name or path to a JSONL file."),
    settings_name: str = typer.Option(
        "default", "--settings", "-s", help="Settings name or path to a YAML file."
    ),
    fast: Optional[bool] = typer.Option(
        None, "--fast/--no-fast", help="Override the settings' fast_mode."
    ),
    max_length: Optional[int] = typer.Option(
        None, "--max-length", min=1, help="Reject inputs longer than this."
    ),
    run_path: Optional[Path] = typer.Option(
        None, "--run-path", help="Directory to store trace.jsonl and summary.json."
    ),
) -> None:
    try:
        settings = load_settings(settings_name)
        loaded = load_pairs(pair_set)
    except FileNotFoundError as exc:
        console.print(f"[red]Not found[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid input[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    overrides = {}
    if fast is not None:
        overrides["fast_mode"] = fast
    if max_length is not None:
        overrides["max_length"] = max_length
    if overrides:
        settings = settings.model_copy(update=overrides)

    try:
        results = PairHarness(settings).run_pairs(loaded, run_dir=run_path)
    except InputTooLongError as exc:
        console.print(f"[red]Input too long[/red]: {escape(str(exc))}")
        raise typer.Exit(code=2)

    table = Table(title="Pair Distances")
    table.add_column("pair_id")
    table.add_column("unit")
    table.add_column("len_a", justify="right")
    table.add_column("len_b", justify="right")
    table.add_column("distance", justify="right")
    table.add_column("normalized", justify="right")
    for record in results:
        table.add_row(
            record.pair_id,
            "bytes" if record.fast_mode else "chars",
            str(record.len_a),
            str(record.len_b),
            str(record.distance),
            f"{record.normalized:.3f}",
        )
    console.print(table)
    if run_path is not None:
        console.print(f"Artefacts written to [green]{run_path}[/green]")


@app.command()
def report(
    run_path: Path = typer.Argument(..., help="Run directory or trace.jsonl file."),
    write: bool = typer.Option(False, "--write", help="Also write report.json."),
) -> None:
    if not run_path.exists():
        console.print(f"[red]Run path not found:[/red] {run_path}")
        raise typer.Exit(code=1)

    try:
        records = load_trace(run_path)
    except FileNotFoundError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid trace[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    summary = summarise(records)
    table = Table(title="Run Metrics")
    table.add_column("metric")
    table.add_column("value")
    for key, value in summary.items():
        table.add_row(key, f"{value:.3f}" if isinstance(value, float) else str(value))
    console.print(table)

    if write:
        target = write_report(run_path)
        console.print(f"Report written to [green]{target}[/green]")


if __name__ == "__main__":  # pragma: no cover
    app()
