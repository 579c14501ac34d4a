from pathlib import Path
from typing import Any, Iterable, List, Optional, Tuple

import typer

from src.counts import (
    DEFAULT_DELIMITER,
    DimensionMismatch,
    TabulationConfig,
    as_levels,
    countmap,
    counts,
    joint_counts,
    joint_proportions,
    parse_levels,
    proportionmap,
    proportions,
)
from src.counts.levels import as_joint_levels
from src.tables import LoadedColumns, load_columns

app = typer.Typer()


def _build_config(
    column: str,
    second_column: Optional[str],
    weights_column: Optional[str],
    levels: Optional[str],
    normalize: bool,
    delimiter: str,
) -> TabulationConfig:
    try:
        config = TabulationConfig(
            column=column,
            second_column=second_column,
            weights_column=weights_column,
            levels=parse_levels(levels, joint=second_column is not None),
            normalize=normalize,
            delimiter=delimiter,
        )
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return config


def _load(path: Path, config: TabulationConfig, *, integer: bool = True) -> LoadedColumns:
    try:
        loaded = load_columns(path, config, integer=integer)
    except (KeyError, TypeError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    print(f"[counts] Loaded {len(loaded)} rows from {path} ({loaded.dropped_rows} dropped with missing values)")
    return loaded


def _fmt(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


def _echo_rows(rows: Iterable[Tuple[Any, ...]]) -> None:
    for row in rows:
        typer.echo("\t".join(_fmt(cell) for cell in row))


@app.command("counts")
def counts_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Delimited file with a header row."),
    column: str = typer.Option(..., "--column", "-c", help="Integer column to count."),
    levels: Optional[str] = typer.Option(
        None, "--levels", help="Levels to count: 'k' for 1..k, 'lo:hi', or omit to use the data span."
    ),
    weights: Optional[str] = typer.Option(None, "--weights", "-w", help="Column holding per-row weights."),
    normalize: bool = typer.Option(False, "--proportions", help="Report proportions instead of counts."),
    delimiter: str = typer.Option(DEFAULT_DELIMITER, "--delimiter", help="Field separator."),
) -> None:
    """
    Count how often each integer level occurs in a column.
    """
    config = _build_config(column, None, weights, levels, normalize, delimiter)
    loaded = _load(path, config)
    try:
        resolved = as_levels(config.levels, loaded.values)  # type: ignore[arg-type]
        compute = proportions if config.normalize else counts
        table = compute(loaded.values, resolved, loaded.weights)
    except (DimensionMismatch, TypeError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"{config.column}\t{'proportion' if config.normalize else 'count'}")
    _echo_rows(zip(resolved, table.tolist()))


@app.command("crosstab")
def crosstab_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Delimited file with a header row."),
    x: str = typer.Option(..., "--x", help="Integer column indexing table rows."),
    y: str = typer.Option(..., "--y", help="Integer column indexing table columns."),
    levels: Optional[str] = typer.Option(
        None, "--levels", help="Shared levels ('k' or 'lo:hi') or per-axis levels separated by a comma."
    ),
    weights: Optional[str] = typer.Option(None, "--weights", "-w", help="Column holding per-row weights."),
    normalize: bool = typer.Option(False, "--proportions", help="Report proportions instead of counts."),
    delimiter: str = typer.Option(DEFAULT_DELIMITER, "--delimiter", help="Field separator."),
) -> None:
    """
    Cross-tabulate two integer columns into a contingency table.
    """
    config = _build_config(x, y, weights, levels, normalize, delimiter)
    loaded = _load(path, config)
    try:
        xlevels, ylevels = as_joint_levels(config.levels, loaded.values, loaded.second)  # type: ignore[arg-type]
        compute = joint_proportions if config.normalize else joint_counts
        table = compute(loaded.values, loaded.second, (xlevels, ylevels), loaded.weights)
    except (DimensionMismatch, TypeError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    header: List[Any] = [f"{x}\\{y}", *ylevels]
    _echo_rows([tuple(header)])
    _echo_rows((level, *row) for level, row in zip(xlevels, table.tolist()))


@app.command("countmap")
def countmap_command(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Delimited file with a header row."),
    column: str = typer.Option(..., "--column", "-c", help="Column whose distinct values are counted."),
    weights: Optional[str] = typer.Option(None, "--weights", "-w", help="Column holding per-row weights."),
    normalize: bool = typer.Option(False, "--proportions", help="Report proportions instead of counts."),
    delimiter: str = typer.Option(DEFAULT_DELIMITER, "--delimiter", help="Field separator."),
) -> None:
    """
    Count every distinct value of a column, in order of first appearance.
    """
    config = _build_config(column, None, weights, None, normalize, delimiter)
    loaded = _load(path, config, integer=False)
    compute = proportionmap if config.normalize else countmap
    try:
        result = compute(loaded.values, loaded.weights)
    except DimensionMismatch as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"{config.column}\t{'proportion' if config.normalize else 'count'}")
    _echo_rows(result.items())


if __name__ == "__main__":
    app()
