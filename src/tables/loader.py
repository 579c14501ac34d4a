"""Load the columns named by a ``TabulationConfig`` from a delimited file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np
import pandas as pd

from src.counts.config import TabulationConfig


@dataclass(frozen=True)
class LoadedColumns:
    """Observations (and optional weights) pulled from a table."""

    values: np.ndarray
    second: Optional[np.ndarray]
    weights: Optional[np.ndarray]
    dropped_rows: int

    def __len__(self) -> int:
        return int(self.values.shape[0])


def load_columns(path: Path, config: TabulationConfig, *, integer: bool = True) -> LoadedColumns:
    """Read the requested columns, dropping rows where any of them is missing.

    Args:
        path: CSV/TSV file with a header row.
        config: Names the columns and the delimiter.
        integer: Coerce the observation columns to int64, as the dense counters require.
    """
    config.validate()
    frame = pd.read_csv(path, sep=config.delimiter)
    missing = [name for name in config.columns if name not in frame.columns]
    if missing:
        raise KeyError(f"Column(s) not found in {path}: {', '.join(missing)}")

    selected = frame.loc[:, list(config.columns)]
    complete = selected.dropna()
    dropped = int(len(selected) - len(complete))

    values = _observations(complete[config.column], integer=integer)
    second = None
    if config.second_column is not None:
        second = _observations(complete[config.second_column], integer=integer)
    weights = None
    if config.weights_column is not None:
        weights = pd.to_numeric(complete[config.weights_column]).to_numpy()

    return LoadedColumns(values=values, second=second, weights=weights, dropped_rows=dropped)


def _observations(column: pd.Series, *, integer: bool) -> np.ndarray:
    if pd.api.types.is_integer_dtype(column):
        return column.to_numpy(dtype=np.int64)
    if pd.api.types.is_float_dtype(column):
        # Integer columns with blanks are parsed as floats; restore them after dropna.
        arr = column.to_numpy(dtype=np.float64)
        if np.all(np.mod(arr, 1.0) == 0.0):
            return arr.astype(np.int64)
    if not integer:
        return column.to_numpy()
    raise TypeError(f"Column '{column.name}' must hold integers, got dtype {column.dtype}")


__all__ = ["LoadedColumns", "load_columns"]
