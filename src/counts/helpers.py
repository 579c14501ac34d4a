"""Input validation shared by the dense and sparse counters."""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import DimensionMismatch
from .levels import LevelRange
from .weights import Weights, WeightsLike


def ensure_integer_data(values: Union[Sequence[int], np.ndarray], *, name: str = "data") -> np.ndarray:
    """Coerce values into a 1-D integer numpy array."""
    arr = np.asarray(values)
    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)
    if arr.ndim != 1:
        raise ValueError(f"{name} must be 1-D, got shape {arr.shape}")
    if arr.dtype.kind not in "iub":
        raise TypeError(f"{name} must contain integers, got dtype {arr.dtype}")
    if arr.dtype.kind == "u" and arr.max() > np.iinfo(np.int64).max:
        # Values past the int64 range keep their unsigned dtype.
        return arr
    return arr.astype(np.int64, copy=False)


def level_mask(values: np.ndarray, levels: LevelRange) -> np.ndarray:
    """Boolean mask of the integer ``values`` lying inside ``levels``."""
    info = np.iinfo(values.dtype)
    if levels.high < info.min or levels.low > info.max:
        return np.zeros(values.shape, dtype=bool)
    # Bounds are clipped to the dtype so the comparison cannot overflow.
    low = values.dtype.type(max(levels.low, info.min))
    high = values.dtype.type(min(levels.high, info.max))
    return (values >= low) & (values <= high)


def level_offsets(values: np.ndarray, levels: LevelRange) -> np.ndarray:
    """Table indices of in-range ``values``, i.e. ``value - levels.low``."""
    if values.size == 0:
        return np.zeros(0, dtype=np.intp)
    info = np.iinfo(values.dtype)
    low = max(levels.low, info.min)
    shifted = (values - values.dtype.type(low)).astype(np.intp)
    return shifted + (low - levels.low)


def ensure_weights(weights: WeightsLike, n_samples: int, *, name: str = "weights") -> np.ndarray:
    """Validate a weight vector against the number of observations it pairs with."""
    arr = weights.values if isinstance(weights, Weights) else Weights(weights).values
    if arr.shape[0] != n_samples:
        raise DimensionMismatch(f"{name} must have length {n_samples}, got {arr.shape[0]}")
    return arr


def ensure_table(table: Any, shape: Tuple[int, ...], *, name: str = "table") -> np.ndarray:
    """Check that a caller-supplied accumulator has exactly ``shape``."""
    if not isinstance(table, np.ndarray):
        raise TypeError(f"{name} must be a numpy array, got {type(table).__name__}")
    if table.shape != shape:
        raise DimensionMismatch(f"{name} must have shape {shape}, got {table.shape}")
    return table


def as_value_list(values: Any) -> List[Any]:
    """Materialize observations for the sparse path, unwrapping numpy scalars."""
    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"data must be 1-D, got shape {values.shape}")
        return values.tolist()
    return list(values)


def weight_total(weights: WeightsLike) -> Union[int, float]:
    if isinstance(weights, Weights):
        return weights.total
    return Weights(weights).total


def table_dtype(weights: Optional[np.ndarray]) -> np.dtype:
    """Element type of a freshly allocated table: int64, or the weights' dtype."""
    if weights is None:
        return np.dtype(np.int64)
    return weights.dtype


__all__ = [
    "as_value_list",
    "ensure_integer_data",
    "ensure_table",
    "ensure_weights",
    "level_mask",
    "level_offsets",
    "table_dtype",
    "weight_total",
]
