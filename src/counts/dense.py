"""Dense counting of integer values over a known range of levels."""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from .helpers import ensure_integer_data, ensure_table, ensure_weights, level_mask, level_offsets, table_dtype
from .levels import LevelsLike, as_levels
from .weights import WeightsLike

IntegerData = Union[Sequence[int], np.ndarray]


def add_counts(
    table: np.ndarray,
    data: IntegerData,
    levels: LevelsLike,
    weights: Optional[WeightsLike] = None,
) -> np.ndarray:
    """Add the occurrences of each level in ``data`` to an existing table.

    Values outside ``levels`` are ignored without raising or warning. When
    ``weights`` is given, the i-th observation contributes ``weights[i]``
    instead of 1.

    Args:
        table: 1-D array of length ``len(levels)``; slot ``j`` holds level ``low + j``.
        data: Integer observations.
        levels: ``LevelRange``, unit-step ``range`` or integer ``k`` meaning ``[1, k]``.
        weights: Optional weights, one per observation.

    Returns:
        ``table``, updated in place.
    """
    values = ensure_integer_data(data)
    w = None if weights is None else ensure_weights(weights, values.shape[0])
    lv = as_levels(levels)
    ensure_table(table, (lv.size,))

    in_range = level_mask(values, lv)
    offsets = level_offsets(values[in_range], lv)
    if w is None:
        np.add.at(table, offsets, 1)
    else:
        np.add.at(table, offsets, w[in_range])
    return table


def counts(
    data: IntegerData,
    levels: Optional[LevelsLike] = None,
    weights: Optional[WeightsLike] = None,
) -> np.ndarray:
    """Count how often each level occurs in ``data``.

    With no ``levels`` the exact span of ``data`` is used. The result is an
    int64 array for raw counts, or an array of the weights' dtype for weighted
    counts.
    """
    values = ensure_integer_data(data)
    lv = as_levels(levels, values)
    w = None if weights is None else ensure_weights(weights, values.shape[0])
    table = np.zeros(lv.size, dtype=table_dtype(w))
    return add_counts(table, values, lv, w)


__all__ = ["IntegerData", "add_counts", "counts"]
