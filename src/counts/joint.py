"""Two-way (contingency) counting of paired integer sequences."""

from __future__ import annotations

from typing import Optional, Tuple, Union

import numpy as np

from .dense import IntegerData
from .errors import DimensionMismatch
from .helpers import ensure_integer_data, ensure_table, ensure_weights, level_mask, level_offsets, table_dtype
from .levels import LevelRange, LevelsLike, as_joint_levels
from .weights import WeightsLike

JointLevelsLike = Union[LevelsLike, Tuple[LevelsLike, LevelsLike]]


def add_joint_counts(
    table: np.ndarray,
    x: IntegerData,
    y: IntegerData,
    levels: JointLevelsLike,
    weights: Optional[WeightsLike] = None,
) -> np.ndarray:
    """Add co-occurrence counts of ``(x[i], y[i])`` pairs to an existing table.

    A pair is counted only when both coordinates fall inside their axis levels.
    ``table[i, j]`` holds the pair ``(xlevels.low + i, ylevels.low + j)``.
    """
    xs, ys = _paired_data(x, y)
    w = None if weights is None else ensure_weights(weights, xs.shape[0])
    xlevels, ylevels = _explicit_joint_levels(levels, xs, ys)
    ensure_table(table, (xlevels.size, ylevels.size))

    in_range = level_mask(xs, xlevels) & level_mask(ys, ylevels)
    rows = level_offsets(xs[in_range], xlevels)
    cols = level_offsets(ys[in_range], ylevels)
    if w is None:
        np.add.at(table, (rows, cols), 1)
    else:
        np.add.at(table, (rows, cols), w[in_range])
    return table


def joint_counts(
    x: IntegerData,
    y: IntegerData,
    levels: Optional[JointLevelsLike] = None,
    weights: Optional[WeightsLike] = None,
) -> np.ndarray:
    """Build a contingency table for two equal-length integer sequences.

    Args:
        x: Row observations.
        y: Column observations, aligned with ``x``.
        levels: A single level description shared by both axes, a pair of
            per-axis descriptions (``(kx, ky)`` means ``[1, kx] x [1, ky]``),
            or None to use the span of ``x`` and of ``y`` independently.
        weights: Optional weights, one per pair.

    Returns:
        Array of shape ``(len(xlevels), len(ylevels))``.
    """
    xs, ys = _paired_data(x, y)
    xlevels, ylevels = as_joint_levels(levels, xs, ys)
    w = None if weights is None else ensure_weights(weights, xs.shape[0])
    table = np.zeros((xlevels.size, ylevels.size), dtype=table_dtype(w))
    return add_joint_counts(table, xs, ys, (xlevels, ylevels), w)


def _paired_data(x: IntegerData, y: IntegerData) -> Tuple[np.ndarray, np.ndarray]:
    xs = ensure_integer_data(x, name="x")
    ys = ensure_integer_data(y, name="y")
    if xs.shape[0] != ys.shape[0]:
        raise DimensionMismatch(f"x and y must have the same length, got {xs.shape[0]} and {ys.shape[0]}")
    return xs, ys


def _explicit_joint_levels(
    levels: JointLevelsLike, xs: np.ndarray, ys: np.ndarray
) -> Tuple[LevelRange, LevelRange]:
    if levels is None or (isinstance(levels, tuple) and None in levels):
        raise ValueError("Levels must be given when accumulating into an existing table.")
    return as_joint_levels(levels, xs, ys)


__all__ = ["JointLevelsLike", "add_joint_counts", "joint_counts"]
