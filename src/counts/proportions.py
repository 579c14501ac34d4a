"""Turning counts into proportions."""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, Mapping, Optional, TypeVar, Union, overload

import numpy as np

from .dense import IntegerData, counts
from .helpers import as_value_list, ensure_integer_data, weight_total
from .joint import JointLevelsLike, joint_counts
from .levels import LevelsLike
from .sparse import countmap
from .weights import WeightsLike

KeyT = TypeVar("KeyT", bound=Hashable)


@overload
def to_proportions(tabulated: np.ndarray) -> np.ndarray: ...


@overload
def to_proportions(tabulated: Mapping[KeyT, Any]) -> Dict[KeyT, float]: ...


def to_proportions(tabulated: Union[np.ndarray, Mapping[KeyT, Any]]) -> Union[np.ndarray, Dict[KeyT, float]]:
    """Rescale a count table or count map so its entries sum to one.

    A zero total is not special-cased: every entry becomes NaN.
    """
    if isinstance(tabulated, Mapping):
        return _normalize_countmap(tabulated, sum(tabulated.values()))
    table = np.asarray(tabulated, dtype=np.float64)
    return table / table.sum()


def proportions(
    data: IntegerData,
    levels: Optional[LevelsLike] = None,
    weights: Optional[WeightsLike] = None,
) -> np.ndarray:
    """Proportion of observations falling on each level.

    Equivalent to ``counts(data, levels) / len(data)``, or to the weighted
    counts divided by the total weight. Out-of-range observations still count
    towards the denominator.
    """
    values = ensure_integer_data(data)
    total = values.shape[0] if weights is None else weight_total(weights)
    return counts(values, levels, weights) * _reciprocal(total)


def joint_proportions(
    x: IntegerData,
    y: IntegerData,
    levels: Optional[JointLevelsLike] = None,
    weights: Optional[WeightsLike] = None,
) -> np.ndarray:
    """Two-way analogue of :func:`proportions`."""
    xs = ensure_integer_data(x, name="x")
    table = joint_counts(xs, y, levels, weights)
    total = xs.shape[0] if weights is None else weight_total(weights)
    return table * _reciprocal(total)


def proportionmap(data: Iterable[KeyT], weights: Optional[WeightsLike] = None) -> Dict[KeyT, float]:
    """Map each distinct value in ``data`` to its share of the observations."""
    values = as_value_list(data)
    total = len(values) if weights is None else weight_total(weights)
    return _normalize_countmap(countmap(values, weights), total)


def _normalize_countmap(cm: Mapping[KeyT, Any], total: Union[int, float]) -> Dict[KeyT, float]:
    denominator = np.float64(total)
    return {key: float(np.float64(value) / denominator) for key, value in cm.items()}


def _reciprocal(total: Union[int, float]) -> np.float64:
    return np.float64(1.0) / np.float64(total)


__all__ = ["joint_proportions", "proportionmap", "proportions", "to_proportions"]
