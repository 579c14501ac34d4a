"""Dictionary-based counting for arbitrary hashable values."""

from __future__ import annotations

import math
from typing import Any, Dict, Hashable, Iterable, MutableMapping, Optional, TypeVar

from .helpers import as_value_list, ensure_weights
from .weights import WeightsLike

KeyT = TypeVar("KeyT", bound=Hashable)

# Shared key for every NaN observation.
_NAN_KEY = float("nan")


def add_countmap(
    cm: MutableMapping[KeyT, Any],
    data: Iterable[KeyT],
    weights: Optional[WeightsLike] = None,
) -> MutableMapping[KeyT, Any]:
    """Add counts of ``data`` to ``cm``, creating keys for unseen values.

    Unweighted counts add 1 per observation. Weighted counts add ``weights[i]``
    and start unseen keys from the zero of the weights' type, so integer
    weights keep integer totals. Every NaN observation is counted under one shared NaN key.
    """
    values = [_canonical_key(value) for value in as_value_list(data)]
    if weights is None:
        for value in values:
            cm[value] = cm.get(value, 0) + 1
        return cm

    w = ensure_weights(weights, len(values))
    zero = w.dtype.type(0).item()
    for value, weight in zip(values, w.tolist()):
        cm[value] = cm.get(value, zero) + weight
    return cm


def _canonical_key(value: Any) -> Any:
    if isinstance(value, float) and math.isnan(value):
        return _NAN_KEY
    return value


def countmap(data: Iterable[KeyT], weights: Optional[WeightsLike] = None) -> Dict[KeyT, Any]:
    """Map each distinct value in ``data`` to its count (or summed weight)."""
    result: Dict[KeyT, Any] = {}
    add_countmap(result, data, weights)
    return result


__all__ = ["add_countmap", "countmap"]
