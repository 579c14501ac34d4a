"""Weight vectors paired with observations."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np


class Weights:
    """Immutable 1-D weight vector with a cached total.

    The dtype of the supplied values is kept as-is so integer weights produce
    integer tables and maps. Weights are expected to be non-negative; this is
    not checked.
    """

    def __init__(self, values: Union[Sequence[float], np.ndarray]) -> None:
        arr = np.array(values)
        if arr.size == 0:
            arr = arr.astype(np.float64)
        if arr.ndim != 1:
            raise ValueError(f"weights must be 1-D, got shape {arr.shape}")
        if arr.dtype.kind not in "iuf":
            raise TypeError(f"weights must be numeric, got dtype {arr.dtype}")
        arr.setflags(write=False)
        self._values = arr
        self._total = arr.sum()

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def total(self) -> Union[int, float]:
        """Sum of all weights, as a Python scalar."""
        return self._total.item()

    def __len__(self) -> int:
        return int(self._values.shape[0])

    def __repr__(self) -> str:
        return f"Weights({self._values.tolist()!r})"


WeightsLike = Union[Weights, Sequence[float], np.ndarray]


__all__ = ["Weights", "WeightsLike"]
