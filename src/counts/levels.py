"""Contiguous integer domains used by the dense counters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple, Union

import numpy as np

LevelsLike = Union["LevelRange", range, int]


@dataclass(frozen=True)
class LevelRange:
    """Inclusive integer interval ``[low, high]``."""

    low: int
    high: int

    def __post_init__(self) -> None:
        if not _is_integer(self.low) or not _is_integer(self.high):
            raise TypeError(f"LevelRange bounds must be integers, got ({self.low!r}, {self.high!r})")
        if self.low > self.high:
            raise ValueError(f"LevelRange requires low <= high, got [{self.low}, {self.high}]")
        # Normalize numpy integer scalars so repr/equality stay predictable.
        object.__setattr__(self, "low", int(self.low))
        object.__setattr__(self, "high", int(self.high))

    @classmethod
    def upto(cls, k: int) -> "LevelRange":
        """Return ``[1, k]``."""
        if not _is_integer(k):
            raise TypeError(f"Level count must be an integer, got {k!r}")
        if k < 1:
            raise ValueError(f"Level count must be at least 1, got {k}")
        return cls(1, int(k))

    @classmethod
    def from_range(cls, levels: range) -> "LevelRange":
        """Convert a non-empty, step-1 Python ``range``."""
        if levels.step != 1:
            raise ValueError(f"Only unit-step ranges describe levels, got step {levels.step}")
        if len(levels) == 0:
            raise ValueError("Cannot build levels from an empty range.")
        return cls(levels.start, levels.stop - 1)

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    def __len__(self) -> int:
        return self.size

    def __contains__(self, value: object) -> bool:
        return _is_integer(value) and self.low <= value <= self.high  # type: ignore[operator]

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.low, self.high + 1))

    def to_range(self) -> range:
        return range(self.low, self.high + 1)


def span(values: Sequence[int] | np.ndarray) -> LevelRange:
    """Return the tightest ``LevelRange`` covering every value in ``values``."""
    arr = np.asarray(values)
    if arr.size == 0:
        raise ValueError("Cannot infer levels from empty data.")
    if arr.dtype.kind not in "iub":
        raise TypeError(f"Levels can only be inferred from integer data, got dtype {arr.dtype}")
    return LevelRange(int(arr.min()), int(arr.max()))


def as_levels(levels: Optional[LevelsLike], data: Optional[Sequence[int] | np.ndarray] = None) -> LevelRange:
    """Coerce the accepted level descriptions into a ``LevelRange``.

    Args:
        levels: ``LevelRange``, unit-step ``range``, integer ``k`` (``[1, k]``),
            or None to infer the span of ``data``.
        data: Values used for span inference when ``levels`` is None.
    """
    if levels is None:
        if data is None:
            raise ValueError("Levels must be given when no data is available to infer them from.")
        return span(data)
    if isinstance(levels, LevelRange):
        return levels
    if isinstance(levels, range):
        return LevelRange.from_range(levels)
    if _is_integer(levels):
        return LevelRange.upto(levels)  # type: ignore[arg-type]
    raise TypeError(f"Unsupported levels specification: {levels!r}")


def as_joint_levels(
    levels: Optional[Union[LevelsLike, Tuple[LevelsLike, LevelsLike]]],
    x: Sequence[int] | np.ndarray,
    y: Sequence[int] | np.ndarray,
) -> Tuple[LevelRange, LevelRange]:
    """Resolve levels for a two-way table.

    A single description is broadcast to both axes, a pair is applied per axis,
    and None infers each axis from its own data.
    """
    if levels is None:
        return span(x), span(y)
    if isinstance(levels, tuple):
        if len(levels) != 2:
            raise ValueError(f"Joint levels need exactly two entries, got {len(levels)}")
        xlevels, ylevels = levels
        return as_levels(xlevels, x), as_levels(ylevels, y)
    shared = as_levels(levels)
    return shared, shared


def _is_integer(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


__all__ = ["LevelRange", "LevelsLike", "as_joint_levels", "as_levels", "span"]
