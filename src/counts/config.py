"""Configuration for tabulating columns of a delimited file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .levels import LevelRange

# Default separator used by the Typer CLI; callers may override it.
DEFAULT_DELIMITER = ","

ParsedLevels = Optional[Union[LevelRange, Tuple[Optional[LevelRange], Optional[LevelRange]]]]


def parse_levels(spec: Optional[str], *, joint: bool = False) -> ParsedLevels:
    """Parse a level description from the command line.

    ``"k"`` means ``[1, k]``, ``"lo:hi"`` means ``[lo, hi]`` and an empty or
    missing spec means "infer from the data". With ``joint=True`` a
    comma-separated pair such as ``"3,1:4"`` gives per-axis levels, while a
    single spec is shared by both axes.
    """
    if spec is None or not spec.strip():
        return None
    if joint and "," in spec:
        parts = spec.split(",")
        if len(parts) != 2:
            raise ValueError(f"Joint levels take exactly two comma-separated parts, got '{spec}'")
        return _parse_single(parts[0]), _parse_single(parts[1])
    return _parse_single(spec)


def _parse_single(spec: str) -> Optional[LevelRange]:
    text = spec.strip()
    if not text:
        return None
    try:
        if ":" in text:
            low, high = text.split(":", 1)
            return LevelRange(int(low), int(high))
        return LevelRange.upto(int(text))
    except ValueError as exc:
        raise ValueError(f"Invalid levels '{spec}': {exc}") from exc


@dataclass
class TabulationConfig:
    """What to count in a table and how to report it."""

    column: str
    second_column: Optional[str] = None
    weights_column: Optional[str] = None
    levels: ParsedLevels = None
    normalize: bool = False
    delimiter: str = DEFAULT_DELIMITER

    @property
    def joint(self) -> bool:
        return self.second_column is not None

    @property
    def columns(self) -> Tuple[str, ...]:
        """Every column the request reads, in load order."""
        names = [self.column]
        if self.second_column is not None:
            names.append(self.second_column)
        if self.weights_column is not None:
            names.append(self.weights_column)
        return tuple(names)

    def validate(self) -> None:
        if not self.column:
            raise ValueError("A column to count must be named.")
        if len(set(self.columns)) != len(self.columns):
            raise ValueError(f"Columns must be distinct, got {', '.join(self.columns)}")
        if not self.delimiter:
            raise ValueError("delimiter cannot be empty.")
        if isinstance(self.levels, tuple) and not self.joint:
            raise ValueError("Per-axis levels require a second column.")


__all__ = ["DEFAULT_DELIMITER", "ParsedLevels", "TabulationConfig", "parse_levels"]
