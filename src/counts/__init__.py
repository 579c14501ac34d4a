"""Counting and proportion utilities for discrete data."""

from .config import DEFAULT_DELIMITER, TabulationConfig, parse_levels
from .dense import add_counts, counts
from .errors import DimensionMismatch
from .joint import add_joint_counts, joint_counts
from .levels import LevelRange, as_levels, span
from .proportions import joint_proportions, proportionmap, proportions, to_proportions
from .sparse import add_countmap, countmap
from .weights import Weights

__all__ = [
    "DEFAULT_DELIMITER",
    "DimensionMismatch",
    "LevelRange",
    "TabulationConfig",
    "Weights",
    "add_countmap",
    "add_counts",
    "add_joint_counts",
    "as_levels",
    "countmap",
    "counts",
    "joint_counts",
    "joint_proportions",
    "parse_levels",
    "proportionmap",
    "proportions",
    "span",
    "to_proportions",
]
