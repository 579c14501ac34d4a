"""Exceptions raised by the counting routines."""

from __future__ import annotations


class DimensionMismatch(ValueError):
    """A table shape or weight length disagrees with the data it is paired with."""


__all__ = ["DimensionMismatch"]
