"""Tests for dictionary-based count maps."""

from __future__ import annotations

import math
from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.counts.errors import DimensionMismatch
from src.counts.sparse import add_countmap, countmap
from src.counts.weights import Weights


def test_countmap_counts_distinct_values() -> None:
    data = ["a", "b", "a", "c", "a"]
    result = countmap(data)
    assert result == {"a": 3, "b": 1, "c": 1}
    assert sum(result.values()) == len(data)
    assert set(result) == set(data)


def test_countmap_preserves_first_seen_order() -> None:
    assert list(countmap([3, 1, 3, 2])) == [3, 1, 2]


def test_countmap_accepts_tuples_and_generators() -> None:
    pairs = ((i % 2, "x") for i in range(5))
    assert countmap(pairs) == {(0, "x"): 3, (1, "x"): 2}


def test_countmap_unwraps_numpy_scalars() -> None:
    result = countmap(np.array([2, 2, 5]))
    assert result == {2: 2, 5: 1}
    assert all(type(key) is int for key in result)
    assert all(type(value) is int for value in result.values())


def test_countmap_empty() -> None:
    assert countmap([]) == {}


def test_add_countmap_extends_existing_map() -> None:
    cm = {"a": 2}
    result = add_countmap(cm, ["a", "b"])
    assert result is cm
    assert cm == {"a": 3, "b": 1}


def test_countmap_weighted_float_weights() -> None:
    result = countmap(["x", "y", "x"], [0.5, 1.0, 0.25])
    assert result["x"] == pytest.approx(0.75)
    assert result["y"] == pytest.approx(1.0)
    assert all(isinstance(value, float) for value in result.values())


def test_countmap_weighted_integer_weights_stay_integer() -> None:
    result = countmap(["x", "y", "x"], Weights([2, 3, 4]))
    assert result == {"x": 6, "y": 3}
    assert all(type(value) is int for value in result.values())


def test_countmap_unit_weights_match_unweighted() -> None:
    data = [1, 4, 4, 9, 1, 1]
    assert countmap(data, np.ones(len(data), dtype=np.int64)) == countmap(data)


def test_add_countmap_rejects_mismatched_weights_before_mutating() -> None:
    cm = {"a": 1.0}
    with pytest.raises(DimensionMismatch):
        add_countmap(cm, ["a", "b"], [1.0])
    assert cm == {"a": 1.0}


def test_countmap_rejects_non_numeric_weights() -> None:
    with pytest.raises(TypeError):
        countmap(["a"], ["heavy"])


def test_countmap_folds_nan_observations_into_one_key() -> None:
    result = countmap(np.array([float("nan"), float("nan"), 1.0]))
    assert len(result) == 2
    nan_keys = [key for key in result if isinstance(key, float) and math.isnan(key)]
    assert len(nan_keys) == 1
    assert result[nan_keys[0]] == 2
    assert result[1.0] == 1


def test_add_countmap_folds_nan_across_calls() -> None:
    cm: dict = {}
    add_countmap(cm, [float("nan")], [0.5])
    add_countmap(cm, [float("nan")], [0.25])
    assert len(cm) == 1
    assert next(iter(cm.values())) == pytest.approx(0.75)
