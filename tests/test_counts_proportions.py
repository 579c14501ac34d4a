"""Tests for proportions derived from counts."""

from __future__ import annotations

from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.counts import (
    LevelRange,
    Weights,
    counts,
    joint_counts,
    joint_proportions,
    proportionmap,
    proportions,
    to_proportions,
)


# ---------------------------------------------------------------------------
# Normalizing existing count structures


def test_to_proportions_on_dense_table() -> None:
    result = to_proportions(np.array([1, 3, 0, 4]))
    assert result.dtype == np.float64
    assert np.allclose(result, [0.125, 0.375, 0.0, 0.5])


def test_to_proportions_on_joint_table() -> None:
    table = joint_counts([1, 1, 2], [1, 2, 2], 2)
    result = to_proportions(table)
    assert result.shape == (2, 2)
    assert result.sum() == pytest.approx(1.0)
    assert result[1, 0] == 0.0


def test_to_proportions_on_mapping_returns_new_dict() -> None:
    cm = {"a": 1, "b": 3}
    result = to_proportions(cm)
    assert result == {"a": pytest.approx(0.25), "b": pytest.approx(0.75)}
    assert cm == {"a": 1, "b": 3}


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_to_proportions_zero_total_gives_nan() -> None:
    assert np.isnan(to_proportions(np.zeros(3))).all()
    result = to_proportions({"a": 0.0})
    assert np.isnan(result["a"])


# ---------------------------------------------------------------------------
# proportions / joint_proportions


def test_proportions_matches_counts_over_length() -> None:
    data = [1, 2, 2, 3, 3, 3]
    levels = LevelRange(1, 3)
    expected = counts(data, levels) / len(data)
    assert np.allclose(proportions(data, levels), expected)


def test_proportions_denominator_includes_out_of_range_values() -> None:
    result = proportions([0, 1, 2, 3, 100], LevelRange(1, 3))
    assert np.allclose(result, [0.2, 0.2, 0.2])


def test_proportions_integer_k_and_inferred_span() -> None:
    assert np.allclose(proportions([1, 1, 2, 4], 2), [0.5, 0.25])
    assert np.allclose(proportions([5, 5, 7]), [2 / 3, 0.0, 1 / 3])


def test_proportions_weighted_divides_by_weight_total() -> None:
    data = [1, 2, 2, 9]
    weights = [1.0, 1.0, 2.0, 4.0]
    result = proportions(data, 2, weights)
    assert np.allclose(result, [0.125, 0.375])
    assert np.allclose(proportions(data, 2, Weights(weights)), result)


def test_proportions_weighted_span_sums_to_one() -> None:
    result = proportions([3, 4, 4], weights=[2, 1, 1])
    assert result.dtype == np.float64
    assert result.sum() == pytest.approx(1.0)
    assert np.allclose(result, [0.5, 0.5])


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_proportions_zero_total_is_not_guarded() -> None:
    assert np.isnan(proportions([], 2)).all()
    assert np.isnan(proportions([1, 2], 2, [0.0, 0.0])).all()


def test_joint_proportions_variants() -> None:
    x = [1, 1, 2, 2]
    y = [1, 2, 2, 3]
    result = joint_proportions(x, y, (2, 2))
    assert np.allclose(result, [[0.25, 0.25], [0.0, 0.25]])

    weighted = joint_proportions(x, y, weights=[1.0, 1.0, 1.0, 1.0])
    assert weighted.shape == (2, 3)
    assert weighted.sum() == pytest.approx(1.0)

    square = joint_proportions(x, y, 3)
    assert square.shape == (3, 3)
    assert np.allclose(square, joint_counts(x, y, 3) / 4)


# ---------------------------------------------------------------------------
# proportionmap


def test_proportionmap_unweighted() -> None:
    result = proportionmap(["a", "b", "a", "a"])
    assert result == {"a": pytest.approx(0.75), "b": pytest.approx(0.25)}
    assert all(isinstance(value, float) for value in result.values())


def test_proportionmap_weighted() -> None:
    result = proportionmap(["a", "b", "a"], [1, 2, 1])
    assert result == {"a": pytest.approx(0.5), "b": pytest.approx(0.5)}


def test_proportionmap_accepts_generators_and_empty_input() -> None:
    assert proportionmap(v for v in (1, 1, 2)) == {1: pytest.approx(2 / 3), 2: pytest.approx(1 / 3)}
    assert proportionmap([]) == {}
