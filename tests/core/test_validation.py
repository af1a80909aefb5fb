"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, rejection of non-numeric data
    - check_finite: NaN/Inf detection
    - check_ndim / check_1d / check_pairs: shape checks
    - check_consistent_length: multi-array length matching
"""

import numpy as np
import pytest

from pycurvefit.core.exceptions import DimensionError, ValidationError
from pycurvefit.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
    check_ndim,
    check_pairs,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to float64 and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_int_array_promoted_to_float(self):
        result = check_array(np.array([1, 2, 3], dtype=np.int32), "x")
        assert result.dtype == np.float64

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "x")

    def test_booleans_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([True, False], "x")

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="points"):
            check_array([(1, 2), (3,)], "points")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")

    def test_integers_beyond_int64_accepted(self):
        result = check_array([(10 ** 20, 1), (2, 3)], "points")
        assert result.dtype == np.float64
        assert result[0, 0] == 1e20

    def test_non_numeric_objects_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array([1, {}], "x")


# ═══════════════════════════════════════════════════════════════════════
# check_finite
# ═══════════════════════════════════════════════════════════════════════


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, -2.0, 0.0]), "x")

    def test_nan_reported(self):
        with pytest.raises(ValidationError, match="1 NaN, 0 Inf"):
            check_finite(np.array([1.0, np.nan]), "x")

    def test_inf_reported(self):
        with pytest.raises(ValidationError, match="0 NaN, 2 Inf"):
            check_finite(np.array([np.inf, -np.inf]), "y")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_ndim_mismatch(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            check_ndim(np.zeros(3), 2, "points")

    def test_check_1d_accepts_vector(self):
        check_1d(np.zeros(3), "x")

    def test_check_1d_rejects_matrix(self):
        with pytest.raises(DimensionError):
            check_1d(np.zeros((3, 1)), "x")

    def test_check_pairs_accepts_n_by_2(self):
        check_pairs(np.zeros((5, 2)), "points")

    def test_check_pairs_rejects_three_columns(self):
        with pytest.raises(DimensionError, match=r"\(n, 2\)") as excinfo:
            check_pairs(np.zeros((5, 3)), "points")
        assert excinfo.value.shape == (5, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_consistent_length
# ═══════════════════════════════════════════════════════════════════════


class TestCheckConsistentLength:

    def test_equal_lengths_pass(self):
        check_consistent_length(np.zeros(3), np.ones(3), names=("x", "y"))

    def test_mismatch_reports_lengths(self):
        with pytest.raises(DimensionError, match="x=3, y=4"):
            check_consistent_length(np.zeros(3), np.ones(4), names=("x", "y"))

    def test_name_count_mismatch(self):
        with pytest.raises(ValueError, match="must match number of names"):
            check_consistent_length(np.zeros(3), names=("x", "y"))
