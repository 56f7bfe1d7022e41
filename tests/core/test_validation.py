"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array: conversion, dtype coercion, object rejection
    - check_1d: dimensionality
    - check_consistent_length: multi-array length matching
    - check_min_samples: minimum point count
    - check_choice: option names
"""

import numpy as np
import pytest

from olsfit.core.exceptions import DimensionError, ValidationError
from olsfit.core.validation import (
    check_1d,
    check_array,
    check_choice,
    check_consistent_length,
    check_min_samples,
)


class TestCheckArray:
    """check_array converts to float64 ndarray and rejects non-numeric data."""

    def test_list_to_float_array(self):
        result = check_array([1, 2, 3], "x")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_float32_promoted(self):
        result = check_array(np.array([1.0, 2.0], dtype=np.float32), "x")
        assert result.dtype == np.float64

    def test_nan_allowed(self):
        result = check_array([1.0, np.nan], "x")
        assert np.isnan(result[1])

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="x"):
            check_array(["a", "b"], "x")

    def test_mixed_types_rejected(self):
        with pytest.raises(ValidationError):
            check_array([1, "a", None], "x")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "x")


class TestCheck1d:

    def test_1d_passes(self):
        check_1d(np.zeros(3), "x")

    def test_2d_fails(self):
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((3, 2)), "x")


class TestCheckConsistentLength:

    def test_same_length(self):
        check_consistent_length(np.zeros(3), np.zeros(3), names=("x", "y"))

    def test_mismatch(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            check_consistent_length(np.zeros(3), np.zeros(2), names=("x", "y"))

    def test_names_count_mismatch(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), np.zeros(3), names=("x",))


class TestCheckMinSamples:

    def test_enough(self):
        check_min_samples(1, 1, "points")

    def test_too_few(self):
        with pytest.raises(ValidationError, match="at least 1 points, got 0"):
            check_min_samples(0, 1, "points")


class TestCheckChoice:

    def test_known(self):
        check_choice("a", ("a", "b"), "opt")

    def test_unknown(self):
        with pytest.raises(ValidationError, match="'c'"):
            check_choice("c", ("a", "b"), "opt")
