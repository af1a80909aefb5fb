"""
Tests for SampleSet construction, validation and transforms.
"""

import numpy as np
import pytest

from pycurvefit.core.exceptions import DimensionError, ValidationError
from pycurvefit.models import SampleSet


class TestConstruction:

    def test_from_points_list(self, line_points):
        samples = SampleSet.from_points(line_points)
        assert samples.n == 4
        np.testing.assert_array_equal(samples.x, [0.0, 1.0, 2.0, 3.0])
        np.testing.assert_array_equal(samples.y, [3.0, 5.0, 7.0, 9.0])

    def test_from_points_array(self):
        samples = SampleSet.from_points(np.array([[1, 2], [3, 4]]))
        assert samples.x.dtype == np.float64
        assert samples.points() == [(1.0, 2.0), (3.0, 4.0)]

    def test_from_points_generator(self):
        samples = SampleSet.from_points((i, 2 * i) for i in range(3))
        assert samples.n == 3

    def test_from_points_passthrough(self, line_points):
        samples = SampleSet.from_points(line_points)
        assert SampleSet.from_points(samples) is samples

    def test_from_arrays(self):
        samples = SampleSet.from_arrays([1, 2, 3], [4, 5, 6])
        assert samples.points() == [(1.0, 4.0), (2.0, 5.0), (3.0, 6.0)]

    def test_empty_is_allowed(self):
        samples = SampleSet.from_points([])
        assert samples.n == 0
        assert len(samples) == 0

    def test_insertion_order_preserved(self):
        pts = [(3, 1), (1, 2), (2, 3)]
        assert list(SampleSet.from_points(pts)) == [(3.0, 1.0), (1.0, 2.0), (2.0, 3.0)]


class TestValidation:

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            SampleSet.from_points([(0, 1), (1, float('nan'))])

    def test_inf_rejected_in_arrays(self):
        with pytest.raises(ValidationError, match="x: contains non-finite"):
            SampleSet.from_arrays([0, np.inf], [1, 2])

    def test_flat_list_rejected(self):
        with pytest.raises(DimensionError):
            SampleSet.from_points([1, 2, 3])

    def test_three_columns_rejected(self):
        with pytest.raises(DimensionError, match=r"\(n, 2\)"):
            SampleSet.from_points([(1, 2, 3), (4, 5, 6)])

    def test_length_mismatch_rejected(self):
        with pytest.raises(DimensionError, match="x=3, y=2"):
            SampleSet.from_arrays([1, 2, 3], [1, 2])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            SampleSet.from_points([("a", "b")])


class TestImmutability:

    def test_arrays_read_only(self, line_points):
        samples = SampleSet.from_points(line_points)
        with pytest.raises(ValueError):
            samples.x[0] = 100.0

    def test_source_array_not_aliased(self):
        source = np.array([[0.0, 1.0], [1.0, 2.0]])
        samples = SampleSet.from_points(source)
        source[0, 1] = 99.0
        assert samples.y[0] == 1.0


class TestEqualityAndTransform:

    def test_equal_sets_compare_and_hash_equal(self, line_points):
        a = SampleSet.from_points(line_points)
        b = SampleSet.from_arrays([0, 1, 2, 3], [3, 5, 7, 9])
        assert a == b
        assert hash(a) == hash(b)

    def test_different_sets_not_equal(self, line_points):
        a = SampleSet.from_points(line_points)
        b = SampleSet.from_points(line_points[:3])
        assert a != b

    def test_transformed_maps_coordinates(self):
        samples = SampleSet.from_points([(1, 1), (np.e, np.e ** 2)])
        logged = samples.transformed(fx=np.log, fy=np.log)
        np.testing.assert_allclose(logged.x, [0.0, 1.0])
        np.testing.assert_allclose(logged.y, [0.0, 2.0])
        # original untouched
        np.testing.assert_allclose(samples.x, [1.0, np.e])

    def test_transformed_identity_when_no_functions(self, line_points):
        samples = SampleSet.from_points(line_points)
        assert samples.transformed() == samples

    def test_repr(self, line_points):
        assert repr(SampleSet.from_points(line_points)) == "SampleSet(n=4)"
