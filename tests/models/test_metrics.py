"""
Tests for R² / RMSE computation and the evaluate() dispatch.
"""

import math

import numpy as np
import pytest

from pycurvefit.models import (
    ExponentialParams,
    LinearParams,
    LogarithmicParams,
    PowerParams,
    QuadraticParams,
    SampleSet,
    ZeroParams,
    compute_metrics,
    evaluate,
)


class TestComputeMetrics:

    def test_perfect_fit(self, line_points):
        samples = SampleSet.from_points(line_points)
        metrics = compute_metrics(samples, LinearParams(m=2.0, b=3.0))
        assert metrics.r_squared == 1.0
        assert metrics.rmse == 0.0

    def test_mean_predictor_scores_zero(self):
        samples = SampleSet.from_points([(0, 1), (1, 2), (2, 3)])
        metrics = compute_metrics(samples, LinearParams(m=0.0, b=2.0))
        assert metrics.r_squared == 0.0
        assert metrics.rmse == pytest.approx(math.sqrt(2 / 3))

    def test_r_squared_clamped_at_zero(self):
        samples = SampleSet.from_points([(0, 1), (1, 2), (2, 3)])
        metrics = compute_metrics(samples, LinearParams(m=0.0, b=100.0))
        assert metrics.r_squared == 0.0
        assert metrics.rmse > 90

    def test_constant_samples_score_one(self):
        # Zero total variance short-circuits to R² = 1, residuals or not
        samples = SampleSet.from_points([(0, 5), (1, 5), (2, 5)])
        assert compute_metrics(samples, LinearParams(m=0.0, b=5.0)).r_squared == 1.0
        assert compute_metrics(samples, LinearParams(m=1.0, b=0.0)).r_squared == 1.0

    def test_non_finite_prediction_is_degenerate(self):
        samples = SampleSet.from_points([(0, 1), (1, 2), (2, 3)])
        metrics = compute_metrics(samples, LogarithmicParams(a=1.0, c=0.0))
        assert metrics.r_squared == 0.0
        assert metrics.rmse == math.inf

    def test_overflow_is_degenerate(self):
        samples = SampleSet.from_points([(0, 1), (500, 2)])
        metrics = compute_metrics(samples, ExponentialParams(A=1.0, r=10.0))
        assert metrics == (0.0, math.inf)

    def test_empty_samples(self):
        metrics = compute_metrics(SampleSet.from_points([]), LinearParams(m=1.0, b=0.0))
        assert metrics == (0.0, 0.0)


class TestEvaluate:

    def test_scalar_returns_float(self):
        value = evaluate(LinearParams(m=2.0, b=3.0), 4)
        assert isinstance(value, float)
        assert value == 11.0

    def test_array_returns_array(self):
        values = evaluate(QuadraticParams(a=1.0, b=0.0, c=0.0), [-2, 0, 3])
        np.testing.assert_array_equal(values, [4.0, 0.0, 9.0])

    def test_each_family(self):
        assert evaluate(LogarithmicParams(a=2.0, c=1.0), math.e) == pytest.approx(3.0)
        assert evaluate(PowerParams(A=3.0, p=2.0), 2.0) == pytest.approx(12.0)
        assert evaluate(ExponentialParams(A=2.0, r=3.0), 2.0) == pytest.approx(18.0)

    def test_zero_params_predict_zero(self):
        np.testing.assert_array_equal(evaluate(ZeroParams(), [1.0, -5.0, 1e9]), [0.0, 0.0, 0.0])
        assert evaluate(ZeroParams(), 7.0) == 0.0

    def test_out_of_domain_gives_nan(self):
        assert math.isnan(evaluate(LogarithmicParams(a=1.0, c=0.0), -1.0))
        assert math.isnan(evaluate(PowerParams(A=1.0, p=0.5), -4.0))

    def test_unknown_payload_raises(self):
        with pytest.raises(TypeError, match="Unknown parameter payload"):
            evaluate(object(), 1.0)
