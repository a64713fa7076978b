"""
Unit tests for the heuristic validation-time estimator.
"""

import pytest
from ifcval_core.models.policy import EstimatorCoefficients
from ifcval_core.validation.estimate import TimeEstimator, estimate_accuracy


class TestTimeEstimator:
    def test_small_input_clamped_to_minimum(self):
        assert TimeEstimator().estimate("") == 0.5
        assert TimeEstimator().estimate("#1=IFCWALL();") == 0.5

    def test_large_input_clamped_to_maximum(self):
        content = "\n".join(f"#{i}=IFCWALL();" for i in range(10_000))

        assert TimeEstimator().estimate(content) == 30.0

    def test_formula_between_bounds(self):
        """size/1000 * a + entities * b + lines/100 * c"""
        coefficients = EstimatorCoefficients(
            seconds_per_kilochar=1.0,
            seconds_per_entity=1.0,
            seconds_per_hundred_lines=1.0,
            min_seconds=0.0,
            max_seconds=1000.0,
        )
        content = "#1=IFCWALL();\n#2=IFCSLAB();"  # 27 chars, 2 entities, 2 lines

        assert TimeEstimator(coefficients).estimate(content) == pytest.approx(0.027 + 2 + 0.02)

    def test_deterministic(self):
        content = "#1=IFCWALL();\n" * 500

        assert TimeEstimator().estimate(content) == TimeEstimator().estimate(content)

    def test_bounds_must_be_ordered(self):
        with pytest.raises(ValueError):
            EstimatorCoefficients(min_seconds=10, max_seconds=1)


class TestEstimateAccuracy:
    @pytest.mark.parametrize(
        "actual,estimated,expected",
        [
            (1.0, 1.0, 100),
            (0.5, 1.0, 50),
            (2.0, 1.0, 50),
            (0.0, 0.0, 100),
            (0.0, 1.0, 0),
        ],
    )
    def test_accuracy(self, actual, estimated, expected):
        assert estimate_accuracy(actual, estimated) == expected
