from __future__ import annotations

from ifcval_core.models.policy import EstimatorCoefficients
from ifcval_core.scanning.sections import count_instances


class TimeEstimator:
    """Heuristic validation-time model used for progress pacing.

    estimate = clamp(size/1000 * a + entities * b + lines/100 * c, min, max)

    Advisory only: a pure function of the content for a given set of
    coefficients, always within the configured bounds.
    """

    def __init__(self, coefficients: EstimatorCoefficients | None = None):
        self.coefficients = coefficients or EstimatorCoefficients()

    def estimate(self, content: str) -> float:
        c = self.coefficients
        base_time = (len(content) / 1000) * c.seconds_per_kilochar
        entity_time = count_instances(content) * c.seconds_per_entity
        complexity_time = (len(content.split("\n")) / 100) * c.seconds_per_hundred_lines
        return max(c.min_seconds, min(c.max_seconds, base_time + entity_time + complexity_time))


def estimate_accuracy(actual: float, estimated: float) -> int:
    """How close an estimate was, as a percentage (100 = exact)."""
    longest = max(actual, estimated)
    if longest <= 0:
        return 100
    return round(min(actual, estimated) / longest * 100)
