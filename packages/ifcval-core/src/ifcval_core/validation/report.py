from typing import Iterable

from ifcval_core.models.outcome import Outcome
from ifcval_core.models.report import Summary, ValidationReport


def aggregate(
    filename: str,
    outcomes: Iterable[Outcome],
    *,
    validation_time: float,
    estimated_time: float,
) -> ValidationReport:
    """Merge checker outcomes into one report.

    Outcomes keep checker execution order; the file is valid iff no outcome
    has ERROR severity.
    """
    results = tuple(outcomes)
    summary = Summary.from_outcomes(results)
    return ValidationReport(
        filename=filename,
        is_valid=summary.errors == 0,
        validation_time=validation_time,
        estimated_time=estimated_time,
        summary=summary,
        results=results,
    )
