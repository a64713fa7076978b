from .outcome import Feature, Outcome, OutcomeCode, Severity
from .policy import ValidationPolicy
from .report import ProgressNotification, Stage, Summary, ValidationReport

__all__ = [
    "Feature",
    "Outcome",
    "OutcomeCode",
    "ProgressNotification",
    "Severity",
    "Stage",
    "Summary",
    "ValidationPolicy",
    "ValidationReport",
]
