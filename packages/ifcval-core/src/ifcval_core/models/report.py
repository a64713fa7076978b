from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from ifcval_core.models.outcome import Outcome, Severity


class Stage(StrEnum):
    """Stable stage vocabulary for progress notifications."""

    STARTING = "starting"
    SYNTAX_VALIDATION = "syntax_validation"
    HEADER_VALIDATION = "header_validation"
    SCHEMA_VALIDATION = "schema_validation"
    NORMATIVE_RULES = "normative_rules"
    INDUSTRY_PRACTICES = "industry_practices"
    FINALIZING = "finalizing"
    COMPLETED = "completed"


class ProgressNotification(BaseModel):
    """Ephemeral progress update emitted during a validation run."""

    model_config = ConfigDict(frozen=True)
    stage: Stage
    progress: int = Field(ge=0, le=100)
    estimated_time_left: float | None = Field(default=None, ge=0)


class Summary(BaseModel):
    """Outcome counts by severity."""

    model_config = ConfigDict(frozen=True)
    errors: int = 0
    warnings: int = 0
    passed: int = 0
    not_applicable: int = 0
    total_checks: int = 0

    @classmethod
    def from_outcomes(cls, outcomes: tuple[Outcome, ...] | list[Outcome]) -> "Summary":
        return cls(
            errors=sum(1 for o in outcomes if o.severity == Severity.ERROR),
            warnings=sum(1 for o in outcomes if o.severity == Severity.WARNING),
            passed=sum(1 for o in outcomes if o.severity == Severity.PASSED),
            not_applicable=sum(1 for o in outcomes if o.severity == Severity.NOT_APPLICABLE),
            total_checks=len(outcomes),
        )


class ValidationReport(BaseModel):
    """Complete result of one validation run over one file."""

    model_config = ConfigDict(frozen=True)
    filename: str
    is_valid: bool
    validation_time: float = Field(ge=0)
    estimated_time: float = Field(ge=0)
    summary: Summary
    results: tuple[Outcome, ...] = ()

    def by_severity(self, severity: Severity) -> list[Outcome]:
        return [o for o in self.results if o.severity == severity]

    @property
    def errors(self) -> list[Outcome]:
        return self.by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[Outcome]:
        return self.by_severity(Severity.WARNING)
