from enum import StrEnum

from pydantic import BaseModel, ConfigDict, computed_field


class Severity(StrEnum):
    """Severity of a single validation outcome."""

    PASSED = "PASSED"
    WARNING = "WARNING"
    ERROR = "ERROR"
    NOT_APPLICABLE = "NOT_APPLICABLE"

    @property
    def rank(self) -> int:
        """Display/sort rank: PASSED < NOT_APPLICABLE < WARNING < ERROR."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.PASSED: 0,
    Severity.NOT_APPLICABLE: 1,
    Severity.WARNING: 2,
    Severity.ERROR: 3,
}


class OutcomeCode(StrEnum):
    """Closed taxonomy of outcome codes.

    Values are stable wire identifiers consumed by downstream tooling and must
    never be renumbered.
    """

    PASSED = "P00010"
    NOT_APPLICABLE = "N00010"

    # STEP / syntax
    SYNTAX_ERROR = "E00001"
    SCHEMA_ERROR = "E00002"

    # semantic
    TYPE_ERROR = "E00010"
    VALUE_ERROR = "E00020"
    GEOMETRY_ERROR = "E00030"
    CARDINALITY_ERROR = "E00040"
    DUPLICATE_ERROR = "E00050"
    PLACEMENT_ERROR = "E00060"
    UNITS_ERROR = "E00070"
    QUANTITY_ERROR = "E00080"
    ENUMERATED_VALUE_ERROR = "E00090"
    RELATIONSHIP_ERROR = "E00100"
    NAMING_ERROR = "E00110"
    REFERENCE_ERROR = "E00120"
    RESOURCE_ERROR = "E00130"
    DEPRECATION_ERROR = "E00140"
    SHAPE_REPRESENTATION_ERROR = "E00150"
    INSTANCE_STRUCTURE_ERROR = "E00160"

    WARNING = "W00030"

    @property
    def slug(self) -> str:
        """Lower-case taxonomy identifier, e.g. ``syntax_error``."""
        return self.name.lower()

    @classmethod
    def from_slug(cls, slug: str) -> "OutcomeCode":
        try:
            return cls[slug.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown outcome code slug: {slug!r}") from None


class Feature(BaseModel):
    """Rule descriptor attached to an outcome."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    rule: str
    description: str
    line: int | None = None


class Outcome(BaseModel):
    """A single detected condition with severity, code, and context."""

    model_config = ConfigDict(frozen=True, extra="ignore")
    severity: Severity
    outcome_code: OutcomeCode
    observed: str
    expected: str | None = None
    feature: Feature | None = None
    instance_id: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def outcome_name(self) -> str:
        return self.outcome_code.slug

    @property
    def rule(self) -> str | None:
        return self.feature.rule if self.feature else None

    @property
    def line(self) -> int | None:
        return self.feature.line if self.feature else None
