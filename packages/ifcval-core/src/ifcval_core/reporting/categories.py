from typing import Callable

from ifcval_core.models.outcome import Outcome, OutcomeCode, Severity
from ifcval_core.models.report import ValidationReport

CategoryPredicate = Callable[[Outcome], bool]


def _rule_contains(outcome: Outcome, *fragments: str) -> bool:
    rule = outcome.rule or ""
    return any(fragment in rule for fragment in fragments)


def _is_syntax(o: Outcome) -> bool:
    return o.outcome_code == OutcomeCode.SYNTAX_ERROR or _rule_contains(o, "STEP_")


def _is_header(o: Outcome) -> bool:
    return _rule_contains(o, "HEADER", "FILE_", "CHARACTER_ENCODING")


def _is_schema(o: Outcome) -> bool:
    return o.outcome_code in (OutcomeCode.SCHEMA_ERROR, OutcomeCode.TYPE_ERROR) or _rule_contains(
        o, "SCHEMA", "ENTITY_TYPE"
    )


def _is_normative(o: Outcome) -> bool:
    return o.outcome_code in (OutcomeCode.CARDINALITY_ERROR, OutcomeCode.RELATIONSHIP_ERROR) or _rule_contains(
        o, "SPS001", "PSE001", "GEM001"
    )


def _is_industry(o: Outcome) -> bool:
    return o.outcome_code in (
        OutcomeCode.WARNING,
        OutcomeCode.UNITS_ERROR,
        OutcomeCode.NAMING_ERROR,
    ) or _rule_contains(o, "INDUSTRY_")


def _is_passed(o: Outcome) -> bool:
    return o.severity == Severity.PASSED


# Display order. Categories overlap: one outcome can match several predicates.
CATEGORIES: dict[str, CategoryPredicate] = {
    "syntax": _is_syntax,
    "header": _is_header,
    "schema": _is_schema,
    "normative": _is_normative,
    "industry": _is_industry,
    "passed": _is_passed,
}


def categorize(report: ValidationReport) -> dict[str, list[Outcome]]:
    """Group a report's outcomes into display categories, keeping report order."""
    return {name: [o for o in report.results if matches(o)] for name, matches in CATEGORIES.items()}
