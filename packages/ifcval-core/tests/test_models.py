"""
Unit tests for the outcome and report models.
"""

import pytest
from ifcval_core.models.outcome import Feature, Outcome, OutcomeCode, Severity
from ifcval_core.models.report import ProgressNotification, Stage, Summary
from pydantic import ValidationError


class TestOutcomeCode:
    def test_wire_codes_are_stable(self):
        assert OutcomeCode.PASSED == "P00010"
        assert OutcomeCode.NOT_APPLICABLE == "N00010"
        assert OutcomeCode.SYNTAX_ERROR == "E00001"
        assert OutcomeCode.SCHEMA_ERROR == "E00002"
        assert OutcomeCode.TYPE_ERROR == "E00010"
        assert OutcomeCode.INSTANCE_STRUCTURE_ERROR == "E00160"
        assert OutcomeCode.WARNING == "W00030"

    def test_slug_round_trip(self):
        for code in OutcomeCode:
            assert OutcomeCode.from_slug(code.slug) is code
        assert OutcomeCode.RELATIONSHIP_ERROR.slug == "relationship_error"

    def test_unknown_slug(self):
        with pytest.raises(ValueError):
            OutcomeCode.from_slug("made_up_error")


class TestSeverity:
    def test_rank_order(self):
        ranked = sorted(Severity, key=lambda s: s.rank)

        assert ranked == [Severity.PASSED, Severity.NOT_APPLICABLE, Severity.WARNING, Severity.ERROR]


class TestOutcome:
    def test_feature_accessors(self):
        outcome = Outcome(
            severity=Severity.ERROR,
            outcome_code=OutcomeCode.SYNTAX_ERROR,
            observed="boom",
            feature=Feature(rule="STEP_HEADER_START", description="d", line=1),
        )

        assert outcome.rule == "STEP_HEADER_START"
        assert outcome.line == 1
        assert outcome.model_dump(mode="json")["outcome_name"] == "syntax_error"
        assert outcome.model_dump(mode="json")["outcome_code"] == "E00001"

    def test_without_feature(self):
        outcome = Outcome(severity=Severity.PASSED, outcome_code=OutcomeCode.PASSED, observed="ok")

        assert outcome.rule is None
        assert outcome.line is None

    def test_frozen(self):
        outcome = Outcome(severity=Severity.PASSED, outcome_code=OutcomeCode.PASSED, observed="ok")

        with pytest.raises(ValidationError):
            outcome.observed = "changed"


class TestSummary:
    def test_counts(self):
        outcomes = [
            Outcome(severity=s, outcome_code=OutcomeCode.WARNING, observed="x")
            for s in (Severity.PASSED, Severity.WARNING, Severity.WARNING, Severity.ERROR, Severity.NOT_APPLICABLE)
        ]
        summary = Summary.from_outcomes(outcomes)

        assert (summary.passed, summary.warnings, summary.errors, summary.not_applicable) == (1, 2, 1, 1)
        assert summary.total_checks == 5


class TestProgressNotification:
    def test_progress_bounds(self):
        with pytest.raises(ValidationError):
            ProgressNotification(stage=Stage.STARTING, progress=101)
        with pytest.raises(ValidationError):
            ProgressNotification(stage=Stage.STARTING, progress=0, estimated_time_left=-1)
