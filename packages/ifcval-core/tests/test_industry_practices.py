"""
Unit tests for industry best-practice advisories.
"""

import pytest
from ifcval_core.data.policy import default_policy
from ifcval_core.models.outcome import OutcomeCode, Severity
from ifcval_core.scanning.sections import scan_sections
from ifcval_core.validation.industry import IndustryPracticeChecker


@pytest.fixture
def checker():
    return IndustryPracticeChecker(default_policy())


class TestIndustryPractices:
    def test_all_present(self, checker):
        content = "#1=IFCOWNERHISTORY($);\n#2=IFCUNITASSIGNMENT(());\n#3=IFCMATERIALLAYERSET(());"
        outcomes = checker.check(scan_sections(content))

        assert [o.rule for o in outcomes] == ["INDUSTRY_OWNER_HISTORY", "INDUSTRY_UNITS", "INDUSTRY_MATERIALS"]
        assert all(o.severity == Severity.PASSED for o in outcomes)

    def test_all_missing_are_warnings_never_errors(self, checker):
        outcomes = checker.check(scan_sections("#1=IFCWALL($);"))

        assert [o.severity for o in outcomes] == [Severity.WARNING] * 3
        assert [o.outcome_code for o in outcomes] == [
            OutcomeCode.WARNING,
            OutcomeCode.UNITS_ERROR,
            OutcomeCode.WARNING,
        ]

    def test_lower_case_entities_count(self, checker):
        outcomes = checker.check(scan_sections("#1=IfcOwnerHistory($);"))

        assert outcomes[0].severity == Severity.PASSED
