"""
Unit tests for HEADER record and FILE_SCHEMA checks.
"""

import pytest
from ifcval_core.data.policy import default_policy
from ifcval_core.models.outcome import OutcomeCode, Severity
from ifcval_core.scanning.sections import scan_sections
from ifcval_core.validation.header import HeaderChecker

MINIMAL_HEADER = (
    "ISO-10303-21;\n"
    "HEADER;\n"
    "FILE_DESCRIPTION((''),'2;1');\n"
    "FILE_NAME('','',(),(),'','','');\n"
    "FILE_SCHEMA(('{schema}'));\n"
    "ENDSEC;\n"
    "DATA;\n"
    "ENDSEC;\n"
    "END-ISO-10303-21;"
)


@pytest.fixture
def checker():
    return HeaderChecker(default_policy())


def _by_rule(outcomes):
    return {o.rule: o for o in outcomes}


class TestHeaderRecords:
    """FILE_DESCRIPTION and FILE_NAME presence."""

    def test_complete_header(self, checker):
        outcomes = checker.check(scan_sections(MINIMAL_HEADER.format(schema="IFC4")))

        assert [o.rule for o in outcomes] == [
            "FILE_DESCRIPTION_REQUIRED",
            "FILE_NAME_REQUIRED",
            "FILE_SCHEMA_VALIDATION",
        ]
        assert all(o.severity == Severity.PASSED for o in outcomes)
        rules = _by_rule(outcomes)
        assert rules["FILE_DESCRIPTION_REQUIRED"].line == 3
        assert rules["FILE_NAME_REQUIRED"].line == 4
        assert rules["FILE_NAME_REQUIRED"].observed == "FILE_NAME found"

    def test_missing_file_description(self, checker):
        content = MINIMAL_HEADER.format(schema="IFC4").replace("FILE_DESCRIPTION((''),'2;1');\n", "")
        outcome = _by_rule(checker.check(scan_sections(content)))["FILE_DESCRIPTION_REQUIRED"]

        assert outcome.severity == Severity.ERROR
        assert outcome.outcome_code == OutcomeCode.VALUE_ERROR
        assert outcome.line == 2

    def test_missing_header_section_short_circuits(self, checker):
        """Without a HEADER section only one error is produced."""
        content = "ISO-10303-21;\nDATA;\nENDSEC;\nEND-ISO-10303-21;"
        outcomes = checker.check(scan_sections(content))

        assert len(outcomes) == 1
        assert outcomes[0].rule == "HEADER_SECTION_REQUIRED"
        assert outcomes[0].severity == Severity.ERROR
        assert outcomes[0].outcome_code == OutcomeCode.SYNTAX_ERROR
        assert outcomes[0].line == 1

    def test_unterminated_header_points_at_keyword(self, checker):
        content = "ISO-10303-21;\nHEADER;\nFILE_NAME('x');\nEND-ISO-10303-21;"
        outcomes = checker.check(scan_sections(content))

        assert [o.rule for o in outcomes] == ["HEADER_SECTION_REQUIRED"]
        assert outcomes[0].line == 2


class TestFileSchema:
    @pytest.mark.parametrize("schema", ["IFC2X3", "IFC4", "IFC4X3_ADD2"])
    def test_known_schema(self, checker, schema):
        outcome = _by_rule(checker.check(scan_sections(MINIMAL_HEADER.format(schema=schema))))[
            "FILE_SCHEMA_VALIDATION"
        ]

        assert outcome.severity == Severity.PASSED
        assert schema in outcome.observed
        assert outcome.line == 5

    def test_unknown_schema_warns_with_suggestions(self, checker):
        outcome = _by_rule(checker.check(scan_sections(MINIMAL_HEADER.format(schema="IFC2X2"))))[
            "FILE_SCHEMA_VALIDATION"
        ]

        assert outcome.severity == Severity.WARNING
        assert outcome.outcome_code == OutcomeCode.SCHEMA_ERROR
        assert outcome.observed == (
            "Unknown or outdated IFC schema: IFC2X2. Recommended schemas: IFC2X3, IFC4, IFC4X3_ADD2"
        )

    def test_schema_identifiers_are_case_sensitive(self, checker):
        outcome = _by_rule(checker.check(scan_sections(MINIMAL_HEADER.format(schema="ifc4"))))[
            "FILE_SCHEMA_VALIDATION"
        ]

        assert outcome.severity == Severity.WARNING

    def test_multiple_schema_identifiers_use_first(self, checker):
        content = MINIMAL_HEADER.format(schema="IFC2X3','IFC4")
        rules = _by_rule(checker.check(scan_sections(content)))

        assert "FILE_SCHEMA_REQUIRED" not in rules
        assert rules["FILE_SCHEMA_VALIDATION"].severity == Severity.PASSED
        assert rules["FILE_SCHEMA_VALIDATION"].observed == "Valid IFC schema found: IFC2X3"

    def test_multiple_schema_identifiers_unknown_first(self, checker):
        content = MINIMAL_HEADER.format(schema="IFC4").replace("(('IFC4'))", "(( 'IFC2X2', 'IFC4' ))")
        outcome = _by_rule(checker.check(scan_sections(content)))["FILE_SCHEMA_VALIDATION"]

        assert outcome.severity == Severity.WARNING
        assert "IFC2X2" in outcome.observed

    def test_missing_file_schema(self, checker):
        content = MINIMAL_HEADER.format(schema="IFC4").replace("FILE_SCHEMA(('IFC4'));\n", "")
        outcome = _by_rule(checker.check(scan_sections(content)))["FILE_SCHEMA_REQUIRED"]

        assert outcome.severity == Severity.ERROR
        assert outcome.outcome_code == OutcomeCode.SCHEMA_ERROR
        assert outcome.observed == "FILE_SCHEMA is missing or malformed"

    def test_malformed_file_schema(self, checker):
        content = MINIMAL_HEADER.format(schema="IFC4").replace("FILE_SCHEMA(('IFC4'));", "FILE_SCHEMA(IFC4);")
        rules = _by_rule(checker.check(scan_sections(content)))

        assert "FILE_SCHEMA_VALIDATION" not in rules
        assert rules["FILE_SCHEMA_REQUIRED"].severity == Severity.ERROR
