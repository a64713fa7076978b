"""
Unit tests for the STEP envelope checks.
"""

import pytest
from ifcval_core.data.policy import default_policy
from ifcval_core.models.outcome import OutcomeCode, Severity
from ifcval_core.scanning.sections import scan_sections
from ifcval_core.validation.syntax import SyntaxChecker

ENVELOPE = """ISO-10303-21;
HEADER;
ENDSEC;
DATA;
{data}
ENDSEC;
END-ISO-10303-21;"""


@pytest.fixture
def checker():
    return SyntaxChecker(default_policy())


def _errors(outcomes):
    return [o for o in outcomes if o.severity == Severity.ERROR]


class TestEnvelope:
    """Start/end markers and required sections."""

    def test_well_formed_envelope(self, checker):
        outcomes = checker.check(scan_sections(ENVELOPE.format(data="#1=IFCWALL();")))

        assert _errors(outcomes) == []
        assert [o.rule for o in outcomes] == ["CHARACTER_ENCODING"]
        assert outcomes[0].severity == Severity.PASSED
        assert outcomes[0].observed == "Character encoding is valid"

    def test_surrounding_whitespace_is_ignored(self, checker):
        content = "\n\n  " + ENVELOPE.format(data="") + "\n\n"

        assert _errors(checker.check(scan_sections(content))) == []

    def test_missing_start_marker(self, checker):
        content = ENVELOPE.format(data="").replace("ISO-10303-21;\n", "", 1)
        errors = _errors(checker.check(scan_sections(content)))

        assert [e.rule for e in errors] == ["STEP_HEADER_START"]
        assert errors[0].outcome_code == OutcomeCode.SYNTAX_ERROR
        assert errors[0].line == 1

    def test_missing_end_marker_reports_last_line(self, checker):
        content = "ISO-10303-21;\nHEADER;\nENDSEC;\nDATA;\nENDSEC;"
        errors = _errors(checker.check(scan_sections(content)))

        assert [e.rule for e in errors] == ["STEP_FOOTER_END"]
        assert errors[0].line == 5

    def test_missing_sections(self, checker):
        errors = _errors(checker.check(scan_sections("ISO-10303-21;\nEND-ISO-10303-21;")))

        assert [e.rule for e in errors] == ["REQUIRED_SECTION_HEADER", "REQUIRED_SECTION_DATA"]
        assert errors[0].observed == "Required section HEADER is missing"
        assert errors[1].observed == "Required section DATA is missing"

    def test_empty_content(self, checker):
        outcomes = checker.check(scan_sections(""))

        assert [e.rule for e in _errors(outcomes)] == [
            "STEP_HEADER_START",
            "STEP_FOOTER_END",
            "REQUIRED_SECTION_HEADER",
            "REQUIRED_SECTION_DATA",
        ]


class TestParentheses:
    def test_unbalanced_parentheses(self, checker):
        """3 opening and 2 closing parentheses give exactly one error naming both counts."""
        content = ENVELOPE.format(data="#1=IFCWALL((#2);\n#2=IFCSLAB(#3);")
        errors = _errors(checker.check(scan_sections(content)))

        assert len(errors) == 1
        assert errors[0].rule == "BALANCED_PARENTHESES"
        assert "3" in errors[0].observed
        assert "2" in errors[0].observed
        assert errors[0].observed == "Unbalanced parentheses: 3 opening, 2 closing"

    def test_parentheses_inside_strings_still_count(self, checker):
        content = ENVELOPE.format(data="#1=IFCWALL('(');")

        assert [e.rule for e in _errors(checker.check(scan_sections(content)))] == ["BALANCED_PARENTHESES"]


class TestEncoding:
    def test_undecodable_bytes_are_a_warning(self, checker):
        """Lone surrogates (from surrogateescape decoding) are reported, but never as an error."""
        content = ENVELOPE.format(data="#1=IFCWALL('caf\udce9');")
        outcomes = checker.check(scan_sections(content))

        assert _errors(outcomes) == []
        encoding = [o for o in outcomes if o.rule == "CHARACTER_ENCODING"]
        assert len(encoding) == 1
        assert encoding[0].severity == Severity.WARNING
        assert encoding[0].outcome_code == OutcomeCode.SYNTAX_ERROR
        assert encoding[0].line == 5

    def test_non_ascii_text_is_valid(self, checker):
        content = ENVELOPE.format(data="#1=IFCWALL('Wand üäö');")
        encoding = [o for o in checker.check(scan_sections(content)) if o.rule == "CHARACTER_ENCODING"]

        assert encoding[0].severity == Severity.PASSED
