from typing import Iterator

from ifcval_core.models.outcome import Outcome, OutcomeCode
from ifcval_core.models.report import Stage
from ifcval_core.scanning.sections import DATA_MARKER, END_MARKER, HEADER_MARKER, START_MARKER, SectionScan, line_at
from ifcval_core.validation.base import BaseChecker


class SyntaxChecker(BaseChecker):
    """Physical-file envelope: markers, parenthesis balance, sections, encoding.

    Checks are purely textual and independent of each other.
    """

    STAGE = Stage.SYNTAX_VALIDATION
    RULES = {
        "STEP_HEADER_START": "STEP physical file must start with ISO-10303-21;",
        "STEP_FOOTER_END": "STEP physical file must end with END-ISO-10303-21;",
        "BALANCED_PARENTHESES": "every opening parenthesis must be closed",
        "REQUIRED_SECTION_HEADER": "STEP physical file must contain a HEADER section",
        "REQUIRED_SECTION_DATA": "STEP physical file must contain a DATA section",
        "CHARACTER_ENCODING": "file content must be UTF-8 compatible",
    }

    def run(self, scan: SectionScan) -> Iterator[Outcome]:
        stripped = scan.content.strip()

        if not stripped.startswith(START_MARKER):
            yield self._error(
                OutcomeCode.SYNTAX_ERROR,
                f"STEP file must start with {START_MARKER}",
                "STEP_HEADER_START",
                line=1,
                expected=START_MARKER,
            )

        if not stripped.endswith(END_MARKER):
            yield self._error(
                OutcomeCode.SYNTAX_ERROR,
                f"STEP file must end with {END_MARKER}",
                "STEP_FOOTER_END",
                line=scan.line_count,
                expected=END_MARKER,
            )

        open_count = scan.content.count("(")
        close_count = scan.content.count(")")
        if open_count != close_count:
            yield self._error(
                OutcomeCode.SYNTAX_ERROR,
                f"Unbalanced parentheses: {open_count} opening, {close_count} closing",
                "BALANCED_PARENTHESES",
                expected="equal number of opening and closing parentheses",
            )

        for name, marker in (("HEADER", HEADER_MARKER), ("DATA", DATA_MARKER)):
            if marker not in scan.content:
                yield self._error(
                    OutcomeCode.SYNTAX_ERROR,
                    f"Required section {name} is missing",
                    f"REQUIRED_SECTION_{name}",
                    expected=marker,
                )

        yield self._check_encoding(scan.content)

    def _check_encoding(self, content: str) -> Outcome:
        # advisory only: an encoding problem is a warning, never an error
        try:
            content.encode("utf-8")
        except UnicodeEncodeError as e:
            return self._warning(
                OutcomeCode.SYNTAX_ERROR,
                f"Problematic character encoding at offset {e.start}",
                "CHARACTER_ENCODING",
                line=line_at(content, e.start),
                expected="UTF-8 encodable text",
            )
        return self._passed("Character encoding is valid", "CHARACTER_ENCODING")
