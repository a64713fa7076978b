import re
from typing import Iterator

from ifcval_core.models.outcome import Outcome, OutcomeCode
from ifcval_core.models.report import Stage
from ifcval_core.scanning.sections import Section, SectionScan
from ifcval_core.validation.base import BaseChecker

# first quoted token inside FILE_SCHEMA((...))
FILE_SCHEMA_PATTERN = re.compile(r"FILE_SCHEMA\s*\(\s*\(\s*'([^']*)'")


class HeaderChecker(BaseChecker):
    """HEADER record completeness and FILE_SCHEMA identifier.

    A missing HEADER section yields a single error and nothing else, so that
    absent content does not cascade into further header findings.
    """

    STAGE = Stage.HEADER_VALIDATION
    RULES = {
        "HEADER_SECTION_REQUIRED": "STEP physical file must contain a HEADER; ... ENDSEC; section",
        "FILE_DESCRIPTION_REQUIRED": "header must contain FILE_DESCRIPTION",
        "FILE_NAME_REQUIRED": "header must contain FILE_NAME",
        "FILE_SCHEMA_REQUIRED": "header must contain a well-formed FILE_SCHEMA",
        "FILE_SCHEMA_VALIDATION": "IFC schema must be current and supported",
    }

    def run(self, scan: SectionScan) -> Iterator[Outcome]:
        header = scan.header
        if header is None:
            yield self._error(
                OutcomeCode.SYNTAX_ERROR,
                "No HEADER section found",
                "HEADER_SECTION_REQUIRED",
                line=scan.first_line_containing("HEADER") or 1,
                expected="HEADER; ... ENDSEC;",
            )
            return

        yield self._required_record(scan, header, "FILE_DESCRIPTION", "FILE_DESCRIPTION_REQUIRED")
        yield self._required_record(scan, header, "FILE_NAME", "FILE_NAME_REQUIRED")
        yield self._file_schema(scan, header)

    def _keyword_line(self, scan: SectionScan, header: Section, keyword: str) -> int | None:
        index = header.text.find(keyword)
        if index < 0:
            return None
        return header.line_of(index, scan.content)

    def _required_record(self, scan: SectionScan, header: Section, keyword: str, rule: str) -> Outcome:
        line = self._keyword_line(scan, header, keyword)
        if line is None:
            return self._error(
                OutcomeCode.VALUE_ERROR,
                f"{keyword} is required but missing from the header",
                rule,
                line=header.start_line,
                expected=f"{keyword}(...) record in HEADER",
            )
        return self._passed(f"{keyword} found", rule, line=line)

    def _file_schema(self, scan: SectionScan, header: Section) -> Outcome:
        line = self._keyword_line(scan, header, "FILE_SCHEMA") or header.start_line
        m = FILE_SCHEMA_PATTERN.search(header.text)
        if m is None:
            return self._error(
                OutcomeCode.SCHEMA_ERROR,
                "FILE_SCHEMA is missing or malformed",
                "FILE_SCHEMA_REQUIRED",
                line=header.start_line,
                expected="FILE_SCHEMA(('<schema identifier>'));",
            )

        schema = m.group(1)
        rules = self.policy.schemas
        if schema not in rules.known:
            return self._warning(
                OutcomeCode.SCHEMA_ERROR,
                f"Unknown or outdated IFC schema: {schema}. Recommended schemas: {', '.join(rules.suggested)}",
                "FILE_SCHEMA_VALIDATION",
                line=line,
                expected=f"one of {', '.join(rules.known)}",
            )
        return self._passed(f"Valid IFC schema found: {schema}", "FILE_SCHEMA_VALIDATION", line=line)
