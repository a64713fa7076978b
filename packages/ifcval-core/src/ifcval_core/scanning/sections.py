"""
Structural scan of an ISO-10303-21 (STEP physical file) text.

The scan is a pure function of the content. Missing markers are recorded as
``None`` and left for the checkers to report; nothing here raises on
malformed input. When a marker occurs more than once the first occurrence wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

START_MARKER = "ISO-10303-21;"
END_MARKER = "END-ISO-10303-21;"
HEADER_MARKER = "HEADER;"
DATA_MARKER = "DATA;"
SECTION_END_MARKER = "ENDSEC;"

# "#<label> = <TYPE>(" -- shared by the schema checker and the time estimator
INSTANCE_PATTERN = re.compile(r"#(\d+)\s*=\s*([A-Z][A-Z0-9_]*)\s*\(")

_HEADER_SECTION = re.compile(r"HEADER;(.*?)ENDSEC;", re.DOTALL)
_DATA_SECTION = re.compile(r"DATA;(.*?)ENDSEC;", re.DOTALL)


@dataclass(frozen=True)
class Section:
    """Text between a section keyword and the nearest following ENDSEC;."""

    text: str
    offset: int  # character offset of ``text`` within the full content
    start_line: int  # 1-based line of the section keyword

    def line_of(self, index: int, content: str) -> int:
        """1-based line number of a character index inside ``text``."""
        return line_at(content, self.offset + index)


@dataclass(frozen=True)
class Instance:
    label: str  # "#12"
    type_name: str
    line: int


@dataclass(frozen=True)
class SectionScan:
    content: str
    content_upper: str
    lines: tuple[str, ...]
    header_line: int | None
    data_line: int | None
    end_line: int | None
    header: Section | None
    data: Section | None

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def first_line_containing(self, needle: str, *, ignore_case: bool = True) -> int | None:
        needle = needle.upper() if ignore_case else needle
        for number, line in enumerate(self.lines, start=1):
            if needle in (line.upper() if ignore_case else line):
                return number
        return None

    def instances(self) -> list[Instance]:
        """Instance declarations found in the DATA section, in file order."""
        if self.data is None:
            return []
        return [
            Instance(
                label=f"#{m.group(1)}",
                type_name=m.group(2),
                line=self.data.line_of(m.start(), self.content),
            )
            for m in INSTANCE_PATTERN.finditer(self.data.text)
        ]


def line_at(content: str, index: int) -> int:
    return content.count("\n", 0, index) + 1


def _marker_line(lines: tuple[str, ...], marker: str) -> int | None:
    for number, line in enumerate(lines, start=1):
        if marker in line:
            return number
    return None


def _section(pattern: re.Pattern[str], content: str) -> Section | None:
    m = pattern.search(content)
    if m is None:
        return None
    return Section(text=m.group(1), offset=m.start(1), start_line=line_at(content, m.start()))


def scan_sections(content: str) -> SectionScan:
    """Locate the structural markers and section bodies of ``content``."""
    lines = tuple(content.split("\n"))
    return SectionScan(
        content=content,
        content_upper=content.upper(),
        lines=lines,
        header_line=_marker_line(lines, HEADER_MARKER),
        data_line=_marker_line(lines, DATA_MARKER),
        end_line=_marker_line(lines, END_MARKER),
        header=_section(_HEADER_SECTION, content),
        data=_section(_DATA_SECTION, content),
    )


def count_instances(content: str) -> int:
    """Number of instance declarations anywhere in ``content``."""
    return sum(1 for _ in INSTANCE_PATTERN.finditer(content))
