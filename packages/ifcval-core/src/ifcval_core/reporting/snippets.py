from collections import defaultdict
from typing import Iterable

from pydantic import BaseModel, ConfigDict

from ifcval_core.models.outcome import Outcome, Severity


class SnippetLine(BaseModel):
    model_config = ConfigDict(frozen=True)
    number: int
    text: str
    flagged: bool = False


class Snippet(BaseModel):
    """Source lines around one flagged line, with the outcomes attached to it."""

    model_config = ConfigDict(frozen=True)
    line: int
    severity: Severity
    outcomes: tuple[Outcome, ...]
    lines: tuple[SnippetLine, ...]


def extract_snippets(
    content: str,
    results: Iterable[Outcome],
    *,
    before: int = 2,
    after: int = 3,
    include_passed: bool = False,
) -> list[Snippet]:
    """
    Build code snippets for every line-addressable outcome.

    Outcomes are grouped by line; each snippet shows ``before`` lines above and
    ``after`` lines below the flagged line, clipped to the file. The snippet
    severity is the worst severity among its outcomes. Sorted by line.
    """
    by_line: dict[int, list[Outcome]] = defaultdict(list)
    for outcome in results:
        if outcome.line is None:
            continue
        if outcome.severity == Severity.PASSED and not include_passed:
            continue
        by_line[outcome.line].append(outcome)

    source = content.split("\n")
    snippets: list[Snippet] = []
    for line in sorted(by_line):
        outcomes = by_line[line]
        first = max(1, line - before)
        last = min(len(source), line + after)
        snippets.append(
            Snippet(
                line=line,
                severity=max((o.severity for o in outcomes), key=lambda s: s.rank),
                outcomes=tuple(outcomes),
                lines=tuple(
                    SnippetLine(number=n, text=source[n - 1].rstrip("\r"), flagged=n == line)
                    for n in range(first, last + 1)
                ),
            )
        )
    return snippets
