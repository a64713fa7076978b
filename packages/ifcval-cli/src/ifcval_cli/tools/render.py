from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ifcval_core.models.outcome import Outcome, Severity
from ifcval_core.models.report import ValidationReport
from ifcval_core.reporting.categories import categorize
from ifcval_core.reporting.snippets import extract_snippets
from ifcval_core.validation.estimate import estimate_accuracy

SEVERITY_COLORS = {
    Severity.ERROR: "red",
    Severity.WARNING: "yellow",
    Severity.NOT_APPLICABLE: "blue",
    Severity.PASSED: "green",
}


def _printable(text: str) -> str:
    # lone surrogates from undecodable input cannot be written to the terminal
    return escape(text.encode("utf-8", "replace").decode("utf-8"))


def _colored(severity: Severity) -> str:
    color = SEVERITY_COLORS.get(severity, "white")
    return f"[{color}]{severity.value}[/{color}]"


def _findings_table(title: str, outcomes: list[Outcome]) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Severity")
    table.add_column("Code")
    table.add_column("Rule", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Message")
    for outcome in outcomes:
        table.add_row(
            _colored(outcome.severity),
            outcome.outcome_code.value,
            escape(outcome.rule or "-"),
            str(outcome.line) if outcome.line is not None else "-",
            _printable(outcome.observed),
        )
    return table


def render_report(
    console: Console,
    report: ValidationReport,
    *,
    show_passed: bool = False,
    by_category: bool = False,
    content: str | None = None,
) -> None:
    """Print one file's verdict, summary counts and (non-passed) outcomes."""
    verdict = "[green]✓ VALID[/green]" if report.is_valid else "[red]✗ INVALID[/red]"
    console.print(f"\n[bold cyan]{escape(report.filename)}[/bold cyan] {verdict}")

    table = Table(title="Validation Summary")
    table.add_column("Severity", style="cyan")
    table.add_column("Count", justify="right")
    table.add_row("PASSED", str(report.summary.passed), style="green")
    table.add_row("WARNING", str(report.summary.warnings), style="yellow")
    table.add_row("ERROR", str(report.summary.errors), style="red")
    if report.summary.not_applicable:
        table.add_row("NOT_APPLICABLE", str(report.summary.not_applicable), style="blue")
    console.print(table)

    shown = [o for o in report.results if show_passed or o.severity != Severity.PASSED]
    if not shown:
        console.print("[green]✓ No issues found[/green]")
    elif by_category:
        render_categories(console, report, show_passed=show_passed)
    else:
        console.print(_findings_table("Findings", shown))

    if content is not None:
        render_snippets(console, report, content)

    console.print(
        f"Validated in {report.validation_time:.3f}s "
        f"(estimated {report.estimated_time:.2f}s, "
        f"accuracy {estimate_accuracy(report.validation_time, report.estimated_time)}%)"
    )


def render_categories(console: Console, report: ValidationReport, *, show_passed: bool = False) -> None:
    """One findings table per category; empty categories are skipped."""
    for name, outcomes in categorize(report).items():
        if not show_passed:
            outcomes = [o for o in outcomes if o.severity != Severity.PASSED]
        if outcomes:
            console.print(_findings_table(f"{name.capitalize()} ({len(outcomes)})", outcomes))


def render_snippets(console: Console, report: ValidationReport, content: str) -> None:
    snippets = extract_snippets(content, report.results)
    if not snippets:
        return
    console.print("\n[bold]Code snippets:[/bold]")
    for snippet in snippets:
        console.print(f"{_colored(snippet.severity)} line {snippet.line}")
        for line in snippet.lines:
            marker = ">" if line.flagged else " "
            text = _printable(line.text)
            if line.flagged:
                text = f"[bold]{text}[/bold]"
            console.print(f" {marker} {line.number:>5} | {text}", highlight=False)
        for outcome in snippet.outcomes:
            console.print(f"         {outcome.outcome_code.value}: {_printable(outcome.observed)}")


def render_batch_summary(console: Console, reports: list[ValidationReport], unreadable: int = 0) -> None:
    actual = sum(r.validation_time for r in reports)
    estimated = sum(r.estimated_time for r in reports)

    table = Table(title="Batch Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Files", str(len(reports) + unreadable))
    table.add_row("Valid", str(sum(1 for r in reports if r.is_valid)), style="green")
    if unreadable:
        table.add_row("Unreadable", str(unreadable), style="red")
    table.add_row("Errors", str(sum(r.summary.errors for r in reports)), style="red")
    table.add_row("Warnings", str(sum(r.summary.warnings for r in reports)), style="yellow")
    table.add_row("Total time", f"{actual:.3f}s")
    table.add_row("Estimate accuracy", f"{estimate_accuracy(actual, estimated)}%")
    console.print(table)
