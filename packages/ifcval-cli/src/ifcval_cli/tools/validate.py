import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from ifcval_core.data.policy import load_validation_policy
from ifcval_core.models.policy import ValidationPolicy
from ifcval_core.models.report import ProgressNotification, ValidationReport
from ifcval_core.reporting.export import EXPORT_FORMATS, write_export
from ifcval_core.validation.pipeline import ValidationPipeline
from ifcval_core.validation.progress import ProgressSink

from .io import read_ifc_file
from .render import render_batch_summary, render_report

_logger = logging.getLogger("ifcval.cli")


def _validate_one(
    path: Path, content: str, policy: ValidationPolicy, sink: ProgressSink | None
) -> ValidationReport:
    # one pipeline per file; pipelines are not shared between workers
    pipeline = ValidationPipeline(policy=policy, progress=sink).initialize()
    return pipeline.validate(content, path.name)


def run_batch(
    contents: dict[Path, str],
    policy: ValidationPolicy,
    *,
    jobs: int = 1,
    console: Console | None = None,
    show_progress: bool = True,
) -> list[ValidationReport]:
    """Validate every file, optionally in parallel. Reports keep input order."""
    columns = (
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        TextColumn("[dim]{task.fields[stage]}[/dim]"),
    )
    with Progress(*columns, console=console, disable=not show_progress) as progress:
        task_ids = {path: progress.add_task(path.name, total=100, stage="queued") for path in contents}

        def sink_for(path: Path) -> ProgressSink:
            task_id = task_ids[path]

            def sink(notification: ProgressNotification) -> None:
                progress.update(task_id, completed=notification.progress, stage=notification.stage.value)

            return sink

        with ThreadPoolExecutor(max_workers=jobs) as executor:
            futures = {
                path: executor.submit(_validate_one, path, text, policy, sink_for(path))
                for path, text in contents.items()
            }
            return [futures[path].result() for path in contents]


@click.command("validate")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--policy",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="IFCVAL_POLICY",
    help="Validation policy YAML (allow-lists, estimator coefficients). Defaults to the bundled policy.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Treat warnings as failures (exit code 2).",
)
@click.option(
    "--export",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Export the report (or a batch document for several files) to this path.",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(EXPORT_FORMATS, case_sensitive=False),
    default="yaml",
    show_default=True,
    help="Export format.",
)
@click.option(
    "--jobs",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of files validated concurrently.",
)
@click.option("--show-passed", is_flag=True, help="Also list PASSED outcomes.")
@click.option(
    "--by-category",
    is_flag=True,
    help="Group findings into one table per category (syntax, header, schema, normative, industry).",
)
@click.option("--snippets", is_flag=True, help="Show source lines around each flagged line.")
@click.option("--no-progress", is_flag=True, help="Disable the progress display.")
def validate(
    files: tuple[Path, ...],
    policy: Optional[Path],
    strict: bool,
    export: Optional[Path],
    fmt: str,
    jobs: int,
    show_passed: bool,
    by_category: bool,
    snippets: bool,
    no_progress: bool,
) -> None:
    """Check IFC files for STEP syntax, header, schema and best-practice conformance."""
    console = Console()
    # a path given twice is validated and counted once
    files = tuple(dict.fromkeys(files))

    try:
        validation_policy = load_validation_policy(policy)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading policy: {escape(str(e))}[/red]")
        sys.exit(1)

    contents: dict[Path, str] = {}
    unreadable = 0
    for path in files:
        try:
            contents[path] = read_ifc_file(path)
        except OSError as e:
            _logger.info("cannot read %s: %s", path, e)
            console.print(f"[red]Cannot read {path}: {escape(str(e))}[/red]")
            unreadable += 1

    console.print("\n[bold cyan]IFC Validation[/bold cyan]")
    reports = run_batch(contents, validation_policy, jobs=jobs, console=console, show_progress=not no_progress)

    for path, report in zip(contents, reports):
        render_report(
            console,
            report,
            show_passed=show_passed,
            by_category=by_category,
            content=contents[path] if snippets else None,
        )

    if len(files) > 1:
        render_batch_summary(console, reports, unreadable)

    if export and reports:
        write_export(export, reports, fmt.lower())
        console.print(f"[green]✓[/green] Report exported to {export}")

    error_count = sum(r.summary.errors for r in reports)
    warning_count = sum(r.summary.warnings for r in reports)

    if unreadable or error_count > 0:
        console.print(f"\n[red]✗[/red] Validation failed with {error_count} errors")
        sys.exit(1)
    elif strict and warning_count > 0:
        console.print(f"\n[yellow]⚠[/yellow] Validation completed with {warning_count} warnings (strict mode)")
        sys.exit(2)
    else:
        console.print("\n[green]✓[/green] Validation completed successfully")
        sys.exit(0)
