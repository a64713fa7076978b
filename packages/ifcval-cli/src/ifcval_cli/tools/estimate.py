import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ifcval_core.data.policy import load_validation_policy
from ifcval_core.scanning.sections import count_instances
from ifcval_core.validation.estimate import TimeEstimator

from .io import read_ifc_file


@click.command("estimate")
@click.argument("files", nargs=-1, required=True, type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--policy",
    type=click.Path(path_type=Path, dir_okay=False),
    envvar="IFCVAL_POLICY",
    help="Validation policy YAML providing estimator coefficients.",
)
def estimate(files: tuple[Path, ...], policy: Optional[Path]) -> None:
    """Heuristic validation-time estimate per file (no validation is run)."""
    console = Console()

    try:
        estimator = TimeEstimator(load_validation_policy(policy).estimator)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading policy: {escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title="Validation Time Estimate")
    table.add_column("File", style="cyan")
    table.add_column("Size", justify="right")
    table.add_column("Lines", justify="right")
    table.add_column("Entities", justify="right")
    table.add_column("Estimate", justify="right")

    failed = False
    for path in files:
        try:
            content = read_ifc_file(path)
        except OSError as e:
            console.print(f"[red]Cannot read {path}: {escape(str(e))}[/red]")
            failed = True
            continue
        table.add_row(
            path.name,
            str(len(content)),
            str(len(content.split("\n"))),
            str(count_instances(content)),
            f"{estimator.estimate(content):.2f}s",
        )

    console.print(table)
    sys.exit(1 if failed else 0)
