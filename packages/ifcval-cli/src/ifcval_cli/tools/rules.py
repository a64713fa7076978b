import click
from rich.console import Console
from rich.table import Table

from ifcval_core.validation.pipeline import CHECKERS


@click.command("rules")
def rules() -> None:
    """List every rule identifier in execution order."""
    table = Table(title="Validation Rules")
    table.add_column("Stage", style="cyan")
    table.add_column("Rule")
    table.add_column("Description")

    for checker in CHECKERS:
        for rule, description in checker.RULES.items():
            table.add_row(checker.STAGE.value, rule, description)

    Console().print(table)
