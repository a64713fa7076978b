import click
from ifcval_core.codebase.logs import configure_logger
from ifcval_cli.tools import estimate, rules, validate


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="IFCVAL_LOG_LEVEL",
    help="Verbosity of the ifcval loggers.",
)
def cli(log_level: str) -> None:
    """IFC / STEP physical-file conformance checker."""
    configure_logger(log_level)


# add cli commands here

cli.add_command(validate)
cli.add_command(estimate)
cli.add_command(rules)
