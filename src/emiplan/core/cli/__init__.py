"""emiplan CLI — entry point for the emi, schedule and evaluate commands."""

import click

from emiplan import __version__


@click.group()
@click.version_option(version=__version__, package_name="emiplan")
@click.option("--config", "config_file", type=click.Path(dir_okay=False), default=None, help="YAML or JSON config file.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Overrides logging.level from the config.",
)
@click.pass_context
def main(ctx: click.Context, config_file: str | None, log_level: str | None) -> None:
    """emiplan — loan EMI, amortization and prepayment savings."""
    from .common import init_context

    init_context(ctx, config_file, log_level)


# Register subcommands
from .emi_cmd import emi
from .evaluate_cmd import evaluate
from .schedule_cmd import schedule

main.add_command(emi)
main.add_command(schedule)
main.add_command(evaluate)
