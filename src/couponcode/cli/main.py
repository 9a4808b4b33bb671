import click

from couponcode.cli.codes import (
    generate_command,
    info_command,
    normalize_command,
    rot13_command,
    validate_command,
)
from couponcode.log import setup_logging


@click.group()
@click.option(
    "--log-level",
    envvar="COUPONCODE_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level for the couponcode loggers.",
)
def cli(log_level):
    """Generates and validates human enterable coupon codes."""
    setup_logging(log_level)


# Add code commands
cli.add_command(generate_command)
cli.add_command(validate_command)
cli.add_command(normalize_command)
cli.add_command(rot13_command)
cli.add_command(info_command)


if __name__ == "__main__":
    cli()
