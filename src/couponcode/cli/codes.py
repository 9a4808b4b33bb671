import sys

import click
from rich.console import Console
from rich.table import Table

from couponcode.badwords import rot13
from couponcode.config import DEFAULT_PART_LENGTH, DEFAULT_PARTS, load_config
from couponcode.errors import ConfigurationError, GenerationError
from couponcode.generator import generate
from couponcode.security import get_code_info
from couponcode.validator import normalize, validate

parts_option = click.option(
    "--parts",
    type=int,
    envvar="COUPONCODE_PARTS",
    default=DEFAULT_PARTS,
    show_default=True,
    help="Number of hyphen separated parts.",
)
part_length_option = click.option(
    "--part-length",
    type=int,
    envvar="COUPONCODE_PART_LENGTH",
    default=DEFAULT_PART_LENGTH,
    show_default=True,
    help="Characters per part, checkdigit included (2-20).",
)


@click.command("generate")
@parts_option
@part_length_option
@click.option("--seed", help="Text to derive the code from. Random if omitted.")
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of codes to generate.",
)
@click.option(
    "--bad-word",
    "bad_words",
    multiple=True,
    help="Plain text word no part may spell. Replaces the default list; repeatable.",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=0),
    help="Give up after this many rejected parts.",
)
def generate_command(parts, part_length, seed, count, bad_words, max_attempts):
    """Generates coupon codes, one per line."""
    try:
        config = load_config(
            parts=parts,
            part_length=part_length,
            bad_words=list(bad_words) if bad_words else None,
            obfuscated=not bad_words,
        )
        for i in range(count):
            if seed is not None:
                # Batches stay reproducible: seed, seed1, seed2, ...
                config.seed = seed if i == 0 else f"{seed}{i}"
            click.echo(generate(config=config, max_attempts=max_attempts))
    except ConfigurationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")
    except GenerationError as e:
        raise click.ClickException(str(e))


@click.command("validate")
@click.argument("code")
@parts_option
@part_length_option
def validate_command(code, parts, part_length):
    """Validates CODE and prints its canonical form."""
    try:
        result = validate(code, parts=parts, part_length=part_length)
    except ConfigurationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    if not result:
        click.echo(f"Error: {result.describe()}", err=True)
        sys.exit(1)

    click.echo(result.code)


@click.command("normalize")
@click.argument("code")
def normalize_command(code):
    """Prints CODE uppercased, without separators and with O/I/Z/S read as 0/1/2/5."""
    click.echo(normalize(code))


@click.command("rot13")
@click.argument("text")
def rot13_command(text):
    """Encodes or decodes TEXT for use in a bad word list."""
    click.echo(rot13(text))


@click.command("info")
@parts_option
@part_length_option
def info_command(parts, part_length):
    """Shows the layout and code space of a configuration."""
    try:
        info = get_code_info(parts, part_length)
    except ConfigurationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    table = Table(title="Coupon code configuration")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Parts", str(info["parts"]))
    table.add_row("Part length", str(info["part_length"]))
    table.add_row("Display length", str(info["display_length"]))
    table.add_row("Data characters", str(info["data_characters"]))
    table.add_row("Code space", f"{info['code_space']:,}")
    table.add_row("Security bits", f"{info['security_bits']:.1f}")
    table.add_row(
        "Random part passes checkdigit", f"{info['random_part_pass_rate']:.2%}"
    )
    table.add_row("Example", info["example"])

    Console().print(table)
