"""
CLI interface for Passforge.
"""

import logging
import sys
from typing import Any, Callable, NoReturn, Optional

import click

from .clipboard import copy_to_clipboard
from .config import GeneratorConfig
from .display import EXAMPLES, RULE_WIDTH, analysis_lines, boxed, numbered
from .exceptions import ConfigurationError, ExportError
from .export import export_passwords
from .menu import MenuApp
from .utils.password_generator import PasswordGenerator
from .utils.strength import MAX_SCORE, evaluate_strength
from .utils.validation import (
    MAX_BATCH,
    MAX_EXPORT,
    MAX_LENGTH,
    MAX_MINIMUM,
    MIN_LENGTH,
    get_validation_error_message,
    validate_minimum,
    validate_minimums,
)

logger = logging.getLogger("passforge")


def generator_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the character composition options to a command."""
    options = [
        click.option("--length", default=12, envvar="PASSFORGE_LENGTH",
                     type=click.IntRange(MIN_LENGTH, MAX_LENGTH),
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH}, default: 12)"),
        click.option("--no-lowercase", is_flag=True, help="Exclude lowercase letters"),
        click.option("--no-uppercase", is_flag=True, help="Exclude uppercase letters"),
        click.option("--no-digits", is_flag=True, help="Exclude digits"),
        click.option("--no-special", is_flag=True, help="Exclude special characters"),
        click.option("--readable", is_flag=True,
                     help="Use only easy-to-read characters (no l, o, I, O, 0, 1)"),
        click.option("--exclude-ambiguous", is_flag=True,
                     help="Exclude ambiguous characters (0, O, l, 1, I, |, `, ')"),
        click.option("--min-special", default=1, type=click.IntRange(0, MAX_MINIMUM),
                     help="Minimum number of special characters (default: 1)"),
        click.option("--min-digits", default=1, type=click.IntRange(0, MAX_MINIMUM),
                     help="Minimum number of digits (default: 1)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_config(length: int, no_lowercase: bool, no_uppercase: bool, no_digits: bool,
                 no_special: bool, readable: bool, exclude_ambiguous: bool,
                 min_special: int, min_digits: int) -> GeneratorConfig:
    """Turn command line options into a validated configuration."""
    for name, value in (("min_special", min_special), ("min_digits", min_digits)):
        if not validate_minimum(value, length):
            raise click.BadParameter(
                get_validation_error_message(name, value, length),
                param_hint=f"--{name.replace('_', '-')}",
            )

    if not validate_minimums(min_special, min_digits, length):
        raise click.BadParameter(
            get_validation_error_message("minimums", min_special + min_digits, length),
            param_hint="'--min-special' / '--min-digits'",
        )

    return GeneratorConfig(
        length=length,
        include_lowercase=not no_lowercase,
        include_uppercase=not no_uppercase,
        include_digits=not no_digits,
        include_special=not no_special,
        readable_only=readable,
        exclude_ambiguous=exclude_ambiguous,
        min_special=min_special,
        min_digits=min_digits,
    )


def fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="passforge")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Passforge - generate strong passwords and check their strength."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Debug logging enabled")

    if ctx.invoked_subcommand is None:
        MenuApp().run()


@cli.command()
@generator_options
@click.option("--copy", "-c", is_flag=True, help="Copy the password to the clipboard")
def generate(copy: bool, **options: Any) -> None:
    """Generate one password and show its strength."""
    generator = PasswordGenerator(build_config(**options))

    try:
        password = generator.generate()
    except ConfigurationError as e:
        fail(str(e))

    click.echo(f"🔐 Generated {len(password)}-character password using: "
               f"{generator.get_charset_info()}")
    click.echo(boxed(password))
    for line in analysis_lines(evaluate_strength(password)):
        click.echo(line)

    if copy:
        if copy_to_clipboard(password):
            click.echo("🔐 Password copied to clipboard (cleared in 60 seconds).")
        else:
            click.echo(f"📋 Copy the password manually: {password}")


@cli.command()
@click.argument("count", type=click.IntRange(1, MAX_BATCH))
@generator_options
@click.option("--export", "-e", "export_file", is_flag=True,
              help="Also write the passwords to a file")
def batch(count: int, export_file: bool, **options: Any) -> None:
    """Generate COUNT passwords (1-20)."""
    config = build_config(**options)
    logger.debug(f"Generating {count} passwords with {config}")

    try:
        passwords = PasswordGenerator(config).generate_multiple(count)
    except ConfigurationError as e:
        fail(str(e))

    click.echo("═" * RULE_WIDTH)
    for index, password in enumerate(passwords, start=1):
        click.echo(numbered(index, password, evaluate_strength(password)))
    click.echo("═" * RULE_WIDTH)

    if export_file:
        _export(passwords, config, None)


@cli.command()
@click.argument("count", type=click.IntRange(1, MAX_EXPORT))
@generator_options
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True),
              help="Output file (default: passwords_<timestamp>.txt)")
def export(count: int, output: Optional[str], **options: Any) -> None:
    """Generate COUNT passwords (1-50) and write them to a file."""
    config = build_config(**options)

    try:
        passwords = PasswordGenerator(config).generate_multiple(count)
    except ConfigurationError as e:
        fail(str(e))

    _export(passwords, config, output)


def _export(passwords: list, config: GeneratorConfig, output: Optional[str]) -> None:
    try:
        path = export_passwords(passwords, config, output)
    except ExportError as e:
        fail(str(e))
    click.echo(f"✅ Passwords exported to file: {path}")


@cli.command()
@click.argument("password", required=False)
def check(password: Optional[str]) -> None:
    """Check the strength of PASSWORD (prompted for when omitted)."""
    if password is None:
        password = click.prompt("Password to check", hide_input=True,
                                default="", show_default=False)

    if not password:
        fail("Password cannot be empty")

    evaluation = evaluate_strength(password)
    click.echo(f"Length: {len(password)} characters")
    click.echo(f"Rating: {evaluation.strength.symbol} {evaluation.strength.label}")
    click.echo(f"Score: {evaluation.score}/{MAX_SCORE}")
    for item in evaluation.feedback:
        click.echo(f"   {item}")


@cli.command()
def examples() -> None:
    """Show example passwords and recommendations."""
    click.echo(EXAMPLES)


@cli.command()
def menu() -> None:
    """Start the interactive menu."""
    MenuApp().run()


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
