#!/usr/bin/env python3
"""
Command-line front end.

Runs one validated prompt and prints the accepted value, so shell scripts
can use the same parse/validate/retry loop as Python callers. Prompts and
error messages go to stderr; only the value is written to stdout.

Usage:
    promptguard ask int --prompt "Port" --min 1 --max 65535
    promptguard ask string --prompt "Username" --min 3 --pattern '^[a-z]+$'
    promptguard ask date --format %Y-%m-%d
    promptguard ask string --choice red --choice green --config console.yaml
    promptguard --version

Exit codes:
    0: a value was accepted
    1: settings file could not be loaded
    2: invalid command-line usage
    130: cancelled (Ctrl+C or end of input)
"""

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional
from urllib.parse import SplitResult

import typer

from . import __version__
from .builders.base import BuilderBase
from .console import ConsoleInput, ConsoleOutput
from .exceptions import SettingsError, ValidationCancelledError
from .facade import (
    for_char,
    for_date,
    for_datetime,
    for_decimal,
    for_duration,
    for_float,
    for_integer,
    for_ip_address,
    for_string,
    for_time,
    for_uri,
    for_uuid,
)
from .rules.base import CustomRule
from .settings import ConsoleSettings, load_settings

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="promptguard",
    help="promptguard - Validated interactive input for shell scripts",
    no_args_is_help=True,
    add_completion=False,
)


class ValueType(str, Enum):
    """Target type for the ask command."""
    int = "int"
    float = "float"
    decimal = "decimal"
    string = "string"
    char = "char"
    date = "date"
    datetime = "datetime"
    time = "time"
    duration = "duration"
    uuid = "uuid"
    ip = "ip"
    uri = "uri"


FORMATTED_TYPES = {ValueType.date, ValueType.datetime, ValueType.time, ValueType.duration}
BOUNDED_TYPES = {
    ValueType.int,
    ValueType.float,
    ValueType.decimal,
    ValueType.date,
    ValueType.datetime,
    ValueType.time,
    ValueType.duration,
}


def setup_logging(verbose: int, quiet: bool):
    """Configure logging based on verbosity flags."""
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose >= 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
    )


def create_builder(
    value_type: ValueType,
    prompt: str,
    format: Optional[str],
    input_provider: ConsoleInput,
    output_provider: ConsoleOutput,
) -> BuilderBase:
    """Build the builder for ``value_type`` with the given providers."""
    providers = {"input_provider": input_provider, "output_provider": output_provider}
    if value_type in FORMATTED_TYPES:
        factory = {
            ValueType.date: for_date,
            ValueType.datetime: for_datetime,
            ValueType.time: for_time,
            ValueType.duration: for_duration,
        }[value_type]
        return factory(prompt, format, **providers)

    factory = {
        ValueType.int: for_integer,
        ValueType.float: for_float,
        ValueType.decimal: for_decimal,
        ValueType.string: for_string,
        ValueType.char: for_char,
        ValueType.uuid: for_uuid,
        ValueType.ip: for_ip_address,
        ValueType.uri: for_uri,
    }[value_type]
    return factory(prompt, **providers)


def parse_option(builder: BuilderBase, text: str, option: str) -> Any:
    """Parse an option value with the builder's own parser."""
    value, error = builder.validator.try_parse(text)
    if error is not None:
        raise typer.BadParameter(f"{text!r}: {error}", param_hint=option)
    return value


def parse_length(text: str, option: str) -> int:
    try:
        length = int(text)
    except ValueError:
        raise typer.BadParameter(f"{text!r} is not a valid length", param_hint=option)
    if length < 0:
        raise typer.BadParameter("length cannot be negative", param_hint=option)
    return length


def apply_options(
    builder: BuilderBase,
    value_type: ValueType,
    minimum: Optional[str],
    maximum: Optional[str],
    pattern: Optional[str],
    choices: List[str],
) -> None:
    """Translate command-line constraints into rules, in a fixed order."""
    if value_type is ValueType.string:
        if minimum is not None or maximum is not None:
            builder.with_length_range(
                parse_length(minimum, "--min") if minimum is not None else None,
                parse_length(maximum, "--max") if maximum is not None else None,
            )
        if pattern is not None:
            try:
                builder.with_regex(pattern)
            except re.error as e:
                raise typer.BadParameter(f"invalid regular expression: {e}", param_hint="--pattern")
        if choices:
            builder.with_allowed_values(choices)
        return

    if pattern is not None:
        raise typer.BadParameter("only applies to the string type", param_hint="--pattern")

    if minimum is not None or maximum is not None:
        if value_type not in BOUNDED_TYPES:
            raise typer.BadParameter(
                f"bounds do not apply to the {value_type.value} type", param_hint="--min/--max"
            )
        low = parse_option(builder, minimum, "--min") if minimum is not None else None
        high = parse_option(builder, maximum, "--max") if maximum is not None else None
        if low is not None and high is not None:
            builder.with_range(low, high)
        elif low is not None:
            builder.with_minimum(low)
        else:
            builder.with_maximum(high)

    if choices:
        allowed = [parse_option(builder, choice, "--choice") for choice in choices]
        builder.validator.add_rule(
            CustomRule(lambda value: value in allowed, f"Value must be one of: {', '.join(choices)}")
        )


def format_value(value: Any) -> str:
    if isinstance(value, SplitResult):
        return value.geturl()
    return str(value)


@app.command()
def ask(
    value_type: ValueType = typer.Argument(..., metavar="TYPE", help="Type of value to ask for"),
    prompt: Optional[str] = typer.Option(None, "--prompt", "-p", help="Prompt text (defaults to the type name)"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Exact input format for date, datetime, time and duration"),
    minimum: Optional[str] = typer.Option(None, "--min", help="Minimum value, or minimum length for strings"),
    maximum: Optional[str] = typer.Option(None, "--max", help="Maximum value, or maximum length for strings"),
    pattern: Optional[str] = typer.Option(None, "--pattern", help="Regular expression the string must contain"),
    choices: Optional[List[str]] = typer.Option(None, "--choice", "-c", help="Allowed value (repeatable)"),
    config: Optional[Path] = typer.Option(None, "--config", help="Console settings YAML file"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
):
    """Ask for one value and print it once it is valid."""
    setup_logging(verbose, quiet)

    if format is not None and value_type not in FORMATTED_TYPES:
        raise typer.BadParameter(f"does not apply to the {value_type.value} type", param_hint="--format")

    try:
        settings = load_settings(config) if config is not None else ConsoleSettings()
    except SettingsError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.details is not None:
            logger.debug("Settings error details: %s", e.details)
        raise typer.Exit(1)

    settings = settings.model_copy(update={"use_stderr": True})
    input_provider = ConsoleInput(eof_error=True)
    output_provider = ConsoleOutput(settings)

    try:
        builder = create_builder(
            value_type, prompt or value_type.value, format, input_provider, output_provider
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--format")
    apply_options(builder, value_type, minimum, maximum, pattern, choices or [])

    try:
        value = builder.get()
    except (KeyboardInterrupt, EOFError, ValidationCancelledError):
        typer.echo("\nInput cancelled", err=True)
        raise typer.Exit(130)

    typer.echo(format_value(value))


def version_callback(value: bool):
    """Handle --version flag."""
    if value:
        typer.echo(f"promptguard {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(None, "--version", callback=version_callback, is_eager=True,
                                 help="Show version and exit"),
):
    """promptguard - Validated interactive input for shell scripts."""


def main():
    """Entry point for the promptguard CLI."""
    app()


if __name__ == "__main__":
    main()
