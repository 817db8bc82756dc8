"""
typedenv command-line tool.

Reads typed environment values for shell scripts and deployment checks:

    typedenv get WORKERS --type int --default 4
    typedenv get REQUEST_TIMEOUT --type duration
    typedenv list ALLOWED_PORTS --type int --default 80,443 --strict
"""

import click
import logging
from datetime import timedelta
from pydantic import ValidationError

from typedenv import __version__
from typedenv.config import get_settings
from typedenv.env import get_list, lookup, parse, split_list
from typedenv.exceptions import EnvParseError
from typedenv.parsers import (
    format_duration,
    parse_bool,
    parse_duration,
    parse_float64,
    parse_identity,
    parse_int,
    parse_int64,
)

logger = logging.getLogger(__name__)

TYPE_PARSERS = {
    'string': parse_identity,
    'int': parse_int,
    'int64': parse_int64,
    'float64': parse_float64,
    'bool': parse_bool,
    'duration': parse_duration,
}


def setup_logging(verbose: bool = False):
    """Configure logging for CLI."""
    if verbose:
        level = logging.DEBUG
    else:
        try:
            level = logging.getLevelName(get_settings().log_level)
        except ValidationError as e:
            raise click.ClickException(f"Invalid TYPEDENV_LOG_LEVEL: {e.errors()[0]['msg']}")
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def format_value(value) -> str:
    """Render a parsed value in its canonical textual form."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, timedelta):
        return format_duration(value)
    return str(value)


def _parse_default(parser, default: str):
    try:
        return parser(default)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--default'")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """Read typed values from the process environment."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    setup_logging(verbose)


@cli.command()
@click.argument('key')
@click.option('--type', '-t', 'type_name', type=click.Choice(list(TYPE_PARSERS)),
              default='string', show_default=True, help='Value type')
@click.option('--default', '-d', type=str, help='Value used when KEY is not set')
def get(key, type_name, default):
    """Print the parsed value of KEY."""
    parser = TYPE_PARSERS[type_name]
    fallback = _parse_default(parser, default) if default is not None else None

    _, exists = lookup(key)
    if not exists and fallback is None:
        raise click.ClickException(f"{key} is not set")

    try:
        value = parse(key, parser, fallback)
    except EnvParseError as e:
        raise click.ClickException(str(e))

    logger.debug(f"{key} resolved to {value!r} (from {'environment' if exists else 'default'})")
    click.echo(format_value(value))


@cli.command('list')
@click.argument('key')
@click.option('--type', '-t', 'type_name', type=click.Choice(list(TYPE_PARSERS)),
              default='string', show_default=True, help='Element type')
@click.option('--default', '-d', type=str, help='Comma-separated values used when KEY is not set or invalid')
@click.option('--strict', is_flag=True, help='Fail on invalid elements instead of using the default')
def list_values(key, type_name, default, strict):
    """Print the parsed elements of comma-separated KEY, one per line."""
    parser = TYPE_PARSERS[type_name]
    fallback = []
    if default is not None:
        fallback = [_parse_default(parser, segment) for segment in split_list(default)]

    try:
        values = get_list(key, parser, fallback, strict=strict)
    except EnvParseError as e:
        raise click.ClickException(str(e))

    for value in values:
        click.echo(format_value(value))


if __name__ == "__main__":
    cli()
