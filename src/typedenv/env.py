"""
Typed accessors for process environment variables.

Each accessor looks a key up in ``os.environ``; an absent key returns the
caller's fallback unchanged, a present key is parsed into the target type.

Failure policy:
- scalar accessors raise EnvParseError when a present value is malformed;
  a broken deployment should stop at startup rather than run on a default.
- get_list returns the fallback when any element is malformed, unless
  called with strict=True.

Usage:
    workers = get_int("WORKERS", 4)
    timeout = get_duration("REQUEST_TIMEOUT", timedelta(seconds=30))
    hosts = get_list("ALLOWED_HOSTS", Parsers.identity, ["localhost"])
"""

import logging
import os
from datetime import timedelta
from typing import List, Tuple, TypeVar

from typedenv.exceptions import EnvParseError
from typedenv.parsers import (
    Parser,
    parse_identity,
    parse_int,
    parse_int64,
    parse_float64,
    parse_bool,
    parse_duration,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


def lookup(key: str) -> Tuple[str, bool]:
    """
    Read a raw environment value.

    Returns:
        (value, exists). Absent keys give ("", False); a variable set to
        the empty string is present.
    """
    value = os.environ.get(key)
    if value is None:
        return "", False
    return value, True


def parse(key: str, parser: Parser[T], fallback: T) -> T:
    """
    Parse an environment variable with the given parser.

    Args:
        key: Environment variable name
        parser: Callable turning the raw string into a value
        fallback: Returned as-is when the variable is not set

    Raises:
        EnvParseError: The variable is set but the parser rejected it.
    """
    raw, exists = lookup(key)
    if not exists:
        return fallback

    try:
        return parser(raw)
    except ValueError as e:
        logger.error(f"Invalid value for {key}: {e}")
        raise EnvParseError(key, raw, str(e)) from e


def get_string(key: str, fallback: str) -> str:
    """Get string from environment."""
    return parse(key, parse_identity, fallback)


def get_int(key: str, fallback: int) -> int:
    """
    Get integer from environment.

    Unbounded, unlike Go's 64-bit strconv.Atoi: "9223372036854775808" is
    accepted here. Use get_int64 when values must fit in a signed 64-bit word.
    """
    return parse(key, parse_int, fallback)


def get_int64(key: str, fallback: int) -> int:
    """Get signed 64-bit integer from environment."""
    return parse(key, parse_int64, fallback)


def get_float64(key: str, fallback: float) -> float:
    """Get float from environment."""
    return parse(key, parse_float64, fallback)


def get_bool(key: str, fallback: bool) -> bool:
    """Get boolean (1/t/true, 0/f/false) from environment."""
    return parse(key, parse_bool, fallback)


def get_duration(key: str, fallback: timedelta) -> timedelta:
    """Get duration ("300ms", "2h45m") from environment."""
    return parse(key, parse_duration, fallback)


def split_list(raw: str) -> List[str]:
    """Split a comma-separated value and trim each segment. Empty segments are kept."""
    return [segment.strip() for segment in raw.split(',')]


def get_list(key: str, parser: Parser[T], fallback: List[T], strict: bool = False) -> List[T]:
    """
    Get list from comma-separated environment variable.

    Every segment is parsed with ``parser``; order and duplicates are kept.
    If any segment fails, the whole fallback is returned (never a partial
    list). With ``strict=True`` the first failing segment raises
    EnvParseError instead, like the scalar accessors.

    Args:
        key: Environment variable name
        parser: Parser applied to each trimmed segment
        fallback: Returned as-is when unset or when a segment is invalid
        strict: Raise on invalid segments instead of falling back
    """
    raw, exists = lookup(key)
    if not exists:
        return fallback

    values = []
    for segment in split_list(raw):
        try:
            values.append(parser(segment))
        except ValueError as e:
            if strict:
                logger.error(f"Invalid list element for {key}: {e}")
                raise EnvParseError(key, raw, str(e)) from e
            logger.warning(f"Invalid list element {segment!r} for {key}, using fallback: {e}")
            return fallback

    return values


__all__ = [
    'lookup',
    'parse',
    'get_string',
    'get_int',
    'get_int64',
    'get_float64',
    'get_bool',
    'get_duration',
    'get_list',
    'split_list',
]
