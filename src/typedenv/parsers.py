"""
Parser catalog for environment values.

A parser is a plain callable that takes the raw string and returns a typed
value, raising ``ValueError`` when the text is malformed:

    parse_int("42")        -> 42
    parse_bool("T")        -> True
    parse_duration("2h45m") -> timedelta(seconds=9900)
"""

import math
import re
from datetime import timedelta
from typing import Callable, TypeVar


T = TypeVar('T')

# Parser[T]: str -> T, raises ValueError on malformed input
Parser = Callable[[str], T]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_INT_RE = re.compile(r'[+-]?[0-9]+')
_FLOAT_RE = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?', re.ASCII)

# Only inf/infinity may carry a sign
_FLOAT_SPECIALS = {
    'nan': math.nan,
    'inf': math.inf,
    '+inf': math.inf,
    '-inf': -math.inf,
    'infinity': math.inf,
    '+infinity': math.inf,
    '-infinity': -math.inf,
}

_TRUE_VALUES = ('1', 't', 'true')
_FALSE_VALUES = ('0', 'f', 'false')

# Nanoseconds per unit
_DURATION_UNITS = {
    'ns': 1,
    'us': 1_000,
    'µs': 1_000,  # micro sign
    'μs': 1_000,  # greek mu
    'ms': 1_000_000,
    's': 1_000_000_000,
    'm': 60 * 1_000_000_000,
    'h': 3600 * 1_000_000_000,
}

_DURATION_PART_RE = re.compile(r'([0-9]*)(?:\.([0-9]*))?([^0-9.]+)')


def parse_identity(value: str) -> str:
    """Return the value unchanged. Never fails."""
    return value


def parse_int(value: str) -> int:
    """Parse a base-10 integer with an optional sign."""
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer syntax: {value!r}")
    return int(value)


def parse_int64(value: str) -> int:
    """Parse a base-10 integer that must fit in a signed 64-bit word."""
    result = parse_int(value)
    if not INT64_MIN <= result <= INT64_MAX:
        raise ValueError(f"value out of range for int64: {value!r}")
    return result


def parse_float64(value: str) -> float:
    """
    Parse a floating point number.

    Accepts ASCII decimal and exponent notation plus ``inf``/``infinity``
    (optionally signed) and ``nan`` in any case. Whitespace, underscores and
    non-ASCII digits are rejected, as are finite literals too large for a
    double.
    """
    special = _FLOAT_SPECIALS.get(value.lower())
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(value):
        raise ValueError(f"invalid float syntax: {value!r}")

    result = float(value)
    if math.isinf(result):
        raise ValueError(f"value out of range for float64: {value!r}")
    return result


def parse_bool(value: str) -> bool:
    """Parse 1/t/true or 0/f/false, case-insensitive."""
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean syntax: {value!r}")


def parse_duration(value: str) -> timedelta:
    """
    Parse a unit-suffixed duration such as "300ms", "-1.5h" or "2h45m".

    A duration is an optional sign followed by one or more decimal numbers,
    each with an optional fraction and a required unit (ns, us, µs, ms, s,
    m, h). The bare string "0" is also accepted. The result is rounded to
    the nearest microsecond, the resolution of ``timedelta``.

    Raises:
        ValueError: On malformed input or a magnitude above 2**63-1 ns.
    """
    text = value
    negative = False
    if text[:1] in ('-', '+'):
        negative = text[0] == '-'
        text = text[1:]

    if text == '0':
        return timedelta(0)
    if not text:
        raise ValueError(f"invalid duration: {value!r}")

    limit = INT64_MAX + 1 if negative else INT64_MAX
    total = 0
    pos = 0
    while pos < len(text):
        match = _DURATION_PART_RE.match(text, pos)
        if not match or not (match.group(1) or match.group(2)):
            raise ValueError(f"invalid duration: {value!r}")

        whole, frac, unit = match.groups()
        scale = _DURATION_UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {value!r}")

        total += int(whole or '0') * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        if total > limit:
            raise ValueError(f"duration out of range: {value!r}")
        pos = match.end()

    micros, remainder = divmod(total, 1000)
    if remainder >= 500:
        micros += 1
    return timedelta(microseconds=-micros if negative else micros)


def _format_fraction(amount: int, unit: int, digits: int) -> str:
    whole, frac = divmod(amount, unit)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:0{digits}d}".rstrip('0')


def format_duration(value: timedelta) -> str:
    """
    Format a timedelta in the grammar accepted by ``parse_duration``.

    Examples:
        timedelta(hours=2, minutes=45)    -> "2h45m0s"
        timedelta(milliseconds=300)       -> "300ms"
        timedelta(0)                      -> "0s"
    """
    micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return '0s'

    sign = '-' if micros < 0 else ''
    micros = abs(micros)

    if micros < 1000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_format_fraction(micros, 1000, 3)}ms"

    hours, rest = divmod(micros, 3600 * 1_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000)

    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_format_fraction(rest, 1_000_000, 6)}s"


class Parsers:
    """
    Namespace over the built-in parsers.

    Usage:
        ports = get_list("PORTS", Parsers.int, [8080])
        timeout = parse("TIMEOUT", Parsers.duration, timedelta(seconds=5))
    """

    identity = staticmethod(parse_identity)
    int = staticmethod(parse_int)
    int64 = staticmethod(parse_int64)
    float64 = staticmethod(parse_float64)
    bool = staticmethod(parse_bool)
    duration = staticmethod(parse_duration)


__all__ = [
    'Parser',
    'Parsers',
    'INT64_MIN',
    'INT64_MAX',
    'parse_identity',
    'parse_int',
    'parse_int64',
    'parse_float64',
    'parse_bool',
    'parse_duration',
    'format_duration',
]
