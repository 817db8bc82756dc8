"""
typedenv - typed access to process environment variables.

Read a variable, fall back to a default when it is unset, and parse it into
an int, float, bool, duration or list when it is present.
"""

from typedenv.env import (
    lookup,
    parse,
    get_string,
    get_int,
    get_int64,
    get_float64,
    get_bool,
    get_duration,
    get_list,
    split_list,
)
from typedenv.exceptions import EnvError, EnvParseError
from typedenv.parsers import (
    Parser,
    Parsers,
    parse_identity,
    parse_int,
    parse_int64,
    parse_float64,
    parse_bool,
    parse_duration,
    format_duration,
)

__version__ = "0.1.0"

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
    'EnvError',
    'EnvParseError',
    'Parser',
    'Parsers',
    'parse_identity',
    'parse_int',
    'parse_int64',
    'parse_float64',
    'parse_bool',
    'parse_duration',
    'format_duration',
]
