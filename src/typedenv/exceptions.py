"""
Exceptions raised by typedenv.
"""


class EnvError(Exception):
    """Base class for typedenv errors."""


class EnvParseError(EnvError, ValueError):
    """
    A present environment variable could not be parsed.

    Raised by the scalar accessors (and by ``get_list(..., strict=True)``)
    when a variable is set but its value does not match the target type.
    The parser's own ``ValueError`` is kept as ``__cause__``.
    """

    def __init__(self, key: str, value: str, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"cannot parse {key}={value!r}: {reason}")


__all__ = ['EnvError', 'EnvParseError']
