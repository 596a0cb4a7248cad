from typing import Callable, Optional

from .utils import T, Converter

# Conversion callbacks for the `*FromFn` family. Each one returns `None` when
# the token can't be parsed, which tells the parser not to consume it.


def identity(value: str) -> str:
    return value


def tryInt(value: str) -> Optional[int]:
    """Tries to parse an integer, returning None if unsuccessful."""
    try:
        return int(value)
    except ValueError:
        return None


def tryFloat(value: str) -> Optional[float]:
    """Tries to parse a float, returning None if unsuccessful."""
    try:
        return float(value)
    except ValueError:
        return None


def tryBool(value: str) -> Optional[bool]:
    """
    Parses the usual spellings of a boolean.

    Accepts `true`, `y`, `yes`, `1` and `false`, `n`, `no`, `0` in lower,
    capitalized or upper case.
    """
    if value.lower() in ("true", "y", "yes", "1"):
        return True
    elif value.lower() in ("false", "n", "no", "0"):
        return False
    return None


def tryCast(typ: Callable[[str], T]) -> Converter[T]:
    """
    Wraps a type or constructor that raises on bad input into a conversion
    callback that returns None instead.
    """

    def wrap(value: str) -> Optional[T]:
        try:
            return typ(value)
        except (ValueError, TypeError):
            return None

    return wrap
