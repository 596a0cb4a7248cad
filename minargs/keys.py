from typing import Sequence, Union

from .errors import InvalidKeyError

Key = Union[str, tuple[str, str], Sequence[str]]


def validKey(key: str) -> bool:
    """
    Checks a key against the key grammar.

    A long key starts with `--` and has no further constraint. A short key
    starts with a single `-` and is either one character long (`-v`) or a
    single repeated character (`-vv`).
    """
    if not key.startswith("-"):
        return False

    if not key.startswith("--"):
        chars = key[1:]
        return len(key) == 2 or all(c == chars[0] for c in chars)

    return True


def intoKeys(keys: Key) -> tuple[str, str]:
    """
    Normalizes a key specifier into a `(short, long)` pair and validates it.

    Args:
        keys: Either a single key, used for both slots, or a pair where an
            empty string marks a missing form.

    Raises:
        InvalidKeyError: If a non-empty form is malformed or both forms are empty.
    """
    if isinstance(keys, str):
        res = (keys, keys)
    elif len(keys) == 2 and all(isinstance(k, str) for k in keys):
        res = (keys[0], keys[1])
    else:
        raise TypeError(f"Expected a key or a pair of keys, got {keys!r}")

    if not res[0] and not res[1]:
        raise InvalidKeyError("")

    for key in res:
        if key and not validKey(key):
            raise InvalidKeyError(key)

    return res


def primary(keys: tuple[str, str]) -> str:
    """Returns the form used to name a key in error messages."""
    return keys[0] or keys[1]
