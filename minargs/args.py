import sys
from typing import Callable, Optional

from .errors import MissingRequiredOptionError, ValueParseError
from .keys import Key, intoKeys, primary
from .utils import T, Converter
from .values import tryCast


class Arguments:
    """
    A list of raw command-line tokens that extraction calls consume.

    Flags and options are searched through the whole remainder, not only the
    front, so they can appear in any order. Whatever is never consumed is
    handed back by `finish()`.

    If you think this doesn't support some feature, it's probably intentional:
    there's no help generation, no combined flags (`-abc`) and no arity checks.
    """

    _args: list[str]

    def __init__(self, args: list[str]):
        """
        Initializes a new `Arguments` object.

        Args:
            args: The tokens to parse, without the program name. Split off a
                `--` separator beforehand to forward arguments to another program.
        """
        self._args = list(args)

    @staticmethod
    def fromEnv() -> "Arguments":
        """Creates a parser from the arguments of the current process."""
        return Arguments(sys.argv[1:])

    @staticmethod
    def split(argv: list[str], sep: str = "--") -> tuple[list[str], list[str]]:
        """
        Splits raw arguments at the first separator.

        Returns:
            The tokens before the separator and the tokens after it. The
            separator itself is dropped.
        """
        if sep not in argv:
            return list(argv), []
        idx = argv.index(sep)
        return argv[:idx], argv[idx + 1 :]

    def __len__(self) -> int:
        return len(self._args)

    def __repr__(self) -> str:
        return f"Arguments({self._args!r})"

    # --- Subcommand --------------------------------------------------------- #

    def subcommand(self) -> Optional[str]:
        """
        Parses the name of the subcommand, that is, the first positional argument.

        Returns:
            The subcommand, or None when there are no arguments left or the
            first one starts with `-`.
        """
        if len(self._args) == 0:
            return None

        if self._args[0].startswith("-"):
            return None

        return self._args.pop(0)

    # --- Flags -------------------------------------------------------------- #

    def contains(self, keys: Key) -> bool:
        """
        Checks that the arguments contain a flag.

        Calling this consumes the flag: if it's present `n` times, the first
        `n` calls return True and the following ones return False.

        Raises:
            InvalidKeyError: If the key is malformed.
        """
        idx = self._indexOf(intoKeys(keys))
        if idx is None:
            return False

        del self._args[idx]
        return True

    # --- Options ------------------------------------------------------------ #

    def optValueFromFn(self, keys: Key, fn: Converter[T]) -> Optional[T]:
        """
        Parses an optional key-value pair using a conversion function.

        The token right after the key is taken as the value, even if it starts
        with `-`, so `--key --value` is a valid pair. Both tokens are consumed
        only if `fn` returns something other than None.

        Returns:
            The converted value, or None if the key is missing, has no value,
            or `fn` declined the value.
        """
        idx = self._indexOf(intoKeys(keys))
        if idx is None or idx + 1 >= len(self._args):
            return None

        value = fn(self._args[idx + 1])
        if value is None:
            return None

        del self._args[idx : idx + 2]
        return value

    def valueFromFn(self, keys: Key, fn: Converter[T]) -> T:
        """
        Parses a required key-value pair using a conversion function.

        Raises:
            MissingRequiredOptionError: If `optValueFromFn` returned None.
        """
        pair = intoKeys(keys)
        value = self.optValueFromFn(pair, fn)
        if value is None:
            raise MissingRequiredOptionError(primary(pair))
        return value

    def valuesFromFn(self, keys: Key, fn: Converter[T]) -> list[T]:
        """
        Parses every occurrence of a key-value pair.

        Handles `--file a --file b` and `--file a --flag --file b`, but not
        `--file a b`. An empty list is not an error. When both spellings of a
        key are mixed, long-form matches come back before short-form ones.
        """
        pair = intoKeys(keys)
        values: list[T] = []
        while (value := self.optValueFromFn(pair, fn)) is not None:
            values.append(value)
        return values

    # --- Free arguments ----------------------------------------------------- #

    def freeFromFn(self, fn: Converter[T]) -> Optional[T]:
        """
        Parses the first remaining argument using a conversion function.

        Same as `optFreeFromFn`: it's up to the caller to check for None.
        """
        return self.optFreeFromFn(fn)

    def optFreeFromFn(self, fn: Converter[T]) -> Optional[T]:
        """
        Parses the first remaining argument using a conversion function.

        No key matching is done, so it's up to the caller to make sure the
        argument isn't an unused flag. `-`, `--`, `-1` or `-0.5` can all mean
        different things depending on the program.

        Returns:
            The converted value, or None if there are no arguments left.

        Raises:
            ValueParseError: If `fn` returned None. The token stays consumed.
        """
        if len(self._args) == 0:
            return None

        arg = self._args.pop(0)
        value = fn(arg)
        if value is None:
            raise ValueParseError(arg)
        return value

    # --- Typed shortcuts ---------------------------------------------------- #

    def optValueFromStr(self, keys: Key, typ: Callable[[str], T]) -> Optional[T]:
        """Same as `optValueFromFn`, with a type that raises `ValueError` on bad input."""
        return self.optValueFromFn(keys, tryCast(typ))

    def valueFromStr(self, keys: Key, typ: Callable[[str], T]) -> T:
        return self.valueFromFn(keys, tryCast(typ))

    def valuesFromStr(self, keys: Key, typ: Callable[[str], T]) -> list[T]:
        return self.valuesFromFn(keys, tryCast(typ))

    def freeFromStr(self, typ: Callable[[str], T]) -> Optional[T]:
        return self.freeFromFn(tryCast(typ))

    def optFreeFromStr(self, typ: Callable[[str], T]) -> Optional[T]:
        return self.optFreeFromFn(tryCast(typ))

    # --- Remainder ---------------------------------------------------------- #

    def finish(self) -> list[str]:
        """
        Returns the arguments that were never consumed.

        It's up to the caller what to do with them: report an error about
        unused arguments, or pass them on for further processing.
        """
        return list(self._args)

    def _indexOf(self, keys: tuple[str, str]) -> Optional[int]:
        # Short form first, then long form; the long form wins if both are present.
        res: Optional[int] = None
        for key in keys:
            if key and key in self._args:
                res = self._args.index(key)
        return res
