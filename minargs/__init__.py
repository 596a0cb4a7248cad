import sys
import logging
import dataclasses as dt
from pathlib import Path
from typing import Optional

from . import (
    const,
    values,
    vt100,
)
from .args import Arguments
from .errors import (
    ArgumentError,
    InvalidKeyError,
    MissingRequiredOptionError,
    ValueParseError,
)
from .keys import validKey

__all__ = [
    "Arguments",
    "ArgumentError",
    "InvalidKeyError",
    "MissingRequiredOptionError",
    "ValueParseError",
    "validKey",
    "values",
    "main",
]

_logger = logging.getLogger(__name__)


class logger:
    @staticmethod
    def setup(verbose: bool):
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


@dt.dataclass
class App:
    number: int
    optNumber: Optional[int] = None
    includes: list[Path] = dt.field(default_factory=list)
    input: Optional[str] = None


USAGE = f"{const.ARGV0} [--verbose] --number <int> [--opt-number <int>] [-I <path>...] [<input>] [-- <args>...]"


def usage():
    print(f"Usage: {USAGE}")


def printHelp():
    vt100.title(const.ARGV0)
    print()

    vt100.subtitle("Usage")
    print(vt100.indent(USAGE))
    print()

    vt100.subtitle("Description")
    print(vt100.indent(const.DESCRIPTION))
    print()

    vt100.subtitle("Options")
    print(vt100.indent("-h, --help Show this help message"))
    print(vt100.indent("-V, --version Show current version"))
    print(vt100.indent("--verbose Enable verbose logging"))
    print(vt100.indent("--number Required number"))
    print(vt100.indent("--opt-number Optional number"))
    print(vt100.indent("-I, --include Path to include, can be repeated"))
    print()


def parse(args: Arguments) -> App:
    return App(
        number=args.valueFromFn("--number", values.tryInt),
        optNumber=args.optValueFromFn("--opt-number", values.tryInt),
        includes=args.valuesFromStr(["-I", "--include"], Path),
        input=args.optFreeFromFn(values.identity),
    )


def main(argv: Optional[list[str]] = None) -> int:
    head, forwarded = Arguments.split(sys.argv[1:] if argv is None else argv)
    args = Arguments(head)

    try:
        logger.setup(args.contains("--verbose"))
        _logger.debug(f"Parsing {args!r}, forwarding {forwarded!r}")

        if args.contains(["-h", "--help"]):
            printHelp()
            return const.EXIT_OK

        if args.contains(["-V", "--version"]):
            print(f"{const.ARGV0} v{const.VERSION_STR}")
            return const.EXIT_OK

        app = parse(args)
        _logger.info(f"Parsed {app}")
        print(app)
        if forwarded:
            print(f"Forwarded: {forwarded}")

        rest = args.finish()
        if rest:
            vt100.warning(f"Unused arguments: {' '.join(rest)}")
            return const.EXIT_UNUSED_ARGS

        return const.EXIT_OK

    except ArgumentError as e:
        _logger.debug("Argument error", exc_info=e)
        vt100.error(str(e))
        usage()
        return const.EXIT_ERROR

    except KeyboardInterrupt:
        print()
        return const.EXIT_ERROR
