"""Command-line parsing and usage messages."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import NoReturn, Sequence

from icmpping.utils import PROG_NAME

_USAGE_LINES = (
    f"Usage: {PROG_NAME} destination [-v] [-?]",
    "Options:",
    "  -v        : verbose output",
    "  -?        : display this help message",
)


@dataclass
class Env:
    """Run settings: the destination and whether to be verbose."""

    target: str
    verbose: bool = False


def print_usage() -> NoReturn:
    """Print the usage text and exit successfully."""
    usage = "\n".join(_USAGE_LINES) + "\n"
    sys.stdout.write(usage)
    sys.stdout.flush()
    sys.exit(0)


def print_invalid_option(opt: str) -> NoReturn:
    """Report an unknown option, then print the usage text and exit."""
    print(f"{PROG_NAME}: invalid option '{opt}'", file=sys.stderr)
    print_usage()


def parse_args(argv: Sequence[str]) -> Env:
    """Parse arguments (without the program name): the destination first, then options."""
    if not argv:
        print(f"{PROG_NAME}: missing destination", file=sys.stderr)
        print_usage()

    env = Env(target=argv[0])
    for arg in argv[1:]:
        if arg == "-v":
            env.verbose = True
        elif arg == "-?":
            print_usage()
        else:
            print_invalid_option(arg)
    return env