"""Command-line option parsing for gfxlaunch.

Flags use a single dash in both their short and long form (``-d``/``-dir``).
Every usage error, including ``-help``, exits with status 1 after writing the
full usage text to stderr.
"""

import argparse
import sys
from typing import NoReturn

from gfxlaunch import __version__
from gfxlaunch.models import PARAVIEW_VERSIONS

DEFAULT_PARAVIEW_VERSION = "510"
USAGE_EXIT_CODE = 1
# Flags whose next token is always their value, even when it starts with "-".
VALUE_FLAGS = ("-d", "-dir")


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1.

    Only exact flag spellings are accepted: clustered short flags (``-ux``),
    attached values (``-d/tmp``, ``-dir=/tmp``) and negative numbers are
    rejected as unrecognized.
    """

    def parse_args(self, args=None, namespace=None):
        tokens = list(sys.argv[1:] if args is None else args)
        takes_value = False
        for token in tokens:
            if takes_value:
                takes_value = False
                continue
            if token.startswith("-") and token not in self._option_string_actions:
                self.error(f"unrecognized arguments: {token}")
            takes_value = token in VALUE_FLAGS
        return super().parse_args(tokens, namespace)

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"\n{self.prog}: error: {message}\n")


class _HelpAction(argparse.Action):
    """Print help to stderr and exit 1, wherever the flag appears."""

    def __init__(
        self,
        option_strings,
        dest=argparse.SUPPRESS,
        default=argparse.SUPPRESS,
        help=None,
    ):
        super().__init__(option_strings, dest=dest, default=default, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        parser.print_help(sys.stderr)
        parser.exit(USAGE_EXIT_CODE)


def paraview_version(value: str) -> str:
    """Validate a ParaView version token."""
    if value not in PARAVIEW_VERSIONS:
        raise argparse.ArgumentTypeError(
            f"invalid paraview version '{value}' (choose from {', '.join(PARAVIEW_VERSIONS)})"
        )
    return value


def build_parser() -> UsageParser:
    """Build the gfxlaunch option parser."""
    parser = UsageParser(
        prog="gfxlaunch",
        description="Run the graphical-apps container with the host display forwarded",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-d",
        "-dir",
        dest="dir",
        metavar="PATH",
        help="Host directory mounted as the container home (default: current directory)",
    )
    parser.add_argument("-h", "-help", action=_HelpAction, help="Show this message and exit")
    parser.add_argument(
        "-p",
        "-paraview",
        dest="paraview",
        nargs="?",
        const=DEFAULT_PARAVIEW_VERSION,
        type=paraview_version,
        metavar="VERSION",
        help=(
            f"Use the ParaView image ({' or '.join(PARAVIEW_VERSIONS)}, "
            f"default {DEFAULT_PARAVIEW_VERSION})"
        ),
    )
    parser.add_argument(
        "-u",
        "-upgrade",
        dest="upgrade",
        action="store_true",
        help="Pull the latest image before starting",
    )
    parser.add_argument(
        "-x",
        "-xhost",
        dest="xhost",
        action="store_true",
        help="Authenticate with a private X authority file instead of xhost",
    )
    parser.add_argument(
        "-n",
        "-dry-run",
        dest="dry_run",
        action="store_true",
        help="Print the docker command instead of running it",
    )
    parser.add_argument(
        "-v",
        "-verbose",
        dest="verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "-V",
        "-version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse argv, exiting with status 1 on any usage error."""
    return build_parser().parse_args(argv)
