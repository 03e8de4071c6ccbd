"""Main CLI entry point for xconsole.

Subcommands share one parent parser holding the configuration flags,
so they may appear after the subcommand:

  xconsole list --no-prefix
  xconsole demo --prefix log=">>" --icon-pack

Subcommands self-register via register(subparsers, parents) convention.
"""

import argparse
import sys

from xconsole._version import VERSION


# ---------------------------------------------------------------------------
# Shared parent parser (inherited by all subcommands via parents=[])
# ---------------------------------------------------------------------------
def _build_common_parser():
    """Build the shared argument parser for configuration flags.

    Every flag defaults to None (or False) so that unset flags leave the
    project config file in charge.
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", metavar="PATH", default=None,
                        help="Config file (default: nearest .xconsole.json)")
    common.add_argument("--no-prefix", action="store_true", default=False,
                        help="Disable all prefixes")
    common.add_argument("--no-defaults", action="store_true", default=False,
                        help="Do not use the built-in prefix symbols")
    common.add_argument("--default-prefix", metavar="TEXT", default=None,
                        help="Prefix for methods without one")
    common.add_argument("--prefix", metavar="METHOD=TEXT", action="append",
                        default=None,
                        help="Override one method's prefix (repeatable)")
    common.add_argument("--icon-pack", action="store_true", default=False,
                        help="Load prefixes from the icon pack module")
    dev = common.add_mutually_exclusive_group()
    dev.add_argument("--dev", dest="dev", action="store_true", default=None,
                     help="Force dev mode on")
    dev.add_argument("--no-dev", dest="dev", action="store_false",
                     default=None, help="Force dev mode off")
    return common


# ---------------------------------------------------------------------------
# Subcommand discovery and registration
# ---------------------------------------------------------------------------
def _discover_commands():
    """Import and return all command modules."""
    from xconsole.commands import demo, list_cmd
    return [list_cmd, demo]


def _build_parser(commands, common_parser):
    """Build the main argparse parser with subcommand dispatch."""
    parser = argparse.ArgumentParser(
        prog="xconsole",
        description="xconsole — preview prefixed console methods",
        epilog="Run 'xconsole <command> --help' for details on a command.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"xconsole {VERSION}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    for cmd_module in commands:
        cmd_module.register(subparsers, parents=[common_parser])

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main(argv=None):
    """Main entry point for the xconsole CLI.

    Args:
        argv: Command-line arguments. None means sys.argv[1:].

    Returns:
        Exit code (0 = success).
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = _build_parser(_discover_commands(), _build_common_parser())

    if not argv:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args) or 0
    except ValueError as e:
        print(f"xconsole: error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
