"""xconsole demo — call every console method once.

Useful for previewing a configuration (or an icon pack) in a real
terminal. Also shows no_prefix() and dev() output.
"""

import argparse

from xconsole.commands import console_from_args


def register(subparsers, parents):
    """Register the 'demo' subcommand."""
    p = subparsers.add_parser(
        "demo",
        parents=parents,
        help="Call every console method once",
        description=(
            "Call each console method with a sample message, then show\n"
            "no_prefix() and dev() output with the same configuration."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def run(args):
    """Execute the demo command."""
    engine = console_from_args(args)
    for name in engine.registry:
        engine.surface[name](f"console.{name}()")
    engine.no_prefix().log("console.no_prefix().log()")
    engine.dev().info("console.dev().info() (dev mode only)")
    return 0
