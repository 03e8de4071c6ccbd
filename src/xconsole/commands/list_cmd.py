"""xconsole list — show every console method and its resolved prefix."""

import argparse

from xconsole.commands import console_from_args


def register(subparsers, parents):
    """Register the 'list' subcommand."""
    p = subparsers.add_parser(
        "list",
        parents=parents,
        help="List console methods with their channel and prefix",
        description=(
            "Resolve the configuration (flags, then .xconsole.json) and\n"
            "print every console method with its sink channel and prefix."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.set_defaults(func=run)


def format_method_list(engine):
    """Format the engine's registry for display.

    Returns:
        Formatted string, one method per line.
    """
    specs = engine.registry.specs()
    lines = ["Console methods:"]
    width = max(len(spec.name) for spec in specs)
    for spec in specs:
        prefix = engine.prefixes.get(spec.name, "")
        shown = prefix if isinstance(prefix, str) and prefix else "(none)"
        lines.append(f"  {spec.name:<{width}}  {spec.kind:<7}  "
                     f"{spec.channel:<5}  {shown}")
    lines.append("")
    lines.append(f"dev mode: {'on' if engine.dev_mode else 'off'}")
    return "\n".join(lines)


def run(args):
    """Execute the list command."""
    engine = console_from_args(args)
    print(format_method_list(engine))
    return 0
