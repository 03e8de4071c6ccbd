"""xconsole subcommands.

Each module exports:
  register(subparsers, parents) — add itself to the subparser
  run(args) — execute the command, return an exit code

Shared here: building a console from the parsed global flags.
"""

from xconsole.config import resolve_config
from xconsole.engine import ExtendedConsole


def parse_prefix_overrides(specs):
    """Parse ``METHOD=TEXT`` strings into a prefix dict.

    TEXT may be empty (``skip=``) to blank one method's prefix.

    Raises:
        ValueError: a spec has no '=' or an empty method name
    """
    overrides = {}
    for spec in specs or []:
        name, sep, text = spec.partition("=")
        if not sep or not name:
            raise ValueError(f"expected METHOD=TEXT, got '{spec}'")
        overrides[name] = text
    return overrides


def console_from_args(args, sink=None):
    """Build and initialize an ExtendedConsole from CLI flags.

    Flags win over the project config file; unset flags leave the file's
    value (or the default) alone.
    """
    explicit = {
        "use_prefix": False if args.no_prefix else None,
        "use_default_prefixes": False if args.no_defaults else None,
        "default_prefix": args.default_prefix,
        "prefix": parse_prefix_overrides(args.prefix) or None,
        "use_icon_pack": True if args.icon_pack else None,
        "dev_mode": args.dev,
    }
    raw = resolve_config(explicit, path=args.config)
    return ExtendedConsole(raw, sink=sink).init_sync()
