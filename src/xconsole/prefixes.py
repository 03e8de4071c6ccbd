"""
Prefix resolution: one final prefix string per console method.

Resolution order per method (first match wins):

    1. use_prefix is False        -> ""  (icon pack is not even loaded)
    2. config.prefix[method]      -> used verbatim, "" included
    3. icon pack entry            -> ICON_PACK_MAP[method] in the pack
    4. DEFAULT_PREFIXES[method]   -> only when use_default_prefixes
    5. config.default_prefix      -> "" unless configured

The result is a read-only mapping computed once per configuration.
"""

import inspect
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Iterable, Mapping, Optional

from xconsole.config import ConsoleConfig
from xconsole.icons import icon_for, load_icon_pack


# Built-in prefixes (ANSI colored where it helps)
DEFAULT_PREFIXES = {
    'log':     '>',
    'success': '\x1b[32m✔\x1b[0m',   # green check mark
    'warn':    '\x1b[33m⚠\x1b[0m',   # yellow warning sign
    'error':   '\x1b[31m✖\x1b[0m',   # red cross
    'info':    '\x1b[34mℹ\x1b[0m',   # blue info
    'check':   '\x1b[34m✔\x1b[0m',   # blue check mark
    'skip':    '\x1b[36m>>\x1b[0m',  # cyan arrows
}


def build_prefix_map(names: Iterable[str], config: ConsoleConfig,
                     icon_pack: Any = None) -> Mapping[str, Any]:
    """Compute the prefix for every name. Synchronous core of resolution.

    Args:
        names: Registered method names
        config: Raw console configuration
        icon_pack: A loaded icon pack, or None

    Returns:
        Read-only mapping of name -> prefix
    """
    if not config.use_prefix:
        return MappingProxyType({name: '' for name in names})

    overrides = config.prefix if isinstance(config.prefix, Mapping) else {}
    fallback = config.default_prefix or ''

    resolved = {}
    for name in names:
        if name in overrides:
            resolved[name] = overrides[name]
            continue
        icon = icon_for(icon_pack, name)
        if icon is not None:
            resolved[name] = icon
        elif config.use_default_prefixes and DEFAULT_PREFIXES.get(name):
            resolved[name] = DEFAULT_PREFIXES[name]
        else:
            resolved[name] = fallback
    return MappingProxyType(resolved)


async def resolve_prefixes(
    names: Iterable[str],
    config: ConsoleConfig,
    icon_provider: Optional[Callable[[], Awaitable[Any]]] = None,
    warn: Callable[..., Any] = None,
) -> Mapping[str, Any]:
    """Load the icon pack if requested, then build the prefix map.

    A failing icon provider is reported through ``warn`` and resolution
    continues as if no icon pack had been requested.

    Args:
        names: Registered method names
        config: Raw console configuration
        icon_provider: Async callable returning an icon pack. Defaults to
            importing ``config.icon_pack_module``.
        warn: Callable receiving warning parts

    Returns:
        Read-only mapping of name -> prefix
    """
    names = list(names)
    if not config.use_prefix:
        return build_prefix_map(names, config)

    icon_pack = None
    if config.use_icon_pack:
        if icon_provider is None:
            label = config.icon_pack_module
        else:
            label = getattr(icon_provider, '__name__', 'icon pack')
        try:
            if icon_provider is None:
                icon_pack = await load_icon_pack(config.icon_pack_module)
            else:
                icon_pack = icon_provider()
                if inspect.isawaitable(icon_pack):
                    icon_pack = await icon_pack
        except Exception as e:
            icon_pack = None
            if warn is not None:
                warn(f"[xconsole] Could not load icon pack '{label}'. "
                     f"Skipping icon pack.", str(e))

    return build_prefix_map(names, config, icon_pack)
