"""
Installing a console onto a shared object.

bind() copies every method of an ExtendedConsole, plus dev() and
no_prefix(), onto a target: attributes for ordinary objects, items for
mutable mappings. The engine never needs this; it is the adapter for
code that wants one ambient console.

The package keeps such an ambient object, ``xconsole.console``, and a
module-level engine behind it:

    await init_console(prefix={'log': '»'})     # or setup_console(...)
    from xconsole import console
    console.success("ready")
"""

import asyncio
from collections.abc import MutableMapping
from types import SimpleNamespace
from typing import Any, Optional

from xconsole.engine import ConsoleState, ExtendedConsole


# The ambient console; empty until init_console() binds an engine to it
console = SimpleNamespace()


def _assign(target: Any, name: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[name] = value
    else:
        setattr(target, name, value)


def _remove(target: Any, name: str) -> None:
    if isinstance(target, MutableMapping):
        target.pop(name, None)
    elif hasattr(target, name):
        delattr(target, name)


def bind(engine: ExtendedConsole, target: Any) -> Any:
    """Install the engine's methods, dev() and no_prefix() on target.

    Returns:
        target
    """
    names = list(engine.registry)
    for name in names:
        _assign(target, name, engine.surface[name])
    _assign(target, 'dev', engine.dev)
    _assign(target, 'no_prefix', engine.no_prefix)
    engine._bound_names = names + ['dev', 'no_prefix']
    engine._bound_target = target
    engine.state = ConsoleState.BOUND
    return target


def unbind(engine: ExtendedConsole, target: Any = None) -> Any:
    """Remove whatever bind() installed from target.

    With no target, unbinds from wherever the engine was last bound.
    """
    if target is None:
        target = engine._bound_target
    if target is None:
        return None
    for name in engine._bound_names:
        _remove(target, name)
    engine._bound_names = []
    engine._bound_target = None
    engine.state = ConsoleState.READY
    return target


# =============================================================================
# Module-level singleton
# =============================================================================

_engine: Optional[ExtendedConsole] = None


async def init_console(config: Any = None, *, sink: Any = None,
                       icon_provider: Any = None, target: Any = None,
                       **options: Any) -> ExtendedConsole:
    """Create, resolve and bind the module-level console.

    Call once at program startup. A second call replaces the first
    console: its methods are removed from the target it was bound to
    before the new ones are installed.

    Args:
        config: ConsoleConfig, mapping of config keys, or None
        sink: Sink object (default: ConsoleSink)
        icon_provider: Async icon pack provider
        target: Where to install (default: ``xconsole.console``)
        **options: Config keys, applied over ``config``

    Returns:
        The initialized ExtendedConsole
    """
    global _engine

    if target is None:
        target = console

    engine = ExtendedConsole(config, sink=sink, icon_provider=icon_provider,
                             **options)
    await engine.init()

    if _engine is not None and _engine._bound_names:
        unbind(_engine)
    bind(engine, target)
    _engine = engine
    return engine


def setup_console(config: Any = None, **kwargs: Any) -> ExtendedConsole:
    """Blocking init_console() for code without a running event loop."""
    return asyncio.run(init_console(config, **kwargs))


def get_console() -> ExtendedConsole:
    """Get the module-level console, creating an unresolved default."""
    global _engine
    if _engine is None:
        _engine = ExtendedConsole()
    return _engine
