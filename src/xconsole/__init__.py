"""
xconsole — prefixed, gated and custom console logging methods.

Adds named methods with prefixes (success, warn, check, skip, ...),
per-call prefix suppression, dev-only output and user-defined methods on
top of a simple four-channel sink.

Public API:
    ExtendedConsole  — the console engine
    ConsoleConfig    — configuration dataclass
    ConsoleSink      — default stdout/stderr sink
    DispatchSurface  — mapping of method name -> callable
    console          — ambient console, filled by init_console()
    init_console     — async singleton initialization
    setup_console    — blocking singleton initialization
    get_console      — access singleton
    bind / unbind    — install a console on any object
    DEFAULT_PREFIXES — built-in prefix symbols
    ICON_PACK_MAP    — method -> icon pack entry
"""

from xconsole._version import __version__, __app_name__
from xconsole.config import ConsoleConfig
from xconsole.sink import ConsoleSink
from xconsole.surface import DispatchSurface
from xconsole.registry import BUILTIN_METHODS, MethodRegistry, MethodSpec
from xconsole.prefixes import DEFAULT_PREFIXES
from xconsole.icons import ICON_PACK_MAP
from xconsole.engine import ConsoleState, ExtendedConsole
from xconsole.binder import (
    bind, unbind, console, init_console, setup_console, get_console,
)

__all__ = [
    '__version__', '__app_name__',
    'ExtendedConsole', 'ConsoleState', 'ConsoleConfig', 'ConsoleSink',
    'DispatchSurface', 'MethodRegistry', 'MethodSpec', 'BUILTIN_METHODS',
    'DEFAULT_PREFIXES', 'ICON_PACK_MAP',
    'bind', 'unbind', 'console', 'init_console', 'setup_console', 'get_console',
]
