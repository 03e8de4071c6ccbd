"""
ExtendedConsole: prefixed console methods on top of a four-channel sink.

The engine owns everything one console needs:

- a MethodRegistry (built-ins plus custom methods)
- the resolved prefix map, computed once by init()
- the dispatch path: prefix lookup, suppression check, sink call
- the gated surfaces returned by dev() and no_prefix()

Lifecycle:

    CONSTRUCTED --init()--> INITIALIZING --> READY --bind()--> BOUND

Methods may be called in any state. Before init() every prefix is empty.

Suppression state lives in a ContextVar owned by the engine. A
suppressed call sets it and resets it through the token on every exit
path, so nested calls restore the outer value, and threads and asyncio
tasks never see each other's suppression.

Usage::

    console = ExtendedConsole(prefix={'log': '[LOG]'})
    await console.init()
    console.log("hi")                  # "[LOG]  hi"
    console.no_prefix().log("plain")   # "plain"
    console.dev().info("debug only")   # silent unless dev mode
"""

import asyncio
import functools
from contextvars import ContextVar
from enum import Enum
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional

from xconsole.config import ConsoleConfig, default_dev_mode, unknown_keys
from xconsole.prefixes import resolve_prefixes
from xconsole.registry import BUILTIN_METHODS, MethodRegistry
from xconsole.sink import ConsoleSink
from xconsole.surface import DispatchSurface, null_surface


# Appended to a non-empty prefix before it is sent to the sink
PREFIX_SEPARATOR = ' '


class ConsoleState(Enum):
    CONSTRUCTED = 'constructed'
    INITIALIZING = 'initializing'
    READY = 'ready'
    BOUND = 'bound'


def normalize_parts(value: Any) -> List[Any]:
    """Turn a custom handler's return value into loggable parts.

    Lists and tuples are spread into separate parts; anything else
    (strings included) is a single part.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def adapt_custom(handler: Callable[..., Any]) -> Callable[..., List[Any]]:
    """Wrap a custom handler so it always returns a list of parts."""
    @functools.wraps(handler, updated=())
    def parts(*args: Any, **kwargs: Any) -> List[Any]:
        return normalize_parts(handler(*args, **kwargs))
    return parts


class ExtendedConsole:
    """A console with prefixed, gated and custom logging methods.

    Args:
        config: ConsoleConfig, a mapping of config keys, or None
        sink: Object with log/warn/error/info callables
            (default: ConsoleSink writing to stdout/stderr)
        icon_provider: Async callable returning an icon pack; replaces the
            default module import when use_icon_pack is on
        **options: Config keys, applied over ``config``
    """

    def __init__(
        self,
        config: Any = None,
        *,
        sink: Any = None,
        icon_provider: Optional[Callable[[], Awaitable[Any]]] = None,
        **options: Any,
    ):
        self.sink = sink if sink is not None else ConsoleSink()
        self.state = ConsoleState.CONSTRUCTED

        if isinstance(config, ConsoleConfig):
            raw = dict(vars(config))
        else:
            raw = dict(config or {})
        raw.update(options)
        for key in unknown_keys(raw):
            self.sink.warn(f"[xconsole] Unknown config key '{key}' ignored.")
        self.config = ConsoleConfig.from_dict(raw)

        self.use_prefix = bool(self.config.use_prefix)
        self.use_default_prefixes = bool(self.config.use_default_prefixes)
        self.default_prefix = self.config.default_prefix or ''
        if isinstance(self.config.dev_mode, bool):
            self.dev_mode = self.config.dev_mode
        else:
            self.dev_mode = default_dev_mode()

        self._icon_provider = icon_provider
        self._suppressed: ContextVar[bool] = ContextVar(
            f'xconsole_suppressed_{id(self)}', default=False)
        self.prefixes: Mapping[str, Any] = MappingProxyType({})

        self.registry = MethodRegistry(warn=self.sink.warn)
        self.registry.register_builtins()
        self.registry.register_custom(self.config.custom_methods)
        self._adapters: Dict[str, Callable[..., List[Any]]] = {
            spec.name: adapt_custom(spec.handler)
            for spec in self.registry.specs() if spec.is_custom
        }

        self.surface = DispatchSurface(
            {name: self._dispatcher(name) for name in self.registry},
            dev=self.dev,
            no_prefix=self.no_prefix,
        )
        self._bound_names: List[str] = []
        self._bound_target: Any = None

        for name in self.shadowed_names():
            self.sink.warn(
                f"[xconsole] Custom method '{name}' might overwrite an "
                f"existing method; call it through .surface or a bound target.")

    # -----------------------------------------------------------------
    # Initialization
    # -----------------------------------------------------------------
    async def init(self, target: Any = None) -> "ExtendedConsole":
        """Resolve prefixes (loading the icon pack if asked), then bind.

        Calling init() again re-resolves from the same configuration and
        re-binds; nothing is updated incrementally.

        Args:
            target: Object (or mutable mapping) to install the methods
                on. None leaves any existing binding in place.

        Returns:
            self, for chaining
        """
        self.state = ConsoleState.INITIALIZING
        self.prefixes = await resolve_prefixes(
            self.registry, self.config,
            icon_provider=self._icon_provider, warn=self.sink.warn,
        )
        if self._bound_names:
            self.state = ConsoleState.BOUND
        else:
            self.state = ConsoleState.READY
        if target is not None:
            # Lazy import to avoid circular dependency
            from xconsole.binder import bind
            bind(self, target)
        return self

    def init_sync(self, target: Any = None) -> "ExtendedConsole":
        """Blocking init() for code without a running event loop."""
        return asyncio.run(self.init(target))

    # -----------------------------------------------------------------
    # Dispatch
    # -----------------------------------------------------------------
    @property
    def suppressed(self) -> bool:
        """True while a no_prefix() call is in progress."""
        return self._suppressed.get()

    def prefix_part(self, name: str) -> str:
        """The leading part for a call to ``name``: "<prefix> " or "".

        Only non-empty string prefixes produce a part.
        """
        if self._suppressed.get():
            return ''
        value = self.prefixes.get(name, '')
        if isinstance(value, str) and value:
            return value + PREFIX_SEPARATOR
        return ''

    def dispatch(self, name: str, args: tuple = (),
                 kwargs: Optional[Dict[str, Any]] = None) -> Any:
        """Send one call to the sink and return the sink's result.

        Raises:
            KeyError: ``name`` is not a registered method
            TypeError: keyword arguments given to a built-in method
        """
        spec = self.registry.get(name)
        if spec is None:
            raise KeyError(f"console has no method '{name}'")

        prefix = self.prefix_part(name)
        if spec.is_custom:
            parts = self._adapters[name](*args, **(kwargs or {}))
        else:
            if kwargs:
                raise TypeError(f"{name}() takes no keyword arguments")
            parts = list(args)

        channel = getattr(self.sink, spec.channel)
        return channel(*([prefix] + parts if prefix else parts))

    def _dispatcher(self, name: str) -> Callable[..., Any]:
        def call(*args: Any, **kwargs: Any) -> Any:
            return self.dispatch(name, args, kwargs)
        call.__name__ = name
        return call

    def _suppressed_dispatcher(self, name: str) -> Callable[..., Any]:
        def call(*args: Any, **kwargs: Any) -> Any:
            token = self._suppressed.set(True)
            try:
                return self.dispatch(name, args, kwargs)
            finally:
                self._suppressed.reset(token)
        call.__name__ = name
        return call

    # -----------------------------------------------------------------
    # Gated surfaces
    # -----------------------------------------------------------------
    def _gate(self, surface: DispatchSurface) -> DispatchSurface:
        if not self.dev_mode:
            return null_surface(self.registry)
        return surface

    def dev(self) -> DispatchSurface:
        """The live surface in dev mode, an inert one otherwise.

        dev_mode is checked on every call, not cached.
        """
        return self._gate(self.surface)

    def shadowed_names(self) -> List[str]:
        """Custom method names hidden by an attribute of the engine.

        Such methods still dispatch through ``surface`` and bound targets,
        but ``engine.<name>`` resolves to the engine's own attribute.
        """
        return [
            spec.name for spec in self.registry.specs()
            if spec.is_custom and spec.name not in BUILTIN_METHODS
            and (hasattr(type(self), spec.name) or spec.name in self.__dict__)
        ]

    def no_prefix(self) -> DispatchSurface:
        """A fresh surface whose calls are made without prefixes."""
        surface = DispatchSurface(
            {name: self._suppressed_dispatcher(name) for name in self.registry},
            dev=lambda: self._gate(surface),
            no_prefix=lambda: surface,
        )
        return surface

    # -----------------------------------------------------------------
    # Built-in methods
    # -----------------------------------------------------------------
    def log(self, *args: Any) -> Any:
        return self.dispatch('log', args)

    def success(self, *args: Any) -> Any:
        return self.dispatch('success', args)

    def warn(self, *args: Any) -> Any:
        return self.dispatch('warn', args)

    def error(self, *args: Any) -> Any:
        return self.dispatch('error', args)

    def info(self, *args: Any) -> Any:
        return self.dispatch('info', args)

    def check(self, *args: Any) -> Any:
        return self.dispatch('check', args)

    def skip(self, *args: Any) -> Any:
        return self.dispatch('skip', args)

    def connect(self, *args: Any) -> Any:
        return self.dispatch('connect', args)

    def disconnect(self, *args: Any) -> Any:
        return self.dispatch('disconnect', args)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Custom methods; only reached when normal lookup fails
        surface = self.__dict__.get('surface')
        if surface is not None and name in surface:
            return surface[name]
        raise AttributeError(
            f"'{type(self).__name__}' object has no attribute '{name}'")

    def __repr__(self) -> str:
        return (f"<ExtendedConsole state={self.state.value} "
                f"methods={len(self.registry)} dev_mode={self.dev_mode}>")
