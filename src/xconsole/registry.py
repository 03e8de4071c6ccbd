"""
Method registry: which console methods exist and how each one dispatches.

Every method is a MethodSpec, a small tagged variant:

    built-in  ->  MethodSpec(name, channel='warn')          sink channel
    custom    ->  MethodSpec(name, channel='log', handler=fn)

Custom methods always write to the plain 'log' channel; their handler
only shapes the parts. Built-ins come from the static BUILTIN_METHODS
table below, never from introspection.

Registration order is preserved so listings are stable.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Set


# Built-in method -> sink channel
BUILTIN_METHODS = {
    'log':        'log',
    'success':    'log',
    'warn':       'warn',
    'error':      'error',
    'info':       'info',
    'check':      'log',
    'skip':       'log',
    'connect':    'log',
    'disconnect': 'log',
}

# Names taken by the gated surfaces; custom methods may not use them
RESERVED_NAMES = {'dev', 'no_prefix'}

# Channel used by every custom method
CUSTOM_CHANNEL = 'log'


@dataclass(frozen=True)
class MethodSpec:
    """One dispatchable console method.

    Attributes:
        name: Method identifier (e.g., 'success', 'audit')
        channel: Sink channel the parts are written to
        handler: User function shaping the parts (custom methods only)
    """
    name: str
    channel: str
    handler: Optional[Callable[..., Any]] = None

    @property
    def is_custom(self) -> bool:
        return self.handler is not None

    @property
    def kind(self) -> str:
        return 'custom' if self.is_custom else 'builtin'


class MethodRegistry:
    """Registry of built-in and custom console methods.

    Problems found while registering (collisions, non-callable handlers,
    reserved names) are reported through ``warn`` and never raised.

    Usage::

        reg = MethodRegistry(warn=sink.warn)
        reg.register_builtins()
        reg.register_custom({'audit': lambda user, action: f"{user}: {action}"})
        reg.get('audit').channel    # 'log'
    """

    def __init__(self, warn: Callable[..., Any] = None):
        self._methods: Dict[str, MethodSpec] = {}
        self._warn = warn

    def _warning(self, message: str) -> None:
        if self._warn is not None:
            self._warn(message)

    def register_builtins(self) -> Set[str]:
        """Register the built-in methods. Returns their names."""
        for name, channel in BUILTIN_METHODS.items():
            self._methods[name] = MethodSpec(name=name, channel=channel)
        return set(BUILTIN_METHODS)

    def register_custom(self, methods: Mapping[str, Any]) -> Set[str]:
        """Register custom methods from a name -> handler mapping.

        Later registrations replace earlier ones (including built-ins),
        with a warning. Non-callable handlers and reserved names are
        skipped with a warning.

        Returns:
            The names actually registered.
        """
        registered = set()
        for name, handler in (methods or {}).items():
            if name in RESERVED_NAMES:
                self._warning(
                    f"[xconsole] Custom method '{name}' uses a reserved name "
                    f"and will be ignored.")
                continue
            if not callable(handler):
                self._warning(
                    f"[xconsole] Custom method '{name}' is not a function "
                    f"and will be ignored.")
                continue
            if name in self._methods:
                self._warning(
                    f"[xconsole] Custom method '{name}' overwrites an "
                    f"existing method.")
            self._methods[name] = MethodSpec(
                name=name, channel=CUSTOM_CHANNEL, handler=handler)
            registered.add(name)
        return registered

    def all(self) -> Set[str]:
        """All registered names."""
        return set(self._methods)

    def get(self, name: str) -> Optional[MethodSpec]:
        """Look up a method by name. Returns None if not registered."""
        return self._methods.get(name)

    def specs(self) -> list:
        """Registered MethodSpecs in registration order."""
        return list(self._methods.values())

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)
