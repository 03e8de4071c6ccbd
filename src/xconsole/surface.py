"""
DispatchSurface: the callable face of a console.

A surface is a read-only mapping of method name -> callable that also
exposes each method as an attribute, so both of these work::

    surface.success("done")
    surface["success"]("done")

Every surface also has dev() and no_prefix(), which return further
surfaces; this is what makes ``console.dev().no_prefix().log(...)``
chain. A surface built without those factories returns itself, which is
exactly what the inert null surface needs.

Method names that clash with Mapping methods (get, keys, items, values)
stay reachable through item access only.
"""

from collections.abc import Mapping
from typing import Any, Callable, Dict, Iterable, Iterator, Optional


class DispatchSurface(Mapping):
    """Read-only mapping of console method names to callables."""

    def __init__(
        self,
        methods: Dict[str, Callable[..., Any]],
        dev: Optional[Callable[[], "DispatchSurface"]] = None,
        no_prefix: Optional[Callable[[], "DispatchSurface"]] = None,
    ):
        self._methods = dict(methods)
        self._dev = dev
        self._no_prefix = no_prefix

    def __getitem__(self, name: str) -> Callable[..., Any]:
        return self._methods[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only reached when normal attribute lookup fails
        methods = self.__dict__.get('_methods')
        if methods is not None and name in methods:
            return methods[name]
        raise AttributeError(f"console has no method '{name}'")

    def dev(self) -> "DispatchSurface":
        """This surface gated on dev mode."""
        return self._dev() if self._dev is not None else self

    def no_prefix(self) -> "DispatchSurface":
        """This surface with prefixes suppressed."""
        return self._no_prefix() if self._no_prefix is not None else self

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {sorted(self._methods)}>"


def _noop(*args: Any, **kwargs: Any) -> None:
    return None


def null_surface(names: Iterable[str]) -> DispatchSurface:
    """An inert surface: every method exists and does nothing."""
    return DispatchSurface({name: _noop for name in names})
