"""Page registry: explicit table of page handler factories.

Pages register a factory under ``(scope, module, name)``; the resolver
looks names up in a fixed order instead of probing for classes at
runtime.

Resolution order for a page name:

1. The unqualified application handler ``(APP, None, name)``.
2. When modules are enabled, for each module in configured order:
   ``(APP, module, name)`` then ``(FRAMEWORK, module, name)``.

The first registered key wins. Module order is the only tie-break.
Nothing matching raises ``ResolutionError``; there is no silent
fallback.

Headers resolve without a module search: the application header, then
the framework header.

Usage::

    registry = PageRegistry()

    @registry.page()
    class Index(Page):
        template = "index.html"

    @registry.page("Cart", module="Shop")
    class ShopCart(Page):
        ...

Free-threading safety:
    Registration happens at startup under a lock. Lookups read a plain
    dict and never lock.
"""

import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from wren.errors import ConfigurationError, HeaderResolutionError, ResolutionError
from wren.pages.types import HandlerKey, Scope


class PageRegistry:
    """Factories for page and header handlers, keyed by ``HandlerKey``.

    A new registry already contains the framework ``Header`` unless
    ``defaults=False`` is passed.
    """

    __slots__ = ("_factories", "_lock")

    def __init__(self, *, defaults: bool = True) -> None:
        self._factories: dict[HandlerKey, Callable[..., Any]] = {}
        self._lock = threading.Lock()
        if defaults:
            from wren.pages.header import Header

            self.register("Header", Header, scope=Scope.FRAMEWORK)

    # -- Registration --

    def register[F: Callable[..., Any]](
        self,
        name: str,
        factory: F,
        *,
        module: str | None = None,
        scope: Scope = Scope.APP,
    ) -> F:
        """Register *factory* for page *name*. Returns the factory unchanged.

        Raises ``ConfigurationError`` if the key is already taken.
        """
        if not name:
            msg = "Page name must be a non-empty string"
            raise ConfigurationError(msg)
        if not callable(factory):
            msg = f"Factory for page {name!r} must be callable, got {type(factory).__name__}"
            raise ConfigurationError(msg)

        key = HandlerKey(name=name, module=module, scope=Scope(scope))
        with self._lock:
            if key in self._factories:
                msg = f"Duplicate page handler: {key}"
                raise ConfigurationError(msg)
            self._factories[key] = factory
        return factory

    def page(
        self,
        name: str | None = None,
        *,
        module: str | None = None,
        scope: Scope = Scope.APP,
    ) -> Callable[[Any], Any]:
        """Decorator form of ``register``. *name* defaults to ``__name__``."""

        def decorator(factory: Any) -> Any:
            return self.register(name or factory.__name__, factory, module=module, scope=scope)

        return decorator

    def unregister(self, key: HandlerKey) -> None:
        with self._lock:
            self._factories.pop(key, None)

    # -- Lookup --

    def get(self, key: HandlerKey) -> Callable[..., Any] | None:
        """Return the factory for *key*, or ``None`` if not registered."""
        return self._factories.get(key)

    def candidates(
        self,
        page_name: str,
        *,
        use_modules: bool,
        modules: Iterable[str],
    ) -> Iterator[HandlerKey]:
        """Yield the keys tried for *page_name*, in priority order."""
        yield HandlerKey(page_name)
        if not use_modules:
            return
        for module in modules:
            yield HandlerKey(page_name, module, Scope.APP)
            yield HandlerKey(page_name, module, Scope.FRAMEWORK)

    def resolve(
        self,
        page_name: str,
        *,
        use_modules: bool,
        modules: Iterable[str],
    ) -> HandlerKey:
        """Find the handler key for *page_name*.

        Raises ``ResolutionError`` when no candidate is registered.
        """
        searched: list[HandlerKey] = []
        for key in self.candidates(page_name, use_modules=use_modules, modules=modules):
            if key in self._factories:
                return key
            searched.append(key)
        raise ResolutionError(page_name, searched)

    def resolve_header(self, name: str = "Header") -> HandlerKey:
        """Find the header key: application first, then framework.

        Raises ``HeaderResolutionError`` when neither is registered.
        """
        searched = (HandlerKey(name), HandlerKey(name, scope=Scope.FRAMEWORK))
        for key in searched:
            if key in self._factories:
                return key
        raise HeaderResolutionError(name, searched)

    def create(self, key: HandlerKey, *args: Any) -> Any:
        """Instantiate the handler registered under *key*.

        Raises ``ResolutionError`` if *key* is not registered. Errors
        raised by the factory propagate unchanged.
        """
        factory = self._factories.get(key)
        if factory is None:
            raise ResolutionError(key.name, (key,))
        return factory(*args)

    def items(self) -> list[tuple[HandlerKey, Callable[..., Any]]]:
        """Registered ``(key, factory)`` pairs in registration order."""
        return list(self._factories.items())

    def __contains__(self, key: object) -> bool:
        return key in self._factories

    def __len__(self) -> int:
        return len(self._factories)
