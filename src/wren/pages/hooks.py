"""Hook chains: ordered name-rewrite callables.

A hook takes the requested page name and returns either a replacement
name or something falsy (``None``, ``""``) to pass. The first truthy
result wins and ends the chain; later hooks are never consulted.

Usage::

    hooks = HookRegistry()

    @hooks.on(CHECK_PAGE)
    def maintenance(page_name: str) -> str | None:
        return "Maintenance" if MAINTENANCE else None

    hooks.run(CHECK_PAGE, "Shop")  # -> "Maintenance" or "Shop"

Free-threading safety:
    Chains are stored as tuples and replaced whole under a lock on
    registration. ``run()`` reads one tuple and never locks.
"""

import logging
import threading
from collections.abc import Callable

from wren.errors import HookExecutionError

logger = logging.getLogger("wren.hooks")

# Chain consulted by the dispatcher before access checks.
CHECK_PAGE = "checkPage"

type Hook = Callable[[str], str | None]


class HookRegistry:
    """Named hook chains in registration order."""

    __slots__ = ("_chains", "_lock")

    def __init__(self) -> None:
        self._chains: dict[str, tuple[Hook, ...]] = {}
        self._lock = threading.Lock()

    def register(self, chain: str, hook: Hook) -> Hook:
        """Append *hook* to *chain*. Returns the hook unchanged."""
        if not callable(hook):
            msg = f"Hook for chain {chain!r} must be callable, got {type(hook).__name__}"
            raise TypeError(msg)
        with self._lock:
            self._chains[chain] = (*self._chains.get(chain, ()), hook)
        return hook

    def on(self, chain: str) -> Callable[[Hook], Hook]:
        """Decorator form of ``register``."""

        def decorator(hook: Hook) -> Hook:
            return self.register(chain, hook)

        return decorator

    def unregister(self, chain: str, hook: Hook) -> None:
        """Remove *hook* from *chain*. Unknown hooks are ignored."""
        with self._lock:
            remaining = tuple(h for h in self._chains.get(chain, ()) if h is not hook)
            if remaining:
                self._chains[chain] = remaining
            else:
                self._chains.pop(chain, None)

    def hooks(self, chain: str) -> tuple[Hook, ...]:
        """Return the hooks registered under *chain* (possibly empty)."""
        return self._chains.get(chain, ())

    def run(self, chain: str, page_name: str) -> str:
        """Run *chain* against *page_name*; first truthy result wins.

        Raises ``HookExecutionError`` if a hook raises. The chain is not
        continued past a failing hook.
        """
        for hook in self.hooks(chain):
            try:
                result = hook(page_name)
            except Exception as exc:
                raise HookExecutionError(chain, hook, page_name) from exc
            if result:
                logger.debug("hook %s rewrote %r -> %r", chain, page_name, result)
                return result
        return page_name

    def __contains__(self, chain: str) -> bool:
        return bool(self._chains.get(chain))
