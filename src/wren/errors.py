"""Wren exception hierarchy.

Shared across the policy, hook runner, registry, and dispatcher so every
module raises and catches the same types.
"""

from collections.abc import Sequence
from typing import Any


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when dispatcher configuration or a registration is invalid.

    Typically surfaces at startup, while building the ``DispatchConfig``
    or registering page handlers.
    """


class ResolutionError(WrenError):
    """No page handler exists for the effective page name.

    Raised after the unqualified handler and the full module search path
    have been tried. Fatal to the request.
    """

    def __init__(self, page_name: str, searched: Sequence[Any] = ()) -> None:
        self.page_name = page_name
        self.searched = tuple(searched)
        tried = ", ".join(str(key) for key in self.searched) or "nothing"
        super().__init__(f"No page handler for {page_name!r} (tried: {tried})")


class HeaderResolutionError(ResolutionError):
    """Neither an application nor a framework header is registered.

    Only raised when the page asked for a header (templated, not AJAX).
    """


class HookExecutionError(WrenError):
    """A hook callable raised instead of returning a page name.

    The original exception is chained as ``__cause__``. Hooks after the
    failing one are never run.
    """

    def __init__(self, chain: str, hook: Any, page_name: str) -> None:
        self.chain = chain
        self.hook = hook
        self.page_name = page_name
        hook_name = getattr(hook, "__qualname__", repr(hook))
        super().__init__(f"Hook {hook_name} in chain {chain!r} failed for page {page_name!r}")
