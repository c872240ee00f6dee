"""Dispatch-scoped context via ContextVar.

Provides the ``DispatchContext`` for the page currently being dispatched:
the effective page name, the session, the template environment, and a
mutable dict of template variables shared between the header and the
page.

The context is set by ``Dispatcher.dispatch`` and reset after each
dispatch. Accessing it outside a dispatch raises ``LookupError``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any

from kida import Environment

from wren.session import SessionState


@dataclass(slots=True)
class DispatchContext:
    """State for one dispatch. Discarded when the dispatch returns."""

    page_name: str
    session: SessionState
    environment: Environment | None = None
    vars: dict[str, Any] = field(default_factory=dict)


_context_var: ContextVar[DispatchContext] = ContextVar("wren_dispatch")


def get_context() -> DispatchContext:
    """Return the context of the dispatch in progress.

    Raises ``LookupError`` if called outside a dispatch.
    """
    try:
        return _context_var.get()
    except LookupError:
        msg = "No dispatch in progress. Page handlers run inside Dispatcher.dispatch()."
        raise LookupError(msg) from None


@contextmanager
def bind_context(ctx: DispatchContext) -> Iterator[DispatchContext]:
    """Make *ctx* the current dispatch context until the block exits."""
    token = _context_var.set(ctx)
    try:
        yield ctx
    finally:
        _context_var.reset(token)
