"""Access audit events.

The access policy reports every redirect it makes. Install a sink with
``set_audit_sink`` to forward them to logs or metrics.

``access.denied``
    The requested page is deny-listed; ``target`` is the fallback page.
``access.login_required``
    The login gate fired; ``target`` is the login page.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from time import time


@dataclass(frozen=True, slots=True)
class AuditEvent:
    """One redirect decided by the access policy."""

    name: str
    page: str
    target: str
    has_user: bool
    timestamp: float = field(default_factory=time)


type AuditSink = Callable[[AuditEvent], None]


_sink_lock = threading.Lock()
_sink: AuditSink | None = None


def set_audit_sink(sink: AuditSink | None) -> None:
    """Route audit events to ``sink``; ``None`` turns delivery off."""
    global _sink
    with _sink_lock:
        _sink = sink


def emit_audit_event(name: str, page: str, target: str, *, has_user: bool) -> None:
    with _sink_lock:
        sink = _sink
    if sink is not None:
        sink(AuditEvent(name=name, page=page, target=target, has_user=has_user))
