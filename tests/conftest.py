"""Shared fixtures for wren tests."""

from collections.abc import Iterator

import pytest

from wren.audit import AuditEvent, set_audit_sink
from wren.config import DispatchConfig


@pytest.fixture
def user_system_config() -> DispatchConfig:
    """Modules on, with the user-account module loaded (login gate active)."""
    return DispatchConfig(use_modules=True, modules=("UserSystem", "Shop", "Blog"))


@pytest.fixture
def audit_events() -> Iterator[list[AuditEvent]]:
    """Collect audit events emitted during the test."""
    events: list[AuditEvent] = []
    set_audit_sink(events.append)
    yield events
    set_audit_sink(None)
