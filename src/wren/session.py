"""Session state consumed by the login gate.

The dispatcher only needs to know whether a user is authenticated, so
the contract is a single boolean query. Storage, cookies, and
credentials belong to the application.

Usage::

    from wren.session import MappingSession

    session = MappingSession(request.session)  # any mutable mapping
    html = dispatcher.dispatch("Profile", session=session)
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SessionState(Protocol):
    """Minimal session protocol.

    Any object with a ``has_user()`` method satisfies this.
    """

    def has_user(self) -> bool: ...


@dataclass(frozen=True, slots=True)
class AnonymousSession:
    """Sentinel for requests without a session. Never has a user."""

    def has_user(self) -> bool:
        return False


ANONYMOUS: AnonymousSession = AnonymousSession()


class MappingSession:
    """Adapt a session mapping (e.g. a signed-cookie dict) to ``SessionState``.

    A missing key, ``None``, and an empty string all count as "no user";
    the lookup never raises.
    """

    __slots__ = ("_data", "_user_key")

    def __init__(self, data: Mapping[str, Any], user_key: str = "user_id") -> None:
        self._data = data
        self._user_key = user_key

    @property
    def user_id(self) -> Any:
        return self._data.get(self._user_key)

    def has_user(self) -> bool:
        user_id = self._data.get(self._user_key)
        return user_id is not None and user_id != ""

    def __repr__(self) -> str:
        return f"<MappingSession {self._user_key}={self.user_id!r}>"
