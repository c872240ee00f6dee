"""Access policy: deny-list and login gate.

Decides, for a page name and session state, whether the request is
redirected to the fallback page, the login page, or passes unchanged.
The policy only returns names; it never raises.

Order of checks:

1. Deny-listed page -> fallback page (``"Index"``), regardless of session.
2. Login gate active, no user, page not exempt -> login page (``"Login"``).
3. Otherwise the page name is returned unchanged.

Free-threading safety:
    Both sets are ``frozenset`` snapshots. Mutations build a new set and
    swap it in under a lock (copy-on-write); ``resolve()`` reads the
    current snapshot without locking.
"""

import logging
import threading
from collections.abc import Iterable

from wren.audit import emit_audit_event
from wren.errors import ConfigurationError

logger = logging.getLogger("wren.security")

# Pages reachable without a session even when the login gate is on.
DEFAULT_PAGES_WITHOUT_LOGIN: frozenset[str] = frozenset(
    {"Register", "Login", "Imprint", "LostPassword"}
)

DEFAULT_DENIED_PAGES: frozenset[str] = frozenset()


class AccessPolicy:
    """Deny-list plus login-exempt set.

    Args:
        denied_pages: Extra page names that are never dispatched directly.
        pages_without_login: Extra page names exempt from the login gate.
            The built-in exempt pages are always kept.
        fallback_page: Where deny-listed pages are sent.
        login_page: Where unauthenticated requests are sent. Always exempt.
    """

    __slots__ = ("_denied", "_exempt", "_lock", "fallback_page", "login_page")

    def __init__(
        self,
        denied_pages: Iterable[str] = (),
        pages_without_login: Iterable[str] = (),
        *,
        fallback_page: str = "Index",
        login_page: str = "Login",
    ) -> None:
        self.fallback_page = fallback_page
        self.login_page = login_page
        self._lock = threading.Lock()
        denied = _as_names(denied_pages) | DEFAULT_DENIED_PAGES
        self._check_denyable(denied)
        self._denied = denied
        self._exempt = _as_names(pages_without_login) | DEFAULT_PAGES_WITHOUT_LOGIN | {login_page}

    # -- Queries --

    @property
    def denied_pages(self) -> frozenset[str]:
        return self._denied

    @property
    def pages_without_login(self) -> frozenset[str]:
        return self._exempt

    def is_denied(self, page_name: str) -> bool:
        return page_name in self._denied

    def requires_login(self, page_name: str) -> bool:
        return page_name not in self._exempt

    def resolve(
        self,
        page_name: str,
        *,
        use_modules: bool,
        modules: Iterable[str],
        has_user: bool,
        user_module: str = "UserSystem",
    ) -> str:
        """Return the page name the request is allowed to see."""
        if page_name in self._denied:
            logger.debug("page %r is denied, sending to %r", page_name, self.fallback_page)
            emit_audit_event(
                "access.denied", page_name, self.fallback_page, has_user=has_user
            )
            return self.fallback_page

        if (
            use_modules
            and user_module in modules
            and not has_user
            and page_name not in self._exempt
        ):
            logger.debug("page %r needs a login, sending to %r", page_name, self.login_page)
            emit_audit_event(
                "access.login_required", page_name, self.login_page, has_user=has_user
            )
            return self.login_page

        return page_name

    # -- Administration --

    def add_denied_pages(self, page_names: Iterable[str]) -> None:
        """Deny-list several pages. Re-adding a listed page is a no-op."""
        names = _as_names(page_names)
        self._check_denyable(names)
        with self._lock:
            self._denied = self._denied | names

    def add_denied_page(self, page_name: str) -> None:
        self.add_denied_pages((page_name,))

    def remove_denied_pages(self, page_names: Iterable[str]) -> None:
        """Remove several pages from the deny-list. Absent names are ignored."""
        names = _as_names(page_names)
        with self._lock:
            self._denied = self._denied - names

    def remove_denied_page(self, page_name: str) -> None:
        self.remove_denied_pages((page_name,))

    def clear_denied_pages(self) -> None:
        with self._lock:
            self._denied = frozenset()

    def _check_denyable(self, names: frozenset[str]) -> None:
        # A denied fallback page would redirect to itself forever.
        if self.fallback_page in names:
            msg = f"The fallback page {self.fallback_page!r} cannot be deny-listed"
            raise ConfigurationError(msg)


def _as_names(page_names: Iterable[str]) -> frozenset[str]:
    if isinstance(page_names, str):
        msg = f"Expected an iterable of page names, got the string {page_names!r}"
        raise TypeError(msg)
    return frozenset(page_names)
