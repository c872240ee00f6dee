"""The dispatcher: turns a page name into a rendered page.

Pipeline for one ``dispatch(page_name)``:

1. ``checkPage`` hook chain may rewrite the name.
2. Access policy may redirect to the fallback or login page.
3. Page registry resolves the handler key (unqualified, then modules).
4. The handler is instantiated.
5. Templated, non-AJAX pages get the shared header: resolved, built
   with the page's template, and processed.
6. The page is processed, then rendered. Its render result is returned.

Every step either produces what the next one needs or the dispatch
aborts with the error. There are no retries and no fallback page on
failure.

Usage::

    from wren import Dispatcher, DispatchConfig, Page

    dispatcher = Dispatcher(DispatchConfig(use_modules=True, modules=("UserSystem",)))

    @dispatcher.page()
    class Index(Page):
        template = "index.html"

    html = dispatcher.dispatch("Index", session=MappingSession(cookie_session))
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from kida import Environment

from wren.config import DispatchConfig
from wren.context import DispatchContext, bind_context
from wren.pages.hooks import CHECK_PAGE, Hook, HookRegistry
from wren.pages.policy import AccessPolicy
from wren.pages.registry import PageRegistry
from wren.pages.types import HandlerKey, PageHandler, Scope
from wren.session import ANONYMOUS, SessionState

logger = logging.getLogger("wren.dispatch")


class Dispatcher:
    """Resolves, access-checks, and renders pages.

    The dispatcher owns the access policy, hook registry, and page
    registry. They are shared by every dispatch; per-dispatch state lives
    in the ``DispatchContext``.

    Args:
        config: Dispatcher configuration. Defaults to ``DispatchConfig()``.
        registry: Page registry. A fresh one (with the framework header)
            is created when omitted.
        hooks: Hook registry. A fresh, empty one is created when omitted.
        denied_pages: Extra deny-listed pages, merged with
            ``config.denied_pages``.
        environment: Kida environment for ``Page.render``. Built from
            ``config`` on first use when omitted.
    """

    __slots__ = ("_environment", "config", "hooks", "policy", "registry")

    def __init__(
        self,
        config: DispatchConfig | None = None,
        *,
        registry: PageRegistry | None = None,
        hooks: HookRegistry | None = None,
        denied_pages: Iterable[str] = (),
        environment: Environment | None = None,
    ) -> None:
        self.config = config or DispatchConfig()
        self.registry = registry if registry is not None else PageRegistry()
        self.hooks = hooks if hooks is not None else HookRegistry()
        self.policy = AccessPolicy(
            (*denied_pages, *self.config.denied_pages),
            self.config.pages_without_login,
            fallback_page=self.config.fallback_page,
            login_page=self.config.login_page,
        )
        self._environment = environment

    # -- Setup --

    @property
    def environment(self) -> Environment:
        if self._environment is None:
            from wren.templating.integration import create_environment

            self._environment = create_environment(self.config)
        return self._environment

    def page(
        self,
        name: str | None = None,
        *,
        module: str | None = None,
        scope: Scope = Scope.APP,
    ) -> Callable[[Any], Any]:
        """Register a page handler. See ``PageRegistry.page``."""
        return self.registry.page(name, module=module, scope=scope)

    def hook(self, chain: str = CHECK_PAGE) -> Callable[[Hook], Hook]:
        """Register a hook on *chain* (``checkPage`` by default)."""
        return self.hooks.on(chain)

    # -- Resolution --

    def check_page(self, page_name: str, session: SessionState = ANONYMOUS) -> str:
        """Apply the ``checkPage`` hooks and the access policy to *page_name*."""
        page_name = self.hooks.run(CHECK_PAGE, page_name)
        return self.policy.resolve(
            page_name,
            use_modules=self.config.use_modules,
            modules=self.config.modules,
            has_user=session.has_user(),
            user_module=self.config.user_module,
        )

    def resolve(self, page_name: str, session: SessionState = ANONYMOUS) -> tuple[str, HandlerKey]:
        """Return the effective page name and handler key, without running it."""
        effective = self.check_page(page_name, session)
        key = self.registry.resolve(
            effective,
            use_modules=self.config.use_modules,
            modules=self.config.modules,
        )
        return effective, key

    # -- Dispatch --

    def dispatch(self, page_name: str, *, session: SessionState | None = None) -> Any:
        """Resolve, access-check, and render *page_name*.

        Returns whatever the page's ``render()`` returns. Errors from any
        step propagate after being logged.
        """
        session = session if session is not None else ANONYMOUS
        try:
            effective, key = self.resolve(page_name, session)
            logger.debug("dispatch %r -> %r (%s)", page_name, effective, key)

            ctx = DispatchContext(page_name=effective, session=session)
            with bind_context(ctx):
                page: PageHandler = self.registry.create(key)
                if page.template:
                    ctx.environment = self.environment
                    if not page.is_ajax:
                        self._process_header(page.template)
                page.process()
                return page.render()
        except Exception:
            logger.exception("dispatch of page %r failed", page_name)
            raise

    def _process_header(self, template: str) -> None:
        key = self.registry.resolve_header(self.config.header_page)
        header = self.registry.create(key, template)
        header.process()

    # -- Administration --

    def add_denied_pages(self, page_names: Iterable[str]) -> None:
        self.policy.add_denied_pages(page_names)

    def add_denied_page(self, page_name: str) -> None:
        self.policy.add_denied_page(page_name)

    def remove_denied_pages(self, page_names: Iterable[str]) -> None:
        self.policy.remove_denied_pages(page_names)

    def remove_denied_page(self, page_name: str) -> None:
        self.policy.remove_denied_page(page_name)

    def clear_denied_pages(self) -> None:
        self.policy.clear_denied_pages()
