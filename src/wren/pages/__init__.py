"""Page dispatch building blocks.

Combines the hook chains, access policy, and page registry used by
``wren.Dispatcher``. Each piece is usable on its own:

    hooks/       CHECK_PAGE chain, first truthy rewrite wins
    policy/      deny-list (-> "Index") and login gate (-> "Login")
    registry/    (scope, module, name) -> factory, ordered resolution
    base/        Page base class rendering a kida template
    header/      framework Header published before templated pages
"""

from wren.pages.base import Page
from wren.pages.header import Header
from wren.pages.hooks import CHECK_PAGE, HookRegistry
from wren.pages.policy import DEFAULT_PAGES_WITHOUT_LOGIN, AccessPolicy
from wren.pages.registry import PageRegistry
from wren.pages.types import HandlerKey, HeaderHandler, PageHandler, Scope

__all__ = [
    "CHECK_PAGE",
    "DEFAULT_PAGES_WITHOUT_LOGIN",
    "AccessPolicy",
    "HandlerKey",
    "Header",
    "HeaderHandler",
    "HookRegistry",
    "Page",
    "PageHandler",
    "PageRegistry",
    "Scope",
]
