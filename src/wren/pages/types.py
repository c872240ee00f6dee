"""Page handler contracts and registry keys.

Handlers are duck-typed: anything with the right shape can be
dispatched. ``HandlerKey`` is the frozen identifier the resolver returns
and the registry instantiates from.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PageHandler(Protocol):
    """The capability set every dispatched page provides.

    Attributes:
        template: Template identifier. Empty means "no shared header".
        is_ajax: True for fragment/JSON responses that skip the header.
    """

    @property
    def template(self) -> str: ...

    @property
    def is_ajax(self) -> bool: ...

    def process(self) -> None: ...

    def render(self) -> Any: ...


@runtime_checkable
class HeaderHandler(Protocol):
    """Shared page header. Built with the page's template identifier."""

    def process(self) -> None: ...


class Scope(StrEnum):
    """Where a handler implementation lives.

    ``APP`` handlers belong to the application and win over ``FRAMEWORK``
    handlers shipped with wren or a module package.
    """

    APP = "app"
    FRAMEWORK = "framework"


@dataclass(frozen=True, slots=True)
class HandlerKey:
    """Identifies one registered handler implementation.

    Attributes:
        name: Page name (e.g. ``"Cart"``).
        module: Module the handler belongs to, ``None`` when unqualified.
        scope: Application-level or framework-level implementation.
    """

    name: str
    module: str | None = None
    scope: Scope = Scope.APP

    @property
    def qualified_name(self) -> str:
        """Dotted identifier, e.g. ``framework.Blog.pages.Cart``."""
        parts = [] if self.scope is Scope.APP else [str(self.scope)]
        if self.module is not None:
            parts.append(self.module)
        parts.extend(("pages", self.name))
        return ".".join(parts)

    def __str__(self) -> str:
        return self.qualified_name
