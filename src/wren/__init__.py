"""Wren: page dispatch with hook chains, module search, and a login gate.

Turns a requested page name into a rendered page: ``checkPage`` hooks may
rewrite the name, the access policy may redirect it, the page registry
resolves the handler across the configured modules, and the handler is
processed and rendered.

Basic usage::

    from wren import DispatchConfig, Dispatcher, Page

    dispatcher = Dispatcher(DispatchConfig(use_modules=True, modules=("UserSystem", "Blog")))

    @dispatcher.page()
    class Index(Page):
        template = "index.html"

    @dispatcher.page("Post", module="Blog")
    class BlogPost(Page):
        template = "blog/post.html"

    html = dispatcher.dispatch("Post", session=MappingSession(cookie_session))
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "ANONYMOUS",
    "CHECK_PAGE",
    "AccessPolicy",
    "ConfigurationError",
    "DispatchConfig",
    "Dispatcher",
    "HandlerKey",
    "Header",
    "HeaderResolutionError",
    "HookExecutionError",
    "HookRegistry",
    "MappingSession",
    "Page",
    "PageRegistry",
    "ResolutionError",
    "Scope",
    "SessionState",
    "WrenError",
    "get_context",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast (kida is only imported on first use).
    """
    if name == "Dispatcher":
        from wren.dispatcher import Dispatcher

        return Dispatcher

    if name == "DispatchConfig":
        from wren.config import DispatchConfig

        return DispatchConfig

    if name in (
        "CHECK_PAGE",
        "AccessPolicy",
        "HandlerKey",
        "Header",
        "HookRegistry",
        "Page",
        "PageRegistry",
        "Scope",
    ):
        from wren import pages as _pages

        return getattr(_pages, name)

    if name in ("ANONYMOUS", "MappingSession", "SessionState"):
        from wren import session as _session

        return getattr(_session, name)

    if name == "get_context":
        from wren.context import get_context

        return get_context

    if name in (
        "ConfigurationError",
        "HeaderResolutionError",
        "HookExecutionError",
        "ResolutionError",
        "WrenError",
    ):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
