"""Tests for wren.errors: exception hierarchy and error messages."""

from wren.errors import (
    ConfigurationError,
    HeaderResolutionError,
    HookExecutionError,
    ResolutionError,
    WrenError,
)
from wren.pages.types import HandlerKey, Scope


class TestHierarchy:
    def test_all_are_wren_errors(self) -> None:
        for cls in (ConfigurationError, ResolutionError, HookExecutionError):
            assert issubclass(cls, WrenError)

    def test_header_error_is_resolution_error(self) -> None:
        assert issubclass(HeaderResolutionError, ResolutionError)


class TestResolutionError:
    def test_message_lists_search_path(self) -> None:
        err = ResolutionError("Cart", [HandlerKey("Cart"), HandlerKey("Cart", "Shop", Scope.FRAMEWORK)])
        assert str(err) == "No page handler for 'Cart' (tried: pages.Cart, framework.Shop.pages.Cart)"

    def test_empty_search(self) -> None:
        err = ResolutionError("Cart")
        assert err.searched == ()
        assert "tried: nothing" in str(err)


class TestHookExecutionError:
    def test_message_names_hook(self) -> None:
        def redirect_banned(name: str) -> str:
            return name

        err = HookExecutionError("checkPage", redirect_banned, "Shop")
        assert "redirect_banned" in str(err)
        assert "'checkPage'" in str(err)
        assert "'Shop'" in str(err)
