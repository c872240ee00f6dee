"""Tests for wren.pages.base and wren.pages.header outside the dispatcher."""

import pytest
from kida import DictLoader, Environment

from wren.context import DispatchContext, bind_context, get_context
from wren.pages.base import Page
from wren.pages.header import Header
from wren.pages.types import HeaderHandler, PageHandler
from wren.session import ANONYMOUS, MappingSession


class Greeting(Page):
    template = "greeting.html"

    def process(self) -> None:
        self.assign("name", "world")


class Fragment(Page):
    template = "greeting.html"
    ajax = True


def _ctx(**vars_: object) -> DispatchContext:
    env = Environment(loader=DictLoader({"greeting.html": "{{ greeting }}, {{ name }}!"}))
    return DispatchContext(page_name="Greeting", session=ANONYMOUS, environment=env, vars=dict(vars_))


class TestPage:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(Greeting(), PageHandler)

    def test_is_ajax(self) -> None:
        assert Greeting().is_ajax is False
        assert Fragment().is_ajax is True

    def test_render_merges_shared_vars(self) -> None:
        page = Greeting()
        with bind_context(_ctx(greeting="Hello")):
            page.process()
            assert page.render() == "Hello, world!"

    def test_page_vars_override_shared(self) -> None:
        page = Greeting()
        page.assign("greeting", "Hi")
        page.assign("name", "Ada")
        with bind_context(_ctx(greeting="Hello", name="nobody")):
            assert page.render() == "Hi, Ada!"

    def test_templateless_renders_empty(self) -> None:
        assert Page().render() == ""

    def test_render_outside_dispatch(self) -> None:
        with pytest.raises(LookupError, match="No dispatch in progress"):
            Greeting().render()

    def test_render_without_environment(self) -> None:
        ctx = DispatchContext(page_name="Greeting", session=ANONYMOUS)
        with bind_context(ctx), pytest.raises(LookupError, match="no environment"):
            Greeting().render()


class TestHeader:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(Header("index.html"), HeaderHandler)

    def test_publishes_vars(self) -> None:
        ctx = DispatchContext(page_name="Index", session=MappingSession({"user_id": 1}))
        with bind_context(ctx):
            Header("index.html").process()

        assert ctx.vars == {
            "page_template": "index.html",
            "page_name": "Index",
            "logged_in": True,
        }


class TestContext:
    def test_bind_and_reset(self) -> None:
        ctx = DispatchContext(page_name="A", session=ANONYMOUS)
        with bind_context(ctx):
            assert get_context() is ctx
        with pytest.raises(LookupError):
            get_context()

    def test_nested_bind_restores_outer(self) -> None:
        outer = DispatchContext(page_name="A", session=ANONYMOUS)
        inner = DispatchContext(page_name="B", session=ANONYMOUS)
        with bind_context(outer):
            with bind_context(inner):
                assert get_context() is inner
            assert get_context() is outer
