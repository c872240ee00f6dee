"""Shop: module-based page resolution with a login gate.

Demonstrates the dispatch pipeline end to end: a framework-level
``Login`` page shipped by the ``UserSystem`` module, a ``Cart`` page
provided by the ``Shop`` module, a ``checkPage`` hook that sends the old
``Basket`` name to ``Cart``, a deny-listed ``Admin`` page, and a JSON
``CartCount`` endpoint that skips the header.

Run:
    cd examples/shop && python app.py Cart
"""

import json
import sys
from pathlib import Path

from wren import DispatchConfig, Dispatcher, MappingSession, Page, Scope

TEMPLATES_DIR = Path(__file__).parent / "templates"

config = DispatchConfig(
    use_modules=True,
    modules=("UserSystem", "Shop"),
    template_dir=TEMPLATES_DIR,
)
dispatcher = Dispatcher(config, denied_pages=["Admin"])

CART = {"items": 3, "total": 1234.5}


@dispatcher.page()
class Index(Page):
    template = "index.html"


@dispatcher.page("Login", module="UserSystem", scope=Scope.FRAMEWORK)
class Login(Page):
    template = "login.html"


@dispatcher.page("Cart", module="Shop")
class Cart(Page):
    template = "cart.html"

    def process(self) -> None:
        self.assign("items", CART["items"])
        self.assign("total", CART["total"])


@dispatcher.page("CartCount", module="Shop")
class CartCount(Page):
    template = "cart.html"
    ajax = True

    def render(self) -> str:
        return json.dumps({"items": CART["items"]})


@dispatcher.hook()
def renamed_pages(page_name: str) -> str | None:
    """Old links still point at ``Basket``."""
    return "Cart" if page_name == "Basket" else None


if __name__ == "__main__":
    page = sys.argv[1] if len(sys.argv) > 1 else "Index"
    print(dispatcher.dispatch(page, session=MappingSession({"user_id": 1})))
