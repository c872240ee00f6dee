"""Framework page header.

Runs before templated, non-AJAX pages and publishes the variables a
shared layout needs. Applications replace it by registering their own
``Header`` at application scope; ``super().process()`` keeps these
variables.
"""

from wren.context import get_context


class Header:
    """Publishes ``page_template``, ``page_name`` and ``logged_in``."""

    def __init__(self, template: str) -> None:
        self.template = template

    def process(self) -> None:
        ctx = get_context()
        ctx.vars["page_template"] = self.template
        ctx.vars["page_name"] = ctx.page_name
        ctx.vars["logged_in"] = ctx.session.has_user()
