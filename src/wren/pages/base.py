"""Base class for template-rendered pages.

Subclass ``Page``, set ``template``, and fill variables in ``process()``::

    @registry.page()
    class Profile(Page):
        template = "profile.html"

        def process(self) -> None:
            self.assign("user", load_user())

``render()`` renders the template with the kida environment of the
current dispatch. Variables published by the header are visible to the
page template; the page's own variables win on conflict.

Pages that answer fetch/htmx requests set ``ajax = True`` so the
dispatcher skips the shared header.
"""

from typing import Any, ClassVar

from wren.context import get_context


class Page:
    """Satisfies ``PageHandler`` with a template and a variable dict."""

    template: ClassVar[str] = ""
    ajax: ClassVar[bool] = False

    def __init__(self) -> None:
        self.context: dict[str, Any] = {}

    @property
    def is_ajax(self) -> bool:
        return self.ajax

    def assign(self, name: str, value: Any) -> None:
        """Expose *value* to the template as *name*."""
        self.context[name] = value

    def process(self) -> None:
        """Handle input and prepare template variables. No-op by default."""

    def render(self) -> str:
        """Render ``template``. Templateless pages render ``""``."""
        if not self.template:
            return ""

        ctx = get_context()
        if ctx.environment is None:
            msg = f"Page {type(self).__name__} has a template but the dispatcher has no environment"
            raise LookupError(msg)

        template = ctx.environment.get_template(self.template)
        return template.render({**ctx.vars, **self.context})

    def __repr__(self) -> str:
        return f"<{type(self).__name__} template={self.template!r}>"
