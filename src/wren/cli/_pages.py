"""``wren pages`` and ``wren resolve``: inspect a dispatcher.

``pages`` prints every registered handler. ``resolve`` runs the hook
chain, access policy, and resolver for one page name without
instantiating the handler.

Both take ``module[:attribute]`` naming a ``Dispatcher``, a bare
``PageRegistry`` (wrapped in a default ``Dispatcher``), or a zero-argument
factory returning either. The attribute defaults to ``dispatcher``.
"""

import argparse
import importlib
import sys

from wren.dispatcher import Dispatcher
from wren.errors import ResolutionError, WrenError
from wren.pages.registry import PageRegistry
from wren.session import ANONYMOUS, SessionState


class _LoggedIn:
    def has_user(self) -> bool:
        return True


def load_dispatcher(target: str) -> Dispatcher:
    """Import ``target`` and return the dispatcher it names.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the module has no such attribute.
        TypeError: If the object is neither a dispatcher nor a registry,
            or a factory failed.

    """
    module_path, _, attr_name = target.partition(":")
    obj = getattr(importlib.import_module(module_path), attr_name or "dispatcher")

    if callable(obj) and not isinstance(obj, Dispatcher | PageRegistry):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"{target!r} factory failed: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, PageRegistry):
        return Dispatcher(registry=obj)
    if isinstance(obj, Dispatcher):
        return obj
    msg = f"{target!r} is a {type(obj).__name__}, expected a Dispatcher or PageRegistry"
    raise TypeError(msg)


def _load(target: str) -> Dispatcher:
    try:
        return load_dispatcher(target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_pages(args: argparse.Namespace) -> None:
    """Print a table of SCOPE, MODULE, PAGE, and FACTORY."""
    dispatcher = _load(args.dispatcher)

    items = dispatcher.registry.items()
    if not items:
        print("No pages registered.")
        return

    rows: list[tuple[str, str, str, str]] = []
    for key, factory in items:
        factory_name = getattr(factory, "__qualname__", repr(factory))
        rows.append((str(key.scope), key.module or "-", key.name, factory_name))

    widths = [
        max(len(header), *(len(row[i]) for row in rows))
        for i, header in enumerate(("SCOPE", "MODULE", "PAGE"))
    ]

    fmt = f"{{:<{widths[0]}}}  {{:<{widths[1]}}}  {{:<{widths[2]}}}  {{}}"
    print(fmt.format("SCOPE", "MODULE", "PAGE", "FACTORY"))
    sep_len = sum(widths) + 6 + max(len(row[3]) for row in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))


def run_resolve(args: argparse.Namespace) -> None:
    """Print the effective page name and the handler it resolves to.

    On a miss, every handler key that was tried is listed in search order.
    """
    dispatcher = _load(args.dispatcher)
    session: SessionState = _LoggedIn() if args.logged_in else ANONYMOUS

    try:
        effective, key = dispatcher.resolve(args.page, session)
    except ResolutionError as exc:
        print(f"Error: no page handler for {exc.page_name!r}", file=sys.stderr)
        for searched in exc.searched:
            print(f"  tried {searched}", file=sys.stderr)
        raise SystemExit(1) from exc
    except WrenError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"page:    {effective}")
    print(f"handler: {key}")
