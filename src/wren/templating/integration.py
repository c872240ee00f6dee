"""Kida environment setup.

Creates a kida Environment from wren's DispatchConfig and binds
user-registered filters and globals. The environment is created once
when the dispatcher is built and shared by every dispatch.
"""

from collections.abc import Callable
from typing import Any

from kida import Environment, FileSystemLoader

from wren.config import DispatchConfig
from wren.templating.filters import BUILTIN_FILTERS


def create_environment(
    config: DispatchConfig,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
    *,
    loader: Any = None,
) -> Environment:
    """Create a kida Environment from dispatcher configuration.

    *loader* overrides the default ``FileSystemLoader`` rooted at
    ``config.template_dir`` (tests pass a ``DictLoader``).
    """
    env = Environment(
        loader=loader if loader is not None else FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    # Register wren's built-in filters (number_format)
    env.update_filters(BUILTIN_FILTERS)

    # Register user-defined filters (may override built-ins)
    if filters:
        env.update_filters(filters)

    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env
