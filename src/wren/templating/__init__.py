"""Kida templating glue: environment factory and built-in filters."""

from wren.templating.filters import BUILTIN_FILTERS, number_format
from wren.templating.integration import create_environment

__all__ = [
    "BUILTIN_FILTERS",
    "create_environment",
    "number_format",
]
