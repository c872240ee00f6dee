"""Dispatcher configuration.

DispatchConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups at request time.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from wren.errors import ConfigurationError

# Keys accepted by ``from_mapping`` in their settings-file spelling.
_ALIASES: dict[str, str] = {
    "useModules": "use_modules",
    "pagesWithoutLogin": "pages_without_login",
    "deniedPages": "denied_pages",
    "unallowedPages": "denied_pages",
    "userModule": "user_module",
    "fallbackPage": "fallback_page",
    "loginPage": "login_page",
    "headerPage": "header_page",
    "templateDir": "template_dir",
}

_NAME_TUPLES = ("modules", "pages_without_login", "denied_pages")
_BOOLS = ("use_modules", "autoescape", "trim_blocks", "lstrip_blocks")


@dataclass(frozen=True, slots=True)
class DispatchConfig:
    """Dispatcher configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DispatchConfig(use_modules=True, modules=("UserSystem", "Blog"))
    """

    # Modules
    use_modules: bool = False
    modules: tuple[str, ...] = ()  # Search order for module-qualified handlers
    user_module: str = "UserSystem"  # Presence in ``modules`` turns on the login gate

    # Access
    pages_without_login: tuple[str, ...] = ()  # Added to the built-in exempt pages
    denied_pages: tuple[str, ...] = ()

    # Page names
    fallback_page: str = "Index"
    login_page: str = "Login"
    header_page: str = "Header"

    # Templates
    template_dir: str | Path = "templates"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    @property
    def user_system_active(self) -> bool:
        """True when modules are on and the user-account module is loaded."""
        return self.use_modules and self.user_module in self.modules

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> DispatchConfig:
        """Build a config from a plain mapping such as a parsed settings file.

        Accepts both ``snake_case`` field names and the ``camelCase``
        spellings (``useModules``, ``pagesWithoutLogin``). Lists become
        tuples. ``None`` for a name list means "empty".

        Raises ``ConfigurationError`` on unknown keys or wrong types.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}

        for raw_key, value in data.items():
            key = _ALIASES.get(raw_key, raw_key)
            if key not in known:
                msg = f"Unknown dispatcher setting: {raw_key!r}"
                raise ConfigurationError(msg)
            if key in kwargs:
                msg = f"Dispatcher setting {key!r} given more than once"
                raise ConfigurationError(msg)

            if key in _NAME_TUPLES:
                value = _as_names(raw_key, value)
            elif key in _BOOLS:
                if not isinstance(value, bool):
                    msg = f"Setting {raw_key!r} must be a bool, got {type(value).__name__}"
                    raise ConfigurationError(msg)
            elif key == "template_dir":
                if not isinstance(value, (str, Path)):
                    msg = f"Setting {raw_key!r} must be a path, got {type(value).__name__}"
                    raise ConfigurationError(msg)
            elif not isinstance(value, str) or not value:
                msg = f"Setting {raw_key!r} must be a non-empty string"
                raise ConfigurationError(msg)

            kwargs[key] = value

        return cls(**kwargs)


def _as_names(key: str, value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        msg = f"Setting {key!r} must be a list of page or module names"
        raise ConfigurationError(msg)
    for item in value:
        if not isinstance(item, str):
            msg = f"Setting {key!r} contains a non-string entry: {item!r}"
            raise ConfigurationError(msg)
    return tuple(value)
