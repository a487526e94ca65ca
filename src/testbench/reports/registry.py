"""Name-based lookup of reporter classes.

``HarnessConfig.reporters`` lists reporters by registered name or by import
string. Every class that enters the registry, or is loaded from an import
string, must define all of the reporter hooks; anything else is rejected up
front instead of failing mid-run.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING, Any, TypeVar

from testbench.reports.base import missing_hooks


if TYPE_CHECKING:
    from testbench.reports.base import Reporter


R = TypeVar("R", bound="Reporter")

_registered: dict[str, type[Reporter]] = {}
_builtins: dict[str, type[Reporter]] = {}


def _checked(cls: Any, origin: str) -> type[Reporter]:
    if not isinstance(cls, type):
        msg = f"{origin} does not name a reporter class"
        raise TypeError(msg)
    missing = missing_hooks(cls)
    if missing:
        msg = f"{origin} is not a reporter; missing hooks: {', '.join(missing)}"
        raise TypeError(msg)
    return cls


def reporter(
    cls: type[R] | None = None,
    *,
    name: str | None = None,
) -> type[R] | Any:
    """Register a reporter class under ``name`` (its class name by default).

        @reporter(name="junit")
        class JunitReporter: ...

    Raises:
        TypeError: If the class lacks one of the reporter hooks.
    """

    def register(cls: type[R]) -> type[R]:
        key = name or cls.__name__
        _registered[key] = _checked(cls, key)
        return cls

    return register(cls) if cls is not None else register


def register_builtin(cls: type[R]) -> type[R]:
    """Register a reporter that :func:`clear_reporter_registry` keeps."""
    _builtins[cls.__name__] = _checked(cls, cls.__name__)
    _registered[cls.__name__] = cls
    return cls


def get_reporter_registry() -> dict[str, type[Reporter]]:
    return _registered


def clear_reporter_registry() -> None:
    _registered.clear()
    _registered.update(_builtins)


def _load_reporter_class(target: str) -> type[Reporter]:
    """Load ``package.module:Class`` or ``package.module.Class``."""
    module_name, _, attr = target.rpartition(":" if ":" in target else ".")
    if not module_name or not attr:
        msg = f"Malformed reporter import string: {target!r}"
        raise ValueError(msg)
    return _checked(getattr(importlib.import_module(module_name), attr), target)


def resolve_reporter(name: str, **options: Any) -> Reporter:
    """Build one reporter from a registered name or an import string.

    Raises:
        ValueError: If ``name`` is neither registered nor an import string.
        TypeError: If the imported object is not a reporter class.
    """
    cls = _registered.get(name)
    if cls is None:
        if ":" not in name and "." not in name:
            known = ", ".join(sorted(_registered)) or "none"
            msg = f"No reporter registered as {name!r} (registered: {known})"
            raise ValueError(msg)
        cls = _load_reporter_class(name)
    return cls(**options)


def resolve_reporters(
    names: list[str],
    options: dict[str, dict[str, Any]] | None = None,
) -> list[Reporter]:
    """Build every reporter in ``names``, passing each its entry in ``options``."""
    options = options or {}
    return [resolve_reporter(name, **options.get(name, {})) for name in names]


__all__ = [
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
