"""Harness configuration read from ``[tool.testbench]`` in pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from testbench.errors import ConfigError

if TYPE_CHECKING:
    from rich.console import Console

    from testbench.reports.base import Reporter


PYPROJECT = "pyproject.toml"
CONSOLE_REPORTER = "ConsoleReporter"


class HarnessConfig(BaseModel):
    """Settings for a run.

    Attributes:
    ----------
    timeout: float | None
        Seconds before a case's child is killed; None waits forever
    color: bool | None
        Force (True) or disable (False) ANSI styling; None auto-detects
    verbosity: int
        At 1 or more, case lines carry their duration
    reporters: list[str]
        Registry names or import strings of the reporters to use
    reporter_options: dict[str, dict[str, Any]]
        Constructor keyword arguments per reporter name
    log_level: str | None
        Level for the ``testbench`` logger; None leaves it untouched
    """

    model_config = ConfigDict(extra="forbid")

    timeout: float | None = Field(default=None, gt=0)
    color: bool | None = None
    verbosity: int = 0
    reporters: list[str] = Field(default_factory=lambda: [CONSOLE_REPORTER])
    reporter_options: dict[str, dict[str, Any]] = Field(default_factory=dict)
    log_level: str | None = None

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str | None) -> str | None:
        if v is None:
            return v
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"unknown log level: {v}"
            raise ValueError(msg)
        return level

    def apply_log_level(self) -> None:
        if self.log_level is not None:
            logging.getLogger("testbench").setLevel(self.log_level)

    def build_reporters(self, console: Console | None = None) -> list[Reporter]:
        """Instantiate the configured reporters.

        The console reporter receives ``console``, ``color``, and
        ``verbosity`` unless its options set them explicitly.
        """
        from testbench.reports import resolve_reporters

        options = {name: dict(opts) for name, opts in self.reporter_options.items()}
        for name in self.reporters:
            if name.rsplit(":", 1)[-1].rsplit(".", 1)[-1] != CONSOLE_REPORTER:
                continue
            opts = options.setdefault(name, {})
            opts.setdefault("console", console)
            opts.setdefault("color", self.color)
            opts.setdefault("verbosity", self.verbosity)
        return resolve_reporters(self.reporters, options)


DEFAULT_CONFIG = HarnessConfig()


def find_pyproject(start: Path | None = None) -> Path | None:
    """Return the nearest pyproject.toml at or above ``start``."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / PYPROJECT
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> HarnessConfig:
    """Load ``[tool.testbench]`` from the nearest pyproject.toml.

    Missing file or table yields the defaults.

    Raises:
        ConfigError: If the file cannot be parsed or the table is invalid.
    """
    path = find_pyproject(start)
    if path is None:
        return HarnessConfig()

    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(str(path), exc) from exc

    table = data.get("tool", {}).get("testbench", {})
    try:
        return HarnessConfig.model_validate(table)
    except ValidationError as exc:
        raise ConfigError(str(path), exc) from exc
