"""Reporting module for testbench output."""

from testbench.reports.base import Reporter
from testbench.reports.console import ConsoleReporter
from testbench.reports.registry import (
    clear_reporter_registry,
    get_reporter_registry,
    register_builtin,
    reporter,
    resolve_reporter,
    resolve_reporters,
)


register_builtin(ConsoleReporter)

__all__ = [
    "ConsoleReporter",
    "Reporter",
    "clear_reporter_registry",
    "get_reporter_registry",
    "register_builtin",
    "reporter",
    "resolve_reporter",
    "resolve_reporters",
]
