"""Base reporter protocol for testbench output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from testbench.testing.results import CaseResult, RunState


class Reporter(Protocol):
    """Protocol defining the interface for run reporters.

    Every hook is called synchronously in the harness process, in declaration
    order, so reporters never see two cases at once.
    """

    def on_group_enter(self, name: str, depth: int) -> None:
        """Called when a group scope opens, before any of its cases run."""
        ...

    def on_case_complete(self, result: CaseResult) -> None:
        """Called after each case's child has terminated."""
        ...

    def on_expectation(self, depth: int, met: bool) -> None:
        """Called when an ``expect_failures`` block closes."""
        ...

    def on_run_complete(self, state: RunState) -> None:
        """Called once, from ``Harness.results()``."""
        ...


REPORTER_HOOKS = ("on_group_enter", "on_case_complete", "on_expectation", "on_run_complete")


def missing_hooks(cls: type) -> list[str]:
    """Names from :data:`REPORTER_HOOKS` that ``cls`` does not define as callables."""
    return [hook for hook in REPORTER_HOOKS if not callable(getattr(cls, hook, None))]
