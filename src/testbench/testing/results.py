"""Verdicts, run counters, and the aggregator that reports them."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, field_validator

from testbench.context import ContextStack
from testbench.testing.control import truncate_message

if TYPE_CHECKING:
    from testbench.reports.base import Reporter


logger = logging.getLogger(__name__)


class Verdict(BaseModel):
    """Outcome of one isolated case.

    Attributes:
    ----------
    passed: bool
        True iff the child exited with a raw wait status of zero
    message: str
        Failure message from the control channel, bounded to 255 bytes
    output: bytes
        Captured stdout/stderr; only kept for failed cases
    exit_status: int | None
        Decoded exit code (negative signal number if killed), None when no
        child was spawned
    """

    passed: bool
    message: str = ""
    output: bytes = b""
    exit_status: int | None = None

    @field_validator("message")
    @classmethod
    def _bound_message(cls, v: str) -> str:
        return truncate_message(v)

    @classmethod
    def spawn_failure(cls, reason: str) -> Verdict:
        return cls(passed=False, message=reason)


@dataclass(slots=True)
class CaseResult:
    """A verdict attributed to the case that produced it."""

    name: str
    depth: int
    verdict: Verdict
    duration_ms: float = 0

    @property
    def passed(self) -> bool:
        return self.verdict.passed


@dataclass
class RunState:
    """Counters and scope stack for a single run.

    Attributes
    ----------
    total
        Number of cases executed.
    failed
        Number of cases that did not pass; never exceeds ``total``.
    stack
        Context stack whose top is the current scope.
    unmet_expectations
        ``expect_failures`` blocks in which no case failed.
    """

    total: int = 0
    failed: int = 0
    stack: ContextStack = field(default_factory=ContextStack)
    unmet_expectations: int = 0

    @property
    def passed(self) -> int:
        return self.total - self.failed

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0


class ResultAggregator:
    """Updates the run counters and forwards every event to the reporters."""

    def __init__(self, state: RunState, reporters: Sequence[Reporter]) -> None:
        self.state = state
        self.reporters = list(reporters)

    def record_group_enter(self, name: str, depth: int) -> None:
        for reporter in self.reporters:
            reporter.on_group_enter(name, depth)

    def record_case(self, result: CaseResult) -> None:
        self.state.total += 1
        if not result.passed:
            self.state.failed += 1
        logger.debug(
            "Recorded case %r: %s (%d/%d failed)",
            result.name,
            "passed" if result.passed else "failed",
            self.state.failed,
            self.state.total,
        )
        for reporter in self.reporters:
            reporter.on_case_complete(result)

    def record_expectation(self, depth: int, met: bool) -> None:
        if not met:
            self.state.unmet_expectations += 1
        for reporter in self.reporters:
            reporter.on_expectation(depth, met)

    def summarize(self) -> int:
        """Report the final counts and return the process exit code."""
        for reporter in self.reporters:
            reporter.on_run_complete(self.state)
        return self.state.exit_code
