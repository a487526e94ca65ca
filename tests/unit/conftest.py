"""Shared fixtures for unit tests."""

import io

import pytest
from rich.console import Console

from testbench import Harness, HarnessConfig
from testbench.testing.results import CaseResult, RunState


class RecordingReporter:
    """Reporter that keeps every event for inspection."""

    def __init__(self) -> None:
        self.events: list[tuple] = []
        self.cases: list[CaseResult] = []

    def on_group_enter(self, name: str, depth: int) -> None:
        self.events.append(("group", name, depth))

    def on_case_complete(self, result: CaseResult) -> None:
        self.cases.append(result)
        self.events.append(("case", result.name, result.depth, result.passed))

    def on_expectation(self, depth: int, met: bool) -> None:
        self.events.append(("expectation", depth, met))

    def on_run_complete(self, state: RunState) -> None:
        self.events.append(("summary", state.total, state.failed))

    def case(self, name: str) -> CaseResult:
        return next(c for c in self.cases if c.name == name)


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def harness(recorder) -> Harness:
    """Harness with default config that reports only to the recorder."""
    return Harness(config=HarnessConfig(), reporters=[recorder])


@pytest.fixture
def plain_console() -> Console:
    """Console writing unstyled text to a buffer."""
    return Console(
        file=io.StringIO(),
        color_system=None,
        highlight=False,
        soft_wrap=True,
        width=200,
    )
