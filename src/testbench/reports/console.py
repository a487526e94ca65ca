"""Indented, colorized console output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from testbench.context.output_capture import reindent

if TYPE_CHECKING:
    from testbench.testing.results import CaseResult, RunState


PASS_GLYPH = "✓"
FAIL_GLYPH = "✗"


def make_console(color: bool | None = None, *, stderr: bool = True) -> Console:
    """Console on stderr, or stdout with ``stderr=False``.

    ``color`` forces or disables styling.
    """
    if color is False:
        return Console(stderr=stderr, color_system=None, highlight=False, soft_wrap=True)
    return Console(stderr=stderr, force_terminal=color, highlight=False, soft_wrap=True)


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


class ConsoleReporter:
    """Prints groups and cases two spaces per nesting level.

    Lines at depth 1 are bold and preceded by a blank line. A failed case is
    followed by its message and by its captured output, reindented to the
    case's depth. The run summary goes to ``summary_console``, stdout unless
    an explicit ``console`` is given.
    """

    def __init__(
        self,
        console: Console | None = None,
        verbosity: int = 0,
        color: bool | None = None,
        summary_console: Console | None = None,
    ) -> None:
        self.console = console if console is not None else make_console(color)
        if summary_console is None:
            summary_console = console if console is not None else make_console(color, stderr=False)
        self.summary_console = summary_console
        self.verbosity = verbosity

    def _line(self, depth: int, text: Text) -> None:
        if depth == 1:
            self.console.print()
            text.stylize("bold")
        self.console.print(Text("  " * max(depth - 1, 0)) + text)

    def on_group_enter(self, name: str, depth: int) -> None:
        self._line(depth, Text(name))

    def on_case_complete(self, result: CaseResult) -> None:
        if result.passed:
            line = Text.assemble((f"{PASS_GLYPH} ", "green"), (result.name, "bright_black"))
        else:
            line = Text.assemble((f"{FAIL_GLYPH} ", "red"), (result.name, "white"))
        if self.verbosity > 0:
            line.append(f" ({result.duration_ms:.0f}ms)", style="dim")
        self._line(result.depth, line)

        if result.passed:
            return
        verdict = result.verdict
        if verdict.message:
            self._line(result.depth, Text(f"  {verdict.message}", style="red"))
        if verdict.output:
            self.console.print()
            for line_text in reindent(verdict.output, result.depth):
                self.console.print(Text(line_text))
            self.console.print()

    def on_expectation(self, depth: int, met: bool) -> None:
        if met:
            text = Text(f"    {PASS_GLYPH} This test was supposed to fail and did so", "green")
        else:
            text = Text(f"    {FAIL_GLYPH} This test was supposed to fail and didn't", "red")
        self._line(depth, text)

    def on_run_complete(self, state: RunState) -> None:
        self.summary_console.print()
        if not state.failed:
            summary = f"{PASS_GLYPH} {state.total} test{_plural(state.total)} complete."
            self.summary_console.print(Text(summary, style="bold green"))
        else:
            summary = (
                f"{FAIL_GLYPH} {state.failed} test{_plural(state.failed)} "
                f"out of {state.total} failed."
            )
            self.summary_console.print(Text(summary, style="bold red"))
        self.summary_console.print()