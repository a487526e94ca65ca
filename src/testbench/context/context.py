"""Nested scope records and the stack that drives them."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterator

from testbench.errors import NestingError
from testbench.types import ScopeKind


logger = logging.getLogger(__name__)

SetupHook = Callable[[Any], Any]
TeardownHook = Callable[[Any, Any], Any]


@dataclass(slots=True)
class Context:
    """Scope record carrying the inherited fixture hooks.

    Attributes
    ----------
    kind
        Whether this is the root, a group, or a case.
    depth
        Nesting level; the root sits at 0.
    setup, setup_arg
        Hook called as ``setup(setup_arg)`` in the isolated child; its return
        value becomes the case fixtures.
    teardown, teardown_arg
        Hook called as ``teardown(teardown_arg, fixtures)`` after the body.
    """

    kind: ScopeKind = ScopeKind.ROOT
    depth: int = 0
    setup: SetupHook | None = None
    setup_arg: Any = None
    teardown: TeardownHook | None = None
    teardown_arg: Any = None

    def child(self, kind: ScopeKind) -> Context:
        """Copy the hooks into a new record one level deeper."""
        if self.kind is ScopeKind.CASE:
            msg = f"cannot open a {kind.value} scope inside a case"
            raise NestingError(msg)
        return dataclasses.replace(self, kind=kind, depth=self.depth + 1)


class ContextStack:
    """Owned stack of scope records with a single root at the bottom."""

    def __init__(self) -> None:
        self._frames: list[Context] = [Context()]

    @property
    def current(self) -> Context:
        return self._frames[-1]

    @property
    def root(self) -> Context:
        return self._frames[0]

    @property
    def depth(self) -> int:
        return self.current.depth

    def __len__(self) -> int:
        return len(self._frames)

    def enter(self, kind: ScopeKind) -> Context:
        """Push a child of the current context and make it current."""
        context = self.current.child(kind)
        self._frames.append(context)
        logger.debug("Entered %s scope at depth %d", kind.value, context.depth)
        return context

    def exit(self, previous: Context) -> None:
        """Make ``previous`` the current context again."""
        while len(self._frames) > 1 and self.current is not previous:
            self._frames.pop()
        logger.debug("Restored %s scope at depth %d", self.current.kind.value, self.depth)

    @contextmanager
    def scope(self, kind: ScopeKind) -> Iterator[Context]:
        previous = self.current
        context = self.enter(kind)
        try:
            yield context
        finally:
            self.exit(previous)

    def set_setup(self, hook: SetupHook | None, arg: Any = None) -> None:
        """Override the setup hook for the current scope and later descendants."""
        self.current.setup = hook
        self.current.setup_arg = arg

    def set_teardown(self, hook: TeardownHook | None, arg: Any = None) -> None:
        """Override the teardown hook for the current scope and later descendants."""
        self.current.teardown = hook
        self.current.teardown_arg = arg


@dataclass(frozen=True, slots=True)
class CaseContext:
    """The case currently running inside an isolated child.

    Attributes
    ----------
    name
        Display name of the case.
    depth
        Nesting level of the case.
    fixtures
        Value returned by the setup hook, or None.
    """

    name: str
    depth: int
    fixtures: Any = None


CASE_CONTEXT: ContextVar[CaseContext | None] = ContextVar("case_context", default=None)


def current_case() -> CaseContext | None:
    """Return the running case, or None outside an isolated child."""
    return CASE_CONTEXT.get()


@contextmanager
def case_context_scope(ctx: CaseContext) -> Iterator[None]:
    token = CASE_CONTEXT.set(ctx)
    try:
        yield
    finally:
        CASE_CONTEXT.reset(token)
