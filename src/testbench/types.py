"""Shared types for the testbench harness."""

from enum import Enum


class ScopeKind(Enum):
    """Kind of a nesting scope on the context stack."""

    ROOT = "root"
    GROUP = "group"
    CASE = "case"  # Always a leaf


class Outcome(Enum):
    """How a case body returned to its resumption point."""

    FAILED = "failed"
    PASSED_EARLY = "passed_early"
    PASSED_NATURALLY = "passed_naturally"

    @property
    def passed(self) -> bool:
        return self is not Outcome.FAILED


# Bound on the failure message carried over the control channel, in bytes.
MESSAGE_MAX_LEN = 255
