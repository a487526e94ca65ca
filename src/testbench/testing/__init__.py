"""Isolated case execution and the declaration surface around it."""

from .control import CaseFailed, CasePassed, ControlTransfer, check, fail, pass_
from .results import CaseResult, ResultAggregator, RunState, Verdict
from .isolation import IsolatedCase, run_case
from .units import TestUnit, test
from .harness import Harness


__all__ = [
    "CaseFailed",
    "CasePassed",
    "CaseResult",
    "ControlTransfer",
    "Harness",
    "IsolatedCase",
    "ResultAggregator",
    "RunState",
    "TestUnit",
    "Verdict",
    "check",
    "fail",
    "pass_",
    "run_case",
    "test",
]
