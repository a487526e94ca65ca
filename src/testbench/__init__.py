"""Testbench - nested test groups with fork-isolated test cases."""

from .config import HarnessConfig, load_config
from .context import CaseContext, current_case
from .errors import ConfigError, HarnessError, NestingError
from .testing import Harness, TestUnit, check, fail, pass_, run_case, test
from .types import ScopeKind
from .version import __version__


__all__ = [
    # Declaring and running
    "Harness",
    "TestUnit",
    "test",
    "run_case",
    # Inside a case body
    "check",
    "fail",
    "pass_",
    "current_case",
    "CaseContext",
    # Configuration
    "HarnessConfig",
    "load_config",
    # Errors
    "HarnessError",
    "NestingError",
    "ConfigError",
    "ScopeKind",
]
