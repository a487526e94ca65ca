"""Harness error types."""


class HarnessError(Exception):
    """Base class for errors raised by the harness itself."""


class NestingError(HarnessError):
    """Raised when a scope is opened inside a case, which is always a leaf."""


class ConfigError(HarnessError):
    """Raised when the ``[tool.testbench]`` table cannot be validated."""

    def __init__(self, source: str, cause: Exception | None = None) -> None:
        self.source = source
        self.cause = cause
        message = f"Invalid testbench configuration in {source}"
        if cause:
            message += f"\n{cause}"
        super().__init__(message)
