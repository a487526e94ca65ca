from .context import (
    CASE_CONTEXT,
    CaseContext,
    Context,
    ContextStack,
    case_context_scope,
    current_case,
)

__all__ = [
    "CASE_CONTEXT",
    "CaseContext",
    "Context",
    "ContextStack",
    "case_context_scope",
    "current_case",
]
