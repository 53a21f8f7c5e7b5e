"""
Railway-Oriented Programming (ROP) framework.

Explicit, composable error handling — stages return Result instead of raising.

    from railway import Result, ErrorCode

    def require_text(value: str) -> Result[str]:
        if not value:
            return Result.failure(ErrorCode.VALIDATION_ERROR, "Value is empty")
        return Result.success(value)

    result = (
        Result.success("Acme Corp")
        .flat_map(require_text)
        .map(str.upper)
    )
"""

from railway.result import Result, Success, Failure
from railway.failure import ErrorCode, FailureDescription
from railway.execution import (
    ExecutionContext,
    NoOpExecutionContext,
    LoggingExecutionContext,
)
from railway.assertions import ResultAssertions

__all__ = [
    "Result",
    "Success",
    "Failure",
    "ErrorCode",
    "FailureDescription",
    "ExecutionContext",
    "NoOpExecutionContext",
    "LoggingExecutionContext",
    "ResultAssertions",
]

__version__ = "1.1.0"
