"""
Failure description — what travels on the failure track.

An ErrorCode classifies the failure coarsely; the FailureDescription carries the
human-readable message and, optionally, the exception that caused it. Domain code
that needs richer context (e.g. which certificate field was missing) attaches its
own exception instance and callers recover it from `exception`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum, unique
from typing import Optional


@unique
class ErrorCode(Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    """Input that cannot be interpreted: malformed data, missing fields, bad encoding."""

    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"
    """An external program failed or could not be started."""

    TECHNICAL_ERROR = "TECHNICAL_ERROR"
    """An exception escaped a computation run in an execution context."""


@dataclass(frozen=True, slots=True)
class FailureDescription:
    """
    >>> desc = FailureDescription(ErrorCode.VALIDATION_ERROR, "Missing X509 field")
    >>> desc.code.value, desc.message
    ('VALIDATION_ERROR', 'Missing X509 field')
    """

    code: ErrorCode
    message: str
    exception: Optional[BaseException] = field(default=None, repr=False)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
