"""
Error taxonomy for development-team discovery.

A closed set of four variants, all subclasses of TeamDiscoveryError. They never
propagate as raised exceptions: each one rides the railway failure track as the
`exception` of a FailureDescription, with its display text as the `message`.
Callers that need to branch on kind recover the instance with discovery_error().

    match discovery_error(result):
        case X509FieldMissing(field=field):
            ...
        case SecurityCommandFailed():
            ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, TypeVar

from railway import ErrorCode, FailureDescription
from railway.result import Failure, Result

if TYPE_CHECKING:
    from signing_teams.domain.subject import SubjectField

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class CommandError:
    """
    Why an external command did not produce usable output.

    `returncode` is None when the process never ran (executable missing,
    permission denied); `exception` then holds the OSError raised on spawn.
    """

    argv: tuple[str, ...]
    returncode: int | None = None
    stderr: bytes = field(default=b"", repr=False)
    exception: OSError | None = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.exception is not None:
            return f"could not run {self.argv[0]!r}: {self.exception}"
        message = f"{' '.join(self.argv)!r} exited with status {self.returncode}"
        detail = self.stderr.decode("utf-8", errors="replace").strip()
        return f"{message}: {detail}" if detail else message


class TeamDiscoveryError(Exception):
    """Base of the discovery error variants."""

    code: ClassVar[ErrorCode] = ErrorCode.VALIDATION_ERROR

    def describe(self) -> FailureDescription:
        return FailureDescription(self.code, str(self), self)

    def to_result(self) -> Result[Any]:
        """Place this error on the failure track."""
        return Failure(self.describe())


class SecurityCommandFailed(TeamDiscoveryError):
    """The `security` command was missing, could not be spawned, or exited non-zero."""

    code = ErrorCode.EXTERNAL_SERVICE_ERROR
    __match_args__ = ("error",)

    def __init__(self, error: CommandError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"Failed to call `security` command: {self.error}"


class _WrappedCauseError(TeamDiscoveryError):
    __match_args__ = ("cause",)

    def __init__(self, cause: Exception) -> None:
        super().__init__(cause)
        self.cause = cause

    @classmethod
    def capture(cls, computation: Callable[[], T]) -> Result[T]:
        """Run `computation`, turning anything it raises into this error on the failure track."""
        return Result.from_computation(computation, cls.code, cls.__name__).map_failure(
            lambda err: cls(err.exception).describe()
        )


class X509ParseFailed(_WrappedCauseError):
    """The credential buffer is not a well-formed stack of PEM certificates."""

    def __str__(self) -> str:
        return f"Failed to parse X509 cert: {self.cause}"


class X509FieldMissing(TeamDiscoveryError):
    """A certificate subject lacks a required attribute (or carries it empty)."""

    __match_args__ = ("field",)

    def __init__(self, field: SubjectField) -> None:
        super().__init__(field)
        self.field = field

    def __str__(self) -> str:
        return f"Missing X509 field: {self.field.label} ({self.field.value})"


class FieldNotValidUtf8(_WrappedCauseError):
    """A subject attribute's bytes could not be decoded as text."""

    def __str__(self) -> str:
        return f"Field contained invalid UTF-8: {self.cause}"


def discovery_error(result: Result[Any]) -> TeamDiscoveryError | None:
    """Return the discovery error carried by a failed Result, or None."""
    match result:
        case Failure(err) if isinstance(err.exception, TeamDiscoveryError):
            return err.exception
    return None
