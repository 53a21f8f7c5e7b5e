"""
`security` command adapter — fetch developer certificates from the keychain.

Adapter layer — implements the PemBundleProvider port by running

    security find-certificate -p -a -c Developer: [keychain ...]

which prints every matching certificate as concatenated PEM blocks.
stdout and stderr are captured and stdin is closed. Only the exit status decides
success; stderr is kept for the error message. The bytes are returned
untouched: no parsing happens at this layer.

The call blocks until the process exits. There is no timeout here; callers
that need one own it.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

import structlog
from railway.result import Result

from signing_teams.domain.errors import CommandError, SecurityCommandFailed

log = structlog.get_logger()

DEFAULT_EXECUTABLE = "security"
DEFAULT_CERTIFICATE_NAME = "Developer:"


def build_command(
    executable: str = DEFAULT_EXECUTABLE,
    certificate_name: str = DEFAULT_CERTIFICATE_NAME,
    keychains: Sequence[str] = (),
) -> list[str]:
    """argv for a PEM (-p), all-matches (-a) search on the common name (-c)."""
    return [executable, "find-certificate", "-p", "-a", "-c", certificate_name, *keychains]


def get_pem_list(
    executable: str = DEFAULT_EXECUTABLE,
    certificate_name: str = DEFAULT_CERTIFICATE_NAME,
    keychains: Sequence[str] = (),
) -> Result[bytes]:
    """
    Run the certificate query and return its stdout verbatim.

    Returns Result.failure(EXTERNAL_SERVICE_ERROR) carrying SecurityCommandFailed
    when the executable is missing, cannot be spawned, or exits non-zero.
    """
    argv = build_command(executable, certificate_name, keychains)
    try:
        completed = subprocess.run(
            argv,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        log.error("security.spawn_failed", executable=executable, error=str(e))
        return SecurityCommandFailed(CommandError(argv=tuple(argv), exception=e)).to_result()

    if completed.returncode != 0:
        log.error(
            "security.command_failed",
            executable=executable,
            returncode=completed.returncode,
        )
        return SecurityCommandFailed(
            CommandError(
                argv=tuple(argv),
                returncode=completed.returncode,
                stderr=completed.stderr,
            )
        ).to_result()

    log.debug("security.command_complete", size_bytes=len(completed.stdout))
    return Result.success(completed.stdout)


class SecurityCommandProvider:
    """
    Fetch the developer certificate bundle through the `security` tool.

    Implements the PemBundleProvider port.
    """

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        certificate_name: str = DEFAULT_CERTIFICATE_NAME,
        keychains: Sequence[str] = (),
    ) -> None:
        self._executable = executable
        self._certificate_name = certificate_name
        self._keychains = tuple(keychains)

    def fetch_pem_bundle(self) -> Result[bytes]:
        return get_pem_list(self._executable, self._certificate_name, self._keychains)
