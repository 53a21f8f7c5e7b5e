"""
PEM stack parser — turn the credential buffer into X.509 certificates.

Uses cryptography (PyCA) for PEM unarmoring and DER structure checks. Only
syntax is checked: no expiry, chain, or signature validation.

Container policy:
  - empty or whitespace-only buffer → no certificates (success, empty list)
  - any other buffer must hold at least one CERTIFICATE block, and every such
    block must decode, otherwise X509ParseFailed
"""

from __future__ import annotations

import structlog
from cryptography import x509
from railway.result import Result

from signing_teams.domain.errors import X509ParseFailed

log = structlog.get_logger()


def load_certificate_stack(raw: bytes) -> Result[list[x509.Certificate]]:
    """Parse concatenated PEM certificates, preserving their order in the buffer."""
    if not raw.strip():
        log.debug("pem.empty_bundle")
        return Result.success([])

    return X509ParseFailed.capture(lambda: x509.load_pem_x509_certificates(raw)).peek(
        lambda certs: log.debug("pem.loaded", certificates=len(certs))
    )
