"""
Ports — Protocol-based interfaces for infrastructure adapters.

Discovery needs exactly one thing from the outside world: the raw PEM bundle
of developer certificates. Parsing and reduction stay pure and are tested
against synthetic bundles through this port.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from railway.result import Result


@runtime_checkable
class PemBundleProvider(Protocol):
    """
    Port: fetch the raw credential buffer.

    Returns Result[bytes] holding zero or more concatenated PEM certificates,
    unparsed. Implementations report their own failures on the failure track
    (the `security` adapter uses SecurityCommandFailed).
    """

    def fetch_pem_bundle(self) -> Result[bytes]: ...
