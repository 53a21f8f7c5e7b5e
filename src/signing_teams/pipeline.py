"""
Pipeline — development team discovery as a railway of stages.

  provider.fetch_pem_bundle()
    → load_certificate_stack(raw)
      → Team.from_certificate(cert) for every cert (first failure aborts)
        → reduce_teams(teams)

Each stage returns Result[T]; a failure short-circuits the rest. There are no
partial results: one certificate missing a field fails the whole call.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from cryptography import x509
from railway.result import Result

from signing_teams.adapters.pem_parser import load_certificate_stack
from signing_teams.adapters.security_command import SecurityCommandProvider
from signing_teams.domain.models import Team
from signing_teams.domain.ports import PemBundleProvider

log = structlog.get_logger()


def reduce_teams(teams: Iterable[Team]) -> list[Team]:
    """Drop duplicate (name, id) pairs and sort ascending by name, then id."""
    return sorted(set(teams))


def _teams_from_certificates(certs: list[x509.Certificate]) -> Result[list[Team]]:
    return Result.all_of(Team.from_certificate(cert) for cert in certs)


def parse_teams(raw: bytes) -> Result[list[Team]]:
    """
    Parse a PEM bundle into the canonical team list.

    Deterministic: the same bytes always give the same ordered list.
    An empty buffer gives Success([]).
    """
    return (
        load_certificate_stack(raw)
        .flat_map(_teams_from_certificates)
        .map(reduce_teams)
    )


def find_development_teams(
    provider: PemBundleProvider | None = None,
) -> Result[list[Team]]:
    """
    Discover the development teams available on this host.

    Uses the `security` command with default arguments unless another
    provider is injected.

    Returns Result[list[Team]], sorted and free of duplicates, or the
    failure of the first stage that failed (see signing_teams.domain.errors).
    """
    bundle_provider = provider if provider is not None else SecurityCommandProvider()
    return (
        bundle_provider.fetch_pem_bundle()
        .flat_map(parse_teams)
        .peek(lambda teams: log.info("teams.discovered", count=len(teams)))
        .peek_failure(lambda err: log.warning("teams.discovery_failed", error=err.message))
    )
