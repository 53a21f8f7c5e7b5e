"""
signing_teams — discover code-signing development teams.

Queries the macOS keychain through the `security` tool, parses the returned
PEM certificate chain, and reduces the subjects to a sorted, duplicate-free
list of (organization name, organizational unit) pairs.

Built on the Railway-Oriented Programming (ROP) framework: every operation
returns a Result, and the four discovery error kinds travel on its failure
track.

    result = find_development_teams()
    if result.is_success():
        for team in result.value():
            print(team.name, team.id)
"""

__version__ = "0.1.0"

from signing_teams.log_defaults import install_default_logging  # noqa: E402

install_default_logging()

from signing_teams.domain.errors import (  # noqa: E402
    CommandError,
    FieldNotValidUtf8,
    SecurityCommandFailed,
    TeamDiscoveryError,
    X509FieldMissing,
    X509ParseFailed,
    discovery_error,
)
from signing_teams.domain.models import Team  # noqa: E402
from signing_teams.domain.subject import SubjectField, get_x509_field  # noqa: E402
from signing_teams.pipeline import find_development_teams, parse_teams  # noqa: E402

__all__ = [
    "CommandError",
    "FieldNotValidUtf8",
    "SecurityCommandFailed",
    "SubjectField",
    "Team",
    "TeamDiscoveryError",
    "X509FieldMissing",
    "X509ParseFailed",
    "discovery_error",
    "find_development_teams",
    "get_x509_field",
    "parse_teams",
]
