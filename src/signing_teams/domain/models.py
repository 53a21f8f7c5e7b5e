"""
Domain models — the development team value object.

A Team is the (organization name, organizational unit) pair taken from a
code-signing certificate subject. Instances are frozen and ordered by
(name, id), which is what de-duplication and output order rely on.
"""

from __future__ import annotations

from dataclasses import dataclass

from asn1crypto import x509 as asn1_x509
from cryptography import x509
from cryptography.hazmat.primitives.serialization import Encoding
from railway.result import Result

from signing_teams.domain.errors import X509ParseFailed
from signing_teams.domain.subject import SubjectField, get_x509_field


def _subject_of(cert: x509.Certificate) -> Result[asn1_x509.Name]:
    """Re-read the certificate's DER with asn1crypto to reach the raw subject."""
    return X509ParseFailed.capture(
        lambda: asn1_x509.Certificate.load(cert.public_bytes(Encoding.DER)).subject
    )


@dataclass(frozen=True, slots=True, order=True)
class Team:
    """
    A code-signing development team.

    `name` is the subject organizationName (O), `id` the organizationalUnitName (OU),
    e.g. Team(name="Acme Corp", id="ABC123DEF4").
    """

    name: str
    id: str

    @classmethod
    def from_certificate(cls, cert: x509.Certificate) -> Result[Team]:
        """
        Build a Team from a certificate subject.

        Reads organizationName, then organizationalUnitName. The first failure
        (X509FieldMissing or FieldNotValidUtf8) is returned as-is; there is
        no defaulting of either field.
        """
        return _subject_of(cert).flat_map(
            lambda subject: get_x509_field(subject, SubjectField.ORGANIZATION_NAME).flat_map(
                lambda name: get_x509_field(subject, SubjectField.ORGANIZATIONAL_UNIT_NAME).map(
                    lambda team_id: cls(name=name, id=team_id)
                )
            )
        )
