"""
Shared test fixtures for the signing-teams test suite.

Certificates are generated on the fly with cryptography's CertificateBuilder,
so no keychain or fixture files are needed. Subjects are fully controllable:
missing attributes, repeated attributes, alternative string types, and
(via byte patching) values that are not valid UTF-8.
"""

from __future__ import annotations

import datetime
from collections.abc import Callable

import pytest
from asn1crypto import pem
from cryptography import x509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import Encoding
from cryptography.x509.oid import NameOID

# Stands in for a subject value, then gets overwritten in the DER
# by the same number of bytes that are not valid UTF-8.
INVALID_UTF8_PLACEHOLDER = "PLACEHOLDER-ORGANIZATION"

type CertificateFactory = Callable[..., x509.Certificate]


@pytest.fixture(scope="session")
def signing_key() -> ec.EllipticCurvePrivateKey:
    """One EC key shared by every generated certificate (signatures are never checked)."""
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture()
def make_certificate(signing_key: ec.EllipticCurvePrivateKey) -> CertificateFactory:
    """
    Return a factory building a self-signed developer certificate.

    make_certificate("Acme Corp", "ABC123")             → O and OU set
    make_certificate("Acme Corp", None)                 → OU absent
    make_certificate(attributes=[NameAttribute, ...])   → exact subject
    """

    def _make(
        organization: str | None = "Acme Corp",
        unit: str | None = "ABC123",
        common_name: str = "Apple Development: Jane Doe (QWERTY1234)",
        attributes: list[x509.NameAttribute] | None = None,
    ) -> x509.Certificate:
        if attributes is None:
            attributes = [x509.NameAttribute(NameOID.COMMON_NAME, common_name)]
            if unit is not None:
                attributes.append(x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, unit))
            if organization is not None:
                attributes.append(x509.NameAttribute(NameOID.ORGANIZATION_NAME, organization))
        subject = x509.Name(attributes)
        now = datetime.datetime.now(datetime.UTC)
        return (
            x509.CertificateBuilder()
            .subject_name(subject)
            .issuer_name(x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "Test WWDR CA")]))
            .public_key(signing_key.public_key())
            .serial_number(x509.random_serial_number())
            .not_valid_before(now)
            .not_valid_after(now + datetime.timedelta(days=365))
            .sign(signing_key, hashes.SHA256())
        )

    return _make


@pytest.fixture()
def pem_bundle() -> Callable[..., bytes]:
    """Return a function concatenating certificates into one PEM buffer, in order."""

    def _bundle(*certs: x509.Certificate) -> bytes:
        return b"".join(cert.public_bytes(Encoding.PEM) for cert in certs)

    return _bundle


def _corrupt_placeholder(cert: x509.Certificate) -> bytes:
    """Overwrite the placeholder byte-for-byte with 0xFF, so every DER length stays valid."""
    placeholder = INVALID_UTF8_PLACEHOLDER.encode("ascii")
    der = cert.public_bytes(Encoding.DER).replace(placeholder, b"\xff" * len(placeholder))
    return pem.armor("CERTIFICATE", der)


@pytest.fixture()
def invalid_utf8_certificate_pem(make_certificate: CertificateFactory) -> bytes:
    """PEM of a certificate whose organizationName UTF8String holds 0xFF bytes."""
    return _corrupt_placeholder(
        make_certificate(organization=INVALID_UTF8_PLACEHOLDER, unit="ABC123")
    )


@pytest.fixture()
def invalid_utf8_unit_certificate_pem(make_certificate: CertificateFactory) -> bytes:
    """PEM of a certificate with a valid organizationName and an undecodable organizationalUnitName."""
    return _corrupt_placeholder(
        make_certificate(organization="Acme Corp", unit=INVALID_UTF8_PLACEHOLDER)
    )
