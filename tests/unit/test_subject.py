"""
Unit tests for subject field extraction (get_x509_field).

Works directly on asn1crypto Names so the raw-bytes behavior is tested
without going through cryptography's certificate loader.
"""

from __future__ import annotations

import pytest
from asn1crypto import pem
from asn1crypto import x509 as asn1_x509
from cryptography import x509
from cryptography.hazmat.primitives.serialization import Encoding
from cryptography.x509.name import _ASN1Type
from cryptography.x509.oid import NameOID
from railway import ErrorCode, ResultAssertions

from signing_teams import (
    FieldNotValidUtf8,
    SubjectField,
    X509FieldMissing,
    discovery_error,
    get_x509_field,
)


def _subject(cert: x509.Certificate) -> asn1_x509.Name:
    return asn1_x509.Certificate.load(cert.public_bytes(Encoding.DER)).subject


class TestSubjectField:
    def test_values_are_dotted_oids(self) -> None:
        assert SubjectField.ORGANIZATION_NAME.value == NameOID.ORGANIZATION_NAME.dotted_string
        assert (
            SubjectField.ORGANIZATIONAL_UNIT_NAME.value
            == NameOID.ORGANIZATIONAL_UNIT_NAME.dotted_string
        )

    def test_labels(self) -> None:
        assert SubjectField.ORGANIZATION_NAME.label == "organizationName"
        assert SubjectField.ORGANIZATIONAL_UNIT_NAME.label == "organizationalUnitName"


class TestGetX509Field:
    """Verify first-match lookup, missing fields, and text decoding."""

    @pytest.mark.parametrize(
        ("field", "expected"),
        [
            (SubjectField.ORGANIZATION_NAME, "Acme Corp"),
            (SubjectField.ORGANIZATIONAL_UNIT_NAME, "ABC123"),
        ],
    )
    def test_reads_field(self, make_certificate, field, expected) -> None:
        """
        GIVEN a subject with O and OU
        WHEN get_x509_field is called for each
        THEN the attribute text is returned.
        """
        name = _subject(make_certificate("Acme Corp", "ABC123"))
        ResultAssertions.assert_success_value(get_x509_field(name, field), expected)

    def test_first_entry_wins_for_repeated_attribute(self, make_certificate) -> None:
        """
        GIVEN a subject with two organizationName attributes
        WHEN get_x509_field is called
        THEN the first one in encoding order is returned.
        """
        cert = make_certificate(
            attributes=[
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, "First Org"),
                x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "ABC123"),
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, "Second Org"),
            ]
        )
        result = get_x509_field(_subject(cert), SubjectField.ORGANIZATION_NAME)
        ResultAssertions.assert_success_value(result, "First Org")

    def test_missing_field(self, make_certificate) -> None:
        """
        GIVEN a subject without organizationalUnitName
        WHEN get_x509_field is called for it
        THEN it fails with X509FieldMissing carrying the field identifier.
        """
        name = _subject(make_certificate("Acme Corp", None))
        result = get_x509_field(name, SubjectField.ORGANIZATIONAL_UNIT_NAME)

        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        ResultAssertions.assert_failure_message_contains(result, "organizationalUnitName")
        error = discovery_error(result)
        assert isinstance(error, X509FieldMissing)
        assert error.field is SubjectField.ORGANIZATIONAL_UNIT_NAME

    def test_empty_value_is_reported_missing(self, make_certificate) -> None:
        """
        GIVEN a subject whose organizationName is an empty string
        WHEN get_x509_field is called
        THEN it fails with X509FieldMissing rather than returning "".
        """
        cert = make_certificate(
            attributes=[
                x509.NameAttribute(NameOID.ORGANIZATION_NAME, "", _type=_ASN1Type.UTF8String),
                x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "ABC123"),
            ]
        )
        result = get_x509_field(_subject(cert), SubjectField.ORGANIZATION_NAME)
        assert isinstance(discovery_error(result), X509FieldMissing)

    def test_bmp_string_decodes(self, make_certificate) -> None:
        """
        GIVEN an organizationName encoded as BMPString
        WHEN get_x509_field is called
        THEN it decodes to the same text.
        """
        cert = make_certificate(
            attributes=[
                x509.NameAttribute(
                    NameOID.ORGANIZATION_NAME, "Ünïcode GmbH", _type=_ASN1Type.BMPString
                ),
                x509.NameAttribute(NameOID.ORGANIZATIONAL_UNIT_NAME, "ABC123"),
            ]
        )
        result = get_x509_field(_subject(cert), SubjectField.ORGANIZATION_NAME)
        ResultAssertions.assert_success_value(result, "Ünïcode GmbH")

    def test_invalid_utf8_fails(self, invalid_utf8_certificate_pem) -> None:
        """
        GIVEN an organizationName UTF8String containing 0xFF bytes
        WHEN get_x509_field is called
        THEN it fails with FieldNotValidUtf8, not a silent replacement.
        """
        _, _, der = pem.unarmor(invalid_utf8_certificate_pem)
        name = asn1_x509.Certificate.load(der).subject

        result = get_x509_field(name, SubjectField.ORGANIZATION_NAME)

        ResultAssertions.assert_failure(result, ErrorCode.VALIDATION_ERROR)
        error = discovery_error(result)
        assert isinstance(error, FieldNotValidUtf8)
        assert isinstance(error.cause, UnicodeDecodeError)

    def test_invalid_field_does_not_affect_other_fields(self, invalid_utf8_certificate_pem) -> None:
        """
        GIVEN a subject with an undecodable O but a valid OU
        WHEN get_x509_field is called for OU
        THEN it succeeds (extraction is per attribute).
        """
        _, _, der = pem.unarmor(invalid_utf8_certificate_pem)
        name = asn1_x509.Certificate.load(der).subject
        result = get_x509_field(name, SubjectField.ORGANIZATIONAL_UNIT_NAME)
        ResultAssertions.assert_success_value(result, "ABC123")

    def test_invalid_utf8_unit_fails(self, invalid_utf8_unit_certificate_pem) -> None:
        """
        GIVEN an organizationalUnitName UTF8String containing 0xFF bytes
        WHEN get_x509_field is called for it
        THEN it fails with FieldNotValidUtf8 (the attribute is present, not missing)
        AND organizationName still reads normally.
        """
        _, _, der = pem.unarmor(invalid_utf8_unit_certificate_pem)
        name = asn1_x509.Certificate.load(der).subject

        result = get_x509_field(name, SubjectField.ORGANIZATIONAL_UNIT_NAME)

        error = discovery_error(result)
        assert isinstance(error, FieldNotValidUtf8)
        assert not isinstance(error, X509FieldMissing)
        ResultAssertions.assert_success_value(
            get_x509_field(name, SubjectField.ORGANIZATION_NAME), "Acme Corp"
        )
