"""
Subject field extraction — read a single attribute out of an X.509 subject.

Works on the asn1crypto view of the subject rather than cryptography's decoded
Name: asn1crypto keeps the raw attribute bytes until `.native` is requested,
so a value that is not valid text for its ASN.1 string type surfaces here as
FieldNotValidUtf8 instead of failing the whole certificate load.

Lookup policy: a subject may repeat an attribute type. The FIRST entry in
encoding order wins; later duplicates are ignored.
"""

from __future__ import annotations

from enum import Enum

from asn1crypto import x509 as asn1_x509
from railway.result import Result

from signing_teams.domain.errors import FieldNotValidUtf8, X509FieldMissing


class SubjectField(Enum):
    """Subject attributes read by team discovery, keyed by dotted OID."""

    ORGANIZATION_NAME = "2.5.4.10"
    ORGANIZATIONAL_UNIT_NAME = "2.5.4.11"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    SubjectField.ORGANIZATION_NAME: "organizationName",
    SubjectField.ORGANIZATIONAL_UNIT_NAME: "organizationalUnitName",
}


def _first_attribute(
    name: asn1_x509.Name,
    field: SubjectField,
) -> asn1_x509.NameTypeAndValue | None:
    for rdn in name.chosen:
        for type_and_value in rdn:
            if type_and_value["type"].dotted == field.value:
                return type_and_value
    return None


def get_x509_field(name: asn1_x509.Name, field: SubjectField) -> Result[str]:
    """
    Return the text of the first `field` attribute in the subject `name`.

    Failures:
      - no such attribute, or its value is empty → X509FieldMissing(field)
      - value bytes not decodable for their string type → FieldNotValidUtf8
    """
    attribute = _first_attribute(name, field)
    if attribute is None:
        return X509FieldMissing(field).to_result()

    return (
        FieldNotValidUtf8.capture(lambda: attribute["value"].native)
        .flat_map(
            lambda text: Result.success(text) if text else X509FieldMissing(field).to_result()
        )
    )
