# --- BEGIN COPYRIGHT BLOCK ---
# Copyright (C) 2026 Red Hat, Inc.
# All rights reserved.
#
# License: GPL (version 3 or any later version).
# See LICENSE for details.
# --- END COPYRIGHT BLOCK ---

"""Client certificate chains from client-certificate messages.

Certificates are produced by third parties and the server logs whatever it
was given, so every field other than the subject and issuer DNs is read
leniently: a value that can not be parsed leaves that one attribute None.
"""

import binascii
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from cryptography import x509
from dsaccesslog import _decoding as d
from dsaccesslog._constants import (
    CERT_CERTIFICATE_BYTES,
    CERT_ISSUER_SUBJECT_DN,
    CERT_NOT_AFTER,
    CERT_NOT_BEFORE,
    CERT_SERIAL_NUMBER,
    CERT_SIGNATURE_ALGORITHM,
    CERT_SIGNATURE_BYTES,
    CERT_STRING_REPRESENTATION,
    CERT_SUBJECT_DN,
    CERT_TYPE,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Certificate:
    subject_dn: Optional[str] = d.wire(CERT_SUBJECT_DN, d.string)
    issuer_dn: Optional[str] = d.wire(CERT_ISSUER_SUBJECT_DN, d.string)
    certificate_type: Optional[str] = \
        d.wire(CERT_TYPE, d.string, tolerant=True)
    not_before: Optional[datetime] = \
        d.wire(CERT_NOT_BEFORE, d.timestamp, tolerant=True)
    not_after: Optional[datetime] = \
        d.wire(CERT_NOT_AFTER, d.timestamp, tolerant=True)
    serial_number: Optional[str] = \
        d.wire(CERT_SERIAL_NUMBER, d.string, tolerant=True)
    signature_algorithm: Optional[str] = \
        d.wire(CERT_SIGNATURE_ALGORITHM, d.string, tolerant=True)
    signature_bytes: Optional[str] = \
        d.wire(CERT_SIGNATURE_BYTES, d.string, tolerant=True, repr=False)
    certificate_bytes: Optional[str] = \
        d.wire(CERT_CERTIFICATE_BYTES, d.string, tolerant=True, repr=False)
    string_representation: Optional[str] = \
        d.wire(CERT_STRING_REPRESENTATION, d.string, tolerant=True,
               repr=False)

    @classmethod
    def decode(cls, fields):
        return d.build(cls, fields)

    def to_x509(self):
        """Decode the logged DER bytes of the certificate.

        The server only logs the encoded certificate when configured to, so
        this returns None when ``certificate_bytes`` is absent or is not a
        valid hex encoded DER certificate.

        :returns: cryptography.x509.Certificate or None
        """
        if self.certificate_bytes is None:
            return None
        try:
            der = binascii.unhexlify(self.certificate_bytes.replace(':', ''))
            return x509.load_der_x509_certificate(der)
        except (binascii.Error, ValueError) as e:
            log.debug("Unable to decode certificate %s: %s",
                      self.subject_dn, e)
            return None


def decode_certificate(fields):
    """
    :param fields: One entry of the certificateChain array
    :type fields: RecordFields
    :returns: Certificate
    """
    return Certificate.decode(fields)


decode_certificate_chain = d.nested_list(decode_certificate)
