# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""CA certificate validator.

The check is structural: the certificate (or bundle) must decode from
base64 and hold at least one PEM certificate that parses. Trust, expiry and
chain building are not evaluated.
"""

import base64
import binascii
import re

from cryptography import x509

from cluster_validations.core.constants import (
    CERTIFICATE_DECODE_MSG,
    CERTIFICATE_PARSE_MSG,
)
from cluster_validations.core.errors import DecodeError, ValidationError

_PEM_CERTIFICATE_PATTERN: re.Pattern[bytes] = re.compile(
    rb"-----BEGIN CERTIFICATE-----\r?\n.+?\r?\n-----END CERTIFICATE-----",
    re.DOTALL,
)


def decode_certificate(certificate: str) -> bytes:
    """Decode standard base64, ignoring line breaks.

    Raises:
        binascii.Error: If the input is not valid base64.
    """
    compact = certificate.replace("\r", "").replace("\n", "")
    return base64.b64decode(compact, validate=True)


def load_pem_certificates(data: bytes) -> list[x509.Certificate]:
    """Load every parseable certificate from PEM data.

    Blocks that fail to parse are skipped, as are blocks of other types.
    """
    certificates = []
    for match in _PEM_CERTIFICATE_PATTERN.finditer(data):
        try:
            certificates.append(x509.load_pem_x509_certificate(match.group(0)))
        except ValueError:
            continue
    return certificates


def validate_ca_certificate(certificate: str) -> ValidationError | None:
    """Ensure a base64 encoded CA certificate decodes and parses.

    Returns:
        None when at least one certificate parses, a ``DecodeError`` naming
        the decode failure or one reporting that nothing could be parsed.
    """
    try:
        decoded = decode_certificate(certificate)
    except (binascii.Error, ValueError) as e:
        return DecodeError(CERTIFICATE_DECODE_MSG, e)

    if not load_pem_certificates(decoded):
        return DecodeError(CERTIFICATE_PARSE_MSG)
    return None
