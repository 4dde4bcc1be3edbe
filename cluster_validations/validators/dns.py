# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""DNS domain name and hostname validators.

A domain name is accepted when it satisfies either of two grammars, tried in
order:

1. Base domain: a single label of lowercase alphanumerics with internal
   hyphens, 2 to 62 characters long.
2. DNS name: dot-separated labels of the same alphabet, at most 255
   characters, not shaped like a dotted-decimal address.

A name may arrive wrapped in the wildcard marker
(``validateNoWildcardDNS.<domain>[.]``), in which case the unwrapped domain
is checked instead.
"""

import re

from cluster_validations.core.constants import (
    BASE_DOMAIN_MAX_LENGTH,
    BASE_DOMAIN_MIN_LENGTH,
    BASE_DOMAIN_REGEX,
    DNS_FORMAT_MISMATCH_MSG,
    DNS_NAME_DISPLAY_REGEX,
    DNS_NAME_MAX_LENGTH,
    DNS_NAME_REGEX,
    DOTTED_DECIMAL_REGEX,
    HOSTNAME_FORMAT_MISMATCH_MSG,
    HOSTNAME_REGEX,
    WILDCARD_DOMAIN_PREFIX,
    WILDCARD_DOMAIN_REGEX,
)
from cluster_validations.core.errors import (
    FormatError,
    InternalValidationError,
    ValidationError,
)
from cluster_validations.core.http_constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_INTERNAL_SERVER_ERROR,
)
from cluster_validations.core.types import DomainValidationResult
from cluster_validations.validators.common import full_match


def unwrap_wildcard_domain(domain_name: str) -> str:
    """Strip the wildcard marker prefix and one trailing dot, if present.

    Example:
        >>> unwrap_wildcard_domain("validateNoWildcardDNS.example.com.")
        'example.com'
        >>> unwrap_wildcard_domain("example.com.")
        'example.com.'
    """
    if not full_match(WILDCARD_DOMAIN_REGEX, domain_name):
        return domain_name
    trimmed = domain_name.removeprefix(WILDCARD_DOMAIN_PREFIX)
    return trimmed.removesuffix(".")


def is_base_domain(domain_name: str) -> bool:
    """Check the single-label base domain grammar, length bounds included."""
    if not full_match(BASE_DOMAIN_REGEX, domain_name):
        return False
    return BASE_DOMAIN_MIN_LENGTH < len(domain_name) < BASE_DOMAIN_MAX_LENGTH


def is_dotted_decimal_domain(domain_name: str) -> bool:
    """Check whether the name contains a ``##.##.##.##`` run anywhere.

    RFC 1123 states that domains cannot resemble this format.
    """
    return re.search(DOTTED_DECIMAL_REGEX, domain_name, re.ASCII) is not None


def is_dns_name_format(domain_name: str) -> bool:
    """Check the dotted DNS name grammar, length and dotted-decimal rules."""
    if not full_match(DNS_NAME_REGEX, domain_name):
        return False
    if is_dotted_decimal_domain(domain_name):
        return False
    return len(domain_name) <= DNS_NAME_MAX_LENGTH


def validate_domain_name_format(dns_domain_name: str) -> DomainValidationResult:
    """Validate a base domain or fully qualified DNS name.

    Args:
        dns_domain_name: The domain, optionally in wildcard-marker form.

    Returns:
        A ``(status, error)`` pair. ``(0, None)`` when valid,
        ``(400, FormatError)`` when the name matches neither grammar and
        ``(500, InternalValidationError)`` when a pattern fails to compile.
    """
    try:
        domain_name = unwrap_wildcard_domain(dns_domain_name)
    except re.error as e:
        return DomainValidationResult(
            HTTP_STATUS_INTERNAL_SERVER_ERROR,
            InternalValidationError(
                f"Wildcard DNS domain validation for {dns_domain_name}", e
            ),
        )

    try:
        if is_base_domain(domain_name):
            return DomainValidationResult.success()
    except re.error as e:
        return DomainValidationResult(
            HTTP_STATUS_INTERNAL_SERVER_ERROR,
            InternalValidationError(
                f"Single DNS base domain validation for {dns_domain_name}", e
            ),
        )

    try:
        matched = is_dns_name_format(domain_name)
    except re.error as e:
        return DomainValidationResult(
            HTTP_STATUS_INTERNAL_SERVER_ERROR,
            InternalValidationError(f"DNS name validation for {dns_domain_name}", e),
        )

    if not matched:
        return DomainValidationResult(
            HTTP_STATUS_BAD_REQUEST,
            FormatError(
                DNS_FORMAT_MISMATCH_MSG.format(
                    name=dns_domain_name, regex=DNS_NAME_DISPLAY_REGEX
                )
            ),
        )
    return DomainValidationResult.success()


def validate_hostname(name: str) -> ValidationError | None:
    """Validate a host name.

    Starts and ends with a lowercase alphanumeric character, 2 to 64
    characters, lowercase alphanumerics, dashes and periods in between.
    """
    try:
        matched = full_match(HOSTNAME_REGEX, name)
    except re.error as e:
        return InternalValidationError(f"Hostname validation for {name}", e)
    if not matched:
        return FormatError(HOSTNAME_FORMAT_MISMATCH_MSG.format(name=name))
    return None
