# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Validators for user-supplied cluster settings.

Every validator is a pure function of its input. Boolean checks return a
verdict; the others return a ``ValidationError`` describing the first
problem found, or None. The domain-name check additionally returns an HTTP
status hint.
"""

from cluster_validations.validators.certificates import validate_ca_certificate
from cluster_validations.validators.common import all_strings
from cluster_validations.validators.dns import (
    is_base_domain,
    is_dns_name_format,
    is_dotted_decimal_domain,
    validate_domain_name_format,
    validate_hostname,
)
from cluster_validations.validators.installer import validate_installer_args
from cluster_validations.validators.network import (
    validate_additional_ntp_source,
    validate_http_format,
    validate_http_proxy_format,
    validate_no_proxy_entry,
    validate_no_proxy_format,
    validate_ntp_source,
)
from cluster_validations.validators.tags import is_valid_tag, validate_tags

__all__ = [
    "all_strings",
    "is_base_domain",
    "is_dns_name_format",
    "is_dotted_decimal_domain",
    "is_valid_tag",
    "validate_additional_ntp_source",
    "validate_ca_certificate",
    "validate_domain_name_format",
    "validate_hostname",
    "validate_http_format",
    "validate_http_proxy_format",
    "validate_installer_args",
    "validate_no_proxy_entry",
    "validate_no_proxy_format",
    "validate_ntp_source",
    "validate_tags",
]
