# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Validators for network sources: NTP servers, HTTP(S) URLs and proxies.

The generic HTTP check accepts both ``http`` and ``https``. The proxy check
only accepts ``http``, and answers ``https`` with its own message because
proxy connections are made over plain HTTP.
"""

import httpx

from cluster_validations.core.constants import (
    HTTP_SCHEME,
    HTTPS_SCHEME,
    NO_PROXY_DUPLICATE_MSG,
    NO_PROXY_GUIDANCE_MSG,
    NO_PROXY_INVALID_ENTRY_MSG,
    NO_PROXY_WILDCARD,
    PROXY_FORMAT_INVALID_MSG,
    PROXY_HTTPS_UNSUPPORTED_MSG,
    PROXY_SCHEME_MSG,
    URL_FORMAT_INVALID_MSG,
    URL_SCHEME_MSG,
)
from cluster_validations.core.errors import FormatError, ValidationError
from cluster_validations.utils.addresses import is_cidr, is_dns_name, is_ip
from cluster_validations.utils.url import is_url, parse_url
from cluster_validations.validators.common import all_strings, split_list
from cluster_validations.validators.dns import validate_hostname


def validate_ntp_source(ntp_source: str) -> bool:
    """Check that a single NTP source is an IP address or a valid hostname."""
    if is_ip(ntp_source):
        return True
    return validate_hostname(ntp_source) is None


def validate_additional_ntp_source(comma_separated_ntp_sources: str) -> bool:
    """Check that every source of a comma-separated list is valid."""
    return all_strings(split_list(comma_separated_ntp_sources), validate_ntp_source)


def validate_http_format(url: str) -> ValidationError | None:
    """Validate that the URL parses and uses the http or https scheme."""
    try:
        parsed = parse_url(url)
    except httpx.InvalidURL as e:
        return FormatError(URL_FORMAT_INVALID_MSG.format(url=url), e)
    if parsed.scheme not in (HTTP_SCHEME, HTTPS_SCHEME):
        return FormatError(URL_SCHEME_MSG.format(url=url))
    return None


def validate_http_proxy_format(proxy_url: str) -> ValidationError | None:
    """Validate an HTTP or HTTPS proxy URL.

    The URL must be well formed and use the ``http`` scheme. ``https`` gets
    a dedicated message; a missing or any other scheme gets the generic one.
    """
    if not is_url(proxy_url):
        return FormatError(PROXY_FORMAT_INVALID_MSG.format(url=proxy_url))
    try:
        parsed = parse_url(proxy_url)
    except httpx.InvalidURL:
        return FormatError(PROXY_FORMAT_INVALID_MSG.format(url=proxy_url))

    if parsed.scheme == HTTPS_SCHEME:
        return FormatError(PROXY_HTTPS_UNSUPPORTED_MSG.format(url=proxy_url))
    if parsed.scheme != HTTP_SCHEME:
        return FormatError(PROXY_SCHEME_MSG.format(url=proxy_url))
    return None


def validate_no_proxy_entry(entry: str) -> ValidationError | None:
    """Validate one no_proxy entry.

    A leading ``.`` (all subdomains) is ignored; the rest must be an IP
    address, a CIDR block or a DNS name.
    """
    destination = entry.removeprefix(".")
    if is_ip(destination) or is_cidr(destination) or is_dns_name(destination):
        return None
    return FormatError(NO_PROXY_INVALID_ENTRY_MSG.format(entry=entry))


def validate_no_proxy_format(no_proxy: str) -> ValidationError | None:
    """Validate a comma-separated no_proxy list.

    ``*`` alone bypasses the proxy for every destination and is always
    valid. Otherwise entries are checked in order and the first invalid or
    repeated one is reported. Repeats are detected on the raw entries, so
    ``a.com`` and ``.a.com`` are distinct.
    """
    if no_proxy == NO_PROXY_WILDCARD:
        return None

    seen: set[str] = set()
    for entry in split_list(no_proxy):
        if entry in seen:
            return FormatError(NO_PROXY_DUPLICATE_MSG.format(entry=entry))

        error = validate_no_proxy_entry(entry)
        if error is not None:
            return FormatError(NO_PROXY_GUIDANCE_MSG, error)

        seen.add(entry)
    return None
