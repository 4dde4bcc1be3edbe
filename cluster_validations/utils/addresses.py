# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Address predicates for IPs, CIDR blocks and loosely formed DNS names.

These are purely syntactic. Nothing here resolves names or touches the
network.
"""

import ipaddress
import re

from cluster_validations.core.constants import (
    DNS_NAME_MAX_LENGTH,
    NO_PROXY_DNS_NAME_REGEX,
)


def is_ip(value: str) -> bool:
    """Check whether the value is an IPv4 or IPv6 address.

    Examples:
        >>> is_ip("203.0.113.5")
        True
        >>> is_ip("2001:db8::1")
        True
        >>> is_ip("time.example.com")
        False
    """
    # Zoned IPv6 addresses (fe80::1%eth0) are not plain addresses
    if "%" in value:
        return False
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def is_cidr(value: str) -> bool:
    """Check whether the value is an ``address/prefix-length`` block.

    Host bits may be set (``10.0.0.1/8`` is accepted). Netmask notation such
    as ``10.0.0.0/255.0.0.0`` is not.
    """
    address, sep, prefix = value.partition("/")
    if not sep or not prefix.isascii() or not prefix.isdigit():
        return False
    if not is_ip(address):
        return False
    try:
        ipaddress.ip_network(value, strict=False)
    except ValueError:
        return False
    return True


def is_dns_name(value: str) -> bool:
    """Check whether the value looks like a DNS name.

    This is the lenient form used for proxy hosts and no_proxy entries:
    upper case and underscores are allowed, labels are at most 63
    characters, one trailing ``.`` or ``_`` is tolerated and the name holds
    at most 255 characters once dots are removed. IP addresses are not DNS
    names.
    """
    if not value or len(value.replace(".", "")) > DNS_NAME_MAX_LENGTH:
        return False
    if is_ip(value):
        return False
    return re.fullmatch(NO_PROXY_DNS_NAME_REGEX, value, re.ASCII) is not None
