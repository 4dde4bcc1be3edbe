# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Grammar patterns and user-facing messages shared by the validators.

The message templates are surfaced verbatim to end users through the API
layer, so they double as documentation of the accepted formats.
"""

# DNS grammars. Written without nested ambiguous quantifiers so matching stays
# linear in the input length.
BASE_DOMAIN_REGEX = r"^[a-z\d](-*[a-z\d])+$"
DNS_NAME_REGEX = r"^([a-z\d](-*[a-z\d])*\.)+[a-z\d](-*[a-z\d])+$"
# Grammar as quoted to users; same language as DNS_NAME_REGEX
DNS_NAME_DISPLAY_REGEX = r"^([a-z\d]([\-]*[a-z\d]+)*\.)+[a-z\d]+([\-]*[a-z\d]+)+$"
WILDCARD_DOMAIN_REGEX = r"^(validateNoWildcardDNS\.).+\.?$"
WILDCARD_DOMAIN_PREFIX = "validateNoWildcardDNS."
# RFC 1123: domains cannot resemble ##.##.##.##
DOTTED_DECIMAL_REGEX = r"([\d]+\.){3}[\d]+"
HOSTNAME_REGEX = r"^[a-z0-9][a-z0-9\-\.]{0,61}[a-z0-9]$"

BASE_DOMAIN_MIN_LENGTH = 1  # exclusive
BASE_DOMAIN_MAX_LENGTH = 63  # exclusive
DNS_NAME_MAX_LENGTH = 255

# Permissive DNS name accepted in no_proxy lists (underscores, upper case)
NO_PROXY_DNS_NAME_REGEX = (
    r"^([a-zA-Z0-9_][a-zA-Z0-9_-]{0,62})(\.[a-zA-Z0-9_][a-zA-Z0-9_-]{0,62})*[._]?$"
)

# Installer arguments
INSTALLER_FLAG_REGEX = r"^-+.*"
INSTALLER_ARGS_VALUES_REGEX = r"""^[A-Za-z0-9@!#$%*()_+-=//.,";':{}\[\]]+$"""
ALLOWED_INSTALLER_FLAGS: tuple[str, ...] = (
    "--append-karg",
    "--delete-karg",
    "-n",
    "--copy-network",
    "--network-dir",
    "--save-partlabel",
    "--save-partindex",
    "--image-url",
    "--image-file",
)

# Word characters, optionally separated by single spaces
TAG_REGEX = r"^\w+( \w+)*$"

# URL bounds
URL_MIN_LENGTH = 3  # exclusive
URL_MAX_LENGTH = 2083  # exclusive
HTTP_SCHEME = "http"
HTTPS_SCHEME = "https"

NO_PROXY_WILDCARD = "*"

# =============================================================================
# User-facing messages
# =============================================================================

INSTALLER_UNEXPECTED_FLAG_MSG = (
    "found unexpected flag {arg} for installer - allowed flags are {allowed}"
)
INSTALLER_UNEXPECTED_VALUE_MSG = "found unexpected chars in value {arg} for installer"

DNS_FORMAT_MISMATCH_MSG = (
    "DNS format mismatch: {name} domain name is not valid. Must match regex "
    "[{regex}], be no more than 255 characters, and not be in dotted decimal "
    "format (##.##.##.##)"
)

HOSTNAME_FORMAT_MISMATCH_MSG = """Hostname format mismatch: {name} name is not valid.
Hostname must have a maximum length of 64 characters,
start and end with a lowercase alphanumerical character,
and can only contain lowercase alphanumerical characters, dashes, and periods."""

URL_FORMAT_INVALID_MSG = "URL '{url}' format is not valid"
URL_SCHEME_MSG = "The URL scheme must be http(s) and specified in the URL: '{url}'"

PROXY_FORMAT_INVALID_MSG = "Proxy URL format is not valid: '{url}'"
PROXY_HTTPS_UNSUPPORTED_MSG = (
    "The URL scheme must be http; https is currently not supported: '{url}'"
)
PROXY_SCHEME_MSG = "The URL scheme must be http and specified in the URL: '{url}'"

NO_PROXY_INVALID_ENTRY_MSG = "{entry} is not a valid no_proxy entry"
NO_PROXY_DUPLICATE_MSG = "duplicate no_proxy entry defined: {entry}"
NO_PROXY_GUIDANCE_MSG = (
    "NO Proxy is a comma-separated list of destination domain names, domains, "
    "IP addresses or other network CIDRs. A domain can be prefaced with '.' to "
    "include all subdomains of that domain. Use '*' to bypass proxy for all "
    "destinations with OpenShift 4.8 or later."
)

TAGS_FORMAT_MSG = (
    "Invalid format for Tags: {tags}. Tags should be a comma-separated list "
    "(e.g. tag1,tag2,tag3). Each tag can consist of the following characters: "
    "Alphanumeric (aA-zZ, 0-9), underscore (_) and white-spaces."
)

CERTIFICATE_DECODE_MSG = "failed to decode certificate"
CERTIFICATE_PARSE_MSG = "unable to parse certificate"
