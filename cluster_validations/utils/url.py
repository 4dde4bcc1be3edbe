# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""URL parsing utilities for cluster-validations.

Parsing goes through ``httpx.URL`` so the rules match the HTTP client the
API layer talks through. ``httpx`` is forgiving (it strips surrounding
whitespace and re-quotes bad escapes), so inputs it would silently repair
are rejected before they reach it.
"""

import re

import httpx
import validators

from cluster_validations.core.constants import URL_MAX_LENGTH, URL_MIN_LENGTH

# A '%' not followed by two hex digits
_BAD_PERCENT_ESCAPE_PATTERN: re.Pattern[str] = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _has_whitespace_or_control(url: str) -> bool:
    return any(char.isspace() or not char.isprintable() for char in url)


def parse_url(url: str) -> httpx.URL:
    """Parse a URL string.

    Args:
        url: A URL string (e.g., "http://proxy.example.com:3128").

    Returns:
        The parsed URL. The scheme is lowercased; it is empty when the input
        has none.

    Raises:
        httpx.InvalidURL: If the string holds whitespace, control characters
            or a malformed percent escape, or cannot be parsed as a URL.
    """
    if _has_whitespace_or_control(url):
        raise httpx.InvalidURL(f"Invalid character in URL: {url!r}")
    if _BAD_PERCENT_ESCAPE_PATTERN.search(url):
        raise httpx.InvalidURL(f"Invalid percent escape in URL: {url!r}")
    return httpx.URL(url)


def is_url(url: str) -> bool:
    """Check whether a string is a well formed URL with a usable host.

    The host, port and user info checks are delegated to
    ``validators.url`` with single-label hosts allowed. On top of it a
    scheme is optional: inputs holding a colon but no ``://`` (e.g.
    ``proxy.local:3128``) are read as if prefixed with ``http://``, and
    scheme-less inputs without a port need a dot to be told apart from a
    bare word.

    Examples:
        is_url("http://proxy.example.com:3128")
        # Returns: True

        is_url("proxy.example.com")
        # Returns: True

        is_url("proxy")
        # Returns: False
    """
    if not url or not URL_MIN_LENGTH < len(url) < URL_MAX_LENGTH:
        return False
    if url.startswith("."):
        return False

    candidate = url
    if "://" not in url:
        if ":" not in url and "." not in url:
            return False
        candidate = f"http://{url}"

    try:
        parse_url(candidate)
    except httpx.InvalidURL:
        return False

    return validators.url(candidate, simple_host=True) is True
