# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Cluster settings validation.

Loads a cluster settings document and runs each populated field through its
validator, collecting one issue per failing field. This is the check the API
layer performs before persisting user-supplied settings.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from cluster_validations.core.errors import ValidationError
from cluster_validations.core.http_constants import HTTP_STATUS_BAD_REQUEST
from cluster_validations.validators import (
    validate_additional_ntp_source,
    validate_ca_certificate,
    validate_domain_name_format,
    validate_hostname,
    validate_http_format,
    validate_http_proxy_format,
    validate_installer_args,
    validate_no_proxy_format,
    validate_tags,
)

logger = logging.getLogger(__name__)

NTP_SOURCE_INVALID_MSG = (
    "Invalid NTP source: {sources}. Each comma-separated source must be "
    "an IP address or a valid hostname."
)

_LIST_FIELDS = frozenset({"hostnames", "installer_args"})


class SettingsError(Exception):
    """Raised when a settings document cannot be read or has the wrong shape."""


@dataclass
class ClusterSettings:
    """User-supplied cluster settings. Fields left as None are not checked."""

    base_dns_domain: str | None = None
    hostnames: list[str] | None = None
    additional_ntp_source: str | None = None
    http_proxy: str | None = None
    https_proxy: str | None = None
    no_proxy: str | None = None
    ignition_endpoint_url: str | None = None
    tags: str | None = None
    installer_args: list[str] | None = None
    ca_certificate: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClusterSettings":
        """Build settings from a mapping, rejecting unknown keys and bad types.

        Raises:
            SettingsError: On unknown keys or values of the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise SettingsError(f"Unknown settings: {', '.join(unknown)}")

        for name, value in data.items():
            if value is None:
                continue
            if name in _LIST_FIELDS:
                if not isinstance(value, list) or not all(
                    isinstance(item, str) for item in value
                ):
                    raise SettingsError(f"'{name}' must be a list of strings")
            elif not isinstance(value, str):
                raise SettingsError(f"'{name}' must be a string")

        return cls(**data)


@dataclass(frozen=True)
class SettingsIssue:
    """A settings field that failed validation.

    Attributes:
        field: Name of the failing field.
        message: User-facing description of the accepted format.
        status: HTTP status the API layer would answer with.
    """

    field: str
    message: str
    status: int = HTTP_STATUS_BAD_REQUEST


@dataclass
class SettingsReport:
    """Outcome of validating a settings document."""

    checked: list[str] = field(default_factory=list)
    issues: list[SettingsIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        """All checked fields passed."""
        return not self.issues


def load_settings(path: Path) -> ClusterSettings:
    """Read cluster settings from a YAML file.

    An empty file yields empty settings.

    Raises:
        SettingsError: If the file cannot be read or parsed, or is not a mapping.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file {path}: {e}") from e

    # Handle empty file (yaml.safe_load returns None)
    if data is None:
        return ClusterSettings()
    if not isinstance(data, dict):
        raise SettingsError(f"Settings file {path} must contain a mapping")

    logger.debug("Loaded %d settings from %s", len(data), path)
    return ClusterSettings.from_dict(data)


def _check_domain(value: str) -> SettingsIssue | None:
    status, error = validate_domain_name_format(value)
    if error is None:
        return None
    return SettingsIssue("base_dns_domain", str(error), status)


def _check_hostnames(values: list[str]) -> SettingsIssue | None:
    for hostname in values:
        error = validate_hostname(hostname)
        if error is not None:
            return SettingsIssue("hostnames", str(error))
    return None


def _check_ntp_sources(value: str) -> SettingsIssue | None:
    if validate_additional_ntp_source(value):
        return None
    return SettingsIssue(
        "additional_ntp_source", NTP_SOURCE_INVALID_MSG.format(sources=value)
    )


def _issue_from(
    name: str, validator: Callable[[Any], ValidationError | None]
) -> Callable[[Any], SettingsIssue | None]:
    def check(value: Any) -> SettingsIssue | None:
        error = validator(value)
        if error is None:
            return None
        return SettingsIssue(name, str(error))

    return check


# Checks run in this order; each maps a field to its validator
_CHECKS: tuple[tuple[str, Callable[[Any], SettingsIssue | None]], ...] = (
    ("base_dns_domain", _check_domain),
    ("hostnames", _check_hostnames),
    ("additional_ntp_source", _check_ntp_sources),
    ("http_proxy", _issue_from("http_proxy", validate_http_proxy_format)),
    ("https_proxy", _issue_from("https_proxy", validate_http_proxy_format)),
    ("no_proxy", _issue_from("no_proxy", validate_no_proxy_format)),
    (
        "ignition_endpoint_url",
        _issue_from("ignition_endpoint_url", validate_http_format),
    ),
    ("tags", _issue_from("tags", validate_tags)),
    ("installer_args", _issue_from("installer_args", validate_installer_args)),
    ("ca_certificate", _issue_from("ca_certificate", validate_ca_certificate)),
)


def validate_settings(settings: ClusterSettings) -> SettingsReport:
    """Validate every populated field of the settings.

    Args:
        settings: The settings to check.

    Returns:
        A report listing the checked fields and one issue per failing field.
    """
    report = SettingsReport()
    for name, check in _CHECKS:
        value = getattr(settings, name)
        if value is None:
            continue

        report.checked.append(name)
        issue = check(value)
        if issue is None:
            logger.debug("Setting '%s' is valid", name)
            continue

        logger.debug("Setting '%s' failed validation: %s", name, issue.message)
        report.issues.append(issue)
    return report
