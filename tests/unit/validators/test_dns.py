# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Unit tests for domain name and hostname validators.

Focus: the boundaries between the base-domain and DNS-name grammars, the
wildcard marker, and the status hint separating bad input from internal
failures.
"""

import pytest
from _pytest.monkeypatch import MonkeyPatch

from cluster_validations.core.constants import DNS_NAME_DISPLAY_REGEX
from cluster_validations.core.errors import FormatError, InternalValidationError
from cluster_validations.core.http_constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_INTERNAL_SERVER_ERROR,
)
from cluster_validations.validators.dns import (
    is_base_domain,
    is_dns_name_format,
    is_dotted_decimal_domain,
    unwrap_wildcard_domain,
    validate_domain_name_format,
    validate_hostname,
)


class TestIsBaseDomain:
    """Tests for the single-label base domain grammar."""

    @pytest.mark.parametrize(
        "name",
        ["ab", "a1", "a-b", "a--b", "abc-123", "a" * 62, "a" + "-" * 60 + "b"],
    )
    def test_accepts_labels_within_bounds(self, name: str) -> None:
        """Lowercase alphanumeric labels of 2 to 62 characters are accepted."""
        assert is_base_domain(name) is True

    @pytest.mark.parametrize(
        "name",
        ["", "a", "a" * 63, "-ab", "ab-", "Ab", "a_b", "a.b", "ab\n"],
    )
    def test_rejects_invalid_labels(self, name: str) -> None:
        """Short, long, hyphen-edged, upper case and dotted labels are rejected."""
        assert is_base_domain(name) is False


class TestIsDnsNameFormat:
    """Tests for the dotted DNS name grammar."""

    @pytest.mark.parametrize(
        "name",
        ["example.com", "a.example.com", "my-cluster.example.co", "1a.b2.c3"],
    )
    def test_accepts_dotted_names(self, name: str) -> None:
        assert is_dns_name_format(name) is True

    @pytest.mark.parametrize(
        "name",
        [
            "example",  # single label
            "example.c",  # final label too short
            "example.com.",  # trailing dot
            ".example.com",
            "example..com",
            "-example.com",
            "example-.com",
            "Example.com",
            "exa_mple.com",
        ],
    )
    def test_rejects_malformed_names(self, name: str) -> None:
        assert is_dns_name_format(name) is False

    def test_rejects_dotted_decimal_names(self) -> None:
        """IPv4-shaped names are not domains even though the grammar matches."""
        assert is_dns_name_format("192.168.10.10") is False

    def test_rejects_names_longer_than_255_characters(self) -> None:
        name = ".".join(["a" * 60] * 5)

        assert len(name) > 255
        assert is_dns_name_format(name) is False

    def test_accepts_name_of_exactly_255_characters(self) -> None:
        name = ".".join(["a" * 63] * 4)

        assert len(name) == 255
        assert is_dns_name_format(name) is True


class TestIsDottedDecimalDomain:
    """Tests for dotted-decimal detection."""

    @pytest.mark.parametrize(
        "name", ["1.2.3.4", "192.168.1.1", "host1.2.3.4.example.com"]
    )
    def test_detects_dotted_decimal_runs(self, name: str) -> None:
        """The run is detected anywhere in the name, not only in full."""
        assert is_dotted_decimal_domain(name) is True

    @pytest.mark.parametrize("name", ["1.2.3", "example.com", "1.2.3.example"])
    def test_ignores_other_names(self, name: str) -> None:
        assert is_dotted_decimal_domain(name) is False


class TestUnwrapWildcardDomain:
    """Tests for the wildcard marker prefix."""

    def test_strips_prefix_and_trailing_dot(self) -> None:
        assert (
            unwrap_wildcard_domain("validateNoWildcardDNS.example.com.")
            == "example.com"
        )

    def test_strips_prefix_without_trailing_dot(self) -> None:
        assert unwrap_wildcard_domain("validateNoWildcardDNS.example.com") == (
            "example.com"
        )

    def test_leaves_unmarked_names_untouched(self) -> None:
        assert unwrap_wildcard_domain("example.com.") == "example.com."

    def test_bare_marker_is_not_unwrapped(self) -> None:
        """The marker must be followed by a domain to count as a marker."""
        assert unwrap_wildcard_domain("validateNoWildcardDNS.") == (
            "validateNoWildcardDNS."
        )


class TestValidateDomainNameFormat:
    """Tests for validate_domain_name_format()."""

    @pytest.mark.parametrize(
        "name",
        [
            "ab",
            "a" * 62,
            "example.com",
            "my-cluster.example.com",
            "validateNoWildcardDNS.example.com.",
            "validateNoWildcardDNS.example",
        ],
    )
    def test_valid_names_return_no_status(self, name: str) -> None:
        status, error = validate_domain_name_format(name)

        assert status == 0
        assert error is None

    @pytest.mark.parametrize(
        "name",
        [
            "a",
            "a" * 63,
            "192.168.1.1",
            "192.168.10.10",
            "Example.com",
            "example.com\n",
            "validateNoWildcardDNS.a.",
        ],
    )
    def test_invalid_names_return_bad_request(self, name: str) -> None:
        status, error = validate_domain_name_format(name)

        assert status == HTTP_STATUS_BAD_REQUEST
        assert isinstance(error, FormatError)

    def test_error_names_original_input_and_grammar(self) -> None:
        """The message quotes the input as given and the grammar it must match."""
        result = validate_domain_name_format("validateNoWildcardDNS.a.")

        assert result.error is not None
        message = str(result.error)
        assert message.startswith(
            "DNS format mismatch: validateNoWildcardDNS.a. domain name is not valid."
        )
        assert f"[{DNS_NAME_DISPLAY_REGEX}]" in message
        assert "no more than 255 characters" in message
        assert "(##.##.##.##)" in message

    def test_error_quotes_documented_grammar(self) -> None:
        _, error = validate_domain_name_format("a")

        assert error is not None
        assert (
            r"[^([a-z\d]([\-]*[a-z\d]+)*\.)+[a-z\d]+([\-]*[a-z\d]+)+$]" in str(error)
        )

    def test_result_ok_property(self) -> None:
        assert validate_domain_name_format("example.com").ok is True
        assert validate_domain_name_format("a").ok is False

    def test_broken_base_domain_pattern_returns_internal_error(
        self, monkeypatch: MonkeyPatch
    ) -> None:
        """A pattern that fails to compile is reported as an internal failure."""
        monkeypatch.setattr(
            "cluster_validations.validators.dns.BASE_DOMAIN_REGEX", "[unclosed"
        )

        status, error = validate_domain_name_format("example.com")

        assert status == HTTP_STATUS_INTERNAL_SERVER_ERROR
        assert isinstance(error, InternalValidationError)
        assert str(error).startswith(
            "Single DNS base domain validation for example.com"
        )

    def test_broken_dns_name_pattern_returns_internal_error(
        self, monkeypatch: MonkeyPatch
    ) -> None:
        monkeypatch.setattr(
            "cluster_validations.validators.dns.DNS_NAME_REGEX", "(unclosed"
        )

        status, error = validate_domain_name_format("example.com")

        assert status == HTTP_STATUS_INTERNAL_SERVER_ERROR
        assert isinstance(error, InternalValidationError)
        assert isinstance(error.cause, Exception)

    def test_repeated_validation_gives_same_verdict(self) -> None:
        for name in ("example.com", "192.168.1.1"):
            first = validate_domain_name_format(name)
            second = validate_domain_name_format(name)

            assert first.status == second.status
            assert str(first.error) == str(second.error)


class TestValidateHostname:
    """Tests for validate_hostname()."""

    @pytest.mark.parametrize(
        "name", ["my-host.example", "ab", "host1", "a" * 63, "node-0.cluster.local"]
    )
    def test_accepts_valid_hostnames(self, name: str) -> None:
        assert validate_hostname(name) is None

    @pytest.mark.parametrize(
        "name",
        [
            "-bad.example",
            "bad.example-",
            "a",
            "",
            "a" * 65,
            "My-Host",
            "host_name",
            "host name",
            "host\n",
        ],
    )
    def test_rejects_invalid_hostnames(self, name: str) -> None:
        assert isinstance(validate_hostname(name), FormatError)

    def test_error_describes_constraints(self) -> None:
        error = validate_hostname("-bad.example")

        assert error is not None
        message = str(error)
        assert message.startswith(
            "Hostname format mismatch: -bad.example name is not valid."
        )
        assert "maximum length of 64 characters" in message
        assert "start and end with a lowercase alphanumerical character" in message
        assert "dashes, and periods" in message
