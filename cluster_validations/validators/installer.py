# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Installer argument sanitizer.

Arguments forwarded to the installer are checked token by token. Flags must
be on the allow-list and values are limited to a fixed character set.
"""

import re

from cluster_validations.core.constants import (
    ALLOWED_INSTALLER_FLAGS,
    INSTALLER_ARGS_VALUES_REGEX,
    INSTALLER_FLAG_REGEX,
    INSTALLER_UNEXPECTED_FLAG_MSG,
    INSTALLER_UNEXPECTED_VALUE_MSG,
)
from cluster_validations.core.errors import (
    FormatError,
    InternalValidationError,
    ValidationError,
)
from cluster_validations.validators.common import full_match


def _format_allowed_flags() -> str:
    return "[" + " ".join(ALLOWED_INSTALLER_FLAGS) + "]"


def validate_installer_args(args: list[str]) -> ValidationError | None:
    """Validate installer arguments, stopping at the first bad token.

    Any token starting with ``-`` is a flag and must exactly match an
    allowed flag. Every other token is a value and may only hold
    alphanumerics and ``@!#$%*()_+-=//.,";':{}[]``. Flag/value pairing and
    order are not checked.

    Args:
        args: Command-line style tokens, e.g. ``["--image-url", "http://x/y.iso"]``.

    Returns:
        None when every token is acceptable, otherwise the error for the
        first token that is not.
    """
    try:
        flag_re = re.compile(INSTALLER_FLAG_REGEX)
    except re.error as e:
        return InternalValidationError("Installer flag validation", e)

    for arg in args:
        if flag_re.match(arg):
            if arg not in ALLOWED_INSTALLER_FLAGS:
                return FormatError(
                    INSTALLER_UNEXPECTED_FLAG_MSG.format(
                        arg=arg, allowed=_format_allowed_flags()
                    )
                )
            continue

        try:
            matched = full_match(INSTALLER_ARGS_VALUES_REGEX, arg)
        except re.error as e:
            return InternalValidationError(f"Installer value validation for {arg}", e)
        if not matched:
            return FormatError(INSTALLER_UNEXPECTED_VALUE_MSG.format(arg=arg))

    return None
