# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Free-text tag list validator."""

from cluster_validations.core.constants import TAG_REGEX, TAGS_FORMAT_MSG
from cluster_validations.core.errors import FormatError, ValidationError
from cluster_validations.validators.common import all_strings, full_match, split_list


def is_valid_tag(tag: str) -> bool:
    """Check a single tag: word characters, single inner spaces allowed.

    Examples:
        >>> is_valid_tag("tag 2")
        True
        >>> is_valid_tag(" tag")
        False
        >>> is_valid_tag("tag  2")
        False
    """
    return full_match(TAG_REGEX, tag)


def validate_tags(tags: str) -> ValidationError | None:
    """Validate a comma-separated tag list. An empty string means no tags."""
    if tags == "":
        return None
    if not all_strings(split_list(tags), is_valid_tag):
        return FormatError(TAGS_FORMAT_MSG.format(tags=tags))
    return None
