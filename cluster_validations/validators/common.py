# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Common helpers shared by the validators."""

import re
from collections.abc import Callable, Iterable


def all_strings(values: Iterable[str], predicate: Callable[[str], bool]) -> bool:
    """Check that every value satisfies ``predicate``.

    Stops at the first value that fails. An empty iterable passes.

    Example:
        >>> all_strings(["a", "b"], str.isalpha)
        True
        >>> all_strings(["a", "1"], str.isalpha)
        False
    """
    for value in values:
        if not predicate(value):
            return False
    return True


def split_list(value: str) -> list[str]:
    """Split a comma-separated list without trimming or dropping entries.

    An empty string yields a single empty entry, so callers see it as an
    element to validate.
    """
    return value.split(",")


def full_match(pattern: str, value: str) -> bool:
    """Match ``pattern`` against the whole of ``value``.

    ASCII mode keeps ``\\d`` and ``\\w`` to their ASCII meaning, and full
    matching stops ``$`` from accepting a trailing newline.

    Raises:
        re.error: If the pattern does not compile.
    """
    return re.fullmatch(pattern, value, re.ASCII) is not None
