# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""Result types shared across cluster-validations."""

from typing import NamedTuple

from cluster_validations.core.errors import ValidationError
from cluster_validations.core.http_constants import HTTP_STATUS_NONE


class DomainValidationResult(NamedTuple):
    """Outcome of a domain-name check.

    Unpacks as ``status, error``. ``status`` is an HTTP status code the API
    layer can use as-is: 0 when the name is valid, 400 for malformed input
    and 500 when the validator itself failed.
    """

    status: int
    error: ValidationError | None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> "DomainValidationResult":
        return cls(HTTP_STATUS_NONE, None)
