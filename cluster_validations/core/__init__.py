"""Core components shared across cluster-validations."""

from cluster_validations.core.errors import (
    DecodeError,
    FormatError,
    InternalValidationError,
    ValidationError,
)
from cluster_validations.core.http_constants import (
    HTTP_STATUS_BAD_REQUEST,
    HTTP_STATUS_INTERNAL_SERVER_ERROR,
    HTTP_STATUS_NONE,
)
from cluster_validations.core.types import DomainValidationResult

__all__ = [
    # Errors
    "ValidationError",
    "FormatError",
    "DecodeError",
    "InternalValidationError",
    # Status hints
    "HTTP_STATUS_NONE",
    "HTTP_STATUS_BAD_REQUEST",
    "HTTP_STATUS_INTERNAL_SERVER_ERROR",
    # Results
    "DomainValidationResult",
]
