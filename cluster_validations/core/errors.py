# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt
"""Error types returned by the validators.

Validators never raise for bad input. They return one of these exceptions
(or None) and leave it to the caller to raise, log or render it. The class
tells the caller whether the input was at fault or the validator itself
failed, so no message inspection is needed to choose a response code.
"""


class ValidationError(Exception):
    """Base class for every error returned by a validator.

    Attributes:
        message: Human-readable text intended for end users.
        cause: The underlying error this one wraps, if any.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.message
        return f"{self.message}: {self.cause}"


class FormatError(ValidationError):
    """Input does not match the required grammar."""


class DecodeError(FormatError):
    """Input could not be decoded (base64 or PEM)."""


class InternalValidationError(ValidationError):
    """The pattern engine or certificate library failed unexpectedly."""
