# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2025 Daniel Schmidt

"""HTTP status code constants shared across cluster-validations.

Validators that return a status hint use these values so the API layer can
answer with them directly, without inspecting the error message.
"""

# Returned as the status hint when a check passed
HTTP_STATUS_NONE: int = 0

HTTP_STATUS_BAD_REQUEST: int = 400
HTTP_STATUS_INTERNAL_SERVER_ERROR: int = 500
