"""Client-level error codes (machine-readable).

Error codes follow the ENTITY_ACTION_REASON naming convention and are attached
to every error raised by this package.
"""

from enum import Enum


class ErrorCode(Enum):
    """Client-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Representation errors
    INVALID_RESPONSE = "invalid_response"
