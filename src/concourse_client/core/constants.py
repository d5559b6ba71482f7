"""Centralized constants for internal implementation details.

Environment-specific values belong in `concourse_client.core.config`.

Example:
    >>> from concourse_client.core.constants import BEARER_PREFIX
    >>> header = f"{BEARER_PREFIX}{access_token}"
"""

# =============================================================================
# Timeouts
# =============================================================================

HTTP_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for calls to the Concourse API in seconds."""


# =============================================================================
# Headers
# =============================================================================

AUTHORIZATION_HEADER: str = "Authorization"
"""Name of the HTTP header carrying the bearer token."""

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# Validation
# =============================================================================

VALIDATION_MESSAGE_PREFIX: str = "Invalid parameter(s)"
"""Leading text of every ValidationError message."""
