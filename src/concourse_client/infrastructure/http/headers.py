"""Authorization header helpers."""

from collections.abc import Mapping

from concourse_client.core.constants import AUTHORIZATION_HEADER, BEARER_PREFIX


def bearer_auth_header(token: str) -> dict[str, str]:
    """Build the bearer Authorization header for a token.

    Example:
        >>> bearer_auth_header("abc")
        {'Authorization': 'Bearer abc'}
    """
    return {AUTHORIZATION_HEADER: f"{BEARER_PREFIX}{token}"}


def authorization_header(headers: Mapping[str, str]) -> dict[str, str]:
    """Pick the Authorization header out of a caller's default headers.

    Header names are matched case-insensitively. Returns an empty dict when
    the caller has no Authorization header configured.
    """
    for name, value in headers.items():
        if name.lower() == AUTHORIZATION_HEADER.lower():
            return {AUTHORIZATION_HEADER: value}
    return {}
