"""HTTP transport package.

Default HttpCallerProtocol implementation on top of httpx, plus helpers for
building and extracting the bearer Authorization header.
"""

from concourse_client.infrastructure.http.headers import (
    authorization_header,
    bearer_auth_header,
)
from concourse_client.infrastructure.http.httpx_caller import HttpxCaller

__all__ = [
    "HttpxCaller",
    "authorization_header",
    "bearer_auth_header",
]
