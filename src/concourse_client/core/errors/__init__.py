"""Core errors package.

Usage:
    from concourse_client.core.errors import ValidationError, RepresentationError
"""

from concourse_client.core.errors.client_error import (
    ClientError,
    RepresentationError,
    ValidationError,
)

__all__ = [
    "ClientError",
    "ValidationError",
    "RepresentationError",
]
