"""Protocols for collaborators supplied from outside the client."""

from concourse_client.domain.protocols.http_caller_protocol import (
    HttpCallerProtocol,
)

__all__ = ["HttpCallerProtocol"]
