"""Request descriptors for team-scoped pipeline operations."""

from concourse_client.infrastructure.requests.request_builder import (
    PipelineOperation,
    PipelineRequest,
    RequestBuilder,
)

__all__ = [
    "PipelineOperation",
    "PipelineRequest",
    "RequestBuilder",
]
