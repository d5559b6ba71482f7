"""Typed async client for Concourse team-scoped pipeline resources.

Usage:
    from concourse_client import HttpxCaller, Team, TeamClient, bearer_auth_header

    caller = HttpxCaller(headers=bearer_auth_header(token))
    client = TeamClient(
        api_url="https://ci.example.com/api/v1",
        http_caller=caller,
        team=Team(id=1, name="main"),
    )
    pipelines = await client.list_pipelines()
"""

from concourse_client.client import TeamClient
from concourse_client.core.errors import RepresentationError, ValidationError
from concourse_client.domain.entities import Pipeline, PipelineGroup, Team
from concourse_client.infrastructure.http import HttpxCaller, bearer_auth_header

__all__ = [
    "TeamClient",
    "Team",
    "Pipeline",
    "PipelineGroup",
    "HttpxCaller",
    "bearer_auth_header",
    "ValidationError",
    "RepresentationError",
]
