"""Request builder for team-scoped pipeline endpoints.

Endpoints:
    GET    /teams/{team}/pipelines                 - List pipelines
    GET    /teams/{team}/pipelines/{name}          - Get pipeline
    DELETE /teams/{team}/pipelines/{name}          - Delete pipeline
    PUT    /teams/{team}/pipelines/{name}/pause    - Pause pipeline
    PUT    /teams/{team}/pipelines/{name}/unpause  - Unpause pipeline

Team and pipeline names are percent-encoded as single path segments.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import quote

from concourse_client.domain.entities import Team


class PipelineOperation(str, Enum):
    """Operations supported on a team's pipelines."""

    LIST_PIPELINES = "list_pipelines"
    GET_PIPELINE = "get_pipeline"
    DELETE_PIPELINE = "delete_pipeline"
    PAUSE_PIPELINE = "pause_pipeline"
    UNPAUSE_PIPELINE = "unpause_pipeline"


@dataclass(frozen=True, slots=True, kw_only=True)
class _Route:
    method: str
    needs_name: bool
    action: str | None = None


_ROUTES: dict[PipelineOperation, _Route] = {
    PipelineOperation.LIST_PIPELINES: _Route(method="GET", needs_name=False),
    PipelineOperation.GET_PIPELINE: _Route(method="GET", needs_name=True),
    PipelineOperation.DELETE_PIPELINE: _Route(method="DELETE", needs_name=True),
    PipelineOperation.PAUSE_PIPELINE: _Route(
        method="PUT", needs_name=True, action="pause"
    ),
    PipelineOperation.UNPAUSE_PIPELINE: _Route(
        method="PUT", needs_name=True, action="unpause"
    ),
}


@dataclass(frozen=True, slots=True, kw_only=True)
class PipelineRequest:
    """Description of one HTTP request; building it executes nothing.

    Attributes:
        url: Absolute request URL.
        method: HTTP method.
        headers: Headers to send (the bearer Authorization header).
    """

    url: str
    method: str
    headers: dict[str, str] = field(default_factory=dict)


class RequestBuilder:
    """Builds URL, method and headers for pipeline operations.

    Headers are fixed when the builder is created and copied into every
    request unchanged.

    Example:
        >>> builder = RequestBuilder(
        ...     api_url="https://ci.example.com/api/v1",
        ...     headers={"Authorization": "Bearer abc"},
        ... )
        >>> builder.build(PipelineOperation.GET_PIPELINE, Team(id=1, name="main"), "deploy").url
        'https://ci.example.com/api/v1/teams/main/pipelines/deploy'
    """

    def __init__(self, *, api_url: str, headers: Mapping[str, str]) -> None:
        """Initialize the builder.

        Args:
            api_url: API base URL; a trailing slash is removed.
            headers: Headers attached to every request.
        """
        self._api_url = api_url.rstrip("/")
        self._headers = dict(headers)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    def build(
        self,
        operation: PipelineOperation,
        team: Team,
        pipeline_name: str | None = None,
    ) -> PipelineRequest:
        """Build the request for operation.

        Args:
            operation: Operation to build.
            team: Team owning the pipelines.
            pipeline_name: Pipeline name, required by every operation except
                LIST_PIPELINES.

        Raises:
            ValueError: If the operation needs a pipeline name and none is given.
        """
        route = _ROUTES[operation]
        segments = ["teams", team.name, "pipelines"]
        if route.needs_name:
            if pipeline_name is None:
                raise ValueError(f"{operation.value} requires a pipeline name")
            segments.append(pipeline_name)
        if route.action is not None:
            segments.append(route.action)

        path = "/".join(quote(segment, safe="") for segment in segments)
        return PipelineRequest(
            url=f"{self._api_url}/{path}",
            method=route.method,
            headers=dict(self._headers),
        )
