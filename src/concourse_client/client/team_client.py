"""Team-scoped pipeline client.

Public entry point of the package. Composes the validator, request builder,
HTTP caller and pipeline mapper for one team.

Error handling:
    - ValidationError: raised before any network activity when constructor
      or method arguments are invalid.
    - RepresentationError: raised when a response body does not match the
      pipeline wire contract.
    - Anything the HTTP caller raises (httpx errors for HttpxCaller) reaches
      the caller unchanged. No retries.

Concurrency:
    The client holds no per-call state, so operations may be awaited
    concurrently on one instance.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self, cast

import structlog

from concourse_client.core.config import ClientSettings, get_settings
from concourse_client.core.logging import configure_logging
from concourse_client.domain.entities import Pipeline, Team
from concourse_client.domain.protocols import HttpCallerProtocol
from concourse_client.domain.validators import (
    CLIENT_CONFIG_SCHEMA,
    PIPELINE_NAME_SCHEMA,
    validate,
)
from concourse_client.infrastructure.http import (
    HttpxCaller,
    authorization_header,
    bearer_auth_header,
)
from concourse_client.infrastructure.mappers import PipelineMapper, TeamMapper
from concourse_client.infrastructure.requests import (
    PipelineOperation,
    PipelineRequest,
    RequestBuilder,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class ClientConfig:
    """Validated configuration owned by one TeamClient.

    Attributes:
        api_url: API base URL without trailing slash.
        http_caller: HTTP calling capability.
        team: Team the client is scoped to.
    """

    api_url: str
    http_caller: HttpCallerProtocol
    team: Team


class TeamClient:
    """Client for the pipelines of one Concourse team.

    Args:
        api_url: Absolute API base URL (e.g. "https://ci.example.com/api/v1").
        http_caller: HTTP caller carrying the bearer Authorization header.
            Defaults to an HttpxCaller without default headers.
        team: Team, or a mapping with "id" and "name" keys.

    Raises:
        ValidationError: If any argument is missing or malformed.

    Example:
        >>> client = TeamClient(
        ...     api_url="https://ci.example.com/api/v1",
        ...     http_caller=HttpxCaller(headers=bearer_auth_header(token)),
        ...     team=Team(id=1, name="main"),
        ... )
        >>> pipelines = await client.list_pipelines()
    """

    def __init__(
        self,
        *,
        api_url: str | None = None,
        http_caller: HttpCallerProtocol | None = None,
        team: Team | Mapping[str, Any] | None = None,
    ) -> None:
        validate(
            CLIENT_CONFIG_SCHEMA,
            {"api_url": api_url, "http_caller": http_caller, "team": team},
        )
        caller = http_caller if http_caller is not None else HttpxCaller()
        team_ref = (
            team
            if isinstance(team, Team)
            else TeamMapper().to_client(cast(Mapping[str, Any], team))
        )

        self._config = ClientConfig(
            api_url=cast(str, api_url).rstrip("/"),
            http_caller=caller,
            team=team_ref,
        )
        self._requests = RequestBuilder(
            api_url=self._config.api_url,
            headers=authorization_header(caller.headers),
        )
        self._mapper = PipelineMapper()
        self._logger = logger.bind(team_name=team_ref.name)

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> Self:
        """Build a client from environment settings.

        Also configures structlog from the settings' log level and format.

        Args:
            settings: Settings to use; defaults to get_settings().
        """
        settings = settings or get_settings()
        configure_logging(level=settings.log_level, use_json=settings.log_json)
        caller = HttpxCaller(
            headers=bearer_auth_header(settings.bearer_token.get_secret_value()),
            timeout=settings.timeout,
        )
        return cls(
            api_url=settings.api_url,
            http_caller=caller,
            team=Team(id=settings.team_id, name=settings.team_name),
        )

    @property
    def api_url(self) -> str:
        return self._config.api_url

    @property
    def team(self) -> Team:
        return self._config.team

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def list_pipelines(self) -> list[Pipeline]:
        """List the team's pipelines in server order."""
        request = self._requests.build(
            PipelineOperation.LIST_PIPELINES, self._config.team
        )
        self._logger.debug("team_client_list_pipelines_started")

        data = await self._execute(request)
        pipelines = self._mapper.to_client_list(data)

        self._logger.debug("team_client_list_pipelines_succeeded", count=len(pipelines))
        return pipelines

    async def get_pipeline(self, pipeline_name: str | None = None) -> Pipeline:
        """Get one pipeline by name.

        Raises:
            ValidationError: If pipeline_name is missing, blank or not a string.
        """
        validate(PIPELINE_NAME_SCHEMA, {"pipeline_name": pipeline_name})
        request = self._requests.build(
            PipelineOperation.GET_PIPELINE, self._config.team, pipeline_name
        )
        self._logger.debug("team_client_get_pipeline_started", pipeline_name=pipeline_name)

        data = await self._execute(request)
        return self._mapper.to_client(data)

    async def delete_pipeline(self, pipeline_name: str | None = None) -> None:
        """Delete one pipeline by name.

        Raises:
            ValidationError: If pipeline_name is missing, blank or not a string.
        """
        await self._run_command(PipelineOperation.DELETE_PIPELINE, pipeline_name)

    async def pause_pipeline(self, pipeline_name: str | None = None) -> None:
        """Pause scheduling of new builds for a pipeline."""
        await self._run_command(PipelineOperation.PAUSE_PIPELINE, pipeline_name)

    async def unpause_pipeline(self, pipeline_name: str | None = None) -> None:
        """Resume scheduling of new builds for a pipeline."""
        await self._run_command(PipelineOperation.UNPAUSE_PIPELINE, pipeline_name)

    async def _run_command(
        self, operation: PipelineOperation, pipeline_name: str | None
    ) -> None:
        """Validate, send and discard the body of a state-changing request."""
        validate(PIPELINE_NAME_SCHEMA, {"pipeline_name": pipeline_name})
        request = self._requests.build(operation, self._config.team, pipeline_name)
        self._logger.debug(
            f"team_client_{operation.value}_started", pipeline_name=pipeline_name
        )

        await self._execute(request)

        self._logger.info(
            f"team_client_{operation.value}_succeeded", pipeline_name=pipeline_name
        )

    async def _execute(self, request: PipelineRequest) -> Any:
        """Dispatch a request to the HTTP caller by method."""
        caller = self._config.http_caller
        if request.method == "GET":
            return await caller.get(request.url, headers=request.headers)
        if request.method == "DELETE":
            await caller.delete(request.url, headers=request.headers)
            return None
        if request.method == "PUT":
            await caller.put(request.url, headers=request.headers)
            return None
        raise ValueError(f"Unsupported HTTP method: {request.method}")
