"""Shared pytest fixtures and data builders.

Builders return wire-shaped dicts (as the Concourse API sends them) and the
matching domain objects, so tests can compare mapped output directly.
"""

import secrets
from collections.abc import Mapping
from typing import Any
from unittest.mock import AsyncMock

import pytest
import structlog

from concourse_client.domain.entities import Pipeline, PipelineGroup, Team
from concourse_client.infrastructure.http import bearer_auth_header

API_URL = "https://concourse.example.com"


# =============================================================================
# Random data helpers
# =============================================================================


def random_id() -> int:
    return secrets.randbelow(100_000) + 1


def random_bearer_token() -> str:
    return secrets.token_urlsafe(24)


def random_team_name() -> str:
    return f"team-{secrets.token_hex(4)}"


def random_pipeline_name() -> str:
    return f"pipeline-{secrets.token_hex(4)}"


def random_team(**overrides: Any) -> Team:
    return Team(
        id=overrides.get("id", random_id()),
        name=overrides.get("name", random_team_name()),
    )


def build_api_pipeline(
    *,
    id: int | None = None,
    name: str | None = None,
    team_name: str | None = None,
    paused: bool = False,
    public: bool = True,
    archived: bool = False,
    groups: list[dict[str, Any]] | None = None,
    last_updated: int | None = 1700000000,
) -> dict[str, Any]:
    """Build a Concourse pipeline JSON structure for testing."""
    data: dict[str, Any] = {
        "id": id if id is not None else random_id(),
        "name": name or random_pipeline_name(),
        "paused": paused,
        "public": public,
        "archived": archived,
        "team_name": team_name or random_team_name(),
    }
    if groups is not None:
        data["groups"] = groups
    if last_updated is not None:
        data["last_updated"] = last_updated
    return data


def build_client_pipeline(data: Mapping[str, Any]) -> Pipeline:
    """Expected domain object for a pipeline JSON structure."""
    return Pipeline(
        id=data["id"],
        name=data["name"],
        team_name=data["team_name"],
        is_paused=data.get("paused", False),
        is_public=data.get("public", False),
        is_archived=data.get("archived", False),
        groups=tuple(
            PipelineGroup(
                name=group["name"],
                jobs=tuple(group.get("jobs", ())),
                resources=tuple(group.get("resources", ())),
            )
            for group in data.get("groups", ())
        ),
        last_updated=data.get("last_updated"),
    )


# =============================================================================
# Fakes
# =============================================================================


class FakeHttpCaller:
    """HttpCallerProtocol fake recording calls through AsyncMocks."""

    def __init__(self, *, token: str | None = None) -> None:
        self._headers = bearer_auth_header(token) if token else {}
        self.get = AsyncMock(return_value=None)
        self.delete = AsyncMock(return_value=None)
        self.put = AsyncMock(return_value=None)

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def bearer_token() -> str:
    return random_bearer_token()


@pytest.fixture
def team() -> Team:
    return random_team()


@pytest.fixture
def http_caller(bearer_token: str) -> FakeHttpCaller:
    return FakeHttpCaller(token=bearer_token)


@pytest.fixture(autouse=True)
def _quiet_structlog():
    """Route structlog output to a capture list and undo any configure() calls."""
    with structlog.testing.capture_logs():
        yield
    structlog.reset_defaults()
