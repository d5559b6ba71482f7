"""Public client package."""

from concourse_client.client.team_client import ClientConfig, TeamClient

__all__ = ["ClientConfig", "TeamClient"]
