"""Domain entities exposed to callers."""

from concourse_client.domain.entities.pipeline import Pipeline, PipelineGroup
from concourse_client.domain.entities.team import Team

__all__ = [
    "Pipeline",
    "PipelineGroup",
    "Team",
]
