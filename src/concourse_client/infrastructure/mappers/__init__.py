"""Wire-shape mappers.

Converts Concourse API JSON to domain entities and back.
"""

from concourse_client.infrastructure.mappers.pipeline_mapper import (
    PipelineMapper,
)
from concourse_client.infrastructure.mappers.team_mapper import TeamMapper

__all__ = [
    "PipelineMapper",
    "TeamMapper",
]
