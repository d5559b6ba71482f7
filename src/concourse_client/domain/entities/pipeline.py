"""Pipeline entity (client-facing shape).

Mirrors the Concourse pipeline JSON with Python naming: boolean flags carry an
`is_` prefix and groups become immutable tuples. Conversion to and from the
wire shape lives in PipelineMapper.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class PipelineGroup:
    """Named group of jobs shown together in the Concourse UI.

    Attributes:
        name: Group name.
        jobs: Job names in the group, in configuration order.
        resources: Resource names in the group, in configuration order.
    """

    name: str
    jobs: tuple[str, ...] = ()
    resources: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class Pipeline:
    """Concourse pipeline belonging to a team.

    Attributes:
        id: Server-assigned pipeline identifier.
        name: Pipeline name (unique within its team).
        team_name: Name of the owning team.
        is_paused: Whether scheduling of new builds is paused.
        is_public: Whether the pipeline is visible without authentication.
        is_archived: Whether the pipeline has been archived.
        groups: Job groups declared in the pipeline configuration.
        last_updated: Unix timestamp of the last configuration change.

    Example:
        >>> pipeline = Pipeline(id=1, name="deploy", team_name="main")
        >>> pipeline.identifier
        'main/deploy'
    """

    id: int
    name: str
    team_name: str
    is_paused: bool = False
    is_public: bool = False
    is_archived: bool = False
    groups: tuple[PipelineGroup, ...] = ()
    last_updated: int | None = None

    @property
    def identifier(self) -> str:
        """Canonical identifier built from team and pipeline name."""
        return f"{self.team_name}/{self.name}"
