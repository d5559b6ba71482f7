"""Pipeline mapper.

Converts Concourse pipeline JSON responses to Pipeline entities and back.
Contains all knowledge of the pipeline wire shape.

Concourse Pipeline Response Structure:
    {
        "id": 42,
        "name": "deploy",
        "paused": false,
        "public": true,
        "archived": false,
        "groups": [
            {"name": "build", "jobs": ["unit", "package"], "resources": ["repo"]}
        ],
        "team_name": "main",
        "last_updated": 1700000000
    }

Field mapping:
    paused -> is_paused, public -> is_public, archived -> is_archived,
    groups -> tuple[PipelineGroup, ...]; all other contract fields keep
    their names. Unknown keys are dropped. `groups`, `last_updated` and a
    group's `jobs`/`resources` are optional on the wire and omitted by
    to_api() when empty.

Round trip:
    to_api(to_client(x)) reproduces every field of x except explicitly empty
    `groups`, `jobs` or `resources` arrays and null flags, which come back
    omitted or false, matching the server's own omitempty encoding.

Types are never coerced: a flag must be a JSON boolean, ids and timestamps
JSON integers, and names strings. Anything else is a RepresentationError.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog

from concourse_client.core.errors import RepresentationError
from concourse_client.domain.entities import Pipeline, PipelineGroup

logger = structlog.get_logger(__name__)

REQUIRED_PIPELINE_FIELDS: tuple[str, ...] = ("id", "name", "team_name")


class PipelineMapper:
    """Mapper between Concourse pipeline JSON and Pipeline.

    Thread-safe: No mutable state, can be shared across requests.

    Example:
        >>> mapper = PipelineMapper()
        >>> pipeline = mapper.to_client({"id": 1, "name": "deploy", "team_name": "main"})
        >>> pipeline.identifier
        'main/deploy'
    """

    def to_client(self, data: Mapping[str, Any]) -> Pipeline:
        """Map pipeline JSON to Pipeline.

        Args:
            data: Pipeline object from the API response.

        Returns:
            Pipeline entity.

        Raises:
            RepresentationError: If data is not an object, a required field
                is missing, or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            logger.warning(
                "pipeline_mapping_failed",
                reason="not_an_object",
                data_type=type(data).__name__,
            )
            raise RepresentationError(
                "Invalid pipeline payload: expected an object",
                resource_type="pipeline",
            )

        missing = [f for f in REQUIRED_PIPELINE_FIELDS if data.get(f) is None]
        if missing:
            logger.warning("pipeline_mapping_failed", missing_fields=missing)
            raise RepresentationError(
                f"Invalid pipeline payload: missing field(s) {', '.join(missing)}",
                resource_type="pipeline",
                missing_fields=missing,
            )

        try:
            return self._to_client_internal(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "pipeline_mapping_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise RepresentationError(
                f"Invalid pipeline payload: {e}",
                resource_type="pipeline",
            ) from e

    def to_client_list(self, items: Sequence[Mapping[str, Any]]) -> list[Pipeline]:
        """Map a pipeline JSON array, preserving server order.

        Raises:
            RepresentationError: If items is not an array or any element is invalid.
        """
        if not isinstance(items, list):
            logger.warning(
                "pipeline_mapping_failed",
                reason="not_a_list",
                data_type=type(items).__name__,
            )
            raise RepresentationError(
                "Invalid pipeline list payload: expected an array",
                resource_type="pipeline",
            )
        return [self.to_client(item) for item in items]

    def to_api(self, pipeline: Pipeline) -> dict[str, Any]:
        """Map Pipeline back to its wire shape."""
        data: dict[str, Any] = {
            "id": pipeline.id,
            "name": pipeline.name,
            "paused": pipeline.is_paused,
            "public": pipeline.is_public,
            "archived": pipeline.is_archived,
            "team_name": pipeline.team_name,
        }
        if pipeline.groups:
            data["groups"] = [self._group_to_api(group) for group in pipeline.groups]
        if pipeline.last_updated is not None:
            data["last_updated"] = pipeline.last_updated
        return data

    def _group_to_api(self, group: PipelineGroup) -> dict[str, Any]:
        # jobs/resources are omitempty on the wire
        data: dict[str, Any] = {"name": group.name}
        if group.jobs:
            data["jobs"] = list(group.jobs)
        if group.resources:
            data["resources"] = list(group.resources)
        return data

    def _to_client_internal(self, data: Mapping[str, Any]) -> Pipeline:
        """Internal mapping logic.

        Raises exceptions on invalid data (caught by to_client).
        """
        return Pipeline(
            id=self._parse_int(data["id"], "id"),
            name=self._parse_str(data["name"], "name"),
            team_name=self._parse_str(data["team_name"], "team_name"),
            is_paused=self._parse_bool(data.get("paused"), "paused"),
            is_public=self._parse_bool(data.get("public"), "public"),
            is_archived=self._parse_bool(data.get("archived"), "archived"),
            groups=tuple(
                self._map_group(g) for g in self._parse_list(data.get("groups"), "groups")
            ),
            last_updated=(
                self._parse_int(data["last_updated"], "last_updated")
                if data.get("last_updated") is not None
                else None
            ),
        )

    def _map_group(self, group: Mapping[str, Any]) -> PipelineGroup:
        return PipelineGroup(
            name=self._parse_str(group["name"], "groups.name"),
            jobs=self._parse_str_tuple(group.get("jobs"), "groups.jobs"),
            resources=self._parse_str_tuple(group.get("resources"), "groups.resources"),
        )

    def _parse_int(self, value: Any, field: str) -> int:
        # bool is an int subclass but never a valid id or timestamp
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{field} must be an integer, got {type(value).__name__}")
        return value

    def _parse_str(self, value: Any, field: str) -> str:
        if not isinstance(value, str):
            raise TypeError(f"{field} must be a string, got {type(value).__name__}")
        return value

    def _parse_bool(self, value: Any, field: str) -> bool:
        # absent or null flags are false; anything else must already be a bool
        if value is None:
            return False
        if not isinstance(value, bool):
            raise TypeError(f"{field} must be a boolean, got {type(value).__name__}")
        return value

    def _parse_list(self, value: Any, field: str) -> list[Any]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise TypeError(f"{field} must be an array, got {type(value).__name__}")
        return value

    def _parse_str_tuple(self, value: Any, field: str) -> tuple[str, ...]:
        return tuple(
            self._parse_str(item, field) for item in self._parse_list(value, field)
        )
