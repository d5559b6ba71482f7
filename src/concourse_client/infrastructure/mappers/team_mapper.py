"""Team mapper.

Concourse Team Response Structure:
    {
        "id": 1,
        "name": "main",
        "auth": {...}
    }

Only id and name are part of the client contract; other keys are dropped.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from concourse_client.core.errors import RepresentationError
from concourse_client.domain.entities import Team

logger = structlog.get_logger(__name__)

REQUIRED_TEAM_FIELDS: tuple[str, ...] = ("id", "name")


class TeamMapper:
    """Mapper between Concourse team JSON and Team."""

    def to_client(self, data: Mapping[str, Any]) -> Team:
        """Map team JSON (or a caller-supplied mapping) to Team.

        Raises:
            RepresentationError: If id or name is missing or invalid.
        """
        missing = [field for field in REQUIRED_TEAM_FIELDS if data.get(field) is None]
        if missing:
            logger.warning("team_mapping_failed", missing_fields=missing)
            raise RepresentationError(
                f"Invalid team payload: missing field(s) {', '.join(missing)}",
                resource_type="team",
                missing_fields=missing,
            )
        try:
            return Team(id=data["id"], name=data["name"])
        except ValueError as e:
            logger.warning("team_mapping_failed", error=str(e))
            raise RepresentationError(
                f"Invalid team payload: {e}", resource_type="team"
            ) from e

    def to_api(self, team: Team) -> dict[str, Any]:
        """Map Team back to its wire shape."""
        return {"id": team.id, "name": team.name}
