"""Team value object.

Immutable reference to the Concourse team a client is scoped to. The team
name addresses every pipeline URL; the id is carried for callers that need it.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Team:
    """Concourse team reference.

    Attributes:
        id: Positive team identifier.
        name: Non-empty team name, used as a URL path segment.

    Raises:
        ValueError: If id is not a positive integer or name is empty.

    Example:
        >>> team = Team(id=1, name="main")
        >>> team.name
        'main'
    """

    id: int
    name: str

    def __post_init__(self) -> None:
        """Validate team fields."""
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id <= 0:
            raise ValueError(f"Team id must be a positive integer: {self.id!r}")
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Team name cannot be empty")
