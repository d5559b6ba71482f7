"""Single-rule checks used by validation schemas.

Each check is a pure function taking a present (non-None) value and returning
Success(value) or Failure(reason). The reason is the text that follows the
quoted field label in a ValidationError message, e.g. `must be a string`.
Checks never raise.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from concourse_client.core.result import Failure, Result, Success
from concourse_client.domain.entities import Team
from concourse_client.domain.protocols import HttpCallerProtocol

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def check_string(value: Any) -> Result[Any, str]:
    """Value must be a str.

    Example:
        >>> check_string(25)
        Failure(error='must be a string')
    """
    if not isinstance(value, str):
        return Failure(error="must be a string")
    return Success(value=value)


def check_not_empty(value: str) -> Result[str, str]:
    """String must contain at least one non-whitespace character.

    Whitespace-only strings count as empty.
    """
    if not value.strip():
        return Failure(error="is not allowed to be empty")
    return Success(value=value)


def check_uri(value: str) -> Result[str, str]:
    """String must be an absolute URI (scheme and host).

    Parsing is delegated to pydantic's AnyUrl; the original string is
    returned unchanged so no normalization leaks into request URLs.

    Example:
        >>> check_uri("spinach")
        Failure(error='must be a valid uri')
    """
    try:
        url = _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        return Failure(error="must be a valid uri")
    if not url.host:
        return Failure(error="must be a valid uri")
    return Success(value=value)


def check_object(value: Any) -> Result[Any, str]:
    """Value must be a Team or a mapping describing one.

    Strings, numbers and other scalars are rejected even though they are
    not None.
    """
    if not isinstance(value, (Team, Mapping)):
        return Failure(error="must be an object")
    return Success(value=value)


def check_team_shape(value: Team | Mapping[str, Any]) -> Result[Any, str]:
    """A team mapping must carry a positive integer id and a non-empty name.

    Team instances already enforce this in __post_init__.

    Example:
        >>> check_team_shape({"id": 0, "name": "main"})
        Failure(error='must have a positive integer id and a non-empty name')
    """
    if isinstance(value, Team):
        return Success(value=value)
    team_id = value.get("id")
    name = value.get("name")
    if (
        isinstance(team_id, bool)
        or not isinstance(team_id, int)
        or team_id <= 0
        or not isinstance(name, str)
        or not name.strip()
    ):
        return Failure(error="must have a positive integer id and a non-empty name")
    return Success(value=value)


def check_http_caller(value: Any) -> Result[Any, str]:
    """Value must be an instance structurally satisfying HttpCallerProtocol.

    Class objects are rejected even though they expose the protocol members.
    """
    if isinstance(value, type) or not isinstance(value, HttpCallerProtocol):
        return Failure(error="must be a Function")
    return Success(value=value)
