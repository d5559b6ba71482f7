"""Errors raised by the client itself.

Transport failures are never wrapped in these types: whatever the HTTP caller
raises reaches the caller of TeamClient untouched. The classes below cover the
two failure kinds that originate locally:

- ValidationError: constructor or method arguments broke a schema rule.
- RepresentationError: a response body could not be mapped to a domain object.

Both subclass ValueError, the same convention value objects use for invalid
input.
"""

from collections.abc import Sequence

from concourse_client.core.constants import VALIDATION_MESSAGE_PREFIX
from concourse_client.core.enums import ErrorCode


class ClientError(ValueError):
    """Base class for errors raised by this package.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable error message.
    """

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        """Human-readable error message."""
        return self._message


class ValidationError(ClientError):
    """One or more parameters failed validation.

    The message lists every violation in schema order:

        Invalid parameter(s): ["apiUrl" is required, "team" is required].

    Attributes:
        violations: Violation texts, e.g. '"apiUrl" must be a string'.
    """

    code = ErrorCode.VALIDATION_FAILED

    def __init__(self, violations: Sequence[str]) -> None:
        self._violations = tuple(violations)
        super().__init__(
            f"{VALIDATION_MESSAGE_PREFIX}: [{', '.join(self._violations)}]."
        )

    @property
    def violations(self) -> tuple[str, ...]:
        return self._violations


class RepresentationError(ClientError):
    """An API payload does not match the resource's wire contract.

    Attributes:
        resource_type: Resource being mapped (pipeline, team).
        missing_fields: Required wire fields absent from the payload.
    """

    code = ErrorCode.INVALID_RESPONSE

    def __init__(
        self,
        message: str,
        *,
        resource_type: str,
        missing_fields: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self._resource_type = resource_type
        self._missing_fields = tuple(missing_fields)

    @property
    def resource_type(self) -> str:
        return self._resource_type

    @property
    def missing_fields(self) -> tuple[str, ...]:
        return self._missing_fields
