"""Declarative validation schemas and the generic validator.

A Schema is an ordered tuple of FieldRule. validate() walks every rule,
keeps the first failing check per field and raises one ValidationError
listing all failing fields in schema order.

Example:
    >>> schema = (
    ...     FieldRule(key="pipeline_name", label="pipelineName", required=True,
    ...               checks=(check_string,)),
    ... )
    >>> validate(schema, {"pipeline_name": 12345})
    Traceback (most recent call last):
    ValidationError: Invalid parameter(s): ["pipelineName" must be a string].
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import structlog

from concourse_client.core.errors import ValidationError
from concourse_client.core.result import Failure, Result, chain

logger = structlog.get_logger(__name__)

type Check = Callable[[Any], Result[Any, str]]


@dataclass(frozen=True, slots=True, kw_only=True)
class FieldRule:
    """Validation rule for a single field.

    Attributes:
        key: Key of the value in the mapping passed to validate().
        label: Public field name quoted in error messages (e.g. "apiUrl").
        required: Whether a missing (None) value is a violation.
        checks: Checks applied in order to a present value; the first
            failure is reported.
    """

    key: str
    label: str
    required: bool = False
    checks: tuple[Check, ...] = ()

    def violation(self, value: Any) -> str | None:
        """Return the violation text for value, or None if it passes."""
        if value is None:
            return f'"{self.label}" is required' if self.required else None
        result = chain(value, self.checks)
        if isinstance(result, Failure):
            return f'"{self.label}" {result.error}'
        return None


type Schema = tuple[FieldRule, ...]


def validate(schema: Schema, values: Mapping[str, Any]) -> Mapping[str, Any]:
    """Validate values against schema.

    Args:
        schema: Ordered field rules.
        values: Values keyed by FieldRule.key; absent keys count as None.

    Returns:
        The values mapping, unchanged.

    Raises:
        ValidationError: If any field violates its rule.
    """
    violations = [
        violation
        for rule in schema
        if (violation := rule.violation(values.get(rule.key))) is not None
    ]
    if violations:
        logger.debug("validation_failed", violations=violations)
        raise ValidationError(violations)
    return values
