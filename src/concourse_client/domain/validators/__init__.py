"""Validators package exports.

Exports:
    - Rule checks (from functions.py)
    - Schema types and the generic validator (from schema.py)
    - Schemas used by the client (from registry.py)
"""

from concourse_client.domain.validators.functions import (
    check_http_caller,
    check_not_empty,
    check_object,
    check_team_shape,
    check_string,
    check_uri,
)
from concourse_client.domain.validators.registry import (
    CLIENT_CONFIG_SCHEMA,
    PIPELINE_NAME_SCHEMA,
)
from concourse_client.domain.validators.schema import FieldRule, Schema, validate

__all__ = [
    # Rule checks
    "check_string",
    "check_not_empty",
    "check_uri",
    "check_object",
    "check_team_shape",
    "check_http_caller",
    # Schema
    "FieldRule",
    "Schema",
    "validate",
    # Registry
    "CLIENT_CONFIG_SCHEMA",
    "PIPELINE_NAME_SCHEMA",
]
