"""Validation schemas used by TeamClient.

Single source of truth for the constructor and method argument rules. Field
order here is the order violations appear in error messages.
"""

from concourse_client.domain.validators.functions import (
    check_http_caller,
    check_not_empty,
    check_object,
    check_team_shape,
    check_string,
    check_uri,
)
from concourse_client.domain.validators.schema import FieldRule, Schema

# =============================================================================
# Constructor
# =============================================================================

CLIENT_CONFIG_SCHEMA: Schema = (
    FieldRule(
        key="api_url",
        label="apiUrl",
        required=True,
        checks=(check_string, check_uri),
    ),
    FieldRule(
        key="http_caller",
        label="httpCaller",
        checks=(check_http_caller,),
    ),
    FieldRule(
        key="team",
        label="team",
        required=True,
        checks=(check_object, check_team_shape),
    ),
)


# =============================================================================
# Methods
# =============================================================================

PIPELINE_NAME_SCHEMA: Schema = (
    FieldRule(
        key="pipeline_name",
        label="pipelineName",
        required=True,
        checks=(check_string, check_not_empty),
    ),
)
