"""Unit tests for validation checks, schemas and the generic validator.

Tests cover:
- Each rule check in isolation
- Violation ordering and message format
- Required vs optional fields
"""

import pytest

from concourse_client.core.errors import ValidationError
from concourse_client.core.result import Failure, Success
from concourse_client.domain.entities import Team
from concourse_client.domain.validators import (
    CLIENT_CONFIG_SCHEMA,
    PIPELINE_NAME_SCHEMA,
    FieldRule,
    check_http_caller,
    check_not_empty,
    check_object,
    check_string,
    check_team_shape,
    check_uri,
    validate,
)
from tests.conftest import FakeHttpCaller


# =============================================================================
# Rule checks
# =============================================================================


class TestCheckString:
    def test_accepts_string(self):
        assert check_string("main") == Success(value="main")

    @pytest.mark.parametrize("value", [25, 12.5, ["a"], {"a": 1}, True])
    def test_rejects_non_string(self, value):
        assert check_string(value) == Failure(error="must be a string")


class TestCheckNotEmpty:
    def test_accepts_text(self):
        assert isinstance(check_not_empty("deploy"), Success)

    def test_rejects_blank(self):
        assert check_not_empty("   ") == Failure(error="is not allowed to be empty")


class TestCheckUri:
    @pytest.mark.parametrize(
        "value",
        [
            "https://concourse.example.com",
            "http://localhost:8080/api/v1",
            "https://ci.example.com/api/v1/",
        ],
    )
    def test_accepts_absolute_uri(self, value):
        """The original string is returned without normalization."""
        assert check_uri(value) == Success(value=value)

    @pytest.mark.parametrize("value", ["spinach", "", "/api/v1", "concourse.example.com"])
    def test_rejects_invalid_uri(self, value):
        assert check_uri(value) == Failure(error="must be a valid uri")


class TestCheckObject:
    def test_accepts_team(self):
        assert isinstance(check_object(Team(id=1, name="main")), Success)

    def test_accepts_mapping(self):
        assert isinstance(check_object({"id": 1, "name": "main"}), Success)

    @pytest.mark.parametrize("value", ["wat", 1, 2.5, ["main"]])
    def test_rejects_scalars_and_lists(self, value):
        assert check_object(value) == Failure(error="must be an object")


class TestCheckTeamShape:
    def test_accepts_team(self):
        assert isinstance(check_team_shape(Team(id=1, name="main")), Success)

    def test_accepts_complete_mapping(self):
        assert isinstance(check_team_shape({"id": 1, "name": "main"}), Success)

    @pytest.mark.parametrize(
        "value",
        [
            {},
            {"name": "main"},
            {"id": 1},
            {"id": -3, "name": "main"},
            {"id": False, "name": "main"},
            {"id": "1", "name": "main"},
            {"id": 1, "name": "  "},
            {"id": 1, "name": 7},
        ],
    )
    def test_rejects_malformed_mapping(self, value):
        assert check_team_shape(value) == Failure(
            error="must have a positive integer id and a non-empty name"
        )


class TestCheckHttpCaller:
    def test_accepts_protocol_implementation(self):
        assert isinstance(check_http_caller(FakeHttpCaller()), Success)

    @pytest.mark.parametrize("value", [35, "caller", object(), FakeHttpCaller])
    def test_rejects_other_values(self, value):
        assert check_http_caller(value) == Failure(error="must be a Function")


# =============================================================================
# Generic validator
# =============================================================================


class TestValidate:
    def test_returns_values_when_valid(self):
        values = {"pipeline_name": "deploy"}
        assert validate(PIPELINE_NAME_SCHEMA, values) is values

    def test_missing_required_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(PIPELINE_NAME_SCHEMA, {})

        assert str(exc_info.value) == 'Invalid parameter(s): ["pipelineName" is required].'

    def test_reports_first_failing_check_only(self):
        """A non-string value does not also report the empty-string check."""
        with pytest.raises(ValidationError) as exc_info:
            validate(PIPELINE_NAME_SCHEMA, {"pipeline_name": 12345})

        assert exc_info.value.violations == ('"pipelineName" must be a string',)

    def test_optional_field_may_be_missing(self):
        values = {"api_url": "https://concourse.example.com", "team": {"id": 1, "name": "a"}}
        assert validate(CLIENT_CONFIG_SCHEMA, values) is values

    def test_collects_all_violations_in_schema_order(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(CLIENT_CONFIG_SCHEMA, {"team": "wat", "http_caller": 35})

        assert exc_info.value.message == (
            'Invalid parameter(s): ["apiUrl" is required, '
            '"httpCaller" must be a Function, "team" must be an object].'
        )

    def test_custom_rule(self):
        schema = (FieldRule(key="name", label="name", checks=(check_string,)),)

        with pytest.raises(ValidationError, match=r'\["name" must be a string\]'):
            validate(schema, {"name": 1})

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate(PIPELINE_NAME_SCHEMA, {"pipeline_name": None})
