"""Unit tests for ClientSettings."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from concourse_client.core.config import ClientSettings, get_settings
from concourse_client.core.constants import HTTP_TIMEOUT_DEFAULT


@pytest.fixture(autouse=True)
def _clear_settings_cache(monkeypatch, tmp_path):
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestClientSettings:
    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("CONCOURSE_API_URL", "https://ci.example.com/api/v1/")
        monkeypatch.setenv("CONCOURSE_BEARER_TOKEN", "secret-token")
        monkeypatch.setenv("CONCOURSE_TEAM_ID", "4")
        monkeypatch.setenv("CONCOURSE_TEAM_NAME", "platform")
        monkeypatch.setenv("CONCOURSE_LOG_LEVEL", "debug")

        settings = get_settings()

        assert settings.api_url == "https://ci.example.com/api/v1"
        assert settings.bearer_token.get_secret_value() == "secret-token"
        assert settings.team_id == 4
        assert settings.team_name == "platform"
        assert settings.log_level == "DEBUG"

    def test_defaults(self):
        settings = ClientSettings(api_url="https://ci.example.com", bearer_token="t")

        assert settings.team_id == 1
        assert settings.team_name == "main"
        assert settings.timeout == HTTP_TIMEOUT_DEFAULT
        assert settings.log_json is False

    def test_token_is_not_exposed_in_repr(self):
        settings = ClientSettings(api_url="https://ci.example.com", bearer_token="t0ps3cret")

        assert "t0ps3cret" not in repr(settings)

    def test_rejects_unknown_log_level(self):
        with pytest.raises(PydanticValidationError, match="log_level must be one of"):
            ClientSettings(
                api_url="https://ci.example.com", bearer_token="t", log_level="LOUD"
            )

    def test_requires_api_url_and_token(self, monkeypatch):
        monkeypatch.delenv("CONCOURSE_API_URL", raising=False)
        monkeypatch.delenv("CONCOURSE_BEARER_TOKEN", raising=False)

        with pytest.raises(PydanticValidationError):
            ClientSettings()  # type: ignore[call-arg]
