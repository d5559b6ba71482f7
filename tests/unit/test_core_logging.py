"""Unit tests for structlog configuration."""

import json

import structlog

from concourse_client.core.logging import configure_logging


class TestConfigureLogging:
    def test_json_output(self, capsys):
        configure_logging(level="INFO", use_json=True)

        structlog.get_logger("test").info("pipeline_listed", count=3)

        line = json.loads(capsys.readouterr().out.strip())
        assert line["event"] == "pipeline_listed"
        assert line["count"] == 3
        assert line["level"] == "info"
        assert "timestamp" in line

    def test_filters_below_level(self, capsys):
        configure_logging(level="WARNING", use_json=True)

        structlog.get_logger("test").info("ignored")

        assert capsys.readouterr().out == ""
