"""Core enums."""

from concourse_client.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode"]
