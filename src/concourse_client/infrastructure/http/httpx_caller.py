"""httpx-based HTTP caller.

Default implementation of HttpCallerProtocol. Each call opens a short-lived
httpx.AsyncClient, sends one request and raises for any non-2xx status.

Error handling:
    - Timeouts and connection failures raise httpx.RequestError subclasses.
    - Non-2xx responses raise httpx.HTTPStatusError.
    Both are logged and re-raised as-is; nothing is retried.
"""

from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from concourse_client.core.constants import HTTP_TIMEOUT_DEFAULT

logger = structlog.get_logger(__name__)


class HttpxCaller:
    """HTTP caller backed by httpx.

    Attributes:
        headers: Default headers merged into every request.
        timeout: HTTP request timeout in seconds.

    Example:
        >>> caller = HttpxCaller(headers=bearer_auth_header(token), timeout=10.0)
        >>> body = await caller.get(url, headers=caller.headers)
    """

    def __init__(
        self,
        *,
        headers: Mapping[str, str] | None = None,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
    ) -> None:
        """Initialize the caller.

        Args:
            headers: Default headers (normally the bearer Authorization header).
            timeout: HTTP request timeout in seconds.
        """
        self._headers = dict(headers or {})
        self._timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        """Copy of the default headers."""
        return dict(self._headers)

    @property
    def timeout(self) -> float:
        return self._timeout

    async def get(self, url: str, *, headers: Mapping[str, str]) -> Any:
        """Issue a GET request and return the parsed JSON body.

        Returns:
            Decoded JSON, or None when the response body is empty.
        """
        response = await self._execute_request(method="GET", url=url, headers=headers)
        if not response.content:
            return None
        return response.json()

    async def delete(self, url: str, *, headers: Mapping[str, str]) -> None:
        """Issue a DELETE request; any response body is ignored."""
        await self._execute_request(method="DELETE", url=url, headers=headers)

    async def put(self, url: str, *, headers: Mapping[str, str]) -> None:
        """Issue a PUT request without a body; any response body is ignored."""
        await self._execute_request(method="PUT", url=url, headers=headers)

    async def _execute_request(
        self,
        *,
        method: str,
        url: str,
        headers: Mapping[str, str],
    ) -> httpx.Response:
        """Send one request and raise on transport failure or non-2xx status.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            headers: Per-request headers, layered over the default headers.

        Returns:
            The successful httpx.Response.

        Raises:
            httpx.RequestError: On timeout or connection failure.
            httpx.HTTPStatusError: On a non-2xx response.
        """
        logger.debug("http_caller_request_started", method=method, url=url)

        try:
            async with httpx.AsyncClient(
                headers=self._headers, timeout=self._timeout
            ) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    headers=dict(headers),
                )
            response.raise_for_status()

        except httpx.TimeoutException as e:
            logger.warning(
                "http_caller_timeout",
                method=method,
                url=url,
                error=str(e),
            )
            raise

        except httpx.HTTPStatusError as e:
            logger.warning(
                "http_caller_unexpected_status",
                method=method,
                url=url,
                status_code=e.response.status_code,
            )
            raise

        except httpx.RequestError as e:
            logger.warning(
                "http_caller_connection_error",
                method=method,
                url=url,
                error=str(e),
            )
            raise

        logger.debug(
            "http_caller_request_succeeded",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return response
