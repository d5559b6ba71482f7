"""HttpCallerProtocol definition for the HTTP calling capability.

The client never talks to the network itself. It receives an object that
already carries its default headers (including the bearer Authorization
header) and exposes one coroutine per HTTP verb the client uses.

Contract:
    - get() returns the parsed JSON body of a 2xx response.
    - delete() and put() return None on any 2xx response.
    - Non-2xx responses, timeouts and network failures are raised by the
      implementation. The client does not catch them.

Usage:
    from concourse_client.domain.protocols import HttpCallerProtocol

    def build(caller: HttpCallerProtocol) -> TeamClient:
        return TeamClient(api_url=url, http_caller=caller, team=team)
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HttpCallerProtocol(Protocol):
    """Protocol for HTTP calling capabilities.

    Implementations do not need to inherit from this class (PEP 544
    structural subtyping). HttpxCaller is the default implementation.

    Attributes:
        headers: Default headers sent with every request.
    """

    @property
    def headers(self) -> Mapping[str, str]:
        """Default headers configured on the caller."""
        ...

    async def get(self, url: str, *, headers: Mapping[str, str]) -> Any:
        """Issue a GET request and return the parsed JSON body.

        Args:
            url: Absolute request URL.
            headers: Request headers.
        """
        ...

    async def delete(self, url: str, *, headers: Mapping[str, str]) -> None:
        """Issue a DELETE request.

        Args:
            url: Absolute request URL.
            headers: Request headers.
        """
        ...

    async def put(self, url: str, *, headers: Mapping[str, str]) -> None:
        """Issue a PUT request without a body.

        Args:
            url: Absolute request URL.
            headers: Request headers.
        """
        ...
