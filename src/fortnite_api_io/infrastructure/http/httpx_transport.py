"""httpx-backed request transport.

Opens an ``httpx.AsyncClient`` per request so that every call is independent
and nothing has to be closed by the caller. Status codes are not classified:
fortniteapi.io reports errors inside a JSON envelope (``{"result": false,
"error": {...}}``), and that body is returned to the caller as-is.

Reference:
    - https://fortniteapi.io
"""

from typing import Any

import httpx
import structlog

from fortnite_api_io.core.errors import RequestFailedError

logger = structlog.get_logger(__name__)


class HttpxTransport:
    """Transport that performs real HTTP requests with httpx.

    Attributes:
        timeout: Request timeout in seconds, or None to wait indefinitely.

    Example:
        >>> transport = HttpxTransport(timeout=10.0)
        >>> data = await transport.send(
        ...     "GET",
        ...     "https://fortniteapi.io/v1/status",
        ...     headers={"Authorization": "..."},
        ... )
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        """Initialize httpx transport.

        Args:
            timeout: Request timeout in seconds. None disables the timeout.
        """
        self._timeout = timeout

    @property
    def timeout(self) -> float | None:
        return self._timeout

    async def send(
        self,
        method: str,
        uri: str,
        *,
        headers: dict[str, str],
    ) -> Any:
        """Send a request and decode the JSON body.

        Args:
            method: HTTP method (GET or POST).
            uri: Fully qualified request URI.
            headers: Request headers.

        Returns:
            Decoded JSON body.

        Raises:
            RequestFailedError: On connection failure, timeout or invalid JSON.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.request(method, uri, headers=headers)
        except httpx.RequestError as e:
            logger.warning(
                "fortnite_api_connection_error",
                method=method,
                uri=uri,
                error=str(e),
            )
            raise RequestFailedError(
                f"Failed to connect to fortniteapi.io: {e}",
                uri=uri,
            ) from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "fortnite_api_invalid_json",
                uri=uri,
                status_code=response.status_code,
                error=str(e),
            )
            raise RequestFailedError(
                "Invalid JSON response from fortniteapi.io",
                uri=uri,
            ) from e
