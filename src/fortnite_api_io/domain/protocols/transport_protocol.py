"""TransportProtocol definition for request execution.

The transport is the only component that touches the network. RequestClient
builds headers and delegates the call, so swapping the transport changes how
(or whether) a request is performed without touching endpoint or facade code.

Implementations:
    - HttpxTransport: real HTTP via httpx.AsyncClient.
    - UriEchoTransport: returns the URI instead of performing I/O.

Usage:
    from fortnite_api_io.domain.protocols import TransportProtocol

    class RecordingTransport:
        async def send(self, method, uri, *, headers):
            self.calls.append((method, uri, headers))
            return {}
"""

from __future__ import annotations

from typing import Any, Protocol


class TransportProtocol(Protocol):
    """Protocol for request transports.

    Implementations return the decoded JSON body (or any value standing in
    for it) and raise RequestFailedError when the request cannot complete.
    """

    async def send(
        self,
        method: str,
        uri: str,
        *,
        headers: dict[str, str],
    ) -> Any:
        """Perform a request.

        Args:
            method: HTTP method (GET or POST).
            uri: Fully qualified request URI, query string included.
            headers: Request headers (Authorization included).

        Returns:
            Decoded response body.

        Raises:
            RequestFailedError: If the request fails or the body is not JSON.
        """
        ...
