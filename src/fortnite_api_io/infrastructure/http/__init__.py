"""HTTP request execution: the shared request client and its transports.

Usage:
    from fortnite_api_io.infrastructure.http import RequestClient, UriEchoTransport
"""

from fortnite_api_io.infrastructure.http.httpx_transport import HttpxTransport
from fortnite_api_io.infrastructure.http.request_client import RequestClient
from fortnite_api_io.infrastructure.http.uri_echo_transport import UriEchoTransport

__all__ = [
    "HttpxTransport",
    "RequestClient",
    "UriEchoTransport",
]
