"""Transport that returns the request URI instead of performing I/O.

Used to verify URL construction: every facade method resolves to the URI it
would have requested.

Usage:
    api = FortniteAPI("api-key", transport=UriEchoTransport())
    uri = await api.get_news()  # "https://fortniteapi.io/v1/news?lang=en&type=br"
"""

import structlog

logger = structlog.get_logger(__name__)


class UriEchoTransport:
    """Transport that echoes the URI back to the caller."""

    async def send(
        self,
        method: str,
        uri: str,
        *,
        headers: dict[str, str],
    ) -> str:
        logger.debug("fortnite_api_request_echoed", method=method, uri=uri)
        return uri
