"""Authenticated request execution shared by all API versions.

RequestClient owns the credential and the immutable configuration. Facades
build URIs and hand them to ``request``; the client attaches the
``Authorization`` header and delegates to the injected transport.

Authentication:
    fortniteapi.io expects the raw API key as the Authorization header value
    (no ``Bearer`` prefix).

Usage:
    from fortnite_api_io.infrastructure.http import RequestClient

    client = RequestClient("api-key", ClientConfig(default_language="de"))
    data = await client.request("https://fortniteapi.io/v1/status")
"""

from typing import Any

import structlog

from fortnite_api_io.core.errors import (
    InvalidCredentialsError,
    UnsupportedLanguageError,
)
from fortnite_api_io.domain.enums import DEFAULT_LANGUAGE, supports_language
from fortnite_api_io.domain.protocols import TransportProtocol
from fortnite_api_io.domain.value_objects import ClientConfig
from fortnite_api_io.infrastructure.http.httpx_transport import HttpxTransport

logger = structlog.get_logger(__name__)

ALLOWED_METHODS: frozenset[str] = frozenset({"GET", "POST"})


class RequestClient:
    """Validates configuration and executes authenticated requests.

    Attributes:
        credentials: API key sent with every request.
        default_language: Language used when a method gets no ``lang``.
        ignore_warnings: Whether deprecation notices are suppressed.

    Raises:
        InvalidCredentialsError: If credentials are missing or empty.
        UnsupportedLanguageError: If the default language is not supported.
    """

    def __init__(
        self,
        credentials: str | None,
        config: ClientConfig | None = None,
        *,
        transport: TransportProtocol | None = None,
    ) -> None:
        """Initialize request client.

        Args:
            credentials: fortniteapi.io API key.
            config: Client options. Defaults to ``ClientConfig()``.
            transport: Request transport. Defaults to ``HttpxTransport()``.

        Raises:
            InvalidCredentialsError: If credentials are missing or empty.
            UnsupportedLanguageError: If the default language is not supported.
        """
        if not credentials:
            raise InvalidCredentialsError()

        config = config or ClientConfig()
        # Language members normalize to their code.
        default_language = str(config.default_language or DEFAULT_LANGUAGE)
        if not supports_language(default_language):
            raise UnsupportedLanguageError(default_language)

        self._credentials = credentials
        self._default_language = default_language
        self._ignore_warnings = bool(config.ignore_warnings)
        self._transport: TransportProtocol = transport or HttpxTransport()

    @property
    def credentials(self) -> str:
        return self._credentials

    @property
    def default_language(self) -> str:
        return self._default_language

    @property
    def ignore_warnings(self) -> bool:
        return self._ignore_warnings

    def resolve_language(self, lang: str | None) -> str:
        """Return the explicit language, falling back to the default.

        Args:
            lang: Language requested for a single call, if any.

        Returns:
            Effective language code.
        """
        return str(lang) if lang else self._default_language

    async def request(self, uri: str, method: str = "GET") -> Any:
        """Request a URI and return the decoded JSON body.

        Args:
            uri: Fully qualified request URI.
            method: HTTP method, GET or POST.

        Returns:
            Decoded JSON body, unchanged.

        Raises:
            ValueError: If the method is not GET or POST.
            RequestFailedError: If the request fails or the body is not JSON.
        """
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        logger.debug("fortnite_api_request_started", method=method, uri=uri)
        data = await self._transport.send(
            method,
            uri,
            headers=self._build_headers(),
        )
        logger.debug("fortnite_api_request_succeeded", method=method, uri=uri)
        return data

    def deprecation_warning(self, old_method: str, new_method: str) -> None:
        """Emit a deprecation notice unless warnings are ignored.

        Args:
            old_method: Name of the deprecated method.
            new_method: Name of the replacement method.
        """
        if self._ignore_warnings:
            return
        logger.warning(
            "fortnite_api_method_deprecated",
            method=old_method,
            replacement=new_method,
        )

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": self._credentials,
            "Accept": "application/json",
        }
