"""Async client for the fortniteapi.io REST API.

Usage:
    from fortnite_api_io import ClientConfig, FortniteAPI

    api = FortniteAPI("api-key", ClientConfig(default_language="es"))
    shop = await api.get_daily_shop()
"""

from fortnite_api_io.api import FortniteAPI, FortniteAPIV2
from fortnite_api_io.core.config import Settings, get_settings
from fortnite_api_io.core.enums import ErrorCode
from fortnite_api_io.core.errors import (
    FortniteAPIError,
    InvalidCredentialsError,
    RequestFailedError,
    UnsupportedLanguageError,
)
from fortnite_api_io.domain.enums import (
    SUPPORTED_LANGUAGES,
    ApiVersion,
    Language,
    supports_language,
)
from fortnite_api_io.domain.protocols import TransportProtocol
from fortnite_api_io.domain.value_objects import ClientConfig
from fortnite_api_io.infrastructure.http import (
    HttpxTransport,
    RequestClient,
    UriEchoTransport,
)

__version__ = "1.0.0"

__all__ = [
    "ApiVersion",
    "ClientConfig",
    "ErrorCode",
    "FortniteAPI",
    "FortniteAPIError",
    "FortniteAPIV2",
    "HttpxTransport",
    "InvalidCredentialsError",
    "Language",
    "RequestClient",
    "RequestFailedError",
    "SUPPORTED_LANGUAGES",
    "Settings",
    "TransportProtocol",
    "UnsupportedLanguageError",
    "UriEchoTransport",
    "get_settings",
    "supports_language",
]
