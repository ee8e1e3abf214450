"""fortniteapi.io v2 API facade.

Shares request execution with the v1 facade through RequestClient; the method
set overlaps v1 but is not derived from it.

Usage:
    from fortnite_api_io import FortniteAPIV2

    api = FortniteAPIV2("api-key")
    items = await api.list_items(lang="ja")
"""

from typing import Any, Self

from fortnite_api_io.core.config import Settings, get_settings
from fortnite_api_io.domain.protocols import TransportProtocol
from fortnite_api_io.domain.value_objects import ClientConfig
from fortnite_api_io.infrastructure.endpoints import v2 as endpoints
from fortnite_api_io.infrastructure.http import HttpxTransport, RequestClient


class FortniteAPIV2:
    """Client for the fortniteapi.io v2 endpoints.

    Args:
        credentials: fortniteapi.io API key.
        config: Client options (default language, warning suppression).
        transport: Request transport. Defaults to HttpxTransport.

    Raises:
        InvalidCredentialsError: If credentials are missing.
        UnsupportedLanguageError: If the default language is not supported.
    """

    def __init__(
        self,
        credentials: str | None,
        config: ClientConfig | None = None,
        *,
        transport: TransportProtocol | None = None,
    ) -> None:
        self._client = RequestClient(credentials, config, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: TransportProtocol | None = None,
    ) -> Self:
        """Build a client from environment settings."""
        settings = settings or get_settings()
        return cls(
            settings.api_key,
            settings.to_client_config(),
            transport=transport or HttpxTransport(timeout=settings.request_timeout),
        )

    @property
    def client(self) -> RequestClient:
        return self._client

    @property
    def credentials(self) -> str:
        return self._client.credentials

    @property
    def default_language(self) -> str:
        return self._client.default_language

    async def list_items(self, *, lang: str | None = None) -> Any:
        """List all cosmetic items: skins, backpacks, emotes, pickaxes, sprays, etc.

        Args:
            lang: Response language. Defaults to the client default.
        """
        uri = endpoints.list_items(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def list_challenges(
        self,
        season: str = "current",
        *,
        lang: str | None = None,
    ) -> Any:
        """List all challenges as well as rewards (xp, stars, cosmetics).

        Args:
            season: Season number, or ``current``.
            lang: Response language. Defaults to the client default.
        """
        uri = endpoints.list_challenges(season, self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def list_upcoming_items(self, *, lang: str | None = None) -> Any:
        """List upcoming cosmetic items."""
        uri = endpoints.list_upcoming_items(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_item_details(self, item_id: str, *, lang: str | None = None) -> Any:
        """Get all available details about an item."""
        uri = endpoints.get_item_details(item_id, self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_daily_shop(self, *, lang: str | None = None) -> Any:
        """List all items currently in the shop."""
        uri = endpoints.get_daily_shop(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_battle_pass_rewards(
        self,
        season: str = "current",
        *,
        lang: str | None = None,
    ) -> Any:
        """Get the list of rewards given in the Battle Pass for a season."""
        uri = endpoints.get_battle_pass_rewards(
            season, self._client.resolve_language(lang)
        )
        return await self._client.request(uri)

    async def list_item_locations(self) -> Any:
        """List item locations on the current map."""
        return await self._client.request(endpoints.list_item_locations())

    async def list_current_poi(self, *, lang: str | None = None) -> Any:
        """Get the current points of interest on the map."""
        uri = endpoints.list_current_poi(self._client.resolve_language(lang))
        return await self._client.request(uri)
