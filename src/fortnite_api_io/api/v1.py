"""fortniteapi.io v1 API facade.

One coroutine per v1 endpoint. Each method resolves the effective language
(explicit ``lang`` or the client default), builds the URI and returns the
decoded JSON body unchanged.

Usage:
    from fortnite_api_io import FortniteAPI

    api = FortniteAPI("api-key", ClientConfig(default_language="fr"))
    shop = await api.get_daily_shop()
    news = await api.get_news("stw", lang="de")
"""

from collections.abc import Iterable
from typing import Any, Self

from fortnite_api_io.core.config import Settings, get_settings
from fortnite_api_io.domain.protocols import TransportProtocol
from fortnite_api_io.domain.value_objects import ClientConfig
from fortnite_api_io.infrastructure.endpoints import v1 as endpoints
from fortnite_api_io.infrastructure.http import HttpxTransport, RequestClient


class FortniteAPI:
    """Client for the fortniteapi.io v1 endpoints.

    Args:
        credentials: fortniteapi.io API key.
        config: Client options (default language, warning suppression).
        transport: Request transport. Defaults to HttpxTransport.

    Raises:
        InvalidCredentialsError: If credentials are missing.
        UnsupportedLanguageError: If the default language is not supported.

    Example:
        >>> api = FortniteAPI("api-key")
        >>> challenges = await api.list_challenges()
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
        """Build a client from environment settings.

        Args:
            settings: Settings to use. Defaults to the cached ``get_settings()``.
            transport: Request transport. Defaults to an HttpxTransport using
                the configured request timeout.

        Returns:
            Configured client.
        """
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

    # =========================================================================
    # Items & shop
    # =========================================================================

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

        Weekly missions for each season are under ``weekly``; limited time
        missions are under ``limited_time``.

        Args:
            season: Season number, or ``current``.
            lang: Response language. Defaults to the client default.
        """
        uri = endpoints.list_challenges(season, self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def list_upcoming_items(self, *, lang: str | None = None) -> Any:
        """List upcoming cosmetic items: skins, backpacks, emotes, pickaxes."""
        uri = endpoints.list_upcoming_items(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_item_details(self, item_id: str, *, lang: str | None = None) -> Any:
        """Get all available details about an item.

        The id can be found in the full list of items.

        Args:
            item_id: Cosmetic item id.
            lang: Response language. Defaults to the client default.
        """
        uri = endpoints.get_item_details(item_id, self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_daily_shop(self, *, lang: str | None = None) -> Any:
        """List all items currently in the shop."""
        uri = endpoints.get_daily_shop(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_shop_voting_options(self) -> Any:
        """Get options to vote for the next community shop item."""
        return await self._client.request(endpoints.get_shop_voting_options())

    async def list_sets(self, *, lang: str | None = None) -> Any:
        """List all the sets used by cosmetics."""
        uri = endpoints.list_sets(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_bundles(self, *, lang: str | None = None) -> Any:
        """List recent bundles (premium)."""
        uri = endpoints.get_bundles(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_rarities(self) -> Any:
        """List cosmetic rarities and series."""
        return await self._client.request(endpoints.get_rarities())

    # =========================================================================
    # Accounts & players
    # =========================================================================

    async def get_account_id_by_username(
        self,
        username: str,
        *,
        strict: bool = True,
        platform: str = "",
    ) -> Any:
        """Get an account id using a player name.

        Args:
            username: Display name to look up.
            strict: When False, similar names are returned too.
            platform: ``xbl`` or ``psn`` to search accounts not linked to an
                Epic account. Empty searches Epic accounts.
        """
        uri = endpoints.search_account_id(username, platform, strict)
        return await self._client.request(uri)

    async def search_account_id(
        self,
        username: str,
        *,
        strict: bool = True,
        platform: str = "",
    ) -> Any:
        """Search an account id using a player name.

        Deprecated: use ``get_account_id_by_username``.
        """
        self._client.deprecation_warning(
            "search_account_id", "get_account_id_by_username"
        )
        return await self.get_account_id_by_username(
            username, strict=strict, platform=platform
        )

    async def get_user_by_id(self, account_id: str) -> Any:
        """Get a user account name by their Fortnite account id."""
        return await self._client.request(endpoints.list_users_by_id([account_id]))

    async def list_users_by_id(self, ids: Iterable[str] = ()) -> Any:
        """List user accounts for a list of account ids."""
        return await self._client.request(endpoints.list_users_by_id(ids))

    async def get_global_player_stats(self, account_id: str) -> Any:
        """Get player stats broken down per input (mouse & keyboard, gamepad, touch)."""
        return await self._client.request(endpoints.get_global_player_stats(account_id))

    async def get_player_recent_matches(self, account_id: str) -> Any:
        """List the last 25 games for a player. Some games can be grouped.

        The list is empty the first time a player is searched.
        """
        return await self._client.request(
            endpoints.get_player_recent_matches(account_id)
        )

    async def get_player_fish_stats(self, account_id: str) -> Any:
        """Get each fish caught by a player with their best length."""
        return await self._client.request(endpoints.get_player_fish_stats(account_id))

    # =========================================================================
    # Game
    # =========================================================================

    async def get_news(self, mode: str = "br", *, lang: str | None = None) -> Any:
        """List the current news in Battle Royale or Save The World.

        Args:
            mode: Game mode, ``br`` or ``stw``.
            lang: Response language. Defaults to the client default.
        """
        uri = endpoints.get_news(mode, self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_battle_pass_rewards(
        self,
        season: str = "current",
        *,
        lang: str | None = None,
    ) -> Any:
        """Get the list of rewards given in the Battle Pass for a season.

        Args:
            season: Season number, or ``current``.
            lang: Response language. Defaults to the client default.
        """
        uri = endpoints.get_battle_pass_rewards(
            season, self._client.resolve_language(lang)
        )
        return await self._client.request(uri)

    async def get_achievements(self, *, lang: str | None = None) -> Any:
        """Get the list of achievements."""
        uri = endpoints.get_achievements(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def list_previous_maps(self) -> Any:
        """Get links to the maps of previous seasons."""
        return await self._client.request(endpoints.list_previous_maps())

    async def list_previous_seasons(self) -> Any:
        """List all season dates and their patch versions."""
        return await self._client.request(endpoints.list_previous_seasons())

    async def list_current_poi(self, *, lang: str | None = None) -> Any:
        """Get the current points of interest on the map."""
        uri = endpoints.list_current_poi(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_status(self) -> Any:
        """Get the Fortnite server status."""
        return await self._client.request(endpoints.get_status())

    async def list_current_game_modes(self, *, lang: str | None = None) -> Any:
        """List the current game modes."""
        uri = endpoints.list_current_game_modes(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_game_mode_extended_data(self, mode: str) -> Any:
        """Get extended playlist data such as rare chest odds (premium)."""
        return await self._client.request(endpoints.get_game_mode_extended_data(mode))

    async def get_maps_items(self) -> Any:
        """List item locations on the current map."""
        return await self._client.request(endpoints.get_maps_items())

    async def get_game_radios(self, *, lang: str | None = None) -> Any:
        """List the in-game radio stations."""
        uri = endpoints.get_game_radios(self._client.resolve_language(lang))
        return await self._client.request(uri)

    # =========================================================================
    # Tournaments
    # =========================================================================

    async def get_tournaments(self, *, lang: str | None = None) -> Any:
        """Get the list of tournaments."""
        uri = endpoints.get_tournaments(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_tournament_session_details(
        self,
        window_id: str,
        page: int = 0,
    ) -> Any:
        """Get a tournament session's rules, payout and results.

        Args:
            window_id: Tournament window id.
            page: Results page, starting at 0.
        """
        return await self._client.request(
            endpoints.get_tournament_session_details(window_id, page)
        )

    async def get_tournament_scores(self, event_id: str) -> Any:
        """Get cumulative scores for a tournament event."""
        return await self._client.request(endpoints.get_tournament_scores(event_id))

    async def get_replay_download_link(self, session_id: str) -> Any:
        """Get the replay download link for a tournament session (premium)."""
        return await self._client.request(
            endpoints.get_replay_download_link(session_id)
        )

    # =========================================================================
    # Loot & weapons
    # =========================================================================

    async def list_weapons(self) -> Any:
        """List weapons with their base stats."""
        return await self._client.request(endpoints.list_weapons())

    async def list_loot(self, *, lang: str | None = None) -> Any:
        """List all loot/weapons in the game with their basic stats."""
        uri = endpoints.list_loot(self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_loot_details(self, loot_id: str, *, lang: str | None = None) -> Any:
        """Get all stats for a specific loot item (premium)."""
        uri = endpoints.get_loot_details(loot_id, self._client.resolve_language(lang))
        return await self._client.request(uri)

    async def get_weapon_details(
        self,
        weapon_id: str,
        *,
        lang: str | None = None,
    ) -> Any:
        """Get all stats for a specific weapon (premium)."""
        uri = endpoints.get_weapon_details(
            weapon_id, self._client.resolve_language(lang)
        )
        return await self._client.request(uri)

    async def list_weapon_spawn_chances(self, mode: str) -> Any:
        """List the spawn chances of each loot type for a game mode (premium)."""
        return await self._client.request(endpoints.list_weapon_spawn_chances(mode))

    async def list_fish(self, *, lang: str | None = None) -> Any:
        """Get the list of fish with their minimum and maximum length."""
        uri = endpoints.list_fish(self._client.resolve_language(lang))
        return await self._client.request(uri)

    # =========================================================================
    # Creative
    # =========================================================================

    async def list_featured_creative_islands(self) -> Any:
        """List the current featured islands in creative mode."""
        return await self._client.request(endpoints.list_featured_creative_islands())

    async def search_island(self, code: str) -> Any:
        """Get all details related to a creative island.

        Args:
            code: Island code, e.g. ``1234-5678-9012``.
        """
        return await self._client.request(endpoints.search_island(code))
