"""fortniteapi.io v1 endpoint URL builders.

Pure functions: each maps method parameters to the fully qualified URI of one
v1 resource. No I/O, no defaults resolution (facades resolve languages and
default seasons before calling in).

Endpoints that take no language (weapons, maps, status, ...) build a bare path
even though the facade holds a default language; that matches the v1 API.

Reference:
    - https://fortniteapi.io
"""

from collections.abc import Iterable

from fortnite_api_io.domain.enums import ApiVersion
from fortnite_api_io.infrastructure.endpoints.query import build_uri, join_values

VERSION = ApiVersion.V1
BASE_URL = VERSION.base_url


# =============================================================================
# Items & shop
# =============================================================================


def list_challenges(season: str, lang: str) -> str:
    return build_uri(VERSION, "/challenges", {"season": season, "lang": lang})


def list_items(lang: str) -> str:
    return build_uri(VERSION, "/items/list", {"lang": lang})


def list_upcoming_items(lang: str) -> str:
    return build_uri(VERSION, "/items/upcoming", {"lang": lang})


def get_item_details(item_id: str, lang: str) -> str:
    return build_uri(VERSION, "/items/get", {"id": item_id, "lang": lang})


def get_daily_shop(lang: str) -> str:
    return build_uri(VERSION, "/shop", {"lang": lang})


def get_shop_voting_options() -> str:
    return build_uri(VERSION, "/shop/voting")


def list_sets(lang: str) -> str:
    return build_uri(VERSION, "/items/sets", {"lang": lang})


def get_bundles(lang: str) -> str:
    return build_uri(VERSION, "/bundles", {"lang": lang})


def get_rarities() -> str:
    return build_uri(VERSION, "/rarities")


# =============================================================================
# Accounts & players
# =============================================================================


def search_account_id(
    username: str,
    platform: str | None = None,
    strict: bool = True,
) -> str:
    """Build the account lookup URI.

    Args:
        username: Display name to look up.
        platform: ``xbl`` or ``psn`` for accounts not linked to Epic. Only
            appended when truthy.
        strict: When explicitly False, appends ``strict=false`` so that
            similar names are returned too. True (the default) adds nothing.

    Returns:
        Lookup URI.
    """
    params: dict[str, str | int] = {"username": username}
    if platform:
        params["platform"] = platform
    if strict is False:
        params["strict"] = "false"
    return build_uri(VERSION, "/lookup", params)


def list_users_by_id(ids: Iterable[str] = ()) -> str:
    """Build the username lookup URI for one or more account ids.

    Args:
        ids: Account ids. A bare string is rejected rather than split into
            characters.

    Raises:
        TypeError: If ids is a single string.
    """
    if isinstance(ids, str):
        raise TypeError("ids must be an iterable of account ids, not a string")
    return build_uri(VERSION, "/lookupUsername", {"id": join_values(ids)})


def get_global_player_stats(account_id: str) -> str:
    return build_uri(VERSION, "/stats", {"account": account_id})


def get_player_recent_matches(account_id: str) -> str:
    return build_uri(VERSION, "/matches", {"account": account_id})


def get_player_fish_stats(account_id: str) -> str:
    return build_uri(VERSION, "/stats/fish", {"accountId": account_id})


# =============================================================================
# Game
# =============================================================================


def get_news(mode: str, lang: str) -> str:
    return build_uri(VERSION, "/news", {"lang": lang, "type": mode})


def get_battle_pass_rewards(season: str, lang: str) -> str:
    return build_uri(VERSION, "/battlepass", {"lang": lang, "season": season})


def get_achievements(lang: str) -> str:
    return build_uri(VERSION, "/achievements", {"lang": lang})


def list_previous_maps() -> str:
    return build_uri(VERSION, "/maps/list")


def list_previous_seasons() -> str:
    return build_uri(VERSION, "/seasons/list")


def list_current_poi(lang: str) -> str:
    return build_uri(VERSION, "/game/poi", {"lang": lang})


def get_status() -> str:
    return build_uri(VERSION, "/status")


def list_current_game_modes(lang: str) -> str:
    return build_uri(VERSION, "/game/modes", {"lang": lang})


def get_game_mode_extended_data(mode: str) -> str:
    return build_uri(VERSION, "/game/modes/data", {"playlist": mode})


def get_maps_items() -> str:
    return build_uri(VERSION, "/maps/items/list")


def get_game_radios(lang: str) -> str:
    return build_uri(VERSION, "/game/radios", {"lang": lang})


# =============================================================================
# Tournaments
# =============================================================================


def get_tournaments(lang: str) -> str:
    return build_uri(VERSION, "/events/list", {"lang": lang})


def get_tournament_session_details(window_id: str, page: int) -> str:
    return build_uri(
        VERSION, "/events/window", {"windowId": window_id, "page": page}
    )


def get_tournament_scores(event_id: str) -> str:
    return build_uri(VERSION, "/events/cumulative", {"eventId": event_id})


def get_replay_download_link(session_id: str) -> str:
    return build_uri(VERSION, "/events/replay", {"session": session_id})


# =============================================================================
# Loot & weapons
# =============================================================================


def list_weapons() -> str:
    return build_uri(VERSION, "/weapons/list")


def list_loot(lang: str) -> str:
    return build_uri(VERSION, "/loot/list", {"lang": lang})


def get_loot_details(loot_id: str, lang: str) -> str:
    return build_uri(VERSION, "/loot/get", {"id": loot_id, "lang": lang})


def get_weapon_details(weapon_id: str, lang: str) -> str:
    # Weapons are loot items; the API serves both from the same resource.
    return build_uri(VERSION, "/loot/get", {"id": weapon_id, "lang": lang})


def list_weapon_spawn_chances(mode: str) -> str:
    return build_uri(VERSION, "/loot/chances", {"mode": mode})


def list_fish(lang: str) -> str:
    return build_uri(VERSION, "/loot/fish", {"lang": lang})


# =============================================================================
# Creative
# =============================================================================


def list_featured_creative_islands() -> str:
    return build_uri(VERSION, "/creative/featured")


def search_island(code: str) -> str:
    return build_uri(VERSION, "/creative/island", {"code": code})
