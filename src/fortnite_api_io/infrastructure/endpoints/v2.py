"""fortniteapi.io v2 endpoint URL builders.

v2 covers a subset of v1 resources with reworked payloads, plus item
locations on the map. Builders mirror the v1 module; the two versions are
kept separate because their resource sets diverge.
"""

from fortnite_api_io.domain.enums import ApiVersion
from fortnite_api_io.infrastructure.endpoints.query import build_uri

VERSION = ApiVersion.V2
BASE_URL = VERSION.base_url


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


def get_battle_pass_rewards(season: str, lang: str) -> str:
    return build_uri(VERSION, "/battlepass", {"lang": lang, "season": season})


def list_item_locations() -> str:
    return build_uri(VERSION, "/maps/items/list")


def list_current_poi(lang: str) -> str:
    return build_uri(VERSION, "/game/poi", {"lang": lang})
