"""Unit tests for v1 endpoint URL builders.

Tests cover:
- Every builder targets the v1 base URL
- Lookup query rules (platform, strict)
- Language parameter on language-bearing endpoints
- Joined id lists
"""

import pytest

from fortnite_api_io.infrastructure.endpoints import v1

BASE_URL = "https://fortniteapi.io/v1"

ALL_ENDPOINTS = [
    (v1.list_challenges, ("current", "en")),
    (v1.list_items, ("en",)),
    (v1.list_upcoming_items, ("en",)),
    (v1.get_item_details, ("test-id", "en")),
    (v1.get_daily_shop, ("en",)),
    (v1.get_shop_voting_options, ()),
    (v1.search_account_id, ("ben",)),
    (v1.get_global_player_stats, ("account-id",)),
    (v1.get_player_recent_matches, ("account-id",)),
    (v1.get_news, ("br", "en")),
    (v1.get_battle_pass_rewards, ("current", "en")),
    (v1.get_achievements, ("en",)),
    (v1.get_tournaments, ("en",)),
    (v1.get_tournament_session_details, ("window-id", 0)),
    (v1.get_tournament_scores, ("event-id",)),
    (v1.list_weapons, ()),
    (v1.list_previous_maps, ()),
    (v1.list_previous_seasons, ()),
    (v1.list_current_poi, ("en",)),
    (v1.get_status, ()),
    (v1.list_current_game_modes, ("en",)),
    (v1.list_users_by_id, (["a", "b"],)),
    (v1.get_bundles, ("en",)),
    (v1.list_loot, ("en",)),
    (v1.get_loot_details, ("loot-id", "en")),
    (v1.list_sets, ("en",)),
    (v1.get_replay_download_link, ("session-id",)),
    (v1.get_weapon_details, ("weapon-id", "en")),
    (v1.list_weapon_spawn_chances, ("solo",)),
    (v1.get_game_mode_extended_data, ("solo",)),
    (v1.list_featured_creative_islands, ()),
    (v1.search_island, ("1234-5678-9012",)),
    (v1.list_fish, ("en",)),
    (v1.get_player_fish_stats, ("account-id",)),
    (v1.get_maps_items, ()),
    (v1.get_game_radios, ("en",)),
    (v1.get_rarities, ()),
]


class TestEndpointPrefix:
    """Test that every builder targets the v1 base URL."""

    @pytest.mark.parametrize(
        ("builder", "args"),
        ALL_ENDPOINTS,
        ids=[builder.__name__ for builder, _ in ALL_ENDPOINTS],
    )
    def test_uri_has_v1_prefix(self, builder, args):
        """Builder output starts with the v1 base URL."""
        assert builder(*args).startswith(f"{BASE_URL}/")

    def test_base_url_constant(self):
        """Module exposes its base URL."""
        assert v1.BASE_URL == BASE_URL


class TestSearchAccountId:
    """Test account lookup query rules."""

    def test_adds_username_and_platform(self):
        """Username and platform are both in the query."""
        uri = v1.search_account_id("ben", "xbl")

        assert "?username=ben" in uri
        assert "&platform=xbl" in uri

    def test_strict_false_appended(self):
        """strict=False adds strict=false; falsy platform is skipped."""
        uri = v1.search_account_id("ben", False, False)

        assert "?username=ben" in uri
        assert "&strict=false" in uri
        assert "platform" not in uri

    def test_strict_default_omitted(self):
        """Default strict mode adds nothing."""
        assert v1.search_account_id("ben") == f"{BASE_URL}/lookup?username=ben"

    def test_strict_true_omitted(self):
        """Explicit strict=True adds nothing either."""
        uri = v1.search_account_id("ben", "psn", True)

        assert uri == f"{BASE_URL}/lookup?username=ben&platform=psn"

    def test_username_is_encoded(self):
        """Spaces and reserved characters in names are percent-encoded."""
        uri = v1.search_account_id("ben & co")

        assert uri == f"{BASE_URL}/lookup?username=ben+%26+co"


class TestLanguageParameter:
    """Test lang on language-bearing endpoints."""

    @pytest.mark.parametrize(
        "uri",
        [
            v1.get_achievements("en"),
            v1.get_battle_pass_rewards("current", "en"),
            v1.get_daily_shop("en"),
            v1.get_item_details("test-id", "en"),
            v1.get_news("br", "en"),
            v1.list_challenges("current", "en"),
            v1.list_items("en"),
            v1.list_upcoming_items("en"),
            v1.get_tournaments("en"),
            v1.list_current_poi("en"),
            v1.list_current_game_modes("en"),
            v1.get_bundles("en"),
            v1.list_loot("en"),
            v1.get_loot_details("loot-id", "en"),
            v1.list_sets("en"),
            v1.get_weapon_details("weapon-id", "en"),
            v1.list_fish("en"),
            v1.get_game_radios("en"),
        ],
    )
    def test_uri_has_lang(self, uri):
        """Language-bearing URI contains lang=en."""
        assert "lang=en" in uri

    def test_regional_language_kept_verbatim(self):
        """Region-qualified codes need no escaping."""
        assert v1.get_daily_shop("zh-Hant") == f"{BASE_URL}/shop?lang=zh-Hant"


class TestQueryLayout:
    """Test exact URIs where parameter order matters."""

    def test_news(self):
        """News puts lang before type."""
        assert v1.get_news("stw", "fr") == f"{BASE_URL}/news?lang=fr&type=stw"

    def test_battle_pass(self):
        """Battle pass puts lang before season."""
        assert (
            v1.get_battle_pass_rewards("current", "en")
            == f"{BASE_URL}/battlepass?lang=en&season=current"
        )

    def test_challenges(self):
        """Challenges put season before lang."""
        assert (
            v1.list_challenges("12", "de")
            == f"{BASE_URL}/challenges?season=12&lang=de"
        )

    def test_tournament_session_page(self):
        """Page number is rendered as an integer."""
        assert (
            v1.get_tournament_session_details("win-1", 2)
            == f"{BASE_URL}/events/window?windowId=win-1&page=2"
        )

    def test_game_mode_extended_data_uses_playlist(self):
        """Mode is sent as the playlist parameter."""
        assert (
            v1.get_game_mode_extended_data("playlist_defaultsolo")
            == f"{BASE_URL}/game/modes/data?playlist=playlist_defaultsolo"
        )

    def test_weapon_and_loot_details_share_resource(self):
        """Weapon details are served from the loot resource."""
        assert v1.get_weapon_details("x", "en") == v1.get_loot_details("x", "en")

    def test_bare_paths_have_no_query(self):
        """Endpoints without parameters have no query string."""
        assert v1.get_status() == f"{BASE_URL}/status"
        assert v1.list_weapons() == f"{BASE_URL}/weapons/list"


class TestListUsersById:
    """Test joined id lists."""

    def test_ids_joined_with_comma(self):
        """Ids are joined into one comma-separated value."""
        uri = v1.list_users_by_id(["id1", "id2", "id3"])

        assert uri == f"{BASE_URL}/lookupUsername?id=id1,id2,id3"

    def test_single_id(self):
        """A single id has no separator."""
        assert v1.list_users_by_id(["id1"]) == f"{BASE_URL}/lookupUsername?id=id1"

    def test_empty_ids(self):
        """No ids yields an empty value."""
        assert v1.list_users_by_id() == f"{BASE_URL}/lookupUsername?id="

    def test_accepts_any_iterable(self):
        """Tuples and generators are joined the same way."""
        assert v1.list_users_by_id(i for i in ("a", "b")).endswith("id=a,b")

    def test_bare_string_rejected(self):
        """A single string is not split into one id per character."""
        with pytest.raises(TypeError):
            v1.list_users_by_id("abc123")
