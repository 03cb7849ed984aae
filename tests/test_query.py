import pytest
from pydantic import ValidationError

from twitch_kraken import ListOptions, M3U8Options
from twitch_kraken.query import with_query


def test_list_options_only_sends_set_fields():
    assert ListOptions(limit=10, offset=5).to_query() == "limit=10&offset=5"


def test_empty_list_options():
    assert ListOptions().to_query() == ""
    assert ListOptions().params() == {}


@pytest.mark.parametrize(
    "options, expected",
    [
        (ListOptions(hls=True), "hls=true"),
        (ListOptions(hls=False), "hls=false"),
        (ListOptions(embeddable=False, live=True), "embeddable=false&live=true"),
        (ListOptions(game="Just Chatting", period="all"), "game=Just+Chatting&period=all"),
    ],
)
def test_list_options_encoding(options, expected):
    assert options.to_query() == expected


def test_m3u8_options_always_send_allow_flags():
    assert M3U8Options().params() == {"$allow_audio_only": "false", "allow_source": "false"}
    assert M3U8Options(token="tok", sig="abc").to_query() == (
        "%24allow_audio_only=false&allow_source=false&sig=abc&token=tok"
    )


def test_m3u8_options_query_names():
    params = M3U8Options(player="twitchweb", type="any", random=42).params()

    assert params["player"] == "twitchweb"
    assert params["type"] == "any"
    assert params["p"] == "42"


def test_options_are_frozen():
    options = ListOptions(limit=10)

    with pytest.raises(ValidationError):
        options.limit = 20


@pytest.mark.parametrize(
    "options, extra, expected",
    [
        (None, {}, "games/top"),
        (ListOptions(), {}, "games/top?"),
        (ListOptions(limit=1), {}, "games/top?limit=1"),
        (None, {"query": "felps"}, "games/top?query=felps"),
        (ListOptions(live=True), {"query": "felps", "type": None}, "games/top?live=true&query=felps"),
    ],
)
def test_with_query(options, extra, expected):
    assert with_query("games/top", options, **extra) == expected
