from depthwatch.streams import STREAM_BASE_URL, get_stream_names, stream_url


def test_first_stream_matches_source_order():
    assert get_stream_names()[0] == "1000000mogusdt@depth20@100ms"


def test_last_stream_matches_source_order():
    assert get_stream_names()[-1] == "ongusdt@depth20@100ms"


def test_known_streams_present():
    names = get_stream_names()
    assert "btcusdt@depth20@100ms" in names
    assert "ethusdt@depth20@100ms" in names


def test_all_streams_are_depth20_100ms():
    assert all(name.endswith("usdt@depth20@100ms") for name in get_stream_names())


def test_stream_names_are_unique():
    names = get_stream_names()
    assert len(set(names)) == len(names)


def test_returns_fresh_list():
    names = get_stream_names()
    names.clear()
    assert get_stream_names()[0] == "1000000mogusdt@depth20@100ms"


def test_stream_url_joins_with_slashes():
    url = stream_url(["aaveusdt@depth20@100ms", "btcusdt@depth20@100ms"])
    assert url == STREAM_BASE_URL + "aaveusdt@depth20@100ms/btcusdt@depth20@100ms"


def test_stream_url_base():
    assert stream_url([]) == "wss://fstream.binance.com/stream?streams="


def test_stream_url_round_trip():
    names = get_stream_names()
    url = stream_url(names)
    assert url.startswith(STREAM_BASE_URL)
    assert url[len(STREAM_BASE_URL):].split("/") == names