"""Futures order-book depth streams watched by default."""

from __future__ import annotations

from collections.abc import Iterable

STREAM_HOST = "fstream.binance.com"
STREAM_BASE_URL = f"wss://{STREAM_HOST}/stream?streams="

QUOTE_ASSET = "usdt"
DEPTH_LEVELS = 20
UPDATE_SPEED_MS = 100

_VALID_DEPTH_LEVELS = frozenset({5, 10, 20})
_VALID_UPDATE_SPEEDS_MS = frozenset({100, 250, 500})

# Base assets of the perpetual contracts watched, grouped by leading character.
_BASE_ASSETS = """
1000000mog 1000bonk 1000cat 1000floki 1000lunc 1000pepe 1000rats 1000xec 1000x
1inch
aave ace ach act acx ada aergo aero aevo agld agt ai16z ai aixbt akt alch algo
alice alpha alt anime ankr ape api3 apt arb arc arkm ark arpa ar astr ata ath
atom auction a avaai ava avax awe axl axs
b3 baby bake bananas31 banana band bank ban bat bb bch bdxn bel bera bico
bigtime bio blur bmt bnb bnt bome brett br bsv bsw btc b
c98 cake cati celo celr cetus cfx cgpt chess chillguy chr chz ckb comp cookie
cos coti cow crv ctk ctsi cvc cyber
dash deep degen dent dexe doge dogs dood dot drift dusk dydx dym
edu egld eigen ena enj ens epic ept etc ethfi eth ethw
fartcoin fhe fida fil fio flm flow flux form forth fxs
gala gas glm gmt gmx goat gps grass griffain grt gtc gun g
haedal hbar hei hft hifi high hippo hive hmstr hook hot huma hyper hype
icp icx id ilv imx init inj iost iota iotx io ip
jasmy jellyjelly joe jst jto jup
kaia kaito kas kava kda kernel kmno knc koma ksm
la ldo lever link lista lpt lqty lrc lsk ltc lumia luna2
magic mana manta mask mavia mav mbox melania meme merl metis me mew milk mina
mkr mln moca moodeng morpho move movr mtl mubarak myro
near neiroeth neo nfp nil nkn nmr not ntrn nxpc
obol ogn og omni om ondo one ong
"""


def _stream_name(
    base_asset: str,
    levels: int = DEPTH_LEVELS,
    speed_ms: int = UPDATE_SPEED_MS,
) -> str:
    """Name the partial-depth stream of one contract."""
    if levels not in _VALID_DEPTH_LEVELS:
        raise ValueError(f"unsupported depth level count: {levels}")
    if speed_ms not in _VALID_UPDATE_SPEEDS_MS:
        raise ValueError(f"unsupported update speed: {speed_ms}ms")
    return f"{base_asset}{QUOTE_ASSET}@depth{levels}@{speed_ms}ms"


def get_stream_names() -> list[str]:
    """Return the names of the depth streams to subscribe to, in order."""
    return [_stream_name(asset) for asset in _BASE_ASSETS.split()]


def stream_url(streams: Iterable[str]) -> str:
    """Build the combined-stream URL subscribing to every stream given."""
    return STREAM_BASE_URL + "/".join(streams)