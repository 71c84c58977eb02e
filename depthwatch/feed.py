"""Keep the latest order-book depth snapshot of each stream from a live feed."""

from __future__ import annotations

import argparse
import asyncio
import json
import math
import re
import struct
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import websockets

from depthwatch.streams import get_stream_names, stream_url

PricePair = tuple[float, float]

DEFAULT_DUMP_EVERY = 100

_NUMBER = re.compile(
    r"[+-]?(?:(?i:inf|infinity|nan)|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


class MessageError(ValueError):
    """A feed message could not be decoded."""


@dataclass
class DepthSnapshot:
    """Bid and ask levels of one stream, each sorted ascending."""

    bids: list[PricePair] = field(default_factory=list)
    asks: list[PricePair] = field(default_factory=list)


def _parse_f32(text: Any) -> float:
    if not isinstance(text, str) or not _NUMBER.fullmatch(text):
        raise MessageError(f"invalid float literal: {text!r}")
    value = float(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_price_pairs(pairs: Any) -> list[PricePair]:
    """Decode a list of [price, quantity] string pairs, sorted ascending."""
    if not isinstance(pairs, list):
        raise MessageError("expected a list of price pairs")
    result: list[PricePair] = []
    for pair in pairs:
        if not isinstance(pair, list) or len(pair) != 2:
            raise MessageError(f"expected a [price, quantity] pair, got {pair!r}")
        price, quantity = pair
        result.append((_parse_f32(price), _parse_f32(quantity)))
    if any(math.isnan(value) for pair in result for value in pair):
        raise MessageError("cannot sort price pairs containing NaN")
    result.sort()
    return result


def parse_message(raw: str | bytes) -> tuple[str, DepthSnapshot]:
    """Decode a combined-stream message into its stream name and snapshot."""
    try:
        message = json.loads(raw)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MessageError(f"invalid JSON: {exc}") from exc
    if not isinstance(message, dict):
        raise MessageError("expected a JSON object")
    stream = message.get("stream")
    if not isinstance(stream, str):
        raise MessageError("missing or invalid field 'stream'")
    data = message.get("data")
    if not isinstance(data, dict):
        raise MessageError("missing or invalid field 'data'")
    for key in ("b", "a"):
        if key not in data:
            raise MessageError(f"missing field '{key}'")
    return stream, DepthSnapshot(
        bids=parse_price_pairs(data["b"]), asks=parse_price_pairs(data["a"])
    )


class DepthBook:
    """Latest snapshot per known stream, safe to share between threads."""

    def __init__(self, streams: Iterable[str]) -> None:
        self._snapshots: dict[str, DepthSnapshot] = {
            stream: DepthSnapshot() for stream in streams
        }
        self._lock = threading.Lock()

    def update(self, raw: str | bytes) -> str:
        """Store the snapshot carried by a message; return its stream name.

        Raises MessageError for an undecodable message and KeyError for a
        stream the book does not track.
        """
        stream, snapshot = parse_message(raw)
        if stream not in self._snapshots:
            raise KeyError(stream)
        with self._lock:
            self._snapshots[stream] = snapshot
        return stream

    def get(self, stream: str) -> DepthSnapshot:
        """Return the latest snapshot of a tracked stream."""
        with self._lock:
            return self._snapshots[stream]

    def __contains__(self, stream: object) -> bool:
        return stream in self._snapshots

    def __len__(self) -> int:
        return len(self._snapshots)


class _Processor:
    """Handles each incoming message and periodically dumps one stream."""

    def __init__(self, book: DepthBook, dump_stream: str, dump_every: int) -> None:
        self.book = book
        self.dump_stream = dump_stream
        self.dump_every = dump_every
        self.counter = 0

    def handle(self, raw: str | bytes) -> None:
        start = time.perf_counter()
        try:
            self.book.update(raw)
        except MessageError as exc:
            print(f"Error processing message: {exc!r}")
        elapsed = time.perf_counter() - start
        print(f"Time elapsed in process_message() is: {elapsed * 1e6:.3f}µs")
        previous = self.counter
        self.counter += 1
        if previous >= self.dump_every:
            print(f"{self.dump_stream} data {self.book.get(self.dump_stream)!r}")
            self.counter = 0


async def run(
    url: str,
    book: DepthBook,
    dump_stream: str,
    dump_every: int = DEFAULT_DUMP_EVERY,
) -> None:
    """Consume the feed forever, reconnecting whenever the stream ends."""
    processor = _Processor(book, dump_stream, dump_every)
    while True:
        async with websockets.connect(url) as connection:
            try:
                async for message in connection:
                    processor.handle(message)
            except websockets.exceptions.ConnectionClosed:
                pass
        print("Stream is finished")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="depthwatch",
        description="Track live futures order-book depth snapshots.",
    )
    parser.add_argument(
        "--dump-every",
        type=int,
        default=DEFAULT_DUMP_EVERY,
        help="print the first stream's snapshot after this many messages",
    )
    args = parser.parse_args(argv)
    streams = get_stream_names()
    book = DepthBook(streams)
    try:
        asyncio.run(run(stream_url(streams), book, streams[0], args.dump_every))
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())