# depthwatch

depthwatch subscribes to a combined stream of top-20 order-book depth updates
(100 ms update speed), one stream per USDT-margined futures symbol from a
built-in list. For each stream it keeps the most recent snapshot of bids and
asks. Every price level arrives as a pair of decimal strings. The package
parses each pair into a `(price, quantity)` tuple of single-precision values
and keeps each side's levels sorted in ascending order.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

```
depthwatch [--dump-every N]
```

The command connects to the combined depth stream for every built-in symbol
and keeps running until interrupted. For each message it prints how long the
message took to process, and prints an error line for a message it cannot
decode. After every `N` messages (100 by default) it prints the current
snapshot of the first stream. When the stream ends, the command prints
`Stream is finished` and connects again.

## Library use

```python
from depthwatch.streams import get_stream_names, stream_url
from depthwatch.feed import DepthBook, parse_message, parse_price_pairs

streams = get_stream_names()
url = stream_url(streams)          # combined-stream subscription URL

book = DepthBook(streams)
book.update(raw_message_bytes)     # store the snapshot carried by one message
snapshot = book.get(streams[0])    # DepthSnapshot with .bids and .asks
```

`depthwatch.streams`:

- `get_stream_names()` returns the built-in stream names, such as
  `btcusdt@depth20@100ms`, in a fixed order.
- `stream_url(streams)` joins stream names into one combined-stream URL.

`depthwatch.feed`:

- `parse_price_pairs(pairs)` turns `[["1.5", "2"], ...]` into a sorted list
  of float tuples. It raises `MessageError`, a `ValueError`, for malformed
  pairs, invalid numbers or NaN values.
- `parse_message(raw)` decodes one combined-stream message, given as `str` or
  `bytes`. It returns the stream name and a `DepthSnapshot`.
- `DepthBook(streams)` holds one snapshot per known stream, starting empty.
  `update(raw)` stores a message's snapshot and returns its stream name. It
  raises `MessageError` for a message it cannot decode and `KeyError` for a
  stream it does not track. `get(stream)` returns the latest snapshot. The
  book supports `in` and `len()`, and it may be shared between threads.
- `run(url, book, dump_stream, dump_every)` is the async loop behind the
  command.

## What it does not do

depthwatch keeps only the latest snapshot of each stream, in memory. It does
not store history, merge incremental updates, or place orders. The command
always watches the built-in symbol list and takes no option to choose symbols.

## Tests

```
pytest
```