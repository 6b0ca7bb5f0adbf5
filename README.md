# throughput

Building blocks for network throughput measurement tools, in pure Python
with no third-party dependencies.

## Modules

- `throughput.units`: parse sizes and rates with `K`/`M`/`G`/`T` suffixes
  (`unit_atof`, `unit_atof_rate`, `unit_atoi`) and format byte or bit
  quantities (`unit_format`).
- `throughput.timer`: `TimerQueue`, a sorted queue of one-shot and periodic
  `Timer`s that the caller's own loop drives.
- `throughput.settings`: the test `Mode`, the IPv6 flow-label enums
  `FlowLabelAction` and `FlowLabelShare`, default values and argument limits
  (such as `PORT`, `MAX_STREAMS`, `MAX_BLOCKSIZE`), and the result records
  `IntervalResult` and `StreamResult`.
- `throughput.constants`: control-connection states (`TestState`), error
  codes (`ErrorCode`, `ErrorCategory`), the `IperfError` exception, and
  default block sizes.
- `throughput.tcpinfo`: decode `TCP_INFO` statistics into a `TcpInfo`
  record and read them from a connected TCP socket on Linux.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Parsing and formatting quantities

```python
from throughput.units import unit_atof, unit_atof_rate, unit_atoi, unit_format

unit_atoi("128K")              # 131072 (binary suffixes, truncated to int)
unit_atof("1.5M")              # 1572864.0
unit_atof_rate("10M")          # 10000000.0 (decimal suffixes, for rates)
unit_format(1_250_000, "a")    # '10.0 Mbit'  (lower case: bits, adaptive)
unit_format(1_048_576, "A")    # '1.00 MByte' (upper case: bytes, adaptive)
unit_format(1_048_576, "K")    # '1024 KByte' (fixed unit)
```

The number is read from the start of the string; the character right after
it, if it is one of `k`, `m`, `g`, `t` (either case), scales it, and anything
else is ignored. A string with no leading number raises `ValueError`.

`unit_format` takes the quantity in bytes. An upper-case format prints
bytes with 1024-based units, a lower-case one prints bits with 1000-based
units. `B`/`K`/`M`/`G`/`T` pick a fixed unit; `A`, or any other character,
picks the largest unit that keeps the number at least 1.

## Timers

```python
from throughput.timer import TimerQueue

queue = TimerQueue()            # uses time.monotonic; pass another clock if needed
ticks = []
tick = queue.create(lambda data, now: ticks.append(now), None, 1_000_000, True)

wait = queue.timeout()          # seconds until the next timer, 0.0 if overdue, None if empty
queue.run()                     # fire every timer that is due
queue.reset(tick)               # restart its full interval from now
queue.cancel(tick)
len(queue)                      # 0
```

Each method accepts an explicit `now` in clock seconds instead of reading
the clock. One-shot timers leave the queue after they fire; periodic ones
are rescheduled one interval later. Resetting or cancelling a timer that is
no longer scheduled raises `ValueError`. `destroy()` cancels everything.

## Results and errors

`StreamResult` holds running totals for one stream; `add_interval()` appends
an `IntervalResult` and `last_interval()` returns the latest one, or `None`.
`IntervalResult.duration()` gives the interval's length in seconds.

```python
from throughput.constants import ErrorCode, IperfError

err = IperfError(ErrorCode.IEBADPORT, "70000")
str(err)          # 'port number must be between 1 and 65535 inclusive: 70000'
err.category      # ErrorCategory.PARAMETER
```

## TCP statistics

```python
from throughput.tcpinfo import has_tcpinfo, read_tcp_info

info = read_tcp_info(sock)      # None where has_tcpinfo() is False
if info is not None:
    print(info.rtt_usecs(), info.snd_cwnd_bytes(), info.total_retransmits())
```

`TcpInfo.from_bytes()` decodes a raw buffer; `snd_wnd_bytes()` is `None`
when the kernel does not report the send window. Errors from `getsockopt`
propagate as `OSError`.

## What this package does not do

It does not open test connections, exchange parameters with a peer, send
or receive test traffic, or print reports, and it has no command-line
program. It provides the pieces such a tool is built from: quantity
parsing and formatting, timers, settings and result records, error codes,
and TCP statistics.