"""Test modes, IPv6 flow-label values, limits and per-stream result records."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

# Default port and timing values.
PORT = 5201
US_TO_NS = 1000
MS_TO_US = 1000
SEC_TO_MS = 1000
SEC_TO_US = 1_000_000
SEC_TO_NS = 1_000_000_000
UDP_RATE = 1024 * 1024
OMIT = 0
DURATION = 10

MAX_RESULT_STRING = 4096
UDP_BUFFER_EXTRA = 1024
COOKIE_SIZE = 37

# Limits used when validating command-line arguments.
MB = 1024 * 1024
MAX_TCP_BUFFER = 512 * MB
MAX_BLOCKSIZE = MB
MIN_UDP_BLOCKSIZE = 4 + 4 + 8
MAX_UDP_BLOCKSIZE = 65535 - 8 - 20
MIN_INTERVAL = 0.1
MAX_INTERVAL = 60.0
MAX_TIME = 86400
MAX_BURST = 1000
MAX_MSS = 9 * 1024
MAX_STREAMS = 128

TIMESTAMP_FORMAT = "%c "

# UDP "connect" handshake values.
UDP_CONNECT_MSG = 0x36373839
UDP_CONNECT_REPLY = 0x39383736
LEGACY_UDP_CONNECT_REPLY = 987654321

MAX_REVERSE_OUT_OF_ORDER_PACKETS = 2

# IPv6 flow-label manager flags and socket options.
IPV6_FL_F_CREATE = 1
IPV6_FL_F_EXCL = 2
IPV6_FLOWINFO_FLOWLABEL = 0x000FFFFF
IPV6_FLOWINFO_PRIORITY = 0x0FF00000
IPV6_FLOWLABEL_MGR = 32
IPV6_FLOWINFO_SEND = 33


class Mode(enum.IntEnum):
    """Direction in which a test moves data."""

    SENDER = 1
    RECEIVER = 0
    BIDIRECTIONAL = -1


class FlowLabelAction(enum.IntEnum):
    """Action requested from the IPv6 flow-label manager."""

    GET = 0
    PUT = 1
    RENEW = 2


class FlowLabelShare(enum.IntEnum):
    """Sharing mode of an IPv6 flow label."""

    NONE = 0
    EXCL = 1
    PROCESS = 2
    USER = 3
    ANY = 255


@dataclass
class IntervalResult:
    """Measurements gathered over one reporting interval of a stream."""

    bytes_transferred: int = 0
    interval_start_time: float = 0.0
    interval_end_time: float = 0.0

    # UDP counters
    interval_packet_count: int = 0
    interval_outoforder_packets: int = 0
    interval_cnt_error: int = 0
    packet_count: int = 0
    jitter: float = 0.0
    outoforder_packets: int = 0
    cnt_error: int = 0

    omitted: bool = False

    # TCP information
    interval_retrans: int = 0
    interval_sacks: int = 0
    snd_cwnd: int = 0
    snd_wnd: int = 0
    rtt: int = 0
    rttvar: int = 0
    pmtu: int = 0

    def duration(self) -> float:
        """Length of the interval in seconds."""
        return self.interval_end_time - self.interval_start_time


@dataclass
class StreamResult:
    """Running totals for one stream, with the list of its intervals."""

    bytes_received: int = 0
    bytes_sent: int = 0
    bytes_received_this_interval: int = 0
    bytes_sent_this_interval: int = 0
    bytes_sent_omit: int = 0
    stream_prev_total_retrans: int = 0
    stream_retrans: int = 0
    stream_prev_total_sacks: int = 0
    stream_sacks: int = 0
    stream_max_rtt: int = 0
    stream_min_rtt: int = 0
    stream_sum_rtt: int = 0
    stream_count_rtt: int = 0
    stream_max_snd_cwnd: int = 0
    stream_max_snd_wnd: int = 0
    start_time: float = 0.0
    end_time: float = 0.0
    start_time_fixed: float = 0.0
    sender_time: float = 0.0
    receiver_time: float = 0.0
    interval_results: list[IntervalResult] = field(default_factory=list)

    def add_interval(self, interval: IntervalResult) -> None:
        """Append an interval to the end of the interval list."""
        self.interval_results.append(interval)

    def last_interval(self) -> IntervalResult | None:
        """Return the most recently added interval, or None if there is none."""
        return self.interval_results[-1] if self.interval_results else None