"""Read and interpret the kernel's per-connection TCP statistics (TCP_INFO)."""

from __future__ import annotations

import socket
import struct
import sys
from dataclasses import dataclass
from typing import Optional

# Linux value of the TCP_INFO socket option.
_TCP_INFO = getattr(socket, "TCP_INFO", 11)

# Leading part of struct tcp_info, present on every supported kernel:
# eight single-byte fields followed by 24 unsigned 32-bit fields,
# ending with tcpi_total_retrans.
_BASE = struct.Struct("=8B24I")

# tcpi_snd_wnd is a later addition; it sits here when the kernel provides it.
_SND_WND = struct.Struct("=I")
_SND_WND_OFFSET = 228

# Buffer size requested from getsockopt; larger than any current layout.
_READ_SIZE = 512


def has_tcpinfo() -> bool:
    """Whether TCP_INFO statistics can be collected on this platform."""
    return sys.platform.startswith("linux")


def has_tcpinfo_retransmits() -> bool:
    """Whether the TCP_INFO statistics include a total retransmit count."""
    return sys.platform.startswith("linux")


@dataclass(frozen=True)
class TcpInfo:
    """A decoded snapshot of the kernel's TCP statistics for one socket."""

    state: int
    ca_state: int
    retransmits: int
    probes: int
    backoff: int
    options: int
    snd_wscale: int
    rcv_wscale: int
    rto: int
    ato: int
    snd_mss: int
    rcv_mss: int
    unacked: int
    sacked: int
    lost: int
    retrans: int
    fackets: int
    last_data_sent: int
    last_ack_sent: int
    last_data_recv: int
    last_ack_recv: int
    pmtu: int
    rcv_ssthresh: int
    rtt: int
    rttvar: int
    snd_ssthresh: int
    snd_cwnd: int
    advmss: int
    reordering: int
    rcv_rtt: int
    rcv_space: int
    total_retrans: int
    snd_wnd: Optional[int] = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "TcpInfo":
        """Decode a raw TCP_INFO buffer as returned by getsockopt."""
        data = bytes(data)
        if len(data) < _BASE.size:
            raise ValueError(
                f"TCP_INFO buffer too short: {len(data)} bytes, need {_BASE.size}"
            )
        values = _BASE.unpack_from(data)
        (state, ca_state, retransmits, probes, backoff, options, wscale, _flags) = values[:8]
        (
            rto, ato, snd_mss, rcv_mss, unacked, sacked, lost, retrans, fackets,
            last_data_sent, last_ack_sent, last_data_recv, last_ack_recv,
            pmtu, rcv_ssthresh, rtt, rttvar, snd_ssthresh, snd_cwnd, advmss,
            reordering, rcv_rtt, rcv_space, total_retrans,
        ) = values[8:]
        snd_wnd = None
        if len(data) >= _SND_WND_OFFSET + _SND_WND.size:
            (snd_wnd,) = _SND_WND.unpack_from(data, _SND_WND_OFFSET)
        return cls(
            state=state,
            ca_state=ca_state,
            retransmits=retransmits,
            probes=probes,
            backoff=backoff,
            options=options,
            snd_wscale=wscale & 0x0F,
            rcv_wscale=wscale >> 4,
            rto=rto,
            ato=ato,
            snd_mss=snd_mss,
            rcv_mss=rcv_mss,
            unacked=unacked,
            sacked=sacked,
            lost=lost,
            retrans=retrans,
            fackets=fackets,
            last_data_sent=last_data_sent,
            last_ack_sent=last_ack_sent,
            last_data_recv=last_data_recv,
            last_ack_recv=last_ack_recv,
            pmtu=pmtu,
            rcv_ssthresh=rcv_ssthresh,
            rtt=rtt,
            rttvar=rttvar,
            snd_ssthresh=snd_ssthresh,
            snd_cwnd=snd_cwnd,
            advmss=advmss,
            reordering=reordering,
            rcv_rtt=rcv_rtt,
            rcv_space=rcv_space,
            total_retrans=total_retrans,
            snd_wnd=snd_wnd,
        )

    def total_retransmits(self) -> int:
        """Total segments retransmitted over the connection's lifetime."""
        return self.total_retrans

    def snd_cwnd_bytes(self) -> int:
        """Congestion window in octets."""
        return self.snd_cwnd * self.snd_mss

    def snd_wnd_bytes(self) -> Optional[int]:
        """Peer's advertised send window in octets, or None if not reported."""
        return self.snd_wnd

    def rtt_usecs(self) -> int:
        """Smoothed round-trip time in microseconds."""
        return self.rtt

    def rttvar_usecs(self) -> int:
        """Round-trip time variance in microseconds."""
        return self.rttvar

    def path_mtu(self) -> int:
        """Path MTU in bytes."""
        return self.pmtu


def read_tcp_info(sock) -> Optional[TcpInfo]:
    """Fetch TCP statistics for ``sock``; None where the platform has none.

    Errors from getsockopt propagate as OSError.
    """
    if not has_tcpinfo():
        return None
    data = sock.getsockopt(socket.IPPROTO_TCP, _TCP_INFO, _READ_SIZE)
    return TcpInfo.from_bytes(data)