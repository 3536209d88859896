"""Reception and interpretation of ICMP echo replies."""

from __future__ import annotations

import socket
import sys
import time
from dataclasses import dataclass

from icmpping.packet import HEADER_SIZE, ICMP_ECHOREPLY, IcmpHeader
from icmpping.utils import PROG_NAME, time_diff_ms

BUFFER_SIZE = 1024
_MIN_IP_HEADER = 20
_TTL_OFFSET = 8


@dataclass(frozen=True)
class Reply:
    """The fields of a received IP datagram carrying an ICMP message."""

    type: int
    code: int
    ident: int
    sequence: int
    ttl: int
    ip_header_len: int
    size: int


def parse_reply(buffer: bytes) -> Reply:
    """Parse a raw IPv4 datagram holding an ICMP header."""
    if len(buffer) < _MIN_IP_HEADER:
        raise ValueError(f"IP header needs {_MIN_IP_HEADER} bytes, got {len(buffer)}")
    header_len = (buffer[0] & 0x0F) * 4
    if len(buffer) < header_len + HEADER_SIZE:
        raise ValueError("datagram too short for an ICMP header")
    icmp = IcmpHeader.unpack(buffer[header_len:])
    return Reply(
        type=icmp.type,
        code=icmp.code,
        ident=icmp.id,
        sequence=icmp.sequence,
        ttl=buffer[_TTL_OFFSET],
        ip_header_len=header_len,
        size=len(buffer) - header_len,
    )


def receive_icmp_reply(
    sock: socket.socket,
    pid: int,
    seq: int,
    ip_str: str,
    send_time: int,
    verbose: bool,
) -> int | None:
    """Wait for one datagram and report it if it is our echo reply.

    Returns the round-trip time in whole milliseconds for a matching reply,
    or None on timeout, error or a packet that is not ours.
    *send_time* is a nanosecond timestamp.
    """
    try:
        buffer, _sender = sock.recvfrom(BUFFER_SIZE)
    except (TimeoutError, BlockingIOError):
        if verbose:
            print(f"[VERBOSE] Timeout waiting for reply (icmp_seq={seq})", file=sys.stderr)
        return None
    except OSError as exc:
        print(f"{PROG_NAME}: recvfrom: {exc.strerror or exc}", file=sys.stderr)
        return None

    recv_time = time.time_ns()

    try:
        reply = parse_reply(buffer)
    except ValueError:
        return None

    if verbose:
        print(
            f"[VERBOSE] ICMP type={reply.type} code={reply.code} "
            f"ident={reply.ident} seq={reply.sequence} ttl={reply.ttl}"
        )

    if reply.type == ICMP_ECHOREPLY and reply.ident == (pid & 0xFFFF):
        rtt = time_diff_ms(send_time, recv_time)
        print(
            f"{reply.size} bytes from {ip_str}: icmp_seq={seq} "
            f"ttl={reply.ttl} time={float(rtt):.1f} ms"
        )
        return rtt
    return None