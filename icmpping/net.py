"""Raw ICMP socket creation."""

from __future__ import annotations

import socket

from icmpping.utils import PROG_NAME


class SocketError(Exception):
    """Raised when the raw ICMP socket cannot be opened."""


def create_socket() -> socket.socket:
    """Open a raw IPv4 ICMP socket."""
    try:
        return socket.socket(socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SocketError(
            f"{PROG_NAME}: socket: {reason}\nDid you run the program with sudo?"
        ) from exc