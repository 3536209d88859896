"""Host name resolution for the ping target."""

from __future__ import annotations

import socket

from icmpping.utils import PROG_NAME


class ResolveError(Exception):
    """Raised when the target cannot be resolved to an IPv4 address."""


def resolve_host(target: str) -> str:
    """Resolve *target* to an IPv4 address and return it in dotted-quad form."""
    try:
        results = socket.getaddrinfo(
            target, None, socket.AF_INET, socket.SOCK_RAW, socket.IPPROTO_ICMP
        )
    except (socket.gaierror, UnicodeError) as exc:
        raise ResolveError(f"{PROG_NAME}: unknown host '{target}'") from exc
    if not results:
        raise ResolveError(f"{PROG_NAME}: unknown host '{target}'")
    _family, _type, _proto, _canon, sockaddr = results[0]
    return sockaddr[0]