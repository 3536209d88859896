"""The ping loop and the command entry point."""

from __future__ import annotations

import itertools
import os
import socket
import sys
import time
from typing import Sequence

from icmpping.args import Env, parse_args
from icmpping.net import SocketError, create_socket
from icmpping.packet import build_icmp_packet
from icmpping.recv import receive_icmp_reply
from icmpping.resolve import ResolveError, resolve_host
from icmpping.stats import Stats
from icmpping.utils import PROG_NAME

INTERVAL_SECONDS = 1


def ping_loop(
    env: Env,
    sock: socket.socket,
    addr: tuple[str, int],
    ip_str: str,
    stats: Stats,
    count: int | None = None,
) -> None:
    """Send echo requests once a second, recording replies in *stats*.

    Runs forever when *count* is None, otherwise stops after *count* requests.
    """
    pid = os.getpid()
    if env.verbose:
        print(f"ai->ai_family: AF_INET, ai->ai_family: '{env.target}'")

    sequences = itertools.count(1) if count is None else range(1, count + 1)
    for seq in sequences:
        packet = build_icmp_packet(seq, pid)
        send_time = time.time_ns()
        try:
            sock.sendto(packet, addr)
        except OSError as exc:
            print(f"{PROG_NAME}: sendto: {exc.strerror or exc}", file=sys.stderr)
        else:
            stats.record_sent()

        rtt = receive_icmp_reply(sock, pid, seq, ip_str, send_time, env.verbose)
        if rtt is not None and stats.sent:
            stats.record_reply(rtt)

        if count is None or seq < count:
            time.sleep(INTERVAL_SECONDS)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ping command until interrupted; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    env = parse_args(list(argv))

    try:
        ip_str = resolve_host(env.target)
        sock = create_socket()
    except (ResolveError, SocketError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(f"PING {env.target} ({ip_str}): 56 data bytes")
    stats = Stats()
    try:
        ping_loop(env, sock, (ip_str, 0), ip_str, stats)
    except KeyboardInterrupt:
        print(stats.summary(), end="")
    finally:
        sock.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())