# icmpping

A minimal `ping` command. It resolves a host name to an IPv4 address, sends one
ICMP Echo Request per second over a raw socket, prints each matching Echo Reply
and, on Ctrl+C, prints a summary of packet loss and round-trip times.

## Installation

```
pip install .
```

## Usage

Raw ICMP sockets need elevated privileges, so the command usually has to run as
root:

```
sudo icmpping example.com
sudo icmpping example.com -v
icmpping example.com -?
```

The destination comes first and the options follow it:

| Option | Meaning                                                   |
|--------|-----------------------------------------------------------|
| `-v`   | verbose output (type, code, ident, seq and TTL per packet) |
| `-?`   | show the help message and exit                            |

An unknown option prints `invalid option '<opt>'` and the help message. A
missing destination prints `missing destination` and the help message. In both
cases, as with `-?`, the command exits with status 0.

If the host cannot be resolved, or the raw socket cannot be opened, the command
prints an error to standard error and exits with status 1.

Sample output:

```
PING example.com (93.184.216.34): 56 data bytes
64 bytes from 93.184.216.34: icmp_seq=1 ttl=56 time=12.0 ms
64 bytes from 93.184.216.34: icmp_seq=2 ttl=56 time=11.0 ms
^C
--- ft_ping statistics ---
2 packets transmitted, 2 received, 0.0% packet loss
round-trip min/avg/max/mdev = 11.000/11.500/12.000/0.500 ms
```

Round-trip times are measured in whole milliseconds. The mdev figure is the
mean absolute deviation of the round-trip times, taken over every transmitted
request (a request with no reply counts as 0 ms).

## What it does not do

- Only IPv4 is supported.
- There is no option for a packet count, an interval or a timeout: the command
  sends one request per second until interrupted.
- No receive timeout is set on the socket, so each round waits for the next
  datagram that arrives.
- A reply is matched by its identifier only, not by its sequence number.

## Library use

The building blocks can be used from Python:

```python
from icmpping.packet import build_icmp_packet, IcmpHeader
from icmpping.utils import compute_checksum
from icmpping.stats import Stats

packet = build_icmp_packet(seq=1, pid=4242)   # 64-byte Echo Request
header = IcmpHeader.unpack(packet)
assert compute_checksum(packet) == 0          # a valid packet sums to zero

stats = Stats()
stats.record_sent()
stats.record_reply(12)
print(stats.summary())
```

Other modules:

- `icmpping.utils`: `compute_checksum`, `time_diff_ms` (nanosecond timestamps
  in, whole milliseconds out).
- `icmpping.args`: `parse_args`, `Env`, `print_usage`, `print_invalid_option`.
- `icmpping.resolve`: `resolve_host`, which returns a dotted-quad string or
  raises `ResolveError`.
- `icmpping.net`: `create_socket`, which raises `SocketError` on failure.
- `icmpping.recv`: `parse_reply`, `receive_icmp_reply`, `Reply`.
- `icmpping.ping`: `ping_loop` (runs forever, or for `count` requests when
  given) and `main`.

## Running the tests

```
pip install .[test]
pytest
```