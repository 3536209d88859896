"""Checksum and timing helpers shared by the ping tool."""

PROG_NAME = "ft_ping"

_NS_PER_SECOND = 1_000_000_000
_NS_PER_MICROSECOND = 1_000


def compute_checksum(data: bytes) -> int:
    """Return the Internet checksum (one's complement of the one's complement sum) of *data*.

    Words are read in network byte order; an odd trailing byte is padded with zero.
    """
    if len(data) % 2:
        data = bytes(data) + b"\x00"
    total = sum(int.from_bytes(data[pos:pos + 2], "big") for pos in range(0, len(data), 2))
    total = (total >> 16) + (total & 0xFFFF)
    total += total >> 16
    return ~total & 0xFFFF


def _split(timestamp_ns: int) -> tuple[int, int]:
    seconds, rest = divmod(int(timestamp_ns), _NS_PER_SECOND)
    return seconds, rest // _NS_PER_MICROSECOND


def time_diff_ms(start: int, end: int) -> int:
    """Return the whole milliseconds between two timestamps given in nanoseconds.

    The seconds and microseconds parts are subtracted separately and the
    microsecond difference is truncated toward zero, as timeval arithmetic does.
    """
    start_sec, start_usec = _split(start)
    end_sec, end_usec = _split(end)
    seconds = end_sec - start_sec
    useconds = end_usec - start_usec
    return seconds * 1000 + int(useconds / 1000)