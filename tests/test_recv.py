from unittest import mock

import pytest

from icmpping.packet import ICMP_ECHO, ICMP_ECHOREPLY, IcmpHeader
from icmpping.recv import parse_reply, receive_icmp_reply


def make_datagram(icmp_type, ident, seq, ttl=64, payload_len=56):
    ip_header = bytearray(20)
    ip_header[0] = 0x45
    ip_header[8] = ttl
    icmp = IcmpHeader(type=icmp_type, code=0, checksum=0, id=ident, sequence=seq).pack()
    return bytes(ip_header) + icmp + bytes(payload_len)


class FakeSocket:
    def __init__(self, result):
        self.result = result

    def recvfrom(self, size):
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result, ("127.0.0.1", 0)


def test_parse_reply_fields():
    reply = parse_reply(make_datagram(ICMP_ECHOREPLY, 1234, 7, ttl=55))
    assert reply.type == ICMP_ECHOREPLY
    assert reply.ident == 1234
    assert reply.sequence == 7
    assert reply.ttl == 55
    assert reply.ip_header_len == 20
    assert reply.size == 64


def test_parse_reply_honours_header_length():
    data = bytearray(make_datagram(ICMP_ECHOREPLY, 5, 9))
    data[0] = 0x46
    data[20:20] = bytes(4)
    reply = parse_reply(bytes(data))
    assert reply.ip_header_len == 24
    assert reply.ident == 5
    assert reply.sequence == 9


def test_parse_reply_too_short():
    with pytest.raises(ValueError):
        parse_reply(bytes(10))
    with pytest.raises(ValueError):
        parse_reply(make_datagram(ICMP_ECHOREPLY, 1, 1)[:24])


def test_matching_reply_prints_and_returns_rtt(capsys):
    sock = FakeSocket(make_datagram(ICMP_ECHOREPLY, 4321, 3))
    with mock.patch("icmpping.recv.time.time_ns", return_value=1_500_000_000):
        rtt = receive_icmp_reply(sock, 4321, 3, "10.0.0.1", 0, False)
    assert rtt == 1500
    out = capsys.readouterr().out
    assert out == "64 bytes from 10.0.0.1: icmp_seq=3 ttl=64 time=1500.0 ms\n"


def test_pid_is_masked_to_16_bits(capsys):
    pid = 0x12345
    sock = FakeSocket(make_datagram(ICMP_ECHOREPLY, pid & 0xFFFF, 1))
    rtt = receive_icmp_reply(sock, pid, 1, "10.0.0.1", 0, False)
    assert rtt is not None and rtt >= 0


def test_foreign_identifier_is_ignored(capsys):
    sock = FakeSocket(make_datagram(ICMP_ECHOREPLY, 1, 1))
    assert receive_icmp_reply(sock, 2, 1, "10.0.0.1", 0, False) is None
    assert capsys.readouterr().out == ""


def test_echo_request_is_ignored_but_shown_when_verbose(capsys):
    sock = FakeSocket(make_datagram(ICMP_ECHO, 99, 4, ttl=30))
    assert receive_icmp_reply(sock, 99, 4, "10.0.0.1", 0, True) is None
    out = capsys.readouterr().out
    assert out == "[VERBOSE] ICMP type=8 code=0 ident=99 seq=4 ttl=30\n"


def test_timeout_verbose_message(capsys):
    sock = FakeSocket(TimeoutError())
    assert receive_icmp_reply(sock, 1, 12, "10.0.0.1", 0, True) is None
    assert "[VERBOSE] Timeout waiting for reply (icmp_seq=12)" in capsys.readouterr().err


def test_timeout_silent_without_verbose(capsys):
    sock = FakeSocket(BlockingIOError())
    assert receive_icmp_reply(sock, 1, 12, "10.0.0.1", 0, False) is None
    assert capsys.readouterr().err == ""


def test_other_error_is_reported(capsys):
    sock = FakeSocket(OSError(9, "Bad file descriptor"))
    assert receive_icmp_reply(sock, 1, 1, "10.0.0.1", 0, False) is None
    assert "ft_ping: recvfrom: Bad file descriptor" in capsys.readouterr().err