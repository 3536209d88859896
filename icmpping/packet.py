"""ICMP header layout and echo request construction."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from icmpping.utils import compute_checksum

ICMP_ECHOREPLY = 0
ICMP_ECHO = 8

PACKET_SIZE = 64
_HEADER_FORMAT = "!BBHHH"
HEADER_SIZE = struct.calcsize(_HEADER_FORMAT)


@dataclass
class IcmpHeader:
    """An ICMP echo header: type, code, checksum, identifier and sequence number."""

    type: int
    code: int = 0
    checksum: int = 0
    id: int = 0
    sequence: int = 0

    def pack(self) -> bytes:
        """Return the header in network byte order."""
        return struct.pack(
            _HEADER_FORMAT,
            self.type,
            self.code,
            self.checksum,
            self.id & 0xFFFF,
            self.sequence & 0xFFFF,
        )

    @classmethod
    def unpack(cls, data: bytes) -> IcmpHeader:
        """Read a header from the first bytes of *data*."""
        if len(data) < HEADER_SIZE:
            raise ValueError(f"ICMP header needs {HEADER_SIZE} bytes, got {len(data)}")
        return cls(*struct.unpack_from(_HEADER_FORMAT, data))


def build_icmp_packet(seq: int, pid: int) -> bytes:
    """Build a 64-byte echo request carrying *seq* and the low 16 bits of *pid*."""
    header = IcmpHeader(type=ICMP_ECHO, code=0, checksum=0, id=pid & 0xFFFF, sequence=seq & 0xFFFF)
    payload = bytes(i & 0xFF for i in range(PACKET_SIZE - HEADER_SIZE))
    header.checksum = compute_checksum(header.pack() + payload)
    return header.pack() + payload