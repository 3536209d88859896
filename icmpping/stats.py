"""Round-trip statistics gathered during a ping run."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from icmpping.utils import PROG_NAME


@dataclass
class Stats:
    """Counts of sent and received packets and the round-trip times seen."""

    sent: int = 0
    received: int = 0
    rtt_min: float = math.inf
    rtt_max: float = 0.0
    rtt_total: float = 0.0
    rtts: list[float] = field(default_factory=list)

    def record_sent(self) -> None:
        """Count one transmitted request; its slot holds zero until a reply arrives."""
        self.sent += 1
        self.rtts.append(0.0)

    def record_reply(self, rtt: float) -> None:
        """Record the round-trip time of a reply to the latest transmitted request."""
        if not self.rtts:
            raise ValueError("no packet has been sent")
        rtt = float(rtt)
        self.rtts[-1] = rtt
        self.received += 1
        self.rtt_total += rtt
        self.rtt_min = min(self.rtt_min, rtt)
        self.rtt_max = max(self.rtt_max, rtt)

    def loss(self) -> float:
        """Return the packet loss in percent (NaN when nothing was sent)."""
        if self.sent == 0:
            return math.nan
        return 100.0 * (self.sent - self.received) / self.sent

    def average(self) -> float:
        """Return the mean round-trip time of received replies, or 0."""
        return self.rtt_total / self.received if self.received else 0.0

    def mdev(self) -> float:
        """Return the mean absolute deviation of the round-trip times over all sent packets."""
        if not self.received or not self.sent:
            return 0.0
        avg = self.rtt_total / self.sent
        return sum(abs(rtt - avg) for rtt in self.rtts) / self.sent

    def summary(self) -> str:
        """Return the closing statistics report."""
        lines = [
            "",
            f"--- {PROG_NAME} statistics ---",
            f"{self.sent} packets transmitted, {self.received} received, {self.loss():.1f}% packet loss",
        ]
        if self.received:
            lines.append(
                "round-trip min/avg/max/mdev = "
                f"{self.rtt_min:.3f}/{self.average():.3f}/{self.rtt_max:.3f}/{self.mdev():.3f} ms"
            )
        return "\n".join(lines) + "\n"