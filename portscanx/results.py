"""Collection of scan outcomes grouped by port status."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass, field

from portscanx.port import PortStatus

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
Endpoint = tuple[IPAddress, int]


@dataclass
class ScanResultHandler:
    """Scanned endpoints sorted into open, filtered and closed, in arrival order."""

    open: list[Endpoint] = field(default_factory=list)
    filtered: list[Endpoint] = field(default_factory=list)
    closed: list[Endpoint] = field(default_factory=list)

    def add_result(self, ip: IPAddress, port: int, status: PortStatus) -> None:
        """Record the outcome of scanning ``ip:port``."""
        if status is PortStatus.OPEN:
            self.open.append((ip, port))
        elif status is PortStatus.FILTERED:
            self.filtered.append((ip, port))
        else:
            self.closed.append((ip, port))