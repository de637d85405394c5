"""Probing a single TCP port."""

from __future__ import annotations

import asyncio
import ipaddress
from enum import Enum


class PortStatus(Enum):
    """Outcome of a connection attempt."""

    OPEN = "open"
    CLOSED = "closed"
    FILTERED = "filtered"


async def scan_port(
    ip: ipaddress.IPv4Address | ipaddress.IPv6Address | str,
    port: int,
    timeout: float,
    verbose: bool,
) -> PortStatus:
    """Try a TCP connection to ``ip:port`` within ``timeout`` seconds.

    A completed connection means OPEN, a refused or failed one CLOSED, and
    one that does not finish in time FILTERED.
    """
    host = str(ip)
    if verbose:
        print(f"[SCAN] Starting scan on {host}:{port}")
    try:
        _reader, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port), timeout
        )
    except asyncio.TimeoutError:
        return PortStatus.FILTERED
    except OSError:
        return PortStatus.CLOSED
    writer.close()
    try:
        await writer.wait_closed()
    except OSError:
        pass
    return PortStatus.OPEN