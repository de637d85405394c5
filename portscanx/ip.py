"""Expansion of scan targets into individual IP addresses."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable, Iterator

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_CIDR_TEXT = re.compile(r"[^/%]+/[0-9]{1,3}", re.ASCII)


class NoTargetsError(ValueError):
    """Raised when none of the targets is an IP address or a CIDR range."""

    def __init__(self) -> None:
        super().__init__("No valid IP addresses or CIDR ranges found in the targets.")


def _parse_address(target: str) -> IPAddress | None:
    if "%" in target:
        return None
    try:
        return ipaddress.ip_address(target)
    except ValueError:
        return None


def _parse_network(
    target: str,
) -> ipaddress.IPv4Network | ipaddress.IPv6Network | None:
    if not _CIDR_TEXT.fullmatch(target):
        return None
    try:
        return ipaddress.ip_network(target, strict=False)
    except ValueError:
        return None


def _hosts(
    network: ipaddress.IPv4Network | ipaddress.IPv6Network,
) -> Iterator[IPAddress]:
    first = int(network.network_address)
    last = int(network.broadcast_address)
    if network.version == 4:
        if network.prefixlen < 31:
            first += 1
            last -= 1
    elif network.prefixlen < 128:
        first += 1
    address_type = type(network.network_address)
    for value in range(first, last + 1):
        yield address_type(value)


def expand_ips(targets: Iterable[str]) -> list[IPAddress]:
    """Return every address named by ``targets``, expanding CIDR ranges to hosts.

    Targets that are neither an address nor a CIDR range are ignored; if
    nothing remains, NoTargetsError is raised.
    """
    result: list[IPAddress] = []
    for target in targets:
        address = _parse_address(target)
        if address is not None:
            result.append(address)
            continue
        network = _parse_network(target)
        if network is not None:
            result.extend(_hosts(network))
    if not result:
        raise NoTargetsError()
    return result