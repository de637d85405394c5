"""Port number parsing and well-known service names."""

from __future__ import annotations

import re

_MAX_PORT = 65535
_PORT_TEXT = re.compile(r"\+?[0-9]+", re.ASCII)

_KNOWN_SERVICES: dict[int, str] = {
    7: "echo",
    9: "discard",
    11: "systat",
    13: "daytime",
    17: "qotd",
    19: "chargen",
    20: "ftp-data",
    21: "ftp",
    22: "ssh",
    23: "telnet",
    25: "smtp",
    37: "time",
    42: "nameserver",
    53: "dns",
    67: "dhcp-server",
    68: "dhcp-client",
    69: "tftp",
    79: "finger",
    80: "http",
    88: "kerberos",
    102: "iso-tsap",
    110: "pop3",
    111: "rpcbind",
    113: "ident",
    119: "nntp",
    123: "ntp",
    143: "imap",
    161: "snmp",
    162: "snmptrap",
    179: "bgp",
    194: "irc",
    443: "https",
    445: "microsoft-ds",
    465: "smtps",
    514: "syslog",
    515: "printer",
    520: "ripv1",
    521: "ripv2",
    548: "afp",
    587: "submission",
    631: "ipp",
    636: "ldaps",
    873: "rsync",
    993: "imaps",
    995: "pop3s",
    8000: "http-alt",
    8080: "http-alt",
    8443: "https-alt",
    1080: "socks",
    1433: "ms-sql-s",
    1521: "oracle-db",
    2049: "nfs",
    2181: "zookeeper",
    2375: "docker",
    2376: "docker-tls",
    27017: "mongodb",
    28017: "mongodb-web",
    3128: "squid",
    3306: "mysql",
    5432: "postgres",
    6379: "redis",
}


def get_service_name(port: int) -> str | None:
    """Return the conventional service name for ``port``, or None if unknown."""
    return _KNOWN_SERVICES.get(port)


def _parse_port(text: str) -> int | None:
    """Parse a port number in 0..65535, or return None if the text is not one."""
    text = text.strip()
    if not _PORT_TEXT.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _MAX_PORT else None


def parse_ports(text: str) -> list[int]:
    """Turn ``"80"`` or ``"1-1000"`` into a list of ports.

    In a range, a missing or invalid start means 1 and a missing or invalid
    end means 65535. Anything else that is not a port yields an empty list.
    """
    if "-" in text:
        start_text, end_text = text.split("-", 1)
        start = _parse_port(start_text)
        end = _parse_port(end_text)
        start = 1 if start is None else start
        end = _MAX_PORT if end is None else end
        return list(range(start, end + 1))
    single = _parse_port(text)
    return [] if single is None else [single]