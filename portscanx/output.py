"""Rendering of scan results as CSV, JSON or coloured terminal lines."""

from __future__ import annotations

import json
from collections.abc import Iterator

from portscanx.port import PortStatus
from portscanx.results import IPAddress, ScanResultHandler
from portscanx.service import get_service_name

_CSV_HEADER = "IP,Port,Status,Service\n"
_UNKNOWN_SERVICE = "unknown"


def _wrap(text: str, start: str, end: str) -> str:
    return f"\x1b[{start}m{text}\x1b[{end}m"


def _green(text: str) -> str:
    return _wrap(text, "32", "39")


def _red(text: str) -> str:
    return _wrap(text, "31", "39")


def _yellow(text: str) -> str:
    return _wrap(text, "33", "39")


def _bold(text: str) -> str:
    return _wrap(text, "1", "0")


def _dimmed(text: str) -> str:
    return _wrap(text, "2", "0")


def _service(port: int) -> str:
    return get_service_name(port) or _UNKNOWN_SERVICE


def _rows(
    results: ScanResultHandler, only_open: bool
) -> Iterator[tuple[IPAddress, int, PortStatus]]:
    """Yield open endpoints, then filtered and closed ones unless only_open."""
    for ip, port in results.open:
        yield ip, port, PortStatus.OPEN
    if only_open:
        return
    for ip, port in results.filtered:
        yield ip, port, PortStatus.FILTERED
    for ip, port in results.closed:
        yield ip, port, PortStatus.CLOSED


def output_csv(results: ScanResultHandler, only_open: bool) -> str:
    """Return the results as CSV text with an IP,Port,Status,Service header."""
    lines = [_CSV_HEADER]
    for ip, port, status in _rows(results, only_open):
        service = _service(port) if status is PortStatus.OPEN else ""
        lines.append(f"{ip},{port},{status.value},{service}\n")
    return "".join(lines)


def output_json(results: ScanResultHandler, only_open: bool) -> str:
    """Return the results as an indented JSON document."""
    ports = [
        {
            "port": port,
            "status": status.value,
            "service": _service(port) if status is PortStatus.OPEN else None,
        }
        for _ip, port, status in _rows(results, only_open)
    ]
    return json.dumps({"ip": {"ports": ports}}, indent=2, ensure_ascii=False)


def output_terminal(results: ScanResultHandler, only_open: bool) -> None:
    """Print one coloured line per scanned endpoint."""
    for ip, port in results.open:
        print(f"{_green('✔')} {ip}:{port} → {_green(_bold('open'))} ({_service(port)})")
    if only_open:
        return
    for ip, port in results.filtered:
        print(f"{_red('✘')} {ip}:{port} → {_dimmed('closed')}")
    for ip, port in results.closed:
        print(f"{_yellow('?')} {ip}:{port} → {_yellow(_bold('filtered'))}")