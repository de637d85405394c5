"""Running a scan over every target address and port."""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

from portscanx.config import OutputFormat, ScanOptions
from portscanx.ip import IPAddress, expand_ips
from portscanx.output import (
    _bold,
    _dimmed,
    _green,
    _yellow,
    output_csv,
    output_json,
    output_terminal,
)
from portscanx.port import PortStatus, scan_port
from portscanx.results import ScanResultHandler

JSON_FILE = "portscanx.json"
CSV_FILE = "portscanx.csv"


async def _probe(
    ip: IPAddress, port: int, timeout: float, verbose: bool
) -> tuple[IPAddress, int, PortStatus]:
    return ip, port, await scan_port(ip, port, timeout, verbose)


async def run_scan(options: ScanOptions) -> ScanResultHandler:
    """Scan every port of every target and report the results.

    JSON and CSV output go to portscanx.json and portscanx.csv in the current
    directory; terminal output is printed. Raises NoTargetsError when no
    target is an address or CIDR range. Returns the collected results.
    """
    started = time.perf_counter()
    ips = expand_ips(options.targets)
    probes = [
        _probe(ip, port, options.timeout, options.verbose)
        for ip in ips
        for port in options.ports
    ]

    results = ScanResultHandler()
    for finished in asyncio.as_completed(probes):
        ip, port, status = await finished
        results.add_result(ip, port, status)

    elapsed = time.perf_counter() - started
    print(f"{_green('✅')} {_bold('Scan finished in')} {elapsed:.3f}s")
    print(
        f"{_yellow(_bold('⚠️  Service names may not be accurate.'))}\n"
        f"{_dimmed('They are based only on port numbers, not on service detection.')}"
    )

    if options.output_format is OutputFormat.JSON:
        Path(JSON_FILE).write_text(
            output_json(results, options.open_only), encoding="utf-8"
        )
    elif options.output_format is OutputFormat.CSV:
        Path(CSV_FILE).write_text(
            output_csv(results, options.open_only), encoding="utf-8"
        )
    else:
        output_terminal(results, options.open_only)
    return results