# portscanx

A fast and flexible TCP port scanner. It tries a TCP connection to every
requested port on one IP address or on every host of a CIDR range,
concurrently, and sorts each port into open (the connection completed),
closed (the connection was refused or failed) or filtered (no answer before
the timeout).

## Installation

```
pip install .
```

## Command line

```
portscanx TARGET [-p PORTS] [-t TIMEOUT] [-o FORMAT] [--only-open] [-v]
```

- `TARGET` – an IPv4 or IPv6 address (`192.168.1.10`) or a CIDR range
  (`192.168.1.0/24`). A range is expanded to its hosts: for IPv4 the network
  and broadcast addresses are left out, except in `/31` and `/32`.
- `-p, --ports` – a single port (`80`) or a range (`1-1000`). In a range a
  missing or invalid start means `1` and a missing or invalid end means
  `65535`. Default: `1-65535`.
- `-t, --timeout` – connection timeout per port, in milliseconds (a
  non-negative integer). Default: `500`.
- `-o, --output` – `terminal`, `json` or `csv`. Default: `terminal`.
  Any other value falls back to `terminal`.
- `--only-open` – report only open ports.
- `-v, --verbose` – print `[SCAN] Starting scan on IP:PORT` as each port scan
  starts.
- `--version` – print `portscanx 0.1.0` and exit.
- `-h, --help` – print usage and exit.

Examples:

```
portscanx 127.0.0.1 --ports 1-1024
portscanx 10.0.0.0/30 -p 22 -t 200 --only-open
portscanx 192.168.1.1 -p 1-1000 -o json
```

After the scan the command prints how long it took and a reminder that
service names are guesses. Then:

- with `json` the results are written to `portscanx.json` in the current
  directory, as `{"ip": {"ports": [{"port": ..., "status": ..., "service": ...}]}}`;
  `service` is set only for open ports;
- with `csv` they go to `portscanx.csv`, with the header
  `IP,Port,Status,Service`; the service column is filled only for open ports;
- with `terminal` one coloured line is printed per port, open ports first.

In every format, open ports come first, then filtered ports, then closed
ones; `--only-open` drops the last two groups.

If the target is neither an address nor a CIDR range, the command prints
`No valid IP addresses or CIDR ranges found in the targets.` to standard error
and exits with status 1.

Service names are looked up from a table of well-known port numbers; they are
not detected from the service itself and may be inaccurate. Ports not in the
table are shown as `unknown`.

## Library use

```python
import asyncio
from portscanx.port import scan_port, PortStatus

status = asyncio.run(scan_port("127.0.0.1", 22, 0.3, False))
print(status is PortStatus.OPEN)
```

Other building blocks:

- `portscanx.service.parse_ports(text)` and
  `portscanx.service.get_service_name(port)` (returns `None` for unknown ports)
- `portscanx.ip.expand_ips(targets)`, which raises `portscanx.ip.NoTargetsError`
  (a `ValueError`) when no target is valid
- `portscanx.results.ScanResultHandler`, with `open`, `filtered` and `closed`
  lists of `(address, port)` pairs and `add_result(ip, port, status)`
- `portscanx.output.output_csv(results, only_open)` and
  `output_json(results, only_open)`, which return text, and
  `output_terminal(results, only_open)`, which prints
- `portscanx.scanner.run_scan(options)`, a coroutine taking a
  `portscanx.config.ScanOptions` (timeout in seconds, `OutputFormat` enum) that
  reports as the command does and returns the `ScanResultHandler`
- `portscanx.cli.main(argv=None)`, which returns the exit status

## What it does not do

- Hostnames are not resolved: the target must be an IP address or a CIDR
  range.
- Only one target can be given on the command line.
- Concurrency is not limited: every port of every host is probed at once.
  `ScanOptions.parallelism` is carried but not used.
- Only TCP connect scans are done; there is no UDP scanning and no service
  or version detection.

## Tests

```
pip install ".[test]"
pytest
```