"""Command-line entry point."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence

from portscanx.config import OutputFormat, ScanOptions
from portscanx.ip import NoTargetsError
from portscanx.scanner import run_scan
from portscanx.service import parse_ports

_VERSION = "0.1.0"
_PARALLELISM = 100


class _HelpFormatter(argparse.HelpFormatter):
    def add_usage(self, usage, actions, groups, prefix=None):
        if prefix is None:
            prefix = "Usage: "
        super().add_usage(usage, actions, groups, prefix)


def _milliseconds(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the portscanx command."""
    parser = argparse.ArgumentParser(
        prog="portscanx",
        description="A fast and flexible port scanner.",
        formatter_class=_HelpFormatter,
    )
    parser.add_argument(
        "target", metavar="IP/Hostname", help="The IP address or hostname to scan."
    )
    parser.add_argument(
        "-p",
        "--ports",
        metavar="PORT/RANGE",
        default="1-65535",
        help="The port or range of ports to scan (e.g., 80, 1-1000).",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=_milliseconds,
        default=500,
        help="Timeout for each port scan in milliseconds.",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="terminal",
        help="Output format: terminal, json, csv",
    )
    parser.add_argument(
        "--only-open", action="store_true", help="Only show open ports."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output."
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_VERSION}",
        help="Show version information and exit.",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> ScanOptions:
    """Build scan options from parsed command-line arguments."""
    try:
        output_format = OutputFormat(args.output)
    except ValueError:
        output_format = OutputFormat.TERMINAL
    return ScanOptions(
        targets=[args.target],
        ports=parse_ports(args.ports),
        timeout=args.timeout / 1000,
        verbose=args.verbose,
        output_format=output_format,
        parallelism=_PARALLELISM,
        open_only=args.only_open,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)
    options = options_from_args(args)
    try:
        asyncio.run(run_scan(options))
    except NoTargetsError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())