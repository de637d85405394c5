"""Scan configuration shared by the scanner, the outputs and the command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputFormat(Enum):
    """Where and how scan results are reported."""

    TERMINAL = "terminal"
    JSON = "json"
    CSV = "csv"


@dataclass
class ScanOptions:
    """Everything a scan needs to know.

    ``timeout`` is the per-port connection timeout in seconds.
    """

    targets: list[str] = field(default_factory=list)
    ports: list[int] = field(default_factory=list)
    timeout: float = 0.5
    verbose: bool = False
    output_format: OutputFormat = OutputFormat.TERMINAL
    parallelism: int = 100
    open_only: bool = False