"""Asynchronous TCP port scanner for IP addresses and CIDR ranges."""

__version__ = "0.1.0"