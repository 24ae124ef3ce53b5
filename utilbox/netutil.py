"""Network address helpers."""

from __future__ import annotations

import ipaddress
import socket

import psutil

__all__ = ["internal_ip", "internal_ipv4", "internal_ipv6"]


def internal_ip() -> str:
    """First non-loopback IPv4 address of this host, or "" if there is none."""
    for addrs in psutil.net_if_addrs().values():
        for addr in addrs:
            if addr.family != socket.AF_INET:
                continue
            try:
                ip = ipaddress.ip_address(addr.address)
            except ValueError:
                continue
            if not ip.is_loopback:
                return str(ip)
    return ""


def internal_ipv4() -> str:
    """The unspecified IPv4 address."""
    return str(ipaddress.IPv4Address(0))


def internal_ipv6() -> str:
    """The unspecified IPv6 address."""
    return str(ipaddress.IPv6Address(0))