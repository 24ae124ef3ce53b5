import ipaddress
import socket
from collections import namedtuple
from unittest import mock

from utilbox.netutil import internal_ip, internal_ipv4, internal_ipv6

Addr = namedtuple("Addr", "family address netmask broadcast ptp")


def test_internal_ip_is_valid_or_empty():
    ip = internal_ip()
    if ip:
        parsed = ipaddress.ip_address(ip)
        assert parsed.version == 4
        assert not parsed.is_loopback
    else:
        assert ip == ""


def test_internal_ip_skips_loopback():
    fake = {
        "lo": [Addr(socket.AF_INET, "127.0.0.1", None, None, None)],
        "eth0": [
            Addr(socket.AF_INET6, "fe80::1", None, None, None),
            Addr(socket.AF_INET, "10.1.2.3", None, None, None),
        ],
    }
    with mock.patch("psutil.net_if_addrs", return_value=fake):
        assert internal_ip() == "10.1.2.3"


def test_internal_ip_only_loopback():
    fake = {"lo": [Addr(socket.AF_INET, "127.0.0.1", None, None, None)]}
    with mock.patch("psutil.net_if_addrs", return_value=fake):
        assert internal_ip() == ""


def test_unspecified_addresses():
    assert internal_ipv4() == "0.0.0.0"
    assert internal_ipv6() == "::"