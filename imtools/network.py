"""Local address discovery and client address extraction."""

from __future__ import annotations

import ipaddress
import socket
from collections.abc import Mapping

import psutil

__all__ = [
    "X_FORWARDED_FOR",
    "X_REAL_IP",
    "X_CLIENT_IP",
    "NoLocalIPError",
    "get_local_ip",
    "get_rpc_register_ip",
    "get_listen_ip",
    "remote_ip",
]

X_FORWARDED_FOR = "X-Forwarded-For"
X_REAL_IP = "X-Real-IP"
X_CLIENT_IP = "x-client-ip"

_PRIVATE_V4 = (
    ipaddress.IPv4Network("10.0.0.0/8"),
    ipaddress.IPv4Network("172.16.0.0/12"),
    ipaddress.IPv4Network("192.168.0.0/16"),
)


class NoLocalIPError(OSError):
    """Raised when no usable local IPv4 address is found."""


def _is_private(address: ipaddress.IPv4Address) -> bool:
    return any(address in network for network in _PRIVATE_V4)


def _interface_usable(stats: object) -> bool:
    if stats is None or not getattr(stats, "isup", False):
        return False
    flags = getattr(stats, "flags", "") or ""
    return "loopback" not in flags.split(",")


def get_local_ip() -> str:
    """A non-loopback IPv4 address of an active interface, preferring private ones."""
    stats = psutil.net_if_stats()
    public_ip = ""
    for name, addresses in psutil.net_if_addrs().items():
        if not _interface_usable(stats.get(name)):
            continue
        for entry in addresses:
            if entry.family != socket.AF_INET:
                continue
            try:
                address = ipaddress.IPv4Address(entry.address)
            except ValueError:
                continue
            if address.is_loopback or address.is_multicast:
                continue
            if not _is_private(address) and not public_ip:
                public_ip = str(address)
            else:
                return str(address)
    if public_ip:
        return public_ip
    raise NoLocalIPError("no suitable local IP address found")


def get_rpc_register_ip(config_ip: str) -> str:
    """The configured address, or a discovered local one when none is set."""
    return config_ip or get_local_ip()


def get_listen_ip(config_ip: str) -> str:
    """The configured address, or all interfaces when none is set."""
    return config_ip or "0.0.0.0"


def _split_host_port(address: str) -> str:
    if address.startswith("["):
        end = address.find("]")
        if end < 0 or address[end + 1 : end + 2] != ":":
            raise ValueError(f"invalid address {address!r}")
        return address[1:end]
    host, sep, _port = address.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address {address!r}")
    if ":" in host:
        raise ValueError(f"too many colons in address {address!r}")
    return host


def remote_ip(headers: Mapping[str, str] | None, remote_addr: str = "") -> str:
    """Client address from proxy headers, falling back to the peer address."""
    lowered = {key.lower(): value for key, value in (headers or {}).items()}
    for header in (X_CLIENT_IP, X_REAL_IP):
        value = lowered.get(header.lower(), "")
        if value:
            return value
    forwarded = lowered.get(X_FORWARDED_FOR.lower(), "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    try:
        ip = _split_host_port(remote_addr)
    except ValueError:
        ip = remote_addr
    if ip == "::1":
        return "127.0.0.1"
    return ip