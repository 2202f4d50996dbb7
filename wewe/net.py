"""Discovery of the default gateway's MAC address from the kernel tables."""

from __future__ import annotations

import os
from ipaddress import IPv4Address
from typing import Iterable

ROUTE_PATH = "/proc/net/route"
ARP_PATH = "/proc/net/arp"

_RTF_GATEWAY = 0x2
_DEFAULT_DESTINATION = "00000000"


def _hex(text: str) -> int | None:
    try:
        return int(text, 16)
    except ValueError:
        return None


def parse_default_gateway_ip(lines: Iterable[str]) -> str | None:
    """Return the dotted address of the first default gateway in a route table."""
    for line in lines:
        fields = line.split()
        if len(fields) < 4:
            continue
        _iface, destination, gateway, flags = fields[:4]
        if destination != _DEFAULT_DESTINATION:
            continue
        if not (_hex(flags) or 0) & _RTF_GATEWAY:
            continue
        address = _hex(gateway)
        if address is None:
            continue
        # The kernel prints the address in host (little-endian) byte order.
        return str(IPv4Address((address & 0xFFFFFFFF).to_bytes(4, "little")))
    return None


def find_arp_mac(lines: Iterable[str], ip: str) -> str | None:
    """Return the hardware address for ``ip`` from an ARP table with a header line."""
    rows = iter(lines)
    next(rows, None)
    for line in rows:
        fields = line.split()
        if len(fields) >= 6 and fields[0] == ip:
            return fields[3]
    return None


def get_default_gateway_mac(
    route_path: str | os.PathLike[str] = ROUTE_PATH,
    arp_path: str | os.PathLike[str] = ARP_PATH,
) -> str | None:
    """Return the MAC address of the default gateway, or None if unknown."""
    try:
        with open(route_path, encoding="ascii", errors="replace") as routes:
            gateway_ip = parse_default_gateway_ip(routes)
    except OSError:
        return None
    if gateway_ip is None:
        return None
    try:
        with open(arp_path, encoding="ascii", errors="replace") as arp:
            return find_arp_mac(arp, gateway_ip)
    except OSError:
        return None