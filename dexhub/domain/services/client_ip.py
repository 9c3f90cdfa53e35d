from __future__ import annotations

import ipaddress
from typing import Mapping


LOOPBACK_ADDRESSES = frozenset({"127.0.0.1", "::1"})


def extract_client_ip(headers: Mapping[str, str]) -> str:
    """First hop of ``x-forwarded-for``, then ``cf-connecting-ip``, then ``x-real-ip``."""
    lowered = {key.lower(): value for key, value in headers.items()}
    forwarded = lowered.get("x-forwarded-for", "")
    first_hop = forwarded.split(",")[0].strip() if forwarded else ""
    if first_hop:
        return first_hop
    for header in ("cf-connecting-ip", "x-real-ip"):
        value = (lowered.get(header) or "").strip()
        if value:
            return value
    return ""


def is_resolvable_ip(ip: str) -> bool:
    """Only literal, non-loopback IPv4/IPv6 addresses go to the lookup service."""
    if not ip or ip in LOOPBACK_ADDRESSES:
        return False
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False
    return not address.is_loopback
