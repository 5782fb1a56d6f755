"""IPv4 endpoint addresses, host-name lookup and a millisecond service clock."""

from __future__ import annotations

import re
import socket
import time
from collections.abc import Callable
from dataclasses import dataclass

HOST_ANY = 0
HOST_BROADCAST = 0xFFFFFFFF
PORT_ANY = 0

_MASK32 = 0xFFFFFFFF
_OCTET = re.compile(r"0|[1-9][0-9]{0,2}")


def _check_host(host: int) -> int:
    if not 0 <= host <= _MASK32:
        raise ValueError(f"IPv4 host out of range: {host!r}")
    return host


@dataclass(frozen=True)
class Address:
    """An IPv4 host (as a 32-bit number) and a port."""

    host: int = HOST_ANY
    port: int = PORT_ANY

    def __post_init__(self) -> None:
        _check_host(self.host)
        if not 0 <= self.port <= 0xFFFF:
            raise ValueError(f"port out of range: {self.port!r}")

    @classmethod
    def from_sockaddr(cls, sockaddr: tuple[str, int]) -> Address:
        """Build an address from a socket-module (ip, port) pair."""
        ip, port = sockaddr[0], sockaddr[1]
        return cls(parse_host_ip(ip), port)

    @property
    def ip(self) -> str:
        return host_ip_string(self.host)

    @property
    def sockaddr(self) -> tuple[str, int]:
        """The (ip, port) pair the socket module expects."""
        return (self.ip, self.port)

    def __str__(self) -> str:
        return f"{self.ip}:{self.port}"


def parse_host_ip(name: str) -> int:
    """Parse a strict dotted-quad IPv4 address; raises ValueError if malformed."""
    parts = name.split(".")
    if len(parts) != 4:
        raise ValueError(f"not a dotted-quad IPv4 address: {name!r}")
    host = 0
    for part in parts:
        if not _OCTET.fullmatch(part) or int(part) > 255:
            raise ValueError(f"not a dotted-quad IPv4 address: {name!r}")
        host = (host << 8) | int(part)
    return host


def resolve_host(name: str) -> int:
    """Resolve a host name to an IPv4 host, falling back to parsing it as an address."""
    try:
        results = socket.getaddrinfo(name, None, socket.AF_INET)
    except (socket.gaierror, UnicodeError):
        results = []
    for family, _type, _proto, _canon, sockaddr in results:
        if family == socket.AF_INET and sockaddr:
            return parse_host_ip(sockaddr[0])
    return parse_host_ip(name)


def host_ip_string(host: int) -> str:
    """Dotted-quad text of an IPv4 host."""
    _check_host(host)
    return ".".join(str((host >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def host_name(host: int) -> str:
    """Reverse-resolve a host; falls back to its dotted-quad text when it has no name."""
    ip = host_ip_string(host)
    try:
        name, _service = socket.getnameinfo((ip, 0), socket.NI_NAMEREQD)
    except socket.gaierror as exc:
        if exc.errno == socket.EAI_NONAME:
            return ip
        raise
    return name


class Clock:
    """Millisecond clock, wrapping at 32 bits, whose origin can be moved."""

    def __init__(self, now: Callable[[], float] | None = None) -> None:
        self._now = now or time.monotonic
        self._base = 0

    def _millis(self) -> int:
        return int(self._now() * 1000)

    def get(self) -> int:
        """Milliseconds elapsed since the clock's origin."""
        return (self._millis() - self._base) & _MASK32

    def set(self, base: int) -> None:
        """Move the origin so that get() returns base right now."""
        self._base = (self._millis() - base) & _MASK32