"""Hostname value object used to address a Karotz on the network."""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import InvalidHostnameError

_LABEL_RE = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
_MAX_HOSTNAME_LENGTH = 253


def _split_port(value: str) -> Tuple[str, Optional[int]]:
    if value.startswith("["):
        end = value.find("]")
        if end == -1:
            raise InvalidHostnameError(value, "unterminated IPv6 literal")
        host, rest = value[1:end], value[end + 1 :]
        if not rest:
            return host, None
        if not rest.startswith(":"):
            raise InvalidHostnameError(value, "unexpected text after IPv6 literal")
        return host, _parse_port(value, rest[1:])

    if value.count(":") == 1:
        host, port = value.split(":")
        return host, _parse_port(value, port)

    # bare IPv6 literal, or plain host without port
    return value, None


def _parse_port(value: str, port: str) -> int:
    if not port.isdigit():
        raise InvalidHostnameError(value, "port must be numeric")
    number = int(port)
    if not 1 <= number <= 65535:
        raise InvalidHostnameError(value, "port must be between 1 and 65535")
    return number


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def _is_dns_name(host: str) -> bool:
    if len(host) > _MAX_HOSTNAME_LENGTH:
        return False
    name = host[:-1] if host.endswith(".") else host
    labels = name.split(".")
    if labels[-1].isdigit():
        # all-numeric TLDs are never valid, this catches malformed IPv4
        return False
    return all(_LABEL_RE.match(label) for label in labels)


@dataclass(frozen=True, slots=True)
class Hostname:
    """Validated, immutable hostname with an optional port."""

    host: str
    port: Optional[int] = None

    @classmethod
    def of(cls, value: Optional[str]) -> "Hostname":
        """
        Parse and validate a hostname.

        Accepts DNS names, IPv4 addresses and IPv6 addresses (bare or
        bracketed), each optionally followed by ``:port``.

        Raises:
            InvalidHostnameError: If the value is missing or malformed.
        """
        if value is None:
            raise InvalidHostnameError(value, "hostname is required")
        if not isinstance(value, str):
            raise InvalidHostnameError(value, "hostname must be a string")

        candidate = value.strip()
        if not candidate:
            raise InvalidHostnameError(value, "hostname is empty")

        host, port = _split_port(candidate)
        if not host:
            raise InvalidHostnameError(value, "hostname is empty")
        if not (_is_ip_address(host) or _is_dns_name(host)):
            raise InvalidHostnameError(value)

        return cls(host=host.lower(), port=port)

    @property
    def is_ipv6(self) -> bool:
        return ":" in self.host

    @property
    def string_value(self) -> str:
        """Host part of a URL (``host``, ``host:port`` or ``[v6]:port``)."""
        host = f"[{self.host}]" if self.is_ipv6 else self.host
        if self.port is None:
            return host
        return f"{host}:{self.port}"

    def __str__(self) -> str:
        return self.string_value
