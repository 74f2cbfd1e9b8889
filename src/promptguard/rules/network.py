"""
IP address rules for ``ipaddress.IPv4Address`` / ``IPv6Address`` values.

The private-range check is deliberately narrower than
``ipaddress.IPv4Address.is_private``: only 10/8, 172.16/12, 192.168/16 and
the APIPA block 169.254/16 count, and IPv6 addresses are never private.
"""

import ipaddress
from typing import Iterable, Optional, Union

from .base import ValidationRule

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def _octets(value: IPAddress) -> bytes:
    return value.packed


def is_private_ipv4(value: IPAddress) -> bool:
    if value.version != 4:
        return False
    first, second = _octets(value)[:2]
    return (
        first == 10
        or (first == 172 and 16 <= second <= 31)
        or (first == 192 and second == 168)
        or (first == 169 and second == 254)
    )


def is_apipa(value: IPAddress) -> bool:
    if value.version != 4:
        return False
    first, second = _octets(value)[:2]
    return first == 169 and second == 254


class Ipv4Rule(ValidationRule[IPAddress]):
    def is_valid(self, value: IPAddress) -> bool:
        return value.version == 4

    def default_message(self) -> str:
        return "IP address must be IPv4"


class Ipv6Rule(ValidationRule[IPAddress]):
    def is_valid(self, value: IPAddress) -> bool:
        return value.version == 6

    def default_message(self) -> str:
        return "IP address must be IPv6"


class PrivateIpRule(ValidationRule[IPAddress]):
    def is_valid(self, value: IPAddress) -> bool:
        return is_private_ipv4(value)

    def default_message(self) -> str:
        return (
            "IP address must be private "
            "(10.x.x.x, 172.16-31.x.x, 192.168.x.x, or 169.254.x.x)"
        )


class ApipaRule(ValidationRule[IPAddress]):
    def is_valid(self, value: IPAddress) -> bool:
        return is_apipa(value)

    def default_message(self) -> str:
        return "IP address must be an APIPA address (169.254.x.x)"


class NotApipaRule(ValidationRule[IPAddress]):
    """IPv6 addresses always pass."""

    def is_valid(self, value: IPAddress) -> bool:
        return not is_apipa(value)

    def default_message(self) -> str:
        return "IP address cannot be APIPA (169.254.x.x)"


class LoopbackIpRule(ValidationRule[IPAddress]):
    def is_valid(self, value: IPAddress) -> bool:
        return value.is_loopback

    def default_message(self) -> str:
        return "IP address must be loopback (127.0.0.1 or ::1)"


class NotLoopbackIpRule(ValidationRule[IPAddress]):
    def is_valid(self, value: IPAddress) -> bool:
        return not value.is_loopback

    def default_message(self) -> str:
        return "IP address cannot be loopback"


class PublicIpRule(ValidationRule[IPAddress]):
    """Neither private (per :func:`is_private_ipv4`) nor loopback."""

    def is_valid(self, value: IPAddress) -> bool:
        return not is_private_ipv4(value) and not value.is_loopback

    def default_message(self) -> str:
        return "IP address must be public"


class SubnetRule(ValidationRule[IPAddress]):
    """
    Address shares the first ``prefix_length`` bits with ``network``.

    Host bits of ``network`` are ignored, so ``SubnetRule("192.168.1.7", 24)``
    behaves like ``192.168.1.0/24``. Addresses of the other family never match.
    """

    def __init__(
        self,
        network: Union[str, IPAddress],
        prefix_length: int,
        message: Optional[str] = None,
    ):
        self.network = ipaddress.ip_address(network)
        self.prefix_length = prefix_length
        super().__init__(message)

    def is_valid(self, value: IPAddress) -> bool:
        if value.version != self.network.version:
            return False
        width = self.network.max_prefixlen
        mask = ((1 << width) - 1) ^ ((1 << (width - self.prefix_length)) - 1)
        return int(value) & mask == int(self.network) & mask

    def default_message(self) -> str:
        return f"IP address must be within subnet {self.network}/{self.prefix_length}"


class AllowedIpAddressesRule(ValidationRule[IPAddress]):
    def __init__(self, allowed: Iterable[Union[str, IPAddress]], message: Optional[str] = None):
        self._allowed = frozenset(ipaddress.ip_address(address) for address in allowed)
        super().__init__(message)

    def is_valid(self, value: IPAddress) -> bool:
        return value in self._allowed

    def default_message(self) -> str:
        return "IP address is not in the allowed list"


class BlockedIpAddressesRule(ValidationRule[IPAddress]):
    def __init__(self, blocked: Iterable[Union[str, IPAddress]], message: Optional[str] = None):
        self._blocked = frozenset(ipaddress.ip_address(address) for address in blocked)
        super().__init__(message)

    def is_valid(self, value: IPAddress) -> bool:
        return value not in self._blocked

    def default_message(self) -> str:
        return "IP address is blocked"
