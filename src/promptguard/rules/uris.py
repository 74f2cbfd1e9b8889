"""
URI rules for ``urllib.parse.SplitResult`` values.

Scheme, host and path-prefix comparisons are case-insensitive. When a URI
does not spell out its port, the scheme's well-known port is used.
"""

import ipaddress
from typing import Iterable, Optional
from urllib.parse import SplitResult

from .base import ValidationRule

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
    "ssh": 22,
    "telnet": 23,
    "smtp": 25,
    "gopher": 70,
    "ldap": 389,
    "nntp": 119,
}


def effective_port(value: SplitResult) -> Optional[int]:
    """Explicit port, or the scheme default, or None."""
    if value.port is not None:
        return value.port
    return DEFAULT_PORTS.get(value.scheme.lower())


def absolute_path(value: SplitResult) -> str:
    if not value.path and value.netloc:
        return "/"
    return value.path


def is_loopback_host(host: Optional[str]) -> bool:
    if not host:
        return False
    if host.lower() == "localhost":
        return True
    try:
        return ipaddress.ip_address(host).is_loopback
    except ValueError:
        return False


class UriSchemeRule(ValidationRule[SplitResult]):
    def __init__(self, scheme: str, message: Optional[str] = None):
        self.scheme = scheme
        super().__init__(message)

    def is_valid(self, value: SplitResult) -> bool:
        return value.scheme.lower() == self.scheme.lower()

    def default_message(self) -> str:
        return f"URI must use {self.scheme} scheme"


class HttpsOnlyRule(ValidationRule[SplitResult]):
    def is_valid(self, value: SplitResult) -> bool:
        return value.scheme.lower() == "https"

    def default_message(self) -> str:
        return "URI must use HTTPS"


class HttpOrHttpsRule(ValidationRule[SplitResult]):
    def is_valid(self, value: SplitResult) -> bool:
        return value.scheme.lower() in ("http", "https")

    def default_message(self) -> str:
        return "URI must use HTTP or HTTPS"


class DomainRule(ValidationRule[SplitResult]):
    """Exact host match; subdomains do not match."""

    def __init__(self, domain: str, message: Optional[str] = None):
        self.domain = domain
        super().__init__(message)

    def is_valid(self, value: SplitResult) -> bool:
        return (value.hostname or "") == self.domain.lower()

    def default_message(self) -> str:
        return f"URI must be from domain {self.domain}"


class AllowedDomainsRule(ValidationRule[SplitResult]):
    def __init__(self, allowed_domains: Iterable[str], message: Optional[str] = None):
        self.allowed_domains = list(dict.fromkeys(allowed_domains))
        self._allowed = frozenset(domain.lower() for domain in self.allowed_domains)
        super().__init__(message)

    def is_valid(self, value: SplitResult) -> bool:
        return (value.hostname or "") in self._allowed

    def default_message(self) -> str:
        return f"URI must be from one of: {', '.join(self.allowed_domains)}"


class PortRule(ValidationRule[SplitResult]):
    def __init__(self, port: int, message: Optional[str] = None):
        self.port = port
        super().__init__(message)

    def is_valid(self, value: SplitResult) -> bool:
        return effective_port(value) == self.port

    def default_message(self) -> str:
        return f"URI must use port {self.port}"


class AbsoluteUriRule(ValidationRule[SplitResult]):
    def is_valid(self, value: SplitResult) -> bool:
        return bool(value.scheme)

    def default_message(self) -> str:
        return "URI must be absolute"


class PathPrefixRule(ValidationRule[SplitResult]):
    def __init__(self, path_prefix: str, message: Optional[str] = None):
        self.path_prefix = path_prefix
        super().__init__(message)

    def is_valid(self, value: SplitResult) -> bool:
        return absolute_path(value).lower().startswith(self.path_prefix.lower())

    def default_message(self) -> str:
        return f"URI path must start with {self.path_prefix}"


class HasQueryStringRule(ValidationRule[SplitResult]):
    def is_valid(self, value: SplitResult) -> bool:
        return bool(value.query)

    def default_message(self) -> str:
        return "URI must include a query string"


class NoQueryStringRule(ValidationRule[SplitResult]):
    def is_valid(self, value: SplitResult) -> bool:
        return not value.query

    def default_message(self) -> str:
        return "URI must not include a query string"


class HasFragmentRule(ValidationRule[SplitResult]):
    def is_valid(self, value: SplitResult) -> bool:
        return bool(value.fragment)

    def default_message(self) -> str:
        return "URI must include a fragment"


class LocalhostRule(ValidationRule[SplitResult]):
    """Host is ``localhost`` or a loopback IP literal."""

    def is_valid(self, value: SplitResult) -> bool:
        return is_loopback_host(value.hostname)

    def default_message(self) -> str:
        return "URI must be a localhost address"
