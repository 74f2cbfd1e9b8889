"""
IP address and URI parsers.

URIs are returned as ``urllib.parse.SplitResult``. A URI is *absolute* when
it has a scheme; an absolute URI must also name a host unless its scheme is
one of the host-less schemes (``mailto:``, ``urn:``, ``file:``...). A
*relative* URI has neither scheme nor network location.
"""

import ipaddress
import re
from enum import Enum
from typing import Optional
from urllib.parse import SplitResult, urlsplit

from ..providers import InputProvider, OutputProvider
from .base import ParseResult, Validator

HOSTLESS_SCHEMES = frozenset({"mailto", "urn", "file", "data", "tel", "news"})

_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


class IpAddressValidator(Validator):
    """Accepts IPv4 dotted-quad and IPv6 text forms."""

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, "Please enter a valid IP address"
        try:
            return ipaddress.ip_address(raw.strip()), None
        except ValueError:
            return None, "Please enter a valid IP address (e.g., 192.168.1.1 or 2001:db8::1)"


class UriKind(Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    RELATIVE_OR_ABSOLUTE = "relative_or_absolute"


def is_absolute(parts: SplitResult) -> bool:
    if not parts.scheme or not _SCHEME.match(parts.scheme):
        return False
    return bool(parts.netloc) or parts.scheme.lower() in HOSTLESS_SCHEMES


def is_relative(parts: SplitResult) -> bool:
    return not parts.scheme and not parts.netloc


def split_uri(text: str) -> Optional[SplitResult]:
    """``urlsplit`` that also rejects whitespace and malformed ports."""
    if any(char.isspace() for char in text):
        return None
    try:
        parts = urlsplit(text)
        # Raises ValueError for a non-numeric or out-of-range port.
        parts.port
    except ValueError:
        return None
    return parts


class UriValidator(Validator):
    """
    Validator for URIs.

    Args:
        kind: Which URIs are accepted; absolute only by default.
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        kind: UriKind = UriKind.ABSOLUTE,
    ):
        super().__init__(input_provider, output_provider, prompt)
        self.kind = kind

    def accepts(self, parts: SplitResult) -> bool:
        if self.kind is UriKind.ABSOLUTE:
            return is_absolute(parts)
        if self.kind is UriKind.RELATIVE:
            return is_relative(parts)
        return is_absolute(parts) or is_relative(parts)

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, "Please enter a valid URI"
        parts = split_uri(raw.strip())
        if parts is not None and self.accepts(parts):
            return parts, None
        if self.kind is UriKind.ABSOLUTE:
            return None, "Please enter a valid absolute URI (e.g., https://example.com)"
        if self.kind is UriKind.RELATIVE:
            return None, "Please enter a valid relative URI (e.g., /path/to/resource)"
        return None, "Please enter a valid URI"
