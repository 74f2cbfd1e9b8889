"""Builders for IP addresses and URIs."""

from typing import Iterable, Optional, Union

from ..providers import InputProvider, OutputProvider
from ..rules.network import (
    AllowedIpAddressesRule,
    ApipaRule,
    BlockedIpAddressesRule,
    IPAddress,
    Ipv4Rule,
    Ipv6Rule,
    LoopbackIpRule,
    NotApipaRule,
    NotLoopbackIpRule,
    PrivateIpRule,
    PublicIpRule,
    SubnetRule,
)
from ..rules.uris import (
    AbsoluteUriRule,
    AllowedDomainsRule,
    DomainRule,
    HasFragmentRule,
    HasQueryStringRule,
    HttpOrHttpsRule,
    HttpsOnlyRule,
    LocalhostRule,
    NoQueryStringRule,
    PathPrefixRule,
    PortRule,
    UriSchemeRule,
)
from ..validators.network import IpAddressValidator, UriKind, UriValidator
from .base import BuilderBase

Address = Union[str, IPAddress]


class IpAddressBuilder(BuilderBase):
    def __init__(self, input_provider: InputProvider, output_provider: OutputProvider, prompt: str):
        super().__init__(IpAddressValidator(input_provider, output_provider, prompt))

    def with_ipv4(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(Ipv4Rule(message))

    def with_ipv6(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(Ipv6Rule(message))

    def with_private(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(PrivateIpRule(message))

    def with_public(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(PublicIpRule(message))

    def with_apipa(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(ApipaRule(message))

    def without_apipa(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(NotApipaRule(message))

    def with_loopback(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(LoopbackIpRule(message))

    def without_loopback(self, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(NotLoopbackIpRule(message))

    def with_subnet(self, network: Address, prefix_length: int, message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(SubnetRule(network, prefix_length, message))

    def with_allowed(self, allowed: Iterable[Address], message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(AllowedIpAddressesRule(allowed, message))

    def with_blocked(self, blocked: Iterable[Address], message: Optional[str] = None) -> "IpAddressBuilder":
        return self._add_rule(BlockedIpAddressesRule(blocked, message))


class UriBuilder(BuilderBase):
    """
    Rules for ``urllib.parse.SplitResult`` values.

    Example:
        >>> webhook = (
        ...     UriBuilder(stdin, stdout, "Webhook URL")
        ...     .with_https_only()
        ...     .with_allowed_domains(["hooks.example.com"])
        ...     .get()
        ... )
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        kind: UriKind = UriKind.ABSOLUTE,
    ):
        super().__init__(UriValidator(input_provider, output_provider, prompt, kind))

    def with_scheme(self, scheme: str, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(UriSchemeRule(scheme, message))

    def with_https_only(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(HttpsOnlyRule(message))

    def with_http_or_https(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(HttpOrHttpsRule(message))

    def with_domain(self, domain: str, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(DomainRule(domain, message))

    def with_allowed_domains(self, allowed_domains: Iterable[str], message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(AllowedDomainsRule(allowed_domains, message))

    def with_port(self, port: int, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(PortRule(port, message))

    def with_absolute_uri(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(AbsoluteUriRule(message))

    def with_path_prefix(self, path_prefix: str, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(PathPrefixRule(path_prefix, message))

    def with_query_string(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(HasQueryStringRule(message))

    def without_query_string(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(NoQueryStringRule(message))

    def with_fragment(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(HasFragmentRule(message))

    def with_localhost(self, message: Optional[str] = None) -> "UriBuilder":
        return self._add_rule(LocalhostRule(message))
