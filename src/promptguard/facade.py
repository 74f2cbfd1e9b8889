"""
One-call entry points.

``get_<type>(prompt)`` asks once with no rules and returns the parsed
value; ``get_<type>_async`` is the same as a coroutine. ``for_<type>(prompt)``
returns the matching builder for adding rules.

Every function accepts ``input_provider`` / ``output_provider`` keywords.
When omitted, the module-level :data:`default_input` and
:data:`default_output` console providers are used. They hold no
per-request state and may be shared by concurrent validators; interleaving
on the terminal itself is not prevented.

Example:
    >>> from promptguard import facade
    >>> name = facade.get_string("Name")
    >>> port = facade.for_integer("Port").with_range(1, 65535).get()
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from ipaddress import IPv4Address, IPv6Address
from typing import Optional, Tuple, Type, Union
from urllib.parse import SplitResult
from uuid import UUID

from .builders import (
    CharBuilder,
    DateBuilder,
    DateTimeBuilder,
    DurationBuilder,
    EnumBuilder,
    GuidBuilder,
    IntegerBuilder,
    IpAddressBuilder,
    NumericBuilder,
    StringBuilder,
    TimeBuilder,
    UriBuilder,
)
from .cancellation import CancellationToken
from .console import ConsoleInput, ConsoleOutput
from .providers import InputProvider, OutputProvider
from .validators.network import UriKind

default_input: InputProvider = ConsoleInput()
default_output: OutputProvider = ConsoleOutput()


def _providers(
    input_provider: Optional[InputProvider], output_provider: Optional[OutputProvider]
) -> Tuple[InputProvider, OutputProvider]:
    return (
        input_provider if input_provider is not None else default_input,
        output_provider if output_provider is not None else default_output,
    )


# Builders


def for_integer(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> IntegerBuilder:
    return IntegerBuilder(*_providers(input_provider, output_provider), prompt)


def for_int(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> IntegerBuilder:
    """Alias of :func:`for_integer`."""
    return for_integer(prompt, input_provider=input_provider, output_provider=output_provider)


def for_numeric(
    prompt: str,
    number_type: type = float,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> NumericBuilder:
    return NumericBuilder(*_providers(input_provider, output_provider), prompt, number_type)


def for_float(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> NumericBuilder:
    return for_numeric(prompt, float, input_provider=input_provider, output_provider=output_provider)


def for_decimal(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> NumericBuilder:
    return for_numeric(prompt, Decimal, input_provider=input_provider, output_provider=output_provider)


def for_string(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> StringBuilder:
    return StringBuilder(*_providers(input_provider, output_provider), prompt)


def for_char(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> CharBuilder:
    return CharBuilder(*_providers(input_provider, output_provider), prompt)


def for_datetime(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> DateTimeBuilder:
    return DateTimeBuilder(*_providers(input_provider, output_provider), prompt, format)


def for_date(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> DateBuilder:
    return DateBuilder(*_providers(input_provider, output_provider), prompt, format)


def for_time(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> TimeBuilder:
    return TimeBuilder(*_providers(input_provider, output_provider), prompt, format)


def for_duration(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> DurationBuilder:
    return DurationBuilder(*_providers(input_provider, output_provider), prompt, format)


def for_uuid(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> GuidBuilder:
    return GuidBuilder(*_providers(input_provider, output_provider), prompt)


def for_ip_address(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> IpAddressBuilder:
    return IpAddressBuilder(*_providers(input_provider, output_provider), prompt)


def for_uri(
    prompt: str,
    kind: UriKind = UriKind.ABSOLUTE,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> UriBuilder:
    return UriBuilder(*_providers(input_provider, output_provider), prompt, kind)


def for_enum(
    prompt: str,
    enum_type: Type[Enum],
    ignore_case: bool = True,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> EnumBuilder:
    return EnumBuilder(*_providers(input_provider, output_provider), prompt, enum_type, ignore_case)


# Plain getters


def get_int(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> int:
    return for_integer(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_int_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> int:
    builder = for_integer(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_float(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> float:
    return for_float(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_float_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> float:
    builder = for_float(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_decimal(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> Decimal:
    return for_decimal(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_decimal_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> Decimal:
    builder = for_decimal(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_string(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> str:
    return for_string(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_string_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> str:
    builder = for_string(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_char(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> str:
    return for_char(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_char_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> str:
    builder = for_char(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_datetime(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> datetime:
    builder = for_datetime(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return builder.get()


async def get_datetime_async(
    prompt: str,
    format: Optional[str] = None,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> datetime:
    builder = for_datetime(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_date(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> date:
    builder = for_date(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return builder.get()


async def get_date_async(
    prompt: str,
    format: Optional[str] = None,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> date:
    builder = for_date(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_time(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> time:
    builder = for_time(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return builder.get()


async def get_time_async(
    prompt: str,
    format: Optional[str] = None,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> time:
    builder = for_time(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_duration(
    prompt: str,
    format: Optional[str] = None,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> timedelta:
    builder = for_duration(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return builder.get()


async def get_duration_async(
    prompt: str,
    format: Optional[str] = None,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> timedelta:
    builder = for_duration(prompt, format, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_uuid(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> UUID:
    return for_uuid(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_uuid_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> UUID:
    builder = for_uuid(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_ip_address(
    prompt: str,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> Union[IPv4Address, IPv6Address]:
    return for_ip_address(prompt, input_provider=input_provider, output_provider=output_provider).get()


async def get_ip_address_async(
    prompt: str,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> Union[IPv4Address, IPv6Address]:
    builder = for_ip_address(prompt, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_uri(
    prompt: str,
    kind: UriKind = UriKind.ABSOLUTE,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> SplitResult:
    return for_uri(prompt, kind, input_provider=input_provider, output_provider=output_provider).get()


async def get_uri_async(
    prompt: str,
    kind: UriKind = UriKind.ABSOLUTE,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> SplitResult:
    builder = for_uri(prompt, kind, input_provider=input_provider, output_provider=output_provider)
    return await builder.get_async(cancellation)


def get_enum(
    prompt: str,
    enum_type: Type[Enum],
    ignore_case: bool = True,
    *,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> Enum:
    builder = for_enum(
        prompt, enum_type, ignore_case, input_provider=input_provider, output_provider=output_provider
    )
    return builder.get()


async def get_enum_async(
    prompt: str,
    enum_type: Type[Enum],
    ignore_case: bool = True,
    *,
    cancellation: Optional[CancellationToken] = None,
    input_provider: Optional[InputProvider] = None,
    output_provider: Optional[OutputProvider] = None,
) -> Enum:
    builder = for_enum(
        prompt, enum_type, ignore_case, input_provider=input_provider, output_provider=output_provider
    )
    return await builder.get_async(cancellation)
