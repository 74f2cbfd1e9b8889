"""
promptguard - validated interactive input.

Ask a user for a value, parse it into a Python type, check it against an
ordered list of rules and ask again until it is valid::

    from promptguard import for_integer, get_string

    name = get_string("Name")
    age = for_integer("Age").with_range(0, 120).get()
"""

# Core exceptions (zero dependencies)
from .exceptions import PromptGuardError, SettingsError, ValidationCancelledError
from .cancellation import CancellationToken

# Collaborator contracts and console implementations
from .providers import InputProvider, OutputProvider
from .console import ConsoleInput, ConsoleOutput
from .settings import ConsoleSettings, load_settings

# Engine
from .rules import CustomRule, ValidationRule
from .validators import UriKind, Validator
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

# Facade
from .facade import (
    for_char,
    for_date,
    for_datetime,
    for_decimal,
    for_duration,
    for_enum,
    for_float,
    for_int,
    for_integer,
    for_ip_address,
    for_numeric,
    for_string,
    for_time,
    for_uri,
    for_uuid,
    get_char,
    get_char_async,
    get_date,
    get_date_async,
    get_datetime,
    get_datetime_async,
    get_decimal,
    get_decimal_async,
    get_duration,
    get_duration_async,
    get_enum,
    get_enum_async,
    get_float,
    get_float_async,
    get_int,
    get_int_async,
    get_ip_address,
    get_ip_address_async,
    get_string,
    get_string_async,
    get_time,
    get_time_async,
    get_uri,
    get_uri_async,
    get_uuid,
    get_uuid_async,
)

__all__ = [
    "PromptGuardError",
    "SettingsError",
    "ValidationCancelledError",
    "CancellationToken",
    "InputProvider",
    "OutputProvider",
    "ConsoleInput",
    "ConsoleOutput",
    "ConsoleSettings",
    "load_settings",
    "ValidationRule",
    "CustomRule",
    "Validator",
    "UriKind",
    "NumericBuilder",
    "IntegerBuilder",
    "StringBuilder",
    "CharBuilder",
    "DateTimeBuilder",
    "DateBuilder",
    "TimeBuilder",
    "DurationBuilder",
    "GuidBuilder",
    "IpAddressBuilder",
    "UriBuilder",
    "EnumBuilder",
    "for_integer",
    "for_int",
    "for_numeric",
    "for_float",
    "for_decimal",
    "for_string",
    "for_char",
    "for_datetime",
    "for_date",
    "for_time",
    "for_duration",
    "for_uuid",
    "for_ip_address",
    "for_uri",
    "for_enum",
    "get_int",
    "get_int_async",
    "get_float",
    "get_float_async",
    "get_decimal",
    "get_decimal_async",
    "get_string",
    "get_string_async",
    "get_char",
    "get_char_async",
    "get_datetime",
    "get_datetime_async",
    "get_date",
    "get_date_async",
    "get_time",
    "get_time_async",
    "get_duration",
    "get_duration_async",
    "get_uuid",
    "get_uuid_async",
    "get_ip_address",
    "get_ip_address_async",
    "get_uri",
    "get_uri_async",
    "get_enum",
    "get_enum_async",
    "__version__",
]

__version__ = "0.1.0"
