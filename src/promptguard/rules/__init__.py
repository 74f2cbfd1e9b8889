"""
Validation rules.

Every rule is a small immutable object with ``is_valid(value) -> bool`` and
a ``message`` fixed at construction. Rules are grouped by the value type
they expect:

- numeric: ordering, sign, parity, divisibility, Luhn checksum
- strings: length, pattern, character classes, affixes, value sets, email,
  phone, file path
- dates / times: calendar and time-of-day checks with ``for_datetime`` /
  ``for_date`` / ``for_time`` constructors
- durations: ``timedelta`` bounds and granularity
- identifiers: ``uuid.UUID``
- network: ``ipaddress`` addresses
- uris: ``urllib.parse.SplitResult``
- enums: ``Enum`` / ``Flag`` members
- chars: single characters

Example:
    >>> from promptguard.rules import RangeRule, StringLengthRule
    >>> RangeRule(1, 10).is_valid(10)
    True
    >>> StringLengthRule(2, 5).message
    'Length must be between 2 and 5 characters'
"""

from .base import CustomRule, PredicateRule, ValidationRule
from .chars import (
    AllowedCharsRule,
    AlphanumericCharRule,
    DigitRule,
    ExcludedCharsRule,
    LetterRule,
    LowerCaseRule,
    PunctuationRule,
    UpperCaseRule,
    WhitespaceRule,
)
from .dates import (
    DateRule,
    DayOfWeek,
    DayOfWeekRule,
    FutureDateRule,
    LeapYearRule,
    MonthRule,
    NotTodayRule,
    PastDateRule,
    TodayRule,
    WeekdayRule,
    WeekendRule,
    WithinDaysRule,
    YearRule,
)
from .durations import (
    DurationIncrementRule,
    MaxDurationRule,
    MinDurationRule,
    PositiveDurationRule,
    WholeHoursRule,
    WholeMinutesRule,
    WithinDayRule,
    WorkingHoursRule,
)
from .enums import (
    AllowedEnumValuesRule,
    DefinedEnumRule,
    ExcludedEnumValuesRule,
    HasFlagRule,
    NotDefaultEnumRule,
    NotHasFlagRule,
)
from .identifiers import (
    AllowedGuidRule,
    ExcludedGuidRule,
    GuidVersionRule,
    NonEmptyGuidRule,
)
from .network import (
    AllowedIpAddressesRule,
    ApipaRule,
    BlockedIpAddressesRule,
    Ipv4Rule,
    Ipv6Rule,
    LoopbackIpRule,
    NotApipaRule,
    NotLoopbackIpRule,
    PrivateIpRule,
    PublicIpRule,
    SubnetRule,
)
from .numeric import (
    EvenRule,
    LuhnRule,
    MaximumRule,
    MinimumRule,
    MultipleOfRule,
    NegativeRule,
    NonNegativeRule,
    NotMultipleOfRule,
    OddRule,
    PositiveRule,
    RangeRule,
)
from .strings import (
    AllowedValuesRule,
    AlphabeticRule,
    AlphanumericStringRule,
    ContainsRule,
    EmailRule,
    EndsWithRule,
    ExcludedValuesRule,
    FilePathRule,
    LowerCaseStringRule,
    NoDigitsRule,
    NotContainsRule,
    NumericStringRule,
    PhoneRule,
    RegexRule,
    StartsWithRule,
    StringLengthRule,
    UpperCaseStringRule,
)
from .times import (
    AfterTimeRule,
    AmRule,
    BeforeTimeRule,
    BusinessHoursRule,
    HourRule,
    MidnightRule,
    NoonRule,
    PmRule,
    TimeIncrementRule,
    TimeOfDayRule,
    WholeHourRule,
    WholeMinuteRule,
)
from .uris import (
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

__all__ = [
    "ValidationRule",
    "PredicateRule",
    "CustomRule",
    # numeric
    "RangeRule",
    "MinimumRule",
    "MaximumRule",
    "PositiveRule",
    "NonNegativeRule",
    "NegativeRule",
    "EvenRule",
    "OddRule",
    "MultipleOfRule",
    "NotMultipleOfRule",
    "LuhnRule",
    # strings
    "StringLengthRule",
    "RegexRule",
    "NoDigitsRule",
    "AlphabeticRule",
    "AlphanumericStringRule",
    "NumericStringRule",
    "UpperCaseStringRule",
    "LowerCaseStringRule",
    "StartsWithRule",
    "EndsWithRule",
    "ContainsRule",
    "NotContainsRule",
    "AllowedValuesRule",
    "ExcludedValuesRule",
    "EmailRule",
    "PhoneRule",
    "FilePathRule",
    # dates
    "DateRule",
    "DayOfWeek",
    "FutureDateRule",
    "PastDateRule",
    "TodayRule",
    "NotTodayRule",
    "WeekdayRule",
    "WeekendRule",
    "DayOfWeekRule",
    "WithinDaysRule",
    "YearRule",
    "LeapYearRule",
    "MonthRule",
    # times
    "TimeOfDayRule",
    "BusinessHoursRule",
    "BeforeTimeRule",
    "AfterTimeRule",
    "HourRule",
    "WholeHourRule",
    "WholeMinuteRule",
    "TimeIncrementRule",
    "AmRule",
    "PmRule",
    "MidnightRule",
    "NoonRule",
    # durations
    "PositiveDurationRule",
    "MaxDurationRule",
    "MinDurationRule",
    "WorkingHoursRule",
    "WholeHoursRule",
    "WholeMinutesRule",
    "DurationIncrementRule",
    "WithinDayRule",
    # identifiers
    "NonEmptyGuidRule",
    "GuidVersionRule",
    "ExcludedGuidRule",
    "AllowedGuidRule",
    # network
    "Ipv4Rule",
    "Ipv6Rule",
    "PrivateIpRule",
    "ApipaRule",
    "NotApipaRule",
    "LoopbackIpRule",
    "NotLoopbackIpRule",
    "PublicIpRule",
    "SubnetRule",
    "AllowedIpAddressesRule",
    "BlockedIpAddressesRule",
    # uris
    "UriSchemeRule",
    "HttpsOnlyRule",
    "HttpOrHttpsRule",
    "DomainRule",
    "AllowedDomainsRule",
    "PortRule",
    "AbsoluteUriRule",
    "PathPrefixRule",
    "HasQueryStringRule",
    "NoQueryStringRule",
    "HasFragmentRule",
    "LocalhostRule",
    # enums
    "DefinedEnumRule",
    "NotDefaultEnumRule",
    "AllowedEnumValuesRule",
    "ExcludedEnumValuesRule",
    "HasFlagRule",
    "NotHasFlagRule",
    # chars
    "LetterRule",
    "DigitRule",
    "UpperCaseRule",
    "LowerCaseRule",
    "AlphanumericCharRule",
    "WhitespaceRule",
    "PunctuationRule",
    "AllowedCharsRule",
    "ExcludedCharsRule",
]
