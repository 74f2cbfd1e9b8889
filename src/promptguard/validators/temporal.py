"""
Date, time and duration parsers.

With an explicit ``format`` (``strptime`` directives) the whole input must
match it. Without one, ISO 8601 is tried first and then a short list of
common layouts.

Durations are parsed by :func:`parse_duration`:

- ``[-][d.]hh:mm[:ss[.fffffff]]``, e.g. ``1:30:00`` or ``-2.12:00``
- a bare day count, e.g. ``3``
- an explicit format built from ``%d %H %M %S %f`` and literal text
"""

import re
from abc import abstractmethod
from datetime import date, datetime, time, timedelta
from typing import Dict, Optional, Sequence

from ..providers import InputProvider, OutputProvider
from .base import ParseResult, Validator

# Directives understood by datetime.strptime
STRPTIME_DIRECTIVES = frozenset("aAbBcdfGHIjmMpSuUVwWxXyYzZ%")

DATETIME_LAYOUTS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %I:%M %p",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)

DATE_LAYOUTS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %d, %Y",
    "%b %d, %Y",
)

TIME_LAYOUTS = (
    "%H:%M",
    "%H:%M:%S",
    "%I:%M %p",
    "%I:%M:%S %p",
    "%I:%M%p",
    "%I %p",
    "%I%p",
)


def check_strptime_format(format: str) -> None:
    """
    Reject a format that ``strptime`` could never match.

    Raises:
        ValueError: On an empty format, an unknown directive or a trailing ``%``.
    """
    if not format:
        raise ValueError("Date/time format cannot be empty")
    index = 0
    while index < len(format):
        if format[index] != "%":
            index += 1
            continue
        if index + 1 >= len(format):
            raise ValueError(f"Incomplete directive at end of format {format!r}")
        directive = format[index + 1]
        if directive == ":" and format[index + 2:index + 3] == "z":
            index += 3
            continue
        if directive not in STRPTIME_DIRECTIVES:
            raise ValueError(f"Unsupported directive %{directive} in format {format!r}")
        index += 2


class TemporalValidator(Validator):
    """
    Shared parsing for ``datetime``, ``date`` and ``time``.

    Subclasses set :attr:`noun`, :attr:`layouts` and the two converters.
    """

    noun = "date"
    layouts: Sequence[str] = ()

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        format: Optional[str] = None,
    ):
        super().__init__(input_provider, output_provider, prompt)
        if format is not None:
            check_strptime_format(format)
        self.format = format
        if format is None:
            self.error_message = f"Please enter a valid {self.noun}"
        else:
            self.error_message = f"Please enter a valid {self.noun} in the format {format}"

    @abstractmethod
    def from_iso(self, text: str):
        """Parse ISO 8601 text; raises ``ValueError`` when it does not match."""

    @abstractmethod
    def convert(self, parsed: datetime):
        """Reduce a ``strptime`` result to the target type."""

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, self.error_message
        text = raw.strip()

        if self.format is not None:
            try:
                return self.convert(datetime.strptime(text, self.format)), None
            except ValueError:
                return None, self.error_message

        try:
            return self.from_iso(text), None
        except ValueError:
            pass
        for layout in self.layouts:
            try:
                return self.convert(datetime.strptime(text, layout)), None
            except ValueError:
                continue
        return None, self.error_message


class DateTimeValidator(TemporalValidator):
    noun = "date"
    layouts = DATETIME_LAYOUTS

    def from_iso(self, text: str) -> datetime:
        return datetime.fromisoformat(text)

    def convert(self, parsed: datetime) -> datetime:
        return parsed


class DateValidator(TemporalValidator):
    noun = "date"
    layouts = DATE_LAYOUTS

    def from_iso(self, text: str) -> date:
        return date.fromisoformat(text)

    def convert(self, parsed: datetime) -> date:
        return parsed.date()


class TimeValidator(TemporalValidator):
    noun = "time"
    layouts = TIME_LAYOUTS

    def from_iso(self, text: str) -> time:
        return time.fromisoformat(text)

    def convert(self, parsed: datetime) -> time:
        return parsed.time()


# Durations

_DEFAULT_DURATION = re.compile(
    r"^(?P<sign>-)?"
    r"(?:(?P<days>\d+)\.)?"
    r"(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})"
    r"(?::(?P<seconds>\d{1,2})(?:\.(?P<fraction>\d{1,7}))?)?$"
)
_DAY_COUNT = re.compile(r"^(?P<sign>-)?(?P<days>\d+)$")

_DURATION_DIRECTIVES = {
    "d": r"(?P<days>\d+)",
    "H": r"(?P<hours>\d{1,2})",
    "M": r"(?P<minutes>\d{1,2})",
    "S": r"(?P<seconds>\d{1,2})",
    "f": r"(?P<fraction>\d{1,7})",
}


def compile_duration_format(format: str) -> "re.Pattern":
    """
    Translate a duration format into an anchored regular expression.

    Raises:
        ValueError: On an unknown or repeated directive.
    """
    parts = ["^(?P<sign>-)?"]
    seen = set()
    index = 0
    while index < len(format):
        char = format[index]
        if char != "%":
            parts.append(re.escape(char))
            index += 1
            continue
        if index + 1 >= len(format):
            raise ValueError(f"Incomplete directive at end of duration format {format!r}")
        directive = format[index + 1]
        if directive == "%":
            parts.append("%")
        elif directive in _DURATION_DIRECTIVES:
            if directive in seen:
                raise ValueError(f"Directive %{directive} repeated in duration format {format!r}")
            seen.add(directive)
            parts.append(_DURATION_DIRECTIVES[directive])
        else:
            raise ValueError(f"Unsupported directive %{directive} in duration format {format!r}")
        index += 2
    parts.append("$")
    return re.compile("".join(parts))


def _from_groups(groups: Dict[str, Optional[str]]) -> Optional[timedelta]:
    hours = int(groups.get("hours") or 0)
    minutes = int(groups.get("minutes") or 0)
    seconds = int(groups.get("seconds") or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        return None
    fraction = groups.get("fraction") or ""
    microseconds = int(fraction.ljust(6, "0")[:6]) if fraction else 0
    try:
        # Day counts are unbounded; int() refuses very long digit strings
        value = timedelta(
            days=int(groups.get("days") or 0),
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            microseconds=microseconds,
        )
    except (OverflowError, ValueError):
        return None
    return -value if groups.get("sign") else value


def parse_duration(text: str, pattern: Optional["re.Pattern"] = None) -> Optional[timedelta]:
    """Parse ``text`` as a duration; None when it does not match."""
    patterns = (pattern,) if pattern is not None else (_DEFAULT_DURATION, _DAY_COUNT)
    for candidate in patterns:
        match = candidate.match(text)
        if match:
            return _from_groups(match.groupdict())
    return None


class DurationValidator(Validator):
    """
    Validator for ``timedelta`` values.

    Args:
        format: Optional duration format such as ``"%H:%M"`` or ``"%dd %Hh"``.
    """

    def __init__(
        self,
        input_provider: InputProvider,
        output_provider: OutputProvider,
        prompt: str,
        format: Optional[str] = None,
    ):
        super().__init__(input_provider, output_provider, prompt)
        self.format = format
        self._pattern = compile_duration_format(format) if format is not None else None

    def try_parse(self, raw: Optional[str]) -> ParseResult:
        if raw is None or not raw.strip():
            return None, "Please enter a valid time span"
        value = parse_duration(raw.strip(), self._pattern)
        if value is not None:
            return value, None
        if self.format is not None:
            return None, f"Please enter a valid time span in format: {self.format}"
        return None, "Please enter a valid time span (e.g., '1:30:00' or '1.12:00:00')"

