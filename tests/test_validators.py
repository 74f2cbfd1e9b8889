"""
Tests for the parse/validate/retry loop and the typed parsers.

Validators are driven by the scripted providers from conftest; every
provider call lands in one shared trace so the exact call order can be
asserted.
"""

import asyncio
import sys
import unittest
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum, Flag
from fractions import Fraction
from uuid import UUID

from parameterized import parameterized

from conftest import ScriptExhausted, scripted
from promptguard import CancellationToken, ValidationCancelledError
from promptguard.rules import CustomRule, EvenRule, PositiveRule, RangeRule
from promptguard.validators import (
    CharValidator,
    DateTimeValidator,
    DateValidator,
    DecimalValidator,
    DurationValidator,
    EnumValidator,
    FloatValidator,
    IntValidator,
    IpAddressValidator,
    NumericValidator,
    StringValidator,
    TimeValidator,
    UriKind,
    UriValidator,
    UUIDValidator,
    TemporalValidator,
    parse_duration,
)


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class Perm(Flag):
    READ = 1
    WRITE = 2
    EXECUTE = 4


def parse(validator_type, raw, *args):
    """Run ``try_parse`` on a validator that has no providers attached."""
    return validator_type(None, None, "Value", *args).try_parse(raw)


class TestValidationLoop(unittest.TestCase):

    def test_retries_until_parse_succeeds(self):
        input_provider, output_provider = scripted("abc", "42")
        validator = IntValidator(input_provider, output_provider, "Enter number")

        self.assertEqual(validator.get_valid_input(), 42)
        self.assertEqual(output_provider.errors, ["Please enter a valid integer"])
        self.assertEqual(input_provider.trace, [
            ("prompt", "Enter number"),
            ("read", "abc"),
            ("error", "Please enter a valid integer"),
            ("prompt", "Enter number"),
            ("read", "42"),
        ])

    def test_valid_first_time_shows_no_error(self):
        input_provider, output_provider = scripted("7")
        validator = IntValidator(input_provider, output_provider, "N")
        validator.add_rule(RangeRule(1, 10))

        self.assertEqual(validator.get_valid_input(), 7)
        self.assertEqual(output_provider.errors, [])
        self.assertEqual(output_provider.prompts, ["N"])

    def test_only_first_failing_rule_is_reported(self):
        evaluated = []
        input_provider, output_provider = scripted("-3", "4")
        validator = IntValidator(input_provider, output_provider, "N")
        validator.add_rule(PositiveRule())
        validator.add_rule(CustomRule(lambda v: evaluated.append(v) or True, "never"))
        validator.add_rule(EvenRule())

        self.assertEqual(validator.get_valid_input(), 4)
        self.assertEqual(output_provider.errors, ["Value must be positive"])
        # The rule after the failing one only ran for the accepted value
        self.assertEqual(evaluated, [4])

    def test_rules_run_in_insertion_order(self):
        input_provider, output_provider = scripted("3", "12", "8")
        validator = IntValidator(input_provider, output_provider, "N")
        validator.add_rule(EvenRule("even please"))
        validator.add_rule(RangeRule(1, 10, "1 to 10 please"))

        self.assertEqual(validator.get_valid_input(), 8)
        self.assertEqual(output_provider.errors, ["even please", "1 to 10 please"])

    def test_end_of_input_is_reported_as_parse_error(self):
        input_provider, output_provider = scripted(None, "5")
        validator = IntValidator(input_provider, output_provider, "N")

        self.assertEqual(validator.get_valid_input(), 5)
        self.assertEqual(output_provider.errors, ["Please enter a valid integer"])

    def test_loop_has_no_retry_limit(self):
        lines = ["x"] * 50 + ["1"]
        input_provider, output_provider = scripted(*lines)
        validator = IntValidator(input_provider, output_provider, "N")

        self.assertEqual(validator.get_valid_input(), 1)
        self.assertEqual(len(output_provider.errors), 50)

    def test_exhausted_script_propagates(self):
        input_provider, output_provider = scripted("x")
        validator = IntValidator(input_provider, output_provider, "N")

        with self.assertRaises(ScriptExhausted):
            validator.get_valid_input()

    def test_add_rule_returns_validator(self):
        validator = IntValidator(None, None, "N")
        self.assertIs(validator.add_rule(EvenRule()), validator)
        self.assertIn("rules=1", repr(validator))


class TestCancellation(unittest.TestCase):

    def test_cancelled_before_start_makes_no_provider_calls(self):
        input_provider, output_provider = scripted("42")
        token = CancellationToken()
        token.cancel()
        validator = IntValidator(input_provider, output_provider, "N")

        with self.assertRaises(ValidationCancelledError) as ctx:
            validator.get_valid_input(token)

        self.assertEqual(input_provider.trace, [])
        self.assertEqual(input_provider.reads, 0)
        self.assertEqual(ctx.exception.attempts, 0)
        self.assertEqual(ctx.exception.prompt, "N")

    def test_cancellation_is_checked_each_attempt(self):
        token = CancellationToken()

        def reject_and_cancel(value):
            token.cancel()
            return False

        input_provider, output_provider = scripted("1", "2")
        validator = IntValidator(input_provider, output_provider, "N")
        validator.add_rule(CustomRule(reject_and_cancel, "no"))

        with self.assertRaises(ValidationCancelledError) as ctx:
            asyncio.run(validator.get_valid_input_async(token))

        self.assertEqual(input_provider.reads, 1)
        self.assertEqual(output_provider.errors, ["no"])
        self.assertEqual(ctx.exception.attempts, 1)

    def test_uncancelled_token_has_no_effect(self):
        input_provider, output_provider = scripted("9")
        validator = IntValidator(input_provider, output_provider, "N")
        self.assertEqual(validator.get_valid_input(CancellationToken()), 9)


class TestSyncAsyncParity(unittest.TestCase):

    @parameterized.expand([
        ("parse_then_rule_failure", ["", "abc", "-4", "3", "8"]),
        ("first_try", ["6"]),
    ])
    def test_same_call_sequence(self, name, lines):
        sync_in, sync_out = scripted(*lines)
        sync_validator = IntValidator(sync_in, sync_out, "Count")
        sync_validator.add_rule(PositiveRule()).add_rule(EvenRule())
        sync_value = sync_validator.get_valid_input()

        async_in, async_out = scripted(*lines)
        async_validator = IntValidator(async_in, async_out, "Count")
        async_validator.add_rule(PositiveRule()).add_rule(EvenRule())
        async_value = asyncio.run(async_validator.get_valid_input_async())

        self.assertEqual(sync_value, async_value)
        self.assertEqual(sync_in.trace, async_in.trace)


class TestNumericParsing(unittest.TestCase):

    @parameterized.expand([
        ("int", IntValidator, "42", 42),
        ("int_negative", IntValidator, "-7", -7),
        ("int_underscores", IntValidator, "1_000", 1000),
        ("float", FloatValidator, "2.5", 2.5),
        ("float_exponent", FloatValidator, "1e3", 1000.0),
        ("decimal", DecimalValidator, "1.10", Decimal("1.10")),
    ])
    def test_accepts(self, name, validator_type, raw, expected):
        value, error = parse(validator_type, raw)
        self.assertIsNone(error)
        self.assertEqual(value, expected)
        self.assertIs(type(value), type(expected))

    @parameterized.expand([
        ("int_fraction", IntValidator, "3.5", "Please enter a valid integer"),
        ("int_text", IntValidator, "abc", "Please enter a valid integer"),
        ("int_empty", IntValidator, "", "Please enter a valid integer"),
        ("float_nan", FloatValidator, "nan", "Please enter a valid float"),
        ("float_inf", FloatValidator, "-inf", "Please enter a valid float"),
        ("decimal_inf", DecimalValidator, "Infinity", "Please enter a valid decimal"),
        ("decimal_text", DecimalValidator, "1,5", "Please enter a valid decimal"),
    ])
    def test_rejects(self, name, validator_type, raw, message):
        self.assertEqual(parse(validator_type, raw), (None, message))

    def test_other_number_types_use_class_name(self):
        value, error = parse(NumericValidator, "3/4", Fraction)
        self.assertEqual(value, Fraction(3, 4))
        self.assertEqual(parse(NumericValidator, "x", Fraction), (None, "Please enter a valid Fraction"))


class TestTextParsing(unittest.TestCase):

    def test_string_is_trimmed(self):
        self.assertEqual(parse(StringValidator, "  hello  "), ("hello", None))

    @parameterized.expand([("empty", ""), ("blank", "   "), ("eof", None)])
    def test_string_rejects_blank(self, name, raw):
        self.assertEqual(parse(StringValidator, raw), (None, "Input cannot be empty or whitespace"))

    @parameterized.expand([("letter", "y", "y"), ("digit", "7", "7")])
    def test_char_accepts_one_character(self, name, raw, expected):
        self.assertEqual(parse(CharValidator, raw), (expected, None))

    @parameterized.expand([("two", "ab"), ("empty", ""), ("eof", None)])
    def test_char_rejects(self, name, raw):
        self.assertEqual(parse(CharValidator, raw), (None, "Please enter a single character"))


class TestTemporalParsing(unittest.TestCase):

    @parameterized.expand([
        ("iso", "2024-03-15T14:30:00", datetime(2024, 3, 15, 14, 30)),
        ("iso_space", "2024-03-15 14:30", datetime(2024, 3, 15, 14, 30)),
        ("us_date", "03/15/2024", datetime(2024, 3, 15)),
        ("slashes", "2024/03/15 08:05", datetime(2024, 3, 15, 8, 5)),
    ])
    def test_datetime_layouts(self, name, raw, expected):
        self.assertEqual(parse(DateTimeValidator, raw), (expected, None))

    def test_datetime_rejects(self):
        self.assertEqual(parse(DateTimeValidator, "yesterday"), (None, "Please enter a valid date"))

    def test_explicit_format_must_match_whole_input(self):
        self.assertEqual(parse(DateTimeValidator, "15.03.2024", "%d.%m.%Y"), (datetime(2024, 3, 15), None))
        self.assertEqual(
            parse(DateTimeValidator, "2024-03-15", "%d.%m.%Y"),
            (None, "Please enter a valid date in the format %d.%m.%Y"),
        )

    @parameterized.expand([
        ("iso", "2024-03-15", date(2024, 3, 15)),
        ("slashes", "2024/03/15", date(2024, 3, 15)),
        ("us", "12/31/1999", date(1999, 12, 31)),
    ])
    def test_date(self, name, raw, expected):
        value, error = parse(DateValidator, raw)
        self.assertIsNone(error)
        self.assertEqual(value, expected)
        self.assertIs(type(value), date)

    def test_date_rejects_impossible_day(self):
        self.assertEqual(parse(DateValidator, "2023-02-29"), (None, "Please enter a valid date"))

    @parameterized.expand([
        ("iso", "14:30", time(14, 30)),
        ("seconds", "07:05:09", time(7, 5, 9)),
        ("twelve_hour", "2:30 PM", time(14, 30)),
        ("twelve_hour_compact", "9am", time(9, 0)),
    ])
    def test_time(self, name, raw, expected):
        self.assertEqual(parse(TimeValidator, raw), (expected, None))

    def test_time_rejects(self):
        self.assertEqual(parse(TimeValidator, "25:00"), (None, "Please enter a valid time"))
        self.assertEqual(
            parse(TimeValidator, "14:30", "%H.%M"),
            (None, "Please enter a valid time in the format %H.%M"),
        )

    @parameterized.expand([
        ("datetime_unknown_directive", DateTimeValidator, "%Q"),
        ("date_unknown_directive", DateValidator, "%d.%m.%K"),
        ("time_dangling_percent", TimeValidator, "%H:%M%"),
        ("date_empty", DateValidator, ""),
    ])
    def test_bad_format_fails_at_construction(self, name, validator_type, format):
        with self.assertRaises(ValueError):
            validator_type(None, None, "When", format)

    @parameterized.expand([
        ("twelve_hour", TimeValidator, "%I:%M %p", "02:30 PM", time(14, 30)),
        ("literal_percent", DateValidator, "%d%%%m%%%Y", "15%03%2024", date(2024, 3, 15)),
        ("month_name", DateValidator, "%B %d", "March 15", date(1900, 3, 15)),
    ])
    def test_good_format_is_accepted(self, name, validator_type, format, raw, expected):
        self.assertEqual(parse(validator_type, raw, format), (expected, None))

    def test_temporal_base_is_abstract(self):
        with self.assertRaises(TypeError):
            TemporalValidator(None, None, "When")


class TestDurationParsing(unittest.TestCase):

    @parameterized.expand([
        ("hours_minutes", "1:30", timedelta(hours=1, minutes=30)),
        ("with_seconds", "1:30:15", timedelta(hours=1, minutes=30, seconds=15)),
        ("with_days", "2.12:00:00", timedelta(days=2, hours=12)),
        ("negative", "-0:45", timedelta(minutes=-45)),
        ("day_count", "3", timedelta(days=3)),
        ("fraction", "0:00:01.5", timedelta(seconds=1, microseconds=500000)),
        ("fraction_truncated", "0:00:00.1234567", timedelta(microseconds=123456)),
    ])
    def test_default_forms(self, name, raw, expected):
        self.assertEqual(parse_duration(raw), expected)

    @parameterized.expand([
        ("hours_overflow", "24:00"),
        ("minutes_overflow", "1:60"),
        ("text", "soon"),
        ("unit_suffix", "5m"),
    ])
    def test_default_forms_reject(self, name, raw):
        self.assertIsNone(parse_duration(raw))

    def test_validator_messages(self):
        self.assertEqual(parse(DurationValidator, ""), (None, "Please enter a valid time span"))
        self.assertEqual(
            parse(DurationValidator, "soon"),
            (None, "Please enter a valid time span (e.g., '1:30:00' or '1.12:00:00')"),
        )

    def test_explicit_format(self):
        self.assertEqual(parse(DurationValidator, "2h15m", "%Hh%Mm"), (timedelta(hours=2, minutes=15), None))
        self.assertEqual(parse(DurationValidator, "3d 4h", "%dd %Hh"), (timedelta(days=3, hours=4), None))
        self.assertEqual(
            parse(DurationValidator, "1:30", "%Hh%Mm"),
            (None, "Please enter a valid time span in format: %Hh%Mm"),
        )

    @parameterized.expand([
        ("unknown_directive", "%H:%Y"),
        ("repeated_directive", "%H:%H"),
        ("dangling_percent", "%H%"),
    ])
    def test_bad_format_fails_at_construction(self, name, format):
        with self.assertRaises(ValueError):
            DurationValidator(None, None, "Span", format)

    @parameterized.expand([
        ("day_count", "9" * 5000),
        ("days_prefix", "9" * 5000 + ".1:00"),
    ])
    def test_huge_day_count_is_a_parse_error(self, name, raw):
        self.assertIsNone(parse_duration(raw))


class TestOversizedInput(unittest.TestCase):

    def run_loop(self, validator_type, *args, huge, valid):
        input_provider, output_provider = scripted(huge, valid)
        validator = validator_type(input_provider, output_provider, "Value", *args)
        value = validator.get_valid_input()
        return value, output_provider.errors

    def test_duration_default_forms(self):
        value, errors = self.run_loop(DurationValidator, huge="9" * 5000, valid="1:00")
        self.assertEqual(value, timedelta(hours=1))
        self.assertEqual(errors, ["Please enter a valid time span (e.g., '1:30:00' or '1.12:00:00')"])

    def test_duration_explicit_format(self):
        value, errors = self.run_loop(DurationValidator, "%dd %Hh", huge="9" * 5000 + "d 1h", valid="2d 3h")
        self.assertEqual(value, timedelta(days=2, hours=3))
        self.assertEqual(errors, ["Please enter a valid time span in format: %dd %Hh"])

    @unittest.skipUnless(hasattr(sys, "get_int_max_str_digits"), "integer digit limit not enforced")
    def test_int(self):
        value, errors = self.run_loop(IntValidator, huge="9" * 5000, valid="7")
        self.assertEqual(value, 7)
        self.assertEqual(errors, ["Please enter a valid integer"])


class TestIdentifierAndNetworkParsing(unittest.TestCase):

    @parameterized.expand([
        ("hyphenated", "16fd2706-8baf-433b-82eb-8c7fada847da"),
        ("braced", "{16fd2706-8baf-433b-82eb-8c7fada847da}"),
        ("bare", "16fd27068baf433b82eb8c7fada847da"),
    ])
    def test_uuid_forms(self, name, raw):
        self.assertEqual(parse(UUIDValidator, raw), (UUID("16fd2706-8baf-433b-82eb-8c7fada847da"), None))

    def test_uuid_messages(self):
        self.assertEqual(parse(UUIDValidator, ""), (None, "Please enter a valid GUID"))
        self.assertEqual(
            parse(UUIDValidator, "not-a-guid"),
            (None, "Please enter a valid GUID (e.g., 12345678-1234-1234-1234-123456789abc)"),
        )

    def test_ip_address(self):
        value, error = parse(IpAddressValidator, "192.168.1.1")
        self.assertIsNone(error)
        self.assertEqual(value.version, 4)
        self.assertEqual(parse(IpAddressValidator, "2001:db8::1")[0].version, 6)
        self.assertEqual(
            parse(IpAddressValidator, "999.1.1.1"),
            (None, "Please enter a valid IP address (e.g., 192.168.1.1 or 2001:db8::1)"),
        )
        self.assertEqual(parse(IpAddressValidator, ""), (None, "Please enter a valid IP address"))

    @parameterized.expand([
        ("https", UriKind.ABSOLUTE, "https://example.com/path?q=1", True),
        ("mailto", UriKind.ABSOLUTE, "mailto:someone@example.com", True),
        ("relative_as_absolute", UriKind.ABSOLUTE, "/path", False),
        ("scheme_without_host", UriKind.ABSOLUTE, "http:path", False),
        ("whitespace", UriKind.ABSOLUTE, "https://exa mple.com", False),
        ("bad_port", UriKind.ABSOLUTE, "http://example.com:99999/", False),
        ("relative", UriKind.RELATIVE, "/path/to/resource", True),
        ("absolute_as_relative", UriKind.RELATIVE, "https://example.com", False),
        ("either_absolute", UriKind.RELATIVE_OR_ABSOLUTE, "https://example.com", True),
        ("either_relative", UriKind.RELATIVE_OR_ABSOLUTE, "docs/index.html", True),
        ("either_network_path", UriKind.RELATIVE_OR_ABSOLUTE, "//host/path", False),
    ])
    def test_uri_kinds(self, name, kind, raw, accepted):
        value, error = parse(UriValidator, raw, kind)
        self.assertEqual(error is None, accepted)
        if accepted:
            self.assertEqual(value.geturl(), raw)

    @parameterized.expand([
        ("absolute", UriKind.ABSOLUTE, "Please enter a valid absolute URI (e.g., https://example.com)"),
        ("relative", UriKind.RELATIVE, "Please enter a valid relative URI (e.g., /path/to/resource)"),
        ("either", UriKind.RELATIVE_OR_ABSOLUTE, "Please enter a valid URI"),
    ])
    def test_uri_messages(self, name, kind, message):
        self.assertEqual(parse(UriValidator, "not a uri", kind), (None, message))


class TestEnumParsing(unittest.TestCase):

    @parameterized.expand([
        ("name", "GREEN", Color.GREEN),
        ("name_any_case", "green", Color.GREEN),
        ("value", "3", Color.BLUE),
    ])
    def test_accepts(self, name, raw, expected):
        self.assertEqual(parse(EnumValidator, raw, Color), (expected, None))

    def test_case_sensitive(self):
        self.assertEqual(
            parse(EnumValidator, "green", Color, False),
            (None, "Please enter a valid Color. Valid values: RED, GREEN, BLUE"),
        )

    def test_rejects(self):
        self.assertEqual(parse(EnumValidator, "", Color), (None, "Please enter a valid Color"))
        self.assertEqual(
            parse(EnumValidator, "9", Color),
            (None, "Please enter a valid Color. Valid values: RED, GREEN, BLUE"),
        )

    def test_flag_combination(self):
        self.assertEqual(parse(EnumValidator, "read, write", Perm), (Perm.READ | Perm.WRITE, None))
        self.assertEqual(parse(EnumValidator, "5", Perm), (Perm.READ | Perm.EXECUTE, None))
        self.assertIsNotNone(parse(EnumValidator, "read, delete", Perm)[1])

    @parameterized.expand([("minus_one", "-1"), ("minus_two", "-2")])
    def test_flag_rejects_negative_values(self, name, raw):
        self.assertEqual(
            parse(EnumValidator, raw, Perm),
            (None, "Please enter a valid Perm. Valid values: READ, WRITE, EXECUTE"),
        )


if __name__ == "__main__":
    unittest.main()
