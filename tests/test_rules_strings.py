import os
import re
import tempfile
import unittest

from parameterized import parameterized

from promptguard.rules import (
    AllowedCharsRule,
    AllowedValuesRule,
    AlphabeticRule,
    AlphanumericCharRule,
    AlphanumericStringRule,
    ContainsRule,
    DigitRule,
    EmailRule,
    EndsWithRule,
    ExcludedCharsRule,
    ExcludedValuesRule,
    FilePathRule,
    LetterRule,
    LowerCaseRule,
    LowerCaseStringRule,
    NoDigitsRule,
    NotContainsRule,
    NumericStringRule,
    PhoneRule,
    PunctuationRule,
    RangeRule,
    RegexRule,
    StartsWithRule,
    StringLengthRule,
    UpperCaseRule,
    UpperCaseStringRule,
    WhitespaceRule,
)


class TestStringLengthRule(unittest.TestCase):

    @parameterized.expand([
        ("min_boundary", "ab", True),
        ("max_boundary", "abcde", True),
        ("too_short", "a", False),
        ("too_long", "abcdef", False),
    ])
    def test_bounds_are_inclusive(self, name, value, expected):
        self.assertEqual(StringLengthRule(2, 5).is_valid(value), expected)

    def test_open_ended_bounds(self):
        self.assertTrue(StringLengthRule(min_length=3).is_valid("x" * 100))
        self.assertFalse(StringLengthRule(max_length=3).is_valid("abcd"))

    @parameterized.expand([
        ("both", 2, 5, "Length must be between 2 and 5 characters"),
        ("min_only", 3, None, "Length must be at least 3 characters"),
        ("max_only", None, 8, "Length must be at most 8 characters"),
    ])
    def test_messages(self, name, low, high, expected):
        self.assertEqual(StringLengthRule(low, high).message, expected)


class TestRegexRule(unittest.TestCase):

    def test_search_semantics(self):
        rule = RegexRule(r"\d{3}")
        self.assertTrue(rule.is_valid("abc123def"))
        self.assertFalse(rule.is_valid("ab12"))

    def test_anchored_pattern(self):
        rule = RegexRule(r"^[a-z]+$")
        self.assertTrue(rule.is_valid("hello"))
        self.assertFalse(rule.is_valid("hello world"))

    def test_invalid_pattern_fails_at_construction(self):
        with self.assertRaises(re.error):
            RegexRule("[unclosed")

    def test_message(self):
        self.assertEqual(RegexRule("^a").message, "Value must match pattern: ^a")


class TestCharacterClassRules(unittest.TestCase):

    @parameterized.expand([
        ("no_digits_pass", NoDigitsRule, "hello world!", True),
        ("no_digits_fail", NoDigitsRule, "route 66", False),
        ("alphabetic_pass", AlphabeticRule, "Zoë", True),
        ("alphabetic_fail", AlphabeticRule, "two words", False),
        ("alphanumeric_pass", AlphanumericStringRule, "abc123", True),
        ("alphanumeric_fail", AlphanumericStringRule, "abc-123", False),
        ("numeric_pass", NumericStringRule, "007", True),
        ("numeric_fail", NumericStringRule, "1.5", False),
        ("upper_ignores_non_letters", UpperCaseStringRule, "ABC 123!", True),
        ("upper_fail", UpperCaseStringRule, "ABc", False),
        ("lower_ignores_non_letters", LowerCaseStringRule, "abc-42", True),
        ("lower_fail", LowerCaseStringRule, "aBc", False),
    ])
    def test_character_classes(self, name, rule_type, value, expected):
        self.assertEqual(rule_type().is_valid(value), expected)

    def test_no_digits_message(self):
        self.assertEqual(NoDigitsRule().message, "Input cannot contain digits")


class TestAffixAndSetRules(unittest.TestCase):

    def test_affixes(self):
        self.assertTrue(StartsWithRule("INV-").is_valid("INV-001"))
        self.assertFalse(StartsWithRule("INV-").is_valid("inv-001"))
        self.assertTrue(EndsWithRule(".csv").is_valid("data.csv"))
        self.assertTrue(ContainsRule("@").is_valid("a@b"))
        self.assertFalse(NotContainsRule(" ").is_valid("a b"))

    def test_affix_messages(self):
        self.assertEqual(StartsWithRule("x").message, "Input must start with 'x'")
        self.assertEqual(EndsWithRule("y").message, "Input must end with 'y'")
        self.assertEqual(ContainsRule("z").message, "Input must contain 'z'")
        self.assertEqual(NotContainsRule("w").message, "Input must not contain 'w'")

    def test_allowed_values_deduplicates_in_order(self):
        rule = AllowedValuesRule(["red", "green", "red", "blue"])
        self.assertTrue(rule.is_valid("green"))
        self.assertFalse(rule.is_valid("Green"))
        self.assertEqual(rule.message, "Input must be one of: red, green, blue")

    def test_excluded_values(self):
        rule = ExcludedValuesRule(["admin", "root"])
        self.assertFalse(rule.is_valid("root"))
        self.assertTrue(rule.is_valid("alice"))
        self.assertEqual(rule.message, "Input value is not allowed")


class TestFormatRules(unittest.TestCase):

    @parameterized.expand([
        ("simple", "user@example.com", True),
        ("subdomain", "first.last@mail.example.org", True),
        ("no_at", "user.example.com", False),
        ("no_tld", "user@example", False),
        ("space", "us er@example.com", False),
    ])
    def test_email(self, name, value, expected):
        self.assertEqual(EmailRule().is_valid(value), expected)

    @parameterized.expand([
        ("international", "+1 (555) 123-4567", True),
        ("digits", "5551234567", True),
        ("letters", "555-CALL-NOW", False),
    ])
    def test_phone(self, name, value, expected):
        self.assertEqual(PhoneRule().is_valid(value), expected)

    def test_file_path_syntax(self):
        rule = FilePathRule()
        self.assertTrue(rule.is_valid("some/relative/file.txt"))
        self.assertFalse(rule.is_valid("bad\x00path"))
        self.assertEqual(rule.message, "Input must be a valid file path")

    def test_file_path_must_exist(self):
        rule = FilePathRule(must_exist=True)
        with tempfile.TemporaryDirectory() as tmpdir:
            existing = os.path.join(tmpdir, "present.txt")
            with open(existing, "w") as f:
                f.write("x")
            self.assertTrue(rule.is_valid(existing))
            self.assertFalse(rule.is_valid(os.path.join(tmpdir, "missing.txt")))
            self.assertFalse(rule.is_valid(tmpdir))
        self.assertEqual(rule.message, "File path must exist")


class TestCharRules(unittest.TestCase):

    @parameterized.expand([
        ("letter", LetterRule, "q", True),
        ("letter_digit", LetterRule, "7", False),
        ("digit", DigitRule, "7", True),
        ("upper", UpperCaseRule, "Q", True),
        ("upper_lower", UpperCaseRule, "q", False),
        ("lower", LowerCaseRule, "q", True),
        ("alnum", AlphanumericCharRule, "7", True),
        ("alnum_symbol", AlphanumericCharRule, "#", False),
        ("whitespace", WhitespaceRule, "\t", True),
        ("punctuation", PunctuationRule, "!", True),
        ("punctuation_dash", PunctuationRule, "-", True),
        ("punctuation_letter", PunctuationRule, "a", False),
    ])
    def test_classes(self, name, rule_type, value, expected):
        self.assertEqual(rule_type().is_valid(value), expected)

    def test_allowed_and_excluded_chars(self):
        self.assertTrue(AllowedCharsRule("yn").is_valid("y"))
        self.assertFalse(AllowedCharsRule("yn").is_valid("x"))
        self.assertEqual(AllowedCharsRule("yn").message, "Character must be one of: yn")
        self.assertFalse(ExcludedCharsRule("xyz").is_valid("x"))
        self.assertEqual(ExcludedCharsRule("xyz").message, "Character cannot be one of: xyz")

    def test_range_orders_characters(self):
        rule = RangeRule("a", "f")
        self.assertTrue(rule.is_valid("c"))
        self.assertFalse(rule.is_valid("g"))


if __name__ == "__main__":
    unittest.main()
