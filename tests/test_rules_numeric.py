import unittest
from decimal import Decimal
from fractions import Fraction

from parameterized import parameterized
from hypothesis import given, strategies as st, settings

from promptguard.rules import (
    CustomRule,
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


class TestOrderingRules(unittest.TestCase):

    @parameterized.expand([
        ("lower_bound", 1, True),
        ("upper_bound", 10, True),
        ("inside", 5, True),
        ("below", 0, False),
        ("above", 11, False),
    ])
    def test_range_is_inclusive(self, name, value, expected):
        self.assertEqual(RangeRule(1, 10).is_valid(value), expected)

    @given(st.integers(), st.integers(), st.integers())
    @settings(max_examples=200)
    def test_range_matches_native_comparison(self, a, b, value):
        """
        For any bounds and value the rule agrees with ``a <= value <= b``.
        """
        self.assertEqual(RangeRule(a, b).is_valid(value), a <= value <= b)

    def test_range_works_for_decimal_and_fraction(self):
        self.assertTrue(RangeRule(Decimal("0.5"), Decimal("1.5")).is_valid(Decimal("1.5")))
        self.assertFalse(RangeRule(Fraction(1, 3), Fraction(1, 2)).is_valid(Fraction(2, 3)))

    def test_minimum_and_maximum(self):
        self.assertTrue(MinimumRule(3).is_valid(3))
        self.assertFalse(MinimumRule(3).is_valid(2))
        self.assertTrue(MaximumRule(3).is_valid(3))
        self.assertFalse(MaximumRule(3).is_valid(4))

    def test_ordering_messages(self):
        self.assertEqual(RangeRule(1, 10).message, "Value must be between 1 and 10")
        self.assertEqual(MinimumRule(18).message, "Value must be at least 18")
        self.assertEqual(MaximumRule(2.5).message, "Value must be at most 2.5")


class TestSignRules(unittest.TestCase):

    @parameterized.expand([
        ("positive_one", PositiveRule, 1, True),
        ("positive_zero", PositiveRule, 0, False),
        ("non_negative_zero", NonNegativeRule, 0, True),
        ("non_negative_minus", NonNegativeRule, -1, False),
        ("negative_minus", NegativeRule, -0.5, True),
        ("negative_zero", NegativeRule, 0, False),
    ])
    def test_sign(self, name, rule_type, value, expected):
        self.assertEqual(rule_type().is_valid(value), expected)

    def test_sign_messages(self):
        self.assertEqual(PositiveRule().message, "Value must be positive")
        self.assertEqual(NonNegativeRule().message, "Value must be non-negative")
        self.assertEqual(NegativeRule().message, "Value must be negative")


class TestArithmeticRules(unittest.TestCase):

    @parameterized.expand([
        ("even_four", EvenRule, 4, True),
        ("even_negative", EvenRule, -2, True),
        ("even_three", EvenRule, 3, False),
        ("odd_three", OddRule, 3, True),
        ("odd_negative", OddRule, -3, True),
        ("odd_zero", OddRule, 0, False),
    ])
    def test_parity(self, name, rule_type, value, expected):
        self.assertEqual(rule_type().is_valid(value), expected)

    def test_multiple_of(self):
        rule = MultipleOfRule(5)
        self.assertTrue(rule.is_valid(15))
        self.assertFalse(rule.is_valid(16))
        self.assertEqual(rule.message, "Value must be a multiple of 5")

    def test_not_multiple_of(self):
        rule = NotMultipleOfRule(13)
        self.assertTrue(rule.is_valid(12))
        self.assertFalse(rule.is_valid(26))
        self.assertEqual(rule.message, "Value must not be a multiple of 13")

    def test_zero_divisor_fails_on_first_use(self):
        rule = MultipleOfRule(0)
        with self.assertRaises(ZeroDivisionError):
            rule.is_valid(10)

    def test_multiple_of_decimal(self):
        self.assertTrue(MultipleOfRule(Decimal("0.25")).is_valid(Decimal("1.75")))
        self.assertFalse(MultipleOfRule(Decimal("0.25")).is_valid(Decimal("1.8")))


class TestLuhnRule(unittest.TestCase):

    @parameterized.expand([
        ("visa_test_number", 4532015112830366),
        ("textbook_example", 79927398713),
        ("single_zero", 0),
    ])
    def test_valid_numbers(self, name, value):
        self.assertTrue(LuhnRule().is_valid(value))

    @parameterized.expand([
        ("visa_last_digit_changed", 4532015112830367),
        ("textbook_last_digit_changed", 79927398710),
        ("negative", -79927398713),
    ])
    def test_invalid_numbers(self, name, value):
        self.assertFalse(LuhnRule().is_valid(value))

    @given(st.integers(min_value=1, max_value=10**15))
    @settings(max_examples=100)
    def test_exactly_one_check_digit_is_valid(self, payload):
        """
        Appending each of the ten possible check digits yields exactly one
        number that passes.
        """
        rule = LuhnRule()
        passing = [d for d in range(10) if rule.is_valid(payload * 10 + d)]
        self.assertEqual(len(passing), 1)

    def test_message(self):
        self.assertEqual(LuhnRule().message, "Value must pass Luhn checksum validation")


class TestMessages(unittest.TestCase):

    def test_custom_message_replaces_default(self):
        self.assertEqual(RangeRule(1, 10, "Pick 1-10").message, "Pick 1-10")

    def test_empty_message_is_kept(self):
        self.assertEqual(PositiveRule("").message, "")

    def test_custom_rule(self):
        rule = CustomRule(lambda n: n != 13, "Unlucky numbers are not accepted")
        self.assertTrue(rule.is_valid(12))
        self.assertFalse(rule.is_valid(13))
        self.assertEqual(rule.message, "Unlucky numbers are not accepted")

    def test_repr_names_rule(self):
        self.assertIn("EvenRule", repr(EvenRule()))


if __name__ == "__main__":
    unittest.main()
