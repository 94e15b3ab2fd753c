import unittest

from trending_repos.domain.exceptions import InvalidDuration, InvalidLimit, QueryValidationError
from trending_repos.domain.models import Duration
from trending_repos.domain.validation import validate_duration, validate_limit, validate_query


class TestValidateDuration(unittest.TestCase):
    def test_accepts_every_duration_case_insensitively(self) -> None:
        for raw, expected in [
            ("day", Duration.DAY),
            ("WEEK", Duration.WEEK),
            ("Month", Duration.MONTH),
            ("yEaR", Duration.YEAR),
        ]:
            with self.subTest(raw=raw):
                self.assertIs(validate_duration(raw), expected)

    def test_unknown_duration_message_lists_valid_options(self) -> None:
        with self.assertRaises(InvalidDuration) as ctx:
            validate_duration("Century")

        self.assertEqual(
            str(ctx.exception),
            "Invalid duration: century. Valid options are: day, week, month, year",
        )

    def test_non_string_duration_is_rejected(self) -> None:
        with self.assertRaises(InvalidDuration):
            validate_duration(None)
        with self.assertRaises(InvalidDuration):
            validate_duration(7)


class TestValidateLimit(unittest.TestCase):
    def test_bounds_are_inclusive(self) -> None:
        self.assertEqual(validate_limit(1), 1)
        self.assertEqual(validate_limit(100), 100)
        self.assertEqual(validate_limit("42"), 42)
        self.assertEqual(validate_limit(" 7 "), 7)

    def test_out_of_range_and_non_integer_values_are_rejected(self) -> None:
        for raw in [0, -1, 101, "0", "101", "abc", "5.5", "", 5.0, float("nan"), True, None, [5]]:
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidLimit):
                    validate_limit(raw)

    def test_only_plain_ascii_digit_strings_are_accepted(self) -> None:
        for raw in ["1_0", "+5", "\u0661\u0660", "0x10", "5 5"]:
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidLimit) as ctx:
                    validate_limit(raw)
                self.assertEqual(str(ctx.exception), f"Invalid limit: {raw}. It must be between 1 and 100.")

    def test_negative_string_is_out_of_range(self) -> None:
        with self.assertRaises(InvalidLimit) as ctx:
            validate_limit("-5")

        self.assertEqual(str(ctx.exception), "Invalid limit: -5. It must be between 1 and 100.")

    def test_values_lists_durations_in_order(self) -> None:
        self.assertEqual(Duration.values(), ["day", "week", "month", "year"])

    def test_limit_message(self) -> None:
        with self.assertRaises(InvalidLimit) as ctx:
            validate_limit(500)

        self.assertEqual(str(ctx.exception), "Invalid limit: 500. It must be between 1 and 100.")


class TestValidateQuery(unittest.TestCase):
    def test_builds_query(self) -> None:
        query = validate_query("Day", "5")

        self.assertIs(query.duration, Duration.DAY)
        self.assertEqual(query.limit, 5)

    def test_duration_is_checked_before_limit(self) -> None:
        with self.assertRaises(InvalidDuration):
            validate_query("century", 0)

    def test_errors_share_validation_base(self) -> None:
        with self.assertRaises(QueryValidationError):
            validate_query("week", 1000)
