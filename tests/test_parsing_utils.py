"""Tests for parsing utility functions."""

import unittest
from mediastream.utils.parsing import (
    parse_attributes,
    parse_duration,
    split_directive,
)


class TestParseAttributes(unittest.TestCase):
    """Test key="value" pair extraction."""

    def test_parses_multiple_pairs(self):
        """Test that all pairs are extracted."""
        result = parse_attributes('HELLO="WORLD" FOO="BAR"')
        self.assertIn("HELLO", result)
        self.assertEqual(result["FOO"], "BAR")
        self.assertNotIn("NOT_FOUND", result)

    def test_preserves_document_order(self):
        """Test that keys come out in the order they appear."""
        result = parse_attributes('A="1" B="2"')
        self.assertEqual(result, {"A": "1", "B": "2"})
        self.assertEqual(list(result), ["A", "B"])

    def test_last_duplicate_wins(self):
        """Test that a repeated key keeps its last value."""
        self.assertEqual(parse_attributes('A="1" A="2"'), {"A": "2"})

    def test_empty_input(self):
        """Test that no pairs yields an empty dict."""
        self.assertEqual(parse_attributes(""), {})
        self.assertEqual(parse_attributes("just some words"), {})

    def test_value_stops_at_first_closing_quote(self):
        """Test that values are matched non-greedily."""
        result = parse_attributes('a="x" junk b="y"')
        self.assertEqual(result, {"a": "x", "b": "y"})

    def test_value_may_contain_spaces_and_commas(self):
        """Test that quoted values keep their content verbatim."""
        result = parse_attributes('group-title="News, Sports & More"')
        self.assertEqual(result["group-title"], "News, Sports & More")

    def test_empty_value(self):
        """Test that an empty quoted value is kept."""
        self.assertEqual(parse_attributes('tvg-logo=""'), {"tvg-logo": ""})

    def test_ignores_unquoted_values(self):
        """Test that key=value without quotes is skipped."""
        result = parse_attributes('a=1 b="2"')
        self.assertEqual(result, {"b": "2"})

    def test_ignores_keyless_values(self):
        """Test that ="value" without a key is skipped."""
        self.assertEqual(parse_attributes('="orphan"'), {})
        self.assertEqual(parse_attributes(' ="orphan" k="v"'), {"k": "v"})

    def test_key_is_adjacent_token(self):
        """Test that only the token touching '=' becomes the key."""
        result = parse_attributes('-1 tvg-id="a"')
        self.assertEqual(result, {"tvg-id": "a"})

    def test_key_includes_adjacent_punctuation(self):
        """Test that the key is the whole whitespace-free run before =\"."""
        result = parse_attributes('prefix,tvg-name="Channel 1",suffix')
        self.assertEqual(result, {"prefix,tvg-name": "Channel 1"})

    def test_idempotent_on_extracted_text(self):
        """Test that re-extracting rebuilt text gives the same mapping."""
        first = parse_attributes('x-tvg-url="test" tvg-shift="2"')
        rebuilt = " ".join(f'{k}="{v}"' for k, v in first.items())
        self.assertEqual(parse_attributes(rebuilt), first)


class TestSplitDirective(unittest.TestCase):
    """Test directive line splitting."""

    def test_splits_name_and_value(self):
        """Test a directive with a value."""
        self.assertEqual(split_directive("#EXT-X-VERSION:6"), ("EXT-X-VERSION", "6"))

    def test_splits_on_first_colon_only(self):
        """Test that colons in the value are preserved."""
        self.assertEqual(
            split_directive("#EXT-X-PROGRAM-DATE-TIME:2024-01-01T00:00:00Z"),
            ("EXT-X-PROGRAM-DATE-TIME", "2024-01-01T00:00:00Z"),
        )

    def test_bare_directive_has_no_value(self):
        """Test that a directive without ':' gives None."""
        self.assertEqual(split_directive("#EXT-X-ENDLIST"), ("EXT-X-ENDLIST", None))

    def test_empty_value_is_not_none(self):
        """Test that a trailing ':' gives an empty string."""
        self.assertEqual(split_directive("#EXTGRP:"), ("EXTGRP", ""))


class TestParseDuration(unittest.TestCase):
    """Test #EXTINF duration parsing."""

    def test_accepts_float_literals(self):
        """Test the usual duration spellings."""
        for token, expected in (
            ("6", 6.0), ("6.006", 6.006), ("-1", -1.0), ("+2.5", 2.5),
            ("1.", 1.0), (".5", 0.5), ("1e3", 1000.0), ("2.5E-1", 0.25),
        ):
            with self.subTest(token=token):
                self.assertEqual(parse_duration(token), expected)

    def test_accepts_inf_and_nan(self):
        """Test that special values are accepted like any float."""
        self.assertEqual(parse_duration("inf"), float("inf"))
        self.assertEqual(parse_duration("-Infinity"), float("-inf"))
        self.assertNotEqual(parse_duration("NaN"), parse_duration("NaN"))

    def test_rejects_non_literals(self):
        """Test that underscores, whitespace and junk are rejected."""
        for token in ("", "abc", "1_0", "1\t", "\f1", " 1", "1,5", "0x10", "1e", ".", "\u0661"):
            with self.subTest(token=token):
                with self.assertRaises(ValueError):
                    parse_duration(token)


if __name__ == '__main__':
    unittest.main()
