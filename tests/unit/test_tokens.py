"""
Unit tests for the tokenizer helpers (chartfile.tokens).
"""

import pytest

from chartfile.tokens import (
    INT32_MAX,
    INT32_MIN,
    parse_int_token,
    split_tokens,
    to_int32,
)


class TestSplitTokens:
    """Tests for split_tokens()."""

    def test_simple_line(self):
        assert split_tokens("0 = N 1 2") == ["0", "=", "N", "1", "2"]

    def test_consecutive_spaces_yield_empty_token(self):
        assert split_tokens("0  = N") == ["0", "", "=", "N"]

    def test_tabs_are_not_separators(self):
        assert split_tokens("0\t= N") == ["0\t=", "N"]

    def test_empty_line(self):
        assert split_tokens("") == [""]


class TestParseIntToken:
    """Tests for parse_int_token()."""

    @pytest.mark.parametrize(
        "token, expected",
        [("0", 0), ("192", 192), ("-5", -5), ("007", 7)],
    )
    def test_valid(self, token, expected):
        assert parse_int_token(token) == expected

    @pytest.mark.parametrize(
        "token",
        ["", "-", "+5", "5a", "a5", " 5", "5 ", "1.5", "Name", "٣"],
    )
    def test_invalid(self, token):
        assert parse_int_token(token) is None

    def test_int32_bounds(self):
        assert parse_int_token(str(INT32_MAX)) == INT32_MAX
        assert parse_int_token(str(INT32_MIN)) == INT32_MIN
        assert parse_int_token(str(INT32_MAX + 1)) is None
        assert parse_int_token(str(INT32_MIN - 1)) is None

    def test_huge_digit_run_rejected(self):
        assert parse_int_token("9" * 5000) is None
        assert parse_int_token("-" + "9" * 5000) is None

    def test_leading_zeros_do_not_count_towards_width(self):
        assert parse_int_token("0" * 20 + "42") == 42


class TestToInt32:
    """Tests for to_int32()."""

    def test_plus_sign_accepted(self):
        assert to_int32("+7") == 7

    def test_eleven_significant_digits_rejected(self):
        assert to_int32("10000000000") is None
