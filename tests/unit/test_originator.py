"""Tests for originator (sender ID) clean-up."""

from __future__ import annotations

import pytest

from nexmo_sms.messaging.originator import validate_originator


class TestAlphanumericOriginator:
    def test_strips_invalid_characters(self) -> None:
        assert validate_originator("J@ne_Do3!!!!!!") == "JneDo3"

    def test_truncates_to_eleven(self) -> None:
        assert validate_originator("MyCompanyNameLtd") == "MyCompanyNa"

    def test_short_name_unchanged(self) -> None:
        assert validate_originator("TestSender") == "TestSender"

    def test_leading_zeros_kept_when_alphanumeric(self) -> None:
        assert validate_originator("00Shop") == "00Shop"

    def test_non_ascii_letters_removed(self) -> None:
        assert validate_originator("Café Bar") == "CafBar"


class TestNumericOriginator:
    def test_drops_international_prefix(self) -> None:
        assert validate_originator("0044123456789012") == "44123456789012"

    def test_prefix_removed_before_truncation(self) -> None:
        # 17 digits after stripping; 15 remain only if 00 goes first
        assert validate_originator("00123456789012345") == "123456789012345"

    def test_truncates_to_fifteen(self) -> None:
        assert validate_originator("1234567890123456789") == "123456789012345"

    def test_punctuation_stripped_before_classification(self) -> None:
        assert validate_originator("+44 (7700) 900-000") == "447700900000"

    def test_single_leading_zero_kept(self) -> None:
        assert validate_originator("07700900000") == "07700900000"

    @pytest.mark.parametrize("raw", ["", "!!!", "   "])
    def test_nothing_left(self, raw: str) -> None:
        assert validate_originator(raw) == ""

    def test_accepts_integers(self) -> None:
        assert validate_originator(447700900000) == "447700900000"
