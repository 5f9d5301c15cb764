"""Unit tests for request input validation."""

import pytest

from tome.interface.api.validation import (
    normalize_content,
    normalize_nickname,
    validate_character_id,
    validate_comment_id,
    validate_parent_id,
)
from tome.interface.error import ValidationError


class TestValidateCharacterId:
    """Tests for validate_character_id."""

    @pytest.mark.parametrize("value,expected", [("12345", "12345"), ("0", "0"), (42, "42")])
    def test_accepts_digits(self, value, expected):
        assert validate_character_id(value) == expected

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "12a", " 12", "-1", "1.0", "１２３", None, True, "9" * 65],
    )
    def test_rejects_non_numeric(self, value):
        """Anything but ASCII digits is refused."""
        with pytest.raises(ValidationError, match="Invalid character ID"):
            validate_character_id(value)


class TestValidateCommentId:
    """Tests for validate_comment_id."""

    def test_parses_digits(self):
        assert validate_comment_id("17") == 17

    @pytest.mark.parametrize("value", ["", "x", "-3", "2.5", "٣", str(2**63)])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValidationError, match="Invalid comment ID"):
            validate_comment_id(value)


class TestValidateParentId:
    """Tests for validate_parent_id."""

    @pytest.mark.parametrize("value", [None, "", 0, "0"])
    def test_empty_means_top_level(self, value):
        """Empty values create a top-level comment."""
        assert validate_parent_id(value) is None

    @pytest.mark.parametrize("value,expected", [(5, 5), ("5", 5), (123456, 123456)])
    def test_accepts_numbers(self, value, expected):
        assert validate_parent_id(value) == expected

    @pytest.mark.parametrize("value", ["abc", -1, "-1", True, 1.5, "1e3"])
    def test_rejects_invalid(self, value):
        with pytest.raises(ValidationError, match="Invalid parent ID"):
            validate_parent_id(value)


class TestNormalizeNickname:
    """Tests for normalize_nickname."""

    def test_trims_whitespace(self):
        assert normalize_nickname("  alice \t") == "alice"

    def test_keeps_case(self):
        assert normalize_nickname("Alice") == "Alice"

    @pytest.mark.parametrize("value", [None, "", "   ", 5])
    def test_required(self, value):
        with pytest.raises(ValidationError, match="Nickname is required"):
            normalize_nickname(value)

    def test_length_is_checked_after_trimming(self):
        """50 characters plus surrounding spaces is fine, 51 is not."""
        assert normalize_nickname(" " + "n" * 50 + " ") == "n" * 50

        with pytest.raises(ValidationError, match="50 characters or less"):
            normalize_nickname("n" * 51)


class TestNormalizeContent:
    """Tests for normalize_content."""

    def test_trims_whitespace(self):
        assert normalize_content("\n hello world \n") == "hello world"

    @pytest.mark.parametrize("value", [None, "", " \n\t "])
    def test_required(self, value):
        with pytest.raises(ValidationError, match="Comment content is required"):
            normalize_content(value)

    def test_length_limit(self):
        assert normalize_content("c" * 2000) == "c" * 2000

        with pytest.raises(ValidationError, match="2000 characters or less"):
            normalize_content("c" * 2001)
