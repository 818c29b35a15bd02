"""Tests for word validation."""

import pytest

from wordle.exceptions import WordleError
from wordle.validation import (
    InvalidCharactersError,
    TooLongError,
    TooShortError,
    ValidationError,
    is_valid,
    validate,
)


class TestValidate:
    """Test cases for validate()."""

    def test_valid_word(self):
        assert validate("crane") is None
        assert is_valid("crane")

    def test_empty_is_too_short(self):
        with pytest.raises(TooShortError):
            validate("")

    def test_four_letters_is_too_short(self):
        with pytest.raises(TooShortError):
            validate("abcd")

    def test_six_letters_is_too_long(self):
        with pytest.raises(TooLongError):
            validate("abcdef")

    def test_length_is_checked_before_characters(self):
        with pytest.raises(TooLongError):
            validate("ABCDEF")

    def test_uppercase_is_invalid(self):
        with pytest.raises(InvalidCharactersError):
            validate("Crane")

    def test_whitespace_is_invalid(self):
        with pytest.raises(InvalidCharactersError):
            validate("cra e")

    def test_trailing_newline_is_invalid(self):
        """A trailing newline makes five characters but is not a letter."""
        with pytest.raises(InvalidCharactersError):
            validate("abcd\n")
        assert not is_valid("abcd\n")

    def test_leading_newline_is_invalid(self):
        with pytest.raises(InvalidCharactersError):
            validate("\nabcd")

    def test_non_ascii_letters_are_invalid(self):
        with pytest.raises(InvalidCharactersError):
            validate("crané")

    def test_is_valid_false(self):
        assert not is_valid("abc")
        assert not is_valid("abc12")


class TestValidationErrors:
    """Error hierarchy and messages."""

    def test_hierarchy(self):
        for error_class in (TooShortError, TooLongError, InvalidCharactersError):
            assert issubclass(error_class, ValidationError)
            assert issubclass(error_class, WordleError)
            assert issubclass(error_class, ValueError)

    def test_messages_are_distinct(self):
        messages = {str(TooShortError()), str(TooLongError()), str(InvalidCharactersError())}
        assert len(messages) == 3

    def test_message_content(self):
        with pytest.raises(TooShortError, match="too short"):
            validate("ab")
        with pytest.raises(InvalidCharactersError, match="a-z"):
            validate("ab!de")

    def test_error_keeps_word(self):
        with pytest.raises(TooLongError) as exc_info:
            validate("toolong")
        assert exc_info.value.word == "toolong"
