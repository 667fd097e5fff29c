"""Unit tests for the keyword content filter."""

from __future__ import annotations

from unittest.mock import patch

from app.services.content_filter import contains_blocked_word, get_blocked_words


class TestContainsBlockedWord:
    """Case-insensitive substring matching."""

    def test_flags_lowercase_word(self) -> None:
        assert contains_blocked_word("this is spam content") is True

    def test_flags_uppercase_word(self) -> None:
        assert contains_blocked_word("SCAM alert") is True

    def test_clean_text_not_flagged(self) -> None:
        assert contains_blocked_word("a lovely sunny day") is False

    def test_substring_inside_word_is_flagged(self) -> None:
        """Known limitation: 'robotics' contains 'bot'."""
        assert contains_blocked_word("robotics_club") is True

    def test_empty_and_none_not_flagged(self) -> None:
        assert contains_blocked_word("") is False
        assert contains_blocked_word(None) is False

    def test_custom_word_list(self) -> None:
        assert contains_blocked_word("Buy CHEAP followers", ["cheap"]) is True
        assert contains_blocked_word("this is spam content", ["cheap"]) is False

    def test_empty_custom_list_flags_nothing(self) -> None:
        assert contains_blocked_word("spam scam fake bot", []) is False


class TestGetBlockedWords:
    """Built-in list plus configured extras."""

    def test_defaults(self) -> None:
        with patch("app.services.content_filter.settings") as mock_settings:
            mock_settings.CONTENT_FILTER_EXTRA_WORDS = ""
            assert get_blocked_words() == ("spam", "fake", "scam", "bot")

    def test_extra_words_are_appended_once(self) -> None:
        with patch("app.services.content_filter.settings") as mock_settings:
            mock_settings.CONTENT_FILTER_EXTRA_WORDS = " Casino, spam ,,giveaway"
            words = get_blocked_words()

        assert words[:4] == ("spam", "fake", "scam", "bot")
        assert "casino" in words
        assert "giveaway" in words
        assert words.count("spam") == 1

    def test_extra_words_used_by_default(self) -> None:
        with patch("app.services.content_filter.settings") as mock_settings:
            mock_settings.CONTENT_FILTER_EXTRA_WORDS = "casino"
            assert contains_blocked_word("Best CASINO deals") is True
