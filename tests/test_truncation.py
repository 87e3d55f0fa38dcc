"""
Unit tests for smart truncation and excerpt extraction.
"""

import pytest

from vaultcore.context.truncation import extract_relevant_section, smart_truncate, truncate_prefix

PARAGRAPHS = "A" * 50 + "\n\n" + "B" * 50 + "\n\n" + "C" * 500


class TestSmartTruncate:
    """Tests for smart_truncate."""

    def test_short_text_unchanged(self):
        assert smart_truncate("short note", 100) == "short note"

    def test_keeps_whole_paragraphs(self):
        assert smart_truncate(PARAGRAPHS, 200) == "A" * 50 + "\n\n" + "B" * 50

    def test_partial_paragraph_when_room_remains(self):
        result = smart_truncate(PARAGRAPHS, 300)

        assert result.endswith("C" * 196 + "...")
        assert len(result) == 303

    def test_oversized_first_paragraph(self):
        assert smart_truncate("X" * 1000, 87) == "X" * 87 + "..."

    @pytest.mark.parametrize("cap", [0, 10, 50, 150, 400])
    def test_never_exceeds_cap_plus_ellipsis(self, cap):
        assert len(smart_truncate(PARAGRAPHS, cap)) <= cap + 3


class TestExtractRelevantSection:
    """Tests for extract_relevant_section."""

    TEXT = "Cats sleep a lot. Dogs bark loudly. Cats and dogs play together."

    def test_best_sentences_first(self):
        result = extract_relevant_section(self.TEXT, ["cats", "dogs"], 500)
        assert result == "Cats and dogs play together. Cats sleep a lot. Dogs bark loudly."

    def test_stops_at_cap(self):
        assert extract_relevant_section(self.TEXT, ["cats", "dogs"], 30) == "Cats and dogs play together."

    def test_falls_back_to_prefix(self):
        result = extract_relevant_section("x" * 600, ["zzz"], 500)

        assert result == "x" * 497 + "..."
        assert len(result) == 500

    def test_short_body_without_match_is_returned_whole(self):
        assert extract_relevant_section("Nothing here.", ["zzz"], 500) == "Nothing here."


class TestTruncatePrefix:
    """Tests for truncate_prefix."""

    def test_cap_smaller_than_ellipsis(self):
        assert truncate_prefix("abcdef", 2) == "ab"
