"""Tests for loose matching."""

import pytest

from src.search.matcher import is_loose_match
from src.search.normalize import normalize


class TestContainment:
    """Tests for the substring accept path."""

    def test_query_inside_candidate(self):
        assert is_loose_match("thai", "thaifood") is True

    def test_candidate_inside_query(self):
        """Test that a short field matches a longer typed query."""
        assert is_loose_match("thaifood", "thai") is True

    def test_empty_query_matches_everything(self):
        assert is_loose_match("", "goldendragon") is True
        assert is_loose_match("", "") is True


class TestSingleEdit:
    """Tests for the one-edit walk."""

    def test_substitution(self):
        assert is_loose_match("thal", "thai") is True

    def test_missing_character(self):
        assert is_loose_match("chinse", "chinese") is True

    def test_extra_character(self):
        assert is_loose_match("chineese", "chinese") is True

    def test_missing_first_character(self):
        assert is_loose_match("talian", "italian") is True

    def test_missing_last_character_is_containment(self):
        assert is_loose_match("italia", "italian") is True

    def test_transposition_not_accepted(self):
        """Test the known limitation: a swap costs two edits."""
        assert is_loose_match("thia", "thai") is False

    def test_two_substitutions_rejected(self):
        assert is_loose_match("tgaa", "thai") is False


class TestLengthGate:
    """Tests for the length difference bound."""

    def test_containment_wins_over_length_gate(self):
        """Test that a prefix match passes however long the candidate is."""
        assert is_loose_match("thai", "thaifoo") is True

    def test_length_difference_three_rejected(self):
        assert is_loose_match("thai", "thxaifoo") is False

    def test_one_edit_then_mismatch_rejected(self):
        assert is_loose_match("thxai", "thaiyy") is False

    @pytest.mark.parametrize(
        "a,b",
        [("sushi", "ramenbar"), ("abc", "xyzxyz"), ("burger", "bun")],
    )
    def test_far_lengths_rejected(self, a, b):
        assert is_loose_match(a, b) is False
        assert is_loose_match(b, a) is False


class TestReflexivity:
    """Tests that a string always matches itself."""

    @pytest.mark.parametrize("text", ["Golden Dragon", "Café", "Pet food", "x"])
    def test_self_match(self, text):
        key = normalize(text)
        assert is_loose_match(key, key) is True
