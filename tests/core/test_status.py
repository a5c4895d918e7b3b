"""
Unit tests for the watch status vocabulary.
"""

import pytest

from movie_catalog.core.status import WatchStatus, display_options, to_display, to_internal

VOCABULARY = [
    ("planned", "Planned"),
    ("watching", "Watching"),
    ("completed", "Completed"),
    ("dropped", "Dropped"),
]


class TestTranslation:
    """Tests for to_internal / to_display."""

    @pytest.mark.parametrize("internal,display", VOCABULARY)
    def test_to_display(self, internal, display):
        """Test internal tokens map to display labels."""
        assert to_display(internal) == display

    @pytest.mark.parametrize("internal,display", VOCABULARY)
    def test_to_internal_from_display(self, internal, display):
        """Test display labels map to internal tokens."""
        assert to_internal(display) == internal

    @pytest.mark.parametrize("internal,display", VOCABULARY)
    def test_round_trip(self, internal, display):
        """Test translating there and back returns the input."""
        assert to_internal(to_display(internal)) == internal
        assert to_display(to_internal(display)) == display

    def test_internal_token_passes_through_to_internal(self):
        """Test an internal token is accepted by to_internal."""
        assert to_internal("watching") == "watching"

    def test_matching_ignores_case(self):
        """Test translation ignores case."""
        assert to_internal("COMPLETED") == "completed"
        assert to_display("DrOpPeD") == "Dropped"

    @pytest.mark.parametrize("unknown", ["paused", "Rewatching", "", "  planned "])
    def test_unknown_values_are_returned_unchanged(self, unknown):
        """Test unknown values come back unchanged."""
        assert to_internal(unknown) == unknown
        assert to_display(unknown) == unknown

    def test_none_passes_through(self):
        """Test None is returned as None."""
        assert to_internal(None) is None
        assert to_display(None) is None


class TestWatchStatus:
    """Tests for the WatchStatus enum."""

    def test_members_are_internal_tokens(self):
        """Test enum values are the internal tokens in order."""
        assert [s.value for s in WatchStatus] == [i for i, _ in VOCABULARY]

    def test_label(self):
        """Test the display label of a member."""
        assert WatchStatus.WATCHING.label == "Watching"

    def test_display_options_order(self):
        """Test display options follow vocabulary order."""
        assert display_options() == [d for _, d in VOCABULARY]
