"""
Unit tests for the watch entry form's status choices.
"""

from movie_catalog.core.status import display_options
from movie_catalog.ui.components.watch_entry_form import status_picker_options


class TestStatusPickerOptions:
    """Tests for status_picker_options."""

    def test_standard_status_keeps_options(self):
        """Test a standard current status leaves the choices unchanged."""
        assert status_picker_options(display_options(), "Watching") == display_options()

    def test_unknown_status_is_selectable(self):
        """Test a non-standard current status is offered first, so saving keeps it."""
        options = status_picker_options(display_options(), "Paused")

        assert options[0] == "Paused"
        assert options[1:] == display_options()

    def test_no_current_status(self):
        """Test a new entry gets the standard choices."""
        assert status_picker_options(display_options(), None) == display_options()

    def test_input_list_is_not_modified(self):
        """Test the caller's option list is left alone."""
        options = display_options()
        status_picker_options(options, "Paused")
        assert options == ["Planned", "Watching", "Completed", "Dropped"]
