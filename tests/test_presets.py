"""
Tests for the preset option lists.
"""

from formbuilder.presets import PRESETS, get_preset, has_preset, preset_names
from formbuilder.questions import Option


class TestPresets:
    """Test preset lookup."""

    def test_known_presets(self):
        assert preset_names() == ["countries", "ethnicities", "genders", "us_states"]

    def test_genders(self):
        assert get_preset("genders") == [
            Option("Male", "male"),
            Option("Female", "female"),
            Option("X", "x", show_value=False),
        ]

    def test_us_states_subset(self):
        assert [o.value for o in get_preset("us_states")] == ["ca", "fl", "ny", "tx", "wa"]

    def test_countries_subset(self):
        assert [o.label for o in get_preset("countries")] == ["Canada", "Mexico", "United States"]

    def test_unknown_preset_is_empty(self):
        """Unknown names give an empty list rather than failing."""
        assert get_preset("planets") == []
        assert has_preset("planets") is False

    def test_unknown_preset_logs_warning(self, caplog):
        get_preset("planets")
        assert "planets" in caplog.text

    def test_returned_list_is_a_copy(self):
        options = get_preset("ethnicities")
        options.clear()
        assert len(get_preset("ethnicities")) == 4
        assert len(PRESETS["ethnicities"]) == 4
