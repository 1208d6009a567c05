"""Tests for playback item models and field accessors."""

import math

import pytest

from eventreplay_player.models import (
    PlaybackState,
    RecordedItem,
    is_well_formed,
    item_data,
    item_name,
    item_time,
)


class TestRecordedItem:
    """Tests for RecordedItem dataclass."""

    def test_create(self):
        """Test creating an item."""
        item = RecordedItem(t=120, n="click", d={"x": 10})

        assert item.t == 120
        assert item.n == "click"
        assert item.d == {"x": 10}

    def test_payload_defaults_to_none(self):
        """Test d is optional."""
        assert RecordedItem(t=0, n="focus").d is None

    def test_immutable(self):
        """Test that items are frozen."""
        item = RecordedItem(t=1, n="a")

        with pytest.raises(AttributeError):
            item.t = 2  # type: ignore

    def test_to_dict_uses_stored_keys(self):
        """Test to_dict produces the compact stored format."""
        item = RecordedItem(t=5, n="key", d="a")

        assert item.to_dict() == {"t": 5, "n": "key", "d": "a"}

    def test_from_dict(self):
        """Test creating from the stored format."""
        item = RecordedItem.from_dict({"t": 5, "n": "key"})

        assert item == RecordedItem(t=5, n="key", d=None)

    def test_from_dict_requires_time_and_name(self):
        """Test from_dict rejects malformed items."""
        with pytest.raises(KeyError):
            RecordedItem.from_dict({"n": "key"})


class TestItemAccessors:
    """Tests for item_time / item_name / item_data."""

    def test_mapping_fields(self):
        item = {"t": 10, "n": "a", "d": [1, 2]}

        assert item_time(item) == 10
        assert item_name(item) == "a"
        assert item_data(item) == [1, 2]

    def test_dataclass_fields(self):
        item = RecordedItem(t=10, n="a", d=3)

        assert item_time(item) == 10
        assert item_name(item) == "a"
        assert item_data(item) == 3

    def test_zero_offset_is_valid(self):
        """A zero offset must not be mistaken for a missing one."""
        assert item_time({"t": 0, "n": "a"}) == 0
        assert is_well_formed({"t": 0, "n": "a"})

    def test_float_offset_is_valid(self):
        assert item_time({"t": 12.5}) == 12.5

    @pytest.mark.parametrize("value", [None, "10", True, False, [10], math.nan])
    def test_invalid_offsets(self, value):
        """Missing, non-numeric, bool and NaN offsets are unusable."""
        assert item_time({"t": value, "n": "a"}) is None

    def test_missing_offset(self):
        assert item_time({"n": "a"}) is None

    @pytest.mark.parametrize("value", [None, 1, ["a"]])
    def test_invalid_names(self, value):
        assert item_name({"t": 1, "n": value}) is None

    def test_missing_payload_is_none(self):
        assert item_data({"t": 1, "n": "a"}) is None

    def test_non_mapping_without_fields(self):
        """Arbitrary objects are malformed, not errors."""
        assert item_time("just a string") is None
        assert item_name(42) is None
        assert not is_well_formed(object())


class TestPlaybackState:
    def test_values(self):
        assert PlaybackState.IDLE.value == "idle"
        assert PlaybackState.RUNNING.value == "running"
