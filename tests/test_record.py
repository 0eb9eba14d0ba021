"""Tests for the route record value type."""

import pytest
import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from train_routes.routes.record import RouteRecord


class TestRouteRecord:
    """Tests for RouteRecord."""
    
    def test_fields(self):
        """Fields should be stored as given."""
        record = RouteRecord("Sealdah", "Howrah", 8, 0.65)
        assert record.start == "Sealdah"
        assert record.destination == "Howrah"
        assert record.stoppages == 8
        assert record.duration == 0.65
    
    def test_key(self):
        """key should be the (start, destination) pair."""
        assert RouteRecord("A", "B", 1, 0.5).key == ("A", "B")
    
    def test_equal_values_compare_equal(self):
        """Records with equal fields should be equal."""
        assert RouteRecord("A", "B", 2, 0.5) == RouteRecord("A", "B", 2, 0.5)
    
    def test_duration_is_float(self):
        """Integer durations should be stored as float."""
        assert isinstance(RouteRecord("A", "B", 2, 2).duration, float)
    
    def test_whole_float_stoppages_accepted(self):
        """A float stoppage count without fraction should become an int."""
        record = RouteRecord("A", "B", 3.0, 0.5)
        assert record.stoppages == 3
        assert isinstance(record.stoppages, int)

    def test_is_immutable(self):
        """Records should not be modifiable."""
        record = RouteRecord("A", "B", 2, 0.5)
        with pytest.raises(FrozenInstanceError):
            record.start = "C"
    
    @pytest.mark.parametrize("args", [
        ("", "B", 1, 0.5),
        ("A", "", 1, 0.5),
        ("A", "B", -1, 0.5),
        ("A", "B", 1, -0.5),
        ("A", "B", 1, float("nan")),
        ("A", "B", 1, float("inf")),
        ("A", "B", 2.7, 0.5),
        ("A", "B", float("inf"), 0.5),
    ])
    def test_invalid_fields_rejected(self, args):
        """Empty names and negative numbers should raise ValueError."""
        with pytest.raises(ValueError):
            RouteRecord(*args)
    
    def test_matches_is_case_sensitive(self):
        """matches should use exact string equality."""
        record = RouteRecord("A", "B", 1, 0.5)
        assert record.matches("A", "B")
        assert not record.matches("a", "B")
        assert not record.matches("A", "b")
    
    def test_describe(self):
        """describe should render two decimal hours."""
        record = RouteRecord("Sealdah", "Chandannagar", 15, 2.0)
        assert record.describe() == (
            "Start Station: Sealdah, Destination: Chandannagar, "
            "Stoppages: 15, Duration: 2.00 hours"
        )
    
    def test_to_dict(self):
        """to_dict should expose every field."""
        assert RouteRecord("A", "B", 3, 0.75).to_dict() == {
            "start": "A", "destination": "B", "stoppages": 3, "duration": 0.75,
        }
