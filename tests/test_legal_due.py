"""
Tests for the legal time limit rule.
"""
import pytest
from datetime import date, datetime, timezone

from catchcase.config import ClassificationSettings
from catchcase.engine import is_legally_due
from catchcase.engine.legal_due import TOLERANCE_IN_KG


LANDED = date(2024, 3, 8)
TWO_DAYS_LATER = datetime(2024, 3, 10, 9, 0, tzinfo=timezone.utc)
NEXT_DAY = datetime(2024, 3, 9, 23, 0, tzinfo=timezone.utc)


class TestUnder10m:
    """Tests for vessels under 10 metres."""

    @pytest.mark.parametrize("da", ["England", "Isle of Man"])
    def test_quota_species_always_due(self, da):
        """Test quota species are due immediately in England and the Isle of Man."""
        assert is_legally_due(9.9, da, NEXT_DAY, LANDED, True, 10) is True

    @pytest.mark.parametrize("da", ["England", "Isle of Man", "Wales"])
    def test_due_after_more_than_a_day(self, da):
        """Test non-quota species fall due after more than one day."""
        assert is_legally_due(8, da, TWO_DAYS_LATER, LANDED, False, 10) is True
        assert is_legally_due(8, da, NEXT_DAY, LANDED, False, 10) is False

    def test_wales_quota_species_not_immediate(self):
        """Test quota species have no immediate limit in Wales."""
        assert is_legally_due(8, "Wales", NEXT_DAY, LANDED, True, 10) is False

    @pytest.mark.parametrize("da", ["Scotland", "Northern Ireland", "Guernsey", "Jersey", None])
    def test_other_administrations_never_due(self, da):
        """Test other administrations have no limit for small vessels."""
        assert is_legally_due(8, da, TWO_DAYS_LATER, LANDED, True, 1000) is False


class TestOver12m:
    """Tests for vessels over 12 metres."""

    def test_over_tolerance_due(self):
        """Test weight above 50kg is due."""
        assert is_legally_due(15, "Scotland", NEXT_DAY, LANDED, False, 50.1) is True

    def test_at_tolerance_not_due(self):
        """Test weight at 50kg is not due."""
        assert is_legally_due(15, "England", TWO_DAYS_LATER, LANDED, True, 50) is False

    def test_tolerance_independent_of_deminimis(self):
        """Test the weight tolerance does not follow the ELOG deminimis setting."""
        settings = ClassificationSettings(deminimis_threshold_kg=10)

        assert TOLERANCE_IN_KG == 50
        assert settings.deminimis_threshold_kg != TOLERANCE_IN_KG
        assert is_legally_due(15, "England", TWO_DAYS_LATER, LANDED, False, 40) is False


class TestMidLength:
    """Tests for vessels from 10 to 12 metres."""

    @pytest.mark.parametrize("length", [10, 11, 12])
    def test_never_due(self, length):
        """Test mid-length vessels have no limit."""
        assert is_legally_due(length, "England", TWO_DAYS_LATER, LANDED, True, 500) is False

    def test_unknown_length_never_due(self):
        """Test an unknown vessel length has no limit."""
        assert is_legally_due(None, "England", TWO_DAYS_LATER, LANDED, True, 500) is False
