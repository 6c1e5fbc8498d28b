"""
Tests for live case type classification.

Tests cover:
- Each case type on its own
- Sequential overwrite: the last condition that holds wins
- Pre-approval suppressing rejection
- Day boundary for no landing data
- Empty landing sets
"""
import pytest
from datetime import date, datetime, timezone

from catchcase.engine import CaseTypeClassifier, to_case_type_2
from catchcase.exceptions import EmptyLandingSetError
from catchcase.models import CaseTwoType

from tests.conftest import (
    HIGH,
    LOW,
    make_collaborators,
    make_elog_species_mismatch,
    make_landing,
    make_pending_landing,
)


def classify(landings, score=LOW, scores=None, now=None):
    collaborators = make_collaborators(score=score, scores=scores)
    now = now or datetime(2024, 3, 11, 12, 0, tzinfo=timezone.utc)
    return CaseTypeClassifier(collaborators).classify(landings, now)


# =============================================================================
# Single Conditions
# =============================================================================

class TestSingleConditions:
    """Tests for each condition in isolation."""

    def test_clean_landings_success(self):
        """Test landings passing every check are a success."""
        assert classify([make_landing(), make_landing()]) == CaseTwoType.SUCCESS

    def test_data_never_expected_high_risk(self):
        """Test a high-risk landing with no data ever expected."""
        landing = make_pending_landing(data_ever_expected=False)

        assert classify([landing], score=HIGH) == CaseTwoType.DATA_NEVER_EXPECTED

    def test_data_never_expected_low_risk_success(self):
        """Test data never expected only matters at high risk."""
        landing = make_pending_landing(data_ever_expected=False)

        assert classify([landing], score=LOW) == CaseTwoType.SUCCESS

    def test_pending_landing_data(self):
        """Test missing landing data within the window is pending."""
        landing = make_pending_landing(landing_data_expected_date=date(2024, 3, 12))

        assert classify([landing], score=HIGH) == CaseTwoType.PENDING_LANDING_DATA

    def test_pending_without_dates(self):
        """Test a landing with no expected or end date stays pending."""
        landing = make_pending_landing(
            landing_data_expected_date=None,
            landing_data_end_date=None,
        )

        assert classify([landing], score=HIGH) == CaseTwoType.PENDING_LANDING_DATA

    def test_elog_deminimis_in_retrospective_period_pending(self):
        """Test a tolerated ELOG mismatch is pending while data can still change."""
        landing = make_elog_species_mismatch(30)

        assert classify([landing]) == CaseTwoType.PENDING_LANDING_DATA

    def test_elog_deminimis_after_retrospective_period_success(self):
        """Test a tolerated ELOG mismatch settles once the window closes."""
        landing = make_elog_species_mismatch(30)
        after_window = datetime(2024, 3, 23, 0, 1, tzinfo=timezone.utc)

        assert classify([landing], now=after_window) == CaseTwoType.SUCCESS

    def test_overuse(self):
        """Test high-risk overuse across certificates."""
        landing = make_landing(is_overused_all_certs=True)

        assert classify([landing], score=HIGH) == CaseTwoType.REAL_TIME_VALIDATION_OVERUSE

    def test_overuse_low_risk_success(self):
        """Test low-risk overuse is not raised."""
        landing = make_landing(is_overused_all_certs=True)

        assert classify([landing], score=LOW) == CaseTwoType.SUCCESS

    def test_no_landing_data(self):
        """Test missing data after the window closed."""
        landing = make_pending_landing(landing_data_end_date=date(2024, 3, 9))

        assert classify([landing]) == CaseTwoType.REAL_TIME_VALIDATION_NO_LANDING_DATA

    def test_rejected(self):
        """Test a rejected landing rejects the document."""
        landing = make_landing(licence_holder=None)

        assert classify([landing]) == CaseTwoType.REAL_TIME_VALIDATION_REJECTED


# =============================================================================
# Overwrite Precedence
# =============================================================================

class TestOverwritePrecedence:
    """Tests that later conditions overwrite earlier ones."""

    def test_pending_overwrites_data_never_expected(self):
        """Test pending wins over data never expected."""
        landings = [
            make_pending_landing(species="COD", data_ever_expected=False),
            make_pending_landing(species="HAD", landing_data_expected_date=date(2024, 3, 12)),
        ]

        result = classify(landings, scores={"COD": HIGH}, score=LOW)

        assert result == CaseTwoType.PENDING_LANDING_DATA

    def test_overuse_overwrites_pending(self):
        """Test overuse wins over pending."""
        landings = [
            make_landing(species="COD", is_overused_all_certs=True),
            make_pending_landing(species="HAD", landing_data_expected_date=date(2024, 3, 12)),
        ]

        result = classify(landings, scores={"COD": HIGH}, score=LOW)

        assert result == CaseTwoType.REAL_TIME_VALIDATION_OVERUSE

    def test_no_landing_data_overwrites_overuse(self):
        """Test no landing data wins over overuse."""
        landings = [
            make_landing(species="COD", is_overused_all_certs=True),
            make_pending_landing(species="HAD", landing_data_end_date=date(2024, 3, 9)),
        ]

        result = classify(landings, scores={"COD": HIGH}, score=LOW)

        assert result == CaseTwoType.REAL_TIME_VALIDATION_NO_LANDING_DATA

    def test_rejected_overwrites_overuse(self):
        """Test rejection wins over overuse."""
        landings = [
            make_landing(species="COD", is_overused_all_certs=True),
            make_landing(species="HAD", licence_holder=None),
        ]

        result = classify(landings, score=HIGH)

        assert result == CaseTwoType.REAL_TIME_VALIDATION_REJECTED

    def test_rejected_overwrites_everything(self):
        """Test rejection wins when every condition holds."""
        landings = [
            make_pending_landing(species="NEP", data_ever_expected=False),
            make_pending_landing(species="HAD", landing_data_expected_date=date(2024, 3, 12)),
            make_landing(species="COD", is_overused_all_certs=True),
            make_pending_landing(species="PLE", landing_data_end_date=date(2024, 3, 9)),
            make_landing(species="SOL", licence_holder=None),
        ]

        result = classify(landings, scores={"NEP": HIGH, "COD": HIGH}, score=LOW)

        assert result == CaseTwoType.REAL_TIME_VALIDATION_REJECTED

    def test_rejected_and_no_landing_data_same_landing(self):
        """Test a high-risk landing missing due data is rejected, not no-landing-data."""
        landing = make_pending_landing(landing_data_end_date=date(2024, 3, 9))

        assert classify([landing], score=HIGH) == CaseTwoType.REAL_TIME_VALIDATION_REJECTED


# =============================================================================
# Pre-approval
# =============================================================================

class TestPreApproval:
    """Tests for pre-approved documents."""

    def test_pre_approved_rejectable_landings_success(self):
        """Test rejectable landings all pre-approved reduce to success."""
        landings = [
            make_landing(species="COD", licence_holder=None, is_pre_approved=True),
            make_landing(species="HAD", is_overused_this_cert=True, is_pre_approved=True),
        ]

        assert classify(landings, score=HIGH) == CaseTwoType.SUCCESS

    def test_one_pre_approved_landing_suppresses_rejection(self):
        """Test pre-approval anywhere on the document suppresses rejection."""
        landings = [
            make_landing(species="COD", licence_holder=None),
            make_landing(species="HAD", is_pre_approved=True),
        ]

        assert classify(landings) == CaseTwoType.SUCCESS

    def test_pre_approval_keeps_pending(self):
        """Test pre-approval does not hide pending landing data."""
        landings = [
            make_pending_landing(
                landing_data_expected_date=date(2024, 3, 9),
                is_pre_approved=True,
            ),
        ]

        assert classify(landings, score=HIGH) == CaseTwoType.PENDING_LANDING_DATA


# =============================================================================
# Day Boundary
# =============================================================================

class TestNoLandingDataDayBoundary:
    """Tests for the end-date day boundary at low risk."""

    def test_submitted_on_end_date_is_pending(self):
        """Test submission on the end date itself is still pending."""
        landing = make_pending_landing(landing_data_end_date=date(2024, 3, 10))

        assert classify([landing]) == CaseTwoType.PENDING_LANDING_DATA

    def test_submitted_day_after_end_date_is_no_landing_data(self):
        """Test submission the day after the end date."""
        landing = make_pending_landing(landing_data_end_date=date(2024, 3, 9))

        assert classify([landing]) == CaseTwoType.REAL_TIME_VALIDATION_NO_LANDING_DATA

    def test_late_in_the_day_still_same_day(self):
        """Test time of day does not matter."""
        landing = make_pending_landing(
            created_at=datetime(2024, 3, 10, 23, 59, tzinfo=timezone.utc),
            landing_data_end_date=date(2024, 3, 10),
        )

        assert classify([landing]) == CaseTwoType.PENDING_LANDING_DATA


# =============================================================================
# Contract
# =============================================================================

class TestContract:
    """Tests for input handling."""

    def test_empty_landings_raise(self):
        """Test classification needs at least one landing."""
        with pytest.raises(EmptyLandingSetError) as exc_info:
            classify([])

        assert exc_info.value.code == "CC_EMPTY_LANDING_SET"

    def test_generator_input(self, now, high_risk):
        """Test a one-shot iterable is seen by every condition."""
        landings = (landing for landing in [make_landing(), make_landing(licence_holder=None)])

        assert to_case_type_2(landings, high_risk, now) == CaseTwoType.REAL_TIME_VALIDATION_REJECTED

    def test_empty_generator_raises(self, now, low_risk):
        """Test an exhausted iterable counts as no landings."""
        with pytest.raises(EmptyLandingSetError):
            to_case_type_2(iter([]), low_risk, now)

    def test_module_function(self, now, low_risk):
        """Test to_case_type_2 convenience function."""
        assert to_case_type_2([make_landing()], low_risk, now) == CaseTwoType.SUCCESS

    def test_does_not_mutate_inputs(self, now, high_risk):
        """Test classification leaves landings untouched."""
        landings = [make_landing(licence_holder=None)]
        before = list(landings)

        to_case_type_2(landings, high_risk, now)

        assert landings == before
