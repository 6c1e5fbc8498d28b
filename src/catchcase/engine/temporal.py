"""
catchcase Temporal Override Layer

Time-window facts consumed by the rejection gate and the classifiers, and
the overrides applied when a landing is presented at submission or at a
later retrospective check.

Key features:
- Day-granularity comparisons (all instants are compared as UTC dates)
- 14-day unavailability limit with document-level void/reject propagation
- Legal-due override for admin-overridden vessels without a registration
- Retrospective collapse of the pending sub-statuses

"now" is always passed in; nothing here reads the clock.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import TYPE_CHECKING, Callable, Optional, Union

from ..models import (
    CaseTwoType,
    ElementaryStatus,
    LandingFact,
    RetrospectiveStatus,
)
from .tables import ensure_exhaustive

if TYPE_CHECKING:
    from .collaborators import Collaborators

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


# =============================================================================
# Day Granularity
# =============================================================================

def to_day(value: DateLike) -> date:
    """Reduce an instant to its UTC calendar day. Naive datetimes are UTC."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    return value


def is_landing_data_expected_at_submission(
    created_at: Optional[DateLike],
    expected_date: Optional[DateLike],
) -> bool:
    """
    Landing data was due on or before the day the document was submitted.

    An unknown expected date is not yet determinable and reads as not
    expected.
    """
    if created_at is None or expected_date is None:
        return False
    return to_day(created_at) >= to_day(expected_date)


def is_landing_data_late(
    first_retrieved_at: Optional[DateLike],
    expected_date: Optional[DateLike],
) -> Optional[bool]:
    """Landing data first arrived on a day after it was expected."""
    if first_retrieved_at is None or expected_date is None:
        return None
    return to_day(first_retrieved_at) > to_day(expected_date)


def is_in_retrospective_period(now: DateLike, landing: LandingFact) -> bool:
    """
    The landing can still receive data.

    Inclusive of the end date. Without an end date the window has not
    been set, which keeps the landing pending.
    """
    if landing.landing_data_end_date is None:
        return True
    return to_day(now) <= to_day(landing.landing_data_end_date)


def is_created_after_end_date(landing: LandingFact) -> bool:
    """
    The document was submitted on a day after the landing-data window closed.

    Strict: submission on the end date itself is still pending.
    """
    if landing.landing_data_end_date is None:
        return False
    return to_day(landing.created_at) > to_day(landing.landing_data_end_date)


def has_14_day_limit_reached(
    landing: LandingFact,
    is_data_never_expected: bool,
    now: DateLike,
    in_retrospective_period: Callable[[DateLike, LandingFact], bool] = is_in_retrospective_period,
) -> bool:
    """Per-landing 14-day predicate, before document-level overrides."""
    if is_data_never_expected or not in_retrospective_period(now, landing):
        return True
    return landing.is_landing_exists


# =============================================================================
# Override Tables
# =============================================================================

# Case types that force the 14-day limit on every landing of the document.
FORCES_14_DAY_LIMIT: dict[CaseTwoType, bool] = {
    CaseTwoType.REAL_TIME_VALIDATION_REJECTED: True,
    CaseTwoType.VOID_BY_ADMIN: True,
    CaseTwoType.VOID_BY_EXPORTER: True,
    CaseTwoType.REAL_TIME_VALIDATION_NO_LANDING_DATA: False,
    CaseTwoType.REAL_TIME_VALIDATION_OVERUSE: False,
    CaseTwoType.PENDING_LANDING_DATA: False,
    CaseTwoType.DATA_NEVER_EXPECTED: False,
    CaseTwoType.SUCCESS: False,
}

RETROSPECTIVE_STATUS: dict[ElementaryStatus, RetrospectiveStatus] = {
    ElementaryStatus.VALIDATION_SUCCESS: RetrospectiveStatus.VALIDATION_SUCCESS,
    ElementaryStatus.VALIDATION_FAILURE_WEIGHT: RetrospectiveStatus.VALIDATION_FAILURE_WEIGHT,
    ElementaryStatus.VALIDATION_FAILURE_SPECIES: RetrospectiveStatus.VALIDATION_FAILURE_SPECIES,
    ElementaryStatus.VALIDATION_FAILURE_OVERUSE: RetrospectiveStatus.VALIDATION_FAILURE_OVERUSE,
    ElementaryStatus.VALIDATION_FAILURE_WEIGHT_AND_OVERUSE: RetrospectiveStatus.VALIDATION_FAILURE_WEIGHT_AND_OVERUSE,
    ElementaryStatus.VALIDATION_FAILURE_NO_LANDING_DATA: RetrospectiveStatus.VALIDATION_FAILURE_NO_LANDING_DATA,
    ElementaryStatus.PENDING_LANDING_DATA_DATA_EXPECTED: RetrospectiveStatus.PENDING_LANDING_DATA,
    ElementaryStatus.PENDING_LANDING_DATA_DATA_NOT_YET_EXPECTED: RetrospectiveStatus.PENDING_LANDING_DATA,
    ElementaryStatus.PENDING_LANDING_DATA_ELOG_SPECIES: RetrospectiveStatus.PENDING_LANDING_DATA,
    ElementaryStatus.DATA_NEVER_EXPECTED: RetrospectiveStatus.DATA_NEVER_EXPECTED,
}

ensure_exhaustive(FORCES_14_DAY_LIMIT, CaseTwoType, "FORCES_14_DAY_LIMIT")
ensure_exhaustive(RETROSPECTIVE_STATUS, ElementaryStatus, "RETROSPECTIVE_STATUS")


def collapse_status(
    status: Union[ElementaryStatus, RetrospectiveStatus],
) -> RetrospectiveStatus:
    """
    Present a landing status outside its submission context.

    Pending sub-statuses collapse to PENDING_LANDING_DATA; everything else
    passes through. Collapsed statuses are returned unchanged.
    """
    if isinstance(status, RetrospectiveStatus):
        return status
    return RETROSPECTIVE_STATUS[status]


def legally_due_override(landing: LandingFact) -> bool:
    """No legal time limit applies to an admin-overridden vessel without an rss number."""
    if landing.vessel_overridden_by_admin and not landing.rss_number:
        return False
    return landing.is_legally_due


# =============================================================================
# Temporal Override Layer
# =============================================================================

@dataclass
class TemporalOverrideLayer:
    """
    Applies time-window overrides to a single landing.

    Usage:
        layer = TemporalOverrideLayer(collaborators)

        reached = layer.is_14_day_limit_reached(
            landing,
            case_type=CaseTwoType.VOID_BY_ADMIN,
            now=now,
        )
    """

    collaborators: Collaborators

    def is_14_day_limit_reached(
        self,
        landing: LandingFact,
        case_type: Optional[CaseTwoType],
        now: DateLike,
    ) -> bool:
        """
        14-day flag for a landing on a document of the given case type.

        Rejected and voided documents force the flag for every landing,
        whatever the landing's own facts. Otherwise the per-landing
        predicate decides, falling back to the batch-computed flag.
        """
        if case_type is not None and FORCES_14_DAY_LIMIT[case_type]:
            return True
        if has_14_day_limit_reached(
            landing,
            landing.is_data_never_expected,
            now,
            self.collaborators.in_retrospective_period,
        ):
            return True
        return landing.unavailability_exceeds_14_days

    def is_legally_due(self, landing: LandingFact) -> bool:
        return legally_due_override(landing)

    def collapse_status(
        self,
        status: Union[ElementaryStatus, RetrospectiveStatus],
    ) -> RetrospectiveStatus:
        return collapse_status(status)

    def landing_data_expected_at_submission(self, landing: LandingFact) -> Optional[bool]:
        """None when landing data is never expected."""
        if landing.is_data_never_expected:
            return None
        return self.collaborators.expected_at_submission(
            landing.created_at, landing.landing_data_expected_date
        )

    def is_late(self, landing: LandingFact) -> Optional[bool]:
        """None when landing data is never expected or has not arrived."""
        if landing.is_data_never_expected:
            return None
        return self.collaborators.landing_data_late(
            landing.first_date_time_landing_data_retrieved,
            landing.landing_data_expected_date,
        )
