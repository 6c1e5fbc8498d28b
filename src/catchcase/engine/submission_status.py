"""
catchcase Submission Status Aggregator

Reduces the (status, outcome, risk) triples recorded at submission into
the single status recorded against the case.

Two filters run before any status is looked at:
1. Outcome filter - if any landing was rejected, only rejected landings
   remain
2. Risk filter - if any remaining landing is high risk, only high-risk
   landings remain

A single rejected or high-risk landing therefore decides which landings
the worst case is taken from. Among the survivors the first matching
priority bucket wins.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from ..models import (
    CaseStatusAtSubmission,
    ElementaryStatus,
    LandingAssessment,
    LandingOutcome,
    RiskLevel,
)
from .tables import ensure_partition

logger = logging.getLogger(__name__)


# Checked in order; first bucket with a matching landing wins.
STATUS_PRIORITY: tuple[tuple[CaseStatusAtSubmission, frozenset[ElementaryStatus]], ...] = (
    (
        CaseStatusAtSubmission.VALIDATION_FAILURE_NO_LANDING_DATA,
        frozenset({ElementaryStatus.VALIDATION_FAILURE_NO_LANDING_DATA}),
    ),
    (
        CaseStatusAtSubmission.VALIDATION_FAILURE,
        frozenset({
            ElementaryStatus.VALIDATION_FAILURE_WEIGHT,
            ElementaryStatus.VALIDATION_FAILURE_OVERUSE,
            ElementaryStatus.VALIDATION_FAILURE_WEIGHT_AND_OVERUSE,
            ElementaryStatus.VALIDATION_FAILURE_SPECIES,
        }),
    ),
    (
        CaseStatusAtSubmission.PENDING_LANDING_DATA_DATA_EXPECTED,
        frozenset({
            ElementaryStatus.PENDING_LANDING_DATA_DATA_EXPECTED,
            ElementaryStatus.PENDING_LANDING_DATA_ELOG_SPECIES,
        }),
    ),
    (
        CaseStatusAtSubmission.PENDING_LANDING_DATA_DATA_NOT_YET_EXPECTED,
        frozenset({ElementaryStatus.PENDING_LANDING_DATA_DATA_NOT_YET_EXPECTED}),
    ),
    (
        CaseStatusAtSubmission.DATA_NEVER_EXPECTED,
        frozenset({ElementaryStatus.DATA_NEVER_EXPECTED}),
    ),
    (
        CaseStatusAtSubmission.VALIDATION_SUCCESS,
        frozenset({ElementaryStatus.VALIDATION_SUCCESS}),
    ),
)

ensure_partition((members for _, members in STATUS_PRIORITY), ElementaryStatus, "STATUS_PRIORITY")


def filter_by_outcome(assessments: Sequence[LandingAssessment]) -> list[LandingAssessment]:
    """Keep only rejected landings if there are any."""
    rejected = [a for a in assessments if a.outcome == LandingOutcome.REJECTED]
    return rejected if rejected else list(assessments)


def filter_by_risk(assessments: Sequence[LandingAssessment]) -> list[LandingAssessment]:
    """Keep only high-risk landings if there are any."""
    high = [a for a in assessments if a.risk == RiskLevel.HIGH]
    return high if high else list(assessments)


def reduce_by_priority(assessments: Iterable[LandingAssessment]) -> CaseStatusAtSubmission:
    statuses = {a.status for a in assessments}
    for case_status, members in STATUS_PRIORITY:
        if statuses & members:
            return case_status
    return CaseStatusAtSubmission.VALIDATION_SUCCESS


def to_case_status_at_submission(
    assessments: Iterable[LandingAssessment],
) -> CaseStatusAtSubmission:
    """
    Status recorded against the case at submission.

    Args:
        assessments: One triple per landing on the document

    Returns:
        The case status; VALIDATION_SUCCESS when there is nothing to reduce
    """
    working = filter_by_outcome(list(assessments))
    working = filter_by_risk(working)
    result = reduce_by_priority(working)
    logger.debug(f"Case status at submission {result.value} from {len(working)} landings")
    return result
