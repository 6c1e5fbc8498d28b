"""
Case-level outcome and risk reducers.

Both are existential: one rejected landing rejects the case, one
high-risk landing makes the case high risk.
"""
from __future__ import annotations

from typing import Iterable

from ..models import (
    CaseOutcomeAtSubmission,
    ElementaryStatus,
    LandingAssessment,
    LandingOutcome,
    RiskLevel,
)

# Statuses that fail a landing whatever its risk.
FAILURES_IRRESPECTIVE_OF_RISK = frozenset({
    ElementaryStatus.VALIDATION_FAILURE_WEIGHT,
    ElementaryStatus.VALIDATION_FAILURE_SPECIES,
    ElementaryStatus.VALIDATION_FAILURE_NO_LANDING_DATA,
})


def to_case_outcome_at_submission(
    assessments: Iterable[LandingAssessment],
) -> CaseOutcomeAtSubmission:
    if any(a.outcome == LandingOutcome.REJECTED for a in assessments):
        return CaseOutcomeAtSubmission.REJECTED
    return CaseOutcomeAtSubmission.ISSUED


def to_case_risk(assessments: Iterable[LandingAssessment]) -> RiskLevel:
    if any(a.risk == RiskLevel.HIGH for a in assessments):
        return RiskLevel.HIGH
    return RiskLevel.LOW


def to_failure_irrespective_of_risk(statuses: Iterable[ElementaryStatus]) -> bool:
    return any(status in FAILURES_IRRESPECTIVE_OF_RISK for status in statuses)
