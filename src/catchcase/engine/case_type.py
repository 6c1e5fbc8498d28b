"""
catchcase Case Type Classifier

Real-time classification of a catch certificate at the moment of
submission.

This is a sequential overwrite, not a first match: starting from SUCCESS,
five conditions are evaluated in a fixed order and each one that holds
replaces the result so far. The last condition that holds wins, giving
the effective precedence

    REJECTED > NO_LANDING_DATA > OVERUSE > PENDING_LANDING_DATA
             > DATA_NEVER_EXPECTED > SUCCESS

This precedence differs from the status-at-submission aggregator; the two
are independent procedures and can disagree on the same landings.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, Sequence

from ..exceptions import EmptyLandingSetError
from ..models import CaseTwoType, LandingFact
from .collaborators import Collaborators
from .rejection_gate import RejectionGate
from .temporal import is_created_after_end_date

logger = logging.getLogger(__name__)


@dataclass
class CaseTypeClassifier:
    """
    Computes the live case type for a document's landings.

    Usage:
        classifier = CaseTypeClassifier(collaborators)
        case_type = classifier.classify(landings, now=now)
    """

    collaborators: Collaborators
    gate: RejectionGate = field(init=False)

    def __post_init__(self) -> None:
        self.gate = RejectionGate(self.collaborators)

    # -------------------------------------------------------------------------
    # Conditions (in evaluation order)
    # -------------------------------------------------------------------------

    def is_data_never_expected(self, landing: LandingFact) -> bool:
        return landing.is_data_never_expected and self.collaborators.is_landing_high_risk(landing)

    def is_pending_landing_data(self, landing: LandingFact, now: datetime) -> bool:
        if landing.is_data_ever_expected and not landing.is_landing_exists:
            return True
        return (
            self.collaborators.is_elog_within_deminimus(landing)
            and self.collaborators.in_retrospective_period(now, landing)
        )

    def is_overuse_failure(self, landing: LandingFact) -> bool:
        return self.gate.is_overuse_failure(landing)

    def is_no_landing_data(self, landing: LandingFact) -> bool:
        return (
            not landing.is_landing_exists
            and landing.is_data_ever_expected
            and is_created_after_end_date(landing)
        )

    def is_rejected(self, landings: Sequence[LandingFact]) -> bool:
        if any(landing.is_pre_approved for landing in landings):
            return False
        return self.gate.any_rejected(landings)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def classify(self, landings: Iterable[LandingFact], now: datetime) -> CaseTwoType:
        """
        Classify a non-empty set of landings.

        Raises:
            EmptyLandingSetError: If no landings are given
        """
        landings = tuple(landings)
        if not landings:
            raise EmptyLandingSetError(
                message="Cannot classify a case type without landings",
            )

        def any_landing(predicate: Callable[[LandingFact], bool]) -> bool:
            return any(predicate(landing) for landing in landings)

        case_type = CaseTwoType.SUCCESS

        if any_landing(self.is_data_never_expected):
            case_type = CaseTwoType.DATA_NEVER_EXPECTED

        if any_landing(lambda landing: self.is_pending_landing_data(landing, now)):
            case_type = CaseTwoType.PENDING_LANDING_DATA

        if any_landing(self.is_overuse_failure):
            case_type = CaseTwoType.REAL_TIME_VALIDATION_OVERUSE

        if any_landing(self.is_no_landing_data):
            case_type = CaseTwoType.REAL_TIME_VALIDATION_NO_LANDING_DATA

        if self.is_rejected(landings):
            case_type = CaseTwoType.REAL_TIME_VALIDATION_REJECTED

        logger.debug(
            f"Case type {case_type.value} for {len(landings)} landings",
            extra={"document_number": landings[0].document_number, "case_type": case_type.value},
        )
        return case_type


def to_case_type_2(
    landings: Iterable[LandingFact],
    collaborators: Collaborators,
    now: datetime,
) -> CaseTwoType:
    """Live case type for a document's landings."""
    return CaseTypeClassifier(collaborators).classify(landings, now)
