"""
catchcase Landing Record Builder

Assembles the per-landing compliance record from a landing fact, the
document's case type and the injected collaborators.

Two presentations are built:
- At submission: full record with the elementary status and the
  rejection gate verdict
- At a retrospective check: pending sub-statuses collapsed, outcome
  re-evaluated against the current risk score
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from ..models import (
    CaseTwoType,
    LandingFact,
    LandingOutcome,
    LandingRecord,
    LandingRisk,
    LandingSource,
    LandingValidation,
    RetrospectiveLandingRecord,
)
from .collaborators import Collaborators
from .rejection_gate import RejectionGate
from .temporal import TemporalOverrideLayer

logger = logging.getLogger(__name__)


def to_overuse_info(
    over_used_info: Iterable[str],
    document_number: str,
) -> Optional[tuple[str, ...]]:
    """
    Other documents involved in an overuse.

    The document itself is never listed. Returns None rather than an
    empty tuple when no other document remains.
    """
    others = tuple(d for d in over_used_info if d != document_number)
    return others or None


@dataclass
class LandingRecordBuilder:
    """
    Builds landing records for one evaluation.

    Usage:
        builder = LandingRecordBuilder(collaborators)
        record = builder.build_landing_record(
            landing,
            now=now,
            case_type=CaseTwoType.SUCCESS,
        )
    """

    collaborators: Collaborators
    gate: RejectionGate = field(init=False)
    temporal: TemporalOverrideLayer = field(init=False)

    def __post_init__(self) -> None:
        self.gate = RejectionGate(self.collaborators)
        self.temporal = TemporalOverrideLayer(self.collaborators)

    def build_risking(self, landing: LandingFact) -> LandingRisk:
        score = self.collaborators.risk_score(landing)
        return LandingRisk(
            landing_risk_score=score,
            high_or_low_risk=self.collaborators.risk_level(landing),
            is_species_risk_enabled=self.collaborators.is_risk_enabled(),
            overuse_info=to_overuse_info(landing.over_used_info, landing.document_number),
        )

    def build_validation(self, landing: LandingFact) -> LandingValidation:
        # Only a landing declaration carries a species-level live weight.
        live_for_species = None
        if landing.is_species_exists and landing.source == LandingSource.LANDING_DECLARATION:
            live_for_species = landing.weight_on_landing

        return LandingValidation(
            live_export_weight=landing.weight_on_cert,
            total_recorded_against_landing=landing.weight_on_all_certs,
            total_live_for_export_species=live_for_species,
            is_legally_due=self.temporal.is_legally_due(landing),
        )

    def build_landing_record(
        self,
        landing: LandingFact,
        *,
        now: datetime,
        case_type: Optional[CaseTwoType] = None,
    ) -> LandingRecord:
        """
        Record for a landing at submission.

        Args:
            landing: The landing fact
            now: Evaluation instant
            case_type: Case type of the document the landing is on; rejected
                and voided documents force the 14-day flag

        Returns:
            LandingRecord
        """
        record = LandingRecord(
            id=landing.landing_id,
            document_number=landing.document_number,
            status=self.collaborators.to_landing_status(landing),
            landing_outcome_at_submission=self.gate.landing_outcome(landing),
            landing_date=landing.date_landed,
            species=landing.species,
            cn_code=landing.commodity_code,
            is_14_day_limit_reached=self.temporal.is_14_day_limit_reached(landing, case_type, now),
            vessel_name=landing.vessel_name,
            vessel_pln=landing.pln,
            vessel_length=self.collaborators.vessel_length(landing.pln, landing.date_landed),
            vessel_administration=landing.vessel_administration,
            licence_holder=landing.licence_holder,
            source=landing.source if landing.is_landing_exists else None,
            weight=landing.raw_weight_on_cert,
            vessel_overridden_by_admin=landing.vessel_overridden_by_admin,
            species_overridden_by_admin=landing.species_overridden_by_admin,
            data_ever_expected=landing.is_data_ever_expected,
            landing_data_expected_date=landing.landing_data_expected_date,
            landing_data_end_date=landing.landing_data_end_date,
            landing_data_expected_at_submission=self.temporal.landing_data_expected_at_submission(landing),
            is_late=self.temporal.is_late(landing),
            date_data_received=landing.first_date_time_landing_data_retrieved,
            validation=self.build_validation(landing),
            risking=self.build_risking(landing),
        )
        logger.debug(
            f"Landing record {record.status.value} / {record.landing_outcome_at_submission.value}",
            extra={"document_number": landing.document_number, "landing_id": landing.landing_id},
        )
        return record

    def build_retrospective_record(
        self,
        landing: LandingFact,
        *,
        now: datetime,
        case_type: Optional[CaseTwoType] = None,
        outcome_at_submission: Optional[LandingOutcome] = None,
    ) -> RetrospectiveLandingRecord:
        """
        Record for a landing presented after submission.

        The outcome is re-evaluated now and may differ from
        outcome_at_submission if the risk inputs have changed since.
        """
        status = self.collaborators.to_landing_status(landing)
        return RetrospectiveLandingRecord(
            id=landing.landing_id,
            document_number=landing.document_number,
            status=self.temporal.collapse_status(status),
            landing_outcome_at_submission=outcome_at_submission,
            landing_outcome_at_retrospective_check=self.gate.landing_outcome(landing),
            is_14_day_limit_reached=self.temporal.is_14_day_limit_reached(landing, case_type, now),
            risking=self.build_risking(landing),
        )

    def build_landing_records(
        self,
        landings: Iterable[LandingFact],
        *,
        now: datetime,
        case_type: Optional[CaseTwoType] = None,
    ) -> tuple[LandingRecord, ...]:
        return tuple(
            self.build_landing_record(landing, now=now, case_type=case_type)
            for landing in landings
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def build_landing_record(
    landing: LandingFact,
    collaborators: Collaborators,
    *,
    now: datetime,
    case_type: Optional[CaseTwoType] = None,
) -> LandingRecord:
    """Build a single landing record at submission."""
    return LandingRecordBuilder(collaborators).build_landing_record(
        landing, now=now, case_type=case_type
    )


def build_retrospective_record(
    landing: LandingFact,
    collaborators: Collaborators,
    *,
    now: datetime,
    case_type: Optional[CaseTwoType] = None,
    outcome_at_submission: Optional[LandingOutcome] = None,
) -> RetrospectiveLandingRecord:
    """Build a single landing record for a retrospective check."""
    return LandingRecordBuilder(collaborators).build_retrospective_record(
        landing,
        now=now,
        case_type=case_type,
        outcome_at_submission=outcome_at_submission,
    )
