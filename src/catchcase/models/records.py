"""
catchcase Output Records

Records emitted by the classification engine for assembly into whatever
case-record format a consumer requires.

Key components:
- LandingRecord: Per-landing compliance record at submission
- RetrospectiveLandingRecord: The same landing re-presented at a later
  check, with pending statuses collapsed
- CatchCertificateCase: Document-level case with summaries

Absent optional values serialize as missing keys, never as empty lists
or nulls, so consumers can distinguish "no data" from "empty".
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from .enums import (
    CaseOneType,
    CaseOutcomeAtSubmission,
    CaseStatusAtSubmission,
    CaseTwoType,
    ElementaryStatus,
    LandingOutcome,
    LandingSource,
    RetrospectiveStatus,
    RiskLevel,
)
from .landing import LandingAssessment


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, tuple):
        return [_serialize(v) for v in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return value


def _compact(data: dict[str, Any]) -> dict[str, Any]:
    """Serialize values and drop absent keys."""
    return {k: _serialize(v) for k, v in data.items() if v is not None}


# =============================================================================
# Landing Record
# =============================================================================

@dataclass(frozen=True)
class LandingValidation:
    """Weight figures and legal flags for a landing."""
    live_export_weight: float
    total_recorded_against_landing: float
    is_legally_due: bool
    total_live_for_export_species: Optional[float] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "live_export_weight": self.live_export_weight,
            "total_recorded_against_landing": self.total_recorded_against_landing,
            "total_live_for_export_species": self.total_live_for_export_species,
            "is_legally_due": self.is_legally_due,
        })


@dataclass(frozen=True)
class LandingRisk:
    """Risk facts captured for a landing at the time of evaluation."""
    landing_risk_score: float
    high_or_low_risk: RiskLevel
    is_species_risk_enabled: bool
    overuse_info: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "landing_risk_score": str(self.landing_risk_score),
            "high_or_low_risk": self.high_or_low_risk,
            "is_species_risk_enabled": self.is_species_risk_enabled,
            "overuse_info": self.overuse_info,
        })


@dataclass(frozen=True)
class LandingRecord:
    """
    Compliance record for one landing, captured at submission.

    Attributes:
        status: Elementary status from the landing-status taxonomy
        landing_outcome_at_submission: Rejection gate verdict
        is_14_day_limit_reached: After document-level overrides
        source: Only present when landing data exists
        landing_data_expected_at_submission: None when data is never expected
        is_late: None when data is never expected or not yet received
    """
    document_number: str
    status: ElementaryStatus
    landing_outcome_at_submission: LandingOutcome
    landing_date: date
    species: str
    is_14_day_limit_reached: bool
    data_ever_expected: bool
    vessel_overridden_by_admin: bool
    species_overridden_by_admin: bool
    weight: float
    validation: LandingValidation
    risking: LandingRisk
    id: Optional[str] = None
    vessel_name: Optional[str] = None
    vessel_pln: Optional[str] = None
    vessel_length: Optional[float] = None
    vessel_administration: Optional[str] = None
    licence_holder: Optional[str] = None
    cn_code: Optional[str] = None
    source: Optional[LandingSource] = None
    landing_data_expected_date: Optional[date] = None
    landing_data_end_date: Optional[date] = None
    landing_data_expected_at_submission: Optional[bool] = None
    is_late: Optional[bool] = None
    date_data_received: Optional[datetime] = None

    @property
    def assessment(self) -> LandingAssessment:
        """The triple the case-level reducers consume."""
        return LandingAssessment(
            status=self.status,
            outcome=self.landing_outcome_at_submission,
            risk=self.risking.high_or_low_risk,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return _compact({
            "id": self.id,
            "document_number": self.document_number,
            "status": self.status,
            "landing_outcome_at_submission": self.landing_outcome_at_submission,
            "landing_date": self.landing_date,
            "species": self.species,
            "cn_code": self.cn_code,
            "vessel_name": self.vessel_name,
            "vessel_pln": self.vessel_pln,
            "vessel_length": self.vessel_length,
            "vessel_administration": self.vessel_administration,
            "licence_holder": self.licence_holder,
            "source": self.source,
            "weight": self.weight,
            "is_14_day_limit_reached": self.is_14_day_limit_reached,
            "vessel_overridden_by_admin": self.vessel_overridden_by_admin,
            "species_overridden_by_admin": self.species_overridden_by_admin,
            "data_ever_expected": self.data_ever_expected,
            "landing_data_expected_date": self.landing_data_expected_date,
            "landing_data_end_date": self.landing_data_end_date,
            "landing_data_expected_at_submission": self.landing_data_expected_at_submission,
            "is_late": self.is_late,
            "date_data_received": self.date_data_received,
            "validation": self.validation,
            "risking": self.risking,
        })


@dataclass(frozen=True)
class RetrospectiveLandingRecord:
    """
    A landing re-presented after submission.

    The outcome at the retrospective check is re-evaluated against the
    current risk score and may differ from the outcome at submission.
    """
    document_number: str
    status: RetrospectiveStatus
    landing_outcome_at_retrospective_check: LandingOutcome
    is_14_day_limit_reached: bool
    risking: LandingRisk
    id: Optional[str] = None
    landing_outcome_at_submission: Optional[LandingOutcome] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return _compact({
            "id": self.id,
            "document_number": self.document_number,
            "status": self.status,
            "landing_outcome_at_submission": self.landing_outcome_at_submission,
            "landing_outcome_at_retrospective_check": self.landing_outcome_at_retrospective_check,
            "is_14_day_limit_reached": self.is_14_day_limit_reached,
            "risking": self.risking,
        })


# =============================================================================
# Catch Certificate Case
# =============================================================================

@dataclass(frozen=True)
class CatchCertificateCase:
    """
    Document-level case for a catch certificate.

    Landing-derived fields are None when the case was raised without
    landings (e.g. a voided document).
    """
    document_number: str
    case_type1: CaseOneType
    case_type2: CaseTwoType
    document_date: datetime
    requested_by_admin: bool
    number_of_failed_submissions: int
    failure_irrespective_of_risk: bool
    landings: Optional[tuple[LandingRecord, ...]] = None
    case_risk_at_submission: Optional[RiskLevel] = None
    case_status_at_submission: Optional[CaseStatusAtSubmission] = None
    case_outcome_at_submission: Optional[CaseOutcomeAtSubmission] = None
    is_unblocked: Optional[bool] = None
    vessel_overridden_by_admin: Optional[bool] = None
    species_overridden_by_admin: Optional[bool] = None
    da: Optional[str] = None
    cloned_from: Optional[str] = None
    landings_cloned: Optional[bool] = None
    parent_document_void: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return _compact({
            "document_number": self.document_number,
            "case_type1": self.case_type1,
            "case_type2": self.case_type2,
            "case_risk_at_submission": self.case_risk_at_submission,
            "case_status_at_submission": self.case_status_at_submission,
            "case_outcome_at_submission": self.case_outcome_at_submission,
            "document_date": self.document_date,
            "requested_by_admin": self.requested_by_admin,
            "number_of_failed_submissions": self.number_of_failed_submissions,
            "is_unblocked": self.is_unblocked,
            "vessel_overridden_by_admin": self.vessel_overridden_by_admin,
            "species_overridden_by_admin": self.species_overridden_by_admin,
            "failure_irrespective_of_risk": self.failure_irrespective_of_risk,
            "da": self.da,
            "cloned_from": self.cloned_from,
            "landings_cloned": self.landings_cloned,
            "parent_document_void": self.parent_document_void,
            "landings": self.landings,
        })
