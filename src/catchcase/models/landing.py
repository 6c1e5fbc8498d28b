"""
catchcase Landing Models

Input snapshots for classification.

Key components:
- LandingFact: One landing line on a catch certificate, as validated
  against the landing data available at the time of the query
- LandingAssessment: The (status, outcome, risk) triple recorded for a
  landing at submission, consumed by the case-level reducers
- CatchDocument: The document-level facts a case record needs

All models are frozen. A classification call never mutates its inputs;
re-evaluation produces a fresh record.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..exceptions import LandingContractError
from .enums import ElementaryStatus, LandingOutcome, LandingSource, RiskLevel


# =============================================================================
# Landing Fact
# =============================================================================

@dataclass(frozen=True)
class LandingFact:
    """
    A landing on an export document, joined with its landing evidence.

    Attributes:
        document_number: Document the landing is declared on
        species: FAO species code
        created_at: When the document was submitted
        date_landed: Date the catch was landed
        weight_on_cert: Live weight exported on this certificate (kg)
        raw_weight_on_cert: Weight as entered by the exporter (kg)
        weight_on_all_certs: Live weight claimed across all certificates (kg)
        weight_on_landing: Landed weight for the species (kg)
        is_landing_exists: Landing data has been received
        is_species_exists: The species appears on the landing
        is_overused_this_cert: This certificate alone exceeds the landing
        is_overused_all_certs: All certificates together exceed the landing
        over_used_info: Document numbers involved in the overuse
        data_ever_expected: None or True means landing data is expected
        unavailability_exceeds_14_days: Batch-computed 14-day flag
        is_legally_due: Externally computed legal time-limit flag
    """
    document_number: str
    species: str
    created_at: datetime
    date_landed: date

    # Identity
    rss_number: Optional[str] = None
    pln: Optional[str] = None
    vessel_name: Optional[str] = None
    landing_id: Optional[str] = None
    vessel_administration: Optional[str] = None
    commodity_code: Optional[str] = None
    exporter_account_id: Optional[str] = None
    exporter_contact_id: Optional[str] = None
    licence_holder: Optional[str] = None

    # Weights (kg)
    weight_on_cert: float = 0.0
    raw_weight_on_cert: float = 0.0
    weight_on_all_certs: float = 0.0
    weight_on_landing: float = 0.0

    # Landing evidence
    is_landing_exists: bool = False
    is_species_exists: bool = False
    is_overused_this_cert: bool = False
    is_overused_all_certs: bool = False
    over_used_info: tuple[str, ...] = field(default_factory=tuple)
    source: Optional[LandingSource] = None

    # Timing
    landing_data_expected_date: Optional[date] = None
    landing_data_end_date: Optional[date] = None
    first_date_time_landing_data_retrieved: Optional[datetime] = None
    data_ever_expected: Optional[bool] = None

    # Overrides
    vessel_overridden_by_admin: bool = False
    species_overridden_by_admin: bool = False
    is_pre_approved: bool = False

    # Externally computed
    unavailability_exceeds_14_days: bool = False
    is_legally_due: bool = False

    def __post_init__(self) -> None:
        if not self.document_number:
            raise LandingContractError(
                message="Landing is missing its document number",
                details={"landing_id": self.landing_id},
            )
        if not self.species:
            raise LandingContractError(
                message="Landing is missing its species code",
                document_number=self.document_number,
                details={"landing_id": self.landing_id},
            )
        # Accept any iterable of document numbers but store a tuple.
        if not isinstance(self.over_used_info, tuple):
            object.__setattr__(self, "over_used_info", tuple(self.over_used_info))

    @property
    def is_data_ever_expected(self) -> bool:
        """Absent and True both mean landing data is expected."""
        return self.data_ever_expected is not False

    @property
    def is_data_never_expected(self) -> bool:
        return self.data_ever_expected is False

    @property
    def is_elog(self) -> bool:
        return self.source == LandingSource.ELOG

    @property
    def has_licence_holder(self) -> bool:
        return bool(self.licence_holder)


# =============================================================================
# Landing Assessment
# =============================================================================

@dataclass(frozen=True)
class LandingAssessment:
    """
    What was recorded for one landing at submission time.

    The case-level status aggregator only ever sees these triples, never
    the underlying facts.
    """
    status: ElementaryStatus
    outcome: LandingOutcome
    risk: RiskLevel

    @property
    def is_rejected(self) -> bool:
        return self.outcome == LandingOutcome.REJECTED

    @property
    def is_high_risk(self) -> bool:
        return self.risk == RiskLevel.HIGH


# =============================================================================
# Catch Document
# =============================================================================

@dataclass(frozen=True)
class CatchDocument:
    """
    Document-level facts needed to assemble a case record.

    Exporter details beyond the postcode, URLs and transport are the
    concern of the payload builder and are not modelled here.
    """
    document_number: str
    created_at: datetime
    exporter_postcode: Optional[str] = None
    requested_by_admin: bool = False
    number_of_failed_attempts: int = 0
    cloned_from: Optional[str] = None
    landings_cloned: Optional[bool] = None
    parent_document_void: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "document_number": self.document_number,
            "created_at": self.created_at.isoformat(),
            "exporter_postcode": self.exporter_postcode,
            "requested_by_admin": self.requested_by_admin,
            "number_of_failed_attempts": self.number_of_failed_attempts,
        }
