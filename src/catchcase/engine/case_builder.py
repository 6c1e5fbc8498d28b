"""
catchcase Case Builder

Assembles the document-level case for a catch certificate.

The live case type, when given, comes from the document lifecycle (void
by exporter, void by admin, rejected on a later pass) and overrides the
computed one. It is propagated into every landing record so that the
14-day flag reflects the document's fate.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from ..exceptions import CaseTypeRequiredError
from ..models import (
    CaseOneType,
    CaseTwoType,
    CatchCertificateCase,
    CatchDocument,
    LandingFact,
)
from .case_type import CaseTypeClassifier
from .collaborators import Collaborators
from .landing_record import LandingRecordBuilder
from .reducers import (
    to_case_outcome_at_submission,
    to_case_risk,
    to_failure_irrespective_of_risk,
)
from .submission_status import to_case_status_at_submission

logger = logging.getLogger(__name__)


@dataclass
class CaseBuilder:
    """
    Builds catch certificate cases.

    Usage:
        builder = CaseBuilder(collaborators)
        case = builder.build(document, landings, now=now)

        # Voided document, no landings re-validated
        case = builder.build(
            document, [], now=now, live_case_type=CaseTwoType.VOID_BY_EXPORTER
        )
    """

    collaborators: Collaborators
    classifier: CaseTypeClassifier = field(init=False)
    records: LandingRecordBuilder = field(init=False)

    def __post_init__(self) -> None:
        self.classifier = CaseTypeClassifier(self.collaborators)
        self.records = LandingRecordBuilder(self.collaborators)

    def build(
        self,
        document: CatchDocument,
        landings: Sequence[LandingFact],
        *,
        now: datetime,
        live_case_type: Optional[CaseTwoType] = None,
    ) -> CatchCertificateCase:
        """
        Build the case for a document.

        Raises:
            CaseTypeRequiredError: No landings and no live case type
        """
        start = time.perf_counter()

        if not landings and live_case_type is None:
            raise CaseTypeRequiredError(
                message="A case without landings needs a live case type",
                document_number=document.document_number,
            )

        case_type = live_case_type or self.classifier.classify(landings, now)
        da = self.collaborators.da_lookup(document.exporter_postcode)

        common = dict(
            document_number=document.document_number,
            case_type1=CaseOneType.CATCH_CERTIFICATE,
            case_type2=case_type,
            document_date=document.created_at,
            requested_by_admin=document.requested_by_admin,
            number_of_failed_submissions=document.number_of_failed_attempts,
            da=da,
            cloned_from=document.cloned_from,
            landings_cloned=document.landings_cloned,
            parent_document_void=document.parent_document_void,
        )

        if not landings:
            case = CatchCertificateCase(failure_irrespective_of_risk=False, **common)
        else:
            records = self.records.build_landing_records(landings, now=now, case_type=case_type)
            assessments = [record.assessment for record in records]
            case = CatchCertificateCase(
                landings=records,
                case_risk_at_submission=to_case_risk(assessments),
                case_status_at_submission=to_case_status_at_submission(assessments),
                case_outcome_at_submission=to_case_outcome_at_submission(assessments),
                is_unblocked=any(landing.is_pre_approved for landing in landings),
                vessel_overridden_by_admin=any(landing.vessel_overridden_by_admin for landing in landings),
                species_overridden_by_admin=any(landing.species_overridden_by_admin for landing in landings),
                failure_irrespective_of_risk=to_failure_irrespective_of_risk(
                    record.status for record in records
                ),
                **common,
            )

        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"Built case {case.case_type2.value} with {len(landings)} landings",
            extra={
                "document_number": document.document_number,
                "case_type": case.case_type2.value,
                "duration_ms": round(duration_ms, 2),
            },
        )
        return case


def build_catch_certificate_case(
    document: CatchDocument,
    landings: Sequence[LandingFact],
    collaborators: Collaborators,
    *,
    now: datetime,
    live_case_type: Optional[CaseTwoType] = None,
) -> CatchCertificateCase:
    """Build the case for a catch certificate."""
    return CaseBuilder(collaborators).build(
        document, landings, now=now, live_case_type=live_case_type
    )
