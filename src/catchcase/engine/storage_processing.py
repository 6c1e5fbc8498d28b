"""
catchcase Storage Document / Processing Statement Classifier

Validation outcome for documents that re-export catch already covered by
a catch certificate. Both per-catch status and case type are sequential
overwrites: a weight mismatch is replaced by an over-allocation.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from ..exceptions import CaseTypeRequiredError
from ..models import (
    CaseOneType,
    SdPsCase,
    SdPsCaseTwoType,
    SdPsCatchFact,
    SdPsCatchRecord,
    SdPsStatus,
)
from .landing_record import to_overuse_info

logger = logging.getLogger(__name__)

UK_CERTIFICATE_TYPE = "uk"

_SPECIES_WITH_CODE = re.compile(r"(.*) \((.*)\)")


def to_species_code(species_with_code: Optional[str]) -> Optional[str]:
    """
    Extract the species code from "Name (CODE)".

    >>> to_species_code("Atlantic cod (COD)")
    'COD'
    """
    if not species_with_code:
        return None
    match = _SPECIES_WITH_CODE.search(species_with_code)
    return match.group(2) if match else None


def to_sd_ps_status(catch: SdPsCatchFact) -> SdPsStatus:
    status = SdPsStatus.SUCCESS
    if catch.is_mismatch:
        status = SdPsStatus.WEIGHT
    if catch.is_over_allocated:
        status = SdPsStatus.OVERUSE
    return status


def to_sd_ps_case_two_type(catches: Sequence[SdPsCatchFact]) -> SdPsCaseTwoType:
    case_type = SdPsCaseTwoType.REAL_TIME_VALIDATION_SUCCESS
    if any(catch.is_mismatch for catch in catches):
        case_type = SdPsCaseTwoType.REAL_TIME_VALIDATION_WEIGHT
    if any(catch.is_over_allocated for catch in catches):
        case_type = SdPsCaseTwoType.REAL_TIME_VALIDATION_OVERUSE
    return case_type


def to_sd_ps_catch_record(catch: SdPsCatchFact) -> SdPsCatchRecord:
    return SdPsCatchRecord(
        foreign_catch_certificate_number=catch.catch_certificate_number,
        is_document_issued_in_uk=catch.catch_certificate_type == UK_CERTIFICATE_TYPE,
        species=to_species_code(catch.species),
        id=catch.id,
        cn_code=catch.commodity_code,
        scientific_name=catch.scientific_name,
        imported_weight=catch.weight_on_fcc,
        used_weight=catch.weight_on_doc,
        processed_weight=catch.weight_after_processing,
        status=to_sd_ps_status(catch),
        total_used_weight=catch.weight_on_all_docs,
        weight_exceeded_amount=catch.over_allocated_by_weight,
        overuse_info=to_overuse_info(catch.over_used_info, catch.document_number),
    )


def build_sd_ps_case(
    document_number: str,
    case_type1: CaseOneType,
    catches: Optional[Sequence[SdPsCatchFact]],
    *,
    da: Optional[str] = None,
    live_case_type: Optional[SdPsCaseTwoType] = None,
) -> SdPsCase:
    """
    Build the case for a processing statement or storage document.

    Args:
        document_number: The document
        case_type1: PROCESSING_STATEMENT or STORAGE_DOCUMENT
        catches: Validated catch lines; None for a voided document
        da: Devolved administration of the exporter
        live_case_type: Overrides the computed case type

    Raises:
        CaseTypeRequiredError: No catches and no live case type
        ValueError: case_type1 is a catch certificate
    """
    if case_type1 == CaseOneType.CATCH_CERTIFICATE:
        raise ValueError("Catch certificates are built with build_catch_certificate_case")

    if catches is None and live_case_type is None:
        raise CaseTypeRequiredError(
            message="A case without catches needs a live case type",
            document_number=document_number,
        )

    case_type2 = live_case_type or to_sd_ps_case_two_type(catches or [])
    records = tuple(to_sd_ps_catch_record(c) for c in catches) if catches is not None else None

    logger.debug(
        f"{case_type1.value} case {case_type2.value}",
        extra={"document_number": document_number, "case_type": case_type2.value},
    )
    return SdPsCase(
        document_number=document_number,
        case_type1=case_type1,
        case_type2=case_type2,
        catches=records,
        da=da,
    )
