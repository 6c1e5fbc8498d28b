"""
catchcase Storage Document / Processing Statement Models

Processing statements and storage documents re-export fish that was
landed under a (UK or foreign) catch certificate. Each line is validated
for a weight mismatch against that certificate and for over-allocation
across all documents using it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .enums import CaseOneType, SdPsCaseTwoType, SdPsStatus
from .records import _compact


@dataclass(frozen=True)
class SdPsCatchFact:
    """
    One catch (PS) or product (SD) line, joined with its certificate usage.

    Attributes:
        document_number: The PS/SD the line is on
        catch_certificate_number: Certificate the catch is drawn from
        catch_certificate_type: "uk" for UK-issued certificates
        species: Species as "Name (CODE)"
        weight_on_fcc: Weight on the foreign/UK catch certificate
        weight_on_doc: Weight used on this document
        weight_on_all_docs: Weight used across all documents
        is_mismatch: Weight on this document does not match the certificate
        is_over_allocated: Weight across all documents exceeds the certificate
    """
    document_number: str
    catch_certificate_number: str
    species: str
    weight_on_fcc: float
    weight_on_doc: float
    weight_on_all_docs: float
    id: Optional[str] = None
    catch_certificate_type: Optional[str] = None
    commodity_code: Optional[str] = None
    scientific_name: Optional[str] = None
    weight_after_processing: Optional[float] = None
    is_mismatch: bool = False
    is_over_allocated: bool = False
    over_allocated_by_weight: Optional[float] = None
    over_used_info: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class SdPsCatchRecord:
    """Validated catch/product line as presented to the case consumer."""
    foreign_catch_certificate_number: str
    is_document_issued_in_uk: bool
    status: SdPsStatus
    imported_weight: float
    used_weight: float
    total_used_weight: float
    species: Optional[str] = None
    id: Optional[str] = None
    cn_code: Optional[str] = None
    scientific_name: Optional[str] = None
    processed_weight: Optional[float] = None
    weight_exceeded_amount: Optional[float] = None
    overuse_info: Optional[tuple[str, ...]] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "foreign_catch_certificate_number": self.foreign_catch_certificate_number,
            "is_document_issued_in_uk": self.is_document_issued_in_uk,
            "species": self.species,
            "id": self.id,
            "cn_code": self.cn_code,
            "scientific_name": self.scientific_name,
            "imported_weight": self.imported_weight,
            "used_weight": self.used_weight,
            "processed_weight": self.processed_weight,
            "validation": {
                "status": self.status.value,
                "total_used_weight": self.total_used_weight,
                **_compact({
                    "weight_exceeded_amount": self.weight_exceeded_amount,
                    "overuse_info": self.overuse_info,
                }),
            },
        })


@dataclass(frozen=True)
class SdPsCase:
    """Document-level case for a processing statement or storage document."""
    document_number: str
    case_type1: CaseOneType
    case_type2: SdPsCaseTwoType
    catches: Optional[tuple[SdPsCatchRecord, ...]] = None
    da: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return _compact({
            "document_number": self.document_number,
            "case_type1": self.case_type1,
            "case_type2": self.case_type2,
            "da": self.da,
            "catches": self.catches,
        })
