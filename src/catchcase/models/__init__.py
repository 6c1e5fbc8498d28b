"""
catchcase Models

Enums, input snapshots and output records for the classification engine.
"""
from __future__ import annotations

from .enums import (
    CaseOneType,
    CaseOutcomeAtSubmission,
    CaseStatusAtSubmission,
    CaseTwoType,
    DevolvedAuthority,
    ElementaryStatus,
    LandingOutcome,
    LandingSource,
    RetrospectiveStatus,
    RiskLevel,
    SdPsCaseTwoType,
    SdPsStatus,
)
from .landing import (
    CatchDocument,
    LandingAssessment,
    LandingFact,
)
from .records import (
    CatchCertificateCase,
    LandingRecord,
    LandingRisk,
    LandingValidation,
    RetrospectiveLandingRecord,
)
from .storage import (
    SdPsCase,
    SdPsCatchFact,
    SdPsCatchRecord,
)

__all__ = [
    # Enums
    "CaseOneType",
    "CaseOutcomeAtSubmission",
    "CaseStatusAtSubmission",
    "CaseTwoType",
    "DevolvedAuthority",
    "ElementaryStatus",
    "LandingOutcome",
    "LandingSource",
    "RetrospectiveStatus",
    "RiskLevel",
    "SdPsCaseTwoType",
    "SdPsStatus",
    # Inputs
    "CatchDocument",
    "LandingAssessment",
    "LandingFact",
    "SdPsCatchFact",
    # Records
    "CatchCertificateCase",
    "LandingRecord",
    "LandingRisk",
    "LandingValidation",
    "RetrospectiveLandingRecord",
    "SdPsCase",
    "SdPsCatchRecord",
]
