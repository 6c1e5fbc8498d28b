"""
catchcase - Export Document Case Classification

Classifies fishery export documents (catch certificates, processing
statements, storage documents) into case records for compliance review.

Each landing on a catch certificate is judged by a rejection gate, given
an elementary status and a risk level; the document is then classified
into a case type and summarised by status, outcome and risk at
submission.

Key Features:
- Pure, synchronous classification with an explicit "now"
- Injected risk scorer and landing-status taxonomy
- Document-level void/reject propagation into landing records
- Retrospective presentation with collapsed pending statuses
- Settings from YAML/JSON files or environment variables

Quick Start:
    from catchcase import (
        CaseBuilder, CatchDocument, Collaborators, LandingFact,
        load_settings,
    )

    collaborators = Collaborators(
        risk_scorer=risk_model.total_score,
        landing_status=taxonomy.to_landing_status,
        settings=load_settings("catchcase.yaml"),
    )
    case = CaseBuilder(collaborators).build(document, landings, now=now)

Version: 0.1.0
"""
from __future__ import annotations

__version__ = "0.1.0"

from .config import (
    ClassificationSettings,
    load_settings,
    load_settings_from_string,
    settings_from_env,
)
from .engine import (
    CaseBuilder,
    CaseTypeClassifier,
    Collaborators,
    LandingRecordBuilder,
    RejectionGate,
    TemporalOverrideLayer,
    build_catch_certificate_case,
    build_sd_ps_case,
    to_case_outcome_at_submission,
    to_case_risk,
    to_case_status_at_submission,
    to_case_type_2,
)
from .exceptions import (
    CaseTypeRequiredError,
    CatchCaseError,
    EmptyLandingSetError,
    LandingContractError,
    RuleTableError,
    SettingsLoadError,
    SettingsValidationError,
    SettingsVersionMismatch,
)
from .log import configure_logging
from .models import (
    CaseOneType,
    CaseOutcomeAtSubmission,
    CaseStatusAtSubmission,
    CaseTwoType,
    CatchCertificateCase,
    CatchDocument,
    ElementaryStatus,
    LandingAssessment,
    LandingFact,
    LandingOutcome,
    LandingRecord,
    LandingSource,
    RetrospectiveStatus,
    RiskLevel,
    SdPsCatchFact,
)

__all__ = [
    "__version__",
    # Config
    "ClassificationSettings",
    "load_settings",
    "load_settings_from_string",
    "settings_from_env",
    "configure_logging",
    # Engine
    "CaseBuilder",
    "CaseTypeClassifier",
    "Collaborators",
    "LandingRecordBuilder",
    "RejectionGate",
    "TemporalOverrideLayer",
    "build_catch_certificate_case",
    "build_sd_ps_case",
    "to_case_outcome_at_submission",
    "to_case_risk",
    "to_case_status_at_submission",
    "to_case_type_2",
    # Exceptions
    "CatchCaseError",
    "CaseTypeRequiredError",
    "EmptyLandingSetError",
    "LandingContractError",
    "RuleTableError",
    "SettingsLoadError",
    "SettingsValidationError",
    "SettingsVersionMismatch",
    # Models
    "CaseOneType",
    "CaseOutcomeAtSubmission",
    "CaseStatusAtSubmission",
    "CaseTwoType",
    "CatchCertificateCase",
    "CatchDocument",
    "ElementaryStatus",
    "LandingAssessment",
    "LandingFact",
    "LandingOutcome",
    "LandingRecord",
    "LandingSource",
    "RetrospectiveStatus",
    "RiskLevel",
    "SdPsCatchFact",
]
