"""
catchcase Engine

Classification services for export-document cases.

Services:
- Collaborators: Injected risk scorer, status taxonomy and rule predicates
- RejectionGate: Per-landing rejection verdict
- CaseTypeClassifier: Live case type by sequential overwrite
- TemporalOverrideLayer: 14-day flag, legal-due and status collapse
- LandingRecordBuilder: Per-landing records at submission and later
- CaseBuilder: Catch certificate case with submission summaries

Usage:
    from catchcase.engine import (
        Collaborators,
        CaseBuilder,
        to_case_type_2,
        to_case_status_at_submission,
    )
"""
from __future__ import annotations

from .case_builder import (
    CaseBuilder,
    build_catch_certificate_case,
)
from .case_type import (
    CaseTypeClassifier,
    to_case_type_2,
)
from .collaborators import (
    Collaborators,
    is_elog,
    is_species_failure,
    is_within_deminimus,
    postcode_da_lookup,
    threshold_is_high_risk,
)
from .landing_record import (
    LandingRecordBuilder,
    build_landing_record,
    build_retrospective_record,
    to_overuse_info,
)
from .legal_due import is_legally_due
from .reducers import (
    to_case_outcome_at_submission,
    to_case_risk,
    to_failure_irrespective_of_risk,
)
from .rejection_gate import (
    RejectionGate,
    is_rejected,
    landing_outcome,
)
from .storage_processing import (
    build_sd_ps_case,
    to_sd_ps_case_two_type,
    to_sd_ps_catch_record,
    to_sd_ps_status,
    to_species_code,
)
from .submission_status import to_case_status_at_submission
from .temporal import (
    TemporalOverrideLayer,
    collapse_status,
    has_14_day_limit_reached,
    is_created_after_end_date,
    is_in_retrospective_period,
    is_landing_data_expected_at_submission,
    is_landing_data_late,
)

__all__ = [
    # Collaborators
    "Collaborators",
    "is_elog",
    "is_species_failure",
    "is_within_deminimus",
    "postcode_da_lookup",
    "threshold_is_high_risk",
    # Rejection gate
    "RejectionGate",
    "is_rejected",
    "landing_outcome",
    # Case type
    "CaseTypeClassifier",
    "to_case_type_2",
    # Submission summaries
    "to_case_status_at_submission",
    "to_case_outcome_at_submission",
    "to_case_risk",
    "to_failure_irrespective_of_risk",
    # Temporal
    "TemporalOverrideLayer",
    "collapse_status",
    "has_14_day_limit_reached",
    "is_created_after_end_date",
    "is_in_retrospective_period",
    "is_landing_data_expected_at_submission",
    "is_landing_data_late",
    "is_legally_due",
    # Records
    "LandingRecordBuilder",
    "build_landing_record",
    "build_retrospective_record",
    "to_overuse_info",
    "CaseBuilder",
    "build_catch_certificate_case",
    # Storage documents / processing statements
    "build_sd_ps_case",
    "to_sd_ps_case_two_type",
    "to_sd_ps_catch_record",
    "to_sd_ps_status",
    "to_species_code",
]
