"""
catchcase Rejection Gate

Decides whether a single landing is rejected at the point of evaluation.

A landing is rejected when it is not pre-approved and any check fails:
1. Weight check - species on the landing, this certificate overuses it,
   high risk
2. Species check - species failure outside the ELOG deminimis tolerance,
   landing data present
3. No landing data check - no landing, high risk, and data was due at
   submission (or the vessel was overridden by an admin)
4. Licence holder check - no licence holder on record

The verdict depends on the then-current risk score, so re-evaluating a
landing later may legitimately change it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..models import LandingFact, LandingOutcome
from .collaborators import Collaborators

logger = logging.getLogger(__name__)


@dataclass
class RejectionGate:
    """
    Per-landing rejection classifier.

    Usage:
        gate = RejectionGate(collaborators)

        if gate.is_rejected(landing):
            ...
        outcome = gate.landing_outcome(landing)
    """

    collaborators: Collaborators

    # -------------------------------------------------------------------------
    # Individual Checks
    # -------------------------------------------------------------------------

    def failed_weight_check(self, landing: LandingFact) -> bool:
        return (
            landing.is_species_exists
            and landing.is_overused_this_cert
            and self.collaborators.is_landing_high_risk(landing)
        )

    def failed_species_check(self, landing: LandingFact) -> bool:
        # The deminimis exemption only ever applies to ELOG landings.
        score = self.collaborators.risk_score(landing)
        return (
            self.collaborators.is_species_failure(landing, score)
            and not self.collaborators.is_elog_within_deminimus(landing)
            and landing.is_landing_exists
        )

    def failed_no_landing_data_check(self, landing: LandingFact) -> bool:
        if landing.is_landing_exists:
            return False
        if not self.collaborators.is_landing_high_risk(landing):
            return False
        expected = landing.is_data_ever_expected and self.collaborators.expected_at_submission(
            landing.created_at, landing.landing_data_expected_date
        )
        return expected or landing.vessel_overridden_by_admin

    def missing_licence_holder(self, landing: LandingFact) -> bool:
        return not landing.has_licence_holder

    def is_overuse_failure(self, landing: LandingFact) -> bool:
        """
        Overuse-only failure.

        The species and this certificate's weight pass, but the landing is
        overused across all certificates.
        """
        return (
            landing.is_species_exists
            and not landing.is_overused_this_cert
            and not landing.is_pre_approved
            and self.collaborators.is_landing_high_risk(landing)
            and landing.is_overused_all_certs
        )

    # -------------------------------------------------------------------------
    # Verdict
    # -------------------------------------------------------------------------

    def failed_checks(self, landing: LandingFact) -> list[str]:
        """Names of the failing checks, in evaluation order."""
        checks = [
            ("weight", self.failed_weight_check),
            ("species", self.failed_species_check),
            ("no_landing_data", self.failed_no_landing_data_check),
            ("licence_holder", self.missing_licence_holder),
        ]
        return [name for name, check in checks if check(landing)]

    def is_rejected(self, landing: LandingFact) -> bool:
        if landing.is_pre_approved:
            return False
        return (
            self.failed_weight_check(landing)
            or self.failed_species_check(landing)
            or self.failed_no_landing_data_check(landing)
            or self.missing_licence_holder(landing)
        )

    def landing_outcome(self, landing: LandingFact) -> LandingOutcome:
        rejected = self.is_rejected(landing)
        if rejected:
            logger.debug(
                f"Landing rejected: {self.failed_checks(landing)}",
                extra={"document_number": landing.document_number, "landing_id": landing.landing_id},
            )
        return LandingOutcome.REJECTED if rejected else LandingOutcome.SUCCESS

    def any_rejected(self, landings: Iterable[LandingFact]) -> bool:
        return any(self.is_rejected(landing) for landing in landings)


# =============================================================================
# Convenience Functions
# =============================================================================

def is_rejected(landing: LandingFact, collaborators: Collaborators) -> bool:
    """Check a single landing against the rejection gate."""
    return RejectionGate(collaborators).is_rejected(landing)


def landing_outcome(landing: LandingFact, collaborators: Collaborators) -> LandingOutcome:
    """Rejection gate verdict for a single landing."""
    return RejectionGate(collaborators).landing_outcome(landing)
