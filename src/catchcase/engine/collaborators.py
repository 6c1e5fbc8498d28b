"""
catchcase Collaborators

The black-box contracts the classification engine depends on, bundled
into one injectable object.

Two collaborators have no default and must be supplied by the caller:
- risk_scorer: total risk score for (vessel pln, species, exporter account,
  exporter contact)
- landing_status: the elementary landing-status taxonomy

The remaining predicates have defaults implementing the day-granularity
and threshold rules, and can be replaced for testing or policy changes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from ..config import ClassificationSettings
from ..models import DevolvedAuthority, ElementaryStatus, LandingFact, RiskLevel
from .temporal import (
    is_in_retrospective_period,
    is_landing_data_expected_at_submission,
    is_landing_data_late,
)

RiskScorer = Callable[[Optional[str], str, Optional[str], Optional[str]], float]
LandingStatusDeriver = Callable[[LandingFact, bool], ElementaryStatus]
LandingPredicate = Callable[[LandingFact], bool]


# =============================================================================
# Default Rules
# =============================================================================

def threshold_is_high_risk(threshold: float) -> Callable[[float], bool]:
    """High risk is a score strictly above the threshold."""
    def is_high_risk(score: float) -> bool:
        return score > threshold
    return is_high_risk


def is_species_failure(
    is_high_risk: Callable[[float], bool],
) -> Callable[[bool, bool, float], bool]:
    """
    Species mismatch counts as a failure.

    With the species risk toggle on, only high-risk mismatches fail;
    with it off, every mismatch fails.
    """
    def species_failure(risk_enabled: bool, species_exists: bool, score: float) -> bool:
        if species_exists:
            return False
        return is_high_risk(score) if risk_enabled else True
    return species_failure


def is_within_deminimus(species_exists: bool, weight_on_cert_kg: float, threshold_kg: float) -> bool:
    """A species mismatch at or below the threshold weight is tolerated."""
    return not species_exists and weight_on_cert_kg <= threshold_kg


def is_elog(predicate: LandingPredicate) -> LandingPredicate:
    """Restrict a landing predicate to electronic-logbook landings."""
    def check(landing: LandingFact) -> bool:
        return landing.is_elog and predicate(landing)
    return check


def unknown_vessel_length(pln: Optional[str], date_landed: date) -> Optional[float]:
    return None


# Postcode areas outside England. The border areas SY and CH resolve to
# England and TD to Scotland.
POSTCODE_AREA_TO_DA: dict[str, str] = {
    **{area: DevolvedAuthority.SCOTLAND.value for area in (
        "AB", "DD", "DG", "EH", "FK", "G", "HS", "IV", "KA", "KW",
        "KY", "ML", "PA", "PH", "TD", "ZE",
    )},
    **{area: DevolvedAuthority.WALES.value for area in ("CF", "LD", "LL", "NP", "SA")},
    "BT": DevolvedAuthority.NORTHERN_IRELAND.value,
    "IM": DevolvedAuthority.ISLE_OF_MAN.value,
    "GY": DevolvedAuthority.GUERNSEY.value,
    "JE": DevolvedAuthority.JERSEY.value,
}


def postcode_da_lookup(
    table: Optional[dict[str, str]] = None,
) -> Callable[[Optional[str]], Optional[str]]:
    """
    Build a postcode → devolved administration lookup.

    The table maps postcode areas (the leading letters, e.g. "AB", "CF",
    "BT") to administration names and defaults to POSTCODE_AREA_TO_DA.
    Postcodes matching no area are England; a missing postcode has no
    administration.
    """
    table = POSTCODE_AREA_TO_DA if table is None else table
    areas = {k.upper(): v for k, v in table.items()}

    def lookup(postcode: Optional[str]) -> Optional[str]:
        if not postcode:
            return None
        compact = postcode.replace(" ", "").upper()
        area = ""
        for ch in compact:
            if not ch.isalpha():
                break
            area += ch
        return areas.get(area, DevolvedAuthority.ENGLAND.value)
    return lookup


# =============================================================================
# Collaborators
# =============================================================================

@dataclass
class Collaborators:
    """
    External contracts consumed by the rejection gate and classifiers.

    Usage:
        collaborators = Collaborators(
            risk_scorer=risk_model.total_score,
            landing_status=taxonomy.to_landing_status,
            settings=load_settings("catchcase.yaml"),
        )
    """

    risk_scorer: RiskScorer
    landing_status: LandingStatusDeriver
    settings: ClassificationSettings = field(default_factory=ClassificationSettings)

    # Overridable rules (None means use the default built from settings)
    high_risk: Optional[Callable[[float], bool]] = None
    species_failure: Optional[Callable[[bool, bool, float], bool]] = None
    within_deminimus: Callable[[bool, float, float], bool] = is_within_deminimus
    in_retrospective_period: Callable[..., bool] = is_in_retrospective_period
    expected_at_submission: Callable[..., bool] = is_landing_data_expected_at_submission
    landing_data_late: Callable[..., Optional[bool]] = is_landing_data_late
    vessel_length: Callable[[Optional[str], date], Optional[float]] = unknown_vessel_length
    da_lookup: Callable[[Optional[str]], Optional[str]] = field(
        default_factory=postcode_da_lookup
    )

    def __post_init__(self) -> None:
        if self.high_risk is None:
            self.high_risk = threshold_is_high_risk(self.settings.risk_threshold)
        if self.species_failure is None:
            self.species_failure = is_species_failure(self.high_risk)

    # -------------------------------------------------------------------------
    # Risk
    # -------------------------------------------------------------------------

    def risk_score(self, landing: LandingFact) -> float:
        """Total risk score for a landing under the current risk inputs."""
        return self.risk_scorer(
            landing.pln,
            landing.species,
            landing.exporter_account_id,
            landing.exporter_contact_id,
        )

    def is_high_risk(self, score: float) -> bool:
        return self.high_risk(score)

    def is_landing_high_risk(self, landing: LandingFact) -> bool:
        return self.is_high_risk(self.risk_score(landing))

    def risk_level(self, landing: LandingFact) -> RiskLevel:
        return RiskLevel.HIGH if self.is_landing_high_risk(landing) else RiskLevel.LOW

    def is_risk_enabled(self) -> bool:
        """Species risk toggle."""
        return self.settings.species_risk_enabled

    def is_species_failure(self, landing: LandingFact, score: float) -> bool:
        return self.species_failure(self.is_risk_enabled(), landing.is_species_exists, score)

    # -------------------------------------------------------------------------
    # Landing Predicates
    # -------------------------------------------------------------------------

    def is_within_deminimus(self, landing: LandingFact) -> bool:
        return self.within_deminimus(
            landing.is_species_exists,
            landing.weight_on_cert,
            self.settings.deminimis_threshold_kg,
        )

    def is_elog_within_deminimus(self, landing: LandingFact) -> bool:
        return is_elog(self.is_within_deminimus)(landing)

    def to_landing_status(self, landing: LandingFact) -> ElementaryStatus:
        """Elementary status at the landing's current risk."""
        return self.landing_status(landing, self.is_landing_high_risk(landing))
