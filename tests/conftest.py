"""
Pytest configuration and fixtures for catchcase tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from datetime import date, datetime, timezone

from catchcase.config import ClassificationSettings
from catchcase.engine import Collaborators
from catchcase.models import (
    CatchDocument,
    ElementaryStatus,
    LandingAssessment,
    LandingOutcome,
    LandingSource,
    RiskLevel,
    SdPsCatchFact,
)
from catchcase.models.landing import LandingFact

from tests.helpers import fixed_scorer, scorer_by_species, simple_landing_status


# Submission instant used across tests
SUBMITTED_AT = datetime(2024, 3, 10, 9, 30, tzinfo=timezone.utc)
LANDED_ON = date(2024, 3, 8)

HIGH = 2.0
LOW = 0.5


# =============================================================================
# Factory Helpers
# =============================================================================

def make_landing(
    document_number: str = "GBR-2024-CC-0001",
    species: str = "COD",
    **overrides,
) -> LandingFact:
    """
    Create a LandingFact that passes every check by default.

    The default landing has landing data from a landing declaration, the
    species is on the landing, nothing is overused and a licence holder
    is recorded.
    """
    values = dict(
        document_number=document_number,
        species=species,
        created_at=SUBMITTED_AT,
        date_landed=LANDED_ON,
        landing_id="LND-001",
        rss_number="C20514",
        pln="PZ1",
        vessel_name="CELTIC DAWN",
        vessel_administration="England",
        commodity_code="03025110",
        exporter_account_id="ACC-1",
        exporter_contact_id="CON-1",
        licence_holder="CELTIC FISHING LTD",
        weight_on_cert=100.0,
        raw_weight_on_cert=100.0,
        weight_on_all_certs=100.0,
        weight_on_landing=500.0,
        is_landing_exists=True,
        is_species_exists=True,
        source=LandingSource.LANDING_DECLARATION,
        landing_data_expected_date=date(2024, 3, 9),
        landing_data_end_date=date(2024, 3, 22),
        first_date_time_landing_data_retrieved=datetime(2024, 3, 9, 6, 0, tzinfo=timezone.utc),
        data_ever_expected=True,
    )
    values.update(overrides)
    return LandingFact(**values)


def make_pending_landing(**overrides) -> LandingFact:
    """Landing whose data has not arrived yet."""
    values = dict(
        is_landing_exists=False,
        is_species_exists=False,
        source=None,
        first_date_time_landing_data_retrieved=None,
    )
    values.update(overrides)
    return make_landing(**values)


def make_elog_species_mismatch(weight: float, **overrides) -> LandingFact:
    """ELOG landing whose species is not on the landing."""
    values = dict(
        source=LandingSource.ELOG,
        is_species_exists=False,
        weight_on_cert=weight,
        raw_weight_on_cert=weight,
    )
    values.update(overrides)
    return make_landing(**values)


def make_collaborators(
    score: float = LOW,
    scores: dict = None,
    settings: ClassificationSettings = None,
    **overrides,
) -> Collaborators:
    """
    Create Collaborators with a fixed or per-species risk score.

    The default threshold is 1.0, so HIGH and LOW sit either side of it.
    """
    scorer = overrides.pop("risk_scorer", None)
    if scorer is None:
        scorer = scorer_by_species(scores, default=score) if scores else fixed_scorer(score)
    return Collaborators(
        risk_scorer=scorer,
        landing_status=simple_landing_status,
        settings=settings or ClassificationSettings(),
        **overrides,
    )


def make_document(
    document_number: str = "GBR-2024-CC-0001",
    **overrides,
) -> CatchDocument:
    """Create a CatchDocument."""
    values = dict(
        document_number=document_number,
        created_at=SUBMITTED_AT,
        exporter_postcode="PL1 1AA",
        requested_by_admin=False,
        number_of_failed_attempts=0,
    )
    values.update(overrides)
    return CatchDocument(**values)


def make_assessment(
    status: ElementaryStatus = ElementaryStatus.VALIDATION_SUCCESS,
    outcome: LandingOutcome = LandingOutcome.SUCCESS,
    risk: RiskLevel = RiskLevel.LOW,
) -> LandingAssessment:
    """Create a LandingAssessment triple."""
    return LandingAssessment(status=status, outcome=outcome, risk=risk)


def make_sd_ps_catch(
    document_number: str = "GBR-2024-PS-0001",
    **overrides,
) -> SdPsCatchFact:
    """Create a processing statement catch line that validates."""
    values = dict(
        document_number=document_number,
        catch_certificate_number="GBR-2024-CC-0001",
        catch_certificate_type="uk",
        species="Atlantic cod (COD)",
        weight_on_fcc=200.0,
        weight_on_doc=100.0,
        weight_on_all_docs=150.0,
        id="GBR-2024-PS-0001-1",
        commodity_code="03044410",
        scientific_name="Gadus morhua",
        weight_after_processing=80.0,
    )
    values.update(overrides)
    return SdPsCatchFact(**values)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def now():
    """Evaluation instant one day after submission."""
    return datetime(2024, 3, 11, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def low_risk():
    """Collaborators scoring every landing low risk."""
    return make_collaborators(score=LOW)


@pytest.fixture
def high_risk():
    """Collaborators scoring every landing high risk."""
    return make_collaborators(score=HIGH)


@pytest.fixture
def clean_landing():
    """Landing that passes every check."""
    return make_landing()


@pytest.fixture
def document():
    """Catch certificate submitted at SUBMITTED_AT."""
    return make_document()
