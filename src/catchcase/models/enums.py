"""
catchcase Enumerations

All enumeration types used throughout the classification engine.
Organized by domain area for clarity.

All enums inherit from (str, Enum) for JSON serialization compatibility.
The string values are the labels exchanged with downstream case-management
consumers and must not change.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Landing Provenance
# =============================================================================

class LandingSource(str, Enum):
    """Where the landing data for a catch came from."""
    LANDING_DECLARATION = "LANDING_DECLARATION"
    CATCH_RECORDING = "CATCH_RECORDING"
    ELOG = "ELOG"                      # Electronic logbook


# =============================================================================
# Per-Landing Status
# =============================================================================

class ElementaryStatus(str, Enum):
    """
    Elementary per-landing validation status.

    Produced by the external landing-status taxonomy and consumed by the
    submission-time reducers. Closed set: every reducer keyed on this enum
    is checked for exhaustiveness at import time.
    """
    VALIDATION_SUCCESS = "Validation Success"
    VALIDATION_FAILURE_WEIGHT = "Validation Failure - Weight"
    VALIDATION_FAILURE_SPECIES = "Validation Failure - Species"
    VALIDATION_FAILURE_OVERUSE = "Validation Failure - Overuse"
    VALIDATION_FAILURE_WEIGHT_AND_OVERUSE = "Validation Failure - Weight And Overuse"
    VALIDATION_FAILURE_NO_LANDING_DATA = "Validation Failure - No Landing Data"
    PENDING_LANDING_DATA_DATA_EXPECTED = "Pending Landing Data - Data Expected"
    PENDING_LANDING_DATA_DATA_NOT_YET_EXPECTED = "Pending Landing Data - Data Not Yet Expected"
    PENDING_LANDING_DATA_ELOG_SPECIES = "Pending Landing Data - Elog Species"
    DATA_NEVER_EXPECTED = "Data Never Expected"


class RetrospectiveStatus(str, Enum):
    """
    Landing status as presented after submission.

    Same labels as ElementaryStatus except that the three pending
    sub-statuses collapse into PENDING_LANDING_DATA.
    """
    VALIDATION_SUCCESS = "Validation Success"
    VALIDATION_FAILURE_WEIGHT = "Validation Failure - Weight"
    VALIDATION_FAILURE_SPECIES = "Validation Failure - Species"
    VALIDATION_FAILURE_OVERUSE = "Validation Failure - Overuse"
    VALIDATION_FAILURE_WEIGHT_AND_OVERUSE = "Validation Failure - Weight And Overuse"
    VALIDATION_FAILURE_NO_LANDING_DATA = "Validation Failure - No Landing Data"
    PENDING_LANDING_DATA = "Pending Landing Data"
    DATA_NEVER_EXPECTED = "Data Never Expected"


class LandingOutcome(str, Enum):
    """Per-landing verdict of the rejection gate."""
    SUCCESS = "Success"
    REJECTED = "Rejected"


class RiskLevel(str, Enum):
    """Risk band from thresholding the total risk score."""
    HIGH = "High"
    LOW = "Low"


# =============================================================================
# Document-Level Case Types
# =============================================================================

class CaseOneType(str, Enum):
    """Kind of export document a case was raised for."""
    CATCH_CERTIFICATE = "CC"
    PROCESSING_STATEMENT = "PS"
    STORAGE_DOCUMENT = "SD"


class CaseTwoType(str, Enum):
    """Real-time classification of a catch certificate."""
    REAL_TIME_VALIDATION_REJECTED = "Real Time Validation - Rejected"
    REAL_TIME_VALIDATION_NO_LANDING_DATA = "Real Time Validation - No Landing Data"
    REAL_TIME_VALIDATION_OVERUSE = "Real Time Validation - Overuse Failure"
    PENDING_LANDING_DATA = "Pending Landing Data"
    DATA_NEVER_EXPECTED = "Data Never Expected"
    SUCCESS = "Real Time Validation - Successful"
    VOID_BY_EXPORTER = "Void by an Exporter"
    VOID_BY_ADMIN = "Void by SMO/PMO"


class CaseStatusAtSubmission(str, Enum):
    """Worst-case landing status recorded against the case at submission."""
    VALIDATION_FAILURE_NO_LANDING_DATA = "No Landing Data Failure"
    VALIDATION_FAILURE = "Validation Failure"
    PENDING_LANDING_DATA_DATA_EXPECTED = "Pending Landing Data - Data Expected"
    PENDING_LANDING_DATA_DATA_NOT_YET_EXPECTED = "Pending Landing Data - Data Not Yet Expected"
    DATA_NEVER_EXPECTED = "Data Never Expected"
    VALIDATION_SUCCESS = "Validation Success"


class CaseOutcomeAtSubmission(str, Enum):
    """Whether the certificate was issued or rejected at submission."""
    ISSUED = "Issued"
    REJECTED = "Rejected"


# =============================================================================
# Processing Statements / Storage Documents
# =============================================================================

class SdPsCaseTwoType(str, Enum):
    """Real-time classification of a processing statement or storage document."""
    REAL_TIME_VALIDATION_SUCCESS = "Real Time Validation - Successful"
    REAL_TIME_VALIDATION_OVERUSE = "Real Time Validation - Overuse Failure"
    REAL_TIME_VALIDATION_WEIGHT = "Real Time Validation - Weight Failure"
    VOID_BY_EXPORTER = "Void by an Exporter"
    VOID_BY_ADMIN = "Void by SMO/PMO"


class SdPsStatus(str, Enum):
    """Validation status of a single processing statement / storage document catch."""
    SUCCESS = "Validation Success"
    OVERUSE = "Validation Failure - Overuse"
    WEIGHT = "Validation Failure - Weight"


# =============================================================================
# Devolved Administrations
# =============================================================================

class DevolvedAuthority(str, Enum):
    """Administrations a vessel or exporter postcode can belong to."""
    GUERNSEY = "Guernsey"
    JERSEY = "Jersey"
    NORTHERN_IRELAND = "Northern Ireland"
    SCOTLAND = "Scotland"
    ISLE_OF_MAN = "Isle of Man"
    WALES = "Wales"
    ENGLAND = "England"
