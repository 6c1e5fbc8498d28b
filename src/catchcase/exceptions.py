"""
catchcase Exception Hierarchy

Domain-specific exceptions for the classification engine.
All exceptions include error codes for tracking and logging.

The classification functions themselves are total over well-formed input;
these exceptions signal contract violations by the caller (malformed
landings, an empty landing set) and configuration problems.

Exception codes follow the pattern: CC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class CatchCaseError(Exception):
    """
    Base exception for all catchcase errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (CC_*)
        details: Additional context about the error
        document_number: Associated export document if applicable
    """
    message: str
    code: str = "CC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    document_number: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.document_number:
            parts.append(f"(document: {self.document_number})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.document_number:
            result["document_number"] = self.document_number
        return result


# =============================================================================
# Settings Errors
# =============================================================================

@dataclass
class SettingsLoadError(CatchCaseError):
    """Failed to read classification settings."""
    code: str = "CC_SETTINGS_LOAD_ERROR"


@dataclass
class SettingsValidationError(CatchCaseError):
    """Classification settings failed schema validation."""
    code: str = "CC_SETTINGS_VALIDATION_ERROR"


@dataclass
class SettingsVersionMismatch(CatchCaseError):
    """Settings file schema version is incompatible."""
    code: str = "CC_SETTINGS_VERSION_MISMATCH"


# =============================================================================
# Input Contract Errors
# =============================================================================

@dataclass
class LandingContractError(CatchCaseError):
    """Landing is missing a required identifying field."""
    code: str = "CC_LANDING_CONTRACT"


@dataclass
class EmptyLandingSetError(CatchCaseError):
    """A document-level classification was asked for with no landings."""
    code: str = "CC_EMPTY_LANDING_SET"


@dataclass
class CaseTypeRequiredError(CatchCaseError):
    """A case without landings needs an explicit live case type."""
    code: str = "CC_CASE_TYPE_REQUIRED"


# =============================================================================
# Rule Table Errors
# =============================================================================

@dataclass
class RuleTableError(CatchCaseError):
    """An enum-keyed rule table does not cover its enum exactly."""
    code: str = "CC_RULE_TABLE_INCOMPLETE"
