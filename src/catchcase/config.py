"""
catchcase Settings

Classification settings: the risk threshold, the species-risk toggle and
the deminimis tolerance.

Settings can be loaded from a YAML or JSON settings file, or from the
environment:

    CATCHCASE_RISK_THRESHOLD       - score strictly above this is high risk
    CATCHCASE_SPECIES_RISK_ENABLED - "true"/"false"
    CATCHCASE_DEMINIMIS_KG         - ELOG species-mismatch tolerance
    CATCHCASE_LOG_LEVEL            - logging level name

Schema versioning:
- schema_version field tracks breaking changes
- Loaders reject files whose major version differs
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import SettingsLoadError, SettingsValidationError, SettingsVersionMismatch


SCHEMA_VERSION = "1.0.0"

DEMINIMIS_THRESHOLD_KG = 50.0

ENV_PREFIX = "CATCHCASE_"


class ClassificationSettings(BaseModel):
    """Tunable inputs to the classification rules."""
    schema_version: str = Field(SCHEMA_VERSION, description="Settings schema version")
    risk_threshold: float = Field(
        1.0, ge=0, description="Total risk score strictly above this is high risk"
    )
    species_risk_enabled: bool = Field(
        True, description="Gate species failures on risk (species risk toggle)"
    )
    deminimis_threshold_kg: float = Field(
        DEMINIMIS_THRESHOLD_KG, ge=0,
        description="ELOG species mismatches at or below this weight are tolerated",
    )
    log_level: str = Field("INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }


def check_schema_version(data: Mapping[str, Any]) -> bool:
    """Check that the major schema version matches."""
    file_version = str(data.get("schema_version", SCHEMA_VERSION))
    return file_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]


def validate_settings(data: Mapping[str, Any], path: str = "") -> ClassificationSettings:
    """
    Validate a settings dictionary.

    Raises:
        SettingsVersionMismatch: If the schema major version differs
        SettingsValidationError: If validation fails
    """
    if not check_schema_version(data):
        raise SettingsVersionMismatch(
            message=(
                f"Schema version mismatch: settings have "
                f"{data.get('schema_version')}, expected {SCHEMA_VERSION}"
            ),
            details={"settings_version": data.get("schema_version"), "path": path},
        )
    try:
        return ClassificationSettings.model_validate(dict(data))
    except ValidationError as e:
        raise SettingsValidationError(
            message=f"Settings validation failed: {e.error_count()} errors",
            details={"errors": e.errors(), "path": path},
        )


def _load_file(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def load_settings(path: Union[str, Path]) -> ClassificationSettings:
    """
    Load settings from a YAML or JSON file.

    Raises:
        SettingsLoadError: If the file cannot be read or parsed
        SettingsValidationError: If validation fails
    """
    path = Path(path)
    try:
        data = _load_file(path)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise SettingsLoadError(
            message=f"Failed to load settings: {e}",
            details={"path": str(path), "error": str(e)},
        )
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsLoadError(
            message="Settings file must contain a mapping",
            details={"path": str(path)},
        )
    return validate_settings(data, str(path))


def load_settings_from_string(content: str, format: str = "yaml") -> ClassificationSettings:
    """
    Load settings from a YAML or JSON string.

    Raises:
        SettingsLoadError: If the content cannot be parsed or is not a mapping
        SettingsValidationError: If validation fails
    """
    try:
        if format.lower() == "json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise SettingsLoadError(message=f"Failed to parse settings: {e}")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SettingsLoadError(
            message="Settings must contain a mapping",
            details={"type": type(data).__name__},
        )
    return validate_settings(data)


def settings_from_env(environ: Optional[Mapping[str, str]] = None) -> ClassificationSettings:
    """
    Build settings from CATCHCASE_* environment variables.

    Unset variables fall back to the model defaults.
    """
    environ = os.environ if environ is None else environ
    keys = {
        "RISK_THRESHOLD": "risk_threshold",
        "SPECIES_RISK_ENABLED": "species_risk_enabled",
        "DEMINIMIS_KG": "deminimis_threshold_kg",
        "LOG_LEVEL": "log_level",
    }
    data: dict[str, Any] = {}
    for suffix, name in keys.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is not None and value != "":
            data[name] = value
    return validate_settings(data, "environment")
