"""
Test helpers for catchcase tests.

Modules:
- collaborators: Risk scorers and a landing-status taxonomy for tests
"""
from .collaborators import (
    fixed_scorer,
    recording_scorer,
    scorer_by_species,
    simple_landing_status,
)

__all__ = [
    "fixed_scorer",
    "recording_scorer",
    "scorer_by_species",
    "simple_landing_status",
]
