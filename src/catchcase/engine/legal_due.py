"""
Legal time limit for landing data.

Whether the legal deadline for submitting landing data has passed for a
landing, by vessel size and the administration the vessel is registered
with. The result feeds LandingFact.is_legally_due.
"""
from __future__ import annotations

from typing import Optional

from ..models import DevolvedAuthority
from .temporal import DateLike, to_day

UNDER_10M = 10
OVER_12M = 12

TOLERANCE_IN_KG = 50

# Administrations where non-quota species from under-10m vessels fall due
# after a day.
_DAY_LIMIT_UNDER_10M = frozenset({
    DevolvedAuthority.ENGLAND.value,
    DevolvedAuthority.ISLE_OF_MAN.value,
    DevolvedAuthority.WALES.value,
})
_QUOTA_ALWAYS_DUE_UNDER_10M = frozenset({
    DevolvedAuthority.ENGLAND.value,
    DevolvedAuthority.ISLE_OF_MAN.value,
})


def days_between(landed: DateLike, applied: DateLike) -> int:
    return (to_day(applied) - to_day(landed)).days


def is_legally_due(
    vessel_length: Optional[float],
    da: Optional[str],
    application_date: DateLike,
    landed_date: DateLike,
    is_quota_species: bool,
    weight_on_cert: float,
) -> bool:
    """
    Legal time limit has passed for the landing.

    Args:
        vessel_length: Registered length in metres; unknown is never due
        da: Devolved administration name
        application_date: When the certificate was applied for
        landed_date: When the catch was landed
        is_quota_species: Species is subject to quota
        weight_on_cert: Live weight on the certificate (kg)
    """
    if vessel_length is None:
        return False

    if vessel_length < UNDER_10M:
        if da in _QUOTA_ALWAYS_DUE_UNDER_10M and is_quota_species:
            return True
        if da in _DAY_LIMIT_UNDER_10M:
            return days_between(landed_date, application_date) > 1
        return False

    if vessel_length > OVER_12M:
        return weight_on_cert > TOLERANCE_IN_KG

    return False
