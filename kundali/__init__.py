"""Vedic birth chart (Kundali) computation core."""

from kundali.core.chart import (
    FALLBACK_KUNDALI,
    BirthDetails,
    Computed,
    Fallback,
    KundaliData,
    calculate_kundali,
    compute_kundali,
)
from kundali.errors import ComputationFailure, KundaliError, ValidationError
from kundali.predictive_astrology.insights import generate_astrological_response, generate_insight

__version__ = "0.1.0"

__all__ = [
    "FALLBACK_KUNDALI", "BirthDetails", "Computed", "Fallback", "KundaliData",
    "calculate_kundali", "compute_kundali",
    "ComputationFailure", "KundaliError", "ValidationError",
    "generate_astrological_response", "generate_insight",
]
