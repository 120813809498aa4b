"""
Portfolio Backend — AQI Category Helpers
==========================================

What:  Maps a US EPA Air Quality Index value to its display band.
Who:   Used when an admin saves a station without a category and when
       AQICN readings are converted to the station shape.

Bands (upper bounds inclusive):
      0 –  50  Good
     51 – 100  Moderate
    101 – 150  Unhealthy for Sensitive Groups
    151 – 200  Unhealthy
    201 – 300  Very Unhealthy
    301 +      Hazardous
"""

from typing import Dict, List, Tuple

GOOD = "Good"
MODERATE = "Moderate"
UNHEALTHY_SENSITIVE = "Unhealthy for Sensitive Groups"
UNHEALTHY = "Unhealthy"
VERY_UNHEALTHY = "Very Unhealthy"
HAZARDOUS = "Hazardous"

AQI_BANDS: List[Tuple[int, str]] = [
    (50, GOOD),
    (100, MODERATE),
    (150, UNHEALTHY_SENSITIVE),
    (200, UNHEALTHY),
    (300, VERY_UNHEALTHY),
]

# Lowercase slugs used by older station records and the map filters
_SLUG_TO_CATEGORY: Dict[str, str] = {
    "good": GOOD,
    "moderate": MODERATE,
    "unhealthy-sensitive": UNHEALTHY_SENSITIVE,
    "unhealthy": UNHEALTHY,
    "very-unhealthy": VERY_UNHEALTHY,
    "hazardous": HAZARDOUS,
}


def aqi_category(aqi: int) -> str:
    """Return the display category for an AQI value."""
    for upper, category in AQI_BANDS:
        if aqi <= upper:
            return category
    return HAZARDOUS


def normalize_category(category: str) -> str:
    """
    Convert a lowercase slug ("unhealthy-sensitive") to its display name.

    Display names and unknown values are returned unchanged.
    """
    return _SLUG_TO_CATEGORY.get(category.strip().lower(), category)
