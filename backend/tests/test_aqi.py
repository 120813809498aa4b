"""
Portfolio Backend — AQI Category Tests
========================================
"""

import pytest

from portfolio.services.aqi import aqi_category, normalize_category


@pytest.mark.parametrize(
    "aqi,expected",
    [
        (0, "Good"),
        (50, "Good"),
        (51, "Moderate"),
        (100, "Moderate"),
        (101, "Unhealthy for Sensitive Groups"),
        (150, "Unhealthy for Sensitive Groups"),
        (151, "Unhealthy"),
        (200, "Unhealthy"),
        (201, "Very Unhealthy"),
        (300, "Very Unhealthy"),
        (301, "Hazardous"),
        (999, "Hazardous"),
    ],
)
def test_band_boundaries(aqi, expected):
    assert aqi_category(aqi) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("good", "Good"),
        ("unhealthy-sensitive", "Unhealthy for Sensitive Groups"),
        ("Very-Unhealthy", "Very Unhealthy"),
        ("Moderate", "Moderate"),
        ("Something Else", "Something Else"),
    ],
)
def test_normalize_category(raw, expected):
    assert normalize_category(raw) == expected
