"""Tests for compatibility banding."""

import pytest

from nutrition_insights.domain.scanner import CompatibilityBand, ScanResult
from nutrition_insights.services.compatibility import (
    classify_compatibility,
    describe_scan,
)
from tests.conftest import scan_payload


@pytest.mark.parametrize(
    ("score", "band"),
    [
        (59, CompatibilityBand.POOR),
        (59.99, CompatibilityBand.POOR),
        (60, CompatibilityBand.MODERATE),
        (79, CompatibilityBand.MODERATE),
        (80, CompatibilityBand.GOOD),
        (100, CompatibilityBand.GOOD),
        (140, CompatibilityBand.GOOD),
        (-5, CompatibilityBand.POOR),
    ],
)
def test_classify_compatibility(score: float, band: CompatibilityBand) -> None:
    assert classify_compatibility(score) is band


def test_band_colors() -> None:
    assert CompatibilityBand.GOOD.color == "#10b981"
    assert CompatibilityBand.MODERATE.color == "#f59e0b"
    assert CompatibilityBand.POOR.color == "#ef4444"


def test_describe_scan_reads_user_analysis_key() -> None:
    result = ScanResult.model_validate(scan_payload(score=65))

    view = describe_scan(result)

    assert view.product.name == "Greek Yogurt"
    assert view.band is CompatibilityBand.MODERATE
    assert view.color == "#f59e0b"
