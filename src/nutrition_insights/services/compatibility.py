"""Compatibility score banding for scanned products."""

from nutrition_insights.domain.scanner import CompatibilityBand, ScanResult, ScanView

GOOD_THRESHOLD = 80
MODERATE_THRESHOLD = 60


def classify_compatibility(score: float) -> CompatibilityBand:
    """Map a score (nominally 0-100) to its band; out-of-range values are allowed."""
    if score >= GOOD_THRESHOLD:
        return CompatibilityBand.GOOD
    if score >= MODERATE_THRESHOLD:
        return CompatibilityBand.MODERATE
    return CompatibilityBand.POOR


def describe_scan(result: ScanResult) -> ScanView:
    """Build the scan card view-model for a successful scan."""
    band = classify_compatibility(result.analysis.compatibility_score)
    return ScanView(
        product=result.product,
        analysis=result.analysis,
        band=band,
        color=band.color,
    )
