"""Food scanner service: scan results, meal logging and history."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from nutrition_insights.domain.scanner import (
    MealTiming,
    ScanHistoryEntry,
    ScannedProduct,
    ScanResult,
    ScanView,
)
from nutrition_insights.errors import ProductNotFoundError, ProviderError
from nutrition_insights.services.compatibility import describe_scan
from nutrition_insights.services.scan_history import (
    DEFAULT_WINDOW,
    ScanHistorySnapshot,
    scan_history_window,
)

HTTP_NOT_FOUND = 404

_logger = logging.getLogger(__name__)


class ScanProvider(Protocol):
    """Remote service that recognizes products and keeps the scan log."""

    async def scan_barcode(self, barcode: str) -> dict[str, object] | None:
        """Resolve a barcode to a product and analysis."""

    async def scan_image(self, image_base64: str) -> dict[str, object] | None:
        """Resolve a label image to a product and analysis."""

    async def add_to_log(
        self, product: dict[str, object], quantity: float, meal_timing: str
    ) -> dict[str, object] | None:
        """Add a scanned product to the meal log."""

    async def list_history(self) -> list[dict[str, object]]:
        """Return previously scanned products, newest first."""


@dataclass
class ScannerService:
    """Application service for the scanner screen."""

    provider: ScanProvider
    history: ScanHistorySnapshot
    window_size: int = DEFAULT_WINDOW

    async def scan_barcode(self, barcode: str) -> ScanView:
        """Scan a barcode and return the result card."""
        return await self._scan(lambda: self.provider.scan_barcode(barcode.strip()))

    async def scan_image(self, image_base64: str) -> ScanView:
        """Scan a label image and return the result card."""
        return await self._scan(lambda: self.provider.scan_image(image_base64))

    async def add_to_log(
        self,
        product: ScannedProduct,
        quantity: float,
        meal_timing: MealTiming = MealTiming.SNACK,
    ) -> list[ScanHistoryEntry]:
        """Log a product, then refresh and return the history window."""
        await self.provider.add_to_log(
            product.model_dump(mode="json"), quantity, meal_timing.value
        )
        _logger.info(
            "Logged scanned product: name=%s quantity=%s timing=%s",
            product.name,
            quantity,
            meal_timing.value,
        )
        try:
            await self.refresh_history()
        except ProviderError:
            _logger.exception("Failed to refresh scan history after logging")
        return self.history_window()

    async def refresh_history(self) -> list[ScanHistoryEntry]:
        """Fetch the history and replace the snapshot."""
        raw = await self.provider.list_history()
        entries: list[ScanHistoryEntry] = []
        for item in raw or []:
            try:
                entries.append(ScanHistoryEntry.model_validate(item))
            except ValidationError:
                _logger.warning("Skipping malformed scan history entry: %s", item)
        self.history.replace(entries)
        return entries

    def history_window(self, n: int | None = None) -> list[ScanHistoryEntry]:
        """Return the summary window of the current snapshot."""
        return scan_history_window(self.history, self.window_size if n is None else n)

    async def _scan(
        self, call: Callable[[], Awaitable[dict[str, object] | None]]
    ) -> ScanView:
        try:
            raw = await call()
        except ProviderError as exc:
            if exc.status_code == HTTP_NOT_FOUND:
                raise ProductNotFoundError(str(exc), exc.status_code) from exc
            raise
        if not raw or not raw.get("product"):
            raise ProductNotFoundError("Product not found")
        return describe_scan(ScanResult.model_validate(raw))
