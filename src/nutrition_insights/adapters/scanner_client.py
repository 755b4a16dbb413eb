"""Food scanner API client."""

from dataclasses import dataclass

import httpx

from nutrition_insights.adapters.envelope import auth_headers, send
from nutrition_insights.services.scanner import ScanProvider


@dataclass
class HttpxScannerClient(ScanProvider):
    """HTTPX-backed scan provider."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 30

    @classmethod
    def create(
        cls, base_url: str, api_token: str | None, timeout: float = 30
    ) -> "HttpxScannerClient":
        """Create a scanner client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(headers=auth_headers(api_token)),
            timeout=timeout,
        )

    async def scan_barcode(self, barcode: str) -> dict[str, object] | None:
        """Resolve a barcode."""
        return await self._post("barcode", {"barcode": barcode})

    async def scan_image(self, image_base64: str) -> dict[str, object] | None:
        """Resolve a label image sent as base64."""
        return await self._post("image", {"imageBase64": image_base64})

    async def add_to_log(
        self, product: dict[str, object], quantity: float, meal_timing: str
    ) -> dict[str, object] | None:
        """Add a product to the meal log."""
        return await self._post(
            "add-to-log",
            {"productData": product, "quantity": quantity, "mealTiming": meal_timing},
        )

    async def list_history(self) -> list[dict[str, object]]:
        """Fetch previously scanned products."""
        data = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/food-scanner/history",
            timeout=self.timeout,
        )
        return data if isinstance(data, list) else []

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _post(
        self, action: str, payload: dict[str, object]
    ) -> dict[str, object] | None:
        data = await send(
            self.http_client,
            "POST",
            f"{self.base_url}/food-scanner/{action}",
            json=payload,
            timeout=self.timeout,
        )
        return data if isinstance(data, dict) else None
