"""Recommended menus API client."""

from dataclasses import dataclass

import httpx

from nutrition_insights.adapters.envelope import auth_headers, send
from nutrition_insights.services.menus import MenuProvider

GENERATION_TIMEOUT_SECONDS = 120


@dataclass
class HttpxMenuClient(MenuProvider):
    """HTTPX-backed menu provider."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, base_url: str, api_token: str | None, timeout: float = 15
    ) -> "HttpxMenuClient":
        """Create a menu client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(headers=auth_headers(api_token)),
            timeout=timeout,
        )

    async def list_menus(self) -> list[dict[str, object]]:
        """Fetch the user's recommended menus."""
        data = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/recommended-menus",
            timeout=self.timeout,
        )
        return data if isinstance(data, list) else []

    async def generate_menu(self, days: int, meals_per_day: str) -> dict[str, object]:
        """Generate a menu with default preferences."""
        return await self._generate(
            "generate",
            {
                "days": days,
                "mealsPerDay": meals_per_day,
                "mealChangeFrequency": "daily",
                "includeLeftovers": False,
                "sameMealTimes": True,
            },
        )

    async def generate_custom_menu(
        self,
        request: str,
        days: int,
        meals_per_day: str,
        budget: float | None,
    ) -> dict[str, object]:
        """Generate a menu from a free-text description."""
        payload: dict[str, object] = {
            "days": days,
            "mealsPerDay": meals_per_day,
            "customRequest": request,
            "mealChangeFrequency": "daily",
            "includeLeftovers": False,
            "sameMealTimes": True,
        }
        if budget is not None:
            payload["budget"] = budget
        return await self._generate("generate-custom", payload)

    async def start_menu(self, menu_id: str) -> dict[str, object]:
        """Mark a menu as started today."""
        data = await send(
            self.http_client,
            "POST",
            f"{self.base_url}/recommended-menus/{menu_id}/start-today",
            timeout=self.timeout,
        )
        return data if isinstance(data, dict) else {}

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _generate(
        self, action: str, payload: dict[str, object]
    ) -> dict[str, object]:
        data = await send(
            self.http_client,
            "POST",
            f"{self.base_url}/recommended-menus/{action}",
            json=payload,
            timeout=GENERATION_TIMEOUT_SECONDS,
        )
        return data if isinstance(data, dict) else {}
