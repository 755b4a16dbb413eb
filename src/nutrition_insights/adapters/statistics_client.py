"""Statistics API client."""

from dataclasses import dataclass

import httpx

from nutrition_insights.adapters.envelope import auth_headers, send
from nutrition_insights.services.stats import StatisticsProvider


@dataclass
class HttpxStatisticsClient(StatisticsProvider):
    """HTTPX-backed statistics provider."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls, base_url: str, api_token: str | None, timeout: float = 15
    ) -> "HttpxStatisticsClient":
        """Create a statistics client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(headers=auth_headers(api_token)),
            timeout=timeout,
        )

    async def get_statistics(
        self, period: str, start: str, end: str
    ) -> dict[str, object] | None:
        """Fetch statistics for a period and date window."""
        data = await send(
            self.http_client,
            "GET",
            f"{self.base_url}/statistics",
            params={"period": period, "start_date": start, "end_date": end},
            timeout=self.timeout,
        )
        return data if isinstance(data, dict) else None

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
