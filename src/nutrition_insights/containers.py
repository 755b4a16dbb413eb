"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_insights.adapters.menu_client import HttpxMenuClient
from nutrition_insights.adapters.scanner_client import HttpxScannerClient
from nutrition_insights.adapters.statistics_client import HttpxStatisticsClient
from nutrition_insights.config import Settings
from nutrition_insights.services.menus import MenuService
from nutrition_insights.services.scan_history import ScanHistorySnapshot
from nutrition_insights.services.scanner import ScannerService
from nutrition_insights.services.stats import StatisticsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    statistics_service: StatisticsService
    menu_service: MenuService
    scanner_service: ScannerService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    base_url = resolved_settings.api_base_url
    token = resolved_settings.api_token
    timeout = resolved_settings.request_timeout_seconds

    statistics_client = HttpxStatisticsClient.create(base_url, token, timeout)
    menu_client = HttpxMenuClient.create(base_url, token, timeout)
    scanner_client = HttpxScannerClient.create(base_url, token, timeout)

    scanner_service = ScannerService(
        provider=scanner_client,
        history=ScanHistorySnapshot(),
        window_size=resolved_settings.scan_history_window,
    )

    async def close_resources() -> None:
        await statistics_client.close()
        await menu_client.close()
        await scanner_client.close()

    return AppContainer(
        settings=resolved_settings,
        statistics_service=StatisticsService(statistics_client),
        menu_service=MenuService(menu_client),
        scanner_service=scanner_service,
        close_resources=close_resources,
    )
