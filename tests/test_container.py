"""Tests for container wiring."""

import asyncio

from nutrition_insights.config import Settings
from nutrition_insights.containers import build_container


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert container.statistics_service is not None
    assert container.menu_service is not None
    assert container.scanner_service.window_size == settings.scan_history_window
    assert len(container.scanner_service.history) == 0
    asyncio.run(container.close_resources())


def test_clients_share_configured_base_url() -> None:
    settings = Settings(api_base_url="https://api.test/", scan_history_window=3)
    container = build_container(settings)

    assert container.statistics_service.provider.base_url == "https://api.test"
    assert container.scanner_service.window_size == 3
    asyncio.run(container.close_resources())
