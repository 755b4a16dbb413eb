"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

import pytest

from nutrition_insights.config import Settings
from nutrition_insights.containers import AppContainer
from nutrition_insights.domain.menus import MenuAggregate
from nutrition_insights.domain.stats import DailyNutritionRecord
from nutrition_insights.errors import ProviderError
from nutrition_insights.services.menus import MenuProvider, MenuService
from nutrition_insights.services.scan_history import ScanHistorySnapshot
from nutrition_insights.services.scanner import ScannerService, ScanProvider
from nutrition_insights.services.stats import StatisticsProvider, StatisticsService

NOW = datetime(2026, 10, 16, 12, 0, tzinfo=UTC)


def make_menu(**overrides: object) -> MenuAggregate:
    """Build a menu with neutral defaults for filter tests."""
    values: dict[str, object] = {
        "id": "menu-1",
        "title": "Balanced Week",
        "description": None,
        "total_calories": 14000,
        "total_protein": 500,
        "days_count": 7,
        "category": None,
        "created_at": NOW,
    }
    values.update(overrides)
    return MenuAggregate(**values)


def make_records(
    calories: list[float | None], start: date
) -> list[DailyNutritionRecord]:
    """Build consecutive daily records starting at ``start``."""
    return [
        DailyNutritionRecord(day=start + timedelta(days=offset), calories=value)
        for offset, value in enumerate(calories)
    ]


def scan_payload(score: float = 85) -> dict[str, object]:
    return {
        "product": {
            "barcode": "7290000000001",
            "name": "Greek Yogurt",
            "brand": "Tara",
            "category": "Dairy",
            "nutrition_per_100g": {
                "calories": 60,
                "protein": 10,
                "carbs": 4,
                "fat": 0,
            },
            "ingredients": ["milk", "cultures"],
            "allergens": ["milk"],
            "labels": [],
        },
        "user_analysis": {
            "compatibility_score": score,
            "daily_contribution": {
                "calories_percent": 3,
                "protein_percent": 8,
                "carbs_percent": 1,
                "fat_percent": 0,
            },
            "alerts": [],
            "recommendations": ["Good protein source"],
            "health_assessment": "Fits your goals",
        },
    }


@dataclass
class FakeStatisticsProvider(StatisticsProvider):
    """Fake statistics provider returning a fixed payload."""

    payload: dict[str, object] | None = field(
        default_factory=lambda: {
            "average_calories_daily": 1950,
            "average_protein_daily": 100,
            "average_carbs_daily": 200,
            "average_fats_daily": 60,
            "average_fiber_daily": 25,
            "average_sugar_daily": None,
            "calorie_goal_achievement_percent": 86,
            "currentStreak": 4,
            "weeklyStreak": 1,
            "perfectDays": 2,
            "level": 3,
            "currentXP": 420,
            "insights": ["Protein intake is on target"],
            "dailyBreakdown": [
                {"date": "2026-10-14", "calories": 1900},
                {"date": "2026-10-15", "calories": None},
                {"date": "2026-10-16", "calories": 2000},
            ],
        }
    )
    calls: list[tuple[str, str, str]] = field(default_factory=list)

    async def get_statistics(
        self, period: str, start: str, end: str
    ) -> dict[str, object] | None:
        self.calls.append((period, start, end))
        return self.payload


@dataclass
class FakeMenuProvider(MenuProvider):
    """Fake menu provider with in-memory menus."""

    menus: list[dict[str, object]] = field(default_factory=list)
    generated: list[dict[str, object]] = field(default_factory=list)
    started: list[str] = field(default_factory=list)

    async def list_menus(self) -> list[dict[str, object]]:
        return self.menus

    async def generate_menu(self, days: int, meals_per_day: str) -> dict[str, object]:
        request = {"days": days, "meals_per_day": meals_per_day}
        self.generated.append(request)
        return {"menu_id": "generated-1"}

    async def generate_custom_menu(
        self,
        request: str,
        days: int,
        meals_per_day: str,
        budget: float | None,
    ) -> dict[str, object]:
        self.generated.append(
            {
                "request": request,
                "days": days,
                "meals_per_day": meals_per_day,
                "budget": budget,
            }
        )
        return {"menu_id": "custom-1"}

    async def start_menu(self, menu_id: str) -> dict[str, object]:
        self.started.append(menu_id)
        return {"menu_id": menu_id, "started": True}


@dataclass
class FakeScanProvider(ScanProvider):
    """Fake scan provider that records logged products."""

    result: dict[str, object] | None = field(default_factory=scan_payload)
    history: list[dict[str, object]] = field(default_factory=list)
    logged: list[tuple[dict[str, object], float, str]] = field(default_factory=list)
    error: ProviderError | None = None
    history_error: ProviderError | None = None

    async def scan_barcode(self, barcode: str) -> dict[str, object] | None:
        if self.error:
            raise self.error
        return self.result

    async def scan_image(self, image_base64: str) -> dict[str, object] | None:
        if self.error:
            raise self.error
        return self.result

    async def add_to_log(
        self, product: dict[str, object], quantity: float, meal_timing: str
    ) -> dict[str, object] | None:
        self.logged.append((product, quantity, meal_timing))
        self.history.insert(
            0, {"product_name": product["name"], "created_at": NOW.isoformat()}
        )
        return {"logged": True}

    async def list_history(self) -> list[dict[str, object]]:
        if self.history_error:
            raise self.history_error
        return list(self.history)


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url="https://api.test")


@pytest.fixture
def statistics_provider() -> FakeStatisticsProvider:
    return FakeStatisticsProvider()


@pytest.fixture
def menu_provider() -> FakeMenuProvider:
    return FakeMenuProvider()


@pytest.fixture
def scan_provider() -> FakeScanProvider:
    return FakeScanProvider()


@pytest.fixture
def container(
    settings: Settings,
    statistics_provider: FakeStatisticsProvider,
    menu_provider: FakeMenuProvider,
    scan_provider: FakeScanProvider,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        statistics_service=StatisticsService(statistics_provider),
        menu_service=MenuService(menu_provider),
        scanner_service=ScannerService(
            provider=scan_provider,
            history=ScanHistorySnapshot(),
            window_size=settings.scan_history_window,
        ),
        close_resources=close_resources,
    )
