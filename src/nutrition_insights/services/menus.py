"""Recommended menu browsing: filtering, card summaries and provider actions."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Protocol

from pydantic import ValidationError

from nutrition_insights.domain.menus import MenuAggregate, MenuCard
from nutrition_insights.services.macros import PROTEIN_KCAL_PER_G, round_half_up

SAMPLE_MEALS = 4

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllMenus:
    """Category filter that keeps every menu."""

    def matches(self, menu: MenuAggregate, now: datetime) -> bool:
        return True


@dataclass(frozen=True)
class RecentMenus:
    """Keeps menus created within the lookback window before ``now``."""

    window: timedelta = timedelta(days=7)

    def matches(self, menu: MenuAggregate, now: datetime) -> bool:
        if menu.created_at is None:
            return True
        return _as_utc(menu.created_at) >= _as_utc(now) - self.window


@dataclass(frozen=True)
class HighProteinMenus:
    """Keeps menus whose protein calories reach ``min_ratio`` of the total."""

    min_ratio: float = 0.25

    def matches(self, menu: MenuAggregate, now: datetime) -> bool:
        protein_kcal = (menu.total_protein or 0) * PROTEIN_KCAL_PER_G
        return protein_kcal / (menu.total_calories or 1) >= self.min_ratio


@dataclass(frozen=True)
class LowCalorieMenus:
    """Keeps menus averaging at most ``max_per_day`` calories per day."""

    max_per_day: float = 1800

    def matches(self, menu: MenuAggregate, now: datetime) -> bool:
        return menu.total_calories / (menu.days_count or 1) <= self.max_per_day


MenuCategoryFilter = AllMenus | RecentMenus | HighProteinMenus | LowCalorieMenus

CATEGORY_FILTERS: dict[str, MenuCategoryFilter] = {
    "all": AllMenus(),
    "recent": RecentMenus(),
    "high_protein": HighProteinMenus(),
    "low_calorie": LowCalorieMenus(),
}


def parse_category_filter(key: str) -> MenuCategoryFilter | None:
    """Return the category filter registered under ``key``, if any."""
    return CATEGORY_FILTERS.get(key.strip().lower())


@dataclass(frozen=True)
class FilterCriteria:
    """Search text and category selected in the menu browser."""

    search_text: str = ""
    category: MenuCategoryFilter = field(default_factory=AllMenus)


def filter_menus(
    menus: Iterable[MenuAggregate], criteria: FilterCriteria, now: datetime
) -> list[MenuAggregate]:
    """Return menus passing the text and category predicates, in input order."""
    return [menu for menu in menus if _matches(menu, criteria, now)]


def _matches(menu: MenuAggregate, criteria: FilterCriteria, now: datetime) -> bool:
    if criteria.search_text.strip() and not _matches_text(menu, criteria.search_text):
        return False
    return criteria.category.matches(menu, now)


def _matches_text(menu: MenuAggregate, search_text: str) -> bool:
    query = search_text.lower()
    fields = (menu.title, menu.description, menu.category)
    return any(value and query in value.lower() for value in fields)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def summarize_menu(menu: MenuAggregate) -> MenuCard:
    """Return per-day averages and sample meals for a menu card."""
    days = menu.days_count or 1
    return MenuCard(
        menu=menu,
        avg_calories_per_day=round_half_up(menu.total_calories / days),
        avg_protein_per_day=round_half_up((menu.total_protein or 0) / days),
        meal_count=menu.meal_count,
        sample_meals=menu.meals[:SAMPLE_MEALS],
    )


class MenuProvider(Protocol):
    """Remote service that stores and generates recommended menus."""

    async def list_menus(self) -> list[dict[str, object]]:
        """Return the user's recommended menus."""

    async def generate_menu(self, days: int, meals_per_day: str) -> dict[str, object]:
        """Generate a menu with default preferences."""

    async def generate_custom_menu(
        self,
        request: str,
        days: int,
        meals_per_day: str,
        budget: float | None,
    ) -> dict[str, object]:
        """Generate a menu from a free-text description."""

    async def start_menu(self, menu_id: str) -> dict[str, object]:
        """Mark a menu as started today."""


@dataclass
class MenuService:
    """Application service for the menu browser."""

    provider: MenuProvider
    default_days: int = 7
    default_meals_per_day: str = "3_main"

    async def list_menus(self) -> list[MenuAggregate]:
        """Fetch menus, skipping entries that fail validation."""
        menus: list[MenuAggregate] = []
        for raw in await self.provider.list_menus() or []:
            try:
                menus.append(MenuAggregate.model_validate(raw))
            except ValidationError:
                _logger.warning("Skipping malformed menu payload: %s", raw)
        return menus

    async def browse(self, criteria: FilterCriteria, now: datetime) -> list[MenuCard]:
        """Return filtered menu cards for the browser."""
        menus = await self.list_menus()
        filtered = filter_menus(menus, criteria, now)
        _logger.info("Menu browse: total=%s shown=%s", len(menus), len(filtered))
        return [summarize_menu(menu) for menu in filtered]

    async def generate_menu(self) -> dict[str, object]:
        """Ask the provider for a menu with default preferences."""
        return await self.provider.generate_menu(
            days=self.default_days, meals_per_day=self.default_meals_per_day
        )

    async def generate_custom_menu(
        self,
        request: str,
        days: int,
        meals_per_day: str | None = None,
        budget: float | None = None,
    ) -> dict[str, object]:
        """Ask the provider for a menu matching a free-text request."""
        return await self.provider.generate_custom_menu(
            request=request.strip(),
            days=days,
            meals_per_day=meals_per_day or self.default_meals_per_day,
            budget=budget,
        )

    async def start_menu(self, menu_id: str) -> dict[str, object]:
        """Start a menu from today."""
        return await self.provider.start_menu(menu_id)
