"""Recommended menu endpoints."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder

from nutrition_insights.api.models import CustomMenuRequest
from nutrition_insights.services.menus import FilterCriteria, parse_category_filter

if TYPE_CHECKING:
    from nutrition_insights.containers import AppContainer

router = APIRouter(prefix="/menus", tags=["menus"])


@router.get("")
async def browse_menus(
    request: Request,
    search: str = "",
    filter_key: str = Query(default="all", alias="filter"),
) -> dict[str, object]:
    """Return menu cards matching the search text and category filter."""
    category = parse_category_filter(filter_key)
    if category is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown menu filter: {filter_key}",
        )
    container: AppContainer = request.app.state.container
    cards = await container.menu_service.browse(
        FilterCriteria(search_text=search, category=category),
        now=datetime.now(tz=UTC),
    )
    return {
        "count": len(cards),
        "meal_total": sum(card.meal_count for card in cards),
        "menus": jsonable_encoder(cards, by_alias=False),
    }


@router.post("/generate")
async def generate_menu(request: Request) -> dict[str, object]:
    """Generate a menu with default preferences."""
    container: AppContainer = request.app.state.container
    return {"menu": await container.menu_service.generate_menu()}


@router.post("/generate-custom")
async def generate_custom_menu(
    body: CustomMenuRequest, request: Request
) -> dict[str, object]:
    """Generate a menu from a free-text description."""
    container: AppContainer = request.app.state.container
    menu = await container.menu_service.generate_custom_menu(
        request=body.request,
        days=body.days,
        meals_per_day=body.meals_per_day,
        budget=body.budget,
    )
    return {"menu": menu}


@router.post("/{menu_id}/start-today")
async def start_menu(menu_id: str, request: Request) -> dict[str, object]:
    """Start a menu from today."""
    container: AppContainer = request.app.state.container
    return {"result": await container.menu_service.start_menu(menu_id)}
