"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, datetime
from zoneinfo import ZoneInfo

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from nutrition_insights.api.menus import router as menus_router
from nutrition_insights.api.scanner import router as scanner_router
from nutrition_insights.app_logging import configure_logging
from nutrition_insights.containers import AppContainer
from nutrition_insights.domain.ranges import RangeMode, RangeSelection
from nutrition_insights.errors import ProductNotFoundError, ProviderError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)
    timezone = ZoneInfo(container.settings.timezone)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            await app.state.container.scanner_service.refresh_history()
        except ProviderError:
            logger.exception("Failed to load scan history")
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(menus_router)
    app.include_router(scanner_router)

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found(
        request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(ProviderError)
    async def provider_failed(request: Request, exc: ProviderError) -> JSONResponse:
        logger.warning(
            "Provider request failed: path=%s status=%s error=%s",
            request.url.path,
            exc.status_code,
            exc,
        )
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/statistics")
    async def statistics(
        request: Request,
        range_mode: str = Query(default="week", alias="range"),
        start: str = "",
        end: str = "",
        locale: str | None = None,
    ) -> dict[str, object]:
        """Return the statistics dashboard for a range selection."""
        state_container: AppContainer = request.app.state.container
        selection = RangeSelection(mode=range_mode, custom_start=start, custom_end=end)
        if RangeMode.parse(selection.mode) is RangeMode.CUSTOM:
            _validate_custom_bounds(start, end)
        dashboard = await state_container.statistics_service.get_dashboard(
            selection,
            today=datetime.now(tz=timezone).date(),
            locale=locale or state_container.settings.default_locale,
        )
        return jsonable_encoder(dashboard, by_alias=False)

    return app


def _validate_custom_bounds(start: str, end: str) -> None:
    """Reject custom bounds that are not ISO dates or are inverted."""
    try:
        start_day = date.fromisoformat(start)
        end_day = date.fromisoformat(end)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Custom range bounds must be ISO dates (YYYY-MM-DD)",
        ) from exc
    if start_day > end_day:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Custom range start must not be after its end",
        )
