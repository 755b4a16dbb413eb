"""Food scanner endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request
from fastapi.encoders import jsonable_encoder

from nutrition_insights.api.models import (
    AddToLogRequest,
    BarcodeScanRequest,
    ImageScanRequest,
)

if TYPE_CHECKING:
    from nutrition_insights.containers import AppContainer

router = APIRouter(prefix="/scanner", tags=["scanner"])


@router.post("/barcode")
async def scan_barcode(body: BarcodeScanRequest, request: Request) -> dict[str, object]:
    """Scan a barcode and return the result card."""
    container: AppContainer = request.app.state.container
    view = await container.scanner_service.scan_barcode(body.barcode)
    return jsonable_encoder(view, by_alias=False)


@router.post("/image")
async def scan_image(body: ImageScanRequest, request: Request) -> dict[str, object]:
    """Scan a label photo and return the result card."""
    container: AppContainer = request.app.state.container
    view = await container.scanner_service.scan_image(body.image_base64)
    return jsonable_encoder(view, by_alias=False)


@router.post("/log")
async def add_to_log(body: AddToLogRequest, request: Request) -> dict[str, object]:
    """Log a scanned product and return the refreshed history window."""
    container: AppContainer = request.app.state.container
    scanner = container.scanner_service
    items = await scanner.add_to_log(body.product, body.quantity, body.meal_timing)
    return {"count": len(scanner.history), "items": jsonable_encoder(items)}


@router.get("/history")
async def scan_history(
    request: Request,
    limit: int | None = Query(default=None, ge=0),
    refresh: bool = False,
) -> dict[str, object]:
    """Return the scan history window, optionally refetching it first."""
    container: AppContainer = request.app.state.container
    scanner = container.scanner_service
    if refresh:
        await scanner.refresh_history()
    items = scanner.history_window(limit)
    return {"count": len(scanner.history), "items": jsonable_encoder(items)}
