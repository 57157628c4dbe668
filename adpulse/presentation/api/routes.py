"""
AdPulse – API Routes (FastAPI)
================================
Endpoints REST de analytics de revenue.

Endpoints disponibles:
  GET  /health                                → health check
  GET  /categories/{region_id}/{device_id}    → categorías de una región + dispositivo
  GET  /devices/{category_id}                 → dispositivos de una categoría
  POST /calculate-revenue                     → revenue = mau * multiplier
  GET  /regions                               → todas las regiones
  GET  /total-multiplier-by-region            → suma de multipliers por región
  GET  /categories-by-region                  → nombres de categorías por región
  GET  /revenue-by-category                   → revenue por fila (mau, platform)
  GET  /mau-required                          → MAU por fila (revenue, platform)
  GET  /top-regions-or-categories             → ranking de revenue (mau, dimension, platform)
  GET  /efficient-regions-or-platforms        → MAU requerido (revenue, dimension, platform)
  GET  /revenue-growth                        → curva por MAU (mau_ranges, dimension, platform)
  GET  /underperforming-regions-or-platforms  → revenue por MAU asc (category id, platform)

Cada handler es una frontera de error: DomainError → su status,
cualquier otra excepción → 500 genérico. Nada sale crudo al framework.
"""

from __future__ import annotations

from typing import Any, Awaitable, Optional

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import JSONResponse

from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService
from adpulse.domain.exceptions.domain_errors import DomainError
from adpulse.presentation.api.schemas import CalculateRevenueRequest, HealthResponse
from adpulse.shared.logging.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter()

INTERNAL_ERROR = {"error": "Internal server error"}


def get_analytics(request: Request) -> AnalyticsQueryService:
    """Dependency: caso de uso construido desde el container de la app."""
    return request.app.state.container.get_analytics_usecase()


def _serialize(result: Any) -> Any:
    if isinstance(result, list):
        return [item.to_dict() for item in result]
    return result.to_dict()


async def _run(pending: Awaitable[Any], context: str) -> JSONResponse:
    """
    Espera la operación y la renderiza a JSON dentro del mismo try.

    Un fallo al serializar también termina en {"error": ...}, no en el
    500 de texto plano de Starlette.
    """
    try:
        return JSONResponse(_serialize(await pending))
    except DomainError as exc:
        # los 5xx de dominio ya se loguearon donde se originan
        if exc.status_code < 500:
            logger.info("Request rechazado (%s): %s", context, exc.message)
        return JSONResponse(exc.to_dict(), status_code=exc.status_code)
    except Exception:
        logger.exception("Error %s", context)
        return JSONResponse(INTERNAL_ERROR, status_code=500)


# ─── Health ───────────────────────────────────────────────────────────

@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check para monitoreo."""
    settings = request.app.state.container.settings
    return HealthResponse(status="ok", service=settings.service_name)


# ─── Catálogo ─────────────────────────────────────────────────────────

@router.get("/categories/{region_id}/{device_id}")
async def categories_for_region_device(
    region_id: str,
    device_id: str,
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(
        service.categories_for_region_device(region_id, device_id), "fetching categories"
    )


@router.get("/devices/{category_id}")
async def devices_for_category(
    category_id: str,
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(service.devices_for_category(category_id), "fetching devices")


@router.get("/regions")
async def list_regions(service: AnalyticsQueryService = Depends(get_analytics)):
    return await _run(service.list_regions(), "fetching regions")


# ─── Revenue ──────────────────────────────────────────────────────────

@router.post("/calculate-revenue")
async def calculate_revenue(
    body: Optional[CalculateRevenueRequest] = Body(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    payload = body.model_dump() if body is not None else None
    return await _run(service.calculate_revenue(payload), "calculating revenue")


@router.get("/total-multiplier-by-region")
async def total_multiplier_by_region(service: AnalyticsQueryService = Depends(get_analytics)):
    return await _run(
        service.total_multiplier_by_region(), "fetching total multiplier by region"
    )


@router.get("/categories-by-region")
async def categories_by_region(service: AnalyticsQueryService = Depends(get_analytics)):
    return await _run(service.categories_by_region(), "fetching categories by region")


@router.get("/revenue-by-category")
async def revenue_by_category(
    mau: Optional[str] = Query(default=None),
    platform: Optional[str] = Query(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(service.revenue_by_category(mau, platform), "fetching revenue by category")


@router.get("/mau-required")
async def mau_required(
    revenue: Optional[str] = Query(default=None),
    platform: Optional[str] = Query(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(service.mau_required(revenue, platform), "fetching MAU required")


@router.get("/top-regions-or-categories")
async def top_regions_or_categories(
    mau: Optional[str] = Query(default=None),
    dimension: Optional[str] = Query(default=None, description="region | category"),
    platform: Optional[str] = Query(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(
        service.top_regions_or_categories(mau, dimension, platform),
        "fetching top regions or categories",
    )


@router.get("/efficient-regions-or-platforms")
async def efficient_regions_or_platforms(
    revenue: Optional[str] = Query(default=None),
    dimension: Optional[str] = Query(default=None, description="region | platform"),
    platform: Optional[str] = Query(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(
        service.efficient_regions_or_platforms(revenue, dimension, platform),
        "fetching efficient regions or platforms",
    )


@router.get("/revenue-growth")
async def revenue_growth(
    mau_ranges: Optional[str] = Query(default=None, description="CSV, e.g. 100,200,500"),
    dimension: Optional[str] = Query(default=None, description="region | category"),
    platform: Optional[str] = Query(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(
        service.revenue_growth(mau_ranges, dimension, platform), "comparing revenue growth"
    )


@router.get("/underperforming-regions-or-platforms")
async def underperforming_regions(
    category: Optional[str] = Query(
        default=None, description="Id numérico de la categoría (no el nombre), e.g. 1"
    ),
    platform: Optional[str] = Query(default=None),
    service: AnalyticsQueryService = Depends(get_analytics),
):
    return await _run(
        service.underperforming_regions(category, platform),
        "identifying underperforming regions or platforms",
    )
