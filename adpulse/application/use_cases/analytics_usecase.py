"""
Analytics Query Use Case.

Caso de uso que responde las consultas de revenue sobre el dataset
de monetización: traduce parámetros del request a lecturas filtradas,
cruza los resultados en memoria y aplica la aritmética.

FLUJO DE CADA OPERACIÓN:
  1. Validar inputs (ValidationError → 400, sin tocar el datastore)
  2. Leer del IDataReader, una lectura a la vez
  3. Join / agregación en memoria
  4. Devolver DTOs (la API los serializa)

Cualquier lectura fallida aborta la operación completa: no hay
resultados parciales ni reintentos.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Iterable, List, Mapping, Optional, TypeVar

from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.exceptions.domain_errors import (
    NotFoundError,
    UpstreamError,
    DuplicateMultiplierError,
)
from adpulse.domain.repositories.data_reader import IDataReader
from adpulse.domain.services.revenue_calculator import RevenueCalculator
from adpulse.domain.value_objects.dimension import (
    Dimension,
    GROUPING_DIMENSIONS,
    EFFICIENCY_DIMENSIONS,
)
from adpulse.domain.value_objects.buckets import RevenueBucket, make_bucket
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter
from adpulse.application.dto.analytics_dto import (
    RevenueDTO,
    TotalMultiplierDTO,
    RegionCategoriesDTO,
    RevenueRowDTO,
    MauRequiredRowDTO,
    MauRequirementDTO,
    GrowthPointDTO,
    RevenuePerMauDTO,
)
from adpulse.application.use_cases.input_parsing import (
    MISSING_FIELDS,
    MISSING_PARAMS,
    require,
    parse_id,
    parse_number,
    parse_number_list,
    parse_platform,
    parse_dimension,
)
from adpulse.shared.logging.logger import get_logger

logger = get_logger("usecase.analytics")

T = TypeVar("T")
R = TypeVar("R")


def _distinct(ids: Iterable[int]) -> List[int]:
    """Ids únicos preservando el orden de primera aparición."""
    return list(dict.fromkeys(ids))


class AnalyticsQueryService:
    """
    Caso de uso: consultas de analytics de revenue.

    Stateless: no guarda nada entre requests. La única dependencia
    es el IDataReader inyectado desde el container.
    """

    def __init__(
        self,
        data_reader: IDataReader,
        calculator: Optional[RevenueCalculator] = None,
    ):
        self._reader = data_reader
        self._calc = calculator or RevenueCalculator()

    # ════════════════════════════════════════════════════════════════
    #  LECTURAS
    # ════════════════════════════════════════════════════════════════

    async def _read(self, pending: Awaitable[T], message: str) -> T:
        """
        Espera una lectura y normaliza su fallo.

        El error original solo se loguea; el cliente recibe message.
        """
        try:
            return await pending
        except UpstreamError as exc:
            cause = exc.cause or exc
            logger.error("%s: %s", message, cause)
            raise UpstreamError(message, cause=cause) from exc

    async def _fetch_related(
        self,
        rows: Iterable[AdMultiplier],
        id_of: Callable[[AdMultiplier], int],
        fetch: Callable[[List[int]], Awaitable[List[R]]],
        message: str,
    ) -> List[R]:
        """Segundo paso del join: filas de la tabla relacionada cuyo id aparece en rows."""
        ids = _distinct(id_of(row) for row in rows)
        return await self._read(fetch(ids), message)

    async def _join_by_ids(
        self,
        criteria: MultiplierFilter,
        id_of: Callable[[AdMultiplier], int],
        fetch: Callable[[List[int]], Awaitable[List[R]]],
        message: str,
    ) -> List[R]:
        """
        Join en dos pasos: multipliers filtrados → ids foráneos → tabla relacionada.

        El cruce es por pertenencia de id, no un JOIN en la base.
        """
        rows = await self._read(self._reader.find_multipliers(criteria), message)
        return await self._fetch_related(rows, id_of, fetch, message)

    async def _platform_rows(self, platform: str, message: str) -> List[AdMultiplier]:
        return await self._read(
            self._reader.find_multipliers(MultiplierFilter(platform=platform)),
            message,
        )

    def _required_mau(self, revenue: float, row: AdMultiplier) -> Optional[float]:
        mau = self._calc.required_mau(revenue, row.multiplier)
        if mau is None:
            logger.warning(
                "MAU requerido indefinido (multiplier=%s) en region=%s category=%s device=%s platform=%s",
                row.multiplier, row.region_id, row.category_id, row.device_id, row.platform,
            )
        return mau

    # ════════════════════════════════════════════════════════════════
    #  CATÁLOGO
    # ════════════════════════════════════════════════════════════════

    async def categories_for_region_device(self, region_id: Any, device_id: Any) -> List[Category]:
        """Categorías con multiplier para una región y dispositivo."""
        criteria = MultiplierFilter(
            region_id=parse_id("region_id", region_id),
            device_id=parse_id("device_id", device_id),
        )
        return await self._join_by_ids(
            criteria,
            id_of=lambda row: row.category_id,
            fetch=self._reader.find_categories,
            message="Error fetching categories",
        )

    async def devices_for_category(self, category_id: Any) -> List[Device]:
        """Dispositivos con multiplier para una categoría."""
        criteria = MultiplierFilter(category_id=parse_id("category_id", category_id))
        return await self._join_by_ids(
            criteria,
            id_of=lambda row: row.device_id,
            fetch=self._reader.find_devices,
            message="Error fetching devices",
        )

    async def list_regions(self) -> List[Region]:
        return await self._read(self._reader.list_regions(), "Error fetching regions")

    # ════════════════════════════════════════════════════════════════
    #  REVENUE PUNTUAL
    # ════════════════════════════════════════════════════════════════

    async def calculate_revenue(self, payload: Optional[Mapping[str, Any]]) -> RevenueDTO:
        """
        Revenue = mau * multiplier para una combinación exacta.

        Raises:
            ValidationError: falta algún campo del body
            NotFoundError: no hay fila para (region, category, device)
            DuplicateMultiplierError: hay más de una fila para la clave
        """
        payload = payload if isinstance(payload, Mapping) else {}
        require(payload, ("region_id", "category_id", "device_id", "mau"), MISSING_FIELDS)

        criteria = MultiplierFilter(
            region_id=parse_id("region_id", payload["region_id"]),
            category_id=parse_id("category_id", payload["category_id"]),
            device_id=parse_id("device_id", payload["device_id"]),
        )
        mau = parse_number("mau", payload["mau"])

        rows = await self._read(
            self._reader.find_multipliers(criteria), "Error fetching multiplier"
        )
        if not rows:
            raise NotFoundError("Multiplier not found", lookup=criteria.to_dict())
        if len(rows) > 1:
            logger.error(
                "Clave de multiplier duplicada %s (%d filas)", criteria.to_dict(), len(rows)
            )
            raise DuplicateMultiplierError(
                "Multiplier lookup is ambiguous", lookup=criteria.to_dict(), count=len(rows)
            )

        return RevenueDTO(revenue=self._calc.revenue(mau, rows[0].multiplier))

    # ════════════════════════════════════════════════════════════════
    #  AGREGADOS POR REGIÓN
    # ════════════════════════════════════════════════════════════════

    async def total_multiplier_by_region(self) -> List[TotalMultiplierDTO]:
        """Suma de multipliers por región; regiones sin filas reportan 0."""
        rows = await self._read(
            self._reader.find_multipliers(MultiplierFilter()), "Error fetching multipliers"
        )
        regions = await self._read(self._reader.list_regions(), "Error fetching regions")

        totals = self._calc.multiplier_by_region(rows)
        return [
            TotalMultiplierDTO(region=region.name, total_multiplier=totals.get(region.id, 0))
            for region in regions
        ]

    async def categories_by_region(self) -> List[RegionCategoriesDTO]:
        """Nombres de categorías con multiplier, agrupados por región."""
        rows = await self._read(
            self._reader.find_multipliers(MultiplierFilter()),
            "Error fetching categories by region",
        )
        regions = await self._fetch_related(
            rows, lambda row: row.region_id, self._reader.find_regions, "Error fetching regions"
        )
        categories = await self._fetch_related(
            rows, lambda row: row.category_id, self._reader.find_categories,
            "Error fetching categories",
        )

        names = {category.id: category.name for category in categories}
        result = []
        for region in regions:
            category_ids = _distinct(row.category_id for row in rows if row.region_id == region.id)
            result.append(RegionCategoriesDTO(
                region=region.name,
                categories=[names[cid] for cid in category_ids if cid in names],
            ))
        return result

    # ════════════════════════════════════════════════════════════════
    #  CONSULTAS POR PLATAFORMA
    # ════════════════════════════════════════════════════════════════

    async def revenue_by_category(self, mau: Any, platform: Any) -> List[RevenueRowDTO]:
        """Revenue de cada fila de la plataforma para un MAU dado."""
        require({"mau": mau, "platform": platform}, ("mau", "platform"), MISSING_PARAMS)
        mau = parse_number("mau", mau)
        platform = parse_platform("platform", platform)

        rows = await self._platform_rows(platform, "Error fetching revenue data")
        return [
            RevenueRowDTO(
                region_id=row.region_id,
                category_id=row.category_id,
                revenue=self._calc.revenue(mau, row.multiplier),
            )
            for row in rows
        ]

    async def mau_required(self, revenue: Any, platform: Any) -> List[MauRequiredRowDTO]:
        """MAU necesario por fila para alcanzar un revenue objetivo."""
        require({"revenue": revenue, "platform": platform}, ("revenue", "platform"), MISSING_PARAMS)
        revenue = parse_number("revenue", revenue)
        platform = parse_platform("platform", platform)

        rows = await self._platform_rows(platform, "Error fetching MAU data")
        return [
            MauRequiredRowDTO(
                region_id=row.region_id,
                category_id=row.category_id,
                mau=self._required_mau(revenue, row),
            )
            for row in rows
        ]

    async def top_regions_or_categories(
        self, mau: Any, dimension: Any, platform: Any,
    ) -> List[RevenueBucket]:
        """Revenue agregado por región o categoría, de mayor a menor."""
        require(
            {"mau": mau, "dimension": dimension, "platform": platform},
            ("mau", "dimension", "platform"),
            MISSING_PARAMS,
        )
        mau = parse_number("mau", mau)
        dimension = parse_dimension("dimension", dimension, GROUPING_DIMENSIONS)
        platform = parse_platform("platform", platform)

        rows = await self._platform_rows(platform, "Error fetching top regions or categories")
        totals = self._calc.revenue_by_dimension(rows, dimension, mau)
        return [
            make_bucket(dimension, key, revenue)
            for key, revenue in self._calc.rank_desc(totals)
        ]

    async def efficient_regions_or_platforms(
        self, revenue: Any, dimension: Any, platform: Any,
    ) -> List[MauRequirementDTO]:
        """MAU requerido por fila, etiquetado por región o plataforma."""
        require(
            {"revenue": revenue, "dimension": dimension, "platform": platform},
            ("revenue", "dimension", "platform"),
            MISSING_PARAMS,
        )
        revenue = parse_number("revenue", revenue)
        dimension = parse_dimension("dimension", dimension, EFFICIENCY_DIMENSIONS)
        platform = parse_platform("platform", platform)

        rows = await self._platform_rows(
            platform, "Error fetching efficient regions or platforms"
        )
        return [
            MauRequirementDTO(
                dimension=dimension,
                region_id=row.region_id,
                required_mau=self._required_mau(revenue, row),
            )
            for row in rows
        ]

    async def revenue_growth(
        self, mau_ranges: Any, dimension: Any, platform: Any,
    ) -> List[GrowthPointDTO]:
        """
        Curva de revenue por clave para cada MAU de mau_ranges.

        Las filas se leen una vez y se reutilizan para todos los MAU.
        """
        require(
            {"mau_ranges": mau_ranges, "dimension": dimension, "platform": platform},
            ("mau_ranges", "dimension", "platform"),
            MISSING_PARAMS,
        )
        mau_values = parse_number_list("mau_ranges", mau_ranges)
        dimension = parse_dimension("dimension", dimension, GROUPING_DIMENSIONS)
        platform = parse_platform("platform", platform)

        rows = await self._platform_rows(platform, "Error fetching revenue growth data")
        return [
            GrowthPointDTO(
                mau=mau,
                data=self._calc.revenue_by_dimension(rows, dimension, mau, field="mau_ranges"),
            )
            for mau in mau_values
        ]

    async def underperforming_regions(self, category: Any, platform: Any) -> List[RevenuePerMauDTO]:
        """Revenue por MAU de cada región en una categoría, de peor a mejor."""
        require({"category": category, "platform": platform}, ("category", "platform"), MISSING_PARAMS)
        criteria = MultiplierFilter(
            category_id=parse_id("category", category),
            platform=parse_platform("platform", platform),
        )

        rows = await self._read(
            self._reader.find_multipliers(criteria),
            "Error fetching underperforming regions or platforms",
        )
        ranked = sorted(rows, key=lambda row: row.multiplier)
        return [
            RevenuePerMauDTO(region_id=row.region_id, revenue_per_mau=row.multiplier)
            for row in ranked
        ]
