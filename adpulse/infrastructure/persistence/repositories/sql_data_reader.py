"""
SQL Data Reader Implementation.

Implementación concreta de IDataReader usando SQLAlchemy async.

Clean Architecture: Esta clase está en infrastructure y depende de domain.
El dominio NO conoce esta implementación.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Callable, Iterable, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.exceptions.domain_errors import UpstreamError
from adpulse.domain.repositories.data_reader import IDataReader
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter
from adpulse.infrastructure.persistence.models import (
    RegionModel,
    CategoryModel,
    DeviceModel,
    AdMultiplierModel,
)
from adpulse.infrastructure.persistence.mappers.catalog_mapper import CatalogMapper
from adpulse.shared.logging.logger import get_logger

logger = get_logger("infrastructure.sql_data_reader")

SessionFactory = Callable[[], AbstractAsyncContextManager[AsyncSession]]


class SqlDataReader(IDataReader):
    """
    Lector async sobre MySQL.

    Cada lectura abre su propia sesión desde session_factory, así el
    lector puede compartirse entre requests concurrentes.
    """

    def __init__(self, session_factory: SessionFactory):
        self._session_factory = session_factory
        self._mapper = CatalogMapper()

    async def _scalars(self, query, table: str) -> list:
        try:
            async with self._session_factory() as session:
                result = await session.execute(query)
                return list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise UpstreamError(f"Error reading {table}", cause=exc) from exc

    # ════════════════════════════════════════════════════════════════
    #  IDataReader Implementation
    # ════════════════════════════════════════════════════════════════

    async def list_regions(self) -> List[Region]:
        models = await self._scalars(select(RegionModel), "regions")
        return [self._mapper.to_region(m) for m in models]

    async def find_regions(self, ids: Iterable[int]) -> List[Region]:
        ids = list(ids)
        if not ids:
            return []
        models = await self._scalars(
            select(RegionModel).where(RegionModel.id.in_(ids)), "regions"
        )
        return [self._mapper.to_region(m) for m in models]

    async def find_categories(self, ids: Iterable[int]) -> List[Category]:
        ids = list(ids)
        if not ids:
            return []
        models = await self._scalars(
            select(CategoryModel).where(CategoryModel.id.in_(ids)), "categories"
        )
        return [self._mapper.to_category(m) for m in models]

    async def find_devices(self, ids: Iterable[int]) -> List[Device]:
        ids = list(ids)
        if not ids:
            return []
        models = await self._scalars(
            select(DeviceModel).where(DeviceModel.id.in_(ids)), "devices"
        )
        return [self._mapper.to_device(m) for m in models]

    async def find_multipliers(self, criteria: MultiplierFilter) -> List[AdMultiplier]:
        query = select(AdMultiplierModel)

        if criteria.region_id is not None:
            query = query.where(AdMultiplierModel.region_id == criteria.region_id)
        if criteria.category_id is not None:
            query = query.where(AdMultiplierModel.category_id == criteria.category_id)
        if criteria.device_id is not None:
            query = query.where(AdMultiplierModel.device_id == criteria.device_id)
        if criteria.platform is not None:
            query = query.where(AdMultiplierModel.platform == criteria.platform)

        models = await self._scalars(query, "ad_multipliers")
        logger.debug("ad_multipliers %s → %d filas", criteria.to_dict(), len(models))
        return [self._mapper.to_multiplier(m) for m in models]
