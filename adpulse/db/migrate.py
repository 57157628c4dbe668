"""
AdPulse – Database Schema Runner
==================================
Crea el esquema desde los modelos ORM y opcionalmente inserta un
dataset de demo.

USO:
    python -m adpulse.db.migrate           # Crear tablas faltantes
    python -m adpulse.db.migrate --reset   # Dropear y recrear todo
    python -m adpulse.db.migrate --seed    # Insertar datos de demo

El servicio es de solo lectura; este script es la única vía que
escribe en la base desde este repo.
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Optional

from sqlalchemy import func, select

from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.infrastructure.persistence.database import Base, DatabaseManager
from adpulse.infrastructure.persistence.mappers.catalog_mapper import CatalogMapper
from adpulse.infrastructure.persistence.models import (
    RegionModel,
    CategoryModel,
    DeviceModel,
    AdMultiplierModel,
)
from adpulse.shared.config.settings import Settings
from adpulse.shared.logging.logger import setup_logging, get_logger

logger = get_logger("db.migrate")


# ─── Dataset de demo ──────────────────────────────────────────────────────
DEMO_REGIONS = [(1, "US"), (2, "EU"), (3, "LATAM"), (4, "APAC")]
DEMO_CATEGORIES = [(1, "Games"), (2, "Social"), (3, "Productivity")]
DEMO_DEVICES = [(1, "Phone"), (2, "Tablet")]

# region, category, device, platform, multiplier
DEMO_MULTIPLIERS = [
    (1, 1, 1, "android", 0.80), (1, 1, 2, "ios", 1.25), (1, 2, 1, "ios", 0.75), (1, 3, 1, "android", 0.40),
    (2, 1, 1, "android", 0.60), (2, 2, 1, "android", 0.42), (2, 3, 2, "ios", 0.50),
    (3, 1, 1, "android", 0.22), (3, 2, 1, "android", 0.15),
    (4, 1, 1, "ios", 0.38), (4, 3, 1, "android", 0.18),
]


def demo_multipliers() -> list[AdMultiplier]:
    return [AdMultiplier(*row) for row in DEMO_MULTIPLIERS]


async def create_schema(db: DatabaseManager, reset: bool = False) -> None:
    """Crea (o recrea) todas las tablas declaradas en Base.metadata."""
    async with db.engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
            logger.info("Tablas eliminadas")
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Esquema verificado/creado: %s", ", ".join(sorted(Base.metadata.tables)))


async def seed(db: DatabaseManager) -> int:
    """
    Inserta el dataset de demo si ad_multipliers está vacía.

    Returns:
        Número de filas de multipliers insertadas (0 si ya había datos)
    """
    mapper = CatalogMapper()
    async with db.session() as session:
        existing = await session.scalar(select(func.count()).select_from(AdMultiplierModel))
        if existing:
            logger.info("ad_multipliers ya tiene %d filas, seed omitido", existing)
            return 0

        session.add_all([RegionModel(id=i, name=n) for i, n in DEMO_REGIONS])
        session.add_all([CategoryModel(id=i, name=n) for i, n in DEMO_CATEGORIES])
        session.add_all([DeviceModel(id=i, name=n) for i, n in DEMO_DEVICES])
        await session.flush()

        rows = demo_multipliers()
        session.add_all([AdMultiplierModel(**mapper.multiplier_to_model(row)) for row in rows])
        await session.commit()

    logger.info("Seed insertado: %d multipliers", len(rows))
    return len(rows)


async def run(reset: bool = False, with_seed: bool = False, settings: Optional[Settings] = None) -> None:
    db = DatabaseManager(settings or Settings())
    await db.initialize()
    try:
        await create_schema(db, reset=reset)
        if with_seed:
            await seed(db)
    finally:
        await db.close()


def main() -> None:
    parser = argparse.ArgumentParser(description="AdPulse schema runner")
    parser.add_argument("--reset", action="store_true", help="Dropear y recrear todas las tablas")
    parser.add_argument("--seed", action="store_true", help="Insertar dataset de demo")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(run(reset=args.reset, with_seed=args.seed))


if __name__ == "__main__":
    main()
