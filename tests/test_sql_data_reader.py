"""SqlDataReader contra una base SQLite (aiosqlite) creada con el schema runner."""

import pytest
from sqlalchemy.exc import IntegrityError

from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService
from adpulse.db.migrate import DEMO_MULTIPLIERS, DEMO_REGIONS, create_schema, seed
from adpulse.domain.exceptions.domain_errors import NotFoundError, UpstreamError
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter
from adpulse.infrastructure.persistence.database import DatabaseManager
from adpulse.infrastructure.persistence.models import AdMultiplierModel
from adpulse.infrastructure.persistence.repositories.sql_data_reader import SqlDataReader
from adpulse.shared.config.settings import Settings


@pytest.fixture
async def db(tmp_path):
    settings = Settings(db_enabled=True, db_url=f"sqlite+aiosqlite:///{tmp_path / 'adpulse.db'}")
    manager = DatabaseManager(settings)
    await manager.initialize()
    await create_schema(manager)
    await seed(manager)
    yield manager
    await manager.close()


@pytest.fixture
def sql_reader(db):
    return SqlDataReader(db.session)


async def test_list_regions(sql_reader):
    regions = await sql_reader.list_regions()

    assert sorted((r.id, r.name) for r in regions) == DEMO_REGIONS


async def test_find_multipliers_applies_every_predicate(sql_reader):
    rows = await sql_reader.find_multipliers(MultiplierFilter(region_id=1, platform="android"))

    assert {(r.category_id, r.device_id) for r in rows} == {(1, 1), (3, 1)}
    assert all(r.region_id == 1 and r.platform == "android" for r in rows)


async def test_find_multipliers_without_filter_reads_everything(sql_reader):
    rows = await sql_reader.find_multipliers(MultiplierFilter())

    assert len(rows) == len(DEMO_MULTIPLIERS)
    assert all(isinstance(r.multiplier, float) for r in rows)


async def test_find_by_ids(sql_reader):
    categories = await sql_reader.find_categories([1, 3, 42])
    devices = await sql_reader.find_devices([2])

    assert sorted(c.name for c in categories) == ["Games", "Productivity"]
    assert [d.name for d in devices] == ["Tablet"]


async def test_empty_id_list_skips_query(sql_reader):
    assert await sql_reader.find_regions([]) == []
    assert await sql_reader.find_categories(iter(())) == []


async def test_seed_is_idempotent(db):
    assert await seed(db) == 0


async def test_calculate_revenue_on_seeded_data(sql_reader):
    service = AnalyticsQueryService(sql_reader)

    result = await service.calculate_revenue(
        {"region_id": 1, "category_id": 1, "device_id": 1, "mau": 1000}
    )

    assert result.revenue == pytest.approx(800)


async def test_unknown_combination_on_seeded_data(sql_reader):
    service = AnalyticsQueryService(sql_reader)

    with pytest.raises(NotFoundError):
        await service.calculate_revenue(
            {"region_id": 4, "category_id": 2, "device_id": 2, "mau": 1000}
        )


async def test_driver_errors_become_upstream_errors(db):
    async with db.engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE ad_multipliers")

    with pytest.raises(UpstreamError) as exc_info:
        await SqlDataReader(db.session).find_multipliers(MultiplierFilter())

    assert exc_info.value.message == "Error reading ad_multipliers"


async def test_schema_rejects_second_row_for_same_combination(db):
    async with db.session() as session:
        session.add(AdMultiplierModel(
            region_id=1, category_id=1, device_id=1, platform="ios", multiplier=0.9,
        ))
        with pytest.raises(IntegrityError):
            await session.commit()
