"""Fixtures compartidas: dataset de ejemplo, lectores fake y cliente HTTP."""

from __future__ import annotations

from typing import Iterable, List

import pytest
from fastapi.testclient import TestClient

from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService
from adpulse.container import create_test_container
from adpulse.domain.exceptions.domain_errors import UpstreamError
from adpulse.domain.repositories.data_reader import IDataReader
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter
from adpulse.infrastructure.memory.in_memory_reader import InMemoryDataReader
from adpulse.main import create_app

REGIONS = [
    {"id": 1, "name": "US"},
    {"id": 2, "name": "EU"},
    {"id": 3, "name": "LATAM"},
]
CATEGORIES = [
    {"id": 1, "name": "Games"},
    {"id": 2, "name": "Social"},
    {"id": 3, "name": "News"},
]
DEVICES = [
    {"id": 1, "name": "Phone"},
    {"id": 2, "name": "Tablet"},
]
MULTIPLIERS = [
    {"region_id": 1, "category_id": 1, "device_id": 1, "platform": "android", "multiplier": 0.5},
    {"region_id": 1, "category_id": 2, "device_id": 1, "platform": "android", "multiplier": 2.5},
    {"region_id": 1, "category_id": 1, "device_id": 2, "platform": "ios", "multiplier": 2.0},
    {"region_id": 2, "category_id": 1, "device_id": 1, "platform": "android", "multiplier": 1.0},
    {"region_id": 2, "category_id": 2, "device_id": 2, "platform": "android", "multiplier": 0.0},
]


class RecordingReader(InMemoryDataReader):
    """InMemoryDataReader que anota cada lectura."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls: List[str] = []

    async def list_regions(self):
        self.calls.append("list_regions")
        return await super().list_regions()

    async def find_regions(self, ids: Iterable[int]):
        self.calls.append("find_regions")
        return await super().find_regions(ids)

    async def find_categories(self, ids: Iterable[int]):
        self.calls.append("find_categories")
        return await super().find_categories(ids)

    async def find_devices(self, ids: Iterable[int]):
        self.calls.append("find_devices")
        return await super().find_devices(ids)

    async def find_multipliers(self, criteria: MultiplierFilter):
        self.calls.append("find_multipliers")
        return await super().find_multipliers(criteria)


class FailingReader(IDataReader):
    """Todas las lecturas fallan como falla el datastore."""

    def __init__(self, error: Exception = None):
        self._error = error

    def _fail(self):
        if self._error is not None:
            raise self._error
        raise UpstreamError("Error reading ad_multipliers", cause=ConnectionError("connection refused"))

    async def list_regions(self):
        self._fail()

    async def find_regions(self, ids):
        self._fail()

    async def find_categories(self, ids):
        self._fail()

    async def find_devices(self, ids):
        self._fail()

    async def find_multipliers(self, criteria):
        self._fail()


def make_reader(**overrides) -> RecordingReader:
    data = {
        "regions": REGIONS,
        "categories": CATEGORIES,
        "devices": DEVICES,
        "multipliers": MULTIPLIERS,
    }
    data.update(overrides)
    return RecordingReader.from_dicts(**data)


@pytest.fixture
def reader() -> RecordingReader:
    return make_reader()


@pytest.fixture
def service(reader) -> AnalyticsQueryService:
    return AnalyticsQueryService(reader)


def client_for(data_reader: IDataReader) -> TestClient:
    app = create_app(create_test_container(data_reader=data_reader))
    return TestClient(app)


@pytest.fixture
def client(reader):
    with client_for(reader) as test_client:
        yield test_client
