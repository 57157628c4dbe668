import pytest

from adpulse.application.use_cases.analytics_usecase import AnalyticsQueryService
from adpulse.domain.exceptions.domain_errors import (
    DuplicateMultiplierError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from adpulse.domain.value_objects.buckets import CategoryBucket, RegionBucket

from conftest import FailingReader, make_reader


class TestCatalog:
    async def test_categories_for_region_and_device(self, service):
        categories = await service.categories_for_region_device("1", "1")

        assert [c.name for c in categories] == ["Games", "Social"]

    async def test_categories_join_reads_multipliers_then_categories(self, service, reader):
        await service.categories_for_region_device(1, 1)

        assert reader.calls == ["find_multipliers", "find_categories"]

    async def test_categories_for_unknown_pair_is_empty(self, service):
        assert await service.categories_for_region_device(3, 1) == []

    async def test_devices_for_category(self, service):
        devices = await service.devices_for_category("1")

        assert [d.name for d in devices] == ["Phone", "Tablet"]

    async def test_malformed_path_id_is_rejected_before_reading(self, service, reader):
        with pytest.raises(ValidationError):
            await service.devices_for_category("games")
        assert reader.calls == []

    async def test_list_regions(self, service):
        regions = await service.list_regions()

        assert [r.to_dict() for r in regions] == [
            {"id": 1, "name": "US"},
            {"id": 2, "name": "EU"},
            {"id": 3, "name": "LATAM"},
        ]


class TestCalculateRevenue:
    async def test_revenue_is_mau_times_multiplier(self, service):
        result = await service.calculate_revenue(
            {"region_id": 1, "category_id": 1, "device_id": 1, "mau": 1000}
        )

        assert result.revenue == 500

    async def test_accepts_numeric_strings(self, service):
        result = await service.calculate_revenue(
            {"region_id": "1", "category_id": "2", "device_id": "1", "mau": "10"}
        )

        assert result.revenue == 25

    @pytest.mark.parametrize("missing", ["region_id", "category_id", "device_id", "mau"])
    async def test_missing_field_fails_without_reading(self, service, reader, missing):
        payload = {"region_id": 1, "category_id": 1, "device_id": 1, "mau": 1000}
        del payload[missing]

        with pytest.raises(ValidationError) as exc_info:
            await service.calculate_revenue(payload)

        assert exc_info.value.message == "Missing required fields"
        assert reader.calls == []

    async def test_no_payload_is_a_validation_error(self, service):
        with pytest.raises(ValidationError):
            await service.calculate_revenue(None)

    async def test_no_matching_row_is_not_found(self, service):
        with pytest.raises(NotFoundError) as exc_info:
            await service.calculate_revenue(
                {"region_id": 3, "category_id": 1, "device_id": 1, "mau": 1000}
            )

        assert exc_info.value.to_dict() == {"error": "Multiplier not found"}

    async def test_duplicate_rows_are_reported(self):
        reader = make_reader(multipliers=[
            {"region_id": 1, "category_id": 1, "device_id": 1, "platform": "android", "multiplier": 0.5},
            {"region_id": 1, "category_id": 1, "device_id": 1, "platform": "ios", "multiplier": 0.7},
        ])

        with pytest.raises(DuplicateMultiplierError) as exc_info:
            await AnalyticsQueryService(reader).calculate_revenue(
                {"region_id": 1, "category_id": 1, "device_id": 1, "mau": 10}
            )

        assert exc_info.value.count == 2


class TestRegionAggregates:
    async def test_total_multiplier_by_region(self, service):
        result = await service.total_multiplier_by_region()

        assert [r.to_dict() for r in result] == [
            {"region": "US", "total_multiplier": 5.0},
            {"region": "EU", "total_multiplier": 1.0},
            {"region": "LATAM", "total_multiplier": 0},
        ]

    async def test_total_multiplier_single_region(self):
        reader = make_reader(
            regions=[{"id": 1, "name": "US"}],
            multipliers=[
                {"region_id": 1, "multiplier": 2},
                {"region_id": 1, "multiplier": 3},
            ],
        )

        result = await AnalyticsQueryService(reader).total_multiplier_by_region()

        assert [r.to_dict() for r in result] == [{"region": "US", "total_multiplier": 5}]

    async def test_categories_by_region(self, service):
        result = await service.categories_by_region()

        assert [r.to_dict() for r in result] == [
            {"region": "US", "categories": ["Games", "Social"]},
            {"region": "EU", "categories": ["Games", "Social"]},
        ]

    async def test_categories_by_region_skips_unknown_categories(self):
        reader = make_reader(multipliers=[
            {"region_id": 1, "category_id": 1, "multiplier": 1.0},
            {"region_id": 1, "category_id": 99, "multiplier": 1.0},
        ])

        result = await AnalyticsQueryService(reader).categories_by_region()

        assert [r.to_dict() for r in result] == [{"region": "US", "categories": ["Games"]}]


class TestPlatformQueries:
    async def test_revenue_by_category(self, service):
        result = await service.revenue_by_category("100", "android")

        assert [r.to_dict() for r in result] == [
            {"region_id": 1, "category_id": 1, "revenue": 50.0},
            {"region_id": 1, "category_id": 2, "revenue": 250.0},
            {"region_id": 2, "category_id": 1, "revenue": 100.0},
            {"region_id": 2, "category_id": 2, "revenue": 0.0},
        ]

    async def test_mau_required_divides_and_nulls_zero_multiplier(self, service):
        result = await service.mau_required("300", "android")

        assert [r.mau for r in result] == [600.0, 120.0, 300.0, None]

    @pytest.mark.parametrize("mau,platform", [(None, "android"), ("100", None), ("", "android")])
    async def test_missing_query_params(self, service, reader, mau, platform):
        with pytest.raises(ValidationError) as exc_info:
            await service.revenue_by_category(mau, platform)

        assert exc_info.value.message == "Missing required query parameters"
        assert reader.calls == []

    async def test_top_regions_sorted_descending(self, service):
        result = await service.top_regions_or_categories("100", "region", "android")

        assert all(isinstance(b, RegionBucket) for b in result)
        assert [b.to_dict() for b in result] == [
            {"region": 1, "revenue": 300.0},
            {"region": 2, "revenue": 100.0},
        ]

    async def test_top_categories_sorted_descending(self, service):
        result = await service.top_regions_or_categories("100", "category", "android")

        assert all(isinstance(b, CategoryBucket) for b in result)
        revenues = [b.revenue for b in result]
        assert revenues == sorted(revenues, reverse=True)
        assert [b.category_id for b in result] == [2, 1]

    async def test_top_rejects_unknown_dimension(self, service, reader):
        with pytest.raises(ValidationError):
            await service.top_regions_or_categories("100", "device", "android")
        assert reader.calls == []

    async def test_efficient_regions_labels_region_id(self, service):
        result = await service.efficient_regions_or_platforms("300", "region", "android")

        assert [r.to_dict() for r in result] == [
            {"region": 1, "required_mau": 600.0},
            {"region": 1, "required_mau": 120.0},
            {"region": 2, "required_mau": 300.0},
            {"region": 2, "required_mau": None},
        ]

    async def test_efficient_platforms_uses_platform_label(self, service):
        result = await service.efficient_regions_or_platforms("300", "platform", "ios")

        assert [r.to_dict() for r in result] == [{"platform": 1, "required_mau": 150.0}]

    async def test_revenue_growth_by_region(self):
        reader = make_reader(multipliers=[
            {"region_id": 1, "multiplier": 1},
            {"region_id": 2, "multiplier": 2},
        ])

        result = await AnalyticsQueryService(reader).revenue_growth("100,200", "region", "android")

        assert [p.to_dict() for p in result] == [
            {"mau": 100, "data": {1: 100, 2: 200}},
            {"mau": 200, "data": {1: 200, 2: 400}},
        ]
        assert reader.calls == ["find_multipliers"]

    async def test_revenue_growth_rejects_bad_range(self, service):
        with pytest.raises(ValidationError) as exc_info:
            await service.revenue_growth("100,lots", "region", "android")

        assert exc_info.value.message == "Invalid value for 'mau_ranges'"

    async def test_underperforming_regions_ascending(self, service):
        result = await service.underperforming_regions("1", "android")

        assert [r.to_dict() for r in result] == [
            {"region_id": 1, "revenue_per_mau": 0.5},
            {"region_id": 2, "revenue_per_mau": 1.0},
        ]


class TestUpstreamFailures:
    async def test_read_failure_uses_operation_message(self):
        service = AnalyticsQueryService(FailingReader())

        with pytest.raises(UpstreamError) as exc_info:
            await service.revenue_by_category("100", "android")

        assert exc_info.value.message == "Error fetching revenue data"
        assert isinstance(exc_info.value.cause, ConnectionError)

    async def test_join_failure_aborts_whole_operation(self):
        service = AnalyticsQueryService(FailingReader())

        with pytest.raises(UpstreamError) as exc_info:
            await service.categories_for_region_device(1, 1)

        assert exc_info.value.message == "Error fetching categories"

    async def test_validation_runs_before_failing_read(self):
        service = AnalyticsQueryService(FailingReader())

        with pytest.raises(ValidationError):
            await service.mau_required(None, "android")
