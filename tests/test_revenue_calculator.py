import pytest

from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.exceptions.domain_errors import ValidationError
from adpulse.domain.services.revenue_calculator import RevenueCalculator
from adpulse.domain.value_objects.buckets import CategoryBucket, RegionBucket, make_bucket
from adpulse.domain.value_objects.dimension import Dimension


def _row(region_id, category_id, multiplier, device_id=1, platform="android"):
    return AdMultiplier(region_id, category_id, device_id, platform, multiplier)


@pytest.fixture
def calc():
    return RevenueCalculator()


def test_revenue_is_mau_times_multiplier(calc):
    assert calc.revenue(1000, 0.5) == 500


def test_required_mau_divides_revenue(calc):
    assert calc.required_mau(300, 2.5) == 120


def test_required_mau_with_zero_multiplier_is_none(calc):
    assert calc.required_mau(300, 0) is None


def test_sum_by_key_only_contains_seen_keys(calc):
    rows = [_row(1, 1, 2), _row(1, 2, 3), _row(4, 1, 1)]

    totals = calc.multiplier_by_region(rows)

    assert totals == {1: 5, 4: 1}


def test_sum_by_key_on_empty_input(calc):
    assert calc.multiplier_by_region([]) == {}


def test_revenue_by_dimension_groups_by_category(calc):
    rows = [_row(1, 7, 1.0), _row(2, 7, 2.0), _row(2, 8, 0.5)]

    assert calc.revenue_by_dimension(rows, Dimension.CATEGORY, 100) == {7: 300.0, 8: 50.0}


def test_key_for_rejects_platform(calc):
    with pytest.raises(ValueError):
        calc.key_for(_row(1, 1, 1.0), Dimension.PLATFORM)


def test_rank_desc_orders_by_value(calc):
    ranked = calc.rank_desc({1: 10.0, 2: 30.0, 3: 20.0})

    assert [key for key, _ in ranked] == [2, 3, 1]


def test_make_bucket_is_tagged_by_dimension():
    region = make_bucket(Dimension.REGION, 3, 12.5)
    category = make_bucket(Dimension.CATEGORY, 4, 1.0)

    assert isinstance(region, RegionBucket) and region.region_id == 3
    assert isinstance(category, CategoryBucket) and category.category_id == 4
    assert region.to_dict() == {"region": 3, "revenue": 12.5}
    assert category.to_dict() == {"category": 4, "revenue": 1.0}


def test_revenue_overflow_is_rejected_as_invalid_mau(calc):
    with pytest.raises(ValidationError) as exc_info:
        calc.revenue(1e308, 2.5)

    assert exc_info.value.to_dict() == {"error": "Invalid value for 'mau'"}


def test_required_mau_overflow_is_none(calc):
    assert calc.required_mau(1e308, 1e-10) is None


def test_revenue_by_dimension_rejects_overflowing_sum(calc):
    rows = [_row(1, 1, 1.0), _row(1, 2, 1.0)]

    with pytest.raises(ValidationError) as exc_info:
        calc.revenue_by_dimension(rows, Dimension.REGION, 1e308, field="mau_ranges")

    assert exc_info.value.field == "mau_ranges"
