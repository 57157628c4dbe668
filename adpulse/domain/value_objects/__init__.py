"""Domain value objects."""
from adpulse.domain.value_objects.dimension import (
    Dimension,
    GROUPING_DIMENSIONS,
    EFFICIENCY_DIMENSIONS,
)
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter
from adpulse.domain.value_objects.buckets import (
    RegionBucket,
    CategoryBucket,
    RevenueBucket,
    make_bucket,
)

__all__ = [
    "Dimension",
    "GROUPING_DIMENSIONS",
    "EFFICIENCY_DIMENSIONS",
    "MultiplierFilter",
    "RegionBucket",
    "CategoryBucket",
    "RevenueBucket",
    "make_bucket",
]
