"""
AdPulse – Value Objects: Revenue Buckets
==========================================
Resultado de agrupar revenue por una dimensión.

Variante etiquetada en lugar de un dict con clave dinámica: quien
consume un RegionBucket sabe que tiene region_id, y quien consume un
CategoryBucket sabe que tiene category_id. La clave dinámica
({"region": ...} o {"category": ...}) solo aparece al serializar.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from adpulse.domain.value_objects.dimension import Dimension


@dataclass(frozen=True, slots=True)
class RegionBucket:
    region_id: int
    revenue: float

    def to_dict(self) -> dict:
        return {"region": self.region_id, "revenue": self.revenue}


@dataclass(frozen=True, slots=True)
class CategoryBucket:
    category_id: int
    revenue: float

    def to_dict(self) -> dict:
        return {"category": self.category_id, "revenue": self.revenue}


RevenueBucket = Union[RegionBucket, CategoryBucket]


def make_bucket(dimension: Dimension, key: int, revenue: float) -> RevenueBucket:
    """Construye el bucket correspondiente a la dimensión."""
    if dimension is Dimension.REGION:
        return RegionBucket(region_id=key, revenue=revenue)
    if dimension is Dimension.CATEGORY:
        return CategoryBucket(category_id=key, revenue=revenue)
    raise ValueError(f"Dimension sin bucket de revenue: {dimension.value}")
