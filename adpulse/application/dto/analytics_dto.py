"""
AdPulse – Application DTO: Analytics
======================================
Data Transfer Objects devueltos por AnalyticsQueryService.
Cada DTO sabe serializarse con to_dict(); la API no arma dicts a mano.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from adpulse.domain.value_objects.dimension import Dimension


@dataclass
class RevenueDTO:
    revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return {"revenue": self.revenue}


@dataclass
class TotalMultiplierDTO:
    """Suma de multipliers de una región, con el nombre ya resuelto."""

    region: str
    total_multiplier: float

    def to_dict(self) -> Dict[str, Any]:
        return {"region": self.region, "total_multiplier": self.total_multiplier}


@dataclass
class RegionCategoriesDTO:
    region: str
    categories: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"region": self.region, "categories": list(self.categories)}


@dataclass
class RevenueRowDTO:
    region_id: int
    category_id: int
    revenue: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "region_id": self.region_id,
            "category_id": self.category_id,
            "revenue": self.revenue,
        }


@dataclass
class MauRequiredRowDTO:
    """mau es None cuando el multiplier de la fila es 0."""

    region_id: int
    category_id: int
    mau: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "region_id": self.region_id,
            "category_id": self.category_id,
            "mau": self.mau,
        }


@dataclass
class MauRequirementDTO:
    """
    MAU requerido por fila, etiquetado con la dimensión pedida.

    El valor etiquetado es siempre el region_id de la fila; solo cambia
    el nombre de la clave ("region" o "platform").
    """

    dimension: Dimension
    region_id: int
    required_mau: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            self.dimension.value: self.region_id,
            "required_mau": self.required_mau,
        }


@dataclass
class GrowthPointDTO:
    """Revenue por clave (region_id o category_id) para un valor de MAU."""

    mau: float
    data: Dict[int, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"mau": self.mau, "data": dict(self.data)}


@dataclass
class RevenuePerMauDTO:
    region_id: int
    revenue_per_mau: float

    def to_dict(self) -> Dict[str, Any]:
        return {"region_id": self.region_id, "revenue_per_mau": self.revenue_per_mau}
