"""
AdPulse – Value Object: MultiplierFilter
==========================================
Predicados de igualdad sobre la tabla ad_multipliers.

Cada campo en None significa "sin filtro". El lector SQL lo traduce a
cláusulas WHERE; el lector en memoria usa matches().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from adpulse.domain.entities.ad_multiplier import AdMultiplier


@dataclass(frozen=True, slots=True)
class MultiplierFilter:
    region_id: Optional[int] = None
    category_id: Optional[int] = None
    device_id: Optional[int] = None
    platform: Optional[str] = None

    def matches(self, row: AdMultiplier) -> bool:
        if self.region_id is not None and row.region_id != self.region_id:
            return False
        if self.category_id is not None and row.category_id != self.category_id:
            return False
        if self.device_id is not None and row.device_id != self.device_id:
            return False
        if self.platform is not None and row.platform != self.platform:
            return False
        return True

    def to_dict(self) -> dict:
        """Solo los predicados activos (útil para logs)."""
        return {
            key: value
            for key, value in (
                ("region_id", self.region_id),
                ("category_id", self.category_id),
                ("device_id", self.device_id),
                ("platform", self.platform),
            )
            if value is not None
        }
