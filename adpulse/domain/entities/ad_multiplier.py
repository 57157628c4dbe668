"""
AdPulse – Domain Entity: AdMultiplier
=======================================
Fila de hechos: ingreso por unidad de MAU para una combinación
(región, categoría, dispositivo, plataforma).

INVARIANTES:
- multiplier >= 0 (ingreso por MAU).
- Revenue      = mau * multiplier
- MAU required = revenue / multiplier   (indefinido si multiplier == 0)
- (region_id, category_id, device_id) se asume único para el cálculo
  de revenue puntual. El esquema propio lo impone con un UNIQUE; el caso
  de uso igual lo verifica porque puede leer tablas que no creó.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AdMultiplier:
    """Coeficiente de revenue por MAU."""

    region_id: int
    category_id: int
    device_id: int
    platform: str        # e.g. "android", "ios"
    multiplier: float

    def to_dict(self) -> dict:
        return {
            "region_id": self.region_id,
            "category_id": self.category_id,
            "device_id": self.device_id,
            "platform": self.platform,
            "multiplier": self.multiplier,
        }
