"""
AdPulse – Catalog Mapper
==========================
Mapea entre modelos ORM y entidades de dominio.

- El domain NO conoce SQLAlchemy
- El ORM Model NO tiene lógica de negocio
- El mapper traduce entre ambos mundos (y a dict para seeds)
"""

from __future__ import annotations

from typing import Any, Dict

from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier


class CatalogMapper:
    """
    Mapper ORM → entidad para las cuatro tablas.

    USO:
        mapper = CatalogMapper()
        region = mapper.to_region(region_model)
        row = mapper.to_multiplier(multiplier_model)
    """

    def to_region(self, model: Any) -> Region:
        return Region(id=int(model.id), name=model.name)

    def to_category(self, model: Any) -> Category:
        return Category(id=int(model.id), name=model.name)

    def to_device(self, model: Any) -> Device:
        return Device(id=int(model.id), name=model.name)

    def to_multiplier(self, model: Any) -> AdMultiplier:
        """
        Convierte una fila de ad_multipliers.

        multiplier se fuerza a float: algunos drivers devuelven Decimal.
        """
        return AdMultiplier(
            region_id=int(model.region_id),
            category_id=int(model.category_id),
            device_id=int(model.device_id),
            platform=model.platform,
            multiplier=float(model.multiplier),
        )

    def multiplier_to_model(self, row: AdMultiplier) -> Dict[str, Any]:
        """
        Convierte AdMultiplier a dict para crear AdMultiplierModel.

        Retorna dict en lugar del modelo para no importar el ORM aquí.
        """
        return {
            "region_id": row.region_id,
            "category_id": row.category_id,
            "device_id": row.device_id,
            "platform": row.platform,
            "multiplier": row.multiplier,
        }
