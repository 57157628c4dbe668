"""
Infrastructure Models Package.

Contiene los modelos ORM de SQLAlchemy para la persistencia.
Estos modelos representan la estructura de la base de datos,
NO las entidades de dominio.
"""

from adpulse.infrastructure.persistence.models.catalog import (
    RegionModel,
    CategoryModel,
    DeviceModel,
)
from adpulse.infrastructure.persistence.models.ad_multiplier import AdMultiplierModel

__all__ = [
    "RegionModel",
    "CategoryModel",
    "DeviceModel",
    "AdMultiplierModel",
]
