"""
AdPulse – Domain Layer
========================
Núcleo puro del sistema. CERO dependencias externas.

Este módulo contiene:
- entities/: Entidades del dataset (Region, Category, Device, AdMultiplier)
- value_objects/: Objetos inmutables (Dimension, MultiplierFilter, buckets)
- services/: Servicios de dominio puros (RevenueCalculator)
- repositories/: Interfaces abstractas (IDataReader)
- exceptions/: Excepciones de dominio

REGLA DE DEPENDENCIA:
Este módulo NO puede importar de:
- infrastructure/
- presentation/
- application/
- Frameworks externos (SQLAlchemy, FastAPI, etc.)
"""

from adpulse.domain.entities.catalog import Region, Category, Device
from adpulse.domain.entities.ad_multiplier import AdMultiplier
from adpulse.domain.value_objects.dimension import Dimension
from adpulse.domain.value_objects.multiplier_filter import MultiplierFilter

__all__ = [
    "Region",
    "Category",
    "Device",
    "AdMultiplier",
    "Dimension",
    "MultiplierFilter",
]
