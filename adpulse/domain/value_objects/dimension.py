"""
AdPulse – Value Object: Dimension
===================================
Eje por el que se agrupan o etiquetan resultados agregados.
"""

from __future__ import annotations

from enum import Enum


class Dimension(str, Enum):
    REGION = "region"
    CATEGORY = "category"
    PLATFORM = "platform"


# Dimensiones aceptadas por cada operación
GROUPING_DIMENSIONS = (Dimension.REGION, Dimension.CATEGORY)
EFFICIENCY_DIMENSIONS = (Dimension.REGION, Dimension.PLATFORM)
