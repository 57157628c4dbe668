"""
AdPulse – API Schemas (Pydantic)
==================================
Schemas de request de la API REST.

Los campos son opcionales y aceptan texto: la obligatoriedad y el tipo
numérico los valida el caso de uso, que responde 400 (no 422).
"""

from __future__ import annotations

from pydantic import BaseModel
from typing import Optional, Union


class CalculateRevenueRequest(BaseModel):
    region_id: Optional[Union[int, str]] = None
    category_id: Optional[Union[int, str]] = None
    device_id: Optional[Union[int, str]] = None
    mau: Optional[Union[int, float, str]] = None

    model_config = {"extra": "ignore"}


class HealthResponse(BaseModel):
    status: str
    service: str
