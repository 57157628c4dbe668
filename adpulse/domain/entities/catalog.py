"""
AdPulse – Domain Entities: Catálogo
=====================================
Dimensiones del dataset de monetización: regiones, categorías
de contenido y tipos de dispositivo.

Decisiones de diseño:
- frozen=True → el servicio es de solo lectura; nadie muta el catálogo.
- Las tres entidades tienen la misma forma {id, name} pero se mantienen
  como tipos distintos para que un Device nunca se confunda con un Region.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Region:
    """Región geográfica (e.g. "US", "LATAM")."""

    id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True, slots=True)
class Category:
    """Categoría de contenido de la app (e.g. "Games")."""

    id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True, slots=True)
class Device:
    """Tipo de dispositivo (e.g. "Phone", "Tablet")."""

    id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name}
